"""
Test suite for bignum-mul

Contains:
- tests/unit/          : Unit tests for the big-integer core, contracts and shell
"""
