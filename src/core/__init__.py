"""
Core big-integer representation, domain models, and contracts.

This module contains the foundational building blocks that are independent
of the terminal shell (prompting, exit codes, logging handlers).
"""
