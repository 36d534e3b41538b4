"""Interactive shell for the multiply pipeline.

Reads two decimal numbers (arguments or two stdin lines after prompts),
prints the product in hexadecimal.

Exit codes:
    0 — результат напечатан
    1 — ошибка чтения ввода, невалидный операнд или исчерпание памяти
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence, TextIO

from src.core.bignum import AllocationExhaustion
from src.core.contracts import validate_product_report
from src.shell.config import ShellConfig
from src.shell.logging_config import setup_logging
from src.shell.pipeline import MultiplyPipeline

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class InputReadFailure(Exception):
    """Строка ввода не получена (конец ввода)."""


def read_operand(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    """Печатает приглашение и читает одну строку.

    Raises:
        InputReadFailure: Если ввод закончился до строки
    """
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise InputReadFailure(prompt.strip())
    return line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum-mul",
        description="Multiply two arbitrary-precision decimal numbers, print the product in hex.",
    )
    parser.add_argument("first", nargs="?", help="first decimal operand (prompted if omitted)")
    parser.add_argument("second", nargs="?", help="second decimal operand (prompted if omitted)")
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="print the product report as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="log level for stderr diagnostics",
    )
    return parser


def run(
    first: Optional[str],
    second: Optional[str],
    config: ShellConfig,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """Один запуск оболочки; возвращает exit code."""
    try:
        first_text = first if first is not None else read_operand(config.first_prompt, stdin, stdout)
        second_text = second if second is not None else read_operand(config.second_prompt, stdin, stdout)
    except InputReadFailure as e:
        logger.error("Input read failed at prompt: %s", e)
        print(config.input_error_message, file=stderr)
        return EXIT_FAILURE
    except UnicodeDecodeError as e:
        # Байт вне кодировки — не цифра
        logger.info("Operand is not valid text: %s", e.reason)
        print(config.invalid_input_message, file=stderr)
        return EXIT_FAILURE

    try:
        result = MultiplyPipeline().run(first_text, second_text)
    except AllocationExhaustion as e:
        logger.error("Aborting: %s", e)
        print(config.allocation_error_message, file=stderr)
        return EXIT_FAILURE

    if not result.ok:
        print(config.invalid_input_message, file=stderr)
        return EXIT_FAILURE

    if config.json_output:
        payload = result.report.model_dump()
        validate_product_report(payload)
        print(json.dumps(payload), file=stdout)
    else:
        print(f"{config.result_label}{result.product_hex}", file=stdout)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    defaults = ShellConfig()
    config = ShellConfig(
        log_level=args.log_level or defaults.log_level,
        json_output=args.json_output,
    )
    setup_logging(config.log_level)

    return run(args.first, args.second, config, sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
