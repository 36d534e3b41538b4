"""Shell configuration: prompts, labels, messages, logging level."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShellConfig:
    """Конфигурация интерактивной оболочки.

    Тексты совпадают с исходной консольной программой.
    """

    # Приглашения ввода (без перевода строки)
    first_prompt: str = "Enter first (decimal) number: "
    second_prompt: str = "Enter second (decimal) number: "

    # Метка перед результатом
    result_label: str = "Result (hex): "

    # Сообщения об ошибках (stderr)
    input_error_message: str = "Input error."
    invalid_input_message: str = "Invalid input. Please enter decimal digits only."
    allocation_error_message: str = "capacity overflow"

    # Логирование
    log_level: str = "WARNING"

    # Вывод ProductReport в JSON вместо строки результата
    json_output: bool = False
