"""Помощники форматирования для трассировки операций."""

from typing import Union

from pydantic import ValidationError

from src.core.domain.fraction import Fraction


def format_operation(
    left: Fraction, op: str, right: Union[Fraction, int], result: Fraction
) -> str:
    """
    Строка вида 'a op b = result'.

    Examples:
        >>> format_operation(Fraction(1, 3), "+", 2, Fraction(7, 3))
        '1/3 + 2 = 7/3'
    """
    return f"{left} {op} {right} = {result}"


def format_real(value: float, precision: int) -> str:
    """Вещественное число с фиксированным количеством знаков."""
    return f"{value:.{precision}f}"


def section_header(title: str, width: int) -> str:
    return f"{title}\n{'-' * width}"


def validation_message(error: ValidationError) -> str:
    """
    Исходные сообщения валидаторов без служебного префикса pydantic.

    Для ошибок из field_validator pydantic кладёт исходное исключение
    в ctx["error"], для остальных берётся msg.
    """
    messages = []
    for item in error.errors():
        ctx = item.get("ctx") or {}
        messages.append(str(ctx.get("error", item["msg"])))
    return "; ".join(messages)
