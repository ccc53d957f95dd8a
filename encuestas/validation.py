"""Range checks for values entered by hand."""

from __future__ import annotations

from enum import IntEnum


class ValueKind(IntEnum):
    """The kind of value being checked."""

    INT = 1
    FLOAT = 2
    STRING = 3
    LONG = 4


def count_digits(value: int) -> int:
    """Count the decimal digits of a positive number; zero and negatives give 0."""
    digits = 0
    while value > 0:
        value //= 10
        digits += 1
    return digits


def verify(value: int | float | str, kind: ValueKind | int) -> str:
    """Check a value against the limits for its kind and describe the outcome."""
    try:
        kind = ValueKind(kind)
    except ValueError:
        raise ValueError("Tipo no reconocido") from None

    if kind is ValueKind.INT:
        verdict = "válido" if 0 <= value <= 1000 else "inválido"
        return f"Entero {verdict}: {value}"
    if kind is ValueKind.FLOAT:
        verdict = "válido" if 0.0 <= value <= 10000.0 else "inválido"
        return f"Flotante {verdict}: {value:.2f}"
    if kind is ValueKind.STRING:
        return f"Cadena válida: {value}" if value else "Cadena vacía"
    return "LONG LONG VALIDO" if count_digits(value) == 12 else "LONG LONG INVALIDO"