"""Conversión de bases numéricas y de unidades angulares."""

import math
import re

import numpy as np

from calculator_engine import from_radians, to_radians
from number_format import NORMAL, format_number, parse_number

BASE = "base"
ANGLE = "angle"

CONVERSION_TYPES = (BASE, ANGLE)

BASES = {
    10: "Decimal",
    2: "Binary",
    8: "Octal",
    16: "Hexadecimal",
}

ANGLE_UNITS = {
    "deg": "Degrees",
    "rad": "Radians",
    "grad": "Gradians",
}

CONVERSION_ERROR = "Error in conversion"

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def parse_integer(text: str, base: int) -> int:
    """Lee el prefijo entero de text en la base dada.

    Como en un teclado de calculadora, los caracteres sobrantes al final
    se ignoran: "12z" en base 10 es 12.

    Raises:
        ValueError: base no admitida o ningún dígito válido al principio.
    """
    if base not in BASES:
        raise ValueError(f"Base no admitida: {base}")

    text = text.strip().lower()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if base == 16:
        text = re.sub(r"^0x", "", text)

    valid = _DIGITS[:base]
    digits = ""
    for char in text:
        if char not in valid:
            break
        digits += char

    if not digits:
        raise ValueError(f"'{text}' no es un número en base {base}")
    return sign * int(digits, base)


def convert_base(text: str, from_base: int, to_base: int) -> str:
    if to_base not in BASES:
        raise ValueError(f"Base no admitida: {to_base}")
    value = parse_integer(text, from_base)
    return np.base_repr(value, base=to_base).upper()


def convert_angle(value: float, from_unit: str, to_unit: str) -> float:
    for unit in (from_unit, to_unit):
        if unit not in ANGLE_UNITS:
            raise ValueError(f"Unidad angular desconocida: {unit}")
    radians = to_radians(value, from_unit.upper())
    return from_radians(radians, to_unit.upper())


def _number_text(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def conversion_report(
    conversion_type: str,
    text: str,
    source: str,
    target: str,
    display_mode: str = NORMAL,
    decimal_places: int = 10,
) -> str:
    """Texto del panel de conversión; cadena vacía si no hay entrada."""
    if not text:
        return ""

    try:
        if conversion_type == BASE:
            from_base, to_base = int(source), int(target)
            converted = convert_base(text, from_base, to_base)
            return f"{text} (base {from_base}) = {converted} (base {to_base})"

        if conversion_type == ANGLE:
            value = parse_number(text)
            if math.isnan(value):
                return CONVERSION_ERROR
            converted = convert_angle(value, source, target)
            formatted = format_number(converted, display_mode, decimal_places)
            return f"{_number_text(value)} {source} = {formatted} {target}"
    except ValueError:
        return CONVERSION_ERROR

    raise ValueError(f"Tipo de conversión desconocido: {conversion_type}")
