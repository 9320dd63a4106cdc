"""
Formato numérico de la calculadora científica.

Todo valor mostrado en pantalla o guardado en el historial pasa por
format_number(). Es una función pura: el mismo número con la misma
configuración produce siempre la misma cadena.

Modos de presentación:
    - normal:      coma fija sin ceros finales; exponencial para
                   |x| >= 1e15 o 0 < |x| < 1e-6
    - scientific:  siempre exponencial
    - engineering: exponente múltiplo de 3
"""

import math
import numbers
import re

NORMAL = "normal"
SCIENTIFIC = "scientific"
ENGINEERING = "engineering"

DISPLAY_MODES = (NORMAL, SCIENTIFIC, ENGINEERING)

LARGE_THRESHOLD = 1e15
SMALL_THRESHOLD = 1e-6


def format_number(num, display_mode: str = NORMAL, decimal_places: int = 10) -> str:
    """Convierte un número en el texto que muestra la calculadora."""
    if isinstance(num, bool) or not isinstance(num, numbers.Real):
        return "0"

    try:
        value = float(num)
    except OverflowError:
        return "∞" if num > 0 else "-∞"

    if math.isnan(value):
        return "0"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    # -0.0 se muestra como 0
    if value == 0:
        value = 0.0

    if display_mode == SCIENTIFIC:
        return to_exponential(value, decimal_places)
    if display_mode == ENGINEERING:
        return _to_engineering(value, decimal_places)

    magnitude = abs(value)
    if magnitude >= LARGE_THRESHOLD or (magnitude < SMALL_THRESHOLD and value != 0):
        return to_exponential(value, decimal_places)

    formatted = f"{value:.{decimal_places}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return formatted


def to_exponential(value: float, decimal_places: int) -> str:
    """Notación exponencial con exponente sin relleno: 1.50e+16, 3e-7."""
    mantissa, exponent = f"{value:.{decimal_places}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def _to_engineering(value: float, decimal_places: int) -> str:
    if value == 0:
        exponent = 0
    else:
        exponent = math.floor(math.log10(abs(value)) / 3) * 3
    mantissa = value / 10 ** exponent
    return f"{mantissa:.{decimal_places}f}e{exponent}"


_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> float:
    """Lee el prefijo numérico de text; NaN si no hay ninguno."""
    match = _NUMBER_PREFIX.match(text or "")
    if match is None:
        return math.nan
    return float(match.group(0))
