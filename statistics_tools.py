"""Estadística descriptiva sobre listas separadas por comas."""

import math

import numpy as np

from number_format import NORMAL, format_number, parse_number
from placeholders import OPERATION_NOT_IMPLEMENTED

NO_DATA = "No valid data entered"
CALCULATION_ERROR = "Error in calculation"

STATISTIC_OPERATIONS = (
    "mean",
    "median",
    "mode",
    "stddev",
    "variance",
    "sum",
    "count",
    "quartiles",
    "regression",
    "correlation",
)

# Varianza y desviación son poblacionales (ddof=0)
_STATISTICS = {
    "mean": np.mean,
    "median": np.median,
    "sum": np.sum,
    "count": len,
    "stddev": np.std,
    "variance": np.var,
}


def parse_data(text: str) -> list:
    """Convierte "1, 2, x, 3" en [1.0, 2.0, 3.0]; descarta lo no numérico."""
    values = (parse_number(item.strip()) for item in text.split(","))
    return [value for value in values if not math.isnan(value)]


def compute_statistic(operation: str, data) -> float:
    """Calcula la estadística pedida.

    Raises:
        NotImplementedError: operaciones previstas pero sin implementar.
        ValueError: operación desconocida o datos vacíos.
    """
    if operation not in STATISTIC_OPERATIONS:
        raise ValueError(f"Operación estadística desconocida: {operation}")
    if operation not in _STATISTICS:
        raise NotImplementedError(operation)
    if len(data) == 0:
        raise ValueError(NO_DATA)

    return float(_STATISTICS[operation](np.asarray(data, dtype=float)))


def statistics_report(
    operation: str,
    text: str,
    display_mode: str = NORMAL,
    decimal_places: int = 10,
) -> str:
    """Texto del panel de estadística para la operación y los datos dados."""
    data = parse_data(text)
    if not data:
        return NO_DATA

    try:
        result = compute_statistic(operation, data)
    except NotImplementedError:
        return f"{operation.upper()}: {OPERATION_NOT_IMPLEMENTED}"
    except ValueError:
        return CALCULATION_ERROR

    return f"{operation.upper()}: {format_number(result, display_mode, decimal_places)}"
