"""Resolución de ecuaciones lineales y cuadráticas con coeficientes reales."""

import math

from number_format import NORMAL, format_number, parse_number

LINEAR = "linear"
QUADRATIC = "quadratic"

# Plantilla y coeficientes que pide cada tipo
EQUATION_FORMS = {
    LINEAR: ("ax + b = 0", ("a", "b")),
    QUADRATIC: ("ax² + bx + c = 0", ("a", "b", "c")),
}


def parse_coefficient(text) -> float:
    """Coeficiente de un campo de texto; vacío o inválido cuenta como 0."""
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        value = parse_number(text or "")
    return 0.0 if math.isnan(value) else value


def solve_linear(a: float, b: float, display_mode: str = NORMAL, decimal_places: int = 10) -> str:
    if a == 0:
        return "Infinite solutions" if b == 0 else "No solution"
    return f"x = {format_number(-b / a, display_mode, decimal_places)}"


def solve_quadratic(
    a: float,
    b: float,
    c: float,
    display_mode: str = NORMAL,
    decimal_places: int = 10,
) -> str:
    """Raíces reales de ax² + bx + c = 0, una por línea."""
    if a == 0:
        return "Not a quadratic equation"

    def fmt(x):
        return format_number(x, display_mode, decimal_places)

    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        x1 = (-b + root) / (2 * a)
        x2 = (-b - root) / (2 * a)
        return f"x₁ = {fmt(x1)}\nx₂ = {fmt(x2)}"
    if discriminant == 0:
        return f"x = {fmt(-b / (2 * a))} (double root)"
    return "No real solutions"


def solve_equation(equation_type: str, coefficients, display_mode: str = NORMAL, decimal_places: int = 10) -> str:
    """Resuelve a partir de los textos de los campos, en el orden a, b, c."""
    if equation_type not in EQUATION_FORMS:
        raise ValueError(f"Tipo de ecuación desconocido: {equation_type}")

    _, names = EQUATION_FORMS[equation_type]
    values = [parse_coefficient(text) for text in coefficients]
    values += [0.0] * (len(names) - len(values))

    if equation_type == LINEAR:
        return solve_linear(*values[:2], display_mode, decimal_places)
    return solve_quadratic(*values[:3], display_mode, decimal_places)
