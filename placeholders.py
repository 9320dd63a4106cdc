"""Operaciones de matrices, cálculo y números complejos sin implementar.

Devuelven un texto fijo; no calculan nada.
"""

from calculator_session import CalculatorSession

MATRIX_OPERATIONS = (
    "add",
    "subtract",
    "multiply",
    "scalar",
    "transpose",
    "determinant",
    "inverse",
    "rref",
)
CALCULUS_OPERATIONS = ("derivative", "integral", "definite-integral", "limit")
COMPLEX_FUNCTIONS = ("conj", "re", "im", "arg")

OPERATION_NOT_IMPLEMENTED = "Operation not implemented"
COMPLEX_NOT_IMPLEMENTED = "Complex functions not implemented"


def perform_matrix_operation(operation: str) -> str:
    if operation not in MATRIX_OPERATIONS:
        raise ValueError(f"Operación de matrices desconocida: {operation}")
    return f"Matrix {operation} operation would be performed here"


def perform_calculus_operation(operation: str, function_text: str) -> str:
    if operation not in CALCULUS_OPERATIONS:
        raise ValueError(f"Operación de cálculo desconocida: {operation}")
    return f"{operation} operation would be performed on: {function_text}"


def handle_complex_function(session: CalculatorSession, name: str) -> str:
    """Deja el aviso en la entrada actual, como hace la calculadora."""
    if name not in COMPLEX_FUNCTIONS:
        raise ValueError(f"Función compleja desconocida: {name}")
    session.current_input = COMPLEX_NOT_IMPLEMENTED
    session.waiting_for_new_number = True
    return COMPLEX_NOT_IMPLEMENTED
