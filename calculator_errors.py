"""Errores de la calculadora científica."""


class CalculatorError(ValueError):
    """Base de los errores que la sesión convierte en el centinela 'Error'."""


class EvaluationError(CalculatorError):
    """Expresión mal formada o sin valor finito."""


class DomainError(CalculatorError):
    """Argumento fuera del dominio de una función unaria."""
