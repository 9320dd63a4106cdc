"""
Motor de cálculo para la calculadora científica.

Este módulo provee la clase CalculatorEngine, que agrupa los dos caminos
de cálculo de la sesión:

    - expresiones completas (FormulaEvaluator, con mpmath)
    - funciones de un solo valor sobre la entrada actual (math, float)

El motor no guarda estado de sesión: el modo angular se recibe en cada
llamada.

Contrato de interfaz:
    - preprocess(expression, angle_mode) -> str
    - evaluate_processed(processed) -> float
    - apply_function(name, value) -> float
    - apply_trig(name, value, angle_mode) -> float
    - apply_inverse_trig(name, value, angle_mode) -> float
"""

import logging
import math

from calculator_errors import DomainError
from formula_evaluator import DEG, HALF_TURN, RAD, FormulaEvaluator, factorial

logger = logging.getLogger(__name__)


def to_radians(value: float, angle_mode: str) -> float:
    half_turn = HALF_TURN.get(angle_mode)
    if half_turn is None:
        return value
    return value * math.pi / half_turn


def from_radians(value: float, angle_mode: str) -> float:
    half_turn = HALF_TURN.get(angle_mode)
    if half_turn is None:
        return value
    return value * half_turn / math.pi


class PythonMathProvider:
    """Provee funciones de un valor sobre float."""

    def __init__(self):
        self._functions = {
            "square": lambda x: x * x,
            "cube": lambda x: x * x * x,
            "sqrt": math.sqrt,
            "cbrt": lambda x: math.copysign(abs(x) ** (1 / 3), x),
            "reciprocal": self._reciprocal,
            "abs": abs,
            "exp": math.exp,
            "exp10": lambda x: 10.0 ** x,
            "ln": math.log,
            "log": math.log10,
            "sinh": math.sinh,
            "cosh": math.cosh,
            "tanh": math.tanh,
            "asinh": math.asinh,
            "acosh": math.acosh,
            "atanh": math.atanh,
            "factorial": factorial,
        }
        self._trig = {
            "sin": math.sin,
            "cos": math.cos,
            "tan": math.tan,
        }
        self._inverse_trig = {
            "asin": math.asin,
            "acos": math.acos,
            "atan": math.atan,
        }

    @staticmethod
    def _reciprocal(x):
        if x == 0:
            raise DomainError("recíproco de cero")
        return 1 / x

    @property
    def function_names(self) -> tuple:
        return tuple(self._functions)

    @property
    def trig_names(self) -> tuple:
        return tuple(self._trig)

    @property
    def inverse_trig_names(self) -> tuple:
        return tuple(self._inverse_trig)

    def function(self, name: str):
        return self._lookup(self._functions, name)

    def trig(self, name: str, angle_mode: str):
        fn = self._lookup(self._trig, name)

        def w(x):
            return fn(to_radians(x, angle_mode))

        return w

    def inverse_trig(self, name: str, angle_mode: str):
        fn = self._lookup(self._inverse_trig, name)

        def w(x):
            return from_radians(fn(x), angle_mode)

        return w

    @staticmethod
    def _lookup(table: dict, name: str):
        try:
            return table[name]
        except KeyError:
            raise ValueError(f"Función desconocida: {name}") from None


class CalculatorEngine:
    """Evalúa expresiones y funciones científicas."""

    def __init__(self):
        self._provider = PythonMathProvider()
        self._evaluator = FormulaEvaluator()

    # ── Expresiones ──────────────────────────────────────────────

    def preprocess(self, expression: str, angle_mode: str = RAD) -> str:
        return self._evaluator.preprocess(expression, angle_mode)

    def evaluate_processed(self, processed: str) -> float:
        """Evalúa una expresión ya preprocesada.

        Raises:
            EvaluationError: expresión inválida o resultado no finito.
            DomainError: argumento inválido para factorial.
        """
        return self._evaluator.evaluate_processed(processed)

    def evaluate(self, expression: str, angle_mode: str = RAD) -> float:
        return self.evaluate_processed(self.preprocess(expression, angle_mode))

    # ── Funciones de un valor ────────────────────────────────────

    def apply_function(self, name: str, value: float) -> float:
        return self._checked(name, self._provider.function(name), value)

    def apply_trig(self, name: str, value: float, angle_mode: str = DEG) -> float:
        return self._checked(name, self._provider.trig(name, angle_mode), value)

    def apply_inverse_trig(self, name: str, value: float, angle_mode: str = DEG) -> float:
        return self._checked(name, self._provider.inverse_trig(name, angle_mode), value)

    @staticmethod
    def _checked(name: str, fn, value: float) -> float:
        """Aplica fn y convierte cualquier fallo numérico en DomainError."""
        if math.isnan(value):
            raise DomainError(f"{name}: la entrada no es un número")
        try:
            result = fn(value)
        except DomainError:
            raise
        except (ValueError, ZeroDivisionError, OverflowError) as exc:
            raise DomainError(f"{name}: {exc}") from exc

        if isinstance(result, complex) or not math.isfinite(result):
            raise DomainError(f"{name}: resultado fuera de dominio")
        logger.debug("%s(%r) -> %r", name, value, result)
        return float(result)
