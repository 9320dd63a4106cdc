"""Parseo y evaluación de expresiones para la calculadora científica.

La expresión se analiza con el parser de Python (módulo ast) y se recorre
con una lista blanca de nodos; nunca se ejecuta código. Los valores se
calculan con mpmath a precisión de trabajo fija y se devuelven como float.
"""

import ast
import logging
import math
import re

from mpmath import mp

from calculator_errors import CalculatorError, DomainError, EvaluationError

logger = logging.getLogger(__name__)

DEG = "DEG"
RAD = "RAD"
GRAD = "GRAD"

ANGLE_MODES = (DEG, RAD, GRAD)

# Medio giro en cada unidad angular
HALF_TURN = {DEG: 180, GRAD: 200}

EVALUATION_DPS = 64


def factorial(n) -> float:
    """Producto iterativo 1·2·…·n; solo para enteros no negativos."""
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise DomainError("factorial requiere un número")
    if n < 0 or not float(n).is_integer():
        raise DomainError("factorial requiere entero no negativo")

    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
        if math.isinf(result):
            break
    return result


class MPMathProvider:
    """Provee funciones y constantes mpmath en un namespace cerrado.

    Las funciones trigonométricas trabajan siempre en radianes: la
    conversión del modo angular se hace antes, reescribiendo el texto.
    """

    @staticmethod
    def _factorial(x):
        return mp.mpf(factorial(float(x)))

    @staticmethod
    def _cbrt(x):
        # raíz real, no la principal compleja
        if x < 0:
            return -mp.cbrt(-x)
        return mp.cbrt(x)

    def build_functions(self) -> dict:
        return {
            "sin": mp.sin,
            "cos": mp.cos,
            "tan": mp.tan,
            "asin": mp.asin,
            "acos": mp.acos,
            "atan": mp.atan,
            "sinh": mp.sinh,
            "cosh": mp.cosh,
            "tanh": mp.tanh,
            "asinh": mp.asinh,
            "acosh": mp.acosh,
            "atanh": mp.atanh,
            "sqrt": mp.sqrt,
            "cbrt": self._cbrt,
            "ln": mp.ln,
            "log": mp.log10,
            "exp": mp.exp,
            "abs": mp.fabs,
            "factorial": self._factorial,
        }

    def build_constants(self) -> dict:
        return {
            "π": mp.mpf(mp.pi),
            "pi": mp.mpf(mp.pi),
            "e": mp.mpf(mp.e),
            "phi": mp.mpf(mp.phi),
        }


class FormulaEvaluator:
    """Transforma expresiones de UI y evalúa su valor numérico."""

    _ALLOWED_CHARS = re.compile(r"^[\d\s+\-*/^%().πa-zA-Z×÷−]*$")
    _TRIG_CALL = re.compile(r"(?<![A-Za-z])(sin|cos|tan)\(([^)]+)\)")
    # ceros a la izquierda de un número: "-07" se lee como "-7"
    _LEADING_ZEROS = re.compile(r"(?<![\w.])0+(?=\d)")

    _BINARY_OPERATORS = {
        ast.Add: lambda a, b: a + b,
        ast.Sub: lambda a, b: a - b,
        ast.Mult: lambda a, b: a * b,
        ast.Div: lambda a, b: a / b,
        ast.Mod: lambda a, b: a % b,
        ast.Pow: lambda a, b: a ** b,
    }

    def __init__(self, provider: MPMathProvider = None, dps: int = EVALUATION_DPS):
        self._provider = provider if provider is not None else MPMathProvider()
        self._dps = dps

    def evaluate(self, expression: str, angle_mode: str = RAD) -> float:
        """Preprocesa y evalúa la expresión.

        Raises:
            EvaluationError: expresión inválida o resultado no finito.
            DomainError: argumento inválido para factorial.
        """
        return self.evaluate_processed(self.preprocess(expression, angle_mode))

    def preprocess(self, expression: str, angle_mode: str = RAD) -> str:
        """Normaliza símbolos y aplica el modo angular a sin/cos/tan.

        La reescritura es textual: el argumento se toma hasta el primer ')'
        y no se contemplan paréntesis anidados.
        """
        expr = expression.strip()

        expr = expr.replace("×", "*")
        expr = expr.replace("÷", "/")
        expr = expr.replace("−", "-")

        half_turn = HALF_TURN.get(angle_mode)
        if half_turn is not None:
            expr = self._TRIG_CALL.sub(
                lambda m: f"{m.group(1)}(({m.group(2)}) * pi / {half_turn})",
                expr,
            )

        return expr

    def evaluate_processed(self, processed: str) -> float:
        if not processed or not processed.strip():
            raise EvaluationError("Expresión vacía")

        self._validate_raw_expression(processed)

        source = self._LEADING_ZEROS.sub("", processed.strip()).replace("^", "**")
        try:
            tree = ast.parse(source, mode="eval")
        except SyntaxError as exc:
            raise EvaluationError("Error de sintaxis") from exc
        body = self._regroup_powers(tree.body, source.encode())

        with mp.workdps(self._dps):
            functions = self._provider.build_functions()
            constants = self._provider.build_constants()
            try:
                value = self._eval(body, functions, constants)
            except CalculatorError:
                raise
            except (ZeroDivisionError, OverflowError) as exc:
                raise EvaluationError("División por cero o desbordamiento") from exc
            except (TypeError, ValueError) as exc:
                raise EvaluationError(str(exc) or type(exc).__name__) from exc

        result = self._to_float(value)
        logger.debug("evaluated %r -> %r", processed, result)
        return result

    def _validate_raw_expression(self, expression: str):
        if not self._ALLOWED_CHARS.fullmatch(expression):
            raise EvaluationError("Expresión contiene caracteres inválidos")
        if "__" in expression:
            raise EvaluationError("Expresión contiene operadores no permitidos")

    # ── Recorrido del árbol ──────────────────────────────────────

    def _regroup_powers(self, node, source: bytes):
        """Agrupa las cadenas de ^ de izquierda a derecha.

        Python lee 2 ** 3 ** 2 como 2 ** (3 ** 2); aquí se reagrupa como
        (2 ^ 3) ^ 2. Una potencia escrita entre paréntesis a la derecha
        se respeta. col_offset cuenta bytes UTF-8, de ahí source en bytes.
        """
        if self._is_power(node):
            operands = [node.left]
            right = node.right
            while self._is_power(right) and not self._parenthesized(right, source):
                operands.append(right.left)
                right = right.right
            operands.append(right)

            operands = [self._regroup_powers(operand, source) for operand in operands]
            result = operands[0]
            for operand in operands[1:]:
                result = ast.BinOp(left=result, op=ast.Pow(), right=operand)
            return result

        for field, value in ast.iter_fields(node):
            if isinstance(value, ast.AST):
                setattr(node, field, self._regroup_powers(value, source))
            elif isinstance(value, list):
                setattr(node, field, [
                    self._regroup_powers(item, source) if isinstance(item, ast.AST) else item
                    for item in value
                ])
        return node

    @staticmethod
    def _is_power(node) -> bool:
        return isinstance(node, ast.BinOp) and isinstance(node.op, ast.Pow)

    @staticmethod
    def _parenthesized(node, source: bytes) -> bool:
        return source[:node.col_offset].rstrip().endswith(b"(")

    def _eval(self, node, functions, constants):
        if isinstance(node, ast.Constant):
            value = node.value
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise EvaluationError(f"Literal no permitido: {value!r}")
            return mp.mpf(repr(value)) if isinstance(value, float) else mp.mpf(value)

        if isinstance(node, ast.Name):
            if node.id not in constants:
                raise EvaluationError(f"Identificador no permitido: {node.id}")
            return constants[node.id]

        if isinstance(node, ast.UnaryOp):
            operand = self._eval(node.operand, functions, constants)
            if isinstance(node.op, ast.USub):
                return -operand
            if isinstance(node.op, ast.UAdd):
                return +operand
            raise EvaluationError("Operador unario no permitido")

        if isinstance(node, ast.BinOp):
            operation = self._BINARY_OPERATORS.get(type(node.op))
            if operation is None:
                raise EvaluationError("Operador no permitido")
            return operation(
                self._eval(node.left, functions, constants),
                self._eval(node.right, functions, constants),
            )

        if isinstance(node, ast.Call):
            if not isinstance(node.func, ast.Name):
                raise EvaluationError("Llamada no permitida")
            name = node.func.id
            if name not in functions:
                if name in constants:
                    raise EvaluationError(f"{name} no es una función")
                raise EvaluationError(f"Función desconocida: {name}")
            if len(node.args) != 1 or node.keywords:
                raise EvaluationError(f"{name} requiere un argumento")
            return functions[name](self._eval(node.args[0], functions, constants))

        raise EvaluationError(f"Expresión no permitida: {type(node).__name__}")

    @staticmethod
    def _to_float(value) -> float:
        if isinstance(value, mp.mpc):
            if value.imag != 0:
                raise EvaluationError("Resultado complejo")
            value = value.real

        result = float(value)
        if not math.isfinite(result):
            raise EvaluationError("Resultado no finito")
        return result
