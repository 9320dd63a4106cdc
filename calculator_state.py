"""
Máquina de estados de entrada y expresión.

Cada operación recibe la sesión de forma explícita, la modifica y
vuelve sin lanzar excepciones de cálculo: cualquier EvaluationError o
DomainError deja current_input en el centinela "Error". Mostrar el
error y llamar a clear() después es tarea de la interfaz.

Estados (conceptuales):
    - introduciendo número
    - esperando operando (tras un operador o un resultado)
    - error
"""

import logging
import math
import random
import re

from calculator_engine import CalculatorEngine
from calculator_errors import CalculatorError
from calculator_session import ERROR, CalculatorSession
from formula_evaluator import ANGLE_MODES
from number_format import DISPLAY_MODES, format_number, parse_number

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
DECIMAL_POINT = "."
OPERATORS = ("+", "-", "*", "/", "%", "^")
PARENTHESES = ("(", ")")

NAMED_CONSTANTS = {
    "pi": math.pi,
    "e": math.e,
    "phi": (1 + math.sqrt(5)) / 2,
}

_TRAILING_OPERATOR = re.compile(r"\s[+\-*/^%]\s$")

_engine = CalculatorEngine()


def format_value(session: CalculatorSession, num) -> str:
    return format_number(num, session.display_mode, session.decimal_places)


def display_text(session: CalculatorSession) -> str:
    """Texto de la pantalla principal."""
    text = session.current_expression
    if session.current_input and not session.waiting_for_new_number:
        text += session.current_input

    if not text or not text.strip():
        text = session.current_input or "0"
    return text


# ── Entrada ──────────────────────────────────────────────────────

def input_digit(session: CalculatorSession, digit: str) -> None:
    if len(digit) != 1 or digit not in DIGITS + DECIMAL_POINT:
        raise ValueError(f"Dígito no válido: {digit!r}")

    if session.is_error:
        clear(session)

    if session.waiting_for_new_number:
        session.current_input = "0." if digit == DECIMAL_POINT else digit
        session.waiting_for_new_number = False
        return

    if digit == DECIMAL_POINT and DECIMAL_POINT in session.current_input:
        return

    if session.current_input == "0":
        session.current_input = "0." if digit == DECIMAL_POINT else digit
    else:
        session.current_input += digit


def input_operator(session: CalculatorSession, op: str) -> None:
    if op not in OPERATORS:
        raise ValueError(f"Operador no válido: {op!r}")

    # "Error" nunca entra en la expresión
    if session.is_error:
        return

    if session.current_input and not session.waiting_for_new_number:
        session.current_expression += f"{session.current_input} {op} "
    else:
        # operadores seguidos: gana el último
        session.current_expression = _TRAILING_OPERATOR.sub(
            f" {op} ", session.current_expression
        )
    session.waiting_for_new_number = True


def input_parenthesis(session: CalculatorSession, paren: str) -> None:
    if paren not in PARENTHESES:
        raise ValueError(f"Paréntesis no válido: {paren!r}")
    session.current_expression += paren


def input_constant(session: CalculatorSession, value: float) -> None:
    session.current_input = format_value(session, value)
    session.waiting_for_new_number = False


def input_named_constant(session: CalculatorSession, name: str) -> None:
    if name == "random":
        input_constant(session, random.random())
        return
    try:
        value = NAMED_CONSTANTS[name]
    except KeyError:
        raise ValueError(f"Constante desconocida: {name}") from None
    input_constant(session, value)


def input_ans(session: CalculatorSession) -> None:
    input_constant(session, session.last_result)


def toggle_sign(session: CalculatorSession) -> None:
    current = session.current_input
    if current == "0" or session.is_error:
        return
    session.current_input = current[1:] if current.startswith("-") else "-" + current


def delete(session: CalculatorSession) -> None:
    if session.is_error:
        clear(session)
        return

    if len(session.current_input) > 1:
        session.current_input = session.current_input[:-1]
    else:
        session.current_input = "0"


def clear(session: CalculatorSession) -> None:
    session.current_input = "0"
    session.current_expression = ""
    session.waiting_for_new_number = False


# ── Evaluación ───────────────────────────────────────────────────

def build_expression(session: CalculatorSession) -> str:
    expression = session.current_expression
    if session.current_input and not session.waiting_for_new_number:
        expression += session.current_input

    if not expression:
        expression = session.current_input or "0"
    return expression


def evaluate(session: CalculatorSession, engine: CalculatorEngine = None) -> None:
    engine = engine or _engine
    expression = build_expression(session)

    try:
        processed = engine.preprocess(expression, session.angle_mode)
        result = engine.evaluate_processed(processed)
    except CalculatorError as exc:
        logger.debug("evaluation of %r failed: %s", expression, exc)
        session.current_input = ERROR
        return

    formatted = format_value(session, result)
    session.last_result = result
    session.add_to_history(f"{processed} = {formatted}")

    session.current_input = formatted
    session.current_expression = ""
    session.waiting_for_new_number = True


def apply_unary_function(session: CalculatorSession, name: str, engine: CalculatorEngine = None) -> None:
    engine = engine or _engine
    _apply(session, lambda value: engine.apply_function(name, value))


def apply_trig_function(session: CalculatorSession, name: str, engine: CalculatorEngine = None) -> None:
    engine = engine or _engine
    _apply(session, lambda value: engine.apply_trig(name, value, session.angle_mode))


def apply_inverse_trig_function(session: CalculatorSession, name: str, engine: CalculatorEngine = None) -> None:
    engine = engine or _engine
    _apply(session, lambda value: engine.apply_inverse_trig(name, value, session.angle_mode))


def _apply(session: CalculatorSession, fn) -> None:
    try:
        result = fn(parse_number(session.current_input))
    except CalculatorError as exc:
        logger.debug("function on %r failed: %s", session.current_input, exc)
        session.current_input = ERROR
        return

    session.current_input = format_value(session, result)
    session.waiting_for_new_number = True


# ── Memoria ──────────────────────────────────────────────────────

def _input_value(session: CalculatorSession) -> float:
    value = parse_number(session.current_input)
    return 0.0 if math.isnan(value) else value


def memory_clear(session: CalculatorSession) -> None:
    session.memory = 0.0


def memory_recall(session: CalculatorSession) -> None:
    input_constant(session, session.memory)


def memory_store(session: CalculatorSession) -> None:
    session.memory = _input_value(session)


def memory_add(session: CalculatorSession) -> None:
    session.memory += _input_value(session)


def memory_subtract(session: CalculatorSession) -> None:
    session.memory -= _input_value(session)


def memory_text(session: CalculatorSession) -> str:
    """Valor guardado tal como lo muestra el indicador M; vacío si es 0."""
    if session.memory == 0:
        return ""
    return format_value(session, session.memory)


# ── Historial ────────────────────────────────────────────────────

def recall_from_history(session: CalculatorSession, entry: str) -> None:
    parts = entry.split(" = ")
    if len(parts) == 2:
        session.current_input = parts[1]
        session.waiting_for_new_number = False


def clear_history(session: CalculatorSession) -> None:
    session.history.clear()


# ── Ajustes ──────────────────────────────────────────────────────

def set_angle_mode(session: CalculatorSession, mode: str) -> None:
    mode = mode.upper()
    if mode not in ANGLE_MODES:
        raise ValueError(f"El modo angular debe ser uno de {ANGLE_MODES}")
    session.angle_mode = mode


def set_display_mode(session: CalculatorSession, mode: str) -> None:
    if mode not in DISPLAY_MODES:
        raise ValueError(f"El modo de presentación debe ser uno de {DISPLAY_MODES}")
    session.display_mode = mode


def set_decimal_places(session: CalculatorSession, places: int) -> None:
    places = int(places)
    if places < 0:
        raise ValueError("Los decimales no pueden ser negativos")
    session.decimal_places = places
