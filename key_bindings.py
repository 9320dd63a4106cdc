"""
Traducción de teclas y botones a operaciones de la sesión.

La interfaz solo decodifica eventos; aquí se decide qué operación del
núcleo corresponde a cada tecla, acción, valor o función. Cada dispatch
devuelve True si reconoce la entrada.
"""

import calculator_state as state
from calculator_engine import PythonMathProvider
from calculator_session import CalculatorSession
from placeholders import COMPLEX_FUNCTIONS, handle_complex_function

# Teclas especiales: nombres de navegador y keysym de tkinter
_EVALUATE_KEYS = ("Enter", "Return", "KP_Enter", "=")
_CLEAR_KEYS = ("Escape",)
_DELETE_KEYS = ("Backspace", "BackSpace")
_KEY_OPERATORS = ("+", "-", "*", "/", "%")

ACTIONS = {
    "clear": state.clear,
    "delete": state.delete,
    "equals": state.evaluate,
    "sign": state.toggle_sign,
    "ans": state.input_ans,
    "mc": state.memory_clear,
    "mr": state.memory_recall,
    "ms": state.memory_store,
    "mplus": state.memory_add,
    "mminus": state.memory_subtract,
    "clear-history": state.clear_history,
}

# Lo que muestra la ventana de ayuda
KEY_HELP = (
    ("0-9  .", "Introducir número"),
    ("+  -  *  /  %", "Operador"),
    ("(  )", "Paréntesis"),
    ("Enter  =", "Calcular"),
    ("Escape", "Borrar todo"),
    ("Backspace", "Borrar último dígito"),
)

_provider = PythonMathProvider()
UNARY_FUNCTIONS = _provider.function_names
TRIG_FUNCTIONS = _provider.trig_names
INVERSE_TRIG_FUNCTIONS = _provider.inverse_trig_names


# Clases tk/ttk donde el usuario escribe texto propio
TEXT_WIDGET_CLASSES = ("Entry", "Spinbox", "Text", "TEntry", "TSpinbox", "TCombobox")


def accepts_typing(widget) -> bool:
    """True si las teclas pulsadas en widget son suyas y no de la calculadora."""
    winfo_class = getattr(widget, "winfo_class", None)
    return winfo_class is not None and winfo_class() in TEXT_WIDGET_CLASSES


def dispatch_key(session: CalculatorSession, key: str) -> bool:
    if len(key) == 1 and key in state.DIGITS + state.DECIMAL_POINT:
        state.input_digit(session, key)
    elif key in _KEY_OPERATORS:
        state.input_operator(session, key)
    elif key in state.PARENTHESES:
        state.input_parenthesis(session, key)
    elif key in _EVALUATE_KEYS:
        state.evaluate(session)
    elif key in _CLEAR_KEYS:
        state.clear(session)
    elif key in _DELETE_KEYS:
        state.delete(session)
    else:
        return False
    return True


def dispatch_action(session: CalculatorSession, action: str) -> bool:
    operation = ACTIONS.get(action)
    if operation is None:
        return False
    operation(session)
    return True


def dispatch_value(session: CalculatorSession, value: str) -> bool:
    if value in state.NAMED_CONSTANTS:
        state.input_named_constant(session, value)
    elif value in state.OPERATORS:
        state.input_operator(session, value)
    elif value in state.PARENTHESES:
        state.input_parenthesis(session, value)
    elif len(value) == 1 and value in state.DIGITS + state.DECIMAL_POINT:
        state.input_digit(session, value)
    else:
        return False
    return True


def dispatch_function(session: CalculatorSession, name: str) -> bool:
    if name in UNARY_FUNCTIONS:
        state.apply_unary_function(session, name)
    elif name in TRIG_FUNCTIONS:
        state.apply_trig_function(session, name)
    elif name in INVERSE_TRIG_FUNCTIONS:
        state.apply_inverse_trig_function(session, name)
    elif name == "power":
        state.input_operator(session, "^")
    elif name == "random":
        state.input_named_constant(session, "random")
    elif name in COMPLEX_FUNCTIONS:
        handle_complex_function(session, name)
    else:
        return False
    return True
