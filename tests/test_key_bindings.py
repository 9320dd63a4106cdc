import pytest

from calculator_session import CalculatorSession
from key_bindings import (
    INVERSE_TRIG_FUNCTIONS,
    KEY_HELP,
    accepts_typing,
    TRIG_FUNCTIONS,
    UNARY_FUNCTIONS,
    dispatch_action,
    dispatch_function,
    dispatch_key,
    dispatch_value,
)
from placeholders import COMPLEX_NOT_IMPLEMENTED


@pytest.fixture
def session():
    return CalculatorSession()


def press(session, *keys):
    return [dispatch_key(session, key) for key in keys]


def test_keyboard_expression(session):
    assert all(press(session, "1", "2", "+", "3", "Enter"))
    assert session.current_input == "15"


@pytest.mark.parametrize("key", ["Enter", "Return", "KP_Enter", "="])
def test_evaluate_keys(session, key):
    press(session, "4", "*", "2", key)
    assert session.current_input == "8"


def test_percent_key_is_an_operator(session):
    press(session, "9", "%")
    assert session.current_expression == "9 % "


def test_parenthesis_keys(session):
    press(session, "(", ")")
    assert session.current_expression == "()"


def test_escape_and_backspace(session):
    press(session, "4", "5", "Backspace")
    assert session.current_input == "4"
    press(session, "BackSpace")
    assert session.current_input == "0"
    press(session, "7", "+", "Escape")
    assert (session.current_input, session.current_expression) == ("0", "")


def test_unknown_keys_are_ignored(session):
    assert press(session, "a", "Tab", "^", "") == [False, False, False, False]
    assert session.current_input == "0"


def test_dispatch_action(session):
    press(session, "6")
    assert dispatch_action(session, "ms")
    assert session.memory == 6
    assert dispatch_action(session, "sign")
    assert session.current_input == "-6"
    assert dispatch_action(session, "equals")
    assert session.last_result == -6
    assert dispatch_action(session, "ans")
    assert session.current_input == "-6"
    assert not dispatch_action(session, "matrix-det")


def test_dispatch_value(session):
    assert dispatch_value(session, "e")
    assert session.current_input == "2.7182818285"
    assert dispatch_value(session, "^")
    assert dispatch_value(session, "2")
    dispatch_action(session, "equals")
    assert float(session.current_input) == pytest.approx(7.389056099)
    assert not dispatch_value(session, "i")


def test_dispatch_function(session):
    press(session, "4")
    assert dispatch_function(session, "square")
    assert session.current_input == "16"
    assert session.waiting_for_new_number


def test_power_function_inserts_operator(session):
    press(session, "2")
    assert dispatch_function(session, "power")
    assert session.current_expression == "2 ^ "
    press(session, "1", "0", "=")
    assert session.current_input == "1024"


def test_dispatch_trig_functions(session):
    press(session, "9", "0")
    assert dispatch_function(session, "sin")
    assert session.current_input == "1"
    assert dispatch_function(session, "asin")
    assert session.current_input == "90"


def test_complex_functions_are_placeholders(session):
    assert dispatch_function(session, "conj")
    assert session.current_input == COMPLEX_NOT_IMPLEMENTED
    press(session, "3")
    assert session.current_input == "3"


def test_unknown_function(session):
    assert not dispatch_function(session, "gamma")


def test_function_catalogues_come_from_the_engine():
    assert "factorial" in UNARY_FUNCTIONS
    assert TRIG_FUNCTIONS == ("sin", "cos", "tan")
    assert INVERSE_TRIG_FUNCTIONS == ("asin", "acos", "atan")


def test_help_lists_every_special_key():
    listed = " ".join(keys for keys, _description in KEY_HELP)
    for key in ("Enter", "Escape", "Backspace", "%", "("):
        assert key in listed


def test_zero_after_operator_is_replaced(session):
    press(session, "8", "-", "0", "3", "Enter")
    assert session.current_input == "5"


class _Widget:
    def __init__(self, winfo_class):
        self._class = winfo_class

    def winfo_class(self):
        return self._class


@pytest.mark.parametrize("winfo_class", ["Entry", "Spinbox", "TEntry", "TCombobox"])
def test_text_fields_keep_their_keys(winfo_class):
    assert accepts_typing(_Widget(winfo_class))


@pytest.mark.parametrize("widget", [_Widget("Button"), _Widget("Tk"), ".!menu", None])
def test_other_widgets_route_keys_to_calculator(widget):
    assert not accepts_typing(widget)
