from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

import calculator_state as state  # noqa: E402
from calculator_session import ERROR  # noqa: E402
from calculator_ui import CalculatorApp  # noqa: E402


@pytest.fixture
def app():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield CalculatorApp(root)
    root.destroy()


def test_keys_typed_in_decimals_box_stay_there(app):
    event = SimpleNamespace(widget=app.decimals_spin, char="5", keysym="5")
    assert app._on_keypress(event) is None
    assert app.session.current_input == "0"


def test_keys_typed_elsewhere_reach_the_calculator(app):
    event = SimpleNamespace(widget=app.root, char="5", keysym="5")
    assert app._on_keypress(event) == "break"
    assert app.session.current_input == "5"


def test_typed_decimals_are_applied(app):
    app.decimals_var.set(3)
    app._on_settings_changed()
    assert app.session.decimal_places == 3


def test_new_input_cancels_error_flash(app):
    app.session.current_input = ERROR
    app._refresh()
    assert app._error_after_id is not None

    state.input_digit(app.session, "7")
    app._refresh()
    assert app._error_after_id is None
    assert app.session.current_input == "7"


def test_memory_value_is_shown(app):
    app._on_key("value:4")
    app._on_key("action:ms")
    assert app.memory_value_var.get() == "4"
    app._on_key("action:mc")
    assert app.memory_value_var.get() == ""
