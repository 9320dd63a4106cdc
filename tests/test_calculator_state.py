import pytest

import calculator_state as state
from calculator_session import ERROR, HISTORY_LIMIT, CalculatorSession
from number_format import SCIENTIFIC


def feed(session, keys):
    for key in keys:
        if key in state.OPERATORS:
            state.input_operator(session, key)
        elif key in state.PARENTHESES:
            state.input_parenthesis(session, key)
        else:
            state.input_digit(session, key)
    return session


@pytest.fixture
def session():
    return CalculatorSession()


def test_initial_session(session):
    assert session.current_input == "0"
    assert session.current_expression == ""
    assert session.waiting_for_new_number is False
    assert session.angle_mode == "DEG"
    assert session.memory == 0
    assert session.history == []
    assert state.display_text(session) == "0"


def test_second_decimal_point_is_ignored(session):
    feed(session, "5..2")
    assert session.current_input == "5.2"


def test_leading_zero_is_replaced(session):
    feed(session, "07")
    assert session.current_input == "7"


def test_decimal_point_on_zero_keeps_zero(session):
    feed(session, ".5")
    assert session.current_input == "0.5"


def test_digit_after_operator_starts_new_number(session):
    feed(session, "12+")
    assert session.waiting_for_new_number is True
    state.input_digit(session, ".")
    assert session.current_input == "0."
    assert session.waiting_for_new_number is False


def test_invalid_digit_is_rejected(session):
    with pytest.raises(ValueError):
        state.input_digit(session, "a")


def test_operator_appends_operand(session):
    feed(session, "12*")
    assert session.current_expression == "12 * "
    assert state.display_text(session) == "12 * "


def test_consecutive_operators_last_one_wins(session):
    feed(session, "5+-3")
    assert session.current_expression == "5 - "
    state.evaluate(session)
    assert session.current_input == "2"
    assert session.history == ["5 - 3 = 2"]


def test_all_operators_accepted(session):
    for op in ("+", "-", "*", "/", "%", "^"):
        state.clear(session)
        feed(session, "8" + op + "2")
        state.evaluate(session)
        assert session.current_input != ERROR
    assert session.current_input == "64"


def test_unknown_operator_is_rejected(session):
    with pytest.raises(ValueError):
        state.input_operator(session, "&")


def test_evaluation_resets_expression_and_waits(session):
    feed(session, "2+3*4")
    state.evaluate(session)
    assert session.current_input == "14"
    assert session.current_expression == ""
    assert session.waiting_for_new_number is True
    assert session.last_result == 14


def test_evaluating_fresh_session_gives_zero(session):
    state.evaluate(session)
    assert session.current_input == "0"
    assert session.history == ["0 = 0"]


def test_trailing_operator_is_an_error(session):
    feed(session, "5+")
    state.evaluate(session)
    assert session.current_input == ERROR


def test_parentheses_are_appended_literally(session):
    feed(session, "(")
    assert session.current_expression == "("
    feed(session, "2")
    state.evaluate(session)
    # sin cerrar: se detecta al evaluar
    assert session.current_input == ERROR


def test_division_by_zero_sets_error(session):
    feed(session, "1/0")
    state.evaluate(session)
    assert session.current_input == ERROR
    assert session.is_error
    assert session.history == []


def test_input_after_error_starts_over(session):
    feed(session, "1/0")
    state.evaluate(session)
    state.input_digit(session, "5")
    assert session.current_input == "5"
    assert session.current_expression == ""


def test_toggle_sign(session):
    state.toggle_sign(session)
    assert session.current_input == "0"
    feed(session, "7")
    state.toggle_sign(session)
    assert session.current_input == "-7"
    state.toggle_sign(session)
    assert session.current_input == "7"


def test_negative_operand_in_expression(session):
    feed(session, "5-3")
    state.toggle_sign(session)
    state.evaluate(session)
    assert session.current_input == "8"


def test_delete(session):
    feed(session, "123")
    state.delete(session)
    assert session.current_input == "12"
    state.delete(session)
    state.delete(session)
    assert session.current_input == "0"
    state.delete(session)
    assert session.current_input == "0"


def test_clear_restores_initial_state(session):
    feed(session, "12+3")
    state.clear(session)
    assert (session.current_input, session.current_expression, session.waiting_for_new_number) == ("0", "", False)

    feed(session, "1/0")
    state.evaluate(session)
    state.clear(session)
    assert (session.current_input, session.current_expression, session.waiting_for_new_number) == ("0", "", False)


def test_history_is_capped_most_recent_first(session):
    for i in range(25):
        feed(session, f"{i}+1")
        state.evaluate(session)
    assert len(session.history) == HISTORY_LIMIT
    assert session.history[0] == "24 + 1 = 25"
    assert session.history[-1] == "5 + 1 = 6"


def test_clear_history(session):
    feed(session, "1+1")
    state.evaluate(session)
    state.clear_history(session)
    assert session.history == []


def test_recall_from_history(session):
    state.recall_from_history(session, "5 - 3 = 2")
    assert session.current_input == "2"
    assert session.waiting_for_new_number is False
    state.recall_from_history(session, "not an entry")
    assert session.current_input == "2"


def test_history_records_degree_rewrite(session):
    session.current_expression = "sin(30)"
    session.waiting_for_new_number = True
    state.evaluate(session)
    assert session.current_input == "0.5"
    assert session.history == ["sin((30) * pi / 180) = 0.5"]


def test_input_constant_does_not_touch_expression(session):
    feed(session, "2*")
    state.input_named_constant(session, "pi")
    assert session.current_input == "3.1415926536"
    assert session.current_expression == "2 * "
    assert session.waiting_for_new_number is False


def test_random_constant_in_unit_interval(session):
    state.input_named_constant(session, "random")
    assert 0 <= float(session.current_input) < 1


def test_unknown_constant(session):
    with pytest.raises(ValueError):
        state.input_named_constant(session, "tau")


def test_input_ans(session):
    feed(session, "6*7")
    state.evaluate(session)
    feed(session, "1")
    state.input_ans(session)
    assert session.current_input == "42"
    assert session.waiting_for_new_number is False


def test_unary_function_on_current_input(session):
    feed(session, "9")
    state.apply_unary_function(session, "sqrt")
    assert session.current_input == "3"
    assert session.waiting_for_new_number is True


def test_unary_domain_errors_set_error(session):
    feed(session, "0")
    state.apply_unary_function(session, "reciprocal")
    assert session.current_input == ERROR

    state.clear(session)
    feed(session, "2.5")
    state.apply_unary_function(session, "factorial")
    assert session.current_input == ERROR


def test_trig_round_trip_in_degrees(session):
    feed(session, "30")
    state.apply_trig_function(session, "sin")
    assert session.current_input == "0.5"
    state.apply_inverse_trig_function(session, "asin")
    assert float(session.current_input) == pytest.approx(30)


def test_trig_in_gradians(session):
    state.set_angle_mode(session, "grad")
    feed(session, "100")
    state.apply_trig_function(session, "sin")
    assert session.current_input == "1"


def test_memory_operations(session):
    feed(session, "12")
    state.memory_store(session)
    assert session.memory == 12
    state.clear(session)
    feed(session, "3")
    state.memory_add(session)
    assert session.memory == 15
    state.memory_subtract(session)
    state.memory_subtract(session)
    assert session.memory == 9
    state.memory_recall(session)
    assert session.current_input == "9"
    state.memory_clear(session)
    assert session.memory == 0


def test_memory_treats_unparsable_input_as_zero(session):
    session.memory = 4
    session.current_input = ERROR
    state.memory_add(session)
    assert session.memory == 4
    state.memory_store(session)
    assert session.memory == 0


def test_display_mode_applies_to_results(session):
    state.set_display_mode(session, SCIENTIFIC)
    feed(session, "1+1")
    state.evaluate(session)
    assert session.current_input == "2.0000000000e+0"


def test_decimal_places_apply_to_results(session):
    state.set_decimal_places(session, 3)
    feed(session, "2/3")
    state.evaluate(session)
    assert session.current_input == "0.667"


def test_invalid_settings_are_rejected(session):
    with pytest.raises(ValueError):
        state.set_angle_mode(session, "turns")
    with pytest.raises(ValueError):
        state.set_display_mode(session, "fancy")
    with pytest.raises(ValueError):
        state.set_decimal_places(session, -1)
    with pytest.raises(ValueError):
        CalculatorSession(angle_mode="XYZ")


def test_operand_with_leading_zero_evaluates(session):
    feed(session, "5")
    state.toggle_sign(session)
    state.delete(session)
    feed(session, "07")
    assert session.current_input == "-07"
    state.evaluate(session)
    assert session.current_input == "-7"


def test_power_chain_groups_left_to_right(session):
    feed(session, "2^3^2")
    state.evaluate(session)
    assert session.current_input == "64"


def test_factorial_overflow_sets_error(session):
    feed(session, "171")
    state.apply_unary_function(session, "factorial")
    assert session.current_input == ERROR

    state.clear(session)
    feed(session, "170")
    state.apply_unary_function(session, "factorial")
    assert session.current_input != ERROR


def test_operator_on_error_is_ignored(session):
    feed(session, "1/0")
    state.evaluate(session)
    assert session.current_input == ERROR

    state.input_operator(session, "+")
    assert session.current_input == ERROR
    assert ERROR not in session.current_expression


def test_memory_text(session):
    assert state.memory_text(session) == ""
    feed(session, "2.5")
    state.memory_store(session)
    assert state.memory_text(session) == "2.5"
    state.memory_subtract(session)
    assert state.memory_text(session) == ""
