import sys

import calculator_state as state
from calculator_engine import CalculatorEngine, factorial
from calculator_errors import DomainError
from calculator_session import ERROR, HISTORY_LIMIT, CalculatorSession
from number_format import ENGINEERING, NORMAL, SCIENTIFIC, format_number


def _feed(session: CalculatorSession, keys: str) -> CalculatorSession:
	"""Pulsa cada carácter de keys como dígito u operador."""
	for key in keys:
		if key in state.OPERATORS:
			state.input_operator(session, key)
		elif key in state.PARENTHESES:
			state.input_parenthesis(session, key)
		else:
			state.input_digit(session, key)
	return session


def _raises_domain_error(n) -> bool:
	try:
		factorial(n)
	except DomainError:
		return True
	return False


def inspect_expression(expr: str, *, angle_mode: str = "DEG", decimal_places: int = 10) -> None:
	"""Imprime el preprocesado y el resultado de una expresión."""
	session = CalculatorSession(angle_mode=angle_mode, decimal_places=decimal_places)
	session.current_expression = expr
	session.waiting_for_new_number = True
	processed = CalculatorEngine().preprocess(expr, angle_mode)
	state.evaluate(session)

	print("Expression inspection")
	print(f"expr:           {expr}")
	print(f"angle mode:     {angle_mode}")
	print(f"processed:      {processed}")
	print(f"result:         {session.current_input}")
	if session.history:
		print(f"history entry:  {session.history[0]}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	expected_actual.append(("format 42 with 0 places", "42", format_number(42, NORMAL, 0)))
	expected_actual.append(("format 40 with 0 places", "40", format_number(40, NORMAL, 0)))
	expected_actual.append(("format 3.5 strips zeros", "3.5", format_number(3.5, NORMAL, 10)))
	expected_actual.append(("format 1e-7", "1.0000000000e-7", format_number(0.0000001, NORMAL, 10)))
	expected_actual.append(("format 1e16", "1.0000000000e+16", format_number(1e16, NORMAL, 10)))
	expected_actual.append(("scientific 1234", "1.23e+3", format_number(1234, SCIENTIFIC, 2)))
	expected_actual.append(("engineering 12340", "12.34e3", format_number(12340, ENGINEERING, 2)))
	expected_actual.append(("infinity", "-∞", format_number(float("-inf"))))

	session = _feed(CalculatorSession(), "5..2")
	checks.append(("second decimal point is ignored", session.current_input == "5.2"))

	session = _feed(CalculatorSession(), "5+-3")
	state.evaluate(session)
	expected_actual.append(("5 + - 3 keeps last operator", "2", session.current_input))
	checks.append(("history records replaced operator", session.history == ["5 - 3 = 2"]))

	session = _feed(CalculatorSession(), "2^3^2")
	state.evaluate(session)
	expected_actual.append(("2 ^ 3 ^ 2 groups left to right", "64", session.current_input))

	session = _feed(CalculatorSession(), "5")
	state.toggle_sign(session)
	state.delete(session)
	_feed(session, "07")
	state.evaluate(session)
	expected_actual.append(("-07 evaluates as -7", "-7", session.current_input))

	session = _feed(CalculatorSession(), "7")
	state.toggle_sign(session)
	negated = session.current_input
	state.toggle_sign(session)
	checks.append(("toggle sign negates", negated == "-7"))
	checks.append(("toggle sign twice restores", session.current_input == "7"))
	session = CalculatorSession()
	state.toggle_sign(session)
	checks.append(("toggle sign on zero is a no-op", session.current_input == "0"))

	checks.append(("factorial(-1) is a domain error", _raises_domain_error(-1)))
	checks.append(("factorial(2.5) is a domain error", _raises_domain_error(2.5)))
	checks.append(("factorial(0) is 1", factorial(0) == 1))
	checks.append(("factorial(5) is 120", factorial(5) == 120))

	session = _feed(CalculatorSession(angle_mode="DEG"), "30")
	state.apply_trig_function(session, "sin")
	state.apply_inverse_trig_function(session, "asin")
	expected_actual.append(("asin(sin(30)) in DEG", "30", session.current_input))

	session = CalculatorSession()
	for i in range(25):
		_feed(session, f"{i}+1")
		state.evaluate(session)
	checks.append(("history keeps 20 entries", len(session.history) == HISTORY_LIMIT))
	checks.append(("history is most recent first", session.history[0] == "24 + 1 = 25"))

	session = _feed(CalculatorSession(), "1/0")
	state.evaluate(session)
	checks.append(("division by zero gives Error", session.current_input == ERROR))
	state.clear(session)
	checks.append((
		"clear restores initial input state",
		(session.current_input, session.current_expression, session.waiting_for_new_number) == ("0", "", False),
	))

	failed = [name for name, ok in checks if not ok]
	failed += [label for label, expected, actual in expected_actual if expected != actual]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "sin(30) + 1"
	#   python regression_checks.py --inspect "sin(30)" --mode GRAD --digits 4
	if "--inspect" in sys.argv:
		try:
			expr = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing expression after --inspect")

		def _read_arg(flag: str, default, cast=str):
			if flag not in sys.argv:
				return default
			idx = sys.argv.index(flag)
			try:
				return cast(sys.argv[idx + 1])
			except (ValueError, IndexError):
				raise SystemExit(f"Invalid value for {flag}")

		inspect_expression(
			expr,
			angle_mode=_read_arg("--mode", "DEG").upper(),
			decimal_places=_read_arg("--digits", 10, int),
		)
	else:
		run_regressions()
