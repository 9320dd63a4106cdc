"""Estado de una sesión de la calculadora."""

from dataclasses import dataclass, field
from typing import List

from formula_evaluator import ANGLE_MODES, DEG
from number_format import DISPLAY_MODES, NORMAL

ERROR = "Error"
HISTORY_LIMIT = 20
DEFAULT_DECIMAL_PLACES = 10


@dataclass
class CalculatorSession:
    """Estado mutable de una sesión; lo modifica solo calculator_state.

    current_input nunca queda vacío: es un literal numérico parcial,
    un valor ya formateado o el centinela ERROR.
    """

    current_input: str = "0"
    current_expression: str = ""
    waiting_for_new_number: bool = False
    angle_mode: str = DEG
    memory: float = 0.0
    last_result: float = 0.0
    display_mode: str = NORMAL
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    history: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.angle_mode not in ANGLE_MODES:
            raise ValueError(f"El modo angular debe ser uno de {ANGLE_MODES}")
        if self.display_mode not in DISPLAY_MODES:
            raise ValueError(f"El modo de presentación debe ser uno de {DISPLAY_MODES}")
        if isinstance(self.decimal_places, bool) or not isinstance(self.decimal_places, int):
            raise ValueError("Los decimales deben ser un entero")
        if self.decimal_places < 0:
            raise ValueError("Los decimales no pueden ser negativos")

    @property
    def is_error(self) -> bool:
        return self.current_input == ERROR

    def add_to_history(self, entry: str) -> None:
        """Inserta al principio y descarta lo que exceda HISTORY_LIMIT."""
        self.history.insert(0, entry)
        del self.history[HISTORY_LIMIT:]
