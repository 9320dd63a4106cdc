"""Punto de entrada de la calculadora científica."""

import logging
import tkinter as tk

from calculator_session import CalculatorSession
from calculator_ui import CalculatorApp


LOG_LEVEL = logging.WARNING
WINDOW_GEOMETRY = "460x820"
WINDOW_MIN_SIZE = (420, 760)

DEFAULT_ANGLE_MODE = "DEG"
DEFAULT_DISPLAY_MODE = "normal"
DEFAULT_DECIMAL_PLACES = 10


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    session = CalculatorSession(
        angle_mode=DEFAULT_ANGLE_MODE,
        display_mode=DEFAULT_DISPLAY_MODE,
        decimal_places=DEFAULT_DECIMAL_PLACES,
    )
    CalculatorApp(root, session=session)
    root.mainloop()


if __name__ == "__main__":
    main()
