"""
Interfaz gráfica de la calculadora científica.

Usa tkinter. La ventana solo traduce eventos a operaciones del núcleo
(key_bindings / calculator_state) y vuelve a pintar la sesión; todas las
operaciones son síncronas y se ejecutan en el hilo de tkinter.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont
from tkinter import ttk

import calculator_state as state
from calculator_session import CalculatorSession
from equation_solver import EQUATION_FORMS, LINEAR, solve_equation
from formula_evaluator import ANGLE_MODES
from key_bindings import (
    KEY_HELP,
    accepts_typing,
    dispatch_action,
    dispatch_function,
    dispatch_key,
    dispatch_value,
)
from number_format import DISPLAY_MODES
from placeholders import (
    CALCULUS_OPERATIONS,
    MATRIX_OPERATIONS,
    perform_calculus_operation,
    perform_matrix_operation,
)
from statistics_tools import STATISTIC_OPERATIONS, statistics_report
from unit_conversion import ANGLE_UNITS, BASE, BASES, CONVERSION_TYPES, conversion_report

logger = logging.getLogger(__name__)

ERROR_FLASH_MS = 2000


class CalculatorApp:
    """Ventana principal de la calculadora científica."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "toggle_on":  "#A6E3A1",
        "toggle_off": "#585B70",
        "expr_fg":    "#BAC2DE",
        "result_fg":  "#A6E3A1",
        "error_fg":   "#F38BA8",
    }

    # ── Definiciones de botones científicos ──────────────────────
    #  (texto_normal, función_normal, texto_inv, función_inv)

    SCIENCE_BUTTONS = [
        ("\u221A",    "sqrt",       "x\u00B2",        "square"),  # √  / x²
        ("sin",       "sin",        "sin\u207B\u00B9", "asin"),    # sin / asin
        ("cos",       "cos",        "cos\u207B\u00B9", "acos"),    # cos / acos
        ("tan",       "tan",        "tan\u207B\u00B9", "atan"),    # tan / atan
        ("ln",        "ln",         "e\u02E3",         "exp"),     # ln  / eˣ
        ("log",       "log",        "10\u02E3",        "exp10"),   # log / 10ˣ
        ("sinh",      "sinh",       "sinh\u207B\u00B9", "asinh"),
        ("cosh",      "cosh",       "cosh\u207B\u00B9", "acosh"),
        ("tanh",      "tanh",       "tanh\u207B\u00B9", "atanh"),
        ("\u221B",    "cbrt",       "x\u00B3",        "cube"),    # ∛  / x³
        ("1/x",       "reciprocal", "|x|",            "abs"),
        ("n!",        "factorial",  "rand",           "random"),
    ]
    SCIENCE_COLUMNS = 6

    # ── Definiciones del teclado principal ────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  acción: "value:<v>", "action:<a>" o "function:<f>"

    KEYPAD = [
        [("MC", "action:mc", "special"), ("MR", "action:mr", "special"),
         ("MS", "action:ms", "special"), ("M+", "action:mplus", "special"),
         ("M−", "action:mminus", "special"), ("Ans", "action:ans", "special")],

        [("xʸ", "function:power", "func"), ("π", "value:pi", "func"),
         ("e", "value:e", "func"), ("φ", "value:phi", "func"),
         ("(", "value:(", "func"), (")", "value:)", "func")],

        [("AC", "action:clear", "special"), ("⌫", "action:delete", "special"),
         ("%", "value:%", "func"), ("÷", "value:/", "op")],

        [("7", "value:7", "num"), ("8", "value:8", "num"),
         ("9", "value:9", "num"), ("×", "value:*", "op")],

        [("4", "value:4", "num"), ("5", "value:5", "num"),
         ("6", "value:6", "num"), ("−", "value:-", "op")],

        [("1", "value:1", "num"), ("2", "value:2", "num"),
         ("3", "value:3", "num"), ("+", "value:+", "op")],

        [("±", "action:sign", "num"), ("0", "value:0", "num"),
         (".", "value:.", "num"), ("=", "action:equals", "equals")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, session: CalculatorSession = None):
        self.root = root
        self.root.title("Calculadora Científica")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.session = session if session is not None else CalculatorSession()
        self._inv_mode = False
        self._error_after_id = None
        self._tools_window = None
        self._help_window = None

        self._init_fonts()
        self._create_display()
        self._create_toggle_bar()
        self._create_science_panel()
        self._create_keypad()
        self._create_history_panel()
        self._bind_keyboard()

        self._refresh()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family="Consolas", size=14)
        self._f_result = tkfont.Font(family="Consolas", size=22, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)
        self._f_func   = tkfont.Font(family="Segoe UI", size=12)
        self._f_small  = tkfont.Font(family="Segoe UI", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        # Expresión acumulada
        self.expr_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.expr_var, font=self._f_expr,
            bg=self.C["display_bg"], fg=self.C["expr_fg"], anchor="e",
        ).pack(fill="x", pady=(4, 0))

        # Fila del resultado + botón copiar
        row = tk.Frame(frame, bg=self.C["display_bg"])
        row.pack(fill="x", pady=(2, 4))

        tk.Button(
            row, text="Copiar", font=self._f_small,
            bg=self.C["func"], fg=self.C["func_fg"],
            activebackground=self.C["special"], relief="flat",
            cursor="hand2", command=self._copy_result, padx=8,
        ).pack(side="right", padx=(6, 0))

        self.display_var = tk.StringVar(value="0")
        self.display_label = tk.Label(
            row, textvariable=self.display_var, font=self._f_result,
            bg=self.C["display_bg"], fg=self.C["result_fg"], anchor="e",
        )
        self.display_label.pack(side="right", fill="x", expand=True)

    # ── Barra de toggles (DEG/RAD/GRAD · INV · M · ajustes) ─────

    def _create_toggle_bar(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=6, pady=(2, 2))

        self.angle_btn = tk.Button(
            frame, text=self.session.angle_mode, font=self._f_small, width=6,
            bg=self.C["toggle_on"], fg=self.C["bg"],
            activebackground=self.C["toggle_on"], relief="flat",
            command=self._toggle_angle,
        )
        self.angle_btn.pack(side="left", padx=(0, 4))

        self.inv_btn = tk.Button(
            frame, text="INV", font=self._f_small, width=6,
            bg=self.C["toggle_off"], fg=self.C["special_fg"],
            activebackground=self.C["toggle_off"], relief="flat",
            command=self._toggle_inv,
        )
        self.inv_btn.pack(side="left", padx=(0, 4))

        self.memory_label = tk.Label(
            frame, text="M", font=self._f_small,
            bg=self.C["bg"], fg=self.C["bg"],
        )
        self.memory_label.pack(side="left", padx=(4, 0))

        self.memory_value_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.memory_value_var, font=self._f_small,
            bg=self.C["bg"], fg=self.C["expr_fg"],
        ).pack(side="left", padx=(2, 0))

        tk.Button(
            frame, text="?", font=self._f_small, width=2,
            bg=self.C["func"], fg=self.C["func_fg"],
            activebackground=self.C["special"], relief="flat",
            command=self._open_help,
        ).pack(side="right", padx=(4, 0))

        tk.Button(
            frame, text="Herramientas", font=self._f_small,
            bg=self.C["func"], fg=self.C["func_fg"],
            activebackground=self.C["special"], relief="flat",
            command=self._open_tools,
        ).pack(side="right")

        self.decimals_var = tk.IntVar(value=self.session.decimal_places)
        self.decimals_spin = decimals = tk.Spinbox(
            frame, from_=0, to=20, width=3, textvariable=self.decimals_var,
            font=self._f_small, command=self._on_settings_changed,
        )
        decimals.pack(side="right", padx=(4, 4))
        # command solo salta con las flechas; lo tecleado se aplica aquí
        decimals.bind("<Return>", lambda _e: self._on_settings_changed())
        decimals.bind("<FocusOut>", lambda _e: self._on_settings_changed())

        self.display_mode_var = tk.StringVar(value=self.session.display_mode)
        mode_menu = tk.OptionMenu(
            frame, self.display_mode_var, *DISPLAY_MODES,
            command=lambda _v: self._on_settings_changed(),
        )
        mode_menu.config(font=self._f_small, bg=self.C["func"],
                         fg=self.C["func_fg"], relief="flat",
                         highlightthickness=0)
        mode_menu.pack(side="right")

    # ── Panel de funciones científicas ───────────────────────────

    def _create_science_panel(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=6, pady=2)
        for col in range(self.SCIENCE_COLUMNS):
            frame.columnconfigure(col, weight=1, uniform="sci")

        self._sci_buttons: list[tk.Button] = []

        for idx, button_def in enumerate(self.SCIENCE_BUTTONS):
            text_norm = button_def[0]
            row, col = divmod(idx, self.SCIENCE_COLUMNS)
            btn = tk.Button(
                frame, text=text_norm, font=self._f_func,
                bg=self.C["func"], fg=self.C["func_fg"],
                activebackground=self.C["special"], relief="flat",
                command=lambda i=idx: self._on_science(i),
            )
            btn.grid(row=row, column=col, sticky="nsew", padx=2, pady=2,
                     ipady=4)
            self._sci_buttons.append(btn)

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 2))

        # Determinar el ancho máximo de las filas
        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            cols_in_row = len(row_def)
            # Repartir columnas con colspan para filas cortas
            spans = self._compute_spans(cols_in_row, max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=6)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        # Asignar columnas extra al último botón (generalmente '=')
        spans[-1] += extra
        return spans

    # ── Historial ────────────────────────────────────────────────

    def _create_history_panel(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", padx=6, pady=(2, 6))

        header = tk.Frame(frame, bg=self.C["bg"])
        header.pack(fill="x")
        tk.Label(
            header, text="Historial", font=self._f_small,
            bg=self.C["bg"], fg=self.C["expr_fg"],
        ).pack(side="left")
        tk.Button(
            header, text="Borrar", font=self._f_small,
            bg=self.C["func"], fg=self.C["func_fg"], relief="flat",
            command=lambda: self._on_key("action:clear-history"),
        ).pack(side="right")

        self.history_list = tk.Listbox(
            frame, height=5, font=self._f_small,
            bg=self.C["display_bg"], fg=self.C["expr_fg"],
            selectbackground=self.C["special"], relief="flat",
            highlightthickness=0, activestyle="none",
        )
        self.history_list.pack(fill="both", expand=True, pady=(2, 0))
        self.history_list.bind("<<ListboxSelect>>", self._on_history_select)

    def _on_history_select(self, _event):
        selection = self.history_list.curselection()
        if not selection:
            return
        state.recall_from_history(self.session, self.history_list.get(selection[0]))
        self._refresh()

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        # lo tecleado en un campo de texto no es entrada de la calculadora
        if accepts_typing(event.widget):
            return None
        # Escape/Return/BackSpace llegan sin char útil: usar keysym
        key = event.char if event.char and event.char.isprintable() else event.keysym
        if dispatch_key(self.session, key):
            self._refresh()
            return "break"
        return None

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        kind, _, name = action.partition(":")
        if kind == "value":
            dispatch_value(self.session, name)
        elif kind == "action":
            dispatch_action(self.session, name)
        elif kind == "function":
            dispatch_function(self.session, name)
        self._refresh()

    def _on_science(self, idx: int):
        button_def = self.SCIENCE_BUTTONS[idx]
        name = button_def[3] if self._inv_mode else button_def[1]
        dispatch_function(self.session, name)
        self._refresh()

    # ── Toggles ──────────────────────────────────────────────────

    def _toggle_angle(self):
        current = ANGLE_MODES.index(self.session.angle_mode)
        mode = ANGLE_MODES[(current + 1) % len(ANGLE_MODES)]
        state.set_angle_mode(self.session, mode)
        self.angle_btn.config(text=mode)
        logger.debug("angle mode -> %s", mode)

    def _toggle_inv(self):
        self._inv_mode = not self._inv_mode
        if self._inv_mode:
            self.inv_btn.config(bg=self.C["toggle_on"], fg=self.C["bg"])
        else:
            self.inv_btn.config(bg=self.C["toggle_off"],
                                fg=self.C["special_fg"])
        text_index = 2 if self._inv_mode else 0
        for idx, button_def in enumerate(self.SCIENCE_BUTTONS):
            self._sci_buttons[idx].config(text=button_def[text_index])

    def _on_settings_changed(self):
        try:
            state.set_display_mode(self.session, self.display_mode_var.get())
            state.set_decimal_places(self.session, self.decimals_var.get())
        except (ValueError, tk.TclError) as exc:
            logger.warning("ajuste ignorado: %s", exc)
        self._refresh()

    # ── Pintado y error ──────────────────────────────────────────

    def _refresh(self):
        s = self.session
        self.display_var.set(state.display_text(s))
        self.expr_var.set(s.current_expression)
        self.memory_label.config(
            fg=self.C["bg"] if s.memory == 0 else self.C["toggle_on"])
        self.memory_value_var.set(state.memory_text(s))

        self.history_list.delete(0, tk.END)
        for entry in s.history:
            self.history_list.insert(tk.END, entry)

        if s.is_error:
            self.display_label.config(fg=self.C["error_fg"])
            if self._error_after_id is None:
                self._error_after_id = self.root.after(
                    ERROR_FLASH_MS, self._recover_from_error)
        else:
            self.display_label.config(fg=self.C["result_fg"])
            # el error ya se limpió con otra tecla
            if self._error_after_id is not None:
                self.root.after_cancel(self._error_after_id)
                self._error_after_id = None

    def _recover_from_error(self):
        self._error_after_id = None
        state.clear(self.session)
        self._refresh()

    # ── Copiar resultado ─────────────────────────────────────────

    def _copy_result(self):
        text = self.display_var.get()
        self.root.clipboard_clear()
        self.root.clipboard_append(text)

    # ── Herramientas: estadística, ecuaciones, conversión… ──────

    def _open_tools(self):
        if self._tools_window is not None and self._tools_window.winfo_exists():
            self._tools_window.lift()
            return
        self._tools_window = ToolsWindow(self.root, self.session)

    # ── Ayuda ────────────────────────────────────────────────────

    def _open_help(self):
        if self._help_window is not None and self._help_window.winfo_exists():
            self._help_window.lift()
            return

        win = tk.Toplevel(self.root)
        win.title("Atajos de teclado")
        win.configure(bg=self.C["bg"])
        win.resizable(False, False)
        for row, (keys, description) in enumerate(KEY_HELP):
            tk.Label(
                win, text=keys, font=self._f_small, anchor="w",
                bg=self.C["bg"], fg=self.C["toggle_on"],
            ).grid(row=row, column=0, sticky="w", padx=(12, 8), pady=2)
            tk.Label(
                win, text=description, font=self._f_small, anchor="w",
                bg=self.C["bg"], fg=self.C["expr_fg"],
            ).grid(row=row, column=1, sticky="w", padx=(0, 12), pady=2)
        tk.Button(
            win, text="Cerrar", font=self._f_small,
            bg=self.C["func"], fg=self.C["func_fg"], relief="flat",
            command=win.destroy,
        ).grid(row=len(KEY_HELP), column=0, columnspan=2, pady=(6, 10))
        self._help_window = win


class ToolsWindow:
    """Paneles de estadística, ecuaciones, conversión, matrices y cálculo."""

    def __init__(self, master, session: CalculatorSession):
        self.session = session
        self.top = tk.Toplevel(master)
        self.top.title("Herramientas")

        notebook = ttk.Notebook(self.top)
        notebook.pack(fill="both", expand=True, padx=6, pady=6)

        self._create_statistics_tab(notebook)
        self._create_solver_tab(notebook)
        self._create_conversion_tab(notebook)
        self._create_matrix_tab(notebook)
        self._create_calculus_tab(notebook)

    def winfo_exists(self) -> bool:
        return bool(self.top.winfo_exists())

    def lift(self):
        self.top.lift()

    def _settings(self):
        return self.session.display_mode, self.session.decimal_places

    @staticmethod
    def _result_label(parent) -> tk.StringVar:
        var = tk.StringVar()
        ttk.Label(parent, textvariable=var, justify="left").pack(
            fill="x", pady=(6, 0))
        return var

    # ── Estadística ──────────────────────────────────────────────

    def _create_statistics_tab(self, notebook):
        tab = ttk.Frame(notebook, padding=8)
        notebook.add(tab, text="Estadística")

        ttk.Label(tab, text="Datos (separados por comas):").pack(anchor="w")
        data_var = tk.StringVar()
        ttk.Entry(tab, textvariable=data_var, width=40).pack(fill="x")

        buttons = ttk.Frame(tab)
        buttons.pack(fill="x", pady=(6, 0))
        result = self._result_label(tab)

        def run(operation):
            result.set(statistics_report(operation, data_var.get(), *self._settings()))

        for idx, operation in enumerate(STATISTIC_OPERATIONS):
            ttk.Button(buttons, text=operation, command=lambda op=operation: run(op)).grid(
                row=idx // 5, column=idx % 5, sticky="nsew", padx=1, pady=1)

    # ── Ecuaciones ───────────────────────────────────────────────

    def _create_solver_tab(self, notebook):
        tab = ttk.Frame(notebook, padding=8)
        notebook.add(tab, text="Ecuaciones")

        type_var = tk.StringVar(value=LINEAR)
        ttk.Combobox(tab, textvariable=type_var, values=list(EQUATION_FORMS),
                     state="readonly").pack(fill="x")

        inputs = ttk.Frame(tab)
        inputs.pack(fill="x", pady=(6, 0))
        coefficient_vars: list[tk.StringVar] = []
        result = None

        def build_inputs(*_args):
            for child in inputs.winfo_children():
                child.destroy()
            coefficient_vars.clear()
            form, names = EQUATION_FORMS[type_var.get()]
            ttk.Label(inputs, text=form).grid(row=0, column=0, columnspan=2, sticky="w")
            for row, name in enumerate(names, start=1):
                var = tk.StringVar()
                ttk.Label(inputs, text=name).grid(row=row, column=0, sticky="w")
                ttk.Entry(inputs, textvariable=var, width=12).grid(row=row, column=1, sticky="w")
                coefficient_vars.append(var)
            if result is not None:
                result.set("")

        def solve():
            coefficients = [var.get() for var in coefficient_vars]
            result.set(solve_equation(type_var.get(), coefficients, *self._settings()))

        def clear_solver():
            for var in coefficient_vars:
                var.set("")
            result.set("")

        build_inputs()
        type_var.trace_add("write", build_inputs)

        buttons = ttk.Frame(tab)
        buttons.pack(fill="x", pady=(6, 0))
        ttk.Button(buttons, text="Resolver", command=solve).pack(side="left")
        ttk.Button(buttons, text="Limpiar", command=clear_solver).pack(side="left", padx=4)
        result = self._result_label(tab)

    # ── Conversión ───────────────────────────────────────────────

    def _create_conversion_tab(self, notebook):
        tab = ttk.Frame(notebook, padding=8)
        notebook.add(tab, text="Conversión")

        type_var = tk.StringVar(value=BASE)
        input_var = tk.StringVar()
        source_var = tk.StringVar()
        target_var = tk.StringVar()

        ttk.Combobox(tab, textvariable=type_var, values=list(CONVERSION_TYPES),
                     state="readonly").pack(fill="x")
        ttk.Entry(tab, textvariable=input_var).pack(fill="x", pady=(6, 0))
        source_box = ttk.Combobox(tab, textvariable=source_var, state="readonly")
        source_box.pack(fill="x", pady=(4, 0))
        target_box = ttk.Combobox(tab, textvariable=target_var, state="readonly")
        target_box.pack(fill="x", pady=(4, 0))

        def reset_choices(*_args):
            choices = [str(b) for b in BASES] if type_var.get() == BASE else list(ANGLE_UNITS)
            for box, var in ((source_box, source_var), (target_box, target_var)):
                box.config(values=choices)
                var.set(choices[0])

        def convert():
            result.set(conversion_report(
                type_var.get(), input_var.get(), source_var.get(), target_var.get(),
                *self._settings()))

        def clear_conversion():
            input_var.set("")
            reset_choices()
            result.set("")

        reset_choices()
        type_var.trace_add("write", reset_choices)

        buttons = ttk.Frame(tab)
        buttons.pack(fill="x", pady=(6, 0))
        ttk.Button(buttons, text="Convertir", command=convert).pack(side="left")
        ttk.Button(buttons, text="Limpiar", command=clear_conversion).pack(side="left", padx=4)
        result = self._result_label(tab)

    # ── Matrices y cálculo (sin implementar) ─────────────────────

    def _create_matrix_tab(self, notebook):
        tab = ttk.Frame(notebook, padding=8)
        notebook.add(tab, text="Matrices")

        size_var = tk.IntVar(value=2)
        ttk.Spinbox(tab, from_=2, to=4, textvariable=size_var, width=4).pack(anchor="w")
        grid = ttk.Frame(tab)
        grid.pack(anchor="w", pady=(6, 0))

        def build_grid(*_args):
            for child in grid.winfo_children():
                child.destroy()
            try:
                size = int(size_var.get())
            except (ValueError, tk.TclError):
                return
            for i in range(size):
                for j in range(size):
                    ttk.Entry(grid, width=6).grid(row=i, column=j, padx=1, pady=1)

        build_grid()
        size_var.trace_add("write", build_grid)

        buttons = ttk.Frame(tab)
        buttons.pack(fill="x", pady=(6, 0))
        result = self._result_label(tab)
        for idx, operation in enumerate(MATRIX_OPERATIONS):
            ttk.Button(
                buttons, text=operation,
                command=lambda op=operation: result.set(perform_matrix_operation(op)),
            ).grid(row=idx // 4, column=idx % 4, sticky="nsew", padx=1, pady=1)

    def _create_calculus_tab(self, notebook):
        tab = ttk.Frame(notebook, padding=8)
        notebook.add(tab, text="Cálculo")

        function_var = tk.StringVar()
        ttk.Label(tab, text="f(x):").pack(anchor="w")
        ttk.Entry(tab, textvariable=function_var).pack(fill="x")

        buttons = ttk.Frame(tab)
        buttons.pack(fill="x", pady=(6, 0))
        result = self._result_label(tab)
        for operation in CALCULUS_OPERATIONS:
            ttk.Button(
                buttons, text=operation,
                command=lambda op=operation: result.set(
                    perform_calculus_operation(op, function_var.get())),
            ).pack(side="left", padx=1)
