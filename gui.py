"""
GUI for PocketCalc
Tkinter keypad and display driving a CalculatorEngine
"""
import tkinter as tk

import config
from calculator import CalculatorEngine
from input_handler import handle_action, handle_key

# (label, action, value, kind) rows, top to bottom
KEYPAD_LAYOUT = [
    [("C", "clear", None, "danger"), ("⌫", "backspace", None, "operator"),
     ("%", "percentage", None, "operator"), ("÷", "divide", None, "operator")],
    [("7", "digit", "7", "normal"), ("8", "digit", "8", "normal"),
     ("9", "digit", "9", "normal"), ("×", "multiply", None, "operator")],
    [("4", "digit", "4", "normal"), ("5", "digit", "5", "normal"),
     ("6", "digit", "6", "normal"), ("−", "subtract", None, "operator")],
    [("1", "digit", "1", "normal"), ("2", "digit", "2", "normal"),
     ("3", "digit", "3", "normal"), ("+", "add", None, "operator")],
    [("±", "toggle-sign", None, "operator"), ("0", "digit", "0", "normal"),
     (".", "decimal", None, "normal"), ("=", "equals", None, "equals")],
]


class CalculatorGUI:
    def __init__(self, root, engine=None, dark_mode=config.DARK_MODE):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.engine = engine if engine is not None else CalculatorEngine()
        self.dark_mode: bool = dark_mode
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.update_display()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["success"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "danger":
            bg, fg, abg = T["danger"], "#FFFFFF", T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    def create_widgets(self):
        """Create display and keypad"""
        T = self.T

        # Display area — neumorphic inset card with LCD-style font
        outer = tk.Frame(self.root, bg=T["shadow_dark"], bd=0)
        outer.pack(fill=tk.X, padx=6, pady=(6, 4))
        inner = tk.Frame(outer, bg=T["shadow_lite"], bd=0)
        inner.pack(fill=tk.X, padx=(1, 0), pady=(1, 0))

        self.display = tk.Label(
            inner, text="0",
            font=config.DISPLAY_FONT,
            bg=T["display_bg"], fg=T["display_fg"],
            anchor=tk.E, padx=12, pady=12
        )
        self.display.pack(fill=tk.X, padx=(0, 1), pady=(0, 1))

        keypad = tk.Frame(self.root, bg=T["bg"])
        keypad.pack(fill=tk.BOTH, expand=True, padx=4, pady=4)
        for row, buttons in enumerate(KEYPAD_LAYOUT):
            keypad.rowconfigure(row, weight=1)
            for col, (label, action, value, kind) in enumerate(buttons):
                keypad.columnconfigure(col, weight=1)
                btn = self._neu_btn(
                    keypad, label, kind=kind,
                    command=lambda a=action, v=value: self.on_button(a, v)
                )
                btn.grid(row=row, column=col, padx=3, pady=3, sticky="nsew")

    def on_button(self, action, value=None):
        """Handle keypad button clicks"""
        handle_action(self.engine, action, value)
        self.update_display()

    def on_key_press(self, event):
        """Handle keyboard input"""
        # Printable keys arrive as event.char, named keys only as keysym
        key = event.char if event.char and event.char.isprintable() else event.keysym
        if handle_key(self.engine, key):
            self.update_display()

    def update_display(self):
        """Update the display"""
        T = self.T
        fg = T["danger"] if self.engine.is_error else T["display_fg"]
        self.display.config(text=self.engine.display_text, fg=fg)
