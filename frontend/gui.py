#!/usr/bin/env python3
"""
Calculator GUI

Dark-themed pocket calculator window (Tkinter). The window only draws the display
and the keypad; every press is forwarded to backend.controller.DisplayController,
which owns all calculator logic. The display label is redrawn from the
controller's on_change callback.

Keyboard: digits, '.', '+', '-', '*', '/', '%', Enter/'=' and Escape/'c' work
like the matching keys.
"""

import logging
import tkinter as tk
from typing import Dict, Optional

from backend.buttons import KEYPAD_ROWS, Button
from backend.controller import DisplayController

logger = logging.getLogger(__name__)


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_WIDTH = 340
WINDOW_HEIGHT = 520

BG = "#000000"          # main app background
FG = "#FFFFFF"          # display text

# (background, foreground) per button category
CATEGORY_COLORS: Dict[str, tuple] = {
    "digit": ("#505050", "#FFFFFF"),
    "function": ("#D4D4D2", "#000000"),
    "operator": ("#FF9500", "#FFFFFF"),
}

DISPLAY_FONT = ("Helvetica", 48)
BUTTON_FONT = ("Helvetica", 22)
FUNCTION_FONT = ("Helvetica", 18)

# Tk keysyms that do not arrive as a printable character
KEYSYM_BUTTONS = {
    "Return": Button.EQUALS,
    "KP_Enter": Button.EQUALS,
    "Escape": Button.AC,
}


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self, controller: Optional[DisplayController] = None):
        super().__init__()

        # Window setup
        self.title("Calculator")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.minsize(280, 420)
        self.configure(bg=BG)

        # Controller instance; the display variable follows its text
        self.display_var = tk.StringVar()
        self.controller = controller if controller is not None else DisplayController()
        self.controller.on_change = self.display_var.set
        self.display_var.set(self.controller.display)

        self.buttons: Dict[Button, tk.Button] = {}
        self._build_display()
        self._build_keypad()

        self.bind("<Key>", self._on_key)

    # -------------------------
    # Display
    # -------------------------
    def _build_display(self):
        """Right-aligned result label at the top of the window."""
        disp = tk.Frame(self, bg=BG)
        disp.pack(fill="x", padx=12, pady=(24, 8))
        tk.Label(disp, textvariable=self.display_var, bg=BG, fg=FG,
                 anchor="e", font=DISPLAY_FONT).pack(fill="x")

    # -------------------------
    # Keypad
    # -------------------------
    def _build_keypad(self):
        """
        Build the 4-column keypad. The last row holds a double-width zero key,
        so '.' and '=' shift one column to the right.
        """
        pad = tk.Frame(self, bg=BG)
        pad.pack(fill="both", expand=True, padx=8, pady=8)

        for r, row in enumerate(KEYPAD_ROWS):
            column = 0
            for button in row:
                span = 2 if button is Button.ZERO else 1
                bg, fg = CATEGORY_COLORS[button.category]
                font = FUNCTION_FONT if button.category == "function" else BUTTON_FONT
                btn = tk.Button(pad, text=button.title, bg=bg, fg=fg, font=font,
                                activebackground=bg, relief="flat",
                                command=lambda b=button: self.press(b))
                btn.grid(row=r, column=column, columnspan=span, sticky="nsew", padx=4, pady=4)
                self.buttons[button] = btn
                column += span
            pad.grid_rowconfigure(r, weight=1)
        for c in range(4):
            pad.grid_columnconfigure(c, weight=1)

    # -------------------------
    # Input handlers
    # -------------------------
    def press(self, button: Button):
        """Forward one key press to the controller."""
        self.controller.receive_input(button)

    def _on_key(self, event):
        button = KEYSYM_BUTTONS.get(event.keysym)
        if button is None and event.char:
            try:
                button = Button.from_key(event.char)
            except ValueError:
                logger.debug("Unmapped key %r", event.char)
                return
        if button is not None:
            self.press(button)
