from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from backend.buttons import Button
from frontend.gui import CalculatorGUI


@pytest.fixture
def app():
    try:
        window = CalculatorGUI()
    except tk.TclError:
        pytest.skip("no display available")
    yield window
    window.destroy()


def test_every_button_is_drawn(app):
    assert set(app.buttons) == set(Button)
    assert app.buttons[Button.MULTIPLY].cget("text") == "×"


def test_presses_update_display(app):
    assert app.display_var.get() == "0"
    for button in (Button.THREE, Button.ADD, Button.FOUR, Button.EQUALS):
        app.press(button)
    assert app.display_var.get() == "7"


def test_keyboard_events(app):
    app._on_key(SimpleNamespace(keysym="9", char="9"))
    app._on_key(SimpleNamespace(keysym="asterisk", char="*"))
    app._on_key(SimpleNamespace(keysym="2", char="2"))
    app._on_key(SimpleNamespace(keysym="Return", char="\r"))
    assert app.display_var.get() == "18"
    app._on_key(SimpleNamespace(keysym="Escape", char="\x1b"))
    assert app.display_var.get() == "0"


def test_unmapped_keys_are_ignored(app):
    app._on_key(SimpleNamespace(keysym="Shift_L", char=""))
    app._on_key(SimpleNamespace(keysym="question", char="?"))
    assert app.display_var.get() == "0"
