import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from backend.buttons import Button
from backend.engine import ArithmeticEngine, InternalStateError

logger = logging.getLogger(__name__)


@dataclass
class DisplayState:
    text: str = "0"
    is_typing_fresh: bool = True
    last_input: Optional[Button] = None


def format_number(value: float) -> str:
    """Whole numbers show without a decimal point; everything else as Python prints it."""
    value = float(value)
    if math.isfinite(value) and value % 1 == 0:
        return "%.0f" % value
    return repr(value)


class DisplayController:
    """
    Owns the display text and routes key presses.

    Digits and the decimal point are typed straight into the display; every other
    key commits the shown number to the ArithmeticEngine and shows its answer.
    """

    def __init__(self, engine: Optional[ArithmeticEngine] = None,
                 on_change: Optional[Callable[[str], None]] = None):
        self.engine = engine if engine is not None else ArithmeticEngine()
        self.state = DisplayState()
        self.on_change = on_change

    @property
    def display(self) -> str:
        return self.state.text

    @property
    def value(self) -> float:
        try:
            return float(self.state.text)
        except ValueError:
            logger.error("Display text %r is not a number", self.state.text)
            raise InternalStateError(f"Cannot convert display text {self.state.text!r} to a number") from None

    def receive_input(self, button: Button) -> None:
        if button.is_digit_entry:
            accepted = self._type(button)
        else:
            accepted = self._commit(button)

        if accepted:
            self.state.last_input = button
        else:
            logger.debug("Ignored %s (display %r)", button.title, self.state.text)

    def press_keys(self, symbols: Iterable[str]) -> str:
        """Feed a sequence of key symbols, e.g. '3+4=', and return the final display."""
        for symbol in symbols:
            self.receive_input(Button.from_key(symbol))
        return self.display

    # -------------------------
    # Digit entry
    # -------------------------
    def _type(self, button: Button) -> bool:
        s = self.state
        if s.is_typing_fresh:
            # do not stack leading zeros
            if button is Button.ZERO and self.value == 0:
                return False
            if button is Button.DECIMAL:
                self._set_text("0" + button.title)
            else:
                self._set_text(button.title)
            s.is_typing_fresh = False
            return True

        if button is Button.DECIMAL and "." in s.text:
            return False
        self._set_text(s.text + button.title)
        return True

    # -------------------------
    # Committing keys
    # -------------------------
    def _commit(self, button: Button) -> bool:
        s = self.state
        # two operators in a row: keep the first one; AC always goes through
        if button is not Button.AC and s.last_input is not None and s.last_input.is_operator:
            return False

        s.is_typing_fresh = True
        result = self.engine.apply(button, self.value)
        if result is not None:
            self._set_text(format_number(result))
        return True

    def _set_text(self, text: str) -> None:
        self.state.text = text
        if self.on_change is not None:
            self.on_change(text)
