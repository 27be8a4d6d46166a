from enum import Enum
from typing import Dict, Optional


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


class Button(Enum):
    """
    Every key on the pocket calculator. The value is the title printed on the key.
    """

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DECIMAL = "."

    EQUALS = "="
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    AC = "AC"
    PLUS_MINUS = "±"
    PERCENT = "%"

    @property
    def title(self) -> str:
        return self.value

    @property
    def is_digit_entry(self) -> bool:
        """Digits and the decimal point are typed into the display, never computed."""
        return self in _DIGIT_ENTRY

    @property
    def operator(self) -> Optional[Operator]:
        return _OPERATORS.get(self)

    @property
    def is_operator(self) -> bool:
        return self in _OPERATORS

    @property
    def category(self) -> str:
        # used by the front end for colors
        if self in _DIGIT_ENTRY:
            return "digit"
        if self in (Button.AC, Button.PLUS_MINUS, Button.PERCENT):
            return "function"
        return "operator"

    @classmethod
    def from_key(cls, symbol: str) -> "Button":
        """
        Look up a button from a key title or a keyboard alias (e.g. '*' for ×).
        Raises ValueError for symbols that are not on the keypad.
        """
        if symbol in _ALIASES:
            return _ALIASES[symbol]
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown calculator key: {symbol!r}") from None


_DIGIT_ENTRY = frozenset({
    Button.ZERO, Button.ONE, Button.TWO, Button.THREE, Button.FOUR,
    Button.FIVE, Button.SIX, Button.SEVEN, Button.EIGHT, Button.NINE,
    Button.DECIMAL,
})

_OPERATORS: Dict[Button, Operator] = {
    Button.ADD: Operator.ADD,
    Button.SUBTRACT: Operator.SUBTRACT,
    Button.MULTIPLY: Operator.MULTIPLY,
    Button.DIVIDE: Operator.DIVIDE,
}

_ALIASES: Dict[str, Button] = {
    "*": Button.MULTIPLY,
    "x": Button.MULTIPLY,
    "/": Button.DIVIDE,
    "c": Button.AC,
    "C": Button.AC,
    "a": Button.AC,
    "n": Button.PLUS_MINUS,
    "~": Button.PLUS_MINUS,
    "\r": Button.EQUALS,
    "\n": Button.EQUALS,
    ",": Button.DECIMAL,
}

# keypad rows as drawn on the calculator face
KEYPAD_ROWS = [
    [Button.AC, Button.PLUS_MINUS, Button.PERCENT, Button.DIVIDE],
    [Button.SEVEN, Button.EIGHT, Button.NINE, Button.MULTIPLY],
    [Button.FOUR, Button.FIVE, Button.SIX, Button.SUBTRACT],
    [Button.ONE, Button.TWO, Button.THREE, Button.ADD],
    [Button.ZERO, Button.DECIMAL, Button.EQUALS],
]
