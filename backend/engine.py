import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from backend.buttons import Button, Operator

logger = logging.getLogger(__name__)


class InternalStateError(RuntimeError):
    """Raised when the calculator reaches a state that indicates a bug, not bad input."""


@dataclass
class EngineState:
    pending_operand: Optional[float] = None
    current_operand: Optional[float] = None
    active_operator: Optional[Operator] = None
    accumulated_result: float = 0.0
    just_evaluated: bool = False


def evaluate(op: Optional[Operator], left: float, right: float) -> float:
    """
    Apply one of the four binary operators in IEEE double precision.

    Division by zero follows floating point rules (inf, -inf or nan) rather than
    raising, so 6 ÷ 0 always shows 'inf'.
    """
    a = np.float64(left)
    b = np.float64(right)
    with np.errstate(all="ignore"):
        if op is Operator.ADD:
            result = a + b
        elif op is Operator.SUBTRACT:
            result = a - b
        elif op is Operator.MULTIPLY:
            result = a * b
        elif op is Operator.DIVIDE:
            result = a / b
        else:
            logger.error("evaluate() called with operator %r", op)
            raise InternalStateError(f"Unsupported operator: {op!r}")
    return float(result)


class ArithmeticEngine:
    """
    Pocket calculator arithmetic: remembers the pending operand and operator
    between presses and decides what the display should show next.
    """

    def __init__(self):
        self.state = EngineState()

    def reset(self) -> float:
        self.state = EngineState()
        return 0.0

    def apply(self, button: Button, current: float) -> Optional[float]:
        """
        Consume a committing button together with the number on the display.
        Returns the value to display, or None when the display stays as it is.
        """
        if button.is_digit_entry:
            logger.error("Digit button %s routed to the arithmetic engine", button)
            raise InternalStateError(f"{button} is handled by the display, not the engine")

        if button is Button.AC:
            result = self.reset()
        elif button is Button.PLUS_MINUS:
            result = -current if current != 0 else None
        elif button is Button.PERCENT:
            result = current * 0.01
        elif button is Button.EQUALS:
            result = self._equals(current)
        else:
            result = self._operator(button.operator, current)

        logger.debug("%s with %r -> %r (%s)", button.title, current, result, self.state)
        return result

    # -------------------------
    # Internal transitions
    # -------------------------
    def _equals(self, current: float) -> Optional[float]:
        s = self.state
        s.just_evaluated = True
        if s.pending_operand is None:
            return None
        if s.current_operand is None:
            # first '=' captures the right-hand side; repeated '=' reuses it
            s.current_operand = current
        return self._perform(s.pending_operand, s.current_operand)

    def _operator(self, op: Operator, current: float) -> Optional[float]:
        s = self.state
        if s.just_evaluated:
            # a fresh chain starts from the shown result
            s.just_evaluated = False
            s.pending_operand = None

        if s.pending_operand is not None:
            result = self._perform(s.pending_operand, current)
            s.active_operator = op
            return result

        s.active_operator = op
        s.current_operand = None
        s.pending_operand = current
        return None

    def _perform(self, left: float, right: float) -> float:
        s = self.state
        s.accumulated_result = evaluate(s.active_operator, left, right)
        s.pending_operand = s.accumulated_result
        return s.accumulated_result
