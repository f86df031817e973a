from __future__ import annotations

from typing import Any


__all__ = [
    'AutomatonError',
    'InvalidAutomaton',
    'SymbolNotInAlphabet',
    'UndefinedTransition',
]


class AutomatonError(Exception):
    pass


class InvalidAutomaton(AutomatonError, ValueError):
    """Raised when a five-tuple violates a structural invariant."""


class SymbolNotInAlphabet(AutomatonError, ValueError):
    def __init__(self, symbol: Any, index: int) -> None:
        super().__init__(f'{symbol!r} at index {index} is not in the alphabet.')
        self.symbol = symbol
        self.index = index


class UndefinedTransition(AutomatonError, KeyError):
    def __init__(self, state: Any, symbol: Any) -> None:
        super().__init__(f'No transition from {state!r} on {symbol!r}.')
        self.state = state
        self.symbol = symbol

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])
