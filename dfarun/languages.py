"""Sample automata."""
from __future__ import annotations

from dfarun.automaton import Automaton


__all__ = ['a_before_b', 'divisible_by']


DIGITS = '0123456789'


def a_before_b() -> Automaton:
    """Words over {a, b} in which no 'a' follows a 'b'."""
    return Automaton(
        states={0, 1, 2},
        alphabet={'a', 'b'},
        transition={
            (0, 'a'): 0,
            (0, 'b'): 1,
            (1, 'a'): 2,  # An 'a' after a 'b' is fatal.
            (1, 'b'): 1,
            (2, 'a'): 2,
            (2, 'b'): 2,
        },
        start=0,
        accepting={0, 1},
    )


def divisible_by(n: int, base: int = 2) -> Automaton:
    """Numerals in the given base, most significant digit first, divisible by n.

    States are remainders modulo n. The empty word denotes 0.
    """
    if n <= 0:
        raise ValueError('n must be > 0')
    if not (2 <= base <= len(DIGITS)):
        raise ValueError(f'base must be in [2, {len(DIGITS)}]')

    digits = DIGITS[:base]
    return Automaton(
        states=range(n),
        alphabet=digits,
        transition={
            (r, d): (r * base + int(d)) % n for r in range(n) for d in digits
        },
        start=0,
        accepting={0},
    )
