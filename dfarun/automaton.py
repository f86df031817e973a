from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Literal, Mapping

import attr
import funcy as fn

from dfarun import State, Symbol, Transitions, Word
from dfarun.errors import InvalidAutomaton, SymbolNotInAlphabet
from dfarun.errors import UndefinedTransition


__all__ = ['Automaton', 'AutomatonMonitor', 'SINK', 'construct', 'run']


logger = logging.getLogger(__name__)

Policy = Literal['reject', 'raise']
POLICIES = ('reject', 'raise')


class _Sink:
    """Implicit absorbing, non-accepting state of a reject-completed DFA."""

    def __repr__(self) -> str:
        return 'SINK'

    def __reduce__(self) -> str:
        return 'SINK'


SINK: Any = _Sink()


def _freeze(transition: Transitions) -> Mapping[tuple[State, Symbol], State]:
    return MappingProxyType(dict(transition))


def _token_set(tokens: Iterable[Any]) -> frozenset[Any]:
    try:
        return frozenset(tokens)
    except TypeError as err:
        raise InvalidAutomaton(f'states and symbols must be hashable: {err}') from err


def _is_member(elem: Any, collection: frozenset[Any]) -> bool:
    try:
        return elem in collection
    except TypeError:  # Unhashable tokens belong to no set.
        return False


@attr.frozen
class Automaton:
    """Immutable five-tuple (states, alphabet, transition, start, accepting).

    The transition function may be partial. Missing (state, symbol) pairs
    either lead to the implicit non-accepting SINK (on_undefined='reject')
    or raise UndefinedTransition (on_undefined='raise').
    """
    states: frozenset[State] = attr.ib(converter=_token_set)
    alphabet: frozenset[Symbol] = attr.ib(converter=_token_set)
    transition: Mapping[tuple[State, Symbol], State] = attr.ib(
        converter=_freeze, hash=False, repr=lambda m: repr(dict(m)),
    )
    start: State
    accepting: frozenset[State] = attr.ib(converter=_token_set, factory=frozenset)
    on_undefined: Policy = 'reject'

    def __attrs_post_init__(self) -> None:
        if not self.states:
            raise InvalidAutomaton('states must be non-empty.')
        if SINK in self.states:
            raise InvalidAutomaton('SINK is reserved and cannot be a state.')
        if not _is_member(self.start, self.states):
            raise InvalidAutomaton(f'start={self.start!r} is not a state.')
        if unknown := self.accepting - self.states:
            raise InvalidAutomaton(f'accepting={set(unknown)!r} are not states.')
        if self.on_undefined not in POLICIES:
            raise InvalidAutomaton(
                f'on_undefined={self.on_undefined!r} must be one of {POLICIES}.'
            )

        for key, target in self.transition.items():
            if not (isinstance(key, tuple) and len(key) == 2):
                raise InvalidAutomaton(f'{key!r} is not a (state, symbol) pair.')
            state, symbol = key
            if not _is_member(state, self.states):
                raise InvalidAutomaton(f'{key!r} leaves unknown state {state!r}.')
            if not _is_member(symbol, self.alphabet):
                raise InvalidAutomaton(f'{key!r} reads unknown symbol {symbol!r}.')
            if not _is_member(target, self.states):
                raise InvalidAutomaton(f'{key!r} enters unknown state {target!r}.')

        logger.debug(
            'Constructed automaton: %d states, %d symbols, %d transitions.',
            len(self.states), len(self.alphabet), len(self.transition),
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # mappingproxy does not pickle.
        return Automaton, (
            self.states, self.alphabet, dict(self.transition),
            self.start, self.accepting, self.on_undefined,
        )

    @property
    def is_total(self) -> bool:
        """True iff every (state, symbol) pair has an explicit successor."""
        # Keys are validated to lie in states x alphabet and are unique.
        return len(self.transition) == len(self.states) * len(self.alphabet)

    def _advance(self, state: State, symbol: Symbol, index: int) -> State:
        if not _is_member(symbol, self.alphabet):
            raise SymbolNotInAlphabet(symbol, index)
        if state is SINK:
            return SINK
        try:
            return self.transition[state, symbol]
        except KeyError:
            if self.on_undefined == 'raise':
                raise UndefinedTransition(state, symbol) from None
            return SINK

    def step(self, state: State, symbol: Symbol) -> State:
        """Returns the successor of state on symbol."""
        if state is not SINK and not _is_member(state, self.states):
            raise ValueError(f'{state!r} is not a state.')
        return self._advance(state, symbol, 0)

    def trace(self, word: Word) -> list[State]:
        """Returns the states visited while reading word, start included."""
        state = self.start
        visited = [state]
        for index, symbol in enumerate(word):
            state = self._advance(state, symbol, index)
            visited.append(state)
        return visited

    def run(self, word: Word) -> bool:
        state = self.start
        for index, symbol in enumerate(word):
            state = self._advance(state, symbol, index)
        return state in self.accepting

    def accepts(self, word: Word) -> bool:
        return self.run(word)

    def __contains__(self, word: Word) -> bool:
        return self.run(word)

    def monitor(self) -> AutomatonMonitor:
        return AutomatonMonitor(automaton=self, state=self.start)

    def reachable(self) -> frozenset[State]:
        """States reachable from start through explicit transitions."""
        kids = fn.group_values((s, t) for (s, _), t in self.transition.items())
        seen = {self.start}
        stack = [self.start]
        while stack:
            for kid in kids.get(stack.pop(), ()):
                if kid not in seen:
                    seen.add(kid)
                    stack.append(kid)
        return frozenset(seen)

    def complete(self, sink: State) -> Automaton:
        """Returns an equivalent automaton with a total transition function.

        The caller named sink state is only added if some pair is undefined.
        """
        if self.is_total:
            return self
        if _is_member(sink, self.states):
            raise InvalidAutomaton(f'sink={sink!r} is already a state.')

        states = self.states | {sink}
        transition = {
            (s, a): self.transition.get((s, a), sink)
            for s in states for a in self.alphabet
        }
        logger.debug(
            'Completed automaton with sink %r (%d new transitions).',
            sink, len(transition) - len(self.transition),
        )
        return attr.evolve(self, states=states, transition=transition)


@attr.frozen
class AutomatonMonitor:
    """Immutable cursor for feeding an automaton one symbol at a time."""
    automaton: Automaton = attr.ib(repr=False)
    state: State
    index: int = 0

    def __attrs_post_init__(self) -> None:
        if self.state is not SINK and \
                not _is_member(self.state, self.automaton.states):
            raise ValueError(f'{self.state!r} is not a state.')

    @property
    def accepts(self) -> bool:
        return self.state in self.automaton.accepting

    def update(self, symbol: Symbol) -> AutomatonMonitor:
        state = self.automaton._advance(self.state, symbol, self.index)
        return attr.evolve(self, state=state, index=self.index + 1)

    def feed(self, word: Word) -> AutomatonMonitor:
        monitor = self
        for symbol in word:
            monitor = monitor.update(symbol)
        return monitor


def construct(
        states: Iterable[State],
        alphabet: Iterable[Symbol],
        transition: Transitions,
        start: State,
        accepting: Iterable[State],
        on_undefined: Policy = 'reject',
    ) -> Automaton:
    return Automaton(
        states=states,
        alphabet=alphabet,
        transition=transition,
        start=start,
        accepting=accepting,
        on_undefined=on_undefined,
    )


def run(automaton: Automaton, word: Word) -> bool:
    return automaton.run(word)
