"""Dictionary and networkx views of an automaton."""
from __future__ import annotations

from typing import Iterable, Optional

import funcy as fn
import networkx as nx

from dfarun import AutomatonDict, State, Symbol
from dfarun.automaton import Automaton


__all__ = ['from_dict', 'to_dict', 'to_graph']


def to_dict(
        automaton: Automaton,
    ) -> tuple[AutomatonDict, State, frozenset[Symbol]]:
    """Returns {state: (accepting, {symbol: state})}, the start and alphabet.

    Only explicit transitions are listed, so the alphabet is returned too:
    from_dict(*to_dict(m)) reads the same words as m even when m is partial.
    """
    kids = fn.group_values(
        (s, (a, t)) for (s, a), t in automaton.transition.items()
    )
    graph = {
        state: (state in automaton.accepting, dict(kids.get(state, ())))
        for state in automaton.states
    }
    return graph, automaton.start, automaton.alphabet


def from_dict(
        dfa_dict: AutomatonDict,
        start: State,
        alphabet: Optional[Iterable[Symbol]] = None,
    ) -> Automaton:
    """Inverse of to_dict. Alphabet defaults to the letters used."""
    transition = {
        (state, symbol): kid
        for state, (_, kids) in dfa_dict.items()
        for symbol, kid in kids.items()
    }
    if alphabet is None:
        alphabet = {symbol for _, symbol in transition}
    return Automaton(
        states=dfa_dict.keys(),
        alphabet=alphabet,
        transition=transition,
        start=start,
        accepting=(s for s, (label, _) in dfa_dict.items() if label),
    )


def to_graph(automaton: Automaton) -> nx.DiGraph:
    """Transition graph with parallel symbols merged onto one edge."""
    graph = nx.DiGraph()
    for state in automaton.states:
        graph.add_node(
            state,
            accepting=state in automaton.accepting,
            start=state == automaton.start,
        )

    edges = fn.group_values(
        ((s, t), a) for (s, a), t in automaton.transition.items()
    )
    for (src, tgt), symbols in edges.items():
        graph.add_edge(src, tgt, symbols=frozenset(symbols))
    return graph
