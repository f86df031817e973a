from __future__ import annotations

import logging
from uuid import uuid1

import dfa
from dfa.utils import dfa2dict, dict2dfa

from dfarun.automaton import Automaton
from dfarun.errors import InvalidAutomaton
from dfarun.graph import from_dict, to_dict


__all__ = ['from_dfa', 'to_dfa']


logger = logging.getLogger(__name__)


def to_dfa(automaton: Automaton) -> dfa.DFA:
    """Converts to a dfa.DFA, routing undefined transitions to a fresh sink.

    dfa.DFA has no notion of a failing transition, so partial automata with
    on_undefined='raise' are rejected.
    """
    if automaton.on_undefined == 'raise' and not automaton.is_total:
        raise InvalidAutomaton(
            "Partial automaton with on_undefined='raise' has no dfa.DFA form."
        )
    sink = f'sink-{uuid1()}'  # Unique name for the sink.
    graph, start, _ = to_dict(automaton.complete(sink))
    logger.debug('Converting automaton with %d states to dfa.DFA.', len(graph))
    return dict2dfa(graph, start)


def from_dfa(lang: dfa.DFA) -> Automaton:
    if lang.inputs is None:
        raise InvalidAutomaton('dfa.DFA must declare its inputs.')
    if not lang.outputs <= {True, False}:
        raise InvalidAutomaton(f'outputs={set(lang.outputs)!r} are not boolean.')

    graph, start = dfa2dict(lang)
    logger.debug('Read %d reachable states from dfa.DFA.', len(graph))
    return from_dict(graph, start, alphabet=lang.inputs)
