from typing import Any, Hashable, Iterable, Mapping

State = Hashable
Symbol = Hashable
Word = Iterable[Any]
Transitions = Mapping[tuple[State, Symbol], State]
AutomatonDict = dict[State, tuple[bool, dict[Symbol, State]]]

from dfarun.errors import *
from dfarun.automaton import *
from dfarun.graph import *

__all__ = [
    'Automaton',
    'AutomatonDict',
    'AutomatonError',
    'AutomatonMonitor',
    'InvalidAutomaton',
    'SINK',
    'State',
    'Symbol',
    'SymbolNotInAlphabet',
    'Transitions',
    'UndefinedTransition',
    'Word',
    'construct',
    'from_dict',
    'run',
    'to_dict',
    'to_graph',
]
