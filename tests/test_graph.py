from pytest import raises

from dfarun import InvalidAutomaton, construct, from_dict, to_dict, to_graph
from dfarun.languages import a_before_b


WORDS = ['', 'a', 'b', 'ab', 'ba', 'aabbb', 'aba', 'bbbba']


def test_to_dict():
    graph, start, alphabet = to_dict(a_before_b())
    assert start == 0
    assert alphabet == {'a', 'b'}
    assert graph == {
        0: (True, {'a': 0, 'b': 1}),
        1: (True, {'a': 2, 'b': 1}),
        2: (False, {'a': 2, 'b': 2}),
    }


def test_dict_round_trip():
    lang = a_before_b()
    lang2 = from_dict(*to_dict(lang))
    assert lang2 == lang
    assert all(lang.run(w) == lang2.run(w) for w in WORDS)


def test_dict_round_trip_partial():
    lang = construct({0, 1}, {'a', 'b'}, {(0, 'a'): 1}, 0, {1})
    graph, start, alphabet = to_dict(lang)
    assert graph == {0: (False, {'a': 1}), 1: (True, {})}

    lang2 = from_dict(graph, start, alphabet)
    assert lang2 == lang
    assert lang2.alphabet == {'a', 'b'}
    for word in ['', 'a', 'b', 'ab', 'ba']:
        assert lang2.run(word) == lang.run(word)


def test_from_dict_partial():
    lang = from_dict({
        'q0': (False, {'a': 'q1'}),
        'q1': (True, {}),
    }, start='q0')
    assert lang.alphabet == {'a'}
    assert lang.run('a')
    assert not lang.run('aa')

    lang2 = from_dict({'q0': (True, {})}, start='q0', alphabet={'a', 'b'})
    assert lang2.alphabet == {'a', 'b'}
    assert not lang2.run('b')

    with raises(InvalidAutomaton):
        from_dict({'q0': (True, {'a': 'q9'})}, start='q0')


def test_to_graph():
    graph = to_graph(a_before_b())
    assert set(graph.nodes) == {0, 1, 2}
    assert graph.nodes[0]['start']
    assert not graph.nodes[1]['start']
    assert graph.nodes[1]['accepting']
    assert not graph.nodes[2]['accepting']

    assert graph.edges[0, 1]['symbols'] == {'b'}
    assert graph.edges[2, 2]['symbols'] == {'a', 'b'}
    assert graph.number_of_edges() == 5


def test_to_graph_isolated_state():
    lang = construct({0, 1}, {'a'}, {(0, 'a'): 0}, start=0, accepting=set())
    graph = to_graph(lang)
    assert set(graph.nodes) == {0, 1}
    assert graph.degree(1) == 0
