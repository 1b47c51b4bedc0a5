# -*- coding: utf-8 -*-

from pytest import raises
from networkx import MultiDiGraph, DiGraph
from fincats.graph import *


def test_Graph():
    g = Graph(3, [0, 1], [1, 2])
    assert (g.nv(), g.ne()) == (3, 2)
    assert list(g.vertices()) == [0, 1, 2] and list(g.edges()) == [0, 1]
    assert (g.src(0), g.tgt(0), g.src(1), g.tgt(1)) == (0, 1, 1, 2)


def test_Graph_empty():
    g = Graph()
    assert (g.nv(), g.ne()) == (0, 0)
    assert Graph(2).ne() == 0


def test_Graph_src_tgt_are_ints():
    g = Graph(2, [0], [1])
    assert type(g.src(0)) is int and type(g.tgt(0)) is int


def test_Graph_init_errors():
    with raises(ValueError):
        Graph(2, [0, 1], [1])
    with raises(ValueError):
        Graph(2, [0], [2])
    with raises(ValueError):
        Graph(2, [-1], [0])


def test_Graph_eq():
    assert Graph(2, [0], [1]) == Graph(2, (0, ), (1, ))
    assert Graph(2, [0], [1]) != Graph(2, [1], [0])
    assert Graph(2, [0], [1]) != Graph(3, [0], [1])
    assert Graph(2) != 2


def test_Graph_hash():
    assert {Graph(2, [0], [1]): 42}[Graph(2, [0], [1])] == 42


def test_Graph_repr():
    assert repr(Graph(2, [0], [1])) == "graph.Graph(2, src=[0], tgt=[1])"


def test_Graph_to_networkx():
    graph = Graph(2, [0, 0, 1], [1, 1, 1]).to_networkx()
    assert isinstance(graph, MultiDiGraph)
    assert list(graph.nodes) == [0, 1]
    assert sorted(graph.edges(keys=True)) == [(0, 1, 0), (0, 1, 1), (1, 1, 2)]


def test_Graph_from_networkx():
    assert Graph.from_networkx(DiGraph([("a", "b"), ("b", "c")]))\
        == Graph(3, [0, 1], [1, 2])
    g = Graph(3, [0, 0, 2], [1, 1, 0])
    assert Graph.from_networkx(g.to_networkx()) == g


def test_Graph_tree():
    g = Graph(3, [0, 1], [1, 2])
    assert g.to_tree() == {
        'factory': 'graph.Graph', 'nv': 3, 'src': [0, 1], 'tgt': [1, 2]}
    assert Graph.from_tree(g.to_tree()) == g


def test_Graph_src_tgt_out_of_range():
    g = Graph(3, [0, 1], [1, 2])
    for edge in (-1, 2):
        with raises(IndexError):
            g.src(edge)
        with raises(IndexError):
            g.tgt(edge)


def test_Graph_networkx_edge_order():
    g = Graph(2, [1, 0], [0, 1])
    assert Graph.from_networkx(g.to_networkx()) == g
    g = Graph(3, [2, 0, 1, 0], [0, 1, 2, 1])
    assert Graph.from_networkx(g.to_networkx()) == g


def test_Graph_from_networkx_default_keys():
    graph = MultiDiGraph()
    graph.add_edges_from([("b", "a"), ("a", "b"), ("a", "b")])
    assert Graph.from_networkx(graph) == Graph(2, [0, 1, 1], [1, 0, 0])
