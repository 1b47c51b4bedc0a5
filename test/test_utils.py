# -*- coding: utf-8 -*-

from pytest import raises
from fincats import messages
from fincats.graph import Graph
from fincats.fincat import Vertex, Edge, Path, FreeFinCatGraph
from fincats.utils import *


def test_factory_name():
    assert factory_name(Path) == "fincat.Path"
    assert factory_name(int) == "int"


def test_assert_isinstance():
    assert_isinstance(1, int)
    assert_isinstance(1, (str, int))
    with raises(TypeError) as err:
        assert_isinstance("x", (int, Path))
    assert str(err.value) == messages.TYPE_ERROR.format(
        "int | fincat.Path", "str")


def test_to_and_from_tree():
    g = Graph(3, [0, 1], [1, 2])
    for obj in [g, Vertex(1), Edge(0), Path((0, 1), 0, 2),
                Path.empty(1), FreeFinCatGraph(g)]:
        assert from_tree(obj.to_tree()) == obj
        assert loads(dumps(obj)) == obj


def test_loads_list():
    raw = '[{"factory": "fincat.Vertex", "vertex": 0}, '\
          '{"factory": "fincat.Edge", "edge": 1}]'
    assert loads(raw) == [Vertex(0), Edge(1)]


def test_errors():
    error = PathBoundaryMismatchError(1, 2)
    assert isinstance(error, AxiomError)
    assert (error.left, error.right) == (1, 2)
    assert str(error) == messages.PATH_BOUNDARY_MISMATCH.format(1, 2)
    error = ShapeMismatchError(messages.WRONG_OB_MAP_LENGTH, [0, 1], 3)
    assert isinstance(error, ValueError)
    assert (error.expected, error.actual) == (3, 2)
    assert isinstance(EmptyPathError(), ValueError)
