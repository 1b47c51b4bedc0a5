# -*- coding: utf-8 -*-

"""
Finitely presented categories, i.e. free categories on finite graphs.

This module is to categories what :mod:`fincats.finset` is to sets: a finitary,
combinatorial setting where explicit computations can be carried out.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Vertex
    Edge
    Path
    FinCat
    FinCatGraph
    FreeFinCatGraph

Axioms
------

>>> from fincats.graph import Graph
>>> g = Graph(3, [0, 1], [1, 2])
>>> C = FinCat.from_graph(g)
>>> f, h = Path.from_edge(g, 0), Path.from_edge(g, 1)
>>> assert C.compose(C.id(C.dom(f)), f) == f == C.compose(f, C.id(C.cod(f)))
>>> assert C.compose(f, h) == f >> h == Path.from_edges(g, [0, 1])
>>> assert (C.nobjects(), C.nhom_generators()) == (3, 2)
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from fincats import config
from fincats.cat import Cat
from fincats.finset import FinSet
from fincats.graph import Graph
from fincats.utils import (
    factory_name,
    assert_isinstance,
    assert_isindex,
    Composable,
    EmptyPathError,
    PathBoundaryMismatchError,
)


@dataclass(frozen=True)
class Vertex:
    """
    Vertex in a graph, i.e. an object of a free category.

    Like :class:`Edge`, this wrapper type is used to tell objects apart from
    raw indices.

    Parameters:
        vertex : The wrapped vertex.
    """
    vertex: Any

    def to_tree(self) -> dict:
        return {'factory': factory_name(type(self)), 'vertex': self.vertex}

    @classmethod
    def from_tree(cls, tree: dict) -> Vertex:
        return cls(tree['vertex'])


@dataclass(frozen=True)
class Edge:
    """
    Edge in a graph, i.e. a generating arrow of a free category.

    Like :class:`Vertex`, this wrapper type is used to tell generators apart
    from raw indices.

    Parameters:
        edge : The wrapped edge.
    """
    edge: Any

    def to_tree(self) -> dict:
        return {'factory': factory_name(type(self)), 'edge': self.edge}

    @classmethod
    def from_tree(cls, tree: dict) -> Edge:
        return cls(tree['edge'])


class Path(Composable[Vertex]):
    """
    Path in a graph, i.e. an arrow of a free category.

    The path may be empty but always has definite start and end points, i.e.
    source and target vertices.

    Parameters:
        edges : The tuple of edges in the path.
        src : The source vertex.
        tgt : The target vertex.

    Tip
    ---
    Paths are better built from a graph with :meth:`Path.from_edge`,
    :meth:`Path.from_edges` and :meth:`Path.id`, which fill in the endpoints.

    >>> g = Graph(2, [0, 1], [1, 0])
    >>> assert Path.from_edges(g, [0, 1]) == Path((0, 1), 0, 0)

    Note
    ----
    Concatenation only checks the endpoints, so a path is contiguous whenever
    its pieces are built from the same graph.

    Paths are immutable, so they can be used as keys in a dict.
    """
    def __init__(self, edges: Sequence, src, tgt):
        self._edges, self._src, self._tgt = tuple(edges), src, tgt

    @property
    def edges(self) -> tuple:
        """ The tuple of edges in the path. """
        return self._edges

    @property
    def src(self):
        """ The source vertex. """
        return self._src

    @property
    def tgt(self):
        """ The target vertex. """
        return self._tgt

    @property
    def dom(self) -> Vertex:
        """ The source of the path as a :class:`Vertex`. """
        return Vertex(self.src)

    @property
    def cod(self) -> Vertex:
        """ The target of the path as a :class:`Vertex`. """
        return Vertex(self.tgt)

    @classmethod
    def from_edge(cls, graph: Graph, edge) -> Path:
        """
        The path of length one with a given edge.

        Parameters:
            graph : The graph the edge lives in.
            edge : The edge, raw or as an :class:`Edge`.
        """
        edge = edge.edge if isinstance(edge, Edge) else edge
        return cls((edge, ), graph.src(edge), graph.tgt(edge))

    @classmethod
    def from_edges(cls, graph: Graph, edges: Sequence,
                   scan: bool = None) -> Path:
        """
        The path with a given nonempty list of edges.

        Parameters:
            graph : The graph the edges live in.
            edges : The edges, from first to last.
            scan : Whether to check that consecutive edges are contiguous,
                   default is :code:`config.SCAN_PATHS`.

        Raises:
            EmptyPathError : If there are no edges, use :meth:`Path.id`.
            PathBoundaryMismatchError : If scanning a discontiguous path.

        Example
        -------
        >>> g = Graph(3, [0, 1], [1, 2])
        >>> try:
        ...     Path.from_edges(g, [1, 0], scan=True)
        ... except PathBoundaryMismatchError as error:
        ...     assert (error.left, error.right) == (2, 0)
        """
        edges = tuple(e.edge if isinstance(e, Edge) else e for e in edges)
        if not edges:
            raise EmptyPathError
        for edge in edges:
            assert_isindex(edge, graph.ne(), "edge")
        if config.SCAN_PATHS if scan is None else scan:
            for e, e_ in zip(edges, edges[1:]):
                if graph.tgt(e) != graph.src(e_):
                    raise PathBoundaryMismatchError(
                        graph.tgt(e), graph.src(e_))
        return cls(edges, graph.src(edges[0]), graph.tgt(edges[-1]))

    @classmethod
    def empty(cls, vertex) -> Path:
        """ The empty path on a raw vertex. """
        return cls((), vertex, vertex)

    @classmethod
    def id(cls, vertex) -> Path:
        """
        The identity arrow on a vertex, i.e. the empty path.

        Parameters:
            vertex : The vertex, raw or as a :class:`Vertex`.

        Example
        -------
        >>> assert Path.id(Vertex(1)) == Path.id(1) == Path((), 1, 1)
        """
        return cls.empty(vertex.vertex if isinstance(vertex, Vertex)
                         else vertex)

    def then(self, other: Path) -> Path:
        """
        The concatenation of two paths, called with :code:`>>`.

        Parameters:
            other : The path to append.

        Raises:
            PathBoundaryMismatchError : If :code:`self.tgt != other.src`.
        """
        assert_isinstance(other, Path)
        if self.tgt != other.src:
            raise PathBoundaryMismatchError(self.tgt, other.src)
        return type(self)(self.edges + other.edges, self.src, other.tgt)

    def __iter__(self):
        for edge in self.edges:
            yield edge

    def __len__(self):
        return len(self.edges)

    def __eq__(self, other):
        return isinstance(other, Path)\
            and (self.edges, self.src, self.tgt)\
            == (other.edges, other.src, other.tgt)

    def __hash__(self):
        return hash((self.edges, self.src, self.tgt))

    def __repr__(self):
        return factory_name(type(self))\
            + f"({repr(self.edges)}, {repr(self.src)}, {repr(self.tgt)})"

    def to_tree(self) -> dict:
        """
        Serialise a path, see :func:`fincats.utils.dumps`.

        Example
        -------
        >>> Path((0, 1), 0, 2).to_tree()
        {'factory': 'fincat.Path', 'edges': [0, 1], 'src': 0, 'tgt': 2}
        """
        return {
            'factory': factory_name(type(self)),
            'edges': list(self.edges), 'src': self.src, 'tgt': self.tgt}

    @classmethod
    def from_tree(cls, tree: dict) -> Path:
        return cls(tree['edges'], tree['src'], tree['tgt'])


class FinCat(Cat):
    """
    Abstract finitely presented category, with finitely many objects and
    generating arrows.
    """
    @abstractmethod
    def nobjects(self) -> int:
        """ Number of objects in the finitely presented category. """

    @abstractmethod
    def nhom_generators(self) -> int:
        """ Number of generating arrows in the finitely presented category. """

    def objects(self) -> FinSet:
        return FinSet(self.nobjects())

    @staticmethod
    def from_graph(graph: Graph) -> FreeFinCatGraph:
        """ The free category on a graph. """
        return FreeFinCatGraph(graph)


class FinCatGraph(FinCat):
    """
    Abstract category with a finite generating graph.

    Parameters:
        graph : The generating graph, shared not copied.
    """
    def __init__(self, graph: Graph):
        assert_isinstance(graph, Graph)
        self.graph = graph

    def nobjects(self) -> int:
        return self.graph.nv()

    def nhom_generators(self) -> int:
        return self.graph.ne()

    def __eq__(self, other):
        return type(self) is type(other) and self.graph == other.graph

    def __hash__(self):
        return hash((type(self), self.graph))

    def __repr__(self):
        return f"{factory_name(type(self))}({repr(self.graph)})"


class FreeFinCatGraph(FinCatGraph):
    """
    Free category generated by a finite graph.

    The objects of the free category are vertices in the graph and the arrows
    are (possibly empty) paths.

    Parameters:
        graph : The generating graph.

    Example
    -------
    >>> C = FreeFinCatGraph(Graph(2, [0], [1]))
    >>> f = Path.from_edge(C.graph, 0)
    >>> assert (C.dom(f), C.cod(f)) == (Vertex(0), Vertex(1))
    >>> assert C.id(Vertex(1)) == Path.empty(1)
    """
    def dom(self, f: Path) -> Vertex:
        return Vertex(f.src)

    def cod(self, f: Path) -> Vertex:
        return Vertex(f.tgt)

    def id(self, x: Vertex) -> Path:
        return Path.id(x)

    def compose(self, f: Path, g: Path) -> Path:
        return f.then(g)

    def to_tree(self) -> dict:
        return {
            'factory': factory_name(type(self)),
            'graph': self.graph.to_tree()}

    @classmethod
    def from_tree(cls, tree: dict) -> FreeFinCatGraph:
        return cls(Graph.from_tree(tree['graph']))
