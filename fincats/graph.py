# -*- coding: utf-8 -*-

"""
Finite directed multigraphs, the generators of free categories.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Graph

Example
-------
>>> g = Graph(3, [0, 1], [1, 2])
>>> assert (g.nv(), g.ne()) == (3, 2)
>>> assert [(g.src(e), g.tgt(e)) for e in g.edges()] == [(0, 1), (1, 2)]
>>> assert Graph.from_networkx(g.to_networkx()) == g
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from networkx import MultiDiGraph

from fincats import messages
from fincats.utils import factory_name, assert_isindex


class Graph:
    """
    A graph with vertices :code:`range(nv)` and edges :code:`range(ne)`,
    where edge :code:`e` goes from :code:`src[e]` to :code:`tgt[e]`.

    Parameters:
        nv : The number of vertices.
        src : The source vertex of each edge.
        tgt : The target vertex of each edge.

    Example
    -------
    >>> Graph(2, [0], [1])
    graph.Graph(2, src=[0], tgt=[1])

    Note
    ----
    Graphs are never mutated, they can be shared by any number of categories.
    """
    def __init__(self, nv: int = 0, src: Iterable[int] = (),
                 tgt: Iterable[int] = ()):
        src, tgt = (np.asarray(list(xs), dtype=int) for xs in (src, tgt))
        if len(src) != len(tgt):
            raise ValueError(messages.WRONG_EDGE_ARRAYS.format(
                len(src), len(tgt)))
        for array in (src, tgt):
            if len(array) and (array.min() < 0 or array.max() >= nv):
                raise ValueError(messages.VERTEX_OUT_OF_RANGE.format(
                    nv, array.tolist()))
        self._nv, self._src, self._tgt = nv, src, tgt

    def nv(self) -> int:
        """ The number of vertices. """
        return self._nv

    def ne(self) -> int:
        """ The number of edges. """
        return len(self._src)

    def vertices(self) -> range:
        """ The vertices of the graph. """
        return range(self.nv())

    def edges(self) -> range:
        """ The edges of the graph. """
        return range(self.ne())

    def src(self, edge: int) -> int:
        """ The source vertex of an edge. """
        assert_isindex(edge, self.ne(), "edge")
        return int(self._src[edge])

    def tgt(self, edge: int) -> int:
        """ The target vertex of an edge. """
        assert_isindex(edge, self.ne(), "edge")
        return int(self._tgt[edge])

    def __eq__(self, other):
        return isinstance(other, Graph) and self.nv() == other.nv()\
            and np.array_equal(self._src, other._src)\
            and np.array_equal(self._tgt, other._tgt)

    def __hash__(self):
        return hash(repr(self))

    def __repr__(self):
        return factory_name(type(self)) + f"({self.nv()}, "\
            f"src={self._src.tolist()}, tgt={self._tgt.tolist()})"

    def to_networkx(self) -> MultiDiGraph:
        """
        Translate a graph into a :code:`networkx.MultiDiGraph` with nodes
        :code:`range(nv)` where each edge is keyed by its index.

        Example
        -------
        >>> graph = Graph(2, [0, 0], [1, 1]).to_networkx()
        >>> assert list(graph.edges(keys=True)) == [(0, 1, 0), (0, 1, 1)]
        """
        graph = MultiDiGraph()
        graph.add_nodes_from(self.vertices())
        for edge in self.edges():
            graph.add_edge(self.src(edge), self.tgt(edge), key=edge)
        return graph

    @classmethod
    def from_networkx(cls, graph: MultiDiGraph) -> Graph:
        """
        Translate a :code:`networkx` graph, numbering its nodes in iteration
        order. Edges of a multigraph keyed by :code:`range(ne)`, as written by
        :meth:`to_networkx`, are numbered by their key, other edges in the
        order of :code:`graph.edges`.

        Parameters:
            graph : The :code:`networkx` graph, directed or not.

        Example
        -------
        >>> from networkx import DiGraph
        >>> assert Graph.from_networkx(DiGraph([("x", "y"), ("y", "z")]))\\
        ...     == Graph(3, [0, 1], [1, 2])
        """
        index = {node: i for i, node in enumerate(graph.nodes)}
        edges = list(graph.edges(keys=True)) if graph.is_multigraph()\
            else list(graph.edges)
        keys = [edge[2] for edge in edges] if graph.is_multigraph() else []
        if keys and all(isinstance(key, int) for key in keys)\
                and sorted(keys) == list(range(len(edges))):
            edges.sort(key=lambda edge: edge[2])
        src, tgt = [], []
        for source, target, *_ in edges:
            src.append(index[source])
            tgt.append(index[target])
        return cls(len(index), src, tgt)

    def to_tree(self) -> dict:
        """
        Serialise a graph, see :func:`fincats.utils.dumps`.

        Example
        -------
        >>> Graph(2, [0], [1]).to_tree()
        {'factory': 'graph.Graph', 'nv': 2, 'src': [0], 'tgt': [1]}
        """
        return {
            'factory': factory_name(type(self)), 'nv': self.nv(),
            'src': self._src.tolist(), 'tgt': self._tgt.tolist()}

    @classmethod
    def from_tree(cls, tree: dict) -> Graph:
        """
        Decode a serialised graph, see :func:`fincats.utils.loads`.

        Parameters:
            tree : fincats serialisation.
        """
        return cls(tree['nv'], tree['src'], tree['tgt'])
