# -*- coding: utf-8 -*-

"""
Functors out of finitely presented categories.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    FinDomFunctor
    FinDomFunctorVector
    FinFunctor

.. admonition:: Functions

    .. autosummary::
        :template: function.rst
        :nosignatures:
        :toctree:

        coerce_ob
        coerce_hom
        is_functorial

Axioms
------

A functor out of a free category is given by the image of each vertex and
each edge, it is extended to paths by composition in the codomain.

>>> from fincats.graph import Graph
>>> from fincats.fincat import FreeFinCatGraph, Path
>>> from fincats.cat import Box, Id
>>> g = Graph(3, [0, 1], [1, 2])
>>> C = FreeFinCatGraph(g)
>>> f, h = Box('f', 'x', 'y'), Box('h', 'y', 'z')
>>> F = FinDomFunctorVector(['x', 'y', 'z'], [f, h], C)
>>> assert F.is_functorial()
>>> p, q = Path.from_edge(g, 0), Path.from_edge(g, 1)
>>> assert F(p >> q) == F(p) >> F(q) == f >> h
>>> assert F(Path.id(0)) == Id(F.ob_map(0))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from functools import reduce as fold

from fincats import messages
from fincats.cat import Cat, TypeCat
from fincats.finset import FinDomFunction
from fincats.fincat import FinCat, FinCatGraph, Vertex, Edge, Path
from fincats.utils import (
    factory_name,
    assert_isinstance,
    assert_isindex,
    ShapeMismatchError,
)

logger = logging.getLogger(__name__)


class FinDomFunctor(ABC):
    """
    Abstract functor out of a finitely presented category.

    Parameters:
        dom : The domain, a finitely presented category.
        cod : The codomain, any category.

    Note
    ----
    Subclasses only need to give the image of objects and generators, the
    image of any arrow is then computed by :meth:`hom_map`.
    """
    def __init__(self, dom: FinCat, cod: Cat):
        assert_isinstance(dom, FinCat)
        assert_isinstance(cod, Cat)
        self.dom, self.cod = dom, cod

    @abstractmethod
    def ob_map(self, x):
        """
        The image of an object.

        Parameters:
            x : An object of the domain, raw or as a :class:`Vertex`.
        """

    @abstractmethod
    def generator_map(self, f):
        """
        The image of a generating arrow.

        Parameters:
            f : A generator of the domain, raw or as an :class:`Edge`.
        """

    def hom_map(self, f):
        """
        The image of an arrow, i.e. the composition of the images of each
        generator in a path, starting from the identity on its source.

        Parameters:
            f : A :class:`Path` or a generator, raw or as an :class:`Edge`.
        """
        if not isinstance(f, Path):
            return self.generator_map(f)
        return fold(
            self.cod.compose, map(self.generator_map, f.edges),
            self.cod.id(self.ob_map(f.src)))

    def is_functorial(self) -> bool:
        """
        Whether the images of generators have the image of their endpoints as
        domain and codomain, which is enough for the functor to be well-defined
        on every path.
        """
        assert_isinstance(self.dom, FinCatGraph)
        graph = self.dom.graph
        for edge in graph.edges():
            f = self.generator_map(edge)
            source, target = (
                self.ob_map(graph.src(edge)), self.ob_map(graph.tgt(edge)))
            if self.cod.dom(f) != source or self.cod.cod(f) != target:
                logger.debug(
                    messages.NOT_FUNCTORIAL, edge, f,
                    self.cod.dom(f), self.cod.cod(f), source, target)
                return False
        return True

    def __call__(self, other):
        if isinstance(other, Vertex):
            return self.ob_map(other)
        assert_isinstance(other, (Edge, Path))
        return self.hom_map(other)


class FinDomFunctorVector(FinDomFunctor):
    """
    Functor out of a finitely presented category, given by the lists of images
    of objects and generators.

    Parameters:
        ob_images : The image of each object, indexed by vertex.
        hom_images : The image of each generator, indexed by edge.
        dom : The domain, a finitely presented category.
        cod : The codomain, :code:`TypeCat()` by default.

    Raises:
        ShapeMismatchError : If the length of images does not match the number
                             of objects and generators.

    Note
    ----
    The images are cast with :func:`coerce_ob` and :func:`coerce_hom` so that
    the functor into a free category can be given with raw indices.

    >>> from fincats.graph import Graph
    >>> from fincats.fincat import FreeFinCatGraph
    >>> C, D = FreeFinCatGraph(Graph(1, [0], [0])), FreeFinCatGraph(
    ...     Graph(2, [0, 1], [1, 0]))
    >>> F = FinDomFunctorVector([0], [[0, 1]], C, D)
    >>> assert F.ob_map(0) == Vertex(0) and F.generator_map(0) == Path(
    ...     (0, 1), 0, 0)
    >>> assert F.is_functorial()
    """
    def __init__(self, ob_images: Sequence, hom_images: Sequence,
                 dom: FinCat, cod: Cat = None):
        cod = TypeCat() if cod is None else cod
        super().__init__(dom, cod)
        if len(ob_images) != dom.nobjects():
            raise ShapeMismatchError(
                messages.WRONG_OB_MAP_LENGTH, ob_images, dom.nobjects())
        if len(hom_images) != dom.nhom_generators():
            raise ShapeMismatchError(
                messages.WRONG_HOM_MAP_LENGTH, hom_images,
                dom.nhom_generators())
        self.ob_images = tuple(coerce_ob(cod, x) for x in ob_images)
        self.hom_images = tuple(coerce_hom(cod, f) for f in hom_images)

    @classmethod
    def from_maps(cls, maps: Mapping, dom: FinCat, cod: Cat = None
                  ) -> FinDomFunctorVector:
        """
        Build a functor from a mapping with keys :code:`"V"` and :code:`"E"`
        for the images of vertices and edges.

        Parameters:
            maps : The images of vertices and edges.
            dom : The domain.
            cod : The codomain.
        """
        if not isinstance(maps, Mapping) or set(maps) != {"V", "E"}:
            raise ValueError(messages.MISSING_MAPS.format(maps))
        return cls(maps["V"], maps["E"], dom, cod)

    def ob_map(self, x):
        x = x.vertex if isinstance(x, Vertex) else x
        assert_isindex(x, len(self.ob_images), "vertex")
        return self.ob_images[x]

    def generator_map(self, f):
        f = f.edge if isinstance(f, Edge) else f
        assert_isindex(f, len(self.hom_images), "edge")
        return self.hom_images[f]

    def ob_function(self) -> FinDomFunction:
        """
        The object map as a function from the objects of the domain to the
        objects of the codomain.

        Example
        -------
        >>> from fincats.graph import Graph
        >>> from fincats.fincat import FreeFinCatGraph
        >>> C = FreeFinCatGraph(Graph(2))
        >>> F = FinDomFunctorVector([1, 1], [], C, C)
        >>> F.ob_function()
        finset.FinDomFunction([1, 1], finset.FinSet(2))
        """
        values = (x.vertex if isinstance(x, Vertex) else x
                  for x in self.ob_images)
        return FinDomFunction(values, self.cod.objects())

    def __eq__(self, other):
        return type(self) is type(other)\
            and (self.ob_images, self.hom_images, self.dom, self.cod)\
            == (other.ob_images, other.hom_images, other.dom, other.cod)

    def __hash__(self):
        return hash((self.ob_images, self.hom_images, self.dom, self.cod))

    def __repr__(self):
        return factory_name(type(self))\
            + f"({list(self.ob_images)}, {list(self.hom_images)}, "\
              f"dom={repr(self.dom)}, cod={repr(self.cod)})"


class FinFunctor(FinDomFunctorVector):
    """
    Functor between finitely presented categories.

    Parameters:
        ob_images : The image of each object, indexed by vertex.
        hom_images : The image of each generator, indexed by edge.
        dom : The domain, a finitely presented category.
        cod : The codomain, a finitely presented category.
    """
    def __init__(self, ob_images: Sequence, hom_images: Sequence,
                 dom: FinCat, cod: FinCat):
        assert_isinstance(cod, FinCat)
        super().__init__(ob_images, hom_images, dom, cod)


def coerce_ob(cod: Cat, x):
    """
    Cast a value as an object of a given category.

    Parameters:
        cod : The category.
        x : The value to cast.

    Example
    -------
    >>> from fincats.graph import Graph
    >>> from fincats.fincat import FreeFinCatGraph
    >>> C = FreeFinCatGraph(Graph(2))
    >>> assert coerce_ob(C, 1) == coerce_ob(C, Vertex(1)) == Vertex(1)
    >>> assert coerce_ob(TypeCat(), 1) == 1
    """
    if isinstance(cod, FinCatGraph) and not isinstance(x, Vertex):
        return Vertex(x)
    return x


def coerce_hom(cod: Cat, f):
    """
    Cast a value as an arrow of a given category.

    Parameters:
        cod : The category.
        f : The value to cast, if :code:`cod` is a :class:`FinCatGraph` this
            can be a :class:`Path`, an edge or a list of edges.

    Example
    -------
    >>> from fincats.graph import Graph
    >>> from fincats.fincat import FreeFinCatGraph
    >>> C = FreeFinCatGraph(Graph(3, [0, 1], [1, 2]))
    >>> assert coerce_hom(C, 0) == coerce_hom(C, Edge(0)) == Path((0, ), 0, 1)
    >>> assert coerce_hom(C, [0, 1]) == Path((0, 1), 0, 2)
    """
    if not isinstance(cod, FinCatGraph) or isinstance(f, Path):
        return f
    if isinstance(f, (list, tuple)):
        return Path.from_edges(cod.graph, f)
    return Path.from_edge(cod.graph, f)


def is_functorial(functor: FinDomFunctor) -> bool:
    """ Whether a functor preserves domain and codomain, see
    :meth:`FinDomFunctor.is_functorial`. """
    assert_isinstance(functor, FinDomFunctor)
    return functor.is_functorial()
