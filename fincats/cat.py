# -*- coding: utf-8 -*-

"""
Categories as Python objects, and the free category on named boxes.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Cat
    TypeCat
    Arrow
    Box

Axioms
------

We can create boxes between any hashable objects:

>>> f, g, h = Box('f', 1, 2), Box('g', 2, 3), Box('h', 3, 1)

We can create arbitrary arrows with identity and composition:

>>> arrow = Arrow.id(1).then(f).then(g).then(h)
>>> assert arrow == f >> g >> h == h << g << f
>>> assert Id(1) >> f == f == f >> Id(2)
>>> assert (f >> g) >> h == f >> (g >> h)

A :class:`TypeCat` turns a pair of Python types into a category:

>>> C = TypeCat(int, Arrow)
>>> assert C.compose(C.id(C.dom(f)), f) == f
>>> assert 42 in C.objects() and "x" not in C.objects()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable

from fincats.finset import TypeSet
from fincats.utils import (
    factory,
    factory_name,
    assert_isinstance,
    assert_iscomposable,
    Composable,
)


class Cat(ABC):
    """
    A category, possibly infinite, given by its structure maps.

    Only the structure maps are abstract, which is all a functor needs from
    its codomain. The set of objects is only needed by
    :meth:`fincats.functor.FinDomFunctorVector.ob_function`.
    """
    @abstractmethod
    def dom(self, f):
        """ The domain of an arrow. """

    @abstractmethod
    def cod(self, f):
        """ The codomain of an arrow. """

    @abstractmethod
    def id(self, x):
        """ The identity arrow on an object. """

    @abstractmethod
    def compose(self, f, g):
        """ The composition of two arrows, in diagrammatic order. """

    def objects(self):
        """ The set of objects, e.g. a :class:`fincats.finset.FinSet`. """
        raise NotImplementedError


@factory
class Arrow(Composable[Hashable]):
    """
    An arrow is a tuple of composable boxes :code:`inside` with a pair of
    objects :code:`dom` and :code:`cod` as domain and codomain.

    Parameters:
        inside: The boxes inside the arrow.
        dom: The domain, any hashable object.
        cod: The codomain, any hashable object.
        _scan: Whether to check that the boxes compose.

    Example
    -------
    >>> f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    >>> assert Arrow((f, g), 'x', 'z') == Arrow.id('x').then(f).then(g)
    """
    def __init__(self, inside: tuple[Box, ...], dom: Hashable, cod: Hashable,
                 _scan: bool = True) -> None:
        self.dom, self.cod, self.inside = dom, cod, tuple(inside)
        if _scan:
            for box in self.inside:
                assert_isinstance(box, Box)
            for f, g in zip((self.id(dom), ) + self.inside,
                            self.inside + (self.id(cod), )):
                assert_iscomposable(f, g)

    def __iter__(self):
        for box in self.inside:
            yield box

    def __len__(self):
        return len(self.inside)

    def __repr__(self):
        if not self.inside:  # i.e. self is identity.
            return f"{factory_name(type(self))}.id({repr(self.dom)})"
        return f"{factory_name(self.factory)}(inside={repr(self.inside)}, " \
               f"dom={repr(self.dom)}, cod={repr(self.cod)})"

    def __str__(self):
        return ' >> '.join(map(str, self.inside)) or f"Id({self.dom})"

    def __eq__(self, other):
        return isinstance(other, Arrow)\
            and self.is_parallel(other) and self.inside == other.inside

    def __hash__(self):
        return hash((tuple(box.name for box in self.inside),
                     self.dom, self.cod))

    @classmethod
    def id(cls, dom: Hashable) -> Arrow:
        """ The identity arrow on an object, with no boxes inside. """
        return cls.factory((), dom, dom, _scan=False)

    def then(self, other: Arrow) -> Arrow:
        """ Sequential composition, raises :class:`AxiomError` on mismatch. """
        assert_isinstance(other, Arrow)
        assert_iscomposable(self, other)
        return self.factory(
            self.inside + other.inside, self.dom, other.cod, _scan=False)


class Box(Arrow):
    """
    A generating arrow with a :code:`name`, the only box inside itself.

    Example
    -------
    >>> f = Box('f', 'x', 'y')
    >>> assert f.inside == (f, )
    >>> assert f == Arrow((f, ), 'x', 'y')
    """
    def __init__(self, name: str, dom: Hashable, cod: Hashable):
        assert_isinstance(name, str)
        self.name = name
        Arrow.__init__(self, (self, ), dom, cod, _scan=False)

    def __repr__(self):
        return factory_name(type(self))\
            + f"({repr(self.name)}, {repr(self.dom)}, {repr(self.cod)})"

    def __str__(self):
        return str(self.name)

    def __hash__(self):
        return Arrow.__hash__(self)

    def __eq__(self, other):
        if isinstance(other, Box):
            return type(self) is type(other)\
                and self.name == other.name and self.is_parallel(other)
        return isinstance(other, Arrow) and Arrow.__eq__(other, self)


class TypeCat(Cat):
    """
    The category with instances of :code:`ob` as objects and instances of
    :code:`ar` as arrows.

    Parameters:
        ob : The type of objects, default is :code:`object`.
        ar : The type of arrows, default is :class:`Arrow`.

    Note
    ----
    The type of arrows needs attributes :code:`dom` and :code:`cod`, a class
    method :code:`id` and a method :code:`then`.

    Example
    -------
    >>> TypeCat()
    TypeCat(object, cat.Arrow)
    """
    ob, ar = object, Arrow

    def __init__(self, ob: type = None, ar: type = None):
        self.ob, self.ar = (ob or type(self).ob), (ar or type(self).ar)

    def __repr__(self):
        return f"TypeCat({factory_name(self.ob)}, {factory_name(self.ar)})"

    def __eq__(self, other):
        return isinstance(other, TypeCat)\
            and (self.ob, self.ar) == (other.ob, other.ar)

    def __hash__(self):
        return hash((self.ob, self.ar))

    def dom(self, f):
        return f.dom

    def cod(self, f):
        return f.cod

    def id(self, x):
        return self.ar.id(x)

    def compose(self, f, g):
        return f.then(g)

    def objects(self) -> TypeSet:
        return TypeSet(self.ob)


Id = Arrow.id
