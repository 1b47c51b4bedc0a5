# -*- coding: utf-8 -*-

""" fincats utility functions. """

from __future__ import annotations

import json
from numbers import Integral
from abc import ABC, abstractmethod
from typing import Generic, Optional, Type, TypeVar

from fincats import messages

T = TypeVar('T')


def factory_name(cls: type) -> str:
    """ The name of a class inside fincats, e.g. "fincat.Path". """
    module = cls.__module__.removeprefix('fincats.')
    return f"{module}.{cls.__name__}".removeprefix('builtins.')


def from_tree(tree: dict):
    """ Decode a tree with the class named by its factory. """
    *modules, factory = tree['factory'].removeprefix('fincats.').split('.')
    import fincats
    module = fincats
    for attr in modules:
        module = getattr(module, attr)
    return getattr(module, factory).from_tree(tree)


def dumps(obj, **kwargs):
    """
    Serialise a fincats object as JSON.

    Parameters:
        obj : The fincats object to serialise.
        kwargs : Passed to ``json.dumps``.

    Example
    -------
    >>> from fincats.fincat import Vertex
    >>> print(dumps(Vertex(0)))
    {"factory": "fincat.Vertex", "vertex": 0}
    """
    return json.dumps(obj.to_tree(), **kwargs)


def loads(raw):
    """
    Loads a serialised fincats object.

    Example
    -------
    >>> raw = '{"factory": "fincat.Edge", "edge": 1}'
    >>> from fincats.fincat import Edge
    >>> assert loads(raw) == Edge(1)
    >>> assert dumps(loads(raw)) == raw
    """
    obj = json.loads(raw)
    if isinstance(obj, list):
        return [from_tree(o) for o in obj]
    return from_tree(obj)


def assert_isinstance(object_, cls: type | tuple[type, ...]):
    """ Raise ``TypeError`` if ``object`` is not instance of ``cls``. """
    classes = cls if isinstance(cls, tuple) else (cls, )
    cls_name = ' | '.join(map(factory_name, classes))
    if not any(isinstance(object_, cls) for cls in classes):
        raise TypeError(messages.TYPE_ERROR.format(
            cls_name, factory_name(type(object_))))


class Composable(ABC, Generic[T]):
    """ Arrows with a method `then`, written `>>` and `<<`. """
    dom: T
    cod: T

    @abstractmethod
    def then(self, other: Optional[Composable[T]]) -> Composable[T]:
        """ Sequential composition. """

    def is_composable(self, other: Composable) -> bool:
        """ Whether the codomain of `self` is the domain of `other`. """
        return self.cod == other.dom

    def is_parallel(self, other: Composable) -> bool:
        """ Whether both arrows have the same domain and codomain. """
        return (self.dom, self.cod) == (other.dom, other.cod)

    __rshift__ = lambda self, other: self.then(other)
    __lshift__ = lambda self, other: other.then(self)


class AxiomError(Exception):
    """ The gods of category theory are not happy. """


class EmptyPathError(ValueError):
    """ A nontrivial path was built from an empty list of edges. """
    def __init__(self):
        super().__init__(messages.EMPTY_PATH)


class PathBoundaryMismatchError(AxiomError):
    """
    Two paths do not compose, i.e. the target of the ``left`` path is not the
    source of the ``right`` one.

    Parameters:
        left : The target vertex of the first path.
        right : The source vertex of the second path.
    """
    def __init__(self, left, right):
        self.left, self.right = left, right
        super().__init__(messages.PATH_BOUNDARY_MISMATCH.format(left, right))


class ShapeMismatchError(ValueError):
    """
    The length of an array does not match the expected one.

    Parameters:
        message : The error message, formatted with the array and lengths.
        array : The array with the wrong length.
        expected : The expected length.
    """
    def __init__(self, message: str, array, expected: int):
        self.expected, self.actual = expected, len(array)
        super().__init__(message.format(array, expected, self.actual))


def assert_isindex(index, length: int, name: str = "index"):
    """
    Raise ``IndexError`` if ``index`` is not in ``range(length)``, negative
    indices included.
    """
    assert_isinstance(index, Integral)
    if not 0 <= index < length:
        raise IndexError(messages.INDEX_OUT_OF_RANGE.format(
            name, length, index))


def assert_iscomposable(left: Composable, right: Composable):
    """ Raise :class:`AxiomError` if `left >> right` is undefined. """
    if not left.is_composable(right):
        raise AxiomError(messages.NOT_COMPOSABLE.format(
            left, right, left.cod, right.dom))


def factory(cls: Type[Composable]) -> Type[Composable]:
    """ Class decorator, composites of a subclass of arrows stay in it. """
    cls.factory = cls
    return cls
