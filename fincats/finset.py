# -*- coding: utf-8 -*-

"""
Finite sets and functions out of them.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    FinSet
    TypeSet
    FinDomFunction
"""

from __future__ import annotations

from collections.abc import Iterable

from fincats import messages
from fincats.utils import factory_name


class FinSet:
    """
    The finite set :code:`{0, ..., n - 1}`.

    Parameters:
        n : The number of elements.

    Example
    -------
    >>> assert list(FinSet(3)) == [0, 1, 2] and len(FinSet(3)) == 3
    >>> assert 2 in FinSet(3) and 3 not in FinSet(3)
    """
    def __init__(self, n: int = 0):
        self.n = n

    def __len__(self):
        return self.n

    def __iter__(self):
        return iter(range(self.n))

    def __contains__(self, x):
        return isinstance(x, int) and 0 <= x < self.n

    def __eq__(self, other):
        return isinstance(other, FinSet) and self.n == other.n

    def __hash__(self):
        return hash(self.n)

    def __repr__(self):
        return f"{factory_name(type(self))}({self.n})"


class TypeSet:
    """
    The set of all instances of a Python type.

    Parameters:
        type_ : The Python type.

    Example
    -------
    >>> assert 1 in TypeSet(int) and "x" not in TypeSet(int)
    """
    def __init__(self, type_: type = object):
        self.type = type_

    def __contains__(self, x):
        return isinstance(x, self.type)

    def __eq__(self, other):
        return isinstance(other, TypeSet) and self.type == other.type

    def __hash__(self):
        return hash(self.type)

    def __repr__(self):
        return f"{factory_name(type(self))}({factory_name(self.type)})"


class FinDomFunction:
    """
    A function out of a finite set, given by the list of its values.

    Parameters:
        values : The value of the function at each element of the domain.
        cod : The codomain, :code:`TypeSet(object)` by default.

    Example
    -------
    >>> f = FinDomFunction([2, 0, 2], FinSet(3))
    >>> assert f.dom == FinSet(3) and f(0) == 2
    >>> assert list(f) == [2, 0, 2]
    """
    def __init__(self, values: Iterable, cod: FinSet | TypeSet = None):
        self.values = tuple(values)
        self.cod = TypeSet() if cod is None else cod
        for value in self.values:
            if value not in self.cod:
                raise ValueError(
                    messages.NOT_IN_CODOMAIN.format(value, self.cod))

    @property
    def dom(self) -> FinSet:
        """ The domain of the function. """
        return FinSet(len(self.values))

    def __call__(self, x: int):
        return self.values[x]

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __eq__(self, other):
        return isinstance(other, FinDomFunction)\
            and (self.values, self.cod) == (other.values, other.cod)

    def __hash__(self):
        return hash((self.values, self.cod))

    def __repr__(self):
        return f"{factory_name(type(self))}({list(self.values)}, {self.cod})"
