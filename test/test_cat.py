# -*- coding: utf-8 -*-

from pytest import raises
from fincats.cat import *
from fincats.finset import TypeSet
from fincats.utils import AxiomError


def test_main():
    f, g, h = Box('f', 'x', 'y'), Box('g', 'y', 'z'), Box('h', 'z', 'x')
    assert Id('x') >> f == f == f >> Id('y')
    assert (f >> g).dom == f.dom and (f >> g).cod == g.cod
    assert f >> g >> h == f >> (g >> h)


def test_Arrow_init():
    f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    assert Arrow((f, g), 'x', 'z') == f >> g
    with raises(AxiomError):
        Arrow((g, f), 'y', 'y')
    with raises(AxiomError):
        Arrow((f, ), 'x', 'z')
    with raises(TypeError):
        Arrow(('f', ), 'x', 'y')


def test_Arrow_then():
    f, g = Box('f', 1, 2), Box('g', 2, 3)
    assert f.then(g) == f >> g == g << f
    with raises(AxiomError):
        g >> f
    with raises(TypeError):
        f >> 2


def test_Arrow_len_iter():
    f, g = Box('f', 1, 2), Box('g', 2, 3)
    assert len(Id(1)) == 0 and len(f >> g) == 2
    assert list(f >> g) == [f, g]


def test_Arrow_repr():
    f = Box('f', 'x', 'y')
    assert repr(Id('x')) == "cat.Arrow.id('x')"
    assert repr(f) == "cat.Box('f', 'x', 'y')"
    assert repr(Arrow((f, ), 'x', 'y'))\
        == "cat.Arrow(inside=(cat.Box('f', 'x', 'y'),), dom='x', cod='y')"


def test_Arrow_str():
    f, g = Box('f', 'x', 'y'), Box('g', 'y', 'z')
    assert str(Id('x')) == "Id(x)"
    assert str(f >> g) == "f >> g"


def test_Arrow_hash():
    f = Box('f', 'x', 'y')
    assert {Id('x'): 42}[Id('x')] == 42
    assert {f: 42}[Arrow((f, ), 'x', 'y')] == 42


def test_Box_eq():
    f = Box('f', 'x', 'y')
    assert f == Box('f', 'x', 'y') and f != Box('f', 'x', 'z')
    assert f != Box('g', 'x', 'y') and f != 'f'
    assert f == Arrow((f, ), 'x', 'y') and Arrow((f, ), 'x', 'y') == f
    with raises(TypeError):
        Box(42, 'x', 'y')


def test_TypeCat():
    C = TypeCat(int, Arrow)
    f, g = Box('f', 1, 2), Box('g', 2, 3)
    assert (C.dom(f), C.cod(f)) == (1, 2)
    assert C.id(1) == Id(1)
    assert C.compose(f, g) == f >> g
    assert C.objects() == TypeSet(int)
    assert TypeCat() == TypeCat(object, Arrow) != C
    assert repr(C) == "TypeCat(int, cat.Arrow)"
    assert {TypeCat(): 42}[TypeCat()] == 42


def test_Cat_objects():
    class Category(Cat):
        dom = cod = id = compose = lambda self, *args: None
    with raises(NotImplementedError):
        Category().objects()
