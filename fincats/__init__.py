# -*- coding: utf-8 -*-

""" fincats: finitely presented categories and functors out of them. """

__version__ = '0.1.0'

from fincats import (
    utils,
    config,
    messages,
    graph,
    finset,
    cat,
    fincat,
    functor,
)
