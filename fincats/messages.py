# -*- coding: utf-8 -*-

"""
fincats error messages.
"""

TYPE_ERROR = "Expected {}, got {} instead."
NOT_COMPOSABLE = "{} does not compose with {}: {} != {}."
EMPTY_PATH = "Nonempty edge list needed for nontrivial path, "\
             "use Path.id for the identity."
PATH_BOUNDARY_MISMATCH = "Path start/end points do not match: {} != {}."
WRONG_OB_MAP_LENGTH = "Length of object map {} does not match domain, "\
                      "expected {} got {} instead."
WRONG_HOM_MAP_LENGTH = "Length of morphism map {} does not match domain, "\
                       "expected {} got {} instead."
WRONG_EDGE_ARRAYS = "Expected source and target arrays of the same length, "\
                    "got {} and {} instead."
INDEX_OUT_OF_RANGE = "Expected {} in range({}), got {!r} instead."
VERTEX_OUT_OF_RANGE = "Expected vertices in range({}), got {} instead."
NOT_IN_CODOMAIN = "Value {!r} is not an element of {}."
MISSING_MAPS = "Expected a mapping with keys 'V' and 'E', got {} instead."
NOT_FUNCTORIAL = "Generator %s is mapped to %s : %s -> %s, "\
                 "expected %s -> %s."
