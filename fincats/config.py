# -*- coding: utf-8 -*-

""" fincats configuration. """

# Whether Path.from_edges checks that consecutive edges are contiguous.
SCAN_PATHS = False
