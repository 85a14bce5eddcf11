__appname__ = "osm_canonical_opening_hours"
__version__ = "0.1.0"
__author__ = "rezemika"
__licence__ = "AGPLv3"
