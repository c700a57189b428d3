"""Implementation package for ovalmesh; import public names from ``ovalmesh``."""
