"""Data structures of a CDCL SAT solver: proof steps and their encoding, configuration, clause storage and the VSIDS heuristic."""

__version__ = "0.2.1"