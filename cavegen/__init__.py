"""
project: cavegen
module: __init__.py

Procedural cave areas: seeded noise, cellular-automaton smoothing, room
extraction and corridor carving, with edge patterns so neighbouring areas
stitch together. Generation lives in :mod:`cavegen.cave`.
"""

__version__ = "0.1.0"
