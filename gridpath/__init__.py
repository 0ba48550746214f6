"""
Grid Pathfinding Engine.

A small library for searching weighted 4-connected grids: a grid
topology model, A* and related search strategies behind one
contract, and a recursive-backtracker maze generator.
"""

__version__ = "0.1.0"
