"""Terrain, places, railway network, names, traits and scheduling for a Far West roguelike."""

__version__ = "0.1.0"