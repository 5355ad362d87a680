"""Hex Warz, a two-player hexagon card board game, with a small arcade shooter."""

__version__ = "0.1.0"