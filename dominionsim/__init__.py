"""Dominion card game rules engine, scripted bots and command-line table."""

__version__ = "0.1.0"