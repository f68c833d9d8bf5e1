"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation and move rules.
"""

from connectfour.game.board import Board

__all__ = ['Board']
