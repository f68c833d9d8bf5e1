"""
connectfour - Rules engine for the Connect Four drop-disc game

This package provides the board, turn handling and win detection for
Connect Four. Rendering, input and animation are left to the caller,
which reads the engine state through the Board query methods.
"""

# Version number
__version__ = '0.1.0'
