"""
Models module for star systems, ships and pilot knowledge.
"""

from .system import StarSystem, WormholeLink
from .ship import Ship, WormholeStrategy
from .pilot import Pilot

__all__ = ['StarSystem', 'WormholeLink', 'Ship', 'WormholeStrategy', 'Pilot']
