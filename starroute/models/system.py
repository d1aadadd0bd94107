"""
@License: MIT

@Description: This module defines the star systems that make up the route graph
and the one-way wormhole links that connect some of them.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(eq=False)
class StarSystem:
    """
    A single star system (graph node).

    Systems are compared and hashed by identity only, so two systems with
    the same name are still different nodes.

    Attributes:
        name: Display name of the system
        position: (x, y) map coordinates, used for jump drive range checks
        danger: Non-negative risk of passing through this system
    """
    name: str
    position: Tuple[float, float] = (0.0, 0.0)
    danger: float = 0.0

    def __post_init__(self):
        if self.danger < 0:
            raise ValueError(f"System danger must be non-negative, got {self.danger}")
        self.position = (float(self.position[0]), float(self.position[1]))

    def __repr__(self) -> str:
        return f"StarSystem({self.name!r})"


@dataclass(frozen=True)
class WormholeLink:
    """
    A one-way wormhole link leaving some system.

    Attributes:
        target: System the wormhole leads to
        fuel: Fuel cost of using the link (default: 0)
        days: Days taken to use the link (default: 0)
    """
    target: StarSystem
    fuel: int = 0
    days: int = 0

    def __post_init__(self):
        if self.fuel < 0 or self.days < 0:
            raise ValueError(
                f"Wormhole costs must be non-negative, got fuel={self.fuel}, days={self.days}"
            )

    @property
    def is_free(self) -> bool:
        """True if the link costs neither fuel nor days."""
        return self.fuel == 0 and self.days == 0
