"""
Pilot knowledge of the galaxy.

A pilot only knows the hyperlanes it has discovered: a hyperlane can be
used once either end of it has been visited, or once the link itself has
been learned some other way (for example from a purchased map).
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Set

from .ship import Ship
from .system import StarSystem


@dataclass
class Pilot:
    """
    The actor whose knowledge restricts hyperlane travel.

    Attributes:
        flagship: Ship whose drives are used for routing
        current_system: System the pilot is in
        visited: Systems the pilot has been to
        known_links: Hyperlanes learned without visiting either end
    """
    flagship: Ship = field(default_factory=Ship)
    current_system: Optional[StarSystem] = None
    visited: Set[StarSystem] = field(default_factory=set)
    known_links: Set[FrozenSet[StarSystem]] = field(default_factory=set)

    def __post_init__(self):
        if self.current_system is None:
            self.current_system = self.flagship.system
        if self.current_system is not None:
            self.visited.add(self.current_system)

    def visit(self, system: StarSystem):
        """
        Mark a system as visited and move the pilot there.

        Args:
            system: System arrived at
        """
        self.visited.add(system)
        self.current_system = system
        self.flagship.system = system

    def learn_link(self, a: StarSystem, b: StarSystem):
        """Record a hyperlane as known without visiting it."""
        self.known_links.add(frozenset((a, b)))

    def learn_links(self, links: Iterable[Iterable[StarSystem]]):
        for a, b in links:
            self.learn_link(a, b)

    def has_visited(self, system: StarSystem) -> bool:
        return system in self.visited

    def knows_link(self, from_system: StarSystem, to_system: StarSystem) -> bool:
        """
        Check whether the pilot may travel the hyperlane from_system -> to_system.

        Args:
            from_system: System the hyperlane is taken from
            to_system: System at the far end of the hyperlane

        Returns:
            True if either end has been visited or the link was learned
        """
        if to_system in self.visited or from_system in self.visited:
            return True
        return frozenset((from_system, to_system)) in self.known_links
