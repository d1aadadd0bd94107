"""
Graph representation module for route planning.

This module defines the read-only accessor interface the route search needs
from a galaxy map, and an in-memory Galaxy that implements it.

Galaxy keeps system positions in a numpy array so that jump drive range
queries are a single vectorized distance computation instead of a loop over
every system.
"""

import logging
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from ..models.system import StarSystem, WormholeLink

logger = logging.getLogger(__name__)


class RouteGraph(Protocol):
    """
    Read-only view of a galaxy map, as used by RouteSearch.

    Any object providing these methods can be searched; the search never
    looks inside a system itself.
    """

    def __contains__(self, system: object) -> bool:
        ...

    def neighbors_by_hyperlane(self, system: StarSystem) -> Sequence[StarSystem]:
        ...

    def neighbors_within(self, system: StarSystem, radius: float) -> Sequence[StarSystem]:
        ...

    def distance(self, a: StarSystem, b: StarSystem) -> float:
        ...

    def wormhole_links(self, system: StarSystem) -> Sequence[WormholeLink]:
        ...

    def danger(self, system: StarSystem) -> float:
        ...


class Galaxy:
    """
    In-memory galaxy map: star systems, hyperlanes and wormholes.

    Hyperlanes are two-way; wormholes are one-way and carry their own cost.

    Attributes:
        systems: Systems in insertion order
        hyperlanes: Mapping system -> list of hyperlane neighbors
        wormholes: Mapping system -> list of outgoing wormhole links
    """

    def __init__(self, systems: Optional[Iterable[StarSystem]] = None):
        """
        Initialize galaxy.

        Args:
            systems: Optional systems to add straight away
        """
        self.systems: List[StarSystem] = []
        self.hyperlanes: Dict[StarSystem, List[StarSystem]] = {}
        self.wormholes: Dict[StarSystem, List[WormholeLink]] = {}
        self._index: Dict[StarSystem, int] = {}
        self._positions: Optional[np.ndarray] = None

        if systems is not None:
            for system in systems:
                self.add_system(system)

    def __contains__(self, system: object) -> bool:
        return system in self._index

    def __len__(self) -> int:
        return len(self.systems)

    def __iter__(self):
        return iter(self.systems)

    def add_system(self, system: StarSystem) -> StarSystem:
        """
        Add a system to the map. Adding the same system twice is a no-op.

        Args:
            system: System to add

        Returns:
            The system, for chaining
        """
        if system in self._index:
            return system
        self._index[system] = len(self.systems)
        self.systems.append(system)
        self.hyperlanes[system] = []
        self.wormholes[system] = []
        self._positions = None
        return system

    def add_hyperlane(self, a: StarSystem, b: StarSystem):
        """
        Connect two systems with a two-way hyperlane.

        Args:
            a: First system
            b: Second system
        """
        if a is b:
            raise ValueError(f"Cannot link {a.name} to itself")
        self.add_system(a)
        self.add_system(b)
        if b not in self.hyperlanes[a]:
            self.hyperlanes[a].append(b)
        if a not in self.hyperlanes[b]:
            self.hyperlanes[b].append(a)

    def add_hyperlanes(self, links: Iterable[Tuple[StarSystem, StarSystem]]):
        count = 0
        for a, b in links:
            self.add_hyperlane(a, b)
            count += 1
        logger.debug("Added %d hyperlanes, galaxy has %d systems", count, len(self.systems))

    def add_wormhole(self, source: StarSystem, target: StarSystem,
                     fuel: int = 0, days: int = 0) -> WormholeLink:
        """
        Add a one-way wormhole link.

        Args:
            source: System the wormhole leaves from
            target: System the wormhole leads to
            fuel: Fuel cost of the link
            days: Days taken by the link

        Returns:
            The created link
        """
        self.add_system(source)
        self.add_system(target)
        link = WormholeLink(target=target, fuel=fuel, days=days)
        self.wormholes[source].append(link)
        return link

    def neighbors_by_hyperlane(self, system: StarSystem) -> List[StarSystem]:
        return list(self.hyperlanes.get(system, ()))

    def wormhole_links(self, system: StarSystem) -> List[WormholeLink]:
        return list(self.wormholes.get(system, ()))

    def danger(self, system: StarSystem) -> float:
        return system.danger

    def distance(self, a: StarSystem, b: StarSystem) -> float:
        """
        Calculate straight-line distance between two systems.

        Args:
            a: First system
            b: Second system

        Returns:
            Distance in map units
        """
        return float(np.hypot(b.position[0] - a.position[0],
                              b.position[1] - a.position[1]))

    def neighbors_within(self, system: StarSystem, radius: float) -> List[StarSystem]:
        """
        Find every other system within jump range of the given one.

        Args:
            system: System to jump from
            radius: Maximum jump distance (inclusive)

        Returns:
            Systems within range, in insertion order, excluding the system itself
        """
        if radius <= 0 or system not in self._index:
            return []

        positions = self._position_array()
        offsets = positions - np.asarray(system.position, dtype=float)
        distances = np.hypot(offsets[:, 0], offsets[:, 1])

        own_index = self._index[system]
        in_range = np.flatnonzero(distances <= radius)
        return [self.systems[i] for i in in_range if i != own_index]

    def _position_array(self) -> np.ndarray:
        """Positions as an (N, 2) array, rebuilt after systems are added."""
        if self._positions is None:
            if self.systems:
                self._positions = np.array([s.position for s in self.systems], dtype=float)
            else:
                self._positions = np.empty((0, 2), dtype=float)
        return self._positions

    def get_statistics(self) -> dict:
        """
        Get a summary of the map size.

        Returns:
            Dictionary with system, hyperlane and wormhole counts
        """
        lane_ends = sum(len(n) for n in self.hyperlanes.values())
        return {
            'systems': len(self.systems),
            'hyperlanes': lane_ends // 2,
            'wormholes': sum(len(w) for w in self.wormholes.values()),
        }

    def __repr__(self) -> str:
        stats = self.get_statistics()
        return (f"Galaxy(systems={stats['systems']}, "
                f"hyperlanes={stats['hyperlanes']}, "
                f"wormholes={stats['wormholes']})")
