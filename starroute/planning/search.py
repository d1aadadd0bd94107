"""
Route search implementation

@Description: This module implements a Dijkstra-style label-setting search
from one origin system. Edges are ranked by days, then danger, then fuel.
The search either maps every reachable system or stops as soon as the best
route to a destination is known.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple

from ..models.pilot import Pilot
from ..models.ship import (
    DEFAULT_HYPERDRIVE_FUEL,
    DEFAULT_JUMP_DRIVE_FUEL,
    DEFAULT_JUMP_RANGE,
    Ship,
    WormholeStrategy,
)
from ..models.system import StarSystem
from .cost import EdgeBuilder, KnowledgePredicate, RouteEdge, origin_edge
from .errors import InvalidOriginError
from .graph import RouteGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConfig:
    """
    Everything a RouteSearch needs besides the graph.

    Attributes:
        origin: System the search starts from
        destination: Optional system to stop at once its best route is known
        max_systems: Optional cap on the number of systems settled
        max_days: Optional cap on days; systems further away are left out
        hyperdrive_fuel: Fuel per hyperlane hop (0 = no hyperlane travel)
        jump_drive_fuel: Fuel per jump (0 = no jump drive)
        jump_range: Maximum jump distance (0 = no jump drive)
        wormhole_strategy: Which wormholes may be used
        knowledge: Optional (from, to) -> bool predicate for hyperlanes
    """
    origin: Optional[StarSystem]
    destination: Optional[StarSystem] = None
    max_systems: Optional[int] = None
    max_days: Optional[int] = None
    hyperdrive_fuel: int = DEFAULT_HYPERDRIVE_FUEL
    jump_drive_fuel: int = 0
    jump_range: float = 0.0
    wormhole_strategy: WormholeStrategy = WormholeStrategy.NONE
    knowledge: Optional[KnowledgePredicate] = None

    def __post_init__(self):
        if self.max_systems is not None and self.max_systems < 1:
            raise ValueError(f"max_systems must be at least 1, got {self.max_systems}")
        if self.max_days is not None and self.max_days < 0:
            raise ValueError(f"max_days must be non-negative, got {self.max_days}")
        if self.hyperdrive_fuel < 0 or self.jump_drive_fuel < 0:
            raise ValueError("Drive fuel costs must be non-negative")
        if self.jump_range < 0:
            raise ValueError(f"jump_range must be non-negative, got {self.jump_range}")

    @classmethod
    def for_ship(cls, ship: Ship, origin: Optional[StarSystem],
                 destination: Optional[StarSystem] = None,
                 knowledge: Optional[KnowledgePredicate] = None,
                 max_systems: Optional[int] = None,
                 max_days: Optional[int] = None) -> "SearchConfig":
        """Build a config that travels the way the given ship can."""
        return cls(
            origin=origin,
            destination=destination,
            max_systems=max_systems,
            max_days=max_days,
            hyperdrive_fuel=ship.hyperdrive_fuel,
            jump_drive_fuel=ship.jump_drive_fuel,
            jump_range=ship.jump_range,
            wormhole_strategy=ship.wormhole_strategy,
            knowledge=knowledge,
        )


class RouteSearch:
    """
    Shortest routes from one origin to every system it can reach.

    The whole search runs when the object is constructed. Afterwards
    `route` maps each reached system to its best RouteEdge, in the order the
    systems were settled; a system missing from it is unreachable under the
    configured drives, knowledge and caps.

    Attributes:
        graph: Graph accessor that was searched
        config: Search configuration
        route: Read-only mapping system -> best RouteEdge
        visited_count: Number of systems settled
        stop_reason: Why the search ended ('exhausted', 'destination', 'max_systems')
    """

    def __init__(self, graph: RouteGraph, config: SearchConfig):
        """
        Run the search.

        Args:
            graph: Graph accessor
            config: Search configuration

        Raises:
            InvalidOriginError: If the origin is missing or not in the graph
        """
        if config.origin is None:
            raise InvalidOriginError(None, "no origin system given")
        if config.origin not in graph:
            raise InvalidOriginError(config.origin)

        self.graph = graph
        self.config = config
        self.edge_builder = EdgeBuilder(
            graph=graph,
            hyperdrive_fuel=config.hyperdrive_fuel,
            jump_drive_fuel=config.jump_drive_fuel,
            jump_range=config.jump_range,
            wormhole_strategy=config.wormhole_strategy,
            knowledge=config.knowledge,
        )
        self.visited_count = 0
        self.stop_reason = "exhausted"
        self._pushes = 0
        self._stale_pops = 0

        self.route: Mapping[StarSystem, RouteEdge] = MappingProxyType(self._search())

    # ------------------------------------------------------------------
    # Construction entry points
    # ------------------------------------------------------------------

    @classmethod
    def from_origin(cls, graph: RouteGraph, origin: StarSystem,
                    max_systems: Optional[int] = None,
                    max_days: Optional[int] = None) -> "RouteSearch":
        """
        Map hyperlane routes from a system, e.g. for a local map or for
        checking whether a mission location is in range.

        Args:
            graph: Graph accessor
            origin: Starting system
            max_systems: Optional cap on systems returned
            max_days: Optional cap on days away

        Returns:
            Finished RouteSearch
        """
        return cls(graph, SearchConfig(origin=origin, max_systems=max_systems,
                                       max_days=max_days))

    @classmethod
    def with_drives(cls, graph: RouteGraph, origin: StarSystem,
                    wormhole_strategy: WormholeStrategy,
                    use_jump_drive: bool,
                    max_systems: Optional[int] = None,
                    max_days: Optional[int] = None) -> "RouteSearch":
        """
        Map routes from a system using the default drives, optionally a jump
        drive, and the given wormhole policy.

        Args:
            graph: Graph accessor
            origin: Starting system
            wormhole_strategy: Which wormholes may be used
            use_jump_drive: Whether a default jump drive is available
            max_systems: Optional cap on systems returned
            max_days: Optional cap on days away

        Returns:
            Finished RouteSearch
        """
        config = SearchConfig(
            origin=origin,
            max_systems=max_systems,
            max_days=max_days,
            jump_drive_fuel=DEFAULT_JUMP_DRIVE_FUEL if use_jump_drive else 0,
            jump_range=DEFAULT_JUMP_RANGE if use_jump_drive else 0.0,
            wormhole_strategy=wormhole_strategy,
        )
        return cls(graph, config)

    @classmethod
    def from_pilot(cls, graph: RouteGraph, pilot: Pilot,
                   max_systems: Optional[int] = None,
                   max_days: Optional[int] = None) -> "RouteSearch":
        """
        Map routes from the pilot's current system, over hyperlanes the pilot
        knows and with the flagship's drives.

        Args:
            graph: Graph accessor
            pilot: Pilot providing origin, drives and knowledge
            max_systems: Optional cap on systems returned
            max_days: Optional cap on days away

        Returns:
            Finished RouteSearch
        """
        if pilot.current_system is None:
            raise InvalidOriginError(None, "pilot has no current system")
        config = SearchConfig.for_ship(pilot.flagship, pilot.current_system,
                                       knowledge=pilot.knows_link,
                                       max_systems=max_systems, max_days=max_days)
        return cls(graph, config)

    @classmethod
    def for_ship(cls, graph: RouteGraph, ship: Ship,
                 destination: Optional[StarSystem] = None,
                 origin: Optional[StarSystem] = None,
                 knowledge: Optional[KnowledgePredicate] = None) -> "RouteSearch":
        """
        Search the way a ship can travel, stopping at the destination.

        Args:
            graph: Graph accessor
            ship: Ship whose drives are used
            destination: System to stop at (None maps everything)
            origin: Starting system (defaults to the ship's current system)
            knowledge: Optional hyperlane knowledge predicate

        Returns:
            Finished RouteSearch
        """
        if origin is None:
            origin = ship.system
        config = SearchConfig.for_ship(ship, origin, destination=destination,
                                       knowledge=knowledge)
        return cls(graph, config)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _search(self) -> Dict[StarSystem, RouteEdge]:
        """
        Run the label-setting search.

        The frontier may hold several entries for the same system; whichever
        pops first is the best, and later ones are discarded when popped.

        Returns:
            Ordered mapping of settled systems to their best edges
        """
        config = self.config
        origin = config.origin
        route: Dict[StarSystem, RouteEdge] = {}
        best: Dict[StarSystem, RouteEdge] = {}

        # Priority queue: (sort_key, sequence, system, edge)
        sequence = itertools.count()
        seed = origin_edge(self.graph.danger(origin))
        frontier: List[Tuple[Tuple[int, float, int], int, StarSystem, RouteEdge]] = [
            (seed.sort_key, next(sequence), origin, seed)
        ]
        best[origin] = seed
        self._pushes = 1

        logger.debug("Route search from %r (destination=%r)", origin, config.destination)

        while frontier:
            _, _, system, edge = heapq.heappop(frontier)

            if system in route:
                self._stale_pops += 1
                continue

            if config.max_days is not None and edge.days > config.max_days:
                continue

            route[system] = edge
            self.visited_count += 1

            if config.destination is not None and system is config.destination:
                self.stop_reason = "destination"
                break
            if config.max_systems is not None and self.visited_count >= config.max_systems:
                self.stop_reason = "max_systems"
                break

            for neighbor, candidate in self.edge_builder.candidates(system, edge):
                if neighbor in route:
                    continue
                known = best.get(neighbor)
                if known is not None and not candidate.is_better_than(known):
                    continue
                best[neighbor] = candidate
                heapq.heappush(frontier, (candidate.sort_key, next(sequence), neighbor, candidate))
                self._pushes += 1

        logger.debug("Route search from %r settled %d systems (%s)",
                     origin, self.visited_count, self.stop_reason)
        return route

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def origin(self) -> StarSystem:
        return self.config.origin

    def __contains__(self, system: object) -> bool:
        return system in self.route

    def __len__(self) -> int:
        return len(self.route)

    def has_route(self, system: StarSystem) -> bool:
        """Check whether the system was reached."""
        return system in self.route

    def days(self, system: StarSystem) -> int:
        """
        Days needed to reach a system.

        Returns:
            Days along the best route, or -1 if the system is unreachable
        """
        edge = self.route.get(system)
        return edge.days if edge is not None else -1

    def fuel(self, system: StarSystem) -> int:
        """
        Fuel needed to reach a system.

        Returns:
            Fuel along the best route, or -1 if the system is unreachable
        """
        edge = self.route.get(system)
        return edge.fuel if edge is not None else -1

    def plan(self, system: StarSystem) -> List[StarSystem]:
        """
        Reconstruct the route to a system from back-pointers.

        Args:
            system: System to route to

        Returns:
            Systems from the origin to the given system, or an empty list
            if it is unreachable
        """
        if system not in self.route:
            return []

        path = []
        current = system

        while current is not None:
            path.append(current)
            current = self.route[current].previous

        path.reverse()
        return path

    def systems(self) -> Set[StarSystem]:
        """All systems reached by the search."""
        return set(self.route)

    def get_performance_metrics(self) -> dict:
        """
        Get performance metrics from the search.

        Returns:
            Dictionary with search statistics
        """
        return {
            'algorithm': 'Dijkstra',
            'systems_settled': self.visited_count,
            'frontier_pushes': self._pushes,
            'stale_pops': self._stale_pops,
            'stop_reason': self.stop_reason,
        }

    def __repr__(self) -> str:
        return (f"RouteSearch(origin={self.config.origin!r}, "
                f"systems={len(self.route)}, stop_reason={self.stop_reason!r})")
