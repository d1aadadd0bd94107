"""
Cost model for route planning.

This module defines RouteEdge, the record of how a route reaches a system,
the ordering that decides which of two edges is better, and the arithmetic
for extending an edge by one hyperlane, jump drive or wormhole hop.

Edges are ordered by days first, then accumulated danger, then fuel.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

from ..models.ship import WormholeStrategy
from ..models.system import StarSystem, WormholeLink
from .graph import RouteGraph


KnowledgePredicate = Callable[[StarSystem, StarSystem], bool]


@dataclass(frozen=True)
class RouteEdge:
    """
    How the best known route reaches one system.

    Attributes:
        previous: System this edge backtracks to (None at the origin)
        fuel: Fuel used along the route up to this system
        days: Days elapsed along the route up to this system
        danger: Danger accumulated up to but not including this system
    """
    previous: Optional[StarSystem] = None
    fuel: int = 0
    days: int = 0
    danger: float = 0.0

    @property
    def sort_key(self) -> Tuple[int, float, int]:
        """Priority of this edge; lower is better."""
        return edge_priority(self)

    def is_better_than(self, other: "RouteEdge") -> bool:
        return edge_priority(self) < edge_priority(other)

    def __lt__(self, other: "RouteEdge") -> bool:
        return self.is_better_than(other)


def edge_priority(edge: RouteEdge) -> Tuple[int, float, int]:
    """
    Sort key for an edge.

    Fewer days wins; ties go to lower danger, then to lower fuel.

    Args:
        edge: Edge to rank

    Returns:
        Tuple (days, danger, fuel)
    """
    return (edge.days, edge.danger, edge.fuel)


def origin_edge(origin_danger: float) -> RouteEdge:
    """
    Create the seed edge for the search origin.

    The origin is never left by a hop from elsewhere, so its own danger is
    stored on the seed edge directly.
    """
    return RouteEdge(previous=None, fuel=0, days=0, danger=origin_danger)


def departure_danger(edge: RouteEdge, system: StarSystem, graph: RouteGraph) -> float:
    """
    Danger carried onto every hop that leaves a system.

    A system's own danger is charged when a route leaves it. The origin's
    danger is already on its seed edge.

    Args:
        edge: Settled edge of the system being left
        system: System being left
        graph: Graph accessor providing danger values

    Returns:
        Danger of any edge built from this one
    """
    if edge.previous is None:
        return edge.danger
    return edge.danger + graph.danger(system)


def hyperlane_hop(edge: RouteEdge, system: StarSystem, danger: float,
                  hyperdrive_fuel: int) -> RouteEdge:
    """Extend an edge by one hyperlane hop leaving system."""
    return RouteEdge(previous=system, fuel=edge.fuel + hyperdrive_fuel,
                     days=edge.days + 1, danger=danger)


def jump_hop(edge: RouteEdge, system: StarSystem, danger: float,
             jump_drive_fuel: int) -> RouteEdge:
    """Extend an edge by one jump drive hop leaving system."""
    return RouteEdge(previous=system, fuel=edge.fuel + jump_drive_fuel,
                     days=edge.days + 1, danger=danger)


def wormhole_hop(edge: RouteEdge, system: StarSystem, danger: float,
                 link: WormholeLink) -> RouteEdge:
    """Extend an edge through a wormhole, at whatever the link costs."""
    return RouteEdge(previous=system, fuel=edge.fuel + link.fuel,
                     days=edge.days + link.days, danger=danger)


class EdgeBuilder:
    """
    Configurable generator of candidate edges for the route search.

    Attributes:
        graph: Graph accessor
        hyperdrive_fuel: Fuel per hyperlane hop (0 = no hyperdrive)
        jump_drive_fuel: Fuel per jump (0 = no jump drive)
        jump_range: Maximum jump distance (0 = no jump drive)
        wormhole_strategy: Which wormhole links are eligible
        knowledge: Optional predicate restricting hyperlane use
    """

    def __init__(self, graph: RouteGraph,
                 hyperdrive_fuel: int,
                 jump_drive_fuel: int = 0,
                 jump_range: float = 0.0,
                 wormhole_strategy: WormholeStrategy = WormholeStrategy.NONE,
                 knowledge: Optional[KnowledgePredicate] = None):
        """
        Initialize edge builder.

        Args:
            graph: Graph accessor
            hyperdrive_fuel: Fuel per hyperlane hop
            jump_drive_fuel: Fuel per jump drive hop
            jump_range: Maximum jump distance
            wormhole_strategy: Wormhole policy
            knowledge: Optional (from, to) -> bool predicate for hyperlanes
        """
        self.graph = graph
        self.hyperdrive_fuel = hyperdrive_fuel
        self.jump_drive_fuel = jump_drive_fuel
        self.jump_range = jump_range
        self.wormhole_strategy = wormhole_strategy
        self.knowledge = knowledge

    @property
    def uses_hyperlanes(self) -> bool:
        return self.hyperdrive_fuel > 0

    @property
    def uses_jump_drive(self) -> bool:
        return self.jump_drive_fuel > 0 and self.jump_range > 0

    @property
    def uses_wormholes(self) -> bool:
        return self.wormhole_strategy is not WormholeStrategy.NONE

    def can_travel_hyperlane(self, from_system: StarSystem, to_system: StarSystem) -> bool:
        """
        Check whether a hyperlane may be used.

        Without a knowledge predicate every hyperlane is usable.
        """
        if self.knowledge is None:
            return True
        return bool(self.knowledge(from_system, to_system))

    def candidates(self, system: StarSystem,
                   edge: RouteEdge) -> Iterator[Tuple[StarSystem, RouteEdge]]:
        """
        Generate every hop leaving a settled system.

        Args:
            system: Settled system being expanded
            edge: Its settled edge

        Yields:
            (neighbor, candidate edge) pairs
        """
        danger = departure_danger(edge, system, self.graph)

        if self.uses_hyperlanes:
            for neighbor in self.graph.neighbors_by_hyperlane(system):
                if self.can_travel_hyperlane(system, neighbor):
                    yield neighbor, hyperlane_hop(edge, system, danger, self.hyperdrive_fuel)

        if self.uses_jump_drive:
            for neighbor in self.graph.neighbors_within(system, self.jump_range):
                if neighbor is system:
                    continue
                if self.graph.distance(system, neighbor) <= self.jump_range:
                    yield neighbor, jump_hop(edge, system, danger, self.jump_drive_fuel)

        if self.uses_wormholes:
            for link in self.graph.wormhole_links(system):
                if self.wormhole_strategy.allows(link):
                    yield link.target, wormhole_hop(edge, system, danger, link)
