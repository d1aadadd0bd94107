"""
Single-destination route plans.

A RoutePlan runs a RouteSearch that stops at one destination, then reads the
back-pointer chain out of the search's public route table. After that the
plan is a plain value and no longer refers to the search.
"""

from typing import List, Optional, Tuple

from ..models.pilot import Pilot
from ..models.ship import Ship
from ..models.system import StarSystem
from .cost import RouteEdge
from .errors import InvalidOriginError
from .graph import RouteGraph
from .search import RouteSearch


class RoutePlan:
    """
    Best route from an origin to one destination.

    Attributes:
        origin: System the route starts from
        destination: System the route ends at
        steps: (system, edge) pairs in travel order, excluding the origin
        metrics: Performance metrics of the search that built the plan
    """

    def __init__(self, graph: RouteGraph, origin: StarSystem, destination: StarSystem,
                 ship: Optional[Ship] = None, pilot: Optional[Pilot] = None):
        """
        Plan a route.

        Args:
            graph: Graph accessor
            origin: Starting system (need not be where the pilot is, e.g. when
                appending to an already planned route)
            destination: System to reach
            ship: Ship whose drives are used (defaults to the pilot's
                flagship, then to a hyperdrive-only ship)
            pilot: Optional pilot whose hyperlane knowledge restricts the route

        Raises:
            InvalidOriginError: If no origin is given
        """
        if origin is None:
            raise InvalidOriginError(None, "no origin system given")
        if ship is None:
            ship = pilot.flagship if pilot is not None else Ship()
        knowledge = pilot.knows_link if pilot is not None else None

        search = RouteSearch.for_ship(graph, ship, destination=destination,
                                      origin=origin, knowledge=knowledge)

        self.origin = origin
        self.destination = destination
        self.metrics = search.get_performance_metrics()
        self.steps: List[Tuple[StarSystem, RouteEdge]] = self._extract(search.route, destination)
        self._has_route = destination in search.route

    @classmethod
    def from_ship(cls, graph: RouteGraph, ship: Ship, destination: StarSystem,
                  pilot: Optional[Pilot] = None) -> "RoutePlan":
        """Plan a route from wherever the ship currently is."""
        return cls(graph, ship.system, destination, ship=ship, pilot=pilot)

    @staticmethod
    def _extract(route, destination: StarSystem) -> List[Tuple[StarSystem, RouteEdge]]:
        """
        Walk back-pointers from the destination to the origin.

        Args:
            route: Mapping system -> RouteEdge from a finished search
            destination: System the walk starts from

        Returns:
            (system, edge) pairs in travel order, origin excluded
        """
        steps = []
        if destination not in route:
            return steps

        current = destination
        edge = route[current]
        while edge.previous is not None:
            steps.append((current, edge))
            current = edge.previous
            edge = route[current]

        steps.reverse()
        return steps

    @property
    def has_route(self) -> bool:
        return self._has_route

    @property
    def first_step(self) -> Optional[StarSystem]:
        """First system after the origin, or None if there is nowhere to go."""
        if not self.steps:
            return None
        return self.steps[0][0]

    @property
    def days(self) -> int:
        """Total days of the route, or -1 if there is no route."""
        if not self._has_route:
            return -1
        return self.steps[-1][1].days if self.steps else 0

    @property
    def required_fuel(self) -> int:
        """Total fuel of the route, or -1 if there is no route."""
        if not self._has_route:
            return -1
        return self.steps[-1][1].fuel if self.steps else 0

    def plan(self) -> List[StarSystem]:
        """
        Get the systems along the route.

        Returns:
            Systems from origin to destination inclusive, or an empty list
            if there is no route
        """
        if not self._has_route:
            return []
        return [self.origin] + [system for system, _ in self.steps]

    def fuel_costs(self) -> List[Tuple[StarSystem, int]]:
        """
        Get the fuel used by each hop.

        Returns:
            (system, fuel) pairs, one per hop, where fuel is the cost of
            reaching that system from the one before it
        """
        costs = []
        previous_fuel = 0
        for system, edge in self.steps:
            costs.append((system, edge.fuel - previous_fuel))
            previous_fuel = edge.fuel
        return costs

    def __repr__(self) -> str:
        if not self._has_route:
            return f"RoutePlan({self.origin!r} -> {self.destination!r}, no route)"
        return (f"RoutePlan({self.origin!r} -> {self.destination!r}, "
                f"days={self.days}, fuel={self.required_fuel})")


def plan_route(graph: RouteGraph, origin: StarSystem, destination: StarSystem,
               ship: Optional[Ship] = None,
               pilot: Optional[Pilot] = None) -> Tuple[List[StarSystem], int, dict]:
    """
    Convenience function to plan a route in one call.

    Args:
        graph: Graph accessor
        origin: Starting system
        destination: System to reach
        ship: Optional ship (defaults as in RoutePlan)
        pilot: Optional pilot knowledge

    Returns:
        Tuple of (path, fuel, metrics); path is empty and fuel is -1 when
        there is no route
    """
    route_plan = RoutePlan(graph, origin, destination, ship=ship, pilot=pilot)
    return route_plan.plan(), route_plan.required_fuel, route_plan.metrics
