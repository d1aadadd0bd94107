"""
Unit tests for edge ordering and edge construction.

Run with: pytest test/test_cost.py
"""

import pytest
from starroute.models.ship import WormholeStrategy
from starroute.models.system import StarSystem, WormholeLink
from starroute.planning.graph import Galaxy
from starroute.planning.cost import (
    EdgeBuilder,
    RouteEdge,
    departure_danger,
    edge_priority,
    hyperlane_hop,
    jump_hop,
    origin_edge,
    wormhole_hop,
)


class TestEdgeOrdering:
    """Tests for the days > danger > fuel ordering."""

    def test_fewer_days_wins(self):
        """Test days dominate danger and fuel."""
        quick = RouteEdge(fuel=900, days=1, danger=5.0)
        slow = RouteEdge(fuel=0, days=2, danger=0.0)

        assert quick.is_better_than(slow)
        assert not slow.is_better_than(quick)

    def test_danger_breaks_day_ties(self):
        """Test lower danger wins when days are equal."""
        safe = RouteEdge(fuel=500, days=3, danger=0.1)
        risky = RouteEdge(fuel=100, days=3, danger=0.9)

        assert safe.is_better_than(risky)

    def test_fuel_breaks_remaining_ties(self):
        """Test lower fuel wins when days and danger are equal."""
        cheap = RouteEdge(fuel=100, days=3, danger=0.5)
        expensive = RouteEdge(fuel=200, days=3, danger=0.5)

        assert cheap.is_better_than(expensive)

    def test_equal_edges_not_better(self):
        """Test an equal edge never counts as better."""
        a = RouteEdge(fuel=100, days=2, danger=0.5)
        b = RouteEdge(fuel=100, days=2, danger=0.5)

        assert not a.is_better_than(b)
        assert not b.is_better_than(a)

    def test_sorting_uses_priority(self):
        """Test sorted() orders edges by (days, danger, fuel)."""
        edges = [
            RouteEdge(fuel=1, days=2, danger=0.0),
            RouteEdge(fuel=5, days=1, danger=1.0),
            RouteEdge(fuel=3, days=1, danger=1.0),
            RouteEdge(fuel=9, days=1, danger=0.0),
        ]

        ordered = sorted(edges)
        assert [edge_priority(e) for e in ordered] == [
            (1, 0.0, 9), (1, 1.0, 3), (1, 1.0, 5), (2, 0.0, 1)
        ]


class TestHops:
    """Tests for the per-hop edge arithmetic."""

    def test_origin_edge(self):
        """Test the origin seed carries the origin's own danger."""
        edge = origin_edge(0.25)

        assert edge.previous is None
        assert edge.fuel == 0
        assert edge.days == 0
        assert edge.danger == 0.25

    def test_hyperlane_hop(self):
        a = StarSystem("A")
        edge = hyperlane_hop(RouteEdge(fuel=100, days=1), a, 0.0, 100)

        assert edge.previous is a
        assert edge.fuel == 200
        assert edge.days == 2

    def test_jump_hop(self):
        a = StarSystem("A")
        edge = jump_hop(RouteEdge(fuel=100, days=1), a, 0.0, 200)

        assert edge.fuel == 300
        assert edge.days == 2

    def test_wormhole_hop_uses_link_cost(self):
        """Test wormholes add their own cost, possibly zero."""
        a, b = StarSystem("A"), StarSystem("B")
        start = RouteEdge(fuel=100, days=1)

        free = wormhole_hop(start, a, 0.0, WormholeLink(b))
        costly = wormhole_hop(start, a, 0.0, WormholeLink(b, fuel=40, days=2))

        assert (free.fuel, free.days) == (100, 1)
        assert (costly.fuel, costly.days) == (140, 3)


class TestDepartureDanger:
    """Tests for deferred danger accounting."""

    def test_origin_danger_not_added_twice(self):
        """Test leaving the origin carries only the seeded danger."""
        origin = StarSystem("Origin", danger=0.5)
        galaxy = Galaxy([origin])

        assert departure_danger(origin_edge(0.5), origin, galaxy) == 0.5

    def test_system_danger_charged_when_left(self):
        """Test a system's danger is added when a route leaves it."""
        origin = StarSystem("Origin")
        middle = StarSystem("Middle", danger=0.75)
        galaxy = Galaxy([origin, middle])

        arrived = RouteEdge(previous=origin, fuel=100, days=1, danger=0.0)
        assert departure_danger(arrived, middle, galaxy) == 0.75


class TestEdgeBuilder:
    """Tests for candidate generation."""

    def test_hyperlane_candidates(self):
        """Test hyperlane neighbors are offered at the hyperdrive cost."""
        a, b, c = StarSystem("A"), StarSystem("B"), StarSystem("C")
        galaxy = Galaxy()
        galaxy.add_hyperlane(a, b)
        galaxy.add_hyperlane(a, c)

        builder = EdgeBuilder(galaxy, hyperdrive_fuel=100)
        candidates = dict(builder.candidates(a, origin_edge(0.0)))

        assert set(candidates) == {b, c}
        assert candidates[b].fuel == 100
        assert candidates[b].days == 1
        assert candidates[b].previous is a

    def test_no_hyperdrive_no_hyperlane_candidates(self):
        a, b = StarSystem("A"), StarSystem("B")
        galaxy = Galaxy()
        galaxy.add_hyperlane(a, b)

        builder = EdgeBuilder(galaxy, hyperdrive_fuel=0)
        assert list(builder.candidates(a, origin_edge(0.0))) == []

    def test_knowledge_blocks_hyperlane(self):
        """Test the knowledge predicate filters hyperlanes."""
        a, b, c = StarSystem("A"), StarSystem("B"), StarSystem("C")
        galaxy = Galaxy()
        galaxy.add_hyperlane(a, b)
        galaxy.add_hyperlane(a, c)

        builder = EdgeBuilder(galaxy, hyperdrive_fuel=100,
                              knowledge=lambda src, dst: dst is b)
        assert [s for s, _ in builder.candidates(a, origin_edge(0.0))] == [b]

    def test_jump_ignores_knowledge(self):
        """Test jump drive targets are offered even if nothing is known."""
        a = StarSystem("A", (0, 0))
        b = StarSystem("B", (50, 0))
        far = StarSystem("Far", (500, 0))
        galaxy = Galaxy([a, b, far])

        builder = EdgeBuilder(galaxy, hyperdrive_fuel=100, jump_drive_fuel=200,
                              jump_range=100.0, knowledge=lambda src, dst: False)
        candidates = dict(builder.candidates(a, origin_edge(0.0)))

        assert set(candidates) == {b}
        assert candidates[b].fuel == 200

    def test_jump_checked_against_distance(self):
        """Test jump targets beyond range are dropped whatever the range query returns."""
        class LooseGalaxy(Galaxy):
            def neighbors_within(self, system, radius):
                return [s for s in self.systems if s is not system]

        a = StarSystem("A", (0, 0))
        near = StarSystem("Near", (100, 0))
        far = StarSystem("Far", (300, 0))
        galaxy = LooseGalaxy([a, near, far])

        builder = EdgeBuilder(galaxy, hyperdrive_fuel=0, jump_drive_fuel=200, jump_range=100.0)
        assert [s for s, _ in builder.candidates(a, origin_edge(0.0))] == [near]

    def test_wormhole_strategy_filters_links(self):
        """Test SOME skips costly wormholes while ALL keeps them."""
        a, b, c = StarSystem("A"), StarSystem("B"), StarSystem("C")
        galaxy = Galaxy()
        galaxy.add_wormhole(a, b)
        galaxy.add_wormhole(a, c, fuel=10, days=1)

        some = EdgeBuilder(galaxy, hyperdrive_fuel=100, wormhole_strategy=WormholeStrategy.SOME)
        every = EdgeBuilder(galaxy, hyperdrive_fuel=100, wormhole_strategy=WormholeStrategy.ALL)
        none = EdgeBuilder(galaxy, hyperdrive_fuel=100, wormhole_strategy=WormholeStrategy.NONE)

        assert [s for s, _ in some.candidates(a, origin_edge(0.0))] == [b]
        assert [s for s, _ in every.candidates(a, origin_edge(0.0))] == [b, c]
        assert list(none.candidates(a, origin_edge(0.0))) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
