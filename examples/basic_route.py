"""
Basic route planning example demonstrating the starroute library.

This script shows how to:
1. Build a small galaxy with hyperlanes and a wormhole
2. Describe a ship's drives
3. Map every system reachable from a starting point
4. Plan a route to one destination
5. Restrict routes to what a pilot has discovered
"""

import sys
sys.path.append('..')

from starroute.models.system import StarSystem
from starroute.models.ship import Ship, WormholeStrategy
from starroute.models.pilot import Pilot
from starroute.planning.graph import Galaxy
from starroute.planning.search import RouteSearch
from starroute.planning.route_plan import RoutePlan


def build_galaxy():
    """Build a demonstration galaxy and return it with its systems by name."""
    systems = {
        'Sol': StarSystem('Sol', (0, 0), danger=0.0),
        'Alpha Centauri': StarSystem('Alpha Centauri', (60, 20), danger=0.1),
        'Vega': StarSystem('Vega', (130, 10), danger=0.4),
        'Altair': StarSystem('Altair', (120, 90), danger=0.05),
        'Deneb': StarSystem('Deneb', (220, 60), danger=0.2),
        'Rigel': StarSystem('Rigel', (400, 300), danger=0.6),
    }

    galaxy = Galaxy(systems.values())
    galaxy.add_hyperlanes([
        (systems['Sol'], systems['Alpha Centauri']),
        (systems['Alpha Centauri'], systems['Vega']),
        (systems['Alpha Centauri'], systems['Altair']),
        (systems['Vega'], systems['Deneb']),
        (systems['Altair'], systems['Deneb']),
    ])
    galaxy.add_wormhole(systems['Deneb'], systems['Rigel'])
    return galaxy, systems


def main():
    """Run the basic route planning demonstration."""

    print("=" * 70)
    print("STARROUTE - Route Planning Demonstration")
    print("=" * 70)

    # ========================================================================
    # Step 1: Build the Galaxy
    # ========================================================================
    print("\n[1] Building galaxy...")

    galaxy, systems = build_galaxy()
    print(f"    {galaxy}")

    # ========================================================================
    # Step 2: Create the Ship
    # ========================================================================
    print("\n[2] Fitting ship with hyperdrive and jump drive...")

    ship = Ship.with_jump_drive(name="Pathfinder", jump_range=80.0,
                                wormhole_strategy=WormholeStrategy.SOME,
                                system=systems['Sol'])
    for key, value in ship.get_drive_summary().items():
        print(f"    {key:.<28} {value}")

    # ========================================================================
    # Step 3: Map Reachable Systems
    # ========================================================================
    print("\n[3] Mapping systems reachable from Sol...")

    search = RouteSearch.for_ship(galaxy, ship)
    for system, edge in search.route.items():
        print(f"    {system.name:<16} days={edge.days:<3} fuel={edge.fuel:<5} "
              f"danger={edge.danger:.2f}")

    # ========================================================================
    # Step 4: Plan a Route
    # ========================================================================
    print("\n[4] Planning route Sol -> Rigel...")

    route = RoutePlan.from_ship(galaxy, ship, systems['Rigel'])
    if route.has_route:
        print(f"    Route: {' -> '.join(s.name for s in route.plan())}")
        print(f"    Days: {route.days}, fuel: {route.required_fuel}")
        for system, fuel in route.fuel_costs():
            print(f"      {system.name:<16} +{fuel} fuel")
    else:
        print("    No route found")

    # ========================================================================
    # Step 5: Pilot Knowledge
    # ========================================================================
    print("\n[5] Planning with a pilot who has only been to Sol...")

    pilot = Pilot(flagship=Ship(name="Courier"), current_system=systems['Sol'])
    known = RouteSearch.from_pilot(galaxy, pilot)
    print(f"    Known systems: {sorted(s.name for s in known.systems())}")

    pilot.learn_links([(systems['Alpha Centauri'], systems['Altair'])])
    known = RouteSearch.from_pilot(galaxy, pilot)
    print(f"    After buying a map: {sorted(s.name for s in known.systems())}")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()
