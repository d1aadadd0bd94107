"""
SHIP MODELLING MODULE

@Description: This module defines the Ship class, which describes the travel
capabilities of whoever is following a route: hyperdrive, jump drive and
the policy for using wormholes. The default parameters describe a basic
hyperdrive-only ship.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .system import StarSystem, WormholeLink


# --- DRIVE DEFAULTS ---
DEFAULT_HYPERDRIVE_FUEL = 100
DEFAULT_JUMP_DRIVE_FUEL = 200
DEFAULT_JUMP_RANGE = 100.0


class WormholeStrategy(Enum):
    """
    Which wormhole links a route may use.

    NONE ignores wormholes, SOME only allows links that cost neither fuel
    nor days, ALL allows every link whatever it costs.
    """
    NONE = "none"
    SOME = "some"
    ALL = "all"

    def allows(self, link: WormholeLink) -> bool:
        """
        Check whether a wormhole link may be used under this strategy.

        Args:
            link: Wormhole link to check

        Returns:
            True if the link is eligible
        """
        if self is WormholeStrategy.NONE:
            return False
        if self is WormholeStrategy.SOME:
            return link.is_free
        return True


@dataclass
class Ship:
    """
    Represents a ship with its drive characteristics.

    A fuel cost of zero means the ship does not have that kind of drive.
    A jump drive also needs a positive range to be usable.

    Attributes:
        name: Ship name (default: "Shuttle")
        hyperdrive_fuel: Fuel used per hyperlane hop (default: 100)
        jump_drive_fuel: Fuel used per jump drive hop (default: 0, no jump drive)
        jump_range: Maximum jump distance in map units (default: 0.0)
        wormhole_strategy: Which wormholes the ship may use (default: NONE)
        system: System the ship is currently in, if known
    """

    # --- IDENTITY ---
    name: str = "Shuttle"

    # --- DRIVES ---
    hyperdrive_fuel: int = DEFAULT_HYPERDRIVE_FUEL
    jump_drive_fuel: int = 0
    jump_range: float = 0.0

    # --- WORMHOLES ---
    wormhole_strategy: WormholeStrategy = WormholeStrategy.NONE

    # --- LOCATION ---
    system: Optional[StarSystem] = None

    def __post_init__(self):
        """Validate drive parameters after initialization."""
        if self.hyperdrive_fuel < 0:
            raise ValueError(f"Hyperdrive fuel must be non-negative, got {self.hyperdrive_fuel}")
        if self.jump_drive_fuel < 0:
            raise ValueError(f"Jump drive fuel must be non-negative, got {self.jump_drive_fuel}")
        if self.jump_range < 0:
            raise ValueError(f"Jump range must be non-negative, got {self.jump_range}")

    @property
    def has_hyperdrive(self) -> bool:
        return self.hyperdrive_fuel > 0

    @property
    def has_jump_drive(self) -> bool:
        return self.jump_drive_fuel > 0 and self.jump_range > 0

    @classmethod
    def with_jump_drive(cls, name: str = "Jumper",
                        jump_drive_fuel: int = DEFAULT_JUMP_DRIVE_FUEL,
                        jump_range: float = DEFAULT_JUMP_RANGE,
                        hyperdrive_fuel: int = DEFAULT_HYPERDRIVE_FUEL,
                        wormhole_strategy: WormholeStrategy = WormholeStrategy.NONE,
                        system: Optional[StarSystem] = None) -> "Ship":
        """
        Create a ship fitted with a jump drive as well as a hyperdrive.

        Args:
            name: Ship name
            jump_drive_fuel: Fuel used per jump
            jump_range: Maximum jump distance
            hyperdrive_fuel: Fuel used per hyperlane hop (0 for jump drive only)
            wormhole_strategy: Which wormholes the ship may use
            system: Current system

        Returns:
            Configured Ship
        """
        return cls(
            name=name,
            hyperdrive_fuel=hyperdrive_fuel,
            jump_drive_fuel=jump_drive_fuel,
            jump_range=jump_range,
            wormhole_strategy=wormhole_strategy,
            system=system,
        )

    def get_drive_summary(self) -> dict:
        """
        Get a summary of the ship's travel capabilities.

        Returns:
            Dictionary containing drive and wormhole settings
        """
        return {
            'name': self.name,
            'hyperdrive': self.has_hyperdrive,
            'hyperdrive_fuel': self.hyperdrive_fuel,
            'jump_drive': self.has_jump_drive,
            'jump_drive_fuel': self.jump_drive_fuel,
            'jump_range': self.jump_range,
            'wormholes': self.wormhole_strategy.value,
        }

    def __repr__(self) -> str:
        """String representation of the Ship."""
        return (f"Ship(name={self.name!r}, "
                f"hyperdrive_fuel={self.hyperdrive_fuel}, "
                f"jump_drive_fuel={self.jump_drive_fuel}, "
                f"jump_range={self.jump_range})")


if __name__ == "__main__":
    shuttle = Ship()
    jumper = Ship.with_jump_drive()

    print("Drive Summary")
    print("=" * 50)
    for ship in (shuttle, jumper):
        for key, value in ship.get_drive_summary().items():
            print(f"{key:.<30} {value}")
        print()
