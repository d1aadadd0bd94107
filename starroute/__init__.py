"""
starroute

A Python library for interstellar route planning over hyperlanes, jump
drive range and wormholes.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Import main classes for easy access
from .models.system import StarSystem, WormholeLink
from .models.ship import Ship, WormholeStrategy
from .models.pilot import Pilot
from .planning.graph import Galaxy, RouteGraph
from .planning.cost import RouteEdge
from .planning.search import RouteSearch, SearchConfig
from .planning.route_plan import RoutePlan, plan_route
from .planning.errors import RouteSearchError, InvalidOriginError

__all__ = [
    'StarSystem',
    'WormholeLink',
    'Ship',
    'WormholeStrategy',
    'Pilot',
    'Galaxy',
    'RouteGraph',
    'RouteEdge',
    'RouteSearch',
    'SearchConfig',
    'RoutePlan',
    'plan_route',
    'RouteSearchError',
    'InvalidOriginError',
]
