"""
Planning module for route search and route plans.
"""

from .graph import Galaxy, RouteGraph
from .cost import RouteEdge, EdgeBuilder, edge_priority
from .search import RouteSearch, SearchConfig
from .route_plan import RoutePlan, plan_route
from .errors import RouteSearchError, InvalidOriginError

__all__ = [
    'Galaxy',
    'RouteGraph',
    'RouteEdge',
    'EdgeBuilder',
    'edge_priority',
    'RouteSearch',
    'SearchConfig',
    'RoutePlan',
    'plan_route',
    'RouteSearchError',
    'InvalidOriginError',
]
