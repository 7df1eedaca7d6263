"""Route module for ordering dispensing stops."""
from .optimizer import RouteOptimizer, apply_route, path_length

__all__ = [
    'RouteOptimizer',
    'apply_route',
    'path_length',
]
