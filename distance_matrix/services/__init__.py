"""
Query services over a populated distance matrix.
"""

from distance_matrix.services.routes_finder import RoutesFinder, resolve_place

__all__ = ["RoutesFinder", "resolve_place"]
