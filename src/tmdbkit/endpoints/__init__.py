"""Endpoint tables, one module per resource family.

Each module declares its endpoints as ``EndpointSpec`` constants, e.g.
``tmdbkit.endpoints.movies.IMAGES.build(movie_id=1)``.
"""

from tmdbkit.endpoints import movies, organizations, people, reference, search, tv
from tmdbkit.endpoints.reference import ExternalSource
from tmdbkit.endpoints.search import TimeWindow

__all__ = [
    "ExternalSource",
    "TimeWindow",
    "movies",
    "organizations",
    "people",
    "reference",
    "search",
    "tv",
]
