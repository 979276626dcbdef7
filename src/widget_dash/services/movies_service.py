"""Movie widget service."""

from __future__ import annotations

import logging

from ..data.normalization import normalize_movie_results
from ..data.providers import MovieProvider
from ..domain import Movie

logger = logging.getLogger(__name__)


def trending_movies(provider: MovieProvider) -> tuple[Movie, ...]:
    """This week's trending movies."""
    return normalize_movie_results(provider.fetch_trending_payload(), provider.image_base_url)


def search_movies(provider: MovieProvider, query: str) -> tuple[Movie, ...]:
    """Search by title; a blank query short-circuits to no results."""
    if not query or not query.strip():
        return ()
    movies = normalize_movie_results(provider.fetch_search_payload(query.strip()), provider.image_base_url)
    logger.info("Movie search %r matched %d titles", query.strip(), len(movies))
    return movies
