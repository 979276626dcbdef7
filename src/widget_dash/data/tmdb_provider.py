"""The Movie Database (TMDB) adapter."""

from __future__ import annotations

from typing import Any

import requests

from ..config import Settings
from .http import build_session, get_json
from .providers import MovieProvider


class TMDBMovieProvider(MovieProvider):
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = "https://api.themoviedb.org/3",
        image_base_url: str = "https://image.tmdb.org/t/p/w500",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.image_base_url = image_base_url
        self.timeout = timeout
        self._session = session or build_session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "TMDBMovieProvider":
        return cls(
            api_key=settings.tmdb_api_key,
            base_url=settings.tmdb_base_url,
            image_base_url=settings.tmdb_image_base_url,
            timeout=settings.request_timeout,
        )

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        query = dict(params or {})
        if self.api_key:
            query["api_key"] = self.api_key
        return get_json(self._session, f"{self.base_url}/{path}", params=query, timeout=self.timeout, source="tmdb")

    def fetch_trending_payload(self) -> dict[str, Any]:
        return self._get("trending/movie/week")

    def fetch_search_payload(self, query: str) -> dict[str, Any]:
        return self._get("search/movie", {"query": query})
