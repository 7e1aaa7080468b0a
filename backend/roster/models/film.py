"""Film catalogue entries as returned by the public films endpoint."""

from __future__ import annotations

from pydantic import BaseModel


class Film(BaseModel):
    title: str
    episode_id: int
    opening_crawl: str = ""
    director: str = ""
    producer: str = ""
    release_date: str = ""
    url: str | None = None


class FilmsResponse(BaseModel):
    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[Film] = []
