from __future__ import annotations

import logging

import aiohttp

from roster.core.config import Settings
from roster.models.film import Film, FilmsResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://swapi.dev/api"

FALLBACK_FILMS: list[Film] = [
    Film(
        title="A New Hope",
        episode_id=4,
        opening_crawl="It is a period of civil war. Rebel spaceships, striking from a hidden base, "
        "have won their first victory against the evil Galactic Empire.",
        director="George Lucas",
        producer="Gary Kurtz, Rick McCallum",
        release_date="1977-05-25",
    ),
    Film(
        title="The Empire Strikes Back",
        episode_id=5,
        opening_crawl="It is a dark time for the Rebellion. Although the Death Star has been destroyed, "
        "Imperial troops have driven the Rebel forces from their hidden base.",
        director="Irvin Kershner",
        producer="Gary Kurtz, Rick McCallum",
        release_date="1980-05-17",
    ),
    Film(
        title="Return of the Jedi",
        episode_id=6,
        opening_crawl="Luke Skywalker has returned to his home planet of Tatooine in an attempt to "
        "rescue his friend Han Solo from the clutches of the vile gangster Jabba the Hutt.",
        director="Richard Marquand",
        producer="Howard G. Kazanjian, George Lucas, Rick McCallum",
        release_date="1983-05-25",
    ),
    Film(
        title="The Phantom Menace",
        episode_id=1,
        opening_crawl="Turmoil has engulfed the Galactic Republic. The taxation of trade routes to "
        "outlying star systems is in dispute.",
        director="George Lucas",
        producer="Rick McCallum",
        release_date="1999-05-19",
    ),
    Film(
        title="Attack of the Clones",
        episode_id=2,
        opening_crawl="There is unrest in the Galactic Senate. Several thousand solar systems have "
        "declared their intentions to leave the Republic.",
        director="George Lucas",
        producer="Rick McCallum",
        release_date="2002-05-16",
    ),
    Film(
        title="Revenge of the Sith",
        episode_id=3,
        opening_crawl="War! The Republic is crumbling under attacks by the ruthless Sith Lord, "
        "Count Dooku. There are heroes on both sides. Evil is everywhere.",
        director="George Lucas",
        producer="Rick McCallum",
        release_date="2005-05-19",
    ),
]


def sort_by_episode(films: list[Film]) -> list[Film]:
    return sorted(films, key=lambda film: film.episode_id)


def search_films(films: list[Film], term: str | None) -> list[Film]:
    if not term or not term.strip():
        return list(films)

    needle = term.strip().lower()
    return [
        film
        for film in films
        if needle in film.title.lower()
        or needle in film.director.lower()
        or needle in film.opening_crawl.lower()
        or needle in str(film.episode_id)
    ]


class FilmCatalogService:
    """Read-only client for the public film catalogue.

    Any failure (transport, status, payload) falls back to the built-in list;
    there is no retry.
    """

    def __init__(self) -> None:
        self.base_url = DEFAULT_BASE_URL
        self.timeout_seconds = 10.0

    def configure(self, settings: Settings) -> None:
        self.base_url = settings.FILM_API_BASE_URL.rstrip("/")
        self.timeout_seconds = settings.FILM_API_TIMEOUT_SECONDS

    async def fetch_films(self) -> list[Film]:
        url = f"{self.base_url}/films/"
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise RuntimeError(f"Film request failed: {response.status}")
                    data = await response.json()
            films = FilmsResponse.model_validate(data).results
        except (aiohttp.ClientError, TimeoutError, RuntimeError, ValueError) as e:
            logger.warning("Error fetching films from %s, using built-in data: %s", url, e)
            films = FALLBACK_FILMS

        return sort_by_episode(films)


film_catalog_service = FilmCatalogService()
