"""Record stores the query engine reads from.

A store hands back ``Film`` instances and knows nothing about projections,
ordering or deduplication; that is the engine's job.
"""
import logging
from abc import ABC, abstractmethod

from films_api.models import db
from films_api.models.film import Film

logger = logging.getLogger(__name__)


class FilmStore(ABC):

    @abstractmethod
    def find_all(self):
        ...

    @abstractmethod
    def find_by_id(self, film_id):
        """Return the film with ``film_id`` or ``None``."""

    @abstractmethod
    def find_all_by_director(self, director):
        ...

    @abstractmethod
    def find_all_by_actor(self, actor):
        ...

    @abstractmethod
    def find_all_by_actress(self, actress):
        ...

    @abstractmethod
    def find_all_by_year(self, year):
        ...

    @abstractmethod
    def delete_by_id(self, film_id):
        """Remove the film; unknown ids are ignored."""


class SqlAlchemyFilmStore(FilmStore):
    """Reads through ``db.session``; needs an application context."""

    def find_all(self):
        return Film.query.order_by(Film.id).all()

    def find_by_id(self, film_id):
        return db.session.get(Film, film_id)

    def find_all_by_director(self, director):
        return Film.query.filter_by(director=director).order_by(Film.id).all()

    def find_all_by_actor(self, actor):
        return Film.query.filter_by(actor=actor).order_by(Film.id).all()

    def find_all_by_actress(self, actress):
        return Film.query.filter_by(actress=actress).order_by(Film.id).all()

    def find_all_by_year(self, year):
        return Film.query.filter_by(year=year).order_by(Film.id).all()

    def delete_by_id(self, film_id):
        deleted = Film.query.filter_by(id=film_id).delete()
        db.session.commit()
        logger.debug("delete film %s removed %d row(s)", film_id, deleted)


class InMemoryFilmStore(FilmStore):
    """Keeps transient ``Film`` instances in a list, in load order."""

    def __init__(self, films=()):
        self._films = list(films)

    def find_all(self):
        return list(self._films)

    def find_by_id(self, film_id):
        for film in self._films:
            if film.id == film_id:
                return film
        return None

    def _find_all_by(self, field, value):
        return [f for f in self._films if getattr(f, field) == value]

    def find_all_by_director(self, director):
        return self._find_all_by("director", director)

    def find_all_by_actor(self, actor):
        return self._find_all_by("actor", actor)

    def find_all_by_actress(self, actress):
        return self._find_all_by("actress", actress)

    def find_all_by_year(self, year):
        return self._find_all_by("year", year)

    def delete_by_id(self, film_id):
        before = len(self._films)
        self._films = [f for f in self._films if f.id != film_id]
        logger.debug("delete film %s removed %d row(s)", film_id, before - len(self._films))


def build_store(app_config, films=()):
    match app_config.get("FILMS_STORE", "sql"):
        case "sql":
            return SqlAlchemyFilmStore()
        case "memory":
            return InMemoryFilmStore(films)
        case other:
            raise ValueError(f"Unknown FILMS_STORE {other!r}, expected 'sql' or 'memory'")
