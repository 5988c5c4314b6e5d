"""In-memory query engine over the film catalog.

Every operation reads a fresh snapshot from the store, filters it, projects
each match to a small result tuple and sorts the result with a stable sort
on a single field. Ties keep the order the store returned them in.
"""
import logging
import re
from typing import NamedTuple
from datetime import date

from films_api.errors import InvalidParameter, NotFound

logger = logging.getLogger(__name__)

PERSON_ROLES = ("actor", "actress", "director")

_INTEGER = re.compile(r"[+-]?[0-9]+")


class IdTitle(NamedTuple):
    id: int
    title: str


class Title(NamedTuple):
    title: str


class PersonName(NamedTuple):
    role: str
    name: str


class TitleLength(NamedTuple):
    title: str
    length: int


class YearTitle(NamedTuple):
    year: date
    title: str


def resource_path(film_id):
    return f"/api/films/{film_id}"


def person_key(first_name, second_name):
    # names are stored as "LastName, FirstName"
    return f"{second_name}, {first_name}"


def sort_by(items, field):
    return sorted(items, key=lambda item: getattr(item, field))


def distinct(items):
    seen = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def parse_int(name, value):
    if value is None or not _INTEGER.fullmatch(value):
        raise InvalidParameter(name, value)
    return int(value)


def _leading_fragment(name, suffix):
    if suffix is None or len(suffix) < 2:
        raise InvalidParameter(name, suffix)
    return parse_int(name, suffix[:2])


class QueryEngine:

    def __init__(self, store):
        self.store = store

    def list_all(self):
        return self.store.find_all()

    def list_title_index(self):
        return [IdTitle(f.id, f.title) for f in self.store.find_all()]

    def get_by_id(self, film_id):
        film = self.store.find_by_id(film_id)
        if film is None:
            raise NotFound(film_id)
        return film

    def list_person_names(self, role):
        # empty names are dropped before deduplication, comparison is case-sensitive
        if role not in PERSON_ROLES:
            raise InvalidParameter("role", role)
        names = [
            PersonName(role, getattr(f, role))
            for f in self.store.find_all()
            if getattr(f, role)
        ]
        result = sort_by(distinct(names), "name")
        logger.debug("%d distinct %s names", len(result), role)
        return result

    def list_titles_by_year(self, year):
        return sort_by([Title(f.title) for f in self.store.find_all_by_year(year)], "title")

    def list_titles_by_director(self, first_name, second_name):
        films = self.store.find_all_by_director(person_key(first_name, second_name))
        return sort_by([Title(f.title) for f in films], "title")

    def list_titles_by_actor(self, first_name, second_name):
        films = self.store.find_all_by_actor(person_key(first_name, second_name))
        return sort_by([Title(f.title) for f in films], "title")

    def list_titles_by_actress(self, first_name, second_name):
        films = self.store.find_all_by_actress(person_key(first_name, second_name))
        return sort_by([Title(f.title) for f in films], "title")

    def list_by_length_range(self, lt, gt):
        """Films strictly longer than ``gt`` and strictly shorter than ``lt``."""
        upper = parse_int("lt", lt)
        lower = parse_int("gt", gt)
        matches = []
        for film in self.store.find_all():
            # a missing length counts as zero minutes
            length = film.length or 0
            if lower < length < upper:
                matches.append(TitleLength(film.title, length))
        return sort_by(matches, "length")

    def list_by_decade(self, suffix):
        """``"90s"`` covers 1990 up to, not including, 2000."""
        lower = 1900 + _leading_fragment("suffix", suffix)
        return self._list_by_years(lower, lower + 10)

    def list_by_century(self, suffix):
        """``"20th"`` covers 1900 up to, not including, 2000."""
        lower = (_leading_fragment("suffix", suffix) - 1) * 100
        return self._list_by_years(lower, lower + 100)

    def _list_by_years(self, lower, upper):
        matches = [
            YearTitle(f.year, f.title)
            for f in self.store.find_all()
            if f.year is not None and lower <= f.year.year < upper
        ]
        logger.debug("%d films in [%d, %d)", len(matches), lower, upper)
        return sort_by(matches, "year")

    def delete_by_id(self, film_id):
        self.store.delete_by_id(film_id)
        logger.info("Deleted film %s", film_id)

