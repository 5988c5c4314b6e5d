from datetime import date

import pytest

from films_api import create_app
from films_api.config import TestConfig
from films_api.engine import QueryEngine
from films_api.models import db
from films_api.models.film import Film
from films_api.store import InMemoryFilmStore


def make_films():
    rows = [
        (1, "Tie Me Up! Tie Me Down!", date(1990, 1, 1), 111,
         "Banderas, Antonio", "Abril, Victoria", "Almodóvar, Pedro"),
        (2, "Hannah and Her Sisters", date(1986, 1, 1), 107,
         "Caine, Michael", "Farrow, Mia", "Allen, Woody"),
        (3, "Annie Hall", date(1977, 1, 1), 93,
         "Allen, Woody", "Keaton, Diane", "Allen, Woody"),
        (4, "Zelig", date(1983, 1, 1), 79,
         "Allen, Woody", "Farrow, Mia", "Allen, Woody"),
        (5, "Short Subject", date(1990, 1, 1), 45, "", "", ""),
        (6, "Women on the Verge", date(1988, 1, 1), 88,
         "Banderas, Antonio", "Maura, Carmen", "Almodóvar, Pedro"),
        (7, "The Matrix", date(1999, 1, 1), 136,
         "Reeves, Keanu", "Moss, Carrie-Anne", "Wachowski, Lana"),
        (8, "Memento", date(2000, 1, 1), 113,
         "Pearce, Guy", "Moss, Carrie-Anne", "Nolan, Christopher"),
        (9, "Metropolis", date(1927, 1, 1), 153,
         "Fröhlich, Gustav", "Helm, Brigitte", "Lang, Fritz"),
        (10, "Untimed", None, None, "", None, ""),
    ]
    return [
        Film(id=film_id, title=title, year=year, length=length,
             actor=actor, actress=actress, director=director,
             subject="Drama", popularity=50, awards="No")
        for film_id, title, year, length, actor, actress, director in rows
    ]


@pytest.fixture
def films():
    return make_films()


@pytest.fixture
def store(films):
    return InMemoryFilmStore(films)


@pytest.fixture
def engine(store):
    return QueryEngine(store)


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.session.add_all(make_films())
        db.session.commit()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
