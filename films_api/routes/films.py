import re
from datetime import date

from flask import Blueprint, current_app, request

from films_api.engine import parse_int, resource_path
from films_api.errors import InvalidParameter, MissingParameter
from films_api.schemas.film import (
    film_schema,
    id_titles_schema,
    person_names_schemas,
    title_lengths_schema,
    titles_schema,
    year_titles_schema,
)

# registered under the /api blueprint
films_router = Blueprint('films', __name__, url_prefix='/films')

ALL_FILMS_PATH = "/api/films/allFilms"

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# ids are stored as signed 64-bit integers
MIN_ID, MAX_ID = -2**63, 2**63 - 1

def get_engine():
    return current_app.extensions["film_engine"]

def film_to_hateoas(film):
    return {
        **film_schema.dump(film),
        "_links": {
            "self": resource_path(film.id),
            "films": ALL_FILMS_PATH,
        }
    }

def required_arg(name):
    value = request.args.get(name)
    if value is None:
        raise MissingParameter(name)
    return value

def parse_id(value):
    film_id = parse_int("id", value)
    if not MIN_ID <= film_id <= MAX_ID:
        raise InvalidParameter("id", value)
    return film_id

def parse_date(name, value):
    # YYYY-MM-DD only, no ISO basic or week forms
    if not _ISO_DATE.fullmatch(value):
        raise InvalidParameter(name, value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidParameter(name, value)

@films_router.get("/allFilms")
def read_all_films():
    film_items = [film_to_hateoas(f) for f in get_engine().list_all()]
    return {
        "count": len(film_items),
        "items": film_items,
        "_links": {"self": ALL_FILMS_PATH}
    }

@films_router.get("/titles")
def read_titles():
    return id_titles_schema.dump(get_engine().list_title_index())

@films_router.get("/<film_id>")
def read_film(film_id):
    film = get_engine().get_by_id(parse_id(film_id))
    return film_to_hateoas(film)

@films_router.get("/actors")
def read_actors():
    return person_names_schemas["actor"].dump(get_engine().list_person_names("actor"))

@films_router.get("/actresses")
def read_actresses():
    return person_names_schemas["actress"].dump(get_engine().list_person_names("actress"))

@films_router.get("/directors")
def read_directors():
    return person_names_schemas["director"].dump(get_engine().list_person_names("director"))

# date format YYYY-MM-DD, e.g. /api/films/date/1990-01-01
@films_router.get("/date/<year>")
def read_titles_by_date(year):
    titles = get_engine().list_titles_by_year(parse_date("year", year))
    return titles_schema.dump(titles)

# /api/films/director?firstName=Woody&secondName=Allen
@films_router.get("/director")
def read_titles_by_director():
    titles = get_engine().list_titles_by_director(required_arg("firstName"), required_arg("secondName"))
    return titles_schema.dump(titles)

@films_router.get("/actor")
def read_titles_by_actor():
    titles = get_engine().list_titles_by_actor(required_arg("firstName"), required_arg("secondName"))
    return titles_schema.dump(titles)

@films_router.get("/actress")
def read_titles_by_actress():
    titles = get_engine().list_titles_by_actress(required_arg("firstName"), required_arg("secondName"))
    return titles_schema.dump(titles)

# /api/films/length?lt=90&gt=45
@films_router.get("/length")
def read_films_by_length():
    films = get_engine().list_by_length_range(required_arg("lt"), required_arg("gt"))
    return title_lengths_schema.dump(films)

# /api/films/decade?suffix=90s
@films_router.get("/decade")
def read_films_by_decade():
    return year_titles_schema.dump(get_engine().list_by_decade(required_arg("suffix")))

# /api/films/century?suffix=20th
@films_router.get("/century")
def read_films_by_century():
    return year_titles_schema.dump(get_engine().list_by_century(required_arg("suffix")))

@films_router.delete("/<film_id>")
def delete_film(film_id):
    get_engine().delete_by_id(parse_id(film_id))
    return "", 204
