"""Bulk loading of the film catalog from the semicolon separated CSV.

The file follows the classic ``film.csv`` layout::

    Year;Length;Title;Subject;Actor;Actress;Director;Popularity;Awards;*Image
    INT;INT;STRING;CAT;CAT;CAT;CAT;INT;BOOL;STRING
    1990;111;Tie Me Up! Tie Me Down!;Comedy;Banderas, Antonio;Abril, Victoria;Almodóvar, Pedro;68;No;NicholasCage.png

The second line is an optional column-type row and is skipped.
"""
import logging
from datetime import date

import click
import pandas as pd
from flask import current_app
from flask.cli import with_appcontext

from films_api.models import db
from films_api.models.film import Film

logger = logging.getLogger(__name__)

TEXT_COLUMNS = ("subject", "actor", "actress", "director", "awards")


def _optional_int(value):
    return None if pd.isna(value) else int(value)


def _film_year(value, title):
    year = _optional_int(value)
    if year is None:
        return None
    if not 1 <= year <= 9999:
        logger.warning("Ignoring year %d of %r, outside 1..9999", year, title)
        return None
    return date(year, 1, 1)


def _numeric(df, column):
    if column not in df.columns:
        return pd.Series(float("nan"), index=df.index)
    return pd.to_numeric(df[column], errors="coerce")


def read_films_csv(path, encoding="utf-8"):
    """Parse ``path`` into transient ``Film`` objects with ids 1..n in file order."""
    df = pd.read_csv(path, sep=";", dtype=str, keep_default_na=False, encoding=encoding)
    df.columns = [c.strip().lstrip("*").lower() for c in df.columns]
    missing = {"title", "year"} - set(df.columns)
    if missing:
        raise ValueError(f"{path}: missing columns {sorted(missing)}")

    df = df[df["year"] != "INT"]
    years = _numeric(df, "year")
    lengths = _numeric(df, "length")
    popularity = _numeric(df, "popularity")

    films = []
    records = df.to_dict("records")
    for film_id, (record, year, length, pop) in enumerate(
        zip(records, years, lengths, popularity), start=1
    ):
        title = record["title"].strip()
        films.append(Film(
            id=film_id,
            title=title,
            year=_film_year(year, title),
            length=_optional_int(length),
            popularity=_optional_int(pop),
            **{column: record.get(column, "").strip() for column in TEXT_COLUMNS},
        ))

    logger.info("Read %d films from %s", len(films), path)
    return films


def load_films(path, encoding="utf-8"):
    """Replace the contents of the film table with the CSV catalog."""
    films = read_films_csv(path, encoding)
    Film.query.delete()
    db.session.add_all(films)
    db.session.commit()
    logger.info("Loaded %d films into the database", len(films))
    return len(films)


@click.command("load-films")
@click.argument("path", required=False)
@with_appcontext
def load_films_command(path):
    """Load the film catalog CSV into the database."""
    path = path or current_app.config["FILMS_CSV"]
    db.create_all()
    count = load_films(path, current_app.config["FILMS_CSV_ENCODING"])
    click.echo(f"Loaded {count} films from {path}")
