import logging

from flask import Flask, request

from films_api.config import config
from films_api.engine import QueryEngine
from films_api.errors import FilmsApiError
from films_api.loader import load_films, load_films_command, read_films_csv
from films_api.models import db
from films_api.models.film import Film
from films_api.routes import routes
from films_api.schemas import ma
from films_api.store import build_store

logger = logging.getLogger(__name__)

def create_app(config_object=None, store=None):
    """Build the Flask app.

    ``store`` overrides the record store chosen by ``FILMS_STORE``; the
    query engine is built around it and kept in ``app.extensions``.
    """
    app = Flask(__name__)
    app.config.from_object(config_object or config)
    logging.basicConfig(level=app.config["LOG_LEVEL"])

    # keep title before length, year before title
    app.json.sort_keys = False

    db.init_app(app)
    ma.init_app(app)
    app.register_blueprint(routes)
    app.cli.add_command(load_films_command)

    @app.errorhandler(FilmsApiError)
    def handle_films_api_error(err):
        logger.warning("%s %s -> %d: %s", request.method, request.path,
                       err.status_code, err.message)
        return err.to_dict(), err.status_code

    with app.app_context():
        db.create_all()
        if store is None:
            store = _startup_store(app)

    app.extensions["film_engine"] = QueryEngine(store)
    logger.info("Films service ready (%s)", store.__class__.__name__)
    return app

def _startup_store(app):
    csv_path = app.config["FILMS_CSV"]
    encoding = app.config["FILMS_CSV_ENCODING"]
    if app.config["FILMS_STORE"] == "memory":
        return build_store(app.config, read_films_csv(csv_path, encoding))

    if app.config["FILMS_LOAD_ON_STARTUP"] and db.session.query(Film.id).first() is None:
        load_films(csv_path, encoding)
    return build_store(app.config)