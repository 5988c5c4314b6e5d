from flask import Blueprint

from films_api.routes.films import films_router

routes = Blueprint('api', __name__, url_prefix='/api')

routes.register_blueprint(films_router)
