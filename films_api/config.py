import os

from dotenv import load_dotenv

load_dotenv()

def _flag(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")

class Config(object):
    TESTING = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # "sql" reads through the database, "memory" keeps the CSV catalog in a list
    FILMS_STORE = os.getenv('FILMS_STORE', 'sql')
    FILMS_CSV = os.getenv('FILMS_CSV', 'data/film.csv')
    FILMS_CSV_ENCODING = os.getenv('FILMS_CSV_ENCODING', 'utf-8')
    FILMS_LOAD_ON_STARTUP = _flag('FILMS_LOAD_ON_STARTUP')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

class ProdConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('PROD_DATABASE_URI')

class DevConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DEV_DATABASE_URI', 'sqlite:///films.db')

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    FILMS_STORE = 'sql'
    FILMS_LOAD_ON_STARTUP = False
    LOG_LEVEL = 'DEBUG'

match os.getenv('ENV'):
    case 'PRODUCTION':
        config = ProdConfig
    case 'TESTING':
        config = TestConfig
    case _:
        config = DevConfig
