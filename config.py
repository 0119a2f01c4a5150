import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', os.getenv('PORT', '3002')))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'


    APP_NAME = os.getenv('APP_NAME', 'Movie Catalog')
    APP_VERSION = os.getenv('APP_VERSION', '1.0.0')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


    MOVIES_DATA_PATH = os.getenv(
        'MOVIES_DATA_PATH',
        os.path.join(BASE_DIR, 'data', 'movies.json')
    )
