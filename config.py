import os

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your_secret_key_here'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///bookshop.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BABEL_DEFAULT_LOCALE = 'en'
    LANGUAGES = ['en', 'fr']

    # Public asset root; uploaded images live under WEB_ROOT/PRODUCT_IMAGE_DIR
    WEB_ROOT = os.environ.get('WEB_ROOT') or os.path.join(basedir, 'static')
    PRODUCT_IMAGE_DIR = 'images/product'
    MAX_CONTENT_LENGTH = 8 * 1024 * 1024

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    LOG_LEVEL = 'DEBUG'
