import os

import logging
from logging.config import dictConfig
from flask import Flask, request

from flask_cors import CORS


def create_app(test_config=None):
    # Create and configure the app
    app = Flask(__name__, instance_relative_config=True)
    CORS(app)

    # Ensure the instance folder exists, the log file lives there
    os.makedirs(app.instance_path, exist_ok=True)

    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '[%(asctime)s] [%(levelname)s] %(module)s: %(message)s',
                'datefmt': '%Y-%m-%dT%H:%M:%S',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'level': 'DEBUG',
            },
            'file': {
                'class': 'logging.FileHandler',
                'filename': os.path.join(app.instance_path, 'jokebox.log'),
                'formatter': 'default',
                'level': 'INFO',
                'delay': True,
            },
        },
        'root': {
            'level': 'DEBUG',
            'handlers': ['console', 'file'],
        },
    })
    logger = logging.getLogger(__name__)
    logger.info("Starting jokebox app")

    app.config.from_mapping(
        SECRET_KEY='dev',
        DATABASE=os.path.join(app.instance_path, 'jokebox.sqlite'),
        JOKE_MAX_LENGTH=1000,
        COMMENT_MAX_LENGTH=500,
    )

    if test_config is None:
        # Load the instance config, if it exists, when not testing
        app.config.from_pyfile('config.py', silent=True)
        logger.info("Loaded config from config.py")
    else:
        app.config.from_mapping(test_config)
        logger.info("Loaded test config")
    logger.info("Database configured at: %s", app.config['DATABASE'])

    if not app.config.get('SECRET_KEY'):
        logger.critical("SECRET_KEY is not set! The application is running insecurely.")

    from . import db
    db.init_app(app)

    from . import seed
    seed.init_app(app)
    logger.info("Database commands registered")

    from .timeago import time_ago
    app.add_template_filter(time_ago, 'timeago')

    from . import auth
    app.register_blueprint(auth.bp)

    from . import jokes
    app.register_blueprint(jokes.bp)
    app.add_url_rule('/', endpoint='index')

    from . import status_api
    app.register_blueprint(status_api.bp)

    @app.before_request
    def log_session():
        from flask import session
        logger.debug("Session user: %s", session.get('user_id', 'anonymous'))

    @app.after_request
    def log_response(response):
        logger.info("Returned %s for %s %s", response.status_code, request.method, request.path)
        return response

    return app
