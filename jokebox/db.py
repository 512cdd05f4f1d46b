import sqlite3

import click
from flask import current_app, g

import logging
logger = logging.getLogger(__name__)


def get_db():
    """Return the connection for the current app context, opening it once."""
    if 'db' not in g:
        logger.debug("Opening new DB connection to: %s", current_app.config['DATABASE'])
        g.db = sqlite3.connect(
            current_app.config['DATABASE'],
            detect_types=sqlite3.PARSE_DECLTYPES
        )
        g.db.row_factory = sqlite3.Row
        g.db.execute('PRAGMA foreign_keys = ON')

    return g.db


def close_db(e=None):
    db = g.pop('db', None)

    if db is not None:
        db.close()
        logger.debug("Closed DB connection")


def init_db():
    """Clear the existing data and create new tables."""
    db = get_db()
    with current_app.open_resource('schema.sql') as f:
        db.executescript(f.read().decode('utf8'))
    logger.info("Database initialized at %s", current_app.config['DATABASE'])


@click.command('init-db')
def init_db_command():
    """Clear the existing data and create new tables."""
    logger.info("Ran CLI: init-db")
    init_db()
    click.echo('Initialized the database.')


def init_app(app):
    app.teardown_appcontext(close_db)
    app.cli.add_command(init_db_command)
