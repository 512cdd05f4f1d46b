"""
Populate the database with sample users, jokes and interactions.
"""

import random

import click
from werkzeug.security import generate_password_hash

from .db import get_db
from .interactions import record_interaction
from .store import JokeStore

import logging
logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    'alice_laughs',
    'bob_jokes',
    'charlie_comedy',
    'diana_giggles',
    'eve_humor',
    'frank_funny',
]

SAMPLE_JOKES = [
    "Why did the scarecrow win an award? Because he was outstanding in his field!",
    "Why don't scientists trust atoms? Because they make up everything!",
    "What do you call fake spaghetti? An impasta!",
    "Why did the bicycle fall over? Because it was two-tired!",
    "Why do programmers prefer dark mode? Because light attracts bugs!",
    "What do you call a bear with no teeth? A gummy bear!",
    "I'm reading a book about anti-gravity. It's impossible to put down!",
    "Did you hear about the restaurant on the moon? Great food, no atmosphere!",
    "Why was the computer cold? It left its Windows open!",
    "Why don't skeletons fight each other? They don't have the guts!",
]

SAMPLE_COMMENTS = [
    "Ha! Classic.",
    "I groaned out loud.",
    "My kids will love this one.",
    "Heard it before, still funny.",
    "Not my favourite, but okay.",
]

SAMPLE_PASSWORD = 'password'


def seed_db(with_interactions=True, rng=None):
    """Insert the sample data and return ``(users, jokes, interactions)`` counts.

    Existing users with a sample username are reused rather than duplicated.
    """
    rng = rng or random.Random()
    db = get_db()
    store = JokeStore(db)

    user_ids = []
    for username in SAMPLE_USERS:
        try:
            cur = db.execute(
                'INSERT INTO user (username, password, image) VALUES (?, ?, ?)',
                (username, generate_password_hash(SAMPLE_PASSWORD),
                 f'https://api.dicebear.com/7.x/fun-emoji/svg?seed={username}')
            )
            user_ids.append(cur.lastrowid)
        except db.IntegrityError:
            logger.warning("User %s already exists, reusing it", username)
            user_ids.append(db.execute(
                'SELECT id FROM user WHERE username = ?', (username,)
            ).fetchone()['id'])
    db.commit()

    joke_ids = [store.create_joke(rng.choice(user_ids), content) for content in SAMPLE_JOKES]

    interactions = 0
    if with_interactions:
        for joke_id in joke_ids:
            for user_id in rng.sample(user_ids, rng.randint(0, len(user_ids))):
                comment = rng.choice(SAMPLE_COMMENTS) if rng.random() < 0.5 else None
                record_interaction(store, user_id, joke_id,
                                   rating=rng.randint(1, 5), comment=comment)
                interactions += 1

    logger.info("Seeded %d users, %d jokes, %d interactions",
                len(user_ids), len(joke_ids), interactions)
    return len(user_ids), len(joke_ids), interactions


@click.command('seed-db')
@click.option('--ratings/--no-ratings', default=True,
              help='Also add random ratings and comments.')
def seed_db_command(ratings):
    """Fill the database with sample users and jokes."""
    users, jokes, interactions = seed_db(with_interactions=ratings)
    click.echo(f'Seeded {users} users, {jokes} jokes and {interactions} interactions.')
    click.echo(f"All sample users have password: '{SAMPLE_PASSWORD}'")


def init_app(app):
    app.cli.add_command(seed_db_command)
