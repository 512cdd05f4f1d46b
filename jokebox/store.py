from .db import get_db

import logging
logger = logging.getLogger(__name__)


class JokeStore:
    """Row-level reads and writes for jokes, ratings and comments.

    Every write commits immediately, so a rating write and a comment write
    made for the same request are persisted independently.
    """

    TABLES = ('user', 'joke', 'rating', 'comment')

    def __init__(self, db):
        self.db = db

    # -- jokes --

    def find_joke(self, joke_id):
        return self.db.execute(
            'SELECT j.id, j.user_id, j.content, j.created_at, j.updated_at,'
            ' u.username, u.image'
            ' FROM joke j JOIN user u ON j.user_id = u.id'
            ' WHERE j.id = ?',
            (joke_id,)
        ).fetchone()

    def list_jokes(self):
        """The feed: every joke with its author, most recently updated first."""
        return self.db.execute(
            'SELECT j.id, j.user_id, j.content, j.created_at, j.updated_at,'
            ' u.username, u.image'
            ' FROM joke j JOIN user u ON j.user_id = u.id'
            ' ORDER BY j.updated_at DESC, j.id DESC'
        ).fetchall()

    def create_joke(self, user_id, content):
        cur = self.db.execute(
            'INSERT INTO joke (user_id, content) VALUES (?, ?)',
            (user_id, content)
        )
        self.db.commit()
        logger.debug("Inserted joke %s for user %s", cur.lastrowid, user_id)
        return cur.lastrowid

    def update_joke(self, joke_id, content):
        self.db.execute(
            'UPDATE joke SET content = ?, updated_at = CURRENT_TIMESTAMP'
            ' WHERE id = ?',
            (content, joke_id)
        )
        self.db.commit()

    def delete_joke(self, joke_id):
        # Ratings and comments go first so nothing dangles
        self.db.execute('DELETE FROM rating WHERE joke_id = ?', (joke_id,))
        self.db.execute('DELETE FROM comment WHERE joke_id = ?', (joke_id,))
        self.db.execute('DELETE FROM joke WHERE id = ?', (joke_id,))
        self.db.commit()
        logger.debug("Deleted joke %s and its ratings/comments", joke_id)

    # -- ratings --

    def find_rating(self, user_id, joke_id):
        return self.db.execute(
            'SELECT id, user_id, joke_id, value FROM rating'
            ' WHERE user_id = ? AND joke_id = ?',
            (user_id, joke_id)
        ).fetchone()

    def create_rating(self, user_id, joke_id, value):
        # The unique (user_id, joke_id) index turns a racing duplicate
        # insert into an update of the row that won
        self.db.execute(
            'INSERT INTO rating (user_id, joke_id, value) VALUES (?, ?, ?)'
            ' ON CONFLICT (user_id, joke_id)'
            ' DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP',
            (user_id, joke_id, value)
        )
        self.db.commit()

    def update_rating(self, rating_id, value):
        self.db.execute(
            'UPDATE rating SET value = ?, updated_at = CURRENT_TIMESTAMP'
            ' WHERE id = ?',
            (value, rating_id)
        )
        self.db.commit()

    def list_ratings(self, joke_id):
        return self.db.execute(
            'SELECT id, user_id, joke_id, value FROM rating WHERE joke_id = ?',
            (joke_id,)
        ).fetchall()

    # -- comments --

    def find_comment(self, user_id, joke_id):
        return self.db.execute(
            'SELECT id, user_id, joke_id, content FROM comment'
            ' WHERE user_id = ? AND joke_id = ?',
            (user_id, joke_id)
        ).fetchone()

    def create_comment(self, user_id, joke_id, content):
        self.db.execute(
            'INSERT INTO comment (user_id, joke_id, content) VALUES (?, ?, ?)'
            ' ON CONFLICT (user_id, joke_id)'
            ' DO UPDATE SET content = excluded.content, updated_at = CURRENT_TIMESTAMP',
            (user_id, joke_id, content)
        )
        self.db.commit()

    def update_comment(self, comment_id, content):
        self.db.execute(
            'UPDATE comment SET content = ?, updated_at = CURRENT_TIMESTAMP'
            ' WHERE id = ?',
            (content, comment_id)
        )
        self.db.commit()

    def list_comments(self, joke_id):
        """Comments on a joke with their authors, most recently updated first."""
        return self.db.execute(
            'SELECT c.id, c.user_id, c.joke_id, c.content, c.created_at, c.updated_at,'
            ' u.username, u.image'
            ' FROM comment c JOIN user u ON c.user_id = u.id'
            ' WHERE c.joke_id = ?'
            ' ORDER BY c.updated_at DESC, c.id DESC',
            (joke_id,)
        ).fetchall()

    def count(self, table):
        if table not in self.TABLES:
            raise ValueError(f"Unknown table: {table}")
        return self.db.execute(f'SELECT COUNT(*) FROM {table}').fetchone()[0]


def get_store():
    """A store bound to the current app context's connection."""
    return JokeStore(get_db())
