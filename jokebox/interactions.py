from .errors import JokeNotFound

import logging
logger = logging.getLogger(__name__)


def record_interaction(store, user_id, joke_id, rating=None, comment=None):
    """Save a user's rating and/or comment on a joke.

    A user holds at most one rating and one comment per joke: an existing
    row is overwritten, otherwise a new one is created. The two branches
    are independent and each makes at most one write. ``rating`` is
    expected to be validated already (an int from 1 to 5); an empty
    ``comment`` is treated as not supplied.

    :param store: data access object, see :class:`jokebox.store.JokeStore`
    :return: ``{'rating': action, 'comment': action}`` where action is
        ``'created'``, ``'updated'`` or ``None`` when nothing was supplied
    :raise JokeNotFound: if the joke doesn't exist; nothing is written
    """
    if store.find_joke(joke_id) is None:
        logger.warning("Interaction on missing joke %s by user %s", joke_id, user_id)
        raise JokeNotFound(joke_id)

    result = {'rating': None, 'comment': None}

    if rating is not None:
        existing = store.find_rating(user_id, joke_id)
        if existing is not None:
            store.update_rating(existing['id'], rating)
            result['rating'] = 'updated'
        else:
            store.create_rating(user_id, joke_id, rating)
            result['rating'] = 'created'

    if comment:
        existing = store.find_comment(user_id, joke_id)
        if existing is not None:
            store.update_comment(existing['id'], comment)
            result['comment'] = 'updated'
        else:
            store.create_comment(user_id, joke_id, comment)
            result['comment'] = 'created'

    logger.info("User %s interacted with joke %s: %s", user_id, joke_id, result)
    return result
