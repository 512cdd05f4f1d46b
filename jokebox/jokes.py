from flask import (
    Blueprint, current_app, flash, g, jsonify, redirect, render_template,
    request, url_for
)
from werkzeug.exceptions import abort

from .auth import login_required
from .errors import JokeNotFound, ValidationFailure
from .interactions import record_interaction
from .stats import compute_statistics
from .store import get_store
from .validators import validate_interaction, validate_joke

import logging
logger = logging.getLogger(__name__)

bp = Blueprint('jokes', __name__)


def redirect_back(fallback='index', **values):
    return redirect(request.referrer or url_for(fallback, **values))


def get_joke(id, check_author=True):
    """Get a joke and its author by id.

    :param id: id of the joke to get
    :param check_author: require the current user to be the author
    :raise 404: if a joke with the given id doesn't exist
    :raise 403: if the current user isn't the author
    """
    joke = get_store().find_joke(id)

    if joke is None:
        raise JokeNotFound(id)

    if check_author and joke['user_id'] != g.user['id']:
        logger.warning("User %s tried to modify joke %s they don't own", g.user['username'], id)
        abort(403, "You do not have permission to modify this joke.")

    return joke


@bp.route('/')
@login_required
def index():
    """The feed: all jokes, most recently updated first."""
    jokes = get_store().list_jokes()
    logger.debug("Fetched %d jokes for the feed", len(jokes))
    return render_template('jokes/index.html', jokes=jokes)


@bp.route('/jokes/create')
@login_required
def create():
    return render_template('jokes/posting.html')


@bp.route('/jokes', methods=('POST',))
@login_required
def store():
    try:
        payload = validate_joke(request.form, current_app.config['JOKE_MAX_LENGTH'])
    except ValidationFailure as e:
        for message in e.messages:
            flash(message['message'], 'error')
        return redirect_back('jokes.create')

    joke_id = get_store().create_joke(g.user['id'], payload['content'])
    logger.info("Joke %s created by %s", joke_id, g.user['username'])
    flash('Joke created successfully', 'success')
    return redirect_back()


@bp.route('/jokes/<int:id>')
@login_required
def show(id):
    joke = get_joke(id, check_author=False)
    return jsonify(dict(joke))


@bp.route('/jokes/<int:id>/edit')
@login_required
def edit(id):
    joke = get_joke(id)
    return render_template('jokes/edit.html', joke=joke)


@bp.route('/jokes/<int:id>/update', methods=('POST',))
@login_required
def update(id):
    get_joke(id)

    try:
        payload = validate_joke(request.form, current_app.config['JOKE_MAX_LENGTH'])
    except ValidationFailure as e:
        for message in e.messages:
            flash(message['message'], 'error')
        return redirect_back('jokes.edit', id=id)

    get_store().update_joke(id, payload['content'])
    logger.info("Joke %s updated by %s", id, g.user['username'])
    flash('Joke updated successfully', 'success')
    return redirect_back()


@bp.route('/jokes/<int:id>/delete', methods=('POST',))
@login_required
def delete(id):
    """Delete a joke along with its ratings and comments.

    Only the author may delete a joke.
    """
    get_joke(id)
    get_store().delete_joke(id)
    logger.info("Joke %s deleted by %s", id, g.user['username'])
    return redirect_back()


@bp.route('/jokes/<int:id>/interactions')
@login_required
def show_joke(id):
    """A joke with its comments and rating breakdown."""
    joke = get_joke(id, check_author=False)
    store = get_store()
    comments = store.list_comments(id)
    stats = compute_statistics(store.list_ratings(id))
    user_rating = store.find_rating(g.user['id'], id)
    user_comment = store.find_comment(g.user['id'], id)

    return render_template(
        'jokes/comments_ratings.html',
        joke=joke,
        comments=comments,
        stats=stats,
        user_rating=user_rating,
        user_comment=user_comment,
    )


@bp.route('/jokes/<int:id>/stats')
@login_required
def stats(id):
    get_joke(id, check_author=False)
    return jsonify(compute_statistics(get_store().list_ratings(id)))


@bp.route('/jokes/<int:id>/interactions', methods=('POST',))
@login_required
def interactions(id):
    """Record the current user's rating and/or comment on a joke.

    JSON requests get JSON answers. Form posts from the joke page flash the
    outcome and go back to that page.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'errors': [{
                'field': None, 'rule': 'object',
                'message': 'Request body must be a JSON object.',
            }]}), 400
    else:
        data = request.form

    try:
        payload = validate_interaction(data, current_app.config['COMMENT_MAX_LENGTH'])
        record_interaction(
            get_store(), g.user['id'], id,
            rating=payload['rating'], comment=payload['comment'],
        )
    except ValidationFailure as e:
        if not request.is_json:
            for message in e.messages:
                flash(message['message'], 'error')
            return redirect(url_for('jokes.show_joke', id=id))
        return jsonify({'errors': e.messages}), 400
    except JokeNotFound:
        if not request.is_json:
            raise
        return jsonify({'message': 'Joke not found'}), 404

    if not request.is_json:
        flash('Interactions recorded successfully', 'success')
        return redirect(url_for('jokes.show_joke', id=id))
    return jsonify({'message': 'Interactions recorded successfully'}), 201
