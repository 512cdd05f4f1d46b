from flask import Blueprint, jsonify
from werkzeug.exceptions import abort

from .store import get_store

bp = Blueprint('status_api', __name__, url_prefix='/api/status')

ENDPOINTS = {
    'users': 'user',
    'jokes': 'joke',
    'ratings': 'rating',
    'comments': 'comment',
}


@bp.route('/<name>')
def count(name):
    table = ENDPOINTS.get(name)
    if table is None:
        abort(404)
    return jsonify({'count': get_store().count(table)})
