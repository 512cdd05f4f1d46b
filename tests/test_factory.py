from jokebox import create_app


def test_config():
    assert not create_app().testing
    assert create_app({'TESTING': True}).testing


def test_defaults(app):
    assert app.config['COMMENT_MAX_LENGTH'] == 500
    assert app.config['JOKE_MAX_LENGTH'] == 1000
    assert 'timeago' in app.jinja_env.filters


def test_cors_headers(client):
    response = client.get('/api/status/jokes', headers={'Origin': 'http://example.com'})
    # older flask-cors sends '*', newer releases echo the request origin
    assert response.headers['Access-Control-Allow-Origin'] in ('*', 'http://example.com')
