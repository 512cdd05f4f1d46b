import pytest

from jokebox.errors import ValidationFailure
from jokebox.validators import validate_interaction, validate_joke


def test_joke_is_stripped():
    assert validate_joke({'content': '  knock knock  '}) == {'content': 'knock knock'}


@pytest.mark.parametrize(('content', 'rule'), (
    ('', 'required'),
    ('   ', 'required'),
    ('x' * 11, 'maxLength'),
))
def test_joke_invalid(content, rule):
    with pytest.raises(ValidationFailure) as e:
        validate_joke({'content': content}, max_length=10)
    assert e.value.messages[0]['field'] == 'content'
    assert e.value.messages[0]['rule'] == rule
    assert e.value.code == 400


def test_joke_missing_field():
    with pytest.raises(ValidationFailure):
        validate_joke({})


@pytest.mark.parametrize(('data', 'expected'), (
    ({'rating': '4'}, {'rating': 4, 'comment': None}),
    ({'rating': 1, 'comment': 'lol'}, {'rating': 1, 'comment': 'lol'}),
    ({'rating': 5.0}, {'rating': 5, 'comment': None}),
    ({'comment': '  ok  '}, {'rating': None, 'comment': 'ok'}),
    ({'rating': '', 'comment': '   '}, {'rating': None, 'comment': None}),
    ({}, {'rating': None, 'comment': None}),
))
def test_interaction_valid(data, expected):
    assert validate_interaction(data) == expected


@pytest.mark.parametrize(('data', 'field', 'rule'), (
    ({'rating': '0'}, 'rating', 'range'),
    ({'rating': 6}, 'rating', 'range'),
    ({'rating': 'five'}, 'rating', 'number'),
    ({'rating': 3.5}, 'rating', 'number'),
    ({'rating': True}, 'rating', 'number'),
    ({'comment': 42}, 'comment', 'string'),
    ({'comment': 'x' * 11}, 'comment', 'maxLength'),
))
def test_interaction_invalid(data, field, rule):
    with pytest.raises(ValidationFailure) as e:
        validate_interaction(data, max_length=10)
    assert e.value.messages == [
        {'field': field, 'rule': rule, 'message': e.value.messages[0]['message']}
    ]


def test_interaction_reports_every_field():
    with pytest.raises(ValidationFailure) as e:
        validate_interaction({'rating': 9, 'comment': 'x' * 11}, max_length=10)
    assert [m['field'] for m in e.value.messages] == ['rating', 'comment']
