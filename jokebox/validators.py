from .errors import ValidationFailure

import logging
logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def _failure(field, rule, message):
    return {'field': field, 'rule': rule, 'message': message}


def validate_joke(form, max_length=1000):
    """Check a posted joke and return the cleaned payload."""
    content = (form.get('content') or '').strip()
    errors = []

    if not content:
        errors.append(_failure('content', 'required', 'Content is required.'))
    elif len(content) > max_length:
        errors.append(_failure(
            'content', 'maxLength',
            f'Joke too long (max {max_length} characters).'
        ))

    if errors:
        logger.warning("Joke validation failed: %s", errors)
        raise ValidationFailure(errors)

    return {'content': content}


def validate_interaction(data, max_length=500):
    """Check a rating and/or comment submission.

    Both fields are optional. Blank values count as absent, so the
    returned payload holds ``None`` for anything not supplied.
    """
    errors = []
    rating = data.get('rating')
    comment = data.get('comment')

    if rating is None or (isinstance(rating, str) and not rating.strip()):
        rating = None
    elif isinstance(rating, bool) or (isinstance(rating, float) and not rating.is_integer()):
        errors.append(_failure('rating', 'number', 'Rating must be a whole number.'))
        rating = None
    else:
        try:
            rating = int(rating)
        except (TypeError, ValueError):
            errors.append(_failure('rating', 'number', 'Rating must be a whole number.'))
            rating = None
        else:
            if not MIN_RATING <= rating <= MAX_RATING:
                errors.append(_failure(
                    'rating', 'range',
                    f'Rating must be between {MIN_RATING} and {MAX_RATING}.'
                ))

    if comment is not None:
        if not isinstance(comment, str):
            errors.append(_failure('comment', 'string', 'Comment must be text.'))
        else:
            comment = comment.strip() or None
            if comment is not None and len(comment) > max_length:
                errors.append(_failure(
                    'comment', 'maxLength',
                    f'Comment too long (max {max_length} characters).'
                ))

    if errors:
        logger.warning("Interaction validation failed: %s", errors)
        raise ValidationFailure(errors)

    return {'rating': rating, 'comment': comment}
