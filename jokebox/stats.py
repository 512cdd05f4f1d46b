import math

STARS = 5


def _value(rating):
    if isinstance(rating, int):
        return rating
    return rating['value']


def compute_statistics(ratings):
    """Summarise a joke's ratings for display.

    ``ratings`` may hold plain ints or rows/mappings with a ``value`` key.
    Percentages are rounded half up one bucket at a time, so they do not
    always add up to 100. With no ratings everything is zero.
    """
    values = [_value(r) for r in ratings]
    count = len(values)

    histogram = [0] * STARS
    for value in values:
        if not 1 <= value <= STARS:
            raise ValueError(f"Rating value out of range: {value}")
        histogram[value - 1] += 1

    if count == 0:
        return {
            'count': 0,
            'average': 0,
            'histogram': histogram,
            'percentages': [0] * STARS,
        }

    return {
        'count': count,
        'average': sum(values) / count,
        'histogram': histogram,
        'percentages': [math.floor(100 * n / count + 0.5) for n in histogram],
    }
