from datetime import datetime, timezone


def _plural(count, noun):
    return f"{count} {noun}{'' if count == 1 else 's'} ago"


def time_ago(timestamp, now=None):
    """Describe ``timestamp`` relative to ``now`` as "3 hours ago" etc.

    Naive datetimes are read as UTC, which is what SQLite's
    CURRENT_TIMESTAMP stores. Only the largest non-zero unit is shown.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = (now - timestamp).total_seconds()
    # int() truncates toward zero, so a future timestamp never yields a
    # positive unit
    days = int(seconds / 86400)
    seconds -= days * 86400
    hours = int(seconds / 3600)
    seconds -= hours * 3600
    minutes = int(seconds / 60)

    if days > 0:
        return _plural(days, 'day')
    elif hours > 0:
        return _plural(hours, 'hour')
    elif minutes > 0:
        return _plural(minutes, 'minute')
    else:
        return 'Just now'
