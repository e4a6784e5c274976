from datetime import datetime, timedelta, timezone


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def at(seconds):
    """Aware datetime `seconds` after the epoch."""
    return EPOCH + timedelta(seconds=seconds)
