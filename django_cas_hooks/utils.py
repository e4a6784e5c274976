def get_free_username(wanted, is_free, limit):
    """Return `wanted`, or the first free ``wanted_N`` with 2 <= N < limit."""
    candidates = [wanted] + [
        '{}_{}'.format(wanted, num) for num in range(2, limit)]
    for username in candidates:
        if is_free(username):
            return username

    raise ValueError('No free local username for CAS user {} (tried {})'
                     .format(wanted, len(candidates)))
