import logging
from datetime import timedelta

from django.utils import timezone
from django_cas_ng.models import ProxyGrantingTicket

from django_cas_hooks.models import LoginData


logger = logging.getLogger(__name__)

PGT_TTL_SECONDS = 3600
SECONDS_PER_DAY = 86400


def sweep(config, now=None):
    """Delete stale PGT and login-data records.

    PGT records live for PGT_TTL_SECONDS. Login data lives for
    ``config.single_logout_session_lifetime`` days; a lifetime of zero or
    less keeps it forever. Database errors are left to the caller.

    Returns the number of deleted (PGT, login data) rows.
    """
    if now is None:
        now = timezone.now()

    pgt_deleted, _ = ProxyGrantingTicket.objects.filter(
        date__lte=now - timedelta(seconds=PGT_TTL_SECONDS)).delete()

    login_data_deleted = 0
    ttl = config.single_logout_session_lifetime * SECONDS_PER_DAY
    if ttl > 0:
        login_data_deleted, _ = LoginData.objects.filter(
            created__lte=now - timedelta(seconds=ttl)).delete()

    logger.info(
        "Removed %d expired proxy granting tickets and %d login data records.",
        pgt_deleted, login_data_deleted)
    return pgt_deleted, login_data_deleted
