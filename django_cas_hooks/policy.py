"""Checks deciding what CAS-associated accounts may do locally.

Every function takes the configuration snapshot explicitly and raises
``ValidationError`` when the action has to be refused.
"""
import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.urls import reverse
from django.utils.html import format_html

from django_cas_hooks.models import CASUser


logger = logging.getLogger(__name__)

ADMINISTER_PERMISSION = 'django_cas_hooks.administer_cas'


def cas_login_url():
    return reverse('cas_ng_login')


def is_cas_administrator(viewer):
    return viewer is not None and viewer.has_perm(ADMINISTER_PERMISSION)


def check_username_available(username, account_id=None):
    """Refuse a CAS username already bound to an account other than
    `account_id`. Pass ``account_id=None`` for accounts not yet saved."""
    if not username:
        return
    owner = CASUser.objects.lookup_account(username)
    if owner is not None and owner != account_id:
        raise ValidationError(
            'The CAS username %(username)s is already in use on this site.',
            code='cas_username_taken',
            params={'username': username},
        )


def check_normal_login_allowed(config, account_id):
    if not config.prevent_normal_login or account_id is None:
        return
    if CASUser.objects.lookup_username(account_id) is None:
        return
    logger.info("Refused password login for CAS account %s.", account_id)
    raise ValidationError(
        format_html(
            'This account must log in using <a href="{}">CAS</a>.',
            cas_login_url(),
        ),
        code='cas_normal_login_denied',
    )


def find_account(name_or_email):
    User = get_user_model()
    user = User.objects.filter(email__iexact=name_or_email).first()
    if user is None:
        user = User.objects.filter(
            **{User.USERNAME_FIELD: name_or_email}).first()
    return user


def check_password_reset_allowed(config, name_or_email):
    if not config.restrict_password_management:
        return
    user = find_account(name_or_email)
    if user is None or CASUser.objects.lookup_username(user.pk) is None:
        return
    logger.info("Refused password reset for CAS account %s.", user.pk)
    raise ValidationError(
        format_html(
            'The requested account is associated with CAS and its password '
            'cannot be managed from this website. Please <a href="{}">log in '
            'using CAS</a> instead.',
            cas_login_url(),
        ),
        code='cas_password_reset_denied',
    )
