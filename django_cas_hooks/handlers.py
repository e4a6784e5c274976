"""Signal handlers and the table that wires them up.

Every handler loads the configuration snapshot once and hands it to the
functions doing the work, so those can be called directly with any config.
"""
import logging

from django.contrib.auth.models import Group
from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.db.models.signals import post_delete
from django_cas_ng.signals import cas_user_authenticated

from django_cas_hooks.config import load_config, save_setting
from django_cas_hooks.models import LoginData


logger = logging.getLogger(__name__)

CAS_BACKEND = 'django_cas_hooks.auth_backends.CASHooksBackend'
AUTO_ASSIGNED_ROLES = 'user_accounts.auto_assigned_roles'


def without_role(roles, role_id):
    """Return (roles without `role_id`, whether it was there)."""
    remaining = [r for r in roles if r != role_id]
    return remaining, len(remaining) != len(roles)


def remove_auto_assigned_role(config, role_id):
    roles, found = without_role(config.auto_assigned_roles, role_id)
    if found:
        save_setting(AUTO_ASSIGNED_ROLES, roles)
        logger.info(
            "Removed deleted group %s from the CAS auto-assigned roles.",
            role_id)
    return roles


def assign_auto_roles(config, user):
    groups = Group.objects.filter(pk__in=config.auto_assigned_roles)
    user.groups.add(*groups)
    return groups


def forget_login(session_key):
    deleted, _ = LoginData.objects.filter(session_key=session_key).delete()
    return deleted


def remember_login(session_key, ticket):
    login_data, _ = LoginData.objects.update_or_create(
        session_key=session_key, defaults={'ticket': ticket or ''})
    return login_data


def on_logout(sender, request, user, **kwargs):
    if request is None or request.session.session_key is None:
        return
    forget_login(request.session.session_key)


def on_login(sender, request, user, **kwargs):
    if getattr(user, 'backend', None) != CAS_BACKEND:
        return
    session_key = request.session.session_key
    if session_key is None:
        logger.debug("No session key for CAS login of user %s.", user.pk)
        return
    remember_login(session_key, request.GET.get('ticket'))


def on_group_deleted(sender, instance, **kwargs):
    remove_auto_assigned_role(load_config(), instance.pk)


def on_cas_user_authenticated(sender, user, created, **kwargs):
    if created:
        assign_auto_roles(load_config(), user)


# (signal, sender, handler)
HANDLERS = [
    (user_logged_out, None, on_logout),
    (user_logged_in, None, on_login),
    (post_delete, Group, on_group_deleted),
    (cas_user_authenticated, None, on_cas_user_authenticated),
]


def connect_handlers():
    for signal, sender, handler in HANDLERS:
        signal.connect(
            handler,
            sender=sender,
            dispatch_uid='django_cas_hooks.' + handler.__name__,
        )
