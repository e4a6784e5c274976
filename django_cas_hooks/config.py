"""Configuration snapshot handed to the sweeper, forms and handlers.

Values come from three layers, later ones winning:

1. ``DEFAULTS`` below,
2. the ``CAS_HOOKS`` dict in Django settings,
3. ``CASSetting`` rows, written at runtime with :func:`save_setting`.
"""
import copy

from django.conf import settings

from django_cas_hooks.models import CASSetting


DEFAULTS = {
    'logout.single_logout_session_lifetime': 0,
    'user_accounts.auto_assigned_roles': [],
    'user_accounts.restrict_password_management': False,
    'user_accounts.restrict_email_management': False,
    'user_accounts.prevent_normal_login': False,
    'login_link_enabled': False,
    'login_link_label': 'Log in with CAS',
}


class CASHooksConfig(object):
    def __init__(self, values):
        self.single_logout_session_lifetime = int(
            values['logout.single_logout_session_lifetime'])
        self.auto_assigned_roles = [
            int(role_id)
            for role_id in values['user_accounts.auto_assigned_roles']]
        self.restrict_password_management = bool(
            values['user_accounts.restrict_password_management'])
        self.restrict_email_management = bool(
            values['user_accounts.restrict_email_management'])
        self.prevent_normal_login = bool(
            values['user_accounts.prevent_normal_login'])
        self.login_link_enabled = bool(values['login_link_enabled'])
        self.login_link_label = str(values['login_link_label'])

    @classmethod
    def from_dict(cls, overrides=None):
        values = copy.deepcopy(DEFAULTS)
        values.update(_check_keys(overrides or {}))
        return cls(values)


def _check_keys(values):
    unknown = set(values) - set(DEFAULTS)
    if unknown:
        raise KeyError(
            'Unknown CAS_HOOKS setting(s): %s' % ', '.join(sorted(unknown)))
    return values


def load_config():
    values = dict(getattr(settings, 'CAS_HOOKS', {}))
    for setting in CASSetting.objects.all():
        values[setting.key] = setting.value
    return CASHooksConfig.from_dict(values)


def save_setting(key, value):
    _check_keys({key: value})
    CASSetting.objects.update_or_create(key=key, defaults={'value': value})
