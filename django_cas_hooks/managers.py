from django.db import models, transaction

from django_cas_hooks.exceptions import CASUsernameTaken


class CasUserManager(models.Manager):
    """Association between local accounts and CAS usernames.

    An account has at most one CAS username. A username must not be bound to
    two accounts at once; `set` refuses to do that, the database does not.
    """

    def lookup_username(self, account_id):
        return self.filter(user_id=account_id) \
            .values_list('cas_username', flat=True).first()

    def lookup_account(self, username):
        return self.filter(cas_username=username) \
            .values_list('user_id', flat=True).first()

    @transaction.atomic
    def set(self, account_id, username):
        owner = self.select_for_update() \
            .filter(cas_username=username) \
            .exclude(user_id=account_id).first()
        if owner is not None:
            raise CASUsernameTaken(username, owner.user_id)

        cas_user = self.select_for_update() \
            .filter(user_id=account_id).first()
        if cas_user is None:
            cas_user = self.create(user_id=account_id, cas_username=username)
        elif cas_user.cas_username != username:
            cas_user.cas_username = username
            cas_user.save()
        return cas_user

    def remove(self, account_id):
        self.filter(user_id=account_id).delete()
