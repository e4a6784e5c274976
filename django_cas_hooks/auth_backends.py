"""CAS authentication backend.

Ticket validation is done by django_cas_ng's client; the validated CAS
username is mapped to a local account through the CASUser association
instead of being used as the local username.
"""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.db import transaction
from django_cas_ng.signals import cas_user_authenticated
from django_cas_ng.utils import get_cas_client

from django_cas_hooks.models import CASUser
from django_cas_hooks.utils import get_free_username


logger = logging.getLogger(__name__)

USERNAME_TRIES_LIMIT = 1000


__all__ = ['CASHooksBackend']


class CASHooksBackend(ModelBackend):
    """CAS authentication backend"""

    def __init__(self):
        self.user_model = get_user_model()

    @transaction.atomic
    def create_user_and_cas_user(self, cas_username, attributes):
        def is_username_free(username):
            return not self.user_model.objects.filter(
                username=username).exists()

        username = get_free_username(
            attributes.get('username', cas_username), is_username_free,
            USERNAME_TRIES_LIMIT)
        # user will have an "unusable" password
        user = self.user_model.objects.create_user(
            username, attributes.get('email', ''))
        CASUser.objects.set(user.pk, cas_username)
        logger.info(
            "Created local account %s for CAS user %s.", username,
            cas_username)
        return user

    def authenticate(self, request, ticket=None, service=None):
        """Verifies CAS ticket and gets or creates user object"""
        if ticket is None or service is None:
            return None
        client = get_cas_client(service_url=service, request=request)
        cas_username, attributes, pgtiou = client.verify_ticket(ticket)
        attributes = attributes or {}
        if attributes and request is not None:
            request.session['attributes'] = attributes
        if not cas_username:
            return None

        account_id = CASUser.objects.lookup_account(cas_username)
        if account_id is not None:
            user = self.user_model.objects.get(pk=account_id)
            created = False
        else:
            # check if we want to create new users, if we don't fail auth
            if not getattr(settings, 'CAS_CREATE_USER', True):
                logger.info(
                    "CAS user %s has no local account.", cas_username)
                return None

            user = self.create_user_and_cas_user(cas_username, attributes)
            created = True

        if not self.user_can_authenticate(user):
            return None

        if pgtiou and getattr(settings, 'CAS_PROXY_CALLBACK', None) \
                and request is not None:
            request.session['pgtiou'] = pgtiou

        cas_user_authenticated.send(
            sender=self,
            user=user,
            created=created,
            username=cas_username,
            attributes=attributes,
            pgtiou=pgtiou,
            ticket=ticket,
            service=service,
            request=request,
        )
        return user
