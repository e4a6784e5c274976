from django.db import models
from django.conf import settings
from django.utils import timezone

from django_cas_hooks.managers import CasUserManager


class CASUser(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
    )
    # unique across accounts by validation only, see CasUserManager.set
    cas_username = models.CharField(max_length=255, db_index=True)

    objects = CasUserManager()

    class Meta:
        permissions = [
            ('administer_cas', 'Administer CAS settings and associations'),
        ]

    def __str__(self):
        return self.cas_username


class LoginData(models.Model):
    session_key = models.CharField(max_length=40, unique=True)
    ticket = models.CharField(max_length=255, blank=True)
    created = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        verbose_name_plural = 'login data'

    def __str__(self):
        return self.session_key


class CASSetting(models.Model):
    key = models.CharField(max_length=100, primary_key=True)
    value = models.JSONField()

    def __str__(self):
        return self.key
