from django.apps import AppConfig


class CASHooksAppConfig(AppConfig):
    name = 'django_cas_hooks'
    verbose_name = 'CAS account integration'
    default_auto_field = 'django.db.models.AutoField'

    def ready(self):
        from django_cas_hooks.handlers import connect_handlers
        connect_handlers()
