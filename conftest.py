from django_cas_hooks.setup_django import setup_django


def pytest_configure(config):
    setup_django()
