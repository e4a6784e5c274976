import django
from django.conf import settings


def setup_django():
    settings.configure(
        SECRET_KEY='django-cas-hooks-tests',
        USE_TZ=True,
        INSTALLED_APPS=[
            'django.contrib.admin',
            'django.contrib.auth',
            'django.contrib.contenttypes',
            'django.contrib.sessions',
            'django.contrib.messages',
            'django_cas_ng',
            'django_cas_hooks',
        ],
        MIDDLEWARE=[
            'django.contrib.sessions.middleware.SessionMiddleware',
            'django.middleware.csrf.CsrfViewMiddleware',
            'django.contrib.auth.middleware.AuthenticationMiddleware',
            'django.contrib.messages.middleware.MessageMiddleware',
        ],
        TEMPLATES=[{
            'BACKEND': 'django.template.backends.django.DjangoTemplates',
            'APP_DIRS': True,
            'OPTIONS': {'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ]},
        }],
        ROOT_URLCONF='django_cas_hooks.urls',
        AUTHENTICATION_BACKENDS=[
            'django.contrib.auth.backends.ModelBackend',
            'django_cas_hooks.auth_backends.CASHooksBackend',
        ],
        PASSWORD_HASHERS=['django.contrib.auth.hashers.MD5PasswordHasher'],
        DEFAULT_AUTO_FIELD='django.db.models.AutoField',
        CAS_SERVER_URL='http://fake-cas.example.com/',
        CAS_VERSION='2',
        CAS_CREATE_USER=True,
        DATABASES={'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:'
        }}

    )
    django.setup()
