#!/usr/bin/env python
from setuptools import setup


setup(
    name='django_cas_hooks',
    version='1.0.0',
    description=(
        'Django glue for django-cas-ng: CAS username associations, login '
        'and account form policies, and PGT/single logout record cleanup.'
    ),
    author='Quantitative Engineering Design Inc.',
    author_email='',
    url='',
    packages=[
        'django_cas_hooks',
        'django_cas_hooks.migrations',
        'django_cas_hooks.management',
        'django_cas_hooks.management.commands',
    ],
    package_data={'django_cas_hooks': ['templates/django_cas_hooks/*.html']},
    classifiers=[
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Framework :: Django',
    ],
    python_requires='>=3.8',
    install_requires=[
        "django>=3.2",
        "django-cas-ng>=4.0",
    ],
    extras_require={
        'test': ['httmock', 'pytest', 'pytest-django'],
    },
)
