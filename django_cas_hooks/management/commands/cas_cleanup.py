from django.core.management.base import BaseCommand

from django_cas_hooks.cleanup import sweep
from django_cas_hooks.config import load_config


class Command(BaseCommand):
    help = (
        'Delete expired proxy granting tickets and single logout login data. '
        'Meant to be run periodically, e.g. from cron.'
    )

    def handle(self, *args, **options):
        pgt_deleted, login_data_deleted = sweep(load_config())
        if options['verbosity'] > 1:
            self.stdout.write(
                'Deleted %d proxy granting tickets, %d login data records.' % (
                    pgt_deleted, login_data_deleted))
