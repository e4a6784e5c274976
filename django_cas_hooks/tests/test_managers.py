from django.contrib.auth import get_user_model
from django.test import TestCase

from django_cas_hooks.exceptions import CASUsernameTaken
from django_cas_hooks.models import CASUser

User = get_user_model()


class TestCasUserManager(TestCase):
    def setUp(self):
        self.alice = User.objects.create_user('alice', 'alice@example.com')
        self.bob = User.objects.create_user('bob', 'bob@example.com')

    def test_lookups_on_missing_association_return_none(self):
        self.assertIsNone(CASUser.objects.lookup_username(self.alice.pk))
        self.assertIsNone(CASUser.objects.lookup_account('alice_cas'))

    def test_set_then_lookup(self):
        CASUser.objects.set(self.alice.pk, 'alice_cas')

        self.assertEqual(
            CASUser.objects.lookup_username(self.alice.pk), 'alice_cas')
        self.assertEqual(
            CASUser.objects.lookup_account('alice_cas'), self.alice.pk)

    def test_set_replaces_existing_username(self):
        CASUser.objects.set(self.alice.pk, 'alice_cas')
        CASUser.objects.set(self.alice.pk, 'alice2')

        self.assertEqual(
            CASUser.objects.lookup_username(self.alice.pk), 'alice2')
        self.assertIsNone(CASUser.objects.lookup_account('alice_cas'))
        self.assertEqual(CASUser.objects.count(), 1)

    def test_set_same_username_again_is_allowed(self):
        CASUser.objects.set(self.alice.pk, 'alice_cas')
        CASUser.objects.set(self.alice.pk, 'alice_cas')

        self.assertEqual(
            CASUser.objects.lookup_username(self.alice.pk), 'alice_cas')

    def test_remove(self):
        CASUser.objects.set(self.alice.pk, 'alice_cas')
        CASUser.objects.remove(self.alice.pk)

        self.assertIsNone(CASUser.objects.lookup_username(self.alice.pk))
        self.assertIsNone(CASUser.objects.lookup_account('alice_cas'))

    def test_remove_without_association_is_a_noop(self):
        CASUser.objects.remove(self.alice.pk)

        self.assertEqual(CASUser.objects.count(), 0)

    def test_set_username_of_another_account_is_rejected(self):
        CASUser.objects.set(self.alice.pk, 'alice_cas')
        CASUser.objects.set(self.bob.pk, 'bob_cas')

        with self.assertRaises(CASUsernameTaken) as cm:
            CASUser.objects.set(self.bob.pk, 'alice_cas')

        self.assertEqual(cm.exception.account_id, self.alice.pk)
        self.assertEqual(
            CASUser.objects.lookup_username(self.alice.pk), 'alice_cas')
        self.assertEqual(
            CASUser.objects.lookup_username(self.bob.pk), 'bob_cas')

    def test_association_is_deleted_with_the_account(self):
        CASUser.objects.set(self.alice.pk, 'alice_cas')
        self.alice.delete()

        self.assertIsNone(CASUser.objects.lookup_account('alice_cas'))
