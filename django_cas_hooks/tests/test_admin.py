from django.contrib.admin import site as admin_site
from django.contrib.auth import get_user_model
from django.contrib.messages.storage.fallback import FallbackStorage
from django.core.exceptions import SuspiciousOperation
from django.test import RequestFactory, TestCase

from django_cas_hooks.admin import (
    CasAwareUserAdmin, CASUserAdmin, CASUserInline,
)
from django_cas_hooks.models import CASUser

User = get_user_model()


class TestGetActions(TestCase):
    def test_superuser(self):
        request = RequestFactory().get('/')
        request.user = User(is_superuser=True, is_active=True)
        admin = CasAwareUserAdmin(User, admin_site)

        actions = admin.get_actions(request)
        self.assertIn('remove_cas_association', actions)

    def test_non_administrator(self):
        request = RequestFactory().get('/')
        request.user = User.objects.create_user('plain')
        admin = CasAwareUserAdmin(User, admin_site)

        actions = admin.get_actions(request)
        self.assertNotIn('remove_cas_association', actions)


class TestRemoveCASAssociation(TestCase):
    def setUp(self):
        self.user = User.objects.create_user('jdoe', 'jdoe@example.com')
        CASUser.objects.set(self.user.pk, 'jdoe_cas')
        self.admin = CasAwareUserAdmin(User, admin_site)

    def test_should_remove_association(self):
        request = RequestFactory().post('/')
        request.session = {}
        request._messages = FallbackStorage(request)
        request.user = User(is_superuser=True, is_active=True)

        self.admin.remove_cas_association(request, User.objects.all())

        self.assertIsNone(CASUser.objects.lookup_username(self.user.pk))

    def test_should_reject_non_administrator(self):
        request = RequestFactory().post('/')
        request.user = User.objects.create_user('plain')

        with self.assertRaises(SuspiciousOperation):
            self.admin.remove_cas_association(request, User.objects.all())
        self.assertEqual(
            CASUser.objects.lookup_username(self.user.pk), 'jdoe_cas')


class TestAssociationAdminForms(TestCase):
    def setUp(self):
        self.alice = User.objects.create_user('alice', 'alice@example.com')
        self.bob = User.objects.create_user('bob', 'bob@example.com')
        CASUser.objects.set(self.alice.pk, 'shared')
        self.request = RequestFactory().post('/')
        self.request.user = User.objects.create_superuser(
            'root', 'root@example.com', 'secret')

    def association_form(self, data, instance=None):
        form_class = CASUserAdmin(CASUser, admin_site).get_form(self.request)
        return form_class(data, instance=instance)

    def inline_formset(self, user, cas_username):
        inline = CASUserInline(User, admin_site)
        formset_class = inline.get_formset(self.request, obj=user)
        return formset_class({
            'casuser-TOTAL_FORMS': '1',
            'casuser-INITIAL_FORMS': '0',
            'casuser-MIN_NUM_FORMS': '0',
            'casuser-MAX_NUM_FORMS': '1',
            'casuser-0-user': str(user.pk),
            'casuser-0-cas_username': cas_username,
        }, instance=user, prefix='casuser')

    def test_association_admin_rejects_username_of_another_account(self):
        form = self.association_form(
            {'user': self.bob.pk, 'cas_username': 'shared'})

        self.assertFalse(form.is_valid())
        self.assertTrue(form.has_error('cas_username', 'cas_username_taken'))
        self.assertEqual(
            CASUser.objects.filter(cas_username='shared').count(), 1)

    def test_association_admin_accepts_free_username(self):
        form = self.association_form(
            {'user': self.bob.pk, 'cas_username': 'bob_cas'})

        self.assertTrue(form.is_valid(), form.errors)
        form.save()
        self.assertEqual(
            CASUser.objects.lookup_username(self.bob.pk), 'bob_cas')

    def test_association_admin_keeps_own_username(self):
        form = self.association_form(
            {'user': self.alice.pk, 'cas_username': 'shared'},
            instance=CASUser.objects.get(user=self.alice))

        self.assertTrue(form.is_valid(), form.errors)

    def test_user_inline_rejects_username_of_another_account(self):
        formset = self.inline_formset(self.bob, 'shared')

        self.assertFalse(formset.is_valid())
        self.assertTrue(
            formset.forms[0].has_error('cas_username', 'cas_username_taken'))
        self.assertIsNone(CASUser.objects.lookup_username(self.bob.pk))

    def test_user_inline_accepts_free_username(self):
        formset = self.inline_formset(self.bob, 'bob_cas')

        self.assertTrue(formset.is_valid(), formset.errors)
        formset.save()
        self.assertEqual(
            CASUser.objects.lookup_username(self.bob.pk), 'bob_cas')
