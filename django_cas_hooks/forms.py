from django import forms
from django.contrib.auth import get_user_model, password_validation
from django.contrib.auth.forms import (
    AuthenticationForm, PasswordResetForm, UserCreationForm,
)

from django_cas_hooks import policy
from django_cas_hooks.config import load_config
from django_cas_hooks.models import CASUser


PASSWORD_FIELDS = ('current_password', 'new_password1', 'new_password2')


def cas_username_field():
    return forms.CharField(
        label='CAS Username',
        max_length=255,
        required=False,
        help_text='Username used to sign in on the CAS server.',
    )


class CASUserChangeForm(forms.ModelForm):
    """Account edit form with the CAS username association.

    `viewer` is the user doing the editing; it decides whether the password
    and email restrictions apply.
    """
    cas_username = cas_username_field()
    current_password = forms.CharField(
        label='Current password', required=False, strip=False,
        widget=forms.PasswordInput)
    new_password1 = forms.CharField(
        label='New password', required=False, strip=False,
        widget=forms.PasswordInput)
    new_password2 = forms.CharField(
        label='New password confirmation', required=False, strip=False,
        widget=forms.PasswordInput)

    class Meta:
        model = get_user_model()
        fields = ('username', 'first_name', 'last_name', 'email')

    def __init__(self, *args, viewer=None, config=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.viewer = viewer
        self.config = config if config is not None else load_config()

        if self.instance.pk is not None:
            self.fields['cas_username'].initial = \
                CASUser.objects.lookup_username(self.instance.pk)

        if not policy.is_cas_administrator(viewer):
            if self.config.restrict_password_management:
                for name in PASSWORD_FIELDS:
                    self.fields.pop(name, None)
            if self.config.restrict_email_management \
                    and 'email' in self.fields:
                self.fields['email'].disabled = True

    def clean_cas_username(self):
        username = self.cleaned_data['cas_username']
        policy.check_username_available(username, self.instance.pk)
        return username

    def clean(self):
        cleaned_data = super().clean()
        new_password = cleaned_data.get('new_password1')
        if 'new_password1' not in self.fields or not new_password:
            return cleaned_data

        if new_password != cleaned_data.get('new_password2'):
            self.add_error('new_password2', forms.ValidationError(
                "The two password fields didn't match.",
                code='password_mismatch'))
            return cleaned_data
        if self.viewer is not None and self.viewer.pk == self.instance.pk \
                and not self.instance.check_password(
                    cleaned_data.get('current_password') or ''):
            self.add_error('current_password', forms.ValidationError(
                'Your current password is missing or incorrect.',
                code='password_incorrect'))
            return cleaned_data
        try:
            password_validation.validate_password(new_password, self.instance)
        except forms.ValidationError as e:
            self.add_error('new_password1', e)
        return cleaned_data

    def save(self, commit=True):
        user = super().save(commit=False)
        new_password = self.cleaned_data.get('new_password1')
        if new_password:
            user.set_password(new_password)
        if commit:
            user.save()
            self.save_cas_username()
        return user

    def save_cas_username(self):
        username = self.cleaned_data.get('cas_username')
        if username:
            CASUser.objects.set(self.instance.pk, username)
        else:
            CASUser.objects.remove(self.instance.pk)


class CASUserCreationForm(UserCreationForm):
    cas_username = cas_username_field()

    def clean_cas_username(self):
        username = self.cleaned_data['cas_username']
        policy.check_username_available(username)
        return username

    def save(self, commit=True):
        user = super().save(commit=commit)
        if commit:
            self.save_cas_username()
        return user

    def save_cas_username(self):
        username = self.cleaned_data.get('cas_username')
        if username:
            CASUser.objects.set(self.instance.pk, username)


class CASPasswordResetForm(PasswordResetForm):
    def __init__(self, *args, config=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.config = config if config is not None else load_config()

    def clean_email(self):
        email = self.cleaned_data['email']
        policy.check_password_reset_allowed(self.config, email)
        return email


class CASAuthenticationForm(AuthenticationForm):
    """Login form refusing local passwords for CAS accounts when
    ``prevent_normal_login`` is set, and offering a CAS login link."""

    def __init__(self, request=None, *args, config=None, **kwargs):
        super().__init__(request, *args, **kwargs)
        self.config = config if config is not None else load_config()

    @property
    def cas_login_link(self):
        if not self.config.login_link_enabled:
            return None
        return policy.cas_login_url(), self.config.login_link_label

    def confirm_login_allowed(self, user):
        super().confirm_login_allowed(user)
        policy.check_normal_login_allowed(self.config, user.pk)


class CASUserAdminForm(forms.ModelForm):
    """Admin form for associations, refusing usernames held by another
    account."""

    class Meta:
        model = CASUser
        fields = '__all__'

    def clean(self):
        cleaned_data = super().clean()
        user = cleaned_data.get('user')
        account_id = user.pk if user is not None else self.instance.pk
        try:
            policy.check_username_available(
                cleaned_data.get('cas_username'), account_id)
        except forms.ValidationError as e:
            self.add_error('cas_username', e)
        return cleaned_data
