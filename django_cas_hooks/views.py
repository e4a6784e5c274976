from django.contrib.auth import get_user_model
from django.contrib.auth import views as auth_views
from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied
from django.shortcuts import get_object_or_404, redirect, render

from django_cas_hooks import policy
from django_cas_hooks.forms import (
    CASAuthenticationForm, CASPasswordResetForm, CASUserChangeForm,
    CASUserCreationForm,
)


class LoginView(auth_views.LoginView):
    form_class = CASAuthenticationForm
    template_name = 'django_cas_hooks/login.html'


class PasswordResetView(auth_views.PasswordResetView):
    form_class = CASPasswordResetForm


@login_required
def user_edit(request, user_id=None):
    user_model = get_user_model()
    if user_id is None:
        user = request.user
    else:
        user = get_object_or_404(user_model, pk=user_id)
        if user.pk != request.user.pk \
                and not policy.is_cas_administrator(request.user):
            raise PermissionDenied

    if request.method == 'POST':
        # cancelling must not run validation
        if 'cancel' in request.POST:
            return redirect(request.path)
        form = CASUserChangeForm(
            request.POST, instance=user, viewer=request.user)
        if form.is_valid():
            form.save()
            return redirect(request.path)
    else:
        form = CASUserChangeForm(instance=user, viewer=request.user)

    return render(request, 'django_cas_hooks/user_edit.html', {
        'form': form,
        'edited_user': user,
    })


def register(request):
    if request.method == 'POST':
        form = CASUserCreationForm(request.POST)
        if form.is_valid():
            form.save()
            return redirect('cas_hooks_login')
    else:
        form = CASUserCreationForm()

    return render(request, 'django_cas_hooks/register.html', {'form': form})
