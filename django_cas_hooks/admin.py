from django.contrib import admin, messages
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin
from django.core.exceptions import SuspiciousOperation

from django_cas_hooks import policy
from django_cas_hooks.forms import CASUserAdminForm
from django_cas_hooks.models import (
    CASSetting, CASUser, LoginData,
)


class CASUserInline(admin.StackedInline):
    model = CASUser
    form = CASUserAdminForm
    can_delete = True
    max_num = 1


class CasAwareUserAdmin(UserAdmin):
    actions = list(UserAdmin.actions) + ['remove_cas_association']
    inlines = list(UserAdmin.inlines) + [CASUserInline]

    def get_actions(self, request):
        actions = super().get_actions(request)
        if not policy.is_cas_administrator(request.user):
            actions.pop('remove_cas_association', None)
        return actions

    def remove_cas_association(self, request, queryset):
        if not policy.is_cas_administrator(request.user):
            raise SuspiciousOperation(
                'CasAwareUserAdmin.remove_cas_association attempted by a '
                'non-administrator.')
        for user in queryset:
            CASUser.objects.remove(user.pk)
        self.message_user(
            request,
            'Removed CAS association from %d account(s).' % len(queryset),
            messages.SUCCESS)
    remove_cas_association.short_description = u"Remove CAS association"


@admin.register(CASUser)
class CASUserAdmin(admin.ModelAdmin):
    form = CASUserAdminForm
    list_display = ('user', 'cas_username')
    search_fields = ('cas_username', 'user__username', 'user__email')


@admin.register(LoginData)
class LoginDataAdmin(admin.ModelAdmin):
    list_display = ('session_key', 'ticket', 'created')


admin.site.register(CASSetting)
# safe to use get_user_model() here, because at least from Django 1.7 on the
# django.contrib.admin.autodiscover() is called after all apps have been loaded
admin.site.unregister(get_user_model())
admin.site.register(get_user_model(), CasAwareUserAdmin)
