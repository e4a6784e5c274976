from django.urls import path
import django_cas_ng.views

from django_cas_hooks import views


urlpatterns = [
    path('cas/login/', django_cas_ng.views.LoginView.as_view(),
         name='cas_ng_login'),
    path('cas/logout/', django_cas_ng.views.LogoutView.as_view(),
         name='cas_ng_logout'),
    path('cas/callback/', django_cas_ng.views.CallbackView.as_view(),
         name='cas_ng_proxy_callback'),
    path('login/', views.LoginView.as_view(), name='cas_hooks_login'),
    path('register/', views.register, name='cas_hooks_register'),
    path('password_reset/', views.PasswordResetView.as_view(),
         name='cas_hooks_password_reset'),
    path('account/', views.user_edit, name='cas_hooks_user_edit_self'),
    path('account/<int:user_id>/', views.user_edit,
         name='cas_hooks_user_edit'),
]
