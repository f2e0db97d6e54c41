from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # POST  /users  - save user on first sign-in
    # PATCH /users  - update last sign-in time
    path('users', views.users, name='users'),
    path('users/profile-update', views.profile_update, name='profile-update'),

    # Role lookup
    path('users/role/', views.user_role, name='user-role-query'),
    path('users/role/<str:email>', views.user_role, name='user-role'),
]
