from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('', views.get_current_user, name='current-user'),
    path('register/', views.register, name='register'),
    path('signup/', views.register, name='signup'),
    path('login/', views.login, name='login'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    # User profile
    path('profile/', views.update_profile_view, name='update-profile'),
]
