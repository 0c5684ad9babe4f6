from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from .api_views import EmailTokenObtainPairView
from . import api_views
from . import views


app_name = 'users'

urlpatterns = [
    path('', views.landing, name='landing'),
    path('signup/', views.signup, name='signup'),
    path('signin/', views.signin, name='signin'),
    path('signout/', views.signout, name='signout'),
    path('dashboard/', views.dashboard, name='dashboard'),
    path('profile/', views.update_profile, name='update_profile'),
    path('profile/avatar/', views.profile_avatar, name='profile_avatar'),
    path('api/token/', EmailTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('api/me/', api_views.me_view, name='api_me'),
    path('api/visits/', api_views.visits_view, name='api_visits'),
]
