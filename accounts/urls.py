from django.urls import path
from .views import login_view, logout_view, me, password_change

urlpatterns = [
    path("login/", login_view, name="login"),
    path("logout/", logout_view, name="logout"),
    path("me/", me, name="me"),
    path("password/", password_change, name="password_change"),
]
