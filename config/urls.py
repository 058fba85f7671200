from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("accounts.urls")),
    path("api/interns/", include("interns.urls")),
    path("api/", include("messaging.urls")),
    path("api/tracking/", include("tracking.urls")),
]
