from django.urls import path
from . import views

urlpatterns = [
    path("", views.intern_collection, name="intern_collection"),
    path("batch/", views.batch_upload, name="intern_batch_upload"),
    path("me/", views.my_profile, name="intern_my_profile"),
    path("filters/", views.filter_options, name="intern_filter_options"),
    path("statistics/", views.statistics, name="intern_statistics"),
    path("suggestions/", views.suggestions, name="intern_suggestions"),
    path("export/", views.export, name="intern_export"),
    path("counts/", views.counts, name="intern_counts"),
    path("<int:intern_id>/", views.intern_detail, name="intern_detail"),
]
