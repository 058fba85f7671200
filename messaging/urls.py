from django.urls import path
from . import views

urlpatterns = [
    path("messages/", views.my_messages, name="my_messages"),
    path("messages/intern/<int:intern_id>/", views.message_intern, name="message_intern"),
    path("messages/batch/", views.message_interns, name="message_interns"),
    path("messages/all/", views.message_all_interns, name="message_all_interns"),
    path("messages/hr/", views.message_hr, name="message_hr"),
    path("messages/<int:message_id>/", views.message_detail, name="message_detail"),
    path("messages/<int:message_id>/read/", views.message_read, name="message_read"),
    path("notifications/", views.my_notifications, name="my_notifications"),
    path("notifications/<int:notification_id>/read/", views.notification_read, name="notification_read"),
]
