from django.urls import path
from . import views

urlpatterns = [
    # INTERN
    path("activities/", views.my_activities, name="my_activities"),
    path("attendance/", views.my_attendance, name="my_attendance"),
    path("attendance/check-in/", views.attendance_check_in, name="attendance_check_in"),
    path("attendance/check-out/", views.attendance_check_out, name="attendance_check_out"),
    path("documents/", views.my_documents, name="my_documents"),

    # HR
    path("interns/<int:intern_id>/activities/", views.intern_activities, name="intern_activities"),
    path("interns/<int:intern_id>/activity-report/", views.activity_report, name="activity_report"),
]
