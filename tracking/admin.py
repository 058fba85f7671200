from django.contrib import admin
from .models import Activity, Attendance, Document


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ("intern", "activity_date", "created_at")
    list_filter = ("activity_date",)
    search_fields = ("intern__email", "intern__first_name", "intern__last_name", "description")


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ("intern", "attendance_date", "check_in_time", "check_out_time", "status")
    list_filter = ("status", "attendance_date")
    search_fields = ("intern__email", "intern__first_name", "intern__last_name")


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ("original_name", "intern", "type", "size", "uploaded_at")
    list_filter = ("type",)
    search_fields = ("original_name", "intern__email")
