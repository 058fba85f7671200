from django.contrib import admin
from .models import Intern


@admin.register(Intern)
class InternAdmin(admin.ModelAdmin):
    list_display = ("email", "full_name", "department", "status", "start_date", "end_date", "days_left", "hr_user")
    list_filter = ("status", "department", "university")
    search_fields = ("email", "first_name", "last_name", "department", "university", "major", "supervisor")
    raw_id_fields = ("hr_user", "account")
    readonly_fields = ("welcome_sent_at", "created_at", "updated_at")
    date_hierarchy = "start_date"
