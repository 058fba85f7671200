from django import forms
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from django.utils.translation import gettext_lazy as _

from interns.models import Intern
from .models import User


class AdminUserCreationForm(UserCreationForm):
    first_name = forms.CharField(required=True)

    class Meta(UserCreationForm.Meta):
        model = User
        fields = ("email", "first_name", "last_name", "role")


class AdminUserChangeForm(UserChangeForm):
    class Meta(UserChangeForm.Meta):
        model = User
        fields = ("email", "first_name", "last_name", "role", "is_active", "is_staff", "is_superuser")


class InternProfileInline(admin.StackedInline):
    model = Intern
    fk_name = "account"
    can_delete = False
    extra = 0
    fields = ("department", "supervisor", "start_date", "end_date", "status", "hr_user")
    readonly_fields = fields
    verbose_name = "intern profile"


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    add_form = AdminUserCreationForm
    form = AdminUserChangeForm
    inlines = [InternProfileInline]

    ordering = ("email",)
    list_display = ("email", "display_name", "role", "is_active", "password_changed_at")
    search_fields = ("email", "first_name", "last_name")
    list_filter = ("role", "is_active")

    fieldsets = (
        (None, {"fields": ("email", "password", "role")}),
        (_("Personal info"), {"fields": ("first_name", "last_name")}),
        (_("Permissions"), {"fields": ("is_active", "is_staff", "is_superuser")}),
        (_("Important dates"), {"fields": ("last_login", "date_joined", "password_changed_at", "updated_at")}),
    )
    readonly_fields = ("password_changed_at", "updated_at")

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "role", "first_name", "last_name", "password1", "password2"),
        }),
    )
