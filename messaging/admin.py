from django.contrib import admin
from .models import Message, Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "user", "intern", "is_read", "created_at")
    list_filter = ("type", "is_read")
    search_fields = ("title", "message", "user__email", "intern__email")


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("subject", "message_type", "sender", "recipient", "intern", "is_read", "sent_at")
    list_filter = ("message_type", "is_read")
    search_fields = ("subject", "sender__email", "intern__email")
