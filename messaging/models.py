from django.conf import settings
from django.db import models
from django.utils import timezone


class Notification(models.Model):
    WELCOME = "WELCOME"
    MESSAGE_FROM_HR = "MESSAGE_FROM_HR"
    MESSAGE_FROM_INTERN = "MESSAGE_FROM_INTERN"
    INTERNSHIP_ENDING = "INTERNSHIP_ENDING"
    TYPES = [
        (WELCOME, "Welcome"),
        (MESSAGE_FROM_HR, "Message from HR"),
        (MESSAGE_FROM_INTERN, "Message from intern"),
        (INTERNSHIP_ENDING, "Internship ending"),
    ]

    title = models.CharField(max_length=255)
    message = models.TextField()
    type = models.CharField(max_length=30, choices=TYPES)
    is_read = models.BooleanField(default=False)

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notifications")
    intern = models.ForeignKey(
        "interns.Intern",
        null=True, blank=True,
        on_delete=models.CASCADE,
        related_name="notifications",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def mark_read(self):
        self.is_read = True
        self.save(update_fields=["is_read"])

    def __str__(self):
        return f"{self.get_type_display()}: {self.title}"


class Message(models.Model):
    HR_TO_INTERN = "HR_TO_INTERN"
    INTERN_TO_HR = "INTERN_TO_HR"
    TYPES = [
        (HR_TO_INTERN, "HR to intern"),
        (INTERN_TO_HR, "Intern to HR"),
    ]

    subject = models.CharField(max_length=255)
    content = models.TextField()
    is_read = models.BooleanField(default=False)
    message_type = models.CharField(max_length=20, choices=TYPES, default=HR_TO_INTERN)

    intern = models.ForeignKey("interns.Intern", on_delete=models.CASCADE, related_name="messages")
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sent_messages")
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name="received_messages",
    )

    sent_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-sent_at", "-id"]

    def __str__(self):
        return f"{self.subject} ({self.get_message_type_display()})"
