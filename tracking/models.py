from django.db import models
from django.utils import timezone


class Activity(models.Model):
    intern = models.ForeignKey("interns.Intern", on_delete=models.CASCADE, related_name="activities")
    activity_date = models.DateField(default=timezone.localdate)
    description = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-activity_date", "-id"]
        verbose_name_plural = "activities"

    def __str__(self):
        return f"{self.intern.full_name} - {self.activity_date}"


class Attendance(models.Model):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    PARTIAL = "PARTIAL"
    STATUS = [
        (PRESENT, "Present"),
        (ABSENT, "Absent"),
        (LATE, "Late"),
        (PARTIAL, "Partial"),
    ]

    intern = models.ForeignKey("interns.Intern", on_delete=models.CASCADE, related_name="attendances")
    attendance_date = models.DateField()
    check_in_time = models.TimeField(null=True, blank=True)
    check_out_time = models.TimeField(null=True, blank=True)
    status = models.CharField(max_length=10, choices=STATUS, default=PRESENT)
    remarks = models.CharField(max_length=255, blank=True)

    class Meta:
        unique_together = [("intern", "attendance_date")]
        ordering = ["-attendance_date"]

    def __str__(self):
        return f"{self.intern.full_name} - {self.attendance_date} ({self.status})"


class Document(models.Model):
    REPORT = "REPORT"
    CERTIFICATE = "CERTIFICATE"
    CV = "CV"
    OTHER = "OTHER"
    TYPES = [
        (REPORT, "Report"),
        (CERTIFICATE, "Certificate"),
        (CV, "CV"),
        (OTHER, "Other"),
    ]

    intern = models.ForeignKey("interns.Intern", on_delete=models.CASCADE, related_name="documents")
    file = models.FileField(upload_to="tracking/documents/")
    original_name = models.CharField(max_length=255)
    mime_type = models.CharField(max_length=100)
    size = models.PositiveIntegerField()
    type = models.CharField(max_length=20, choices=TYPES, default=OTHER)
    comment = models.TextField(blank=True)

    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-uploaded_at"]

    def __str__(self):
        return f"{self.original_name} ({self.type})"
