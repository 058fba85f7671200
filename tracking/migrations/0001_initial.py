import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("interns", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Activity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("activity_date", models.DateField(default=django.utils.timezone.localdate)),
                ("description", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("intern", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="activities", to="interns.intern")),
            ],
            options={
                "verbose_name_plural": "activities",
                "ordering": ["-activity_date", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Attendance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("attendance_date", models.DateField()),
                ("check_in_time", models.TimeField(blank=True, null=True)),
                ("check_out_time", models.TimeField(blank=True, null=True)),
                ("status", models.CharField(choices=[("PRESENT", "Present"), ("ABSENT", "Absent"), ("LATE", "Late"), ("PARTIAL", "Partial")], default="PRESENT", max_length=10)),
                ("remarks", models.CharField(blank=True, max_length=255)),
                ("intern", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="attendances", to="interns.intern")),
            ],
            options={
                "ordering": ["-attendance_date"],
                "unique_together": {("intern", "attendance_date")},
            },
        ),
        migrations.CreateModel(
            name="Document",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("file", models.FileField(upload_to="tracking/documents/")),
                ("original_name", models.CharField(max_length=255)),
                ("mime_type", models.CharField(max_length=100)),
                ("size", models.PositiveIntegerField()),
                ("type", models.CharField(choices=[("REPORT", "Report"), ("CERTIFICATE", "Certificate"), ("CV", "CV"), ("OTHER", "Other")], default="OTHER", max_length=20)),
                ("comment", models.TextField(blank=True)),
                ("uploaded_at", models.DateTimeField(auto_now_add=True)),
                ("intern", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="documents", to="interns.intern")),
            ],
            options={
                "ordering": ["-uploaded_at"],
            },
        ),
    ]
