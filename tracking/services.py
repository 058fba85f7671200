import logging
import mimetypes

from django.core.exceptions import ValidationError
from django.utils import timezone

from interns.models import Intern
from .models import Activity, Attendance, Document

logger = logging.getLogger(__name__)


def log_activity(acting_user, description):
    intern = Intern.objects.for_user(acting_user)
    activity = Activity.objects.create(
        intern=intern,
        activity_date=timezone.localdate(),
        description=description,
    )
    logger.info("Intern %s logged activity %s", intern.id, activity.id)
    return activity


def list_activities(intern):
    return Activity.objects.filter(intern=intern)


def check_in(acting_user):
    intern = Intern.objects.for_user(acting_user)
    now = timezone.localtime()

    attendance, _ = Attendance.objects.get_or_create(
        intern=intern,
        attendance_date=now.date(),
    )
    attendance.check_in_time = now.time()
    attendance.status = Attendance.PRESENT
    attendance.save()
    return attendance


def check_out(acting_user):
    intern = Intern.objects.for_user(acting_user)
    now = timezone.localtime()

    attendance = Attendance.objects.get(intern=intern, attendance_date=now.date())
    if attendance.check_in_time is None:
        raise ValidationError("Check in before checking out.")

    attendance.check_out_time = now.time()
    attendance.save(update_fields=["check_out_time"])
    return attendance


def list_attendance(intern):
    return Attendance.objects.filter(intern=intern)


def upload_document(acting_user, uploaded_file, type=Document.OTHER, comment=""):
    if type not in {value for value, _ in Document.TYPES}:
        raise ValidationError(f"Unknown document type: {type}")

    intern = Intern.objects.for_user(acting_user)
    mime_type = (
        getattr(uploaded_file, "content_type", None)
        or mimetypes.guess_type(uploaded_file.name)[0]
        or "application/octet-stream"
    )
    document = Document.objects.create(
        intern=intern,
        file=uploaded_file,
        original_name=uploaded_file.name,
        mime_type=mime_type,
        size=uploaded_file.size,
        type=type,
        comment=comment or "",
    )
    logger.info("Intern %s uploaded document %s (%s)", intern.id, document.id, document.type)
    return document


def list_documents(intern):
    return Document.objects.filter(intern=intern)
