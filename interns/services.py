"""Creating, changing and removing interns.

Batch ingestion runs in fixed order: validate every record, check for
duplicate emails inside the batch, check against stored interns and
accounts, then write all accounts and interns in one transaction. Welcome
mail and notifications go out only after that transaction, one intern at
a time; a failed welcome is reported, never rolled back.
"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import DatabaseError, transaction
from django.db.models.functions import Lower
from django.utils import timezone

from accounts.http import is_hr
from messaging.models import Notification
from messaging.services import create_notification, send_email
from .credentials import generate_password
from .exceptions import (
    AlreadyExistsError,
    DuplicateInBatchError,
    DuplicateInternError,
    EmptyBatchError,
    PersistenceError,
)
from .models import Intern
from .records import InternSummary, validate_record

logger = logging.getLogger(__name__)

User = get_user_model()

ENDING_SOON_DAYS = 30


@dataclass
class NotificationOutcome:
    email: str
    intern_id: int
    sent: bool
    reason: str = ""


@dataclass
class BatchResult:
    created: int
    interns: List[InternSummary] = field(default_factory=list)
    outcomes: List[NotificationOutcome] = field(default_factory=list)

    @property
    def failures(self):
        return [o for o in self.outcomes if not o.sent]

    def as_dict(self):
        return {
            "success": True,
            "count": self.created,
            "interns": [i.as_dict() for i in self.interns],
            "notifications": [o.__dict__ for o in self.outcomes],
            "notification_failures": [o.__dict__ for o in self.failures],
        }


def _require_hr(acting_user):
    if acting_user is None or not is_hr(acting_user):
        raise PermissionDenied("Only HR users can manage interns.")


def _existing_emails(emails):
    """Emails from ``emails`` already used by an intern or an account (case-insensitive)."""
    wanted = {e.lower() for e in emails}
    taken = set(
        Intern.objects.annotate(lower_email=Lower("email"))
        .filter(lower_email__in=wanted)
        .values_list("lower_email", flat=True)
    )
    taken |= set(
        User.objects.annotate(lower_email=Lower("email"))
        .filter(lower_email__in=wanted)
        .values_list("lower_email", flat=True)
    )
    ordered = []
    for email in emails:
        if email in taken and email not in ordered:
            ordered.append(email)
    return ordered


def _provision(record, acting_user):
    password = generate_password()

    user = User(
        email=record.normalized_email(),
        first_name=record.first_name,
        last_name=record.last_name,
        role=User.INTERN,
    )
    user.set_password(password)

    intern = Intern(**record.model_fields(), status=Intern.ACTIVE, hr_user=acting_user)
    return user, intern, password


def _persist(provisioned):
    """Store every account, then every intern; all or nothing."""
    try:
        with transaction.atomic():
            for user, _, _ in provisioned:
                user.save()
            for user, intern, _ in provisioned:
                intern.account = user
                intern.save()
    except DatabaseError as exc:
        logger.error("Persisting %d interns failed: %s", len(provisioned), exc)
        raise PersistenceError(f"Could not store interns: {exc}") from exc


def _welcome_body(intern, password):
    return (
        f"Dear {intern.full_name},\n\n"
        f"Welcome to the internship program! Your internship details are below.\n\n"
        f"Department: {intern.department}\n"
        f"Supervisor: {intern.supervisor or '-'}\n"
        f"Start date: {intern.start_date}\n"
        f"End date: {intern.end_date}\n\n"
        f"You can sign in with:\n"
        f"Email: {intern.email}\n"
        f"Password: {password}\n\n"
        f"Please change your password after your first login.\n\n"
        f"This is an automated message from the Internship Management System."
    )


def send_welcome(intern, password):
    """
    Email the intern their credentials and leave an in-app notification.

    Never raises: any failure is logged and returned as an unsent outcome.
    Interns already marked as welcomed are not contacted again.
    """
    if intern.welcome_sent_at is not None:
        return NotificationOutcome(intern.email, intern.id, True, "already notified")

    try:
        send_email(intern.email, "Welcome to the Internship Program", _welcome_body(intern, password))
        with transaction.atomic():
            create_notification(
                "Welcome",
                f"Your internship in {intern.department} starts on {intern.start_date}.",
                Notification.WELCOME,
                intern.account,
                intern,
            )
            intern.mark_welcome_sent()
    except Exception as exc:
        logger.warning("Welcome notification failed for %s: %s", intern.email, exc, exc_info=True)
        return NotificationOutcome(intern.email, intern.id, False, str(exc) or exc.__class__.__name__)

    return NotificationOutcome(intern.email, intern.id, True)


# ==============================
# CREATE
# ==============================

def create_batch(records, acting_user):
    _require_hr(acting_user)

    records = list(records)
    if not records:
        raise EmptyBatchError()

    for index, record in enumerate(records, start=1):
        validate_record(record, row=index)

    emails = [r.normalized_email() for r in records]
    counts = Counter(emails)
    repeated = [e for e in dict.fromkeys(emails) if counts[e] > 1]
    if repeated:
        raise DuplicateInBatchError(repeated)

    existing = _existing_emails(emails)
    if existing:
        raise AlreadyExistsError(existing)

    logger.info("HR %s is creating %d interns", acting_user.email, len(records))

    provisioned = [_provision(record, acting_user) for record in records]
    _persist(provisioned)

    outcomes = [send_welcome(intern, password) for _, intern, password in provisioned]
    result = BatchResult(
        created=len(provisioned),
        interns=[InternSummary.from_intern(intern) for _, intern, _ in provisioned],
        outcomes=outcomes,
    )
    logger.info(
        "Batch stored %d interns, %d welcome notifications failed",
        result.created, len(result.failures),
    )
    return result


def create_intern(record, acting_user):
    _require_hr(acting_user)
    validate_record(record)

    email = record.normalized_email()
    if _existing_emails([email]):
        raise DuplicateInternError(email)

    provisioned = [_provision(record, acting_user)]
    _persist(provisioned)

    _, intern, password = provisioned[0]
    outcome = send_welcome(intern, password)
    logger.info("HR %s created intern %s", acting_user.email, intern.email)

    summary = InternSummary.from_intern(intern)
    if not outcome.sent:
        summary.welcome_error = outcome.reason
    return summary


# ==============================
# READ
# ==============================

def get_intern(intern_id):
    return InternSummary.from_intern(Intern.objects.select_related("hr_user").get(pk=intern_id))


def get_intern_for_user(user):
    return InternSummary.from_intern(Intern.objects.select_related("hr_user").for_user(user))


def counts():
    today = timezone.localdate()
    return {
        "total": Intern.objects.count(),
        "active": Intern.objects.active().count(),
        "ending_soon": Intern.objects.ending_between(today, today + timedelta(days=ENDING_SOON_DAYS)).count(),
    }


# ==============================
# UPDATE / DELETE
# ==============================

@transaction.atomic
def update_intern(intern_id, record, acting_user):
    _require_hr(acting_user)
    validate_record(record)

    intern = Intern.objects.select_for_update().select_related("hr_user", "account").get(pk=intern_id)
    email = record.normalized_email()

    if email != intern.email.lower():
        clash = Intern.objects.filter(email__iexact=email).exclude(pk=intern.pk).exists()
        account_clash = User.objects.filter(email__iexact=email).exclude(pk=intern.account_id).exists()
        if clash or account_clash:
            raise DuplicateInternError(email)

    for name, value in record.model_fields().items():
        setattr(intern, name, value)
    intern.save()

    if intern.account is not None:
        intern.account.email = intern.email
        intern.account.first_name = intern.first_name
        intern.account.last_name = intern.last_name
        intern.account.save(update_fields=["email", "first_name", "last_name", "updated_at"])

    logger.info("HR %s updated intern %s", acting_user.email, intern.id)
    return InternSummary.from_intern(intern)


def set_status(intern_id, status, acting_user):
    _require_hr(acting_user)
    status = (status or "").strip().upper()
    if status not in {value for value, _ in Intern.STATUS}:
        raise ValidationError(f"Unknown status: {status}")

    intern = Intern.objects.select_related("hr_user").get(pk=intern_id)
    intern.status = status
    intern.save(update_fields=["status", "updated_at"])
    return InternSummary.from_intern(intern)


@transaction.atomic
def delete_intern(intern_id, acting_user):
    _require_hr(acting_user)
    intern = Intern.objects.select_related("account").get(pk=intern_id)
    account = intern.account

    intern.delete()
    if account is not None and account.role == User.INTERN:
        account.delete()

    logger.info("HR %s deleted intern %s", acting_user.email, intern_id)
