import logging
import smtplib
from dataclasses import asdict, dataclass
from typing import Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.core.mail import BadHeaderError, send_mail
from django.core.paginator import EmptyPage, Paginator
from django.db import DatabaseError, transaction
from django.db.models import Q

from accounts.http import is_hr
from interns.models import Intern
from .models import Message, Notification

logger = logging.getLogger(__name__)

User = get_user_model()


class MessageDeliveryError(Exception):
    pass


# failures of the outbound mail transport
DELIVERY_ERRORS = (smtplib.SMTPException, OSError, BadHeaderError, MessageDeliveryError)


@dataclass
class DeliveryOutcome:
    intern_id: int
    sent: bool
    message_id: Optional[int] = None
    reason: str = ""

    def as_dict(self):
        return asdict(self)


# ==============================
# MAIL
# ==============================

def send_email(to, subject, body):
    """Send one plain-text email; raises when the backend refuses it."""
    sent = send_mail(subject, body, None, [to], fail_silently=False)
    if not sent:
        raise MessageDeliveryError(f"Mail to {to} was not accepted by the backend.")
    logger.debug("Sent '%s' to %s", subject, to)
    return sent


# ==============================
# NOTIFICATIONS
# ==============================

def create_notification(title, message, type, user, intern=None):
    if intern is not None:
        existing = Notification.objects.filter(intern=intern, type=type, message=message).first()
        if existing is not None:
            return existing

    return Notification.objects.create(
        title=title,
        message=message,
        type=type,
        user=user,
        intern=intern,
    )


def paginate(queryset, page, size):
    if page < 0:
        raise ValidationError("Page index must not be negative.")
    if size <= 0:
        raise ValidationError("Page size must be greater than zero.")

    paginator = Paginator(queryset, size)
    try:
        rows = list(paginator.page(page + 1).object_list)
    except EmptyPage:
        rows = []
    return rows, paginator.count


def list_notifications(user, page=0, size=20):
    return paginate(Notification.objects.filter(user=user), page, size)


def unread_count(user):
    return Notification.objects.filter(user=user, is_read=False).count()


def mark_notification_read(user, notification_id):
    notification = Notification.objects.get(pk=notification_id)
    if notification.user_id != user.id:
        raise PermissionDenied("This notification belongs to another user.")
    notification.mark_read()
    return notification


# ==============================
# MESSAGES
# ==============================

def _body_hr_to_intern(content, hr_user, intern):
    return (
        f"Dear {intern.full_name},\n\n"
        f"You have received a message from {hr_user.display_name} (HR Department):\n\n"
        f"{content}\n\n"
        f"---\n\n"
        f"Best regards,\n"
        f"{hr_user.display_name}\n"
        f"HR Department\n"
        f"Email: {hr_user.email}\n\n"
        f"This is an automated message from the Internship Management System."
    )


def _body_intern_to_hr(content, intern, hr_user):
    return (
        f"Dear {hr_user.display_name},\n\n"
        f"You have received a message from intern {intern.full_name} ({intern.email}):\n\n"
        f"{content}\n\n"
        f"---\n\n"
        f"Department: {intern.department}\n"
        f"Supervisor: {intern.supervisor or '-'}\n\n"
        f"This is an automated message from the Internship Management System."
    )


def send_message_to_intern(acting_user, intern_id, subject, content):
    intern = Intern.objects.select_related("account").get(pk=intern_id)

    try:
        send_email(intern.email, f"[Internship Message] {subject}", _body_hr_to_intern(content, acting_user, intern))
    except DELIVERY_ERRORS as exc:
        logger.error("Failed to send message from HR %s to intern %s: %s", acting_user.id, intern.id, exc)
        raise MessageDeliveryError(f"Failed to send message: {exc}") from exc

    with transaction.atomic():
        if intern.account is not None:
            create_notification(subject, content, Notification.MESSAGE_FROM_HR, intern.account, intern)
        message = Message.objects.create(
            subject=subject,
            content=content,
            intern=intern,
            sender=acting_user,
            recipient=intern.account,
            message_type=Message.HR_TO_INTERN,
        )

    logger.info("Message sent from HR %s to intern %s", acting_user.id, intern.id)
    return message


def send_message_to_interns(acting_user, intern_ids, subject, content):
    """Message each intern in turn; one failure never stops the rest."""
    outcomes = []
    for intern_id in intern_ids:
        try:
            message = send_message_to_intern(acting_user, intern_id, subject, content)
        except Intern.DoesNotExist:
            outcomes.append(DeliveryOutcome(intern_id, False, reason="Intern not found"))
        except (MessageDeliveryError, DatabaseError) as exc:
            outcomes.append(DeliveryOutcome(intern_id, False, reason=str(exc)))
        except Exception as exc:
            logger.warning("Message to intern %s failed: %s", intern_id, exc, exc_info=True)
            outcomes.append(DeliveryOutcome(intern_id, False, reason=str(exc) or exc.__class__.__name__))
        else:
            outcomes.append(DeliveryOutcome(intern_id, True, message_id=message.id))

    failed = sum(1 for o in outcomes if not o.sent)
    logger.info("Bulk message '%s': %d sent, %d failed", subject, len(outcomes) - failed, failed)
    return outcomes


def send_message_to_all_active(acting_user, subject, content):
    intern_ids = list(Intern.objects.active().order_by("id").values_list("id", flat=True))
    return send_message_to_interns(acting_user, intern_ids, subject, content)


def send_message_to_hr(acting_user, hr_user_id, subject, content):
    intern = Intern.objects.for_user(acting_user)
    hr_user = User.objects.get(pk=hr_user_id)
    if not is_hr(hr_user):
        raise ValidationError("Recipient must be an HR user.")

    try:
        send_email(hr_user.email, f"[Intern Message] {subject}", _body_intern_to_hr(content, intern, hr_user))
    except DELIVERY_ERRORS as exc:
        logger.error("Failed to send message from intern %s to HR %s: %s", intern.id, hr_user.id, exc)
        raise MessageDeliveryError(f"Failed to send message: {exc}") from exc

    with transaction.atomic():
        create_notification(subject, content, Notification.MESSAGE_FROM_INTERN, hr_user, intern)
        message = Message.objects.create(
            subject=subject,
            content=content,
            intern=intern,
            sender=acting_user,
            recipient=hr_user,
            message_type=Message.INTERN_TO_HR,
        )

    logger.info("Message sent from intern %s to HR %s", intern.id, hr_user.id)
    return message


def _visible_messages(user):
    if is_hr(user):
        return Message.objects.filter(Q(sender=user) | Q(recipient=user))
    intern = Intern.objects.for_user(user)
    return Message.objects.filter(intern=intern)


def list_messages(user, page=0, size=20):
    queryset = _visible_messages(user).select_related("intern", "sender", "recipient")
    return paginate(queryset, page, size)


def get_message(user, message_id):
    message = Message.objects.select_related("intern", "sender", "recipient").get(pk=message_id)
    if not _visible_messages(user).filter(pk=message.pk).exists():
        raise PermissionDenied("You don't have permission to view this message.")
    return message


def mark_message_read(user, message_id):
    message = get_message(user, message_id)
    message.is_read = True
    message.save(update_fields=["is_read"])
    return message


def delete_message(user, message_id):
    message = get_message(user, message_id)
    message.delete()
    logger.info("Message %s deleted by user %s", message_id, user.id)
