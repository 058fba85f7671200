import logging

from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from .models import User

logger = logging.getLogger(__name__)


def get_or_create_user(email, role=None, first_name="", last_name=""):
    """
    Return the account for ``email``, creating it on first sight.

    Accounts created here have no usable password; they exist so that an
    identity confirmed elsewhere can own rows. The unique constraint on
    email settles concurrent first requests: the loser re-reads the row.
    """
    email = User.objects.normalize_email(email or "").strip()
    if not email:
        raise ValueError("Email must be set")

    defaults = {
        "role": role or User.INTERN,
        "first_name": first_name or "Unknown",
        "last_name": last_name or "User",
    }
    try:
        with transaction.atomic():
            user, created = User.objects.get_or_create(email__iexact=email, defaults={"email": email, **defaults})
    except IntegrityError:
        user, created = User.objects.get(email__iexact=email), False

    if created:
        user.set_unusable_password()
        user.save(update_fields=["password"])
        logger.info("Provisioned account %s with role %s", user.email, user.role)
    return user, created


def change_password(user, current_password, new_password, confirm_password):
    if not user.check_password(current_password):
        raise ValidationError("Current password is incorrect.", code="wrong_password")

    if new_password != confirm_password:
        raise ValidationError("New password and confirmation do not match.", code="mismatch")

    if user.check_password(new_password):
        raise ValidationError("New password must be different from current password.", code="unchanged")

    password_validation.validate_password(new_password, user)

    user.set_password(new_password)
    user.password_changed_at = timezone.now()
    user.save(update_fields=["password", "password_changed_at", "updated_at"])
    logger.info("Password changed for %s", user.email)
    return user
