import datetime
import logging

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from interns.models import Intern
from messaging.models import Notification
from messaging.services import DELIVERY_ERRORS, create_notification, send_email

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Email HR about active interns whose internship ends in 30, 7 or 1 days."

    def handle(self, *args, **options):
        today = timezone.localdate()
        reminder_days = set(settings.INTERN_ENDING_REMINDER_DAYS)
        if not reminder_days:
            self.stdout.write("No reminder days configured.")
            return

        interns = (
            Intern.objects
            .ending_between(today, today + datetime.timedelta(days=max(reminder_days)))
            .select_related("hr_user")
        )

        sent = 0
        for intern in interns:
            days_left = intern.days_left
            if days_left not in reminder_days:
                continue

            subject = "Internship Ending Soon"
            message = (
                f"{intern.full_name}'s internship ends in {days_left} days "
                f"(End date: {intern.end_date})"
            )

            try:
                send_email(settings.INTERNSHIP_HR_EMAIL, subject, message)
            except DELIVERY_ERRORS as exc:
                logger.warning("Ending reminder for %s not sent: %s", intern.email, exc)
                continue

            create_notification(subject, message, Notification.INTERNSHIP_ENDING, intern.hr_user, intern)
            sent += 1

        self.stdout.write(self.style.SUCCESS(f"Reminders sent: {sent}"))
