from django.core.management.base import BaseCommand, CommandError

from accounts.models import User
from accounts.services import get_or_create_user


class Command(BaseCommand):
    help = "Create an HR account, or promote an existing account to HR."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("--password", help="Set this password on the account.")
        parser.add_argument("--first-name", default="")
        parser.add_argument("--last-name", default="")

    def handle(self, *args, **options):
        try:
            user, created = get_or_create_user(
                options["email"],
                role=User.HR,
                first_name=options["first_name"],
                last_name=options["last_name"],
            )
        except ValueError as exc:
            raise CommandError(str(exc)) from exc

        user.role = User.HR
        if options["password"]:
            user.set_password(options["password"])
        user.save()

        verb = "Created" if created else "Updated"
        self.stdout.write(self.style.SUCCESS(f"{verb} HR account {user.email}"))
