import string

from django.conf import settings
from django.utils.crypto import get_random_string

PASSWORD_ALPHABET = string.ascii_letters + string.digits
MIN_PASSWORD_LENGTH = 12


def generate_password(length=None):
    """Random login password with at least one lowercase, one uppercase and one digit."""
    length = max(MIN_PASSWORD_LENGTH, length or settings.GENERATED_PASSWORD_LENGTH)
    while True:
        candidate = get_random_string(length, PASSWORD_ALPHABET)
        if (
            any(c.islower() for c in candidate)
            and any(c.isupper() for c in candidate)
            and any(c.isdigit() for c in candidate)
        ):
            return candidate
