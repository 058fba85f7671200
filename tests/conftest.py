import pytest

from accounts.models import User
from interns.models import Intern
from tests.factories import END, START


@pytest.fixture(autouse=True)
def fast_test_settings(settings, tmp_path):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
    settings.MEDIA_ROOT = tmp_path / "media"


@pytest.fixture()
def hr_user(db):
    return User.objects.create_user(
        "hr@example.com", "Hr-pass-1234", first_name="Helen", last_name="Ross", role=User.HR
    )


@pytest.fixture()
def other_hr(db):
    return User.objects.create_user(
        "hr2@example.com", "Hr-pass-5678", first_name="Omar", last_name="Diaz", role=User.HR
    )


@pytest.fixture()
def make_intern(hr_user):
    counter = {"n": 0}

    def factory(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "first_name": f"Seed{n}",
            "last_name": "Person",
            "email": f"seed{n}@example.com",
            "university": "State University",
            "major": "Biology",
            "start_date": START,
            "end_date": END,
            "supervisor": "Ada Lovelace",
            "department": "Research",
            "status": Intern.ACTIVE,
            "hr_user": hr_user,
        }
        fields.update(overrides)
        return Intern.objects.create(**fields)

    return factory


@pytest.fixture()
def intern_with_account(hr_user):
    account = User.objects.create_user(
        "ivy@example.com", "Intern-pass-1234", first_name="Ivy", last_name="Chen", role=User.INTERN
    )
    intern = Intern.objects.create(
        first_name="Ivy",
        last_name="Chen",
        email="ivy@example.com",
        start_date=START,
        end_date=END,
        department="Engineering",
        supervisor="Grace Hopper",
        hr_user=hr_user,
        account=account,
    )
    return intern
