from io import StringIO

import pytest
from django.core.exceptions import ValidationError
from django.core.management import call_command

from accounts.http import is_hr, is_intern
from accounts.models import User
from accounts.services import change_password, get_or_create_user

pytestmark = pytest.mark.django_db


def test_get_or_create_user_is_keyed_on_email():
    user, created = get_or_create_user("New.Person@Example.com")

    assert created
    assert user.role == User.INTERN
    assert user.get_full_name() == "Unknown User"
    assert not user.has_usable_password()

    again, created = get_or_create_user("new.person@example.com", role=User.HR)
    assert not created
    assert again.pk == user.pk
    assert again.role == User.INTERN


def test_get_or_create_user_requires_email():
    with pytest.raises(ValueError):
        get_or_create_user("  ")


def test_superusers_are_hr():
    admin = User.objects.create_superuser("root@example.com", "Root-pass-1234")

    assert admin.role == User.HR
    assert is_hr(admin)


def test_role_helpers(hr_user, intern_with_account):
    assert is_hr(hr_user) and not is_intern(hr_user)
    assert is_intern(intern_with_account.account) and not is_hr(intern_with_account.account)


def test_change_password(hr_user):
    change_password(hr_user, "Hr-pass-1234", "Brand-new-Secret-99", "Brand-new-Secret-99")

    hr_user.refresh_from_db()
    assert hr_user.check_password("Brand-new-Secret-99")
    assert hr_user.password_changed_at is not None


@pytest.mark.parametrize("current, new, confirm, code", [
    ("wrong", "Brand-new-Secret-99", "Brand-new-Secret-99", "wrong_password"),
    ("Hr-pass-1234", "Brand-new-Secret-99", "Brand-new-Secret-98", "mismatch"),
    ("Hr-pass-1234", "Hr-pass-1234", "Hr-pass-1234", "unchanged"),
])
def test_change_password_rejections(hr_user, current, new, confirm, code):
    with pytest.raises(ValidationError) as exc_info:
        change_password(hr_user, current, new, confirm)

    assert exc_info.value.code == code


def test_change_password_runs_validators(hr_user):
    with pytest.raises(ValidationError):
        change_password(hr_user, "Hr-pass-1234", "123", "123")


def test_create_hr_command():
    out = StringIO()
    call_command("create_hr", "lead@example.com", "--password", "Lead-pass-1234", "--first-name", "Lee", stdout=out)

    user = User.objects.get(email="lead@example.com")
    assert user.role == User.HR
    assert user.check_password("Lead-pass-1234")
    assert "Created HR account lead@example.com" in out.getvalue()


def test_create_hr_command_promotes_existing_account(intern_with_account):
    call_command("create_hr", "ivy@example.com")

    account = User.objects.get(email="ivy@example.com")
    assert account.role == User.HR
    assert account.check_password("Intern-pass-1234")
