from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional

from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator, validate_email

from .exceptions import MalformedRecordError

phone_validator = RegexValidator(r"^\+?[1-9]\d{1,14}$", "Phone number must be valid.")


@dataclass
class InternRecord:
    """One intern as submitted for creation, before it has an identity."""

    first_name: str
    email: str
    start_date: date
    end_date: date
    department: str
    last_name: str = ""
    phone: str = ""
    university: str = ""
    major: str = ""
    supervisor: str = ""

    def normalized_email(self) -> str:
        return (self.email or "").strip().lower()

    def model_fields(self) -> dict:
        fields = asdict(self)
        fields["email"] = self.normalized_email()
        return fields


@dataclass
class InternSummary:
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    university: str
    major: str
    start_date: date
    end_date: date
    supervisor: str
    department: str
    status: str
    created_at: datetime
    updated_at: datetime
    hr_name: str
    hr_email: str
    welcome_sent: bool
    account_id: Optional[int] = None
    # set when a welcome attempted during creation did not go out
    welcome_error: str = ""

    @classmethod
    def from_intern(cls, intern) -> "InternSummary":
        hr = intern.hr_user
        return cls(
            id=intern.id,
            first_name=intern.first_name,
            last_name=intern.last_name,
            email=intern.email,
            phone=intern.phone,
            university=intern.university,
            major=intern.major,
            start_date=intern.start_date,
            end_date=intern.end_date,
            supervisor=intern.supervisor,
            department=intern.department,
            status=intern.status,
            created_at=intern.created_at,
            updated_at=intern.updated_at,
            hr_name=f"{hr.first_name} {hr.last_name}".strip(),
            hr_email=hr.email,
            welcome_sent=intern.welcome_sent_at is not None,
            account_id=intern.account_id,
        )

    def as_dict(self) -> dict:
        return asdict(self)


REQUIRED_FIELDS = ("first_name", "email", "start_date", "end_date", "department")


def validate_record(record, row=None):
    """Reject a record missing a required field, with a malformed email or phone, or ending before it starts."""
    where = f" in row {row}" if row is not None else ""
    for name in REQUIRED_FIELDS:
        value = getattr(record, name, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            label = name.replace("_", " ")
            raise MalformedRecordError(f"{label.capitalize()} is required{where}", row=row, field=label)

    try:
        validate_email(record.normalized_email())
    except ValidationError:
        raise MalformedRecordError(f"Email is not valid{where}: {record.email}", row=row, field="email") from None

    phone = (record.phone or "").strip()
    if phone:
        try:
            phone_validator(phone)
        except ValidationError:
            raise MalformedRecordError(f"Phone number is not valid{where}: {phone}", row=row, field="phone") from None

    if record.end_date < record.start_date:
        raise MalformedRecordError(f"End date is before start date{where}", row=row, field="end date")
