import datetime
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from openpyxl import Workbook

from interns.records import InternRecord

START = datetime.date(2026, 1, 5)
END = datetime.date(2026, 6, 30)

HEADER = ["First Name", "Last Name", "Email", "Phone", "University", "Major",
          "Start Date", "End Date", "Supervisor", "Department"]


def make_record(n=1, **overrides):
    fields = {
        "first_name": f"First{n}",
        "last_name": f"Last{n}",
        "email": f"intern{n}@example.com",
        "phone": "+15550000" + str(n).zfill(3),
        "university": "State University",
        "major": "Computer Science",
        "start_date": START,
        "end_date": END,
        "supervisor": "Grace Hopper",
        "department": "Engineering",
    }
    fields.update(overrides)
    return InternRecord(**fields)


def sheet_row(n, **overrides):
    record = make_record(n, **overrides)
    return [
        record.first_name, record.last_name, record.email, record.phone, record.university,
        record.major, record.start_date, record.end_date, record.supervisor, record.department,
    ]


def xlsx_upload(rows, name="interns.xlsx"):
    """An in-memory .xlsx upload whose first row is the header."""
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buffer = BytesIO()
    workbook.save(buffer)
    return SimpleUploadedFile(
        name,
        buffer.getvalue(),
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
