import logging
from datetime import date, datetime

import pandas as pd
from django.utils.dateparse import parse_date

from .exceptions import MalformedRecordError
from .records import InternRecord

logger = logging.getLogger(__name__)

# header text -> InternRecord field
COLUMNS = {
    "first name": "first_name",
    "last name": "last_name",
    "email": "email",
    "phone": "phone",
    "university": "university",
    "major": "major",
    "start date": "start_date",
    "end date": "end_date",
    "supervisor": "supervisor",
    "department": "department",
}

REQUIRED_COLUMNS = ["first name", "email", "start date", "end date", "department"]
DATE_COLUMNS = {"start date", "end date"}

# spreadsheet row of the first data line (row 1 is the header)
FIRST_DATA_ROW = 2


def _normalize_header(value):
    return " ".join(str(value).replace("_", " ").strip().lower().split())


def _read_frame(uploaded_file):
    name = (getattr(uploaded_file, "name", "") or "").lower()
    try:
        if name.endswith(".csv"):
            return pd.read_csv(uploaded_file, dtype=object, keep_default_na=False)
        return pd.read_excel(uploaded_file, sheet_name=0, dtype=object, engine="openpyxl")
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except Exception as exc:
        raise MalformedRecordError(f"Could not read spreadsheet: {exc}") from exc


def _cell_text(value):
    """Cell value as trimmed text; blanks (NaN, None, "") become ""."""
    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (datetime, pd.Timestamp)):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def _cell_date(value, row, header):
    if isinstance(value, (datetime, pd.Timestamp)):
        return value.date()
    if isinstance(value, date):
        return value

    text = _cell_text(value)
    try:
        parsed = parse_date(text[:10]) if text else None
    except ValueError:
        parsed = None
    if parsed is None:
        raise MalformedRecordError(
            f"Invalid {header} format in row {row}: {text}", row=row, field=header
        )
    return parsed


def parse_spreadsheet(uploaded_file):
    """
    Read interns from the first sheet of an .xlsx upload (or a .csv file).

    The first row holds headers; unknown headers are ignored. Any row with a
    blank required cell, an unreadable date or an end date before its start
    date rejects the whole file.
    """
    frame = _read_frame(uploaded_file)
    frame = frame.rename(columns=lambda c: _normalize_header(c))

    for header in REQUIRED_COLUMNS:
        if header not in frame.columns:
            raise MalformedRecordError(f"Missing required column: {header}", row=1, field=header)

    known = [h for h in frame.columns if h in COLUMNS]
    records = []

    for offset, values in enumerate(frame[known].itertuples(index=False, name=None)):
        row = FIRST_DATA_ROW + offset
        cells = dict(zip(known, values))

        if all(_cell_text(v) == "" for v in cells.values()):
            continue

        for header in REQUIRED_COLUMNS:
            if _cell_text(cells.get(header)) == "":
                raise MalformedRecordError(
                    f"{header.capitalize()} is required in row {row}", row=row, field=header
                )

        fields = {}
        for header, value in cells.items():
            if header in DATE_COLUMNS:
                fields[COLUMNS[header]] = _cell_date(value, row, header)
            else:
                fields[COLUMNS[header]] = _cell_text(value)

        if fields["end_date"] < fields["start_date"]:
            raise MalformedRecordError(
                f"End date is before start date in row {row}", row=row, field="end date"
            )

        records.append(InternRecord(**fields))

    logger.info("Parsed %d intern rows from %s", len(records), getattr(uploaded_file, "name", "upload"))
    return records
