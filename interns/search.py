"""Intern search.

Search criteria are turned into a list of small filter objects first and
only translated into a Django ``Q`` when the query runs, so the filter
model itself knows nothing about the ORM.
"""
import logging
import math
from dataclasses import dataclass, field
from datetime import date
from functools import reduce
from operator import and_, or_
from typing import List, Optional

from django.conf import settings
from django.core.paginator import EmptyPage, Paginator
from django.db.models import Count, Q
from django.utils import timezone
from django.utils.dateparse import parse_date

from .exceptions import InvalidPaginationError, InvalidQueryError
from .models import Intern
from .records import InternSummary

logger = logging.getLogger(__name__)

KEYWORD_FIELDS = ("first_name", "last_name", "email", "university", "major", "department", "supervisor")
TEXT_FILTER_FIELDS = ("department", "university", "major", "supervisor")
DATE_PARAMS = ("start_date_from", "start_date_to", "end_date_from", "end_date_to")

SORTABLE_FIELDS = (
    "id", "first_name", "last_name", "email", "phone", "university", "major",
    "start_date", "end_date", "supervisor", "department", "status",
    "created_at", "updated_at",
)


def _camel(name):
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


# accepts both "start_date" and "startDate"
SORT_FIELDS = {**{name: name for name in SORTABLE_FIELDS}, **{_camel(name): name for name in SORTABLE_FIELDS}}


def _clean(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


# ==============================
# FILTERS
# ==============================

@dataclass(frozen=True)
class Keyword:
    value: str

    def to_q(self):
        return reduce(or_, (Q(**{f"{name}__icontains": self.value}) for name in KEYWORD_FIELDS))


@dataclass(frozen=True)
class FieldContains:
    field: str
    value: str

    def to_q(self):
        return Q(**{f"{self.field}__icontains": self.value})


@dataclass(frozen=True)
class StatusEquals:
    status: str

    def to_q(self):
        return Q(status=self.status)


@dataclass(frozen=True)
class DateRange:
    field: str
    start: Optional[date] = None
    end: Optional[date] = None

    def to_q(self):
        q = Q()
        if self.start is not None:
            q &= Q(**{f"{self.field}__gte": self.start})
        if self.end is not None:
            q &= Q(**{f"{self.field}__lte": self.end})
        return q


# ==============================
# CRITERIA
# ==============================

@dataclass
class SearchCriteria:
    keyword: Optional[str] = None
    department: Optional[str] = None
    university: Optional[str] = None
    major: Optional[str] = None
    supervisor: Optional[str] = None
    status: Optional[str] = None
    start_date_from: Optional[date] = None
    start_date_to: Optional[date] = None
    end_date_from: Optional[date] = None
    end_date_to: Optional[date] = None
    sort_by: str = "created_at"
    sort_direction: str = "desc"
    page: int = 0
    size: int = field(default_factory=lambda: settings.INTERN_SEARCH_PAGE_SIZE)

    @classmethod
    def from_params(cls, params):
        """Build criteria from query-string style values (snake_case or camelCase keys)."""

        def get(name):
            value = params.get(name)
            if value is None:
                value = params.get(_camel(name))
            return value

        criteria = cls()
        for name in ("keyword", "status") + TEXT_FILTER_FIELDS:
            setattr(criteria, name, _clean(get(name)))

        for name in DATE_PARAMS:
            raw = _clean(get(name))
            if raw is None:
                continue
            try:
                parsed = parse_date(raw)
            except ValueError:
                parsed = None
            if parsed is None:
                raise InvalidQueryError(f"Invalid date for {name}: {raw}")
            setattr(criteria, name, parsed)

        criteria.sort_by = _clean(get("sort_by")) or criteria.sort_by
        criteria.sort_direction = _clean(get("sort_direction")) or criteria.sort_direction

        for name in ("page", "size"):
            raw = _clean(get(name))
            if raw is None:
                continue
            try:
                setattr(criteria, name, int(raw))
            except ValueError:
                raise InvalidPaginationError(f"{name} must be an integer, got {raw!r}") from None

        criteria.size = min(criteria.size, settings.INTERN_SEARCH_MAX_PAGE_SIZE)
        return criteria


@dataclass
class Page:
    content: List[InternSummary]
    total_elements: int
    total_pages: int
    page: int
    size: int

    @property
    def is_last(self):
        return self.page >= self.total_pages - 1

    def as_dict(self):
        return {
            "content": [item.as_dict() for item in self.content],
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
            "page": self.page,
            "size": self.size,
            "last": self.is_last,
        }


# ==============================
# BUILDER
# ==============================

class SearchSpecBuilder:
    def __init__(self, criteria):
        self.criteria = criteria

    def filters(self):
        c = self.criteria
        found = []

        keyword = _clean(c.keyword)
        if keyword:
            found.append(Keyword(keyword))

        for name in TEXT_FILTER_FIELDS:
            value = _clean(getattr(c, name))
            if value:
                found.append(FieldContains(name, value))

        status = _clean(c.status)
        if status:
            status = status.upper()
            if status not in {value for value, _ in Intern.STATUS}:
                raise InvalidQueryError(f"Unknown status: {c.status}")
            found.append(StatusEquals(status))

        if c.start_date_from is not None or c.start_date_to is not None:
            found.append(DateRange("start_date", c.start_date_from, c.start_date_to))
        if c.end_date_from is not None or c.end_date_to is not None:
            found.append(DateRange("end_date", c.end_date_from, c.end_date_to))

        return found

    def to_q(self):
        return reduce(and_, (f.to_q() for f in self.filters()), Q())

    def ordering(self):
        sort_by = _clean(self.criteria.sort_by) or "created_at"
        if sort_by not in SORT_FIELDS:
            raise InvalidQueryError(f"Cannot sort by {sort_by!r}")

        direction = (_clean(self.criteria.sort_direction) or "asc").lower()
        if direction not in ("asc", "desc"):
            raise InvalidQueryError(f"Sort direction must be asc or desc, got {self.criteria.sort_direction!r}")

        column = SORT_FIELDS[sort_by]
        ordering = [f"-{column}" if direction == "desc" else column]
        if column != "id":
            ordering.append("id")
        return ordering

    def queryset(self):
        return (
            Intern.objects
            .select_related("hr_user")
            .filter(self.to_q())
            .order_by(*self.ordering())
        )


# ==============================
# OPERATIONS
# ==============================

def search(criteria):
    if criteria.page is None or criteria.page < 0:
        raise InvalidPaginationError("Page index must not be negative.")
    if criteria.size is None or criteria.size <= 0:
        raise InvalidPaginationError("Page size must be greater than zero.")

    queryset = SearchSpecBuilder(criteria).queryset()
    paginator = Paginator(queryset, criteria.size)

    try:
        rows = list(paginator.page(criteria.page + 1).object_list)
    except EmptyPage:
        rows = []

    total = paginator.count
    return Page(
        content=[InternSummary.from_intern(intern) for intern in rows],
        total_elements=total,
        total_pages=math.ceil(total / criteria.size),
        page=criteria.page,
        size=criteria.size,
    )


def export(criteria):
    """Every match for ``criteria`` in search order, ignoring pagination."""
    queryset = SearchSpecBuilder(criteria).queryset()
    results = [InternSummary.from_intern(intern) for intern in queryset]
    logger.info("Exported %d interns", len(results))
    return results


def _distinct(name, contains=None):
    qs = Intern.objects.exclude(**{name: ""})
    if contains:
        qs = qs.filter(**{f"{name}__icontains": contains})
    return qs.order_by(name).values_list(name, flat=True).distinct()


def filter_options():
    return {
        "departments": list(_distinct("department")),
        "universities": list(_distinct("university")),
        "majors": list(_distinct("major")),
        "supervisors": list(_distinct("supervisor")),
        "statuses": [value for value, _ in Intern.STATUS],
    }


def _counts_by(name):
    rows = (
        Intern.objects
        .exclude(**{name: ""})
        .values(name)
        .annotate(total=Count("id"))
        .order_by(name)
    )
    return {row[name]: row["total"] for row in rows}


def statistics():
    today = timezone.localdate()

    status_counts = {value: 0 for value, _ in Intern.STATUS}
    status_counts.update(_counts_by("status"))

    return {
        "status_counts": status_counts,
        "total_interns": Intern.objects.count(),
        "active_interns_by_date_range": Intern.objects.filter(start_date__lte=today, end_date__gte=today).count(),
        "department_counts": _counts_by("department"),
        "university_counts": _counts_by("university"),
    }


def suggestions(query, limit=5):
    query = _clean(query)
    if not query:
        return {}

    return {
        "departments": list(_distinct("department", query)[:limit]),
        "universities": list(_distinct("university", query)[:limit]),
        "majors": list(_distinct("major", query)[:limit]),
        "supervisors": list(_distinct("supervisor", query)[:limit]),
    }
