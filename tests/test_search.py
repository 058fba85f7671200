import datetime

import pytest
from django.utils import timezone

from interns import search as intern_search
from interns.exceptions import InvalidPaginationError, InvalidQueryError
from interns.models import Intern
from interns.search import (
    DateRange,
    FieldContains,
    Keyword,
    SearchCriteria,
    SearchSpecBuilder,
    StatusEquals,
)

pytestmark = pytest.mark.django_db


def test_no_filters_returns_every_intern(make_intern):
    for _ in range(3):
        make_intern()

    page = intern_search.search(SearchCriteria())

    assert page.total_elements == 3
    assert page.total_pages == 1
    assert len(page.content) == 3
    assert page.is_last


def test_department_and_status_filter_paginates(make_intern):
    for _ in range(25):
        make_intern(department="Engineering")
    for _ in range(5):
        make_intern(department="Engineering", status=Intern.COMPLETED)
    for _ in range(4):
        make_intern(department="Finance")

    criteria = SearchCriteria(department="Engineering", status="ACTIVE", page=0, size=20)
    page = intern_search.search(criteria)

    assert len(page.content) == 20
    assert page.total_elements == 25
    assert page.total_pages == 2
    assert not page.is_last
    assert {item.status for item in page.content} == {Intern.ACTIVE}

    second = intern_search.search(SearchCriteria(department="Engineering", status="ACTIVE", page=1, size=20))
    assert len(second.content) == 5
    assert second.is_last
    assert not {i.id for i in page.content} & {i.id for i in second.content}


def test_keyword_matches_any_text_field(make_intern):
    by_name = make_intern(first_name="Marguerite")
    by_university = make_intern(university="Margate College")
    by_supervisor = make_intern(supervisor="Dr. Margolis")
    make_intern(first_name="Zed")

    page = intern_search.search(SearchCriteria(keyword="marg"))

    assert {i.id for i in page.content} == {by_name.id, by_university.id, by_supervisor.id}


def test_blank_filters_are_ignored(make_intern):
    make_intern()
    make_intern(department="Finance")

    page = intern_search.search(SearchCriteria(keyword="   ", department="", university=None))

    assert page.total_elements == 2


def test_date_ranges_are_inclusive(make_intern):
    early = make_intern(start_date=datetime.date(2026, 1, 1), end_date=datetime.date(2026, 3, 1))
    edge = make_intern(start_date=datetime.date(2026, 2, 1), end_date=datetime.date(2026, 4, 1))
    make_intern(start_date=datetime.date(2026, 2, 2), end_date=datetime.date(2026, 5, 1))

    page = intern_search.search(SearchCriteria(
        start_date_from=datetime.date(2026, 1, 1),
        start_date_to=datetime.date(2026, 2, 1),
    ))
    assert {i.id for i in page.content} == {early.id, edge.id}

    page = intern_search.search(SearchCriteria(end_date_to=datetime.date(2026, 3, 1)))
    assert [i.id for i in page.content] == [early.id]


def test_status_filter_is_case_insensitive(make_intern):
    done = make_intern(status=Intern.COMPLETED)
    make_intern()

    page = intern_search.search(SearchCriteria(status="completed"))

    assert [i.id for i in page.content] == [done.id]


def test_unknown_status_is_rejected(make_intern):
    with pytest.raises(InvalidQueryError):
        intern_search.search(SearchCriteria(status="ON_LEAVE"))


@pytest.mark.parametrize("sort_by, direction", [
    ("password", "asc"),
    ("hr_user__email", "asc"),
    ("first_name", "sideways"),
])
def test_invalid_ordering_is_rejected(sort_by, direction):
    with pytest.raises(InvalidQueryError):
        intern_search.search(SearchCriteria(sort_by=sort_by, sort_direction=direction))


@pytest.mark.parametrize("page, size", [(-1, 10), (0, 0), (0, -5)])
def test_invalid_pagination_is_rejected(page, size):
    with pytest.raises(InvalidPaginationError):
        intern_search.search(SearchCriteria(page=page, size=size))


def test_page_past_the_end_is_empty(make_intern):
    for _ in range(3):
        make_intern()

    page = intern_search.search(SearchCriteria(page=5, size=2))

    assert page.content == []
    assert page.total_elements == 3
    assert page.total_pages == 2


def test_sorting_by_name_with_id_tie_break(make_intern):
    b1 = make_intern(first_name="Bea")
    a = make_intern(first_name="Ann")
    b2 = make_intern(first_name="Bea")

    asc = intern_search.search(SearchCriteria(sort_by="firstName", sort_direction="asc"))
    desc = intern_search.search(SearchCriteria(sort_by="first_name", sort_direction="DESC"))

    assert [i.id for i in asc.content] == [a.id, b1.id, b2.id]
    assert [i.id for i in desc.content] == [b1.id, b2.id, a.id]


def test_builder_produces_plain_filters():
    criteria = SearchCriteria(
        keyword=" ada ",
        department="Engineering",
        status="active",
        start_date_from=datetime.date(2026, 1, 1),
        end_date_to=datetime.date(2026, 12, 31),
    )

    filters = SearchSpecBuilder(criteria).filters()

    assert filters == [
        Keyword("ada"),
        FieldContains("department", "Engineering"),
        StatusEquals("ACTIVE"),
        DateRange("start_date", datetime.date(2026, 1, 1), None),
        DateRange("end_date", None, datetime.date(2026, 12, 31)),
    ]


def test_builder_ordering_defaults_to_newest_first():
    assert SearchSpecBuilder(SearchCriteria()).ordering() == ["-created_at", "id"]
    assert SearchSpecBuilder(SearchCriteria(sort_by="id", sort_direction="asc")).ordering() == ["id"]


def test_criteria_from_query_params(settings):
    settings.INTERN_SEARCH_MAX_PAGE_SIZE = 50
    criteria = SearchCriteria.from_params({
        "keyword": "ada",
        "startDateFrom": "2026-01-01",
        "end_date_to": "2026-06-30",
        "sortBy": "lastName",
        "sortDirection": "asc",
        "page": "2",
        "size": "500",
    })

    assert criteria.keyword == "ada"
    assert criteria.start_date_from == datetime.date(2026, 1, 1)
    assert criteria.end_date_to == datetime.date(2026, 6, 30)
    assert criteria.sort_by == "lastName"
    assert criteria.sort_direction == "asc"
    assert criteria.page == 2
    assert criteria.size == 50


def test_criteria_from_params_rejects_bad_values():
    with pytest.raises(InvalidQueryError):
        SearchCriteria.from_params({"start_date_from": "01/02/2026"})
    with pytest.raises(InvalidPaginationError):
        SearchCriteria.from_params({"page": "first"})


def test_export_ignores_pagination(make_intern):
    for _ in range(4):
        make_intern(department="Engineering")
    make_intern(department="Finance")

    results = intern_search.export(SearchCriteria(department="engineering", size=1))

    assert len(results) == 4


def test_filter_options_lists_distinct_values(make_intern):
    make_intern(department="Research", university="North")
    make_intern(department="Finance", university="North", supervisor="")

    options = intern_search.filter_options()

    assert options["departments"] == ["Finance", "Research"]
    assert options["universities"] == ["North"]
    assert options["supervisors"] == ["Ada Lovelace"]
    assert options["statuses"] == ["ACTIVE", "COMPLETED", "TERMINATED"]


def test_statistics(make_intern):
    today = timezone.localdate()
    make_intern(start_date=today - datetime.timedelta(days=10), end_date=today + datetime.timedelta(days=10))
    make_intern(
        start_date=today - datetime.timedelta(days=100),
        end_date=today - datetime.timedelta(days=50),
        status=Intern.COMPLETED,
        department="Finance",
    )

    stats = intern_search.statistics()

    assert stats["total_interns"] == 2
    assert stats["status_counts"] == {"ACTIVE": 1, "COMPLETED": 1, "TERMINATED": 0}
    assert stats["active_interns_by_date_range"] == 1
    assert stats["department_counts"] == {"Finance": 1, "Research": 1}
    assert stats["university_counts"] == {"State University": 2}


def test_suggestions(make_intern):
    make_intern(department="Engineering", major="Engine Design")
    make_intern(department="Finance")

    assert intern_search.suggestions("") == {}

    found = intern_search.suggestions("engin")
    assert found["departments"] == ["Engineering"]
    assert found["majors"] == ["Engine Design"]
    assert found["universities"] == []
