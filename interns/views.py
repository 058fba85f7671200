# interns/views.py
import logging

from django.forms.models import model_to_dict
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from accounts.http import error_response, hr_required, intern_required, json_body, translate_errors
from . import search as intern_search
from . import services
from .exceptions import InternshipError
from .forms import BatchUploadForm, InternForm, StatusForm
from .models import Intern
from .spreadsheet import parse_spreadsheet

logger = logging.getLogger(__name__)


def _failure(exc):
    return error_response(exc.message, status=exc.status_code, **exc.details())


def _form_failure(form):
    return error_response("Invalid intern payload.", errors=form.errors.get_json_data())


@hr_required
@require_http_methods(["GET", "POST"])
def intern_collection(request):
    if request.method == "POST":
        return _create_intern(request)

    try:
        criteria = intern_search.SearchCriteria.from_params(request.GET)
        page = intern_search.search(criteria)
    except InternshipError as exc:
        return _failure(exc)
    return JsonResponse(page.as_dict())


def _create_intern(request):
    form = InternForm(json_body(request) or {})
    if not form.is_valid():
        return _form_failure(form)

    try:
        summary = services.create_intern(form.to_record(), request.user)
    except InternshipError as exc:
        return _failure(exc)
    return JsonResponse(summary.as_dict(), status=201)


@hr_required
@require_POST
def batch_upload(request):
    form = BatchUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        return error_response("Upload an .xlsx or .csv file.", errors=form.errors.get_json_data())

    try:
        records = parse_spreadsheet(form.cleaned_data["file"])
        result = services.create_batch(records, request.user)
    except InternshipError as exc:
        logger.info("Batch upload rejected: %s", exc.message)
        return _failure(exc)

    payload = result.as_dict()
    payload["message"] = f"{result.created} interns added successfully"
    return JsonResponse(payload, status=201)


@hr_required
@require_http_methods(["GET", "PATCH", "DELETE"])
@translate_errors
def intern_detail(request, intern_id):
    intern = get_object_or_404(Intern, pk=intern_id)

    if request.method == "GET":
        return JsonResponse(services.get_intern(intern.pk).as_dict())

    if request.method == "DELETE":
        services.delete_intern(intern.pk, request.user)
        return HttpResponse(status=204)

    payload = json_body(request)
    if payload is None:
        return error_response("Request body must be a JSON object.")

    if set(payload) == {"status"}:
        status_form = StatusForm(payload)
        if not status_form.is_valid():
            return _form_failure(status_form)
        summary = services.set_status(intern.pk, status_form.cleaned_data["status"], request.user)
        return JsonResponse(summary.as_dict())

    data = {**model_to_dict(intern, fields=InternForm.Meta.fields), **payload}
    form = InternForm(data, instance=intern)
    if not form.is_valid():
        return _form_failure(form)

    try:
        summary = services.update_intern(intern.pk, form.to_record(), request.user)
    except InternshipError as exc:
        return _failure(exc)
    return JsonResponse(summary.as_dict())


@intern_required
@require_GET
def my_profile(request):
    try:
        summary = services.get_intern_for_user(request.user)
    except Intern.DoesNotExist:
        return error_response("No intern profile for this account.", status=404)
    return JsonResponse(summary.as_dict())


@hr_required
@require_GET
def filter_options(request):
    return JsonResponse(intern_search.filter_options())


@hr_required
@require_GET
def statistics(request):
    return JsonResponse(intern_search.statistics())


@hr_required
@require_GET
def suggestions(request):
    return JsonResponse(intern_search.suggestions(request.GET.get("query")))


@hr_required
@require_GET
def export(request):
    try:
        criteria = intern_search.SearchCriteria.from_params(request.GET)
        results = intern_search.export(criteria)
    except InternshipError as exc:
        return _failure(exc)
    return JsonResponse({"content": [r.as_dict() for r in results], "total_elements": len(results)})


@hr_required
@require_GET
def counts(request):
    return JsonResponse(services.counts())

