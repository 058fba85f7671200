# tracking/views.py
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from accounts.http import error_response, hr_required, intern_required, is_hr, json_body, login_required, translate_errors
from interns.models import Intern
from .forms import ActivityForm, DocumentUploadForm
from .reports import activity_report_pdf
from . import services


def activity_payload(activity):
    return {
        "id": activity.id,
        "activity_date": activity.activity_date,
        "description": activity.description,
        "created_at": activity.created_at,
        "intern_id": activity.intern_id,
        "intern_name": activity.intern.full_name,
    }


def attendance_payload(attendance):
    return {
        "id": attendance.id,
        "attendance_date": attendance.attendance_date,
        "check_in_time": attendance.check_in_time,
        "check_out_time": attendance.check_out_time,
        "status": attendance.status,
        "remarks": attendance.remarks,
        "intern_id": attendance.intern_id,
    }


def document_payload(document):
    return {
        "id": document.id,
        "original_name": document.original_name,
        "mime_type": document.mime_type,
        "size": document.size,
        "type": document.type,
        "comment": document.comment,
        "uploaded_at": document.uploaded_at,
        "intern_id": document.intern_id,
    }


# ==============================
# INTERN
# ==============================

@intern_required
@require_http_methods(["GET", "POST"])
@translate_errors
def my_activities(request):
    intern = Intern.objects.for_user(request.user)

    if request.method == "POST":
        form = ActivityForm(json_body(request) or {})
        if not form.is_valid():
            return error_response("Invalid activity payload.", errors=form.errors.get_json_data())
        activity = services.log_activity(request.user, form.cleaned_data["description"])
        return JsonResponse(activity_payload(activity), status=201)

    rows = services.list_activities(intern).select_related("intern")
    return JsonResponse({"content": [activity_payload(a) for a in rows]})


@intern_required
@require_POST
@translate_errors
def attendance_check_in(request):
    return JsonResponse(attendance_payload(services.check_in(request.user)))


@intern_required
@require_POST
@translate_errors
def attendance_check_out(request):
    return JsonResponse(attendance_payload(services.check_out(request.user)))


@intern_required
@require_GET
@translate_errors
def my_attendance(request):
    intern = Intern.objects.for_user(request.user)
    return JsonResponse({"content": [attendance_payload(a) for a in services.list_attendance(intern)]})


@intern_required
@require_http_methods(["GET", "POST"])
@translate_errors
def my_documents(request):
    intern = Intern.objects.for_user(request.user)

    if request.method == "POST":
        form = DocumentUploadForm(request.POST, request.FILES)
        if not form.is_valid():
            return error_response("Invalid document upload.", errors=form.errors.get_json_data())
        document = services.upload_document(
            request.user,
            form.cleaned_data["file"],
            form.cleaned_data["type"],
            form.cleaned_data["comment"],
        )
        return JsonResponse(document_payload(document), status=201)

    return JsonResponse({"content": [document_payload(d) for d in services.list_documents(intern)]})


# ==============================
# HR
# ==============================

@hr_required
@require_GET
def intern_activities(request, intern_id):
    intern = get_object_or_404(Intern, pk=intern_id)
    rows = services.list_activities(intern).select_related("intern")
    return JsonResponse({"content": [activity_payload(a) for a in rows]})


@login_required
@require_GET
def activity_report(request, intern_id):
    intern = get_object_or_404(Intern, pk=intern_id)

    if not is_hr(request.user) and intern.account_id != request.user.id:
        return error_response("You can only download your own report.", status=403)

    filename = f"activity_report_{intern.id}_{timezone.now().strftime('%Y%m%d_%H%M')}.pdf"
    response = HttpResponse(activity_report_pdf(intern), content_type="application/pdf")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response
