# messaging/views.py
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from accounts.http import error_response, hr_required, intern_required, json_body, login_required, translate_errors
from .forms import BulkMessageForm, MessageForm, MessageToHRForm
from . import services


def message_payload(message):
    return {
        "id": message.id,
        "subject": message.subject,
        "content": message.content,
        "is_read": message.is_read,
        "sent_at": message.sent_at,
        "message_type": message.message_type,
        "intern_id": message.intern_id,
        "intern_name": message.intern.full_name,
        "sender_id": message.sender_id,
        "sender_name": message.sender.display_name,
        "recipient_id": message.recipient_id,
    }


def notification_payload(notification):
    return {
        "id": notification.id,
        "title": notification.title,
        "message": notification.message,
        "type": notification.type,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
        "intern_id": notification.intern_id,
    }


def _page_params(request):
    try:
        return int(request.GET.get("page", 0)), int(request.GET.get("size", 20))
    except ValueError:
        return None


def _form_failure(form):
    return error_response("Invalid message payload.", errors=form.errors.get_json_data())


def _delivery_failure(exc):
    return error_response(str(exc), status=502)


@hr_required
@require_POST
@translate_errors
def message_intern(request, intern_id):
    form = MessageForm(json_body(request) or {})
    if not form.is_valid():
        return _form_failure(form)

    try:
        message = services.send_message_to_intern(
            request.user, intern_id, form.cleaned_data["subject"], form.cleaned_data["content"]
        )
    except services.MessageDeliveryError as exc:
        return _delivery_failure(exc)
    return JsonResponse(message_payload(message), status=201)


@hr_required
@require_POST
def message_interns(request):
    form = BulkMessageForm(json_body(request) or {})
    if not form.is_valid():
        return _form_failure(form)

    outcomes = services.send_message_to_interns(
        request.user,
        form.cleaned_data["intern_ids"],
        form.cleaned_data["subject"],
        form.cleaned_data["content"],
    )
    return JsonResponse({"results": [o.as_dict() for o in outcomes]})


@hr_required
@require_POST
def message_all_interns(request):
    form = MessageForm(json_body(request) or {})
    if not form.is_valid():
        return _form_failure(form)

    outcomes = services.send_message_to_all_active(
        request.user, form.cleaned_data["subject"], form.cleaned_data["content"]
    )
    return JsonResponse({"results": [o.as_dict() for o in outcomes]})


@intern_required
@require_POST
@translate_errors
def message_hr(request):
    form = MessageToHRForm(json_body(request) or {})
    if not form.is_valid():
        return _form_failure(form)

    try:
        message = services.send_message_to_hr(
            request.user,
            form.cleaned_data["hr_user_id"],
            form.cleaned_data["subject"],
            form.cleaned_data["content"],
        )
    except services.MessageDeliveryError as exc:
        return _delivery_failure(exc)
    return JsonResponse(message_payload(message), status=201)


@login_required
@require_GET
@translate_errors
def my_messages(request):
    params = _page_params(request)
    if params is None:
        return error_response("page and size must be integers.")

    rows, total = services.list_messages(request.user, *params)
    return JsonResponse({"content": [message_payload(m) for m in rows], "total_elements": total})


@login_required
@require_http_methods(["GET", "DELETE"])
@translate_errors
def message_detail(request, message_id):
    if request.method == "DELETE":
        services.delete_message(request.user, message_id)
        return HttpResponse(status=204)
    return JsonResponse(message_payload(services.get_message(request.user, message_id)))


@login_required
@require_POST
@translate_errors
def message_read(request, message_id):
    return JsonResponse(message_payload(services.mark_message_read(request.user, message_id)))


@login_required
@require_GET
@translate_errors
def my_notifications(request):
    params = _page_params(request)
    if params is None:
        return error_response("page and size must be integers.")

    rows, total = services.list_notifications(request.user, *params)
    return JsonResponse({
        "content": [notification_payload(n) for n in rows],
        "total_elements": total,
        "unread": services.unread_count(request.user),
    })


@login_required
@require_POST
@translate_errors
def notification_read(request, notification_id):
    return JsonResponse(notification_payload(services.mark_notification_read(request.user, notification_id)))
