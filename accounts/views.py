# accounts/views.py
from django.contrib.auth import authenticate, login, logout, update_session_auth_hash
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from .forms import LoginForm, PasswordChangeForm
from .http import error_response, json_body, login_required
from .services import change_password


def user_payload(user):
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "role": user.role,
        "is_active": user.is_active,
        "password_changed_at": user.password_changed_at,
    }


@require_POST
def login_view(request):
    form = LoginForm(json_body(request) or {})
    if not form.is_valid():
        return error_response("Invalid login payload.", errors=form.errors.get_json_data())

    user = authenticate(request, username=form.cleaned_data["email"], password=form.cleaned_data["password"])
    if user is None:
        return error_response("Invalid email or password.", status=401)

    login(request, user)
    return JsonResponse({"success": True, "user": user_payload(user)})


@require_POST
def logout_view(request):
    logout(request)
    return JsonResponse({"success": True})


@require_GET
@login_required
def me(request):
    return JsonResponse(user_payload(request.user))


@require_POST
@login_required
def password_change(request):
    form = PasswordChangeForm(json_body(request) or {})
    if not form.is_valid():
        return error_response("Invalid password payload.", errors=form.errors.get_json_data())

    try:
        change_password(
            request.user,
            form.cleaned_data["current_password"],
            form.cleaned_data["new_password"],
            form.cleaned_data["confirm_password"],
        )
    except ValidationError as exc:
        return error_response(" ".join(exc.messages))

    update_session_auth_hash(request, request.user)
    return JsonResponse({"success": True, "message": "Password changed successfully"})
