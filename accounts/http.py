import json
from functools import wraps

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from django.http import JsonResponse


def json_body(request):
    """Decoded JSON object from the request body; ``{}`` when empty."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def error_response(message, status=400, **details):
    return JsonResponse({"success": False, "message": message, **details}, status=status)


def _role_required(check, label):
    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            user = request.user
            if not user.is_authenticated:
                return error_response("Authentication required.", status=401)
            if not check(user):
                return error_response(f"{label} only.", status=403)
            return view(request, *args, **kwargs)
        return wrapper
    return decorator


def is_hr(user):
    return user.is_superuser or getattr(user, "is_hr", False)


def is_intern(user):
    return getattr(user, "is_intern", False)


hr_required = _role_required(is_hr, "HR")
intern_required = _role_required(is_intern, "Interns")
login_required = _role_required(lambda user: True, "Authenticated users")


def translate_errors(view):
    """Turn service exceptions into JSON error responses."""

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except ObjectDoesNotExist as exc:
            return error_response(str(exc) or "Not found.", status=404)
        except PermissionDenied as exc:
            return error_response(str(exc) or "Forbidden.", status=403)
        except ValidationError as exc:
            return error_response(" ".join(exc.messages))

    return wrapper
