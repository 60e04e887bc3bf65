# api/middleware.py
from django.conf import settings
from django.core.cache import cache
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

from api.utils.middleware_utils import check_token_user_status, is_user_disabled

DISABLED_MESSAGE = "Your account has been disabled."
USER_GONE_MESSAGE = "The user belonging to this token does no longer exist."


def _envelope(message, status, data=None):
    return JsonResponse({"success": False, "message": message, "data": data or {}}, status=status)


def _is_public_view(view_func):
    """DRF views that declare no authentication classes never look at credentials."""
    view_class = getattr(view_func, "cls", None)
    return view_class is not None and not getattr(view_class, "authentication_classes", None)


class RejectDisabledUserMiddleware(MiddlewareMixin):
    """
    Very lightweight middleware.
    - Runs AFTER AuthenticationMiddleware
    - Skips public DRF views (``authentication_classes = []``)
    - Session users (Django admin) are checked from request.user
    - Bearer tokens are decoded only to find the user id; invalid or
      expired tokens are left for DRF authentication to reject
    """

    CACHE_KEY_PREFIX = "user:disabled:"

    @property
    def cache_ttl(self):
        return settings.API_MIDDLEWARE_USER_CACHE_TTL_SECONDS

    def process_view(self, request, view_func, view_args, view_kwargs):
        if _is_public_view(view_func):
            return None

        user = getattr(request, "user", None)

        if not user or not user.is_authenticated:
            # DRF authenticates JWT requests during view handling (after
            # middleware), so check the account referenced by the token here.
            auth = request.META.get("HTTP_AUTHORIZATION", "")
            if auth.startswith("Bearer "):
                token_str = auth.split(" ", 1)[1].strip()
                ok, reason = check_token_user_status(token_str, ttl=self.cache_ttl)
                if reason == "not_found":
                    return _envelope(USER_GONE_MESSAGE, 401, {"code": "user_not_found"})
                if reason == "disabled":
                    return _envelope(DISABLED_MESSAGE, 403)
            return None

        cache_key = f"{self.CACHE_KEY_PREFIX}{user.pk}"

        # Fast cache hit
        if cache.get(cache_key) is True:
            request.session.flush()
            return _envelope(DISABLED_MESSAGE, 403)

        # Check user flags (NO DB query, user already loaded)
        if is_user_disabled(user):
            cache.set(cache_key, True, timeout=self.cache_ttl)
            request.session.flush()
            return _envelope(DISABLED_MESSAGE, 403)

        return None
