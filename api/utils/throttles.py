"""Throttling utilities for the API.

Login attempts are throttled per email; inquiry submissions per client IP.
"""

from rest_framework.throttling import AnonRateThrottle, SimpleRateThrottle


class LoginRateThrottle(SimpleRateThrottle):
    """
    Per-email + per-IP login throttling.
    Uses email as primary key; falls back to IP if email is missing.
    """

    scope = "login"

    def get_cache_key(self, request, view):
        """
        Returns a cache key for the login throttle.

        If the email is provided, it uses the email as the primary key.
        If the email is missing, it falls back to using the IP address.
        """
        email = request.data.get("email")
        if email and isinstance(email, str):
            return self.cache_format % {"scope": self.scope, "ident": email.strip().lower()}
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}


class InquirySubmitThrottle(AnonRateThrottle):
    """Limits anonymous inquiry submissions per IP."""

    scope = "inquiry_submit"
