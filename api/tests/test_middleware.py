from django.core.cache import cache
from django.test import TestCase, override_settings
from django.urls import reverse

from rest_framework.test import APIClient

from api.models.models_auth import CustomUser


class MiddlewareTokenRevocationTests(TestCase):
    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.login_url = reverse("staff-login")
        self.list_url = reverse("admin-inquiry-list")

    def _create_and_login(self, email="mwtest@example.com"):
        password = "MwPass1!"
        user = CustomUser.objects.create_user(
            email=email,
            password=password,
            first_name="Mw",
            last_name="Test",
            role=CustomUser.Role.STAFF,
            is_active=True,
        )

        resp = self.client.post(self.login_url, {"email": email, "password": password}, format="json")
        self.assertEqual(resp.status_code, 200)
        tokens = resp.data["data"]["tokens"]
        return user, tokens["access"]

    def test_access_blocked_after_user_delete(self):
        user, access = self._create_and_login(email="mwdel@example.com")

        r = self.client.get(self.list_url, HTTP_AUTHORIZATION=f"Bearer {access}")
        self.assertEqual(r.status_code, 200)

        # pre_delete signal blacklists refresh tokens
        user.delete()

        r2 = self.client.get(self.list_url, HTTP_AUTHORIZATION=f"Bearer {access}")
        self.assertEqual(r2.status_code, 401)
        self.assertEqual(r2.json()["message"], "The user belonging to this token does no longer exist.")

    def test_refresh_tokens_blacklisted_on_delete(self):
        from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken

        user, _ = self._create_and_login(email="mwblack@example.com")
        self.assertEqual(BlacklistedToken.objects.count(), 0)

        user.delete()

        self.assertEqual(BlacklistedToken.objects.count(), 1)

    def test_access_blocked_after_user_disable(self):
        user, access = self._create_and_login(email="mwdisable@example.com")

        r = self.client.get(self.list_url, HTTP_AUTHORIZATION=f"Bearer {access}")
        self.assertEqual(r.status_code, 200)

        user.is_enabled = False
        user.save(update_fields=["is_enabled"])

        r2 = self.client.get(self.list_url, HTTP_AUTHORIZATION=f"Bearer {access}")
        self.assertEqual(r2.status_code, 403)
        self.assertFalse(r2.json()["success"])

    def test_deleted_user_response_carries_code(self):
        user, access = self._create_and_login(email="mwcode@example.com")
        user.delete()

        r = self.client.get(self.list_url, HTTP_AUTHORIZATION=f"Bearer {access}")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json()["data"], {"code": "user_not_found"})

    def test_public_routes_ignore_disabled_user_token(self):
        user, access = self._create_and_login(email="mwpublic@example.com")
        user.is_enabled = False
        user.save(update_fields=["is_enabled"])
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")

        submit = self.client.post(
            reverse("inquiry-submit"),
            {"name": "Ann", "phone": "555", "serviceType": "Consulting", "message": "help"},
            format="json",
        )
        self.assertEqual(submit.status_code, 201)

        code = submit.json()["data"]["referenceCode"]
        track = self.client.get(reverse("inquiry-track", args=[code]))
        self.assertEqual(track.status_code, 200)

    def test_public_routes_ignore_deleted_user_token(self):
        user, access = self._create_and_login(email="mwpublicdel@example.com")
        user.delete()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")

        submit = self.client.post(
            reverse("inquiry-submit"),
            {"name": "Ann", "phone": "555", "serviceType": "Consulting", "message": "help"},
            format="json",
        )
        self.assertEqual(submit.status_code, 201)

        code = submit.json()["data"]["referenceCode"]
        track = self.client.get(reverse("inquiry-track", args=[code]))
        self.assertEqual(track.status_code, 200)

    @override_settings(API_MIDDLEWARE_USER_CACHE_TTL_SECONDS=0)
    def test_cache_ttl_comes_from_settings(self):
        from api.middleware import RejectDisabledUserMiddleware

        self.assertEqual(RejectDisabledUserMiddleware(lambda request: None).cache_ttl, 0)
