from django.test import TestCase
from django.urls import reverse

from rest_framework.test import APIClient


class ServiceEndpointTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_health_check(self):
        resp = self.client.get(reverse("health-check"))

        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data["success"])
        self.assertEqual(resp.data["data"]["status"], "ok")
        self.assertIn("timestamp", resp.data["data"])

    def test_unknown_route_returns_json_envelope(self):
        resp = self.client.get("/api/does-not-exist/")

        self.assertEqual(resp.status_code, 404)
        body = resp.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["message"], "Can't find /api/does-not-exist/ on this server!")


class AuthenticationSettingsTests(TestCase):
    def test_default_authentication_is_staff_jwt(self):
        from rest_framework.settings import api_settings

        from api.utils.authentication import StaffJWTAuthentication

        self.assertEqual(api_settings.DEFAULT_AUTHENTICATION_CLASSES, [StaffJWTAuthentication])

    def test_health_check_accepts_bearer_header(self):
        resp = APIClient().get(reverse("health-check"), HTTP_AUTHORIZATION="Bearer junk")
        self.assertEqual(resp.status_code, 200)
