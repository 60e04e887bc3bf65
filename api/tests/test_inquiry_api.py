"""End-to-end tests for the public and admin inquiry endpoints."""

import re

from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from api.models.models_auth import CustomUser
from api.models.models_inquiry import FollowUp, Inquiry
from api.services.inquiry_service import InquiryService


def submission(**overrides):
    data = {"name": "Ann", "phone": "555", "serviceType": "Consulting", "message": "help"}
    data.update(overrides)
    return data


class PublicInquiryTests(TestCase):
    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.submit_url = reverse("inquiry-submit")

    def test_submit_inquiry(self):
        resp = self.client.post(self.submit_url, submission(), format="json")

        self.assertEqual(resp.status_code, 201)
        self.assertTrue(resp.data["success"])
        self.assertEqual(resp.data["message"], "Inquiry submitted successfully!")
        code = resp.data["data"]["referenceCode"]
        self.assertRegex(code, re.compile(r"^INQ\d{17}$"))
        inquiry = resp.data["data"]["inquiry"]
        self.assertEqual(inquiry["referenceCode"], code)
        self.assertEqual(inquiry["status"], "New")
        self.assertEqual(inquiry["serviceType"], "Consulting")
        self.assertTrue(Inquiry.objects.filter(reference_code=code).exists())

    def test_submit_missing_fields(self):
        resp = self.client.post(self.submit_url, {"phone": "555"}, format="json")

        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.data["success"])
        self.assertEqual(resp.data["message"], "Name is required")
        self.assertIn("serviceType", resp.data["data"])
        self.assertIn("message", resp.data["data"])
        self.assertEqual(Inquiry.objects.count(), 0)

    def test_submit_ignores_bearer_token(self):
        resp = self.client.post(self.submit_url, submission(), format="json", HTTP_AUTHORIZATION="Bearer junk")
        self.assertEqual(resp.status_code, 201)

    def test_track_inquiry(self):
        inquiry = InquiryService().create_inquiry(submission(email="ann@example.com"))
        url = reverse("inquiry-track", args=[inquiry.reference_code.lower()])

        resp = self.client.get(url)

        self.assertEqual(resp.status_code, 200)
        tracked = resp.data["data"]["inquiry"]
        self.assertEqual(tracked["referenceCode"], inquiry.reference_code)
        for hidden in ("phone", "email", "message", "id"):
            self.assertNotIn(hidden, tracked)
        self.assertEqual(resp.data["data"]["followUps"], [])

    def test_track_unknown_code(self):
        resp = self.client.get(reverse("inquiry-track", args=["INQ00000000000000000"]))

        self.assertEqual(resp.status_code, 404)
        self.assertFalse(resp.data["success"])
        self.assertEqual(resp.data["message"], "No inquiry found with this reference code")


class AdminInquiryTests(TestCase):
    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.staff = CustomUser.objects.create_user(
            email="staff@example.com",
            password="StaffPass123!",
            first_name="Sam",
            role=CustomUser.Role.STAFF,
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {RefreshToken.for_user(self.staff).access_token}")
        self.service = InquiryService()
        self.list_url = reverse("admin-inquiry-list")

    def _detail_url(self, pk):
        return reverse("admin-inquiry-detail", args=[pk])

    def _followups_url(self, pk):
        return reverse("admin-inquiry-followups", args=[pk])

    def test_list_requires_token(self):
        self.client.credentials()
        resp = self.client.get(self.list_url)

        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data["message"], "You are not logged in! Please log in to get access.")

    def test_list_rejects_non_staff_role(self):
        outsider = CustomUser.objects.create_user(email="guest@example.com", password="GuestPass123!", first_name="G")
        CustomUser.objects.filter(pk=outsider.pk).update(role="guest")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {RefreshToken.for_user(outsider).access_token}")

        resp = self.client.get(self.list_url)
        self.assertEqual(resp.status_code, 403)
        self.assertFalse(resp.data["success"])

    def test_list_with_pagination_and_filters(self):
        for _ in range(12):
            self.service.create_inquiry(submission())
        done = self.service.create_inquiry(submission(phone="777"))
        self.service.update_status(done.pk, "Done")

        resp = self.client.get(self.list_url, {"page": 2, "limit": 10})
        self.assertEqual(resp.status_code, 200)
        payload = resp.data["data"]
        self.assertEqual(len(payload["inquiries"]), 3)
        self.assertEqual(
            payload["pagination"],
            {
                "currentPage": 2,
                "limit": 10,
                "totalPages": 2,
                "totalInquiries": 13,
                "hasNextPage": False,
                "hasPrevPage": True,
            },
        )

        resp = self.client.get(self.list_url, {"status": "Done"})
        self.assertEqual([i["id"] for i in resp.data["data"]["inquiries"]], [done.pk])

        resp = self.client.get(self.list_url, {"phone": "77"})
        self.assertEqual(resp.data["data"]["pagination"]["totalInquiries"], 1)

    def test_list_exposes_full_record(self):
        self.service.create_inquiry(submission(email="ann@example.com"))
        resp = self.client.get(self.list_url)

        row = resp.data["data"]["inquiries"][0]
        for field in ("id", "referenceCode", "name", "phone", "email", "serviceType", "message", "status", "createdAt"):
            self.assertIn(field, row)

    def test_detail_with_follow_ups(self):
        inquiry = self.service.create_inquiry(submission())
        self.service.add_follow_up(inquiry.pk, "called", "2030-01-01")

        resp = self.client.get(self._detail_url(inquiry.pk))

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["data"]["inquiry"]["referenceCode"], inquiry.reference_code)
        follow_ups = resp.data["data"]["followUps"]
        self.assertEqual(len(follow_ups), 1)
        self.assertEqual(follow_ups[0]["note"], "called")
        self.assertEqual(follow_ups[0]["inquiryId"], inquiry.pk)

    def test_detail_missing_and_malformed_ids(self):
        for pk in (987654, "abc"):
            resp = self.client.get(self._detail_url(pk))
            self.assertEqual(resp.status_code, 404)
            self.assertEqual(resp.data["message"], "Inquiry not found")

    def test_update_status_put_and_patch(self):
        inquiry = self.service.create_inquiry(submission())

        resp = self.client.put(self._detail_url(inquiry.pk), {"status": "In Progress"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["message"], "Inquiry status updated successfully")
        self.assertEqual(resp.data["data"]["inquiry"]["status"], "In Progress")

        resp = self.client.patch(self._detail_url(inquiry.pk), {"status": "Done"}, format="json")
        self.assertEqual(resp.status_code, 200)
        inquiry.refresh_from_db()
        self.assertEqual(inquiry.status, "Done")

    def test_update_status_rejects_unknown_value(self):
        inquiry = self.service.create_inquiry(submission())

        resp = self.client.patch(self._detail_url(inquiry.pk), {"status": "Won"}, format="json")

        self.assertEqual(resp.status_code, 400)
        self.assertTrue(resp.data["message"].startswith("Invalid status. Must be one of: New, In Progress"))
        inquiry.refresh_from_db()
        self.assertEqual(inquiry.status, "New")

    def test_update_status_missing_inquiry(self):
        resp = self.client.patch(self._detail_url(987654), {"status": "Done"}, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_add_follow_up(self):
        inquiry = self.service.create_inquiry(submission())

        resp = self.client.post(
            self._followups_url(inquiry.pk),
            {"note": "Sent proposal", "nextFollowUpDate": "2030-02-01T10:00:00Z"},
            format="json",
        )

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["message"], "Follow-up added successfully")
        self.assertEqual(resp.data["data"]["followUp"]["note"], "Sent proposal")
        self.assertEqual(FollowUp.objects.filter(inquiry=inquiry).count(), 1)
        inquiry.refresh_from_db()
        self.assertEqual(inquiry.status, "New")

    def test_add_follow_up_validation_and_missing_inquiry(self):
        inquiry = self.service.create_inquiry(submission())

        resp = self.client.post(self._followups_url(inquiry.pk), {"note": "x"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["message"], "Next follow-up date is required")

        resp = self.client.post(
            self._followups_url(987654),
            {"note": "x", "nextFollowUpDate": "2030-02-01"},
            format="json",
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(FollowUp.objects.count(), 0)

    def test_non_object_body_is_rejected(self):
        inquiry = self.service.create_inquiry(submission())

        resp = self.client.put(self._detail_url(inquiry.pk), [1, 2], format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.data["success"])
        self.assertEqual(resp.data["message"], "Request body must be a JSON object.")

        resp = self.client.post(self._followups_url(inquiry.pk), ["note"], format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["message"], "Request body must be a JSON object.")
        self.assertEqual(FollowUp.objects.count(), 0)
