from django.contrib.admin.sites import site
from django.test import RequestFactory, TestCase
from django.urls import reverse

from api.models.models_auth import CustomUser
from api.models.models_inquiry import FollowUp, Inquiry
from api.services.inquiry_service import InquiryService


class FollowUpAdminTests(TestCase):
    def setUp(self):
        self.superuser = CustomUser.objects.create_superuser(
            email="root@example.com",
            password="RootPass123!",
            first_name="Root",
        )
        self.client.force_login(self.superuser)
        self.inquiry = InquiryService().create_inquiry(
            {"name": "Ann", "phone": "555", "serviceType": "Consulting", "message": "help"}
        )
        self.follow_up = InquiryService().add_follow_up(self.inquiry.pk, "called", "2030-01-01")
        self.request = RequestFactory().get("/")
        self.request.user = self.superuser

    def test_follow_up_admin_is_append_only(self):
        model_admin = site._registry[FollowUp]

        self.assertTrue(model_admin.has_add_permission(self.request))
        self.assertFalse(model_admin.has_change_permission(self.request, self.follow_up))
        self.assertFalse(model_admin.has_delete_permission(self.request, self.follow_up))

    def test_inline_cannot_edit_or_delete_existing_rows(self):
        inline = site._registry[Inquiry].get_inline_instances(self.request, self.inquiry)[0]

        self.assertFalse(inline.can_delete)
        self.assertFalse(inline.has_change_permission(self.request, self.inquiry))
        self.assertTrue(inline.has_add_permission(self.request, self.inquiry))

    def test_delete_view_is_forbidden(self):
        url = reverse("admin:api_followup_delete", args=[self.follow_up.pk])

        resp = self.client.post(url, {"post": "yes"})

        self.assertEqual(resp.status_code, 403)
        self.assertTrue(FollowUp.objects.filter(pk=self.follow_up.pk).exists())

    def test_change_post_does_not_modify_note(self):
        url = reverse("admin:api_followup_change", args=[self.follow_up.pk])

        self.client.post(url, {"inquiry": self.inquiry.pk, "note": "edited", "next_follow_up_date_0": "2031-01-01"})

        self.follow_up.refresh_from_db()
        self.assertEqual(self.follow_up.note, "called")
