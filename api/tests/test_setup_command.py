from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from api.models.models_auth import CustomUser
from api.models.models_inquiry import FollowUp, Inquiry


class SetupCrmCommandTests(TestCase):
    def _run(self, *args):
        out = StringIO()
        call_command("setup_crm", *args, stdout=out)
        return out.getvalue()

    def test_creates_admin_and_sample_data(self):
        output = self._run("--email", "Boss@Example.com", "--password", "Sup3r-Secret!")

        admin = CustomUser.objects.get(email="boss@example.com")
        self.assertEqual(admin.role, CustomUser.Role.ADMIN)
        self.assertTrue(admin.check_password("Sup3r-Secret!"))
        self.assertEqual(Inquiry.objects.count(), 1)
        self.assertEqual(FollowUp.objects.count(), 1)
        self.assertIn("Users: 1", output)
        self.assertIn("Inquiries: 1", output)
        self.assertIn("Follow-ups: 1", output)

    def test_is_idempotent(self):
        self._run()
        output = self._run()

        self.assertIn("Admin user already exists", output)
        self.assertIn("Sample data already exists", output)
        self.assertEqual(CustomUser.objects.count(), 1)
        self.assertEqual(Inquiry.objects.count(), 1)

    def test_no_sample(self):
        self._run("--no-sample")
        self.assertEqual(Inquiry.objects.count(), 0)
