"""
Management command to prepare a fresh CRM database.

Creates the admin account if it is missing and, when the inquiry table is
empty, a sample inquiry with one follow-up. Prints a summary of row counts.

Usage:
    python manage.py setup_crm
    python manage.py setup_crm --email boss@example.com --password 's3cret-Pass'
    python manage.py setup_crm --no-sample
"""

import os
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from api.models.models_auth import CustomUser
from api.models.models_inquiry import FollowUp, Inquiry
from api.services.inquiry_service import InquiryService

SAMPLE_INQUIRY = {
    "name": "Lasal Ranaweera",
    "phone": "1234567890",
    "email": "lasal@example.com",
    "serviceType": Inquiry.ServiceType.WEB_DEVELOPMENT,
    "message": "I need a website for my small business",
}
SAMPLE_NOTE = (
    "Initial contact made. Client interested in WordPress solution. Scheduled follow-up call for next week."
)


class Command(BaseCommand):
    help = "Create the admin user and sample data for a new CRM database"

    def add_arguments(self, parser):
        parser.add_argument(
            "--email",
            type=str,
            default=os.getenv("CRM_ADMIN_EMAIL", "admin@example.com"),
            help="Admin login email",
        )
        parser.add_argument(
            "--password",
            type=str,
            default=os.getenv("CRM_ADMIN_PASSWORD", "password123"),
            help="Admin password (only used when the account is created)",
        )
        parser.add_argument(
            "--no-sample",
            action="store_true",
            help="Do not create the sample inquiry",
        )

    def handle(self, *args, **options):
        email = options["email"].strip().lower()

        if CustomUser.objects.filter(email=email).exists():
            self.stdout.write("Admin user already exists")
        else:
            self.stdout.write("Creating admin user...")
            CustomUser.objects.create_user(
                email=email,
                password=options["password"],
                first_name="Admin",
                last_name="User",
                role=CustomUser.Role.ADMIN,
                is_staff=True,
            )
            self.stdout.write(self.style.SUCCESS(f"✓ Admin user created: {email}"))

        if options["no_sample"]:
            self.stdout.write("Skipping sample data")
        elif Inquiry.objects.exists():
            self.stdout.write("Sample data already exists")
        else:
            self.stdout.write("Creating sample inquiry...")
            service = InquiryService()
            inquiry = service.create_inquiry(SAMPLE_INQUIRY)
            service.add_follow_up(inquiry.pk, SAMPLE_NOTE, timezone.now() + timedelta(days=7))
            self.stdout.write(
                self.style.SUCCESS(f"✓ Sample inquiry created with reference code: {inquiry.reference_code}")
            )

        self.stdout.write("\nDatabase Summary:")
        self.stdout.write(f"Users: {CustomUser.objects.count()}")
        self.stdout.write(f"Inquiries: {Inquiry.objects.count()}")
        self.stdout.write(f"Follow-ups: {FollowUp.objects.count()}")
        self.stdout.write(self.style.SUCCESS("\nDatabase setup completed successfully!"))
