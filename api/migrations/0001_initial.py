import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="CustomUser",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique UUID identifier for this user.",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("first_name", models.CharField(help_text="User's first name (max 150 chars).", max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, help_text="User's last name.", max_length=150, verbose_name="last name")),
                (
                    "email",
                    models.EmailField(
                        db_index=True,
                        help_text="Unique email address used for login. Must be valid email format.",
                        max_length=254,
                        unique=True,
                        verbose_name="email address",
                    ),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[("superadmin", "Super Admin"), ("admin", "Admin"), ("staff", "Staff")],
                        default="staff",
                        help_text="User's role in the system. Determines access to the inquiry dashboard.",
                        max_length=15,
                    ),
                ),
                ("is_staff", models.BooleanField(default=False, help_text="Check to allow admin site access. Staff can log into admin panel.")),
                ("is_active", models.BooleanField(default=True, help_text="Uncheck to disable account. Inactive users cannot log in.")),
                ("is_enabled", models.BooleanField(default=True, help_text="Uncheck to disable this account without deleting it.")),
                ("date_joined", models.DateTimeField(auto_now_add=True, help_text="Date and time when the user account was created.")),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "verbose_name": "CRM User",
                "verbose_name_plural": "All Users",
            },
        ),
        migrations.CreateModel(
            name="Inquiry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Set once when the row is created.")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Refreshed on every save.")),
                (
                    "reference_code",
                    models.CharField(
                        editable=False,
                        help_text="Public tracking code, issued once at creation. Always uppercase.",
                        max_length=32,
                        unique=True,
                    ),
                ),
                ("name", models.CharField(help_text="Client name (max 150 chars).", max_length=150)),
                ("phone", models.CharField(db_index=True, help_text="Client phone number (max 30 chars).", max_length=30)),
                ("email", models.EmailField(blank=True, default="", help_text="Optional contact email, stored lowercase.", max_length=254)),
                (
                    "service_type",
                    models.CharField(
                        choices=[
                            ("Web Development", "Web Development"),
                            ("Mobile App", "Mobile App"),
                            ("Digital Marketing", "Digital Marketing"),
                            ("Consulting", "Consulting"),
                            ("Other", "Other"),
                        ],
                        max_length=32,
                    ),
                ),
                ("message", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("New", "New"),
                            ("In Progress", "In Progress"),
                            ("In Action", "In Action"),
                            ("Done", "Done"),
                        ],
                        db_index=True,
                        default="New",
                        max_length=20,
                    ),
                ),
            ],
            options={
                "verbose_name": "Inquiry",
                "verbose_name_plural": "Inquiries",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="FollowUp",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="Set once when the row is created.")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Refreshed on every save.")),
                ("note", models.TextField()),
                ("next_follow_up_date", models.DateTimeField(help_text="When the client should be contacted next.")),
                (
                    "inquiry",
                    models.ForeignKey(
                        help_text="The inquiry this note belongs to.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="follow_ups",
                        to="api.inquiry",
                    ),
                ),
            ],
            options={
                "verbose_name": "Follow-up",
                "verbose_name_plural": "Follow-ups",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
