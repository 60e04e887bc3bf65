"""Admin site registrations for the API app.

This package registers model admins used by Django's admin interface.
"""

from .admin_auth import *  # noqa: F403
from .admin_inquiry import *  # noqa: F403
