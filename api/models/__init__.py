"""Model package exports.

Provides convenient imports for commonly used models.
"""

from .models_auth import CustomUser
from .models_inquiry import FollowUp, Inquiry
