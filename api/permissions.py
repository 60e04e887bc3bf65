"""Custom DRF permission classes for role-based access control.

IsStaff guards the inquiry admin endpoints; IsAdmin guards account
management.
"""

from rest_framework import permissions

from api.models.models_auth import CustomUser


class IsAdmin(permissions.BasePermission):
    """
    Only admin users can access.
    """

    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        """
        Check if the user is authenticated and has a role of admin or superadmin.
        """
        return request.user.is_authenticated and request.user.role in CustomUser.ADMIN_ROLES


class IsStaff(permissions.BasePermission):
    """
    Only staff users can access.
    """

    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        """
        Check if the user is authenticated and has a role of staff, admin or superadmin.
        """
        return request.user.is_authenticated and request.user.role in CustomUser.STAFF_ROLES
