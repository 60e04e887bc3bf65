"""Service layer for the API app."""

from .inquiry_service import InquiryService
