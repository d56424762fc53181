"""
Utility modules for the clinic chatbot application.

This package contains shared utility functions and helpers used across
the application, such as clinic-local datetime handling.
"""

from utils.datetime_utils import clinic_now, ensure_clinic_tz

__all__ = ['clinic_now', 'ensure_clinic_tz']
