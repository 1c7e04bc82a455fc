"""
Service layer helpers that apply configuration to domain logic.
"""

from .calendar_service import CalendarService

__all__ = ["CalendarService"]
