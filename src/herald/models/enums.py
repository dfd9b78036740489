"""Closed string enums for notification, template, schedule and audit fields."""

from enum import StrEnum


class _ParseableEnum(StrEnum):
    """StrEnum with case-insensitive parsing that rejects unknown values."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"'{value}' is not a valid {cls.__name__} (expected one of: {allowed})")


class NotificationType(_ParseableEnum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    SUCCESS = "Success"


class TemplateFormat(_ParseableEnum):
    HTML = "Html"
    MARKDOWN = "Markdown"


class RecurrencePattern(_ParseableEnum):
    NONE = "None"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


class TargetingType(_ParseableEnum):
    ALL = "All"
    APPLICATION = "Application"
    ENVIRONMENT = "Environment"
    USER_GROUP = "UserGroup"
    CUSTOM = "Custom"


class HistoryAction(_ParseableEnum):
    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"
    ACTIVATED = "Activated"
    DEACTIVATED = "Deactivated"
    DELIVERED = "Delivered"
    VIEWED = "Viewed"
    ACKNOWLEDGED = "Acknowledged"
    EXPIRED = "Expired"
