"""Read-only response models for notification history and acknowledgments."""

from datetime import datetime

from herald.models.common import ApiResponse
from herald.models.enums import HistoryAction


class HistoryEntryResponse(ApiResponse):
    id: str
    notification_id: str
    action: HistoryAction
    performed_by: str
    timestamp: datetime
    previous_state: str | None = None
    new_state: str | None = None
    details: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    @classmethod
    def from_row(cls, row) -> "HistoryEntryResponse":
        return cls(
            id=row.history_id,
            notification_id=row.notification_id,
            action=row.action,
            performed_by=row.performed_by,
            timestamp=row.timestamp,
            previous_state=row.previous_state,
            new_state=row.new_state,
            details=row.details,
            ip_address=row.ip_address,
            user_agent=row.user_agent,
        )


class AcknowledgmentResponse(ApiResponse):
    id: str
    notification_id: str
    user_id: str
    user_name: str
    viewed_at: datetime | None = None
    acknowledged_at: datetime
    feedback: str | None = None
    device: str | None = None
    ip_address: str | None = None

    @classmethod
    def from_row(cls, row) -> "AcknowledgmentResponse":
        return cls(
            id=row.acknowledgment_id,
            notification_id=row.notification_id,
            user_id=row.user_id,
            user_name=row.user_name,
            viewed_at=row.viewed_at,
            acknowledged_at=row.acknowledged_at,
            feedback=row.feedback,
            device=row.device,
            ip_address=row.ip_address,
        )
