"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from herald.db.models.tenant import TenantRow
from herald.db.models.application import ApplicationRow
from herald.db.models.environment import EnvironmentRow
from herald.db.models.template import NotificationTemplateRow
from herald.db.models.notification import NotificationRow
from herald.db.models.schedule import NotificationScheduleRow
from herald.db.models.targeting_rule import TargetingRuleRow
from herald.db.models.history import NotificationHistoryRow
from herald.db.models.acknowledgment import NotificationAcknowledgmentRow

__all__ = [
    "TenantRow",
    "ApplicationRow",
    "EnvironmentRow",
    "NotificationTemplateRow",
    "NotificationRow",
    "NotificationScheduleRow",
    "TargetingRuleRow",
    "NotificationHistoryRow",
    "NotificationAcknowledgmentRow",
]
