"""Tests for case-insensitive enum parsing."""

import pytest

from herald.models.enums import (
    HistoryAction,
    NotificationType,
    RecurrencePattern,
    TargetingType,
    TemplateFormat,
)


@pytest.mark.parametrize(
    "enum_cls,raw,expected",
    [
        (NotificationType, "warning", NotificationType.WARNING),
        (NotificationType, " SUCCESS ", NotificationType.SUCCESS),
        (TemplateFormat, "markdown", TemplateFormat.MARKDOWN),
        (RecurrencePattern, "none", RecurrencePattern.NONE),
        (TargetingType, "usergroup", TargetingType.USER_GROUP),
        (HistoryAction, "Acknowledged", HistoryAction.ACKNOWLEDGED),
    ],
)
def test_parse_is_case_insensitive(enum_cls, raw, expected):
    assert enum_cls.parse(raw) is expected


def test_parse_passes_members_through():
    assert NotificationType.parse(NotificationType.ERROR) is NotificationType.ERROR


@pytest.mark.parametrize("raw", ["Critical", "", None, 2])
def test_parse_rejects_unknown_values(raw):
    with pytest.raises(ValueError) as exc_info:
        NotificationType.parse(raw)
    assert "Info, Warning, Error, Success" in str(exc_info.value)


def test_members_are_strings():
    assert NotificationType.INFO == "Info"
    assert f"{TemplateFormat.HTML}" == "Html"
