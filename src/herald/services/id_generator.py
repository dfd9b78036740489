"""Prefixed ID generation utility."""

import uuid

TENANT_PREFIX = "tnt_"
NOTIFICATION_PREFIX = "ntf_"
APPLICATION_PREFIX = "app_"
ENVIRONMENT_PREFIX = "env_"
TEMPLATE_PREFIX = "tpl_"
SCHEDULE_PREFIX = "sch_"
TARGETING_RULE_PREFIX = "trl_"


def generate_id(prefix: str) -> str:
    """Generate a prefixed unique ID.

    Args:
        prefix: One of the ``*_PREFIX`` constants (e.g. "ntf_").

    Returns:
        A string like "ntf_a1b2c3d4e5f6a7b8".
    """
    return f"{prefix}{uuid.uuid4().hex[:16]}"
