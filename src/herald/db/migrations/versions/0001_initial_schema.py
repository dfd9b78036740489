"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'tenants',
        sa.Column('tenant_id', sa.String(length=128), nullable=False),
        sa.Column('code', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('tenant_id')
    )
    op.create_index(op.f('ix_tenants_code'), 'tenants', ['code'], unique=True)

    op.create_table(
        'applications',
        sa.Column('application_id', sa.String(length=128), nullable=False),
        sa.Column('tenant_id', sa.String(length=128), nullable=False),
        sa.Column('code', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.tenant_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('application_id'),
        sa.UniqueConstraint('tenant_id', 'code', name='uq_application_tenant_code')
    )
    op.create_index(op.f('ix_applications_tenant_id'), 'applications', ['tenant_id'], unique=False)

    op.create_table(
        'environments',
        sa.Column('environment_id', sa.String(length=128), nullable=False),
        sa.Column('tenant_id', sa.String(length=128), nullable=False),
        sa.Column('code', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.tenant_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('environment_id'),
        sa.UniqueConstraint('tenant_id', 'code', name='uq_environment_tenant_code')
    )
    op.create_index(op.f('ix_environments_tenant_id'), 'environments', ['tenant_id'], unique=False)

    op.create_table(
        'notification_templates',
        sa.Column('template_id', sa.String(length=128), nullable=False),
        sa.Column('tenant_id', sa.String(length=128), nullable=False),
        sa.Column('code', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('format', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_by', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.tenant_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('template_id'),
        sa.UniqueConstraint('tenant_id', 'code', name='uq_template_tenant_code')
    )
    op.create_index(op.f('ix_notification_templates_tenant_id'), 'notification_templates', ['tenant_id'], unique=False)

    op.create_table(
        'notifications',
        sa.Column('notification_id', sa.String(length=128), nullable=False),
        sa.Column('tenant_id', sa.String(length=128), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('message', sa.String(length=2000), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_by', sa.String(length=100), nullable=False),
        sa.Column('template_id', sa.String(length=128), nullable=True),
        sa.Column('application_id', sa.String(length=128), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.tenant_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['template_id'], ['notification_templates.template_id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['application_id'], ['applications.application_id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('notification_id')
    )
    op.create_index('ix_notifications_tenant_active', 'notifications', ['tenant_id', 'is_active'], unique=False)
    op.create_index(op.f('ix_notifications_application_id'), 'notifications', ['application_id'], unique=False)

    op.create_table(
        'notification_schedules',
        sa.Column('schedule_id', sa.String(length=128), nullable=False),
        sa.Column('notification_id', sa.String(length=128), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('recurrence', sa.String(length=20), nullable=False),
        sa.Column('recurrence_interval', sa.Integer(), nullable=False),
        sa.Column('recurrence_days_of_week', sa.String(length=50), nullable=True),
        sa.Column('recurrence_day_of_month', sa.Integer(), nullable=True),
        sa.Column('time_zone', sa.String(length=100), nullable=False),
        sa.Column('expiration_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['notification_id'], ['notifications.notification_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('schedule_id')
    )
    op.create_index(op.f('ix_notification_schedules_notification_id'), 'notification_schedules', ['notification_id'], unique=False)

    op.create_table(
        'targeting_rules',
        sa.Column('rule_id', sa.String(length=128), nullable=False),
        sa.Column('notification_id', sa.String(length=128), nullable=False),
        sa.Column('target_type', sa.String(length=20), nullable=False),
        sa.Column('target_application_id', sa.String(length=128), nullable=True),
        sa.Column('target_environment', sa.String(length=50), nullable=True),
        sa.Column('target_user_group', sa.String(length=200), nullable=True),
        sa.Column('custom_filter', sa.Text(), nullable=True),
        sa.Column('priority', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['notification_id'], ['notifications.notification_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['target_application_id'], ['applications.application_id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('rule_id')
    )
    op.create_index(op.f('ix_targeting_rules_notification_id'), 'targeting_rules', ['notification_id'], unique=False)

    op.create_table(
        'notification_history',
        sa.Column('history_id', sa.String(length=128), nullable=False),
        sa.Column('notification_id', sa.String(length=128), nullable=False),
        sa.Column('action', sa.String(length=20), nullable=False),
        sa.Column('performed_by', sa.String(length=200), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('previous_state', sa.Text(), nullable=True),
        sa.Column('new_state', sa.Text(), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('ip_address', sa.String(length=50), nullable=True),
        sa.Column('user_agent', sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(['notification_id'], ['notifications.notification_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('history_id')
    )
    op.create_index('ix_notification_history_notification_ts', 'notification_history', ['notification_id', 'timestamp'], unique=False)

    op.create_table(
        'notification_acknowledgments',
        sa.Column('acknowledgment_id', sa.String(length=128), nullable=False),
        sa.Column('notification_id', sa.String(length=128), nullable=False),
        sa.Column('user_id', sa.String(length=100), nullable=False),
        sa.Column('user_name', sa.String(length=200), nullable=False),
        sa.Column('viewed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('acknowledged_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('feedback', sa.Text(), nullable=True),
        sa.Column('device', sa.String(length=50), nullable=True),
        sa.Column('ip_address', sa.String(length=50), nullable=True),
        sa.ForeignKeyConstraint(['notification_id'], ['notifications.notification_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('acknowledgment_id'),
        sa.UniqueConstraint('notification_id', 'user_id', name='uq_acknowledgment_notification_user')
    )
    op.create_index(op.f('ix_notification_acknowledgments_notification_id'), 'notification_acknowledgments', ['notification_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('notification_acknowledgments')
    op.drop_table('notification_history')
    op.drop_table('targeting_rules')
    op.drop_table('notification_schedules')
    op.drop_table('notifications')
    op.drop_table('notification_templates')
    op.drop_table('environments')
    op.drop_table('applications')
    op.drop_table('tenants')
