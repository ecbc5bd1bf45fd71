"""create_reservation_table

Revision ID: 0001
Revises:
Create Date: 2024-01-10

Schema:
- reservation: call reservations, one row per booking request
- reservation_reminder: one marker per (reservation, channel) reminder handed to a notifier

The partial unique index uq_reservation_queued_slot keeps at most one QUEUED
reservation per (reservation_date, start_time).
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
    op.create_table(
        'reservation',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('reservation_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('push_notification_key', sa.String(length=255), nullable=False),
        sa.Column('receive_email', sa.Boolean(), nullable=False),
        sa.Column('receive_sms_notification', sa.Boolean(), nullable=False),
        sa.Column('receive_push_notification', sa.Boolean(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column(
            'created_time',
            sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'),
            nullable=False,
        ),
        sa.Column(
            'updated_time',
            sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_reservation_reservation_date'), 'reservation', ['reservation_date'])
    op.create_index(op.f('ix_reservation_email'), 'reservation', ['email'])
    op.create_index(op.f('ix_reservation_status'), 'reservation', ['status'])
    op.create_index('ix_reservation_date_status', 'reservation', ['reservation_date', 'status'])
    op.create_index(
        'uq_reservation_queued_slot',
        'reservation',
        ['reservation_date', 'start_time'],
        unique=True,
        sqlite_where=sa.text("status = 'QUEUED'"),
        postgresql_where=sa.text("status = 'QUEUED'"),
    )

    op.create_table(
        'reservation_reminder',
        sa.Column('reservation_id', sa.String(length=36), nullable=False),
        sa.Column('channel', sa.String(length=10), nullable=False),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['reservation_id'], ['reservation.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('reservation_id', 'channel'),
    )


def downgrade() -> None:
    op.drop_table('reservation_reminder')
    op.drop_index('uq_reservation_queued_slot', table_name='reservation')
    op.drop_index('ix_reservation_date_status', table_name='reservation')
    op.drop_index(op.f('ix_reservation_status'), table_name='reservation')
    op.drop_index(op.f('ix_reservation_email'), table_name='reservation')
    op.drop_index(op.f('ix_reservation_reservation_date'), table_name='reservation')
    op.drop_table('reservation')
