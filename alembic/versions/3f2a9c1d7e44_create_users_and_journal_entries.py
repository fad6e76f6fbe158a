"""create users and journal entries

Revision ID: 3f2a9c1d7e44
Revises:
Create Date: 2025-02-03 19:12:40.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e44'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'journal_entries',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('priority_a', sa.Text(), nullable=True),
        sa.Column('daily_tasks', sa.Text(), nullable=True),
        sa.Column('completed', sa.Text(), nullable=True),
        sa.Column('postponed', sa.Text(), nullable=True),
        sa.Column('waiting_for', sa.Text(), nullable=True),
        sa.Column('difficulties', sa.Text(), nullable=True),
        sa.Column('blockers', sa.Text(), nullable=True),
        sa.Column('insights', sa.Text(), nullable=True),
        sa.Column('tomorrow_focus', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'date', name='uq_user_entry_date'),
    )
    op.create_index('ix_journal_entries_user_id', 'journal_entries', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_journal_entries_user_id', table_name='journal_entries')
    op.drop_table('journal_entries')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
