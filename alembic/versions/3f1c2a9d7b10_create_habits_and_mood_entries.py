"""create habits and mood_entries

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    inspector = sa.inspect(op.get_bind())

    # Databases created by the app at startup already have the tables.
    if not inspector.has_table('habits'):
        op.create_table(
            'habits',
            sa.Column('id', sa.String(length=64), nullable=False),
            sa.Column('name', sa.String(length=200), nullable=False),
            sa.Column('target_count', sa.Integer(), nullable=False),
            sa.Column('current_count', sa.Integer(), nullable=False),
            sa.Column('last_updated', sa.String(length=10), nullable=False),
            sa.CheckConstraint('length(name) > 0', name='check_habit_name_not_empty'),
            sa.CheckConstraint('current_count >= 0', name='check_habit_current_count'),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_habits_name', 'habits', ['name'], unique=False)

    if not inspector.has_table('mood_entries'):
        op.create_table(
            'mood_entries',
            sa.Column('id', sa.String(length=64), nullable=False),
            sa.Column('emoji', sa.String(length=16), nullable=False),
            sa.Column('note', sa.String(), nullable=False),
            sa.Column('timestamp', sa.BigInteger(), nullable=False),
            sa.Column('date_string', sa.String(length=10), nullable=False),
            sa.Column('time_string', sa.String(length=5), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('idx_mood_entries_timestamp', 'mood_entries', ['timestamp'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_mood_entries_timestamp', table_name='mood_entries')
    op.drop_table('mood_entries')
    op.drop_index('ix_habits_name', table_name='habits')
    op.drop_table('habits')
