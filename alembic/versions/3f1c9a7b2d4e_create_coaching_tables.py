"""create coaching tables

Revision ID: 3f1c9a7b2d4e
Revises:
Create Date: 2026-10-19 09:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7b2d4e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'team_members',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('pictureurl', sa.String(length=1024), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_team_members_id', 'team_members', ['id'])
    op.create_index('ix_team_members_email', 'team_members', ['email'], unique=True)

    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('logourl', sa.String(length=1024), nullable=True),
    )
    op.create_index('ix_teams_id', 'teams', ['id'])
    op.create_index('ix_teams_name', 'teams', ['name'], unique=True)

    # Junction table for the many-to-many between teams and members
    op.create_table(
        'team_member_assignments',
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('team_members.id', ondelete='CASCADE'), primary_key=True)
    )

    op.create_table(
        'feedbacks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('targetid', sa.Integer(), nullable=False),
        sa.Column('targettype', sa.String(length=16), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_feedbacks_id', 'feedbacks', ['id'])
    op.create_index('ix_feedbacks_target', 'feedbacks', ['targettype', 'targetid'])


def downgrade() -> None:
    op.drop_index('ix_feedbacks_target', table_name='feedbacks')
    op.drop_index('ix_feedbacks_id', table_name='feedbacks')
    op.drop_table('feedbacks')
    op.drop_table('team_member_assignments')
    op.drop_index('ix_teams_name', table_name='teams')
    op.drop_index('ix_teams_id', table_name='teams')
    op.drop_table('teams')
    op.drop_index('ix_team_members_email', table_name='team_members')
    op.drop_index('ix_team_members_id', table_name='team_members')
    op.drop_table('team_members')
