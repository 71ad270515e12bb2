"""create blinkshare tables

Revision ID: 7c1e2a9b4d10
Revises:
Create Date: 2025-09-14 00:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '7c1e2a9b4d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'guild',
        sa.Column('id', sa.String(32), primary_key=True),
        sa.Column('name', sa.Text),
        sa.Column('payment_address', sa.String(64)),
        sa.Column('hidden', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('create_time', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('limited_time_quantity', sa.Integer),
        sa.Column('limited_time_unit', sa.String(16)),
        schema='public',
    )
    op.create_index('guild_visible_recency_idx', 'guild', ['hidden', 'create_time'], schema='public')
    op.create_table(
        'role',
        sa.Column('id', sa.String(32), primary_key=True),
        sa.Column('name', sa.Text),
        sa.Column('amount', sa.Numeric(20, 9), nullable=False),
        sa.Column('guild_id', sa.String(32), sa.ForeignKey('public.guild.id', ondelete='CASCADE'), nullable=False),
        schema='public',
    )
    op.create_index('ix_role_guild_id', 'role', ['guild_id'], schema='public')
    op.create_table(
        'access_token',
        sa.Column('code', sa.String(255), primary_key=True),
        sa.Column('discord_user_id', sa.String(32)),
        sa.Column('discord_access_token', sa.Text),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        schema='public',
    )
    op.create_table(
        'role_purchase',
        sa.Column('id', sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column('discord_user_id', sa.String(32), nullable=False),
        sa.Column('guild_id', sa.String(32), sa.ForeignKey('public.guild.id', ondelete='SET NULL')),
        sa.Column('role_id', sa.String(32), sa.ForeignKey('public.role.id', ondelete='SET NULL')),
        sa.Column('create_time', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        schema='public',
    )
    op.create_index('role_purchase_expires_idx', 'role_purchase', ['expires_at'], schema='public')
    op.create_index('role_purchase_guild_time_idx', 'role_purchase', ['guild_id', 'create_time'], schema='public')
    op.create_table(
        'wallet',
        sa.Column('id', sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column('address', sa.String(64), nullable=False),
        sa.Column('discord_user_id', sa.String(32), nullable=False),
        sa.Column('create_time', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        schema='public',
    )
    op.create_index('ix_wallet_discord_user_id', 'wallet', ['discord_user_id'], schema='public')


def downgrade() -> None:
    op.drop_index('ix_wallet_discord_user_id', table_name='wallet', schema='public')
    op.drop_table('wallet', schema='public')
    op.drop_index('role_purchase_guild_time_idx', table_name='role_purchase', schema='public')
    op.drop_index('role_purchase_expires_idx', table_name='role_purchase', schema='public')
    op.drop_table('role_purchase', schema='public')
    op.drop_table('access_token', schema='public')
    op.drop_index('ix_role_guild_id', table_name='role', schema='public')
    op.drop_table('role', schema='public')
    op.drop_index('guild_visible_recency_idx', table_name='guild', schema='public')
    op.drop_table('guild', schema='public')
