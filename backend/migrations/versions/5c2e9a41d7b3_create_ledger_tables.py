"""create user, ciphertext_handle, player_record and access_grant tables

Revision ID: 5c2e9a41d7b3
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2e9a41d7b3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('password_hash', sa.String(length=256), nullable=False),
        )
        op.create_index('ix_user_username', 'user', ['username'], unique=True)

    if 'ciphertext_handle' not in existing_tables:
        op.create_table(
            'ciphertext_handle',
            sa.Column('handle', sa.String(length=66), primary_key=True),
            sa.Column('kind', sa.String(length=16), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        )

    if 'player_record' not in existing_tables:
        op.create_table(
            'player_record',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('player', sa.String(length=64), nullable=False),
            sa.Column('best_handle', sa.String(length=66), sa.ForeignKey('ciphertext_handle.handle'), nullable=True),
            sa.Column('submissions', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        )
        op.create_index('ix_player_record_player', 'player_record', ['player'], unique=True)

    if 'access_grant' not in existing_tables:
        op.create_table(
            'access_grant',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('handle', sa.String(length=66), sa.ForeignKey('ciphertext_handle.handle'), nullable=False),
            sa.Column('grantee', sa.String(length=64), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.UniqueConstraint('handle', 'grantee', name='uq_access_grant_handle_grantee'),
        )
        op.create_index('ix_access_grant_handle', 'access_grant', ['handle'])
        op.create_index('ix_access_grant_grantee', 'access_grant', ['grantee'])


def downgrade():
    op.drop_index('ix_access_grant_grantee', table_name='access_grant')
    op.drop_index('ix_access_grant_handle', table_name='access_grant')
    op.drop_table('access_grant')
    op.drop_index('ix_player_record_player', table_name='player_record')
    op.drop_table('player_record')
    op.drop_table('ciphertext_handle')
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
