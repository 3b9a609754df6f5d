"""add mock_ciphertext table for the in-process oracle

Revision ID: 7d41b0e2c9aa
Revises: 5c2e9a41d7b3
Create Date: 2026-10-20 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7d41b0e2c9aa'
down_revision = '5c2e9a41d7b3'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'mock_ciphertext' in set(insp.get_table_names()):
        return
    op.create_table(
        'mock_ciphertext',
        sa.Column('handle', sa.String(length=66), primary_key=True),
        sa.Column('kind', sa.String(length=16), nullable=False),
        sa.Column('value', sa.BigInteger(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table('mock_ciphertext')
