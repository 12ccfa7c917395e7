"""create users and videos

Revision ID: 4c1f0d2a9b7e
Revises:
Create Date: 2026-10-19 14:10:00

"""
# revision identifiers, used by Alembic.
revision = '4c1f0d2a9b7e'
down_revision = None
branch_labels = None
depends_on = None

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')
    op.create_table('users',
    sa.Column('user_id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
    sa.Column('username', sa.Text(), nullable=False),
    sa.Column('email', sa.Text(), nullable=False),
    sa.PrimaryKeyConstraint('user_id')
    )
    op.create_table('videos',
    sa.Column('video_id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
    sa.Column('video_path', sa.Text(), nullable=False),
    sa.PrimaryKeyConstraint('video_id')
    )
    op.create_index('idx_videos_video_path', 'videos', ['video_path'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_videos_video_path', table_name='videos')
    op.drop_table('videos')
    op.drop_table('users')
