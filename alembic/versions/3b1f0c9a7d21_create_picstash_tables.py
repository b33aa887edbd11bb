"""create picstash tables

Revision ID: 3b1f0c9a7d21
Revises:
Create Date: 2026-10-19 10:02:11.418203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f0c9a7d21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
    )
    op.create_table(
        'photos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('image_url', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('alt_description', sa.String(), nullable=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('date_saved', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'tags',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=20), nullable=False),
        sa.Column('photo_id', sa.Integer(), sa.ForeignKey('photos.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_table(
        'search_history',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('query', sa.String(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
    )

    # Indexes
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_photos_id', 'photos', ['id'])
    op.create_index('ix_photos_date_saved', 'photos', ['date_saved'])
    op.create_index('ix_tags_id', 'tags', ['id'])
    op.create_index('ix_tags_name', 'tags', ['name'])
    op.create_index('ix_tags_photo_id', 'tags', ['photo_id'])
    op.create_index('ix_search_history_id', 'search_history', ['id'])
    op.create_index('ix_search_history_user_id', 'search_history', ['user_id'])


def downgrade() -> None:
    # reverse order
    op.drop_index('ix_search_history_user_id', table_name='search_history')
    op.drop_index('ix_search_history_id', table_name='search_history')
    op.drop_index('ix_tags_photo_id', table_name='tags')
    op.drop_index('ix_tags_name', table_name='tags')
    op.drop_index('ix_tags_id', table_name='tags')
    op.drop_index('ix_photos_date_saved', table_name='photos')
    op.drop_index('ix_photos_id', table_name='photos')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('search_history')
    op.drop_table('tags')
    op.drop_table('photos')
    op.drop_table('users')
