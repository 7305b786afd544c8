"""Users, documents and highlights

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('uuid', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('uuid')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'documents',
        sa.Column('uuid', sa.Uuid(), nullable=False),
        sa.Column('external_id', sa.String(length=512), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=False),
        sa.Column('storage_version', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['owner_id'], ['users.uuid']),
        sa.PrimaryKeyConstraint('uuid')
    )
    op.create_index(op.f('ix_documents_external_id'), 'documents', ['external_id'], unique=True)
    op.create_index(op.f('ix_documents_owner_id'), 'documents', ['owner_id'], unique=False)

    op.create_table(
        'highlights',
        sa.Column('uuid', sa.Uuid(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('document_id', sa.Uuid(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('page_number', sa.Integer(), nullable=False),
        sa.Column('note', sa.Text(), nullable=False),
        sa.Column('x1', sa.Float(), nullable=False),
        sa.Column('y1', sa.Float(), nullable=False),
        sa.Column('x2', sa.Float(), nullable=False),
        sa.Column('y2', sa.Float(), nullable=False),
        sa.Column('width', sa.Float(), nullable=False),
        sa.Column('height', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('page_number >= 1', name='ck_highlights_page_number'),
        sa.CheckConstraint('width >= 0 AND height >= 0', name='ck_highlights_region_size'),
        sa.ForeignKeyConstraint(['document_id'], ['documents.uuid'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['owner_id'], ['users.uuid']),
        sa.PrimaryKeyConstraint('uuid')
    )
    op.create_index(op.f('ix_highlights_document_id'), 'highlights', ['document_id'], unique=False)
    op.create_index(op.f('ix_highlights_owner_id'), 'highlights', ['owner_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_highlights_owner_id'), table_name='highlights')
    op.drop_index(op.f('ix_highlights_document_id'), table_name='highlights')
    op.drop_table('highlights')
    op.drop_index(op.f('ix_documents_owner_id'), table_name='documents')
    op.drop_index(op.f('ix_documents_external_id'), table_name='documents')
    op.drop_table('documents')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
