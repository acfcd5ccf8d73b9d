"""创建商品向量表

Revision ID: 001
Revises:
Create Date: 2025-03-02 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from pgvector.sqlalchemy import Vector
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 启用 pgvector 扩展
    op.execute('CREATE EXTENSION IF NOT EXISTS vector')

    # 创建商品表
    op.create_table('products',
        sa.Column('external_id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('tags', postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column('category', sa.String(length=255), nullable=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('price', sa.String(length=64), nullable=True),
        sa.Column('embedding', Vector(1536), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('external_id')
    )

    # 创建商品表索引
    op.create_index(
        'idx_products_embedding_hnsw',
        'products',
        ['embedding'],
        unique=False,
        postgresql_using='hnsw',
        postgresql_ops={'embedding': 'vector_cosine_ops'},
    )
    op.create_index(
        'idx_products_category_lower',
        'products',
        [sa.text('lower(category)')],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index('idx_products_category_lower', table_name='products')
    op.drop_index('idx_products_embedding_hnsw', table_name='products')
    op.drop_table('products')
