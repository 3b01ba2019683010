"""create products table

Revision ID: 0001_create_products
Revises: 
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '0001_create_products'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image', sa.String(length=1024), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('price >= 0', name='ck_products_price_nonneg'),
        sa.CheckConstraint(
            "category IS NULL OR category IN ('Electronics', 'Clothing', 'Home', 'Other')",
            name='ck_products_category_known',
        ),
    )
    op.create_index('ix_products_created_at', 'products', ['created_at'])


def downgrade():
    op.drop_index('ix_products_created_at', table_name='products')
    op.drop_table('products')
