"""create brands and prices

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'brands',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
    )
    op.create_table(
        'prices',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), primary_key=True, autoincrement=True),
        sa.Column('brand_id', sa.Integer(), sa.ForeignKey('brands.id'), nullable=False),
        sa.Column('product_id', sa.BigInteger(), nullable=False),
        sa.Column('price_list', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('priority', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(24, 10), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
    )
    op.create_index('ix_prices_product_brand', 'prices', ['product_id', 'brand_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_prices_product_brand', table_name='prices')
    op.drop_table('prices')
    op.drop_table('brands')
