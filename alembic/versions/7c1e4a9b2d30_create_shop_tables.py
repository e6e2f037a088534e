"""create_shop_tables

Revision ID: 7c1e4a9b2d30
Revises:
Create Date: 2026-10-18 10:00:00.000000

주문 도메인 테이블 생성: members, deliveries, items, orders, order_items.
Create order domain tables: members, deliveries, items, orders, order_items.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c1e4a9b2d30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # members — 회원 (주소는 city/street/zipcode 컬럼으로 임베디드)
    # Members with embedded address columns
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('city', sa.String(255), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
    )

    # deliveries — 배송 (READY, COMP)
    op.create_table(
        'deliveries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('city', sa.String(255), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='READY'),
    )

    # items — 상품 단일 테이블 상속 (dtype: I, B, A, M)
    # Single-table item hierarchy (Book, Album, Movie)
    op.create_table(
        'items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('dtype', sa.String(31), nullable=False),
        sa.Column('author', sa.String(255), nullable=True),
        sa.Column('isbn', sa.String(255), nullable=True),
        sa.Column('artist', sa.String(255), nullable=True),
        sa.Column('etc', sa.String(255), nullable=True),
        sa.Column('director', sa.String(255), nullable=True),
        sa.Column('actor', sa.String(255), nullable=True),
    )

    # orders — 주문 (member, delivery FK 보유)
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id'), nullable=False),
        sa.Column('delivery_id', sa.Integer(), sa.ForeignKey('deliveries.id'), nullable=True, unique=True),
        sa.Column('order_date', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('status', sa.String(20), nullable=False, server_default='ORDER'),
    )
    op.create_index('ix_orders_member', 'orders', ['member_id'])

    # order_items — 주문 상품
    op.create_table(
        'order_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('items.id'), nullable=False),
        sa.Column('order_price', sa.Integer(), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
    )
    # IN 절 배치 조회용 인덱스 — Index for batched IN lookups by order
    op.create_index('ix_order_items_order', 'order_items', ['order_id'])


def downgrade() -> None:
    op.drop_index('ix_order_items_order', table_name='order_items')
    op.drop_table('order_items')
    op.drop_index('ix_orders_member', table_name='orders')
    op.drop_table('orders')
    op.drop_table('items')
    op.drop_table('deliveries')
    op.drop_table('members')
