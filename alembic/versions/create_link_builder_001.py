"""create link builder tables

Revision ID: create_link_builder_001
Revises: 
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_link_builder_001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade():
    # Reference data
    for table in ('partners', 'third_parties'):
        op.create_table(
            table,
            sa.Column('id', sa.String(length=36), nullable=False),
            *_timestamps(),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(f'ix_{table}_id', table, ['id'])
        op.create_index(f'ix_{table}_name', table, ['name'], unique=True)

    op.create_table(
        'channel_types',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('prefix', sa.String(length=10), nullable=False),
        sa.Column('color', sa.String(length=7), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('prefix')
    )
    op.create_index('ix_channel_types_id', 'channel_types', ['id'])

    op.create_table(
        'categories',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index('ix_categories_id', 'categories', ['id'])

    # Placements
    op.create_table(
        'marketing_placements',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('base_url', sa.String(length=2048), nullable=False),
        sa.Column('anchor_tag', sa.String(length=255), nullable=True),

        sa.Column('campaign_type', sa.String(length=100), nullable=True),
        sa.Column('campaign_source', sa.String(length=100), nullable=True),
        sa.Column('ad_type', sa.String(length=100), nullable=True),
        sa.Column('ad_type_detail', sa.String(length=100), nullable=True),
        sa.Column('targeting', sa.Boolean(), nullable=True),

        sa.Column('brand1', sa.String(length=100), nullable=True),
        sa.Column('brand2', sa.String(length=100), nullable=True),
        sa.Column('brand3', sa.String(length=100), nullable=True),
        sa.Column('product_category', sa.String(length=100), nullable=True),
        sa.Column('product_brand', sa.String(length=100), nullable=True),

        sa.Column('campaign_owner', sa.String(length=255), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('campaign_notes', sa.Text(), nullable=True),

        sa.Column('project_reference_number', sa.String(length=50), nullable=True),
        sa.Column('budget', sa.String(length=100), nullable=True),
        sa.Column('industry', sa.String(length=100), nullable=True),
        sa.Column('tactic', sa.String(length=100), nullable=True),
        sa.Column('cost_center', sa.String(length=100), nullable=True),
        sa.Column('sub_ledger', sa.String(length=100), nullable=True),

        sa.Column('partnering', sa.Boolean(), nullable=True),
        sa.Column('partner_name', sa.String(length=255), nullable=True),
        sa.Column('third_party', sa.Boolean(), nullable=True),
        sa.Column('third_party_name', sa.String(length=255), nullable=True),

        sa.Column('channel_type_id', sa.String(length=36), sa.ForeignKey('channel_types.id'), nullable=True),
        sa.Column('category_id', sa.String(length=36), sa.ForeignKey('categories.id'), nullable=True),
        sa.Column('tracking_code', sa.String(length=50), nullable=False),
        sa.Column('full_tracking_url', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='draft'),
        sa.Column('user_id', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_marketing_placements_id', 'marketing_placements', ['id'])
    op.create_index('ix_marketing_placements_tracking_code', 'marketing_placements', ['tracking_code'], unique=True)

    op.create_table(
        'tracking_counter',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('channel_type_id', sa.String(length=36), sa.ForeignKey('channel_types.id'), nullable=True),
        sa.Column('current_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_updated', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('channel_type_id')
    )


def downgrade():
    op.drop_table('tracking_counter')

    op.drop_index('ix_marketing_placements_tracking_code', table_name='marketing_placements')
    op.drop_index('ix_marketing_placements_id', table_name='marketing_placements')
    op.drop_table('marketing_placements')

    op.drop_index('ix_categories_id', table_name='categories')
    op.drop_table('categories')
    op.drop_index('ix_channel_types_id', table_name='channel_types')
    op.drop_table('channel_types')

    for table in ('third_parties', 'partners'):
        op.drop_index(f'ix_{table}_name', table_name=table)
        op.drop_index(f'ix_{table}_id', table_name=table)
        op.drop_table(table)
