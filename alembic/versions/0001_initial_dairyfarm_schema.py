"""initial dairyfarm schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

SCHEMA = 'dairyfarm'


def _timestamps(*, updated: bool = True) -> list[sa.Column]:
    cols = [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]
    if updated:
        cols.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False)
        )
    return cols


def upgrade() -> None:
    op.execute(f'CREATE SCHEMA IF NOT EXISTS {SCHEMA}')

    op.create_table(
        'memberships',
        sa.Column('user_id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('role', sa.String(length=7), nullable=False),
        schema=SCHEMA,
    )

    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('tag', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('sex', sa.String(length=16), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('source', sa.String(length=32), nullable=False),
        sa.Column('production_status', sa.String(length=32), nullable=False),
        sa.Column('health_status', sa.String(length=32), nullable=False, server_default='healthy'),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='active'),
        sa.Column('mother_id', sa.Uuid(), sa.ForeignKey(f'{SCHEMA}.animals.id', ondelete='SET NULL'), nullable=True),
        sa.Column('purchase_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('service_date', sa.Date(), nullable=True),
        sa.Column('expected_calving_date', sa.Date(), nullable=True),
        sa.Column('dry_off_date', sa.Date(), nullable=True),
        sa.Column('auto_health_record_id', sa.Uuid(), nullable=True),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('release_reason', sa.String(length=32), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.UniqueConstraint('farm_id', 'tag', name='ux_animals_farm_tag'),
        schema=SCHEMA,
    )
    op.create_index('ix_dairyfarm_animals_farm_id', 'animals', ['farm_id'], schema=SCHEMA)
    op.create_index('ix_animals_farm_status', 'animals', ['farm_id', 'status'], schema=SCHEMA)

    op.create_table(
        'age_categories',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('min_age_months', sa.Integer(), nullable=False),
        sa.Column('max_age_months', sa.Integer(), nullable=True),
        sa.Column('sex', sa.String(length=16), nullable=True),
        sa.Column('production_status', sa.String(length=32), nullable=False),
        sa.Column('allowed_statuses', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        schema=SCHEMA,
    )
    op.create_index('ix_dairyfarm_age_categories_farm_id', 'age_categories', ['farm_id'], schema=SCHEMA)

    op.create_table(
        'animal_health_records',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey(f'{SCHEMA}.animals.id', ondelete='CASCADE'), nullable=False),
        sa.Column('record_type', sa.String(length=32), nullable=False),
        sa.Column('record_date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('severity', sa.String(length=16), nullable=True),
        sa.Column('veterinarian', sa.String(length=255), nullable=True),
        sa.Column('cost', sa.Numeric(12, 2), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('medication', sa.Text(), nullable=True),
        sa.Column('symptoms', sa.Text(), nullable=True),
        sa.Column('treatment', sa.Text(), nullable=True),
        sa.Column('next_due_date', sa.Date(), nullable=True),
        sa.Column('is_resolved', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('resolved_date', sa.Date(), nullable=True),
        sa.Column(
            'root_checkup_id',
            sa.Uuid(),
            sa.ForeignKey(f'{SCHEMA}.animal_health_records.id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column('is_follow_up', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('is_auto_generated', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('completion_status', sa.String(length=16), nullable=False, server_default='completed'),
        sa.Column('original_health_status', sa.String(length=32), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.CheckConstraint(
            'root_checkup_id IS NULL OR root_checkup_id <> id', name='ck_health_records_root_not_self'
        ),
        schema=SCHEMA,
    )
    op.create_index('ix_dairyfarm_animal_health_records_farm_id', 'animal_health_records', ['farm_id'], schema=SCHEMA)
    op.create_index(
        'ix_health_records_animal_open', 'animal_health_records', ['animal_id', 'is_resolved'], schema=SCHEMA
    )

    op.create_table(
        'health_record_follow_ups',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('original_record_id', sa.Uuid(), sa.ForeignKey(f'{SCHEMA}.animal_health_records.id'), nullable=False),
        sa.Column('follow_up_record_id', sa.Uuid(), sa.ForeignKey(f'{SCHEMA}.animal_health_records.id'), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('treatment_effectiveness', sa.String(length=32), nullable=True),
        sa.Column('is_resolved', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        *_timestamps(updated=False),
        sa.CheckConstraint('original_record_id <> follow_up_record_id', name='ck_follow_ups_not_self'),
        schema=SCHEMA,
    )
    op.create_index(
        'ix_dairyfarm_health_record_follow_ups_farm_id', 'health_record_follow_ups', ['farm_id'], schema=SCHEMA
    )
    op.create_index(
        'ix_dairyfarm_health_record_follow_ups_original_record_id',
        'health_record_follow_ups',
        ['original_record_id'],
        schema=SCHEMA,
    )
    op.create_index(
        'ix_dairyfarm_health_record_follow_ups_follow_up_record_id',
        'health_record_follow_ups',
        ['follow_up_record_id'],
        schema=SCHEMA,
    )

    op.create_table(
        'animal_releases',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey(f'{SCHEMA}.animals.id'), nullable=False, unique=True),
        sa.Column('release_reason', sa.String(length=32), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=False),
        sa.Column('sale_price', sa.Numeric(12, 2), nullable=True),
        sa.Column('buyer_info', sa.Text(), nullable=True),
        sa.Column('death_cause', sa.Text(), nullable=True),
        sa.Column('transfer_location', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.Column('animal_data', sa.JSON(), nullable=False),
        sa.Column('released_by', sa.Uuid(), nullable=True),
        *_timestamps(updated=False),
        schema=SCHEMA,
    )
    op.create_index('ix_dairyfarm_animal_releases_farm_id', 'animal_releases', ['farm_id'], schema=SCHEMA)

    op.create_table(
        'breeding_settings',
        sa.Column('farm_id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('minimum_breeding_age_months', sa.Integer(), nullable=False),
        sa.Column('default_gestation_days', sa.Integer(), nullable=False),
        sa.Column('days_pregnant_at_dry_off', sa.Integer(), nullable=False),
        sa.Column('heat_cycle_days', sa.Integer(), nullable=False),
        sa.Column('pregnancy_check_days', sa.Integer(), nullable=False),
        sa.Column('voluntary_waiting_period_days', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        schema=SCHEMA,
    )
    op.create_table(
        'health_settings',
        sa.Column('farm_id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('auto_generate_records', sa.Boolean(), nullable=False),
        sa.Column('default_follow_up_days', sa.Integer(), nullable=False),
        sa.Column('vaccination_reminder_days', sa.Integer(), nullable=False),
        sa.Column('default_veterinarian', sa.String(length=255), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        schema=SCHEMA,
    )
    op.create_table(
        'financial_settings',
        sa.Column('farm_id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('default_currency', sa.String(length=8), nullable=False),
        sa.Column('default_buyer_id', sa.Uuid(), nullable=True),
        sa.Column('default_milk_price_per_l', sa.Numeric(10, 4), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        schema=SCHEMA,
    )
    op.create_table(
        'tagging_settings',
        sa.Column('farm_id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('auto_generate', sa.Boolean(), nullable=False),
        sa.Column('prefix', sa.String(length=16), nullable=False),
        sa.Column('next_number', sa.Integer(), nullable=False),
        sa.Column('number_padding', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        schema=SCHEMA,
    )

    op.create_table(
        'buyers',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('code', sa.String(length=64), nullable=True),
        sa.Column('contact', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        *_timestamps(),
        sa.UniqueConstraint('farm_id', 'name', name='ux_buyers_farm_name'),
        schema=SCHEMA,
    )
    op.create_index('ix_dairyfarm_buyers_farm_id', 'buyers', ['farm_id'], schema=SCHEMA)

    op.create_table(
        'inventory_items',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('unit', sa.String(length=32), nullable=False),
        sa.Column('current_stock', sa.Numeric(14, 3), nullable=False),
        sa.Column('minimum_stock', sa.Numeric(14, 3), nullable=False),
        sa.Column('unit_cost', sa.Numeric(12, 2), nullable=True),
        sa.Column('supplier', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('farm_id', 'name', name='ux_inventory_items_farm_name'),
        schema=SCHEMA,
    )
    op.create_index('ix_dairyfarm_inventory_items_farm_id', 'inventory_items', ['farm_id'], schema=SCHEMA)
    op.create_table(
        'inventory_transactions',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column(
            'item_id',
            sa.Uuid(),
            sa.ForeignKey(f'{SCHEMA}.inventory_items.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('transaction_type', sa.String(length=16), nullable=False),
        sa.Column('quantity', sa.Numeric(14, 3), nullable=False),
        sa.Column('stock_after', sa.Numeric(14, 3), nullable=False),
        sa.Column('unit_cost', sa.Numeric(12, 2), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(updated=False),
        schema=SCHEMA,
    )
    op.create_index(
        'ix_dairyfarm_inventory_transactions_farm_id', 'inventory_transactions', ['farm_id'], schema=SCHEMA
    )

    # Aggregate health status over the animal's open concerning records.
    # Returns NULL when the animal does not exist.
    op.execute(
        f"""
        CREATE OR REPLACE FUNCTION {SCHEMA}.determine_animal_health_status(p_animal_id uuid)
        RETURNS text
        LANGUAGE plpgsql
        STABLE
        AS $$
        DECLARE
            v_current text;
            v_open integer;
            v_sick integer;
        BEGIN
            SELECT health_status INTO v_current
            FROM {SCHEMA}.animals WHERE id = p_animal_id;
            IF NOT FOUND THEN
                RETURN NULL;
            END IF;

            SELECT count(*),
                   count(*) FILTER (
                       WHERE record_type IN ('illness', 'injury')
                         AND severity IN ('medium', 'high', 'critical')
                   )
            INTO v_open, v_sick
            FROM {SCHEMA}.animal_health_records
            WHERE animal_id = p_animal_id
              AND is_resolved = false
              AND record_type IN ('illness', 'injury', 'treatment');

            IF v_open = 0 THEN
                RETURN 'healthy';
            END IF;
            IF v_current = 'quarantined' THEN
                RETURN 'quarantined';
            END IF;
            IF v_sick > 0 THEN
                RETURN 'sick';
            END IF;
            RETURN 'requires_attention';
        END;
        $$;
        """
    )


def downgrade() -> None:
    op.execute(f'DROP FUNCTION IF EXISTS {SCHEMA}.determine_animal_health_status(uuid)')
    for table in (
        'inventory_transactions',
        'inventory_items',
        'buyers',
        'tagging_settings',
        'financial_settings',
        'health_settings',
        'breeding_settings',
        'animal_releases',
        'health_record_follow_ups',
        'animal_health_records',
        'age_categories',
        'animals',
        'memberships',
    ):
        op.drop_table(table, schema=SCHEMA)
