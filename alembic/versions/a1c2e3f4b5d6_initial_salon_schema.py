"""initial_salon_schema

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-19 09:00:00.000000

조직, 지점, 역할, 관리자 계정, 직원, 시프트, 리워드 사용 설정 테이블 생성.
Create organizations, locations, roles, users, employees, shifts and
discount_reward_usage_config tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID


# revision identifiers, used by Alembic.
revision: str = 'a1c2e3f4b5d6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # organizations: 최상위 테넌트 (Top-level tenant)
    op.create_table(
        'organizations',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
    )

    # locations: 살롱 지점 (Salon branches)
    op.create_table(
        'locations',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('organization_id', UUID(as_uuid=True), sa.ForeignKey('organizations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('phone', sa.String(30), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
    )

    # roles / users: 관리자 계정 (Back-office accounts)
    op.create_table(
        'roles',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('organization_id', UUID(as_uuid=True), sa.ForeignKey('organizations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('level', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('organization_id', 'name', name='uq_role_org_name'),
        sa.UniqueConstraint('organization_id', 'level', name='uq_role_org_level'),
    )
    op.create_table(
        'users',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('organization_id', UUID(as_uuid=True), sa.ForeignKey('organizations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role_id', UUID(as_uuid=True), sa.ForeignKey('roles.id'), nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('organization_id', 'username', name='uq_user_org_username'),
    )

    # employees: 지점 소속 직원 (Staff members)
    op.create_table(
        'employees',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('location_id', UUID(as_uuid=True), sa.ForeignKey('locations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(30), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('employment_type', sa.String(50), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_employees_location', 'employees', ['location_id'])

    # shifts: 직원 근무 시프트, 반복 패턴 전개 ID 포함
    # Concrete shifts; generation_id groups rows produced by one rotation run
    op.create_table(
        'shifts',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('employee_id', UUID(as_uuid=True), sa.ForeignKey('employees.id', ondelete='CASCADE'), nullable=False),
        sa.Column('location_id', UUID(as_uuid=True), sa.ForeignKey('locations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('generation_id', UUID(as_uuid=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_shifts_employee_start', 'shifts', ['employee_id', 'start_time'])
    op.create_index('ix_shifts_location_start', 'shifts', ['location_id', 'start_time'])

    # discount_reward_usage_config: 지점별 리워드 중복 규칙 (one row per location)
    op.create_table(
        'discount_reward_usage_config',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('location_id', UUID(as_uuid=True), sa.ForeignKey('locations.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('reward_strategy', sa.String(30), server_default='single_only', nullable=False),
        sa.Column('max_rewards_per_booking', sa.Integer(), server_default='1', nullable=False),
        sa.Column('reward_combinations', JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column('discount_enabled', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('coupon_enabled', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('membership_enabled', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('loyalty_points_enabled', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('referral_enabled', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('max_rewards_per_booking >= 1', name='ck_reward_usage_max_positive'),
        sa.CheckConstraint(
            "reward_strategy IN ('single_only', 'combinations_only')",
            name='ck_reward_usage_strategy',
        ),
    )


def downgrade() -> None:
    op.drop_table('discount_reward_usage_config')
    op.drop_index('ix_shifts_location_start', table_name='shifts')
    op.drop_index('ix_shifts_employee_start', table_name='shifts')
    op.drop_table('shifts')
    op.drop_index('ix_employees_location', table_name='employees')
    op.drop_table('employees')
    op.drop_table('users')
    op.drop_table('roles')
    op.drop_table('locations')
    op.drop_table('organizations')
