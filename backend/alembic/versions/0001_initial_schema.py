"""Initial schema

Revision ID: 0001
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create custom types
    student_status = postgresql.ENUM('normal', 'locked', 'remedial', name='student_status')
    student_status.create(op.get_bind())

    checkin_status = postgresql.ENUM('success', 'failed', name='checkin_status')
    checkin_status.create(op.get_bind())

    intervention_status = postgresql.ENUM('assigned', 'completed', name='intervention_status')
    intervention_status.create(op.get_bind())

    # Create students table; the current intervention FK is added once interventions exists
    op.create_table('students',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('status', postgresql.ENUM(name='student_status', create_type=False), nullable=False, server_default='normal'),
        sa.Column('current_intervention_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # Create daily_logs table
    op.create_table('daily_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('quiz_score', sa.Float(), nullable=False),
        sa.Column('focus_minutes', sa.Float(), nullable=False),
        sa.Column('status', postgresql.ENUM(name='checkin_status', create_type=False), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    # Create interventions table
    op.create_table('interventions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', postgresql.ENUM(name='intervention_status', create_type=False), nullable=False, server_default='assigned'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_foreign_key(
        'fk_students_current_intervention', 'students', 'interventions',
        ['current_intervention_id'], ['id'],
    )

    # Create indexes
    op.create_index('ix_daily_logs_student_id', 'daily_logs', ['student_id'], unique=False)
    op.create_index('ix_interventions_student_id', 'interventions', ['student_id'], unique=False)
    op.create_index('ix_students_status', 'students', ['status'], unique=False)


def downgrade() -> None:
    # Drop indexes
    op.drop_index('ix_students_status', table_name='students')
    op.drop_index('ix_interventions_student_id', table_name='interventions')
    op.drop_index('ix_daily_logs_student_id', table_name='daily_logs')

    op.drop_constraint('fk_students_current_intervention', 'students', type_='foreignkey')

    # Drop tables
    op.drop_table('interventions')
    op.drop_table('daily_logs')
    op.drop_table('students')

    # Drop custom types
    op.execute('DROP TYPE IF EXISTS intervention_status')
    op.execute('DROP TYPE IF EXISTS checkin_status')
    op.execute('DROP TYPE IF EXISTS student_status')
