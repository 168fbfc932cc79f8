from alembic import op
import sqlalchemy as sa

revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'feedback',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('faculty_name', sa.String(length=255), nullable=False),
        sa.Column('student_name', sa.String(length=255), nullable=False),
        sa.Column('teaching_quality', sa.Integer(), nullable=False),
        sa.Column('communication_skill', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column(
            'sentiment',
            sa.Enum('POSITIVE', 'NEGATIVE', 'NEUTRAL', name='sentiment', native_enum=False, length=16),
            nullable=False,
            server_default='NEUTRAL',
        ),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('teaching_quality BETWEEN 1 AND 5', name='ck_feedback_teaching_quality'),
        sa.CheckConstraint('communication_skill BETWEEN 1 AND 5', name='ck_feedback_communication_skill'),
    )
    op.create_index('ix_feedback_faculty_name', 'feedback', ['faculty_name'])

    op.create_table(
        'reports',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('faculty_name', sa.String(length=255), nullable=False),
        sa.Column('avg_teaching_quality', sa.Float(), nullable=False),
        sa.Column('avg_communication_skill', sa.Float(), nullable=False),
        sa.Column('sentiment_summary', sa.Text(), nullable=True),
        sa.Column('total_feedback_count', sa.Integer(), nullable=False),
        sa.Column('positive_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('negative_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('neutral_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_reports_faculty_name', 'reports', ['faculty_name'])
    op.create_index('ix_reports_created_at', 'reports', ['created_at'])

def downgrade() -> None:
    op.drop_index('ix_reports_created_at', table_name='reports')
    op.drop_index('ix_reports_faculty_name', table_name='reports')
    op.drop_table('reports')
    op.drop_index('ix_feedback_faculty_name', table_name='feedback')
    op.drop_table('feedback')
