from alembic import op
import sqlalchemy as sa

revision = "0001_init_tables"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(120), nullable=False, unique=True),
    )

    # department_id is validated by the creation pipeline; sqlite does not enforce the FK
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(80), nullable=False),
        sa.Column('last_name', sa.String(80), nullable=False),
        sa.Column('age', sa.Integer, nullable=False),
        sa.Column('position', sa.String(120), nullable=False),
        sa.Column('department_id', sa.Integer, sa.ForeignKey('departments.id'), nullable=False),
        sa.UniqueConstraint('first_name', 'last_name', 'department_id', name='uq_employees_name_department'),
        sqlite_autoincrement=True,
    )


def downgrade():
    op.drop_table('employees')
    op.drop_table('departments')
