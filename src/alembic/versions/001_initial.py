"""Initial schema

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# (status_id, status, percentage_completion); id 1 is assigned to new projects
DEFAULT_STATUSES = [
    (1, "Commenced", 0),
    (2, "Planning", 10),
    (3, "Design", 25),
    (4, "Construction", 50),
    (5, "Fit-out", 75),
    (6, "Handover", 90),
    (7, "Completed", 100),
]


def _active_column() -> sa.Column:
    return sa.Column(
        "active",
        sqlmodel.sql.sqltypes.AutoString(length=1),
        nullable=False,
        server_default="Y",
    )


def upgrade() -> None:
    # 1. Status catalogue
    def_status = op.create_table(
        "def_status",
        sa.Column("status_id", sa.Integer(), nullable=False),
        sa.Column("status", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("percentage_completion", sa.Integer(), nullable=False, server_default="0"),
        _active_column(),
        sa.PrimaryKeyConstraint("status_id"),
    )

    # 2. Projects
    op.create_table(
        "projects",
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        _active_column(),
        sa.PrimaryKeyConstraint("project_id"),
    )
    op.create_index("ix_projects_active", "projects", ["active"], unique=False)

    # 3. Project status history
    op.create_table(
        "project_statuses",
        sa.Column("project_status_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("status_id", sa.Integer(), nullable=False),
        sa.Column("status_date", sa.DateTime(), nullable=False),
        _active_column(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.project_id"]),
        sa.ForeignKeyConstraint(["status_id"], ["def_status.status_id"]),
        sa.PrimaryKeyConstraint("project_status_id"),
    )
    op.create_index(
        "ix_project_statuses_project_id", "project_statuses", ["project_id"], unique=False
    )
    op.create_index(
        "ix_project_statuses_status_date", "project_statuses", ["status_date"], unique=False
    )

    # 4. Investors
    op.create_table(
        "investors",
        sa.Column("investor_id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("contact_number", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column("address", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("alias", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        _active_column(),
        sa.PrimaryKeyConstraint("investor_id"),
    )
    op.create_index("ix_investors_name", "investors", ["name"], unique=False)
    op.create_index("ix_investors_active", "investors", ["active"], unique=False)

    # 5. Investments
    op.create_table(
        "project_investments",
        sa.Column("investment_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("investor_id", sa.Integer(), nullable=False),
        sa.Column("investment_amount", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("investment_date", sa.Date(), nullable=False),
        _active_column(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.project_id"]),
        sa.ForeignKeyConstraint(["investor_id"], ["investors.investor_id"]),
        sa.PrimaryKeyConstraint("investment_id"),
    )
    op.create_index(
        "ix_project_investments_project_id", "project_investments", ["project_id"], unique=False
    )
    op.create_index(
        "ix_project_investments_investor_id", "project_investments", ["investor_id"], unique=False
    )
    op.create_index(
        "ix_project_investments_active", "project_investments", ["active"], unique=False
    )

    # 6. Free-text status log (no active flag, rows are hard deleted)
    op.create_table(
        "status_updates",
        sa.Column("status_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("status", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("status_timestamp", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("status_id"),
    )
    op.create_index("ix_status_updates_project_id", "status_updates", ["project_id"], unique=False)

    op.bulk_insert(
        def_status,
        [
            {"status_id": sid, "status": label, "percentage_completion": pct, "active": "Y"}
            for sid, label, pct in DEFAULT_STATUSES
        ],
    )
    # Explicit ids leave the PostgreSQL sequence behind
    if op.get_bind().dialect.name == "postgresql":
        op.execute(
            "SELECT setval(pg_get_serial_sequence('def_status', 'status_id'), "
            "(SELECT MAX(status_id) FROM def_status))"
        )


def downgrade() -> None:
    op.drop_index("ix_status_updates_project_id", table_name="status_updates")
    op.drop_table("status_updates")
    op.drop_index("ix_project_investments_active", table_name="project_investments")
    op.drop_index("ix_project_investments_investor_id", table_name="project_investments")
    op.drop_index("ix_project_investments_project_id", table_name="project_investments")
    op.drop_table("project_investments")
    op.drop_index("ix_investors_active", table_name="investors")
    op.drop_index("ix_investors_name", table_name="investors")
    op.drop_table("investors")
    op.drop_index("ix_project_statuses_status_date", table_name="project_statuses")
    op.drop_index("ix_project_statuses_project_id", table_name="project_statuses")
    op.drop_table("project_statuses")
    op.drop_index("ix_projects_active", table_name="projects")
    op.drop_table("projects")
    op.drop_table("def_status")
