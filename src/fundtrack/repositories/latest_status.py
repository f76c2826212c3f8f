"""The "latest status per project" query fragment.

A project's current status is the active history row with the greatest
`status_date`. Every query that needs it (project rollups, investor rollups,
the dashboard) joins this one subquery so the selection rule cannot drift
between call sites.

Ties on `status_date` are broken by the highest `project_status_id`, i.e.
the most recently inserted row wins.
"""

from sqlalchemy import ColumnElement, Subquery, func, select
from sqlmodel import col

from src.fundtrack.models import ActiveFlag, ProjectStatus, StatusDefinition


def latest_status_subquery(name: str = "latest_status") -> Subquery:
    """Build the latest-status subquery.

    Columns: project_id, project_status_id, status_id, status_date, status,
    percentage_completion, status_active (the definition's active flag).
    Exactly one row per project that has at least one active history entry
    pointing at an existing status definition.

    Args:
        name: SQL alias, for queries that need the fragment more than once.
    """
    ranked = (
        select(
            ProjectStatus.project_id,
            ProjectStatus.project_status_id,
            ProjectStatus.status_id,
            ProjectStatus.status_date,
            func.row_number()
            .over(
                partition_by=ProjectStatus.project_id,
                order_by=(
                    col(ProjectStatus.status_date).desc(),
                    col(ProjectStatus.project_status_id).desc(),
                ),
            )
            .label("position"),
        )
        .where(ProjectStatus.active == ActiveFlag.YES.value)
        .subquery(f"{name}_ranked")
    )

    return (
        select(
            ranked.c.project_id,
            ranked.c.project_status_id,
            ranked.c.status_id,
            ranked.c.status_date,
            StatusDefinition.status,
            StatusDefinition.percentage_completion,
            col(StatusDefinition.active).label("status_active"),
        )
        .select_from(ranked)
        .join(StatusDefinition, StatusDefinition.status_id == ranked.c.status_id)
        .where(ranked.c.position == 1)
        .subquery(name)
    )


def is_in_progress(latest: Subquery) -> ColumnElement[bool]:
    """Predicate: the project behind `latest` is not yet complete."""
    return latest.c.percentage_completion < 100
