"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.fundtrack.models.enums import ActiveFlag

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.

    Subclasses set `model` and `id_field`, the name of the integer
    primary key column (tables keep their historical `<entity>_id` names).
    """

    model: type[ModelType]
    id_field: str

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def id_column(self) -> Any:
        return getattr(self.model, self.id_field)

    async def get_by_id(self, id: int) -> ModelType | None:
        """Get a record by its primary key, active or not."""
        return await self.session.get(self.model, id)

    async def get_active(self, id: int) -> ModelType | None:
        """Get a record by primary key only if its active flag is 'Y'."""
        result = await self.session.execute(
            select(self.model).where(
                self.id_column == id,
                self.model.active == ActiveFlag.YES.value,  # type: ignore[attr-defined]
            )
        )
        return result.scalar_one_or_none()

    async def list_active(self) -> list[ModelType]:
        """List every record whose active flag is 'Y', in primary key order."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.active == ActiveFlag.YES.value)  # type: ignore[attr-defined]
            .order_by(self.id_column)
        )
        return list(result.scalars().all())

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def update_fields(self, id: int, values: dict[str, Any]) -> int:
        """Overwrite the given columns of one row.

        Returns:
            Number of rows matched (0 when the id does not exist).
        """
        result = await self.session.execute(
            update(self.model).where(self.id_column == id).values(**values)
        )
        return result.rowcount

    async def deactivate(self, id: int) -> int:
        """Soft delete: flip the active flag from 'Y' to 'N'.

        Rows that are already inactive are not matched, so a repeated delete
        reports 0 affected rows.
        """
        active = self.model.active  # type: ignore[attr-defined]
        result = await self.session.execute(
            update(self.model)
            .where(self.id_column == id, active == ActiveFlag.YES.value)
            .values(active=ActiveFlag.NO.value)
        )
        return result.rowcount
