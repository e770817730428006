"""Product data access over a SQLModel session."""

from dataclasses import asdict, dataclass
from typing import Any

from sqlalchemy import func, update
from sqlmodel import Session, select

from src.app.core.exceptions import NoRowsMatchedError
from src.app.entities.core._base import utc_now

from .entity import Product
from .table import ProductTable


@dataclass(frozen=True)
class ProductFilter:
    """Equality criteria on the product table; ``None`` means unconstrained."""

    id: int | None = None
    available: bool | None = None

    def criteria(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def clauses(self) -> list[Any]:
        return [getattr(ProductTable, k) == v for k, v in self.criteria().items()]


class ProductRepository:
    """Record-store driver for products.

    Rows are returned as ``Product`` domain entities. Listing is ordered by
    identifier ascending so pages are stable.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def count(self, where: ProductFilter) -> int:
        statement = select(func.count()).select_from(ProductTable).where(*where.clauses())
        return self._session.exec(statement).one()

    def find_many(self, where: ProductFilter, offset: int, limit: int) -> list[Product]:
        statement = (
            select(ProductTable)
            .where(*where.clauses())
            .order_by(ProductTable.id)
            .offset(offset)
            .limit(limit)
        )
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def find_first(self, where: ProductFilter) -> Product | None:
        statement = select(ProductTable).where(*where.clauses()).order_by(ProductTable.id)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def insert(self, fields: dict[str, Any]) -> Product:
        row = ProductTable(**fields)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def update_where(self, where: ProductFilter, patch: dict[str, Any]) -> Product:
        """Apply ``patch`` to the row matched by ``where`` and return it.

        Raises:
            NoRowsMatchedError: If ``where`` matched no row.
        """
        if where.id is None:
            raise ValueError("update_where requires an id criterion")

        statement = (
            update(ProductTable)
            .where(*where.clauses())
            .values(**patch, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = self._session.exec(statement)  # type: ignore[call-overload]
        if result.rowcount == 0:
            raise NoRowsMatchedError(ProductTable.__tablename__, where.criteria())

        refreshed = select(ProductTable).where(ProductTable.id == where.id).execution_options(
            populate_existing=True
        )
        row = self._session.exec(refreshed).one()
        return Product.model_validate(row, from_attributes=True)
