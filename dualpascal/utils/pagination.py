"""
Pagination Utilities

Offset pagination over SQLAlchemy select statements with 1-indexed pages.
A page past the end yields an empty item list rather than an error.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results plus the bookkeeping needed to render pagers."""

    items: list[T]
    total: int
    page: int
    per_page: int
    filters: dict[str, Any] = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        if self.per_page <= 0:
            return 0
        return math.ceil(self.total / self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @classmethod
    def empty(cls, page: int = 1, per_page: int = 10) -> "Page[T]":
        return cls(items=[], total=0, page=normalize_page(page), per_page=per_page)


def normalize_page(page: int | None) -> int:
    """Clamp a requested page number to 1 or above."""
    if not page or page < 1:
        return 1
    return page


async def paginate(
    db: AsyncSession,
    statement: Select,
    page: int | None,
    per_page: int,
    options: Sequence[Any] = (),
) -> Page:
    """
    Execute ``statement`` for a single page.

    Args:
        db: The database session.
        statement: An ordered select of ORM entities, without loader options.
        page: 1-indexed page number; values below 1 are treated as 1.
        per_page: Page size.
        options: Loader options (``selectinload`` etc.) applied to the item query only.

    Returns:
        Page with the items and the total row count of ``statement``.
    """
    page = normalize_page(page)

    count_statement = select(func.count()).select_from(statement.order_by(None).subquery())
    total = (await db.execute(count_statement)).scalar_one()

    offset = (page - 1) * per_page
    if offset >= total:
        return Page(items=[], total=total, page=page, per_page=per_page)

    # Loaded rows may already sit in the identity map with stale relationships
    result = await db.execute(
        statement.options(*options)
        .offset(offset)
        .limit(per_page)
        .execution_options(populate_existing=True)
    )
    items = list(result.scalars().unique().all())
    logger.debug("Paginated query: page=%d per_page=%d total=%d", page, per_page, total)
    return Page(items=items, total=total, page=page, per_page=per_page)
