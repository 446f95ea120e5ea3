"""Shop catalog and learning videos"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from sqlalchemy.orm import Session

from app.exceptions import ServiceValidationError
from domain.enums import CatalogSort
from domain.models import CatalogItem, Video
from repositories import CatalogItemRepository, VideoRepository

logger = logging.getLogger("chefexpress.catalog")

_PRICE_CHARS = re.compile(r"[^0-9.\-]")


def parse_price(price) -> Decimal:
    """Turn a display price such as "$1,299.99" into a Decimal."""
    if isinstance(price, (int, float, Decimal)):
        return Decimal(str(price))
    cleaned = _PRICE_CHARS.sub("", price or "")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ServiceValidationError(f"Unparseable price: {price!r}")


class CatalogService:
    @staticmethod
    def list_items(
        db: Session,
        category: Optional[str] = None,
        q: Optional[str] = None,
        sort: Optional[CatalogSort] = None,
    ) -> List[CatalogItem]:
        """
        List shop items, filtered by category and a free-text query over
        name and description, then sorted.
        """
        items = CatalogItemRepository(db).list_items(category=category)

        if q and q.strip():
            needle = q.strip().lower()
            items = [
                item
                for item in items
                if needle in (item.name or "").lower()
                or needle in (item.description or "").lower()
            ]

        if sort == CatalogSort.PRICE_ASC:
            items.sort(key=lambda i: parse_price(i.price))
        elif sort == CatalogSort.PRICE_DESC:
            items.sort(key=lambda i: parse_price(i.price), reverse=True)
        elif sort == CatalogSort.RATING:
            items.sort(key=lambda i: (i.rating or 0.0, i.reviews or 0), reverse=True)

        logger.info(
            f"catalog_listed category={category} q={q!r} sort={sort} count={len(items)}"
        )
        return items

    @staticmethod
    def list_videos(db: Session, category: Optional[str] = None) -> List[Video]:
        return VideoRepository(db).list_videos(category=category)
