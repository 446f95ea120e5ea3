"""
Catalog Repository - read-only access to shop items and learning videos
"""

from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import CatalogItem, Video


class CatalogItemRepository(BaseRepository[CatalogItem]):
    def __init__(self, db: Session):
        super().__init__(db, CatalogItem)

    def list_items(self, category: Optional[str] = None) -> List[CatalogItem]:
        query = self.db.query(CatalogItem)
        if category:
            query = query.filter(CatalogItem.category == category)
        return query.order_by(CatalogItem.item_id).all()

    def get_many(self, item_ids: Iterable[int]) -> List[CatalogItem]:
        ids = list(set(item_ids))
        if not ids:
            return []
        return self.db.query(CatalogItem).filter(CatalogItem.item_id.in_(ids)).all()


class VideoRepository(BaseRepository[Video]):
    def __init__(self, db: Session):
        super().__init__(db, Video)

    def list_videos(self, category: Optional[str] = None) -> List[Video]:
        query = self.db.query(Video)
        if category:
            query = query.filter(Video.category == category)
        return query.order_by(Video.video_id).all()
