"""Shop catalog and video routes.

The web client lists both resources with GET as well as POST, so both
verbs are served.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.enums import CatalogSort
from domain.schemas.catalog_schemas import CatalogItemResponse, VideoResponse
from services.catalog_service import CatalogService

router = APIRouter(tags=["Catalog"])


@router.api_route("/items", methods=["GET", "POST"], response_model=List[CatalogItemResponse])
def list_items(
    category: Optional[str] = Query(default=None),
    q: Optional[str] = Query(default=None, description="Search in name and description"),
    sort: Optional[CatalogSort] = Query(default=None),
    db: Session = Depends(get_db),
):
    return CatalogService.list_items(db, category=category, q=q, sort=sort)


@router.api_route("/videos", methods=["GET", "POST"], response_model=List[VideoResponse])
def list_videos(
    category: Optional[str] = Query(default=None), db: Session = Depends(get_db)
):
    return CatalogService.list_videos(db, category=category)
