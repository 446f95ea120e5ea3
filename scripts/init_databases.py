#!/usr/bin/env python3
"""
Initialize the ChefExpress database
Creates the schema and seeds the shop catalog and learning videos
"""

import sys
import json
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.orm import Session

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_databases")

DEFAULT_CATALOG = Path(__file__).parent.parent / "data" / "catalog.json"


def init_schema() -> bool:
    """Create all tables"""
    logger.info("=" * 60)
    logger.info("Initializing database schema...")
    logger.info("=" * 60)

    try:
        from domain.models.database import engine, init_database

        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"Created {len(tables)} tables: {', '.join(tables)}")
        return True
    except Exception as e:
        logger.exception(f"Failed to initialize database: {e}")
        return False


def seed_catalog(db: Session, data: dict) -> dict:
    """
    Insert catalog items and videos that are not present yet.

    Items are matched on name, videos on URL, so running the seed twice
    adds nothing.

    Returns:
        Counts of inserted rows per kind
    """
    from domain.models import CatalogItem, Video

    known_items = {name for (name,) in db.query(CatalogItem.name).all()}
    known_videos = {url for (url,) in db.query(Video.url).all()}

    added = {"items": 0, "videos": 0}
    for item in data.get("items", []):
        if item.get("name") and item["name"] not in known_items:
            fields = dict(item)
            fields.setdefault("quantity", "1")
            db.add(CatalogItem(**fields))
            known_items.add(item["name"])
            added["items"] += 1
    for video in data.get("videos", []):
        if video.get("url") and video["url"] not in known_videos:
            db.add(Video(**video))
            known_videos.add(video["url"])
            added["videos"] += 1
    db.commit()
    return added


def seed_from_file(path: Path = DEFAULT_CATALOG) -> bool:
    logger.info(f"Seeding catalog from {path}")
    try:
        from domain.models.database import SessionLocal

        data = json.loads(Path(path).read_text(encoding="utf-8"))
        db = SessionLocal()
        try:
            added = seed_catalog(db, data)
        finally:
            db.close()
        logger.info(f"Seeded {added['items']} items and {added['videos']} videos")
        return True
    except Exception as e:
        logger.exception(f"Failed to seed catalog: {e}")
        return False


def main() -> int:
    if not init_schema():
        return 1
    if not seed_from_file():
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
