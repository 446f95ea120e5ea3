"""
Read-only catalog models: shop items and learning videos.
"""

from sqlalchemy import Column, Integer, Text, Float

from domain.models.database import Base


class CatalogItem(Base):
    """Kitchen product offered in the shop"""

    __tablename__ = "catalog_item"

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    price = Column(Text, nullable=False)  # display string, e.g. "$19.99"
    url = Column(Text)
    quantity = Column(Text)
    category = Column(Text, index=True)
    img = Column(Text)
    rating = Column(Float)
    reviews = Column(Integer)
    description = Column(Text)


class Video(Base):
    """Cooking lesson video shown on the Learn page"""

    __tablename__ = "video"

    video_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    length = Column(Text)
    url = Column(Text, nullable=False)
    category = Column(Text, index=True)
