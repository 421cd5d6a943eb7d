"""Gallery and gallery image models."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, SmallInteger, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


class Gallery(Base):
    __tablename__ = "gallery"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gallery_name_en = Column(String(255), nullable=False)
    gallery_name_fr = Column(String(255), nullable=False)
    description_en = Column(Text)
    description_fr = Column(Text)
    order = Column("order", Integer, nullable=False, default=0)
    member_only = Column(SmallInteger, nullable=False, default=0)
    date_created = Column(DateTime, server_default=func.now())
    added_by = Column(Integer, nullable=True)
    date_updated = Column(DateTime, nullable=True)
    updated_by = Column(Integer, nullable=True)
    status = Column(SmallInteger, nullable=False, default=1)

    images = relationship("GalleryImage", back_populates="gallery")


class GalleryImage(Base):
    __tablename__ = "gallery_image"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gallery_id = Column(Integer, ForeignKey("gallery.id"), nullable=False)
    image_filename = Column(String(255), nullable=False)
    thumbnail_filename = Column(String(255), nullable=False)
    order = Column("order", Integer, nullable=False, default=0)
    date_created = Column(DateTime, server_default=func.now())
    added_by = Column(Integer, nullable=True)
    status = Column(SmallInteger, nullable=False, default=1)

    gallery = relationship("Gallery", back_populates="images")

    __table_args__ = (
        Index("idx_gallery_image_gallery", "gallery_id", "status"),
    )
