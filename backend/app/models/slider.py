"""Homepage slider model."""

from sqlalchemy import Column, DateTime, Integer, SmallInteger, String
from sqlalchemy.sql import func

from app.database import Base


class Slider(Base):
    __tablename__ = "slider"

    id = Column(Integer, primary_key=True, autoincrement=True)
    image_en = Column(String(255), nullable=False)
    image_fr = Column(String(255), nullable=False)
    link_en = Column(String(500))
    link_fr = Column(String(500))
    order = Column("order", Integer, nullable=False, default=0)
    status = Column(SmallInteger, nullable=False, default=1)
    date_created = Column(DateTime, server_default=func.now())
    added_by = Column(Integer, nullable=True)
    date_updated = Column(DateTime, nullable=True)
    updated_by = Column(Integer, nullable=True)
