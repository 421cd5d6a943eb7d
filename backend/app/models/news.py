"""News and per-language news content models."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, SmallInteger, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    author = Column(String(150), nullable=False, default="")
    news_date = Column(Date, nullable=False)
    show_in_homepage = Column(SmallInteger, nullable=False, default=0)
    order = Column("order", Integer, nullable=False, default=0)
    post_to_public = Column(SmallInteger, nullable=False, default=0)
    post_to_member = Column(SmallInteger, nullable=False, default=0)
    date_added = Column(DateTime, server_default=func.now())
    status = Column(SmallInteger, nullable=False, default=1)  # 0 inactive / 1 active / 2 deleted

    contents = relationship("NewsContent", back_populates="news")

    __table_args__ = (
        Index("idx_news_status_order", "status", "order"),
    )


class NewsContent(Base):
    __tablename__ = "news_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    news_id = Column(Integer, ForeignKey("news.id"), nullable=False)
    language_id = Column(SmallInteger, nullable=False)  # 1 en / 2 fr
    title = Column(String(255), nullable=False)
    summary = Column(Text)
    article = Column(Text)
    image_filename = Column(String(255))
    image_thumbnail = Column(String(255))
    slug_url = Column(String(255))
    date_added = Column(DateTime, server_default=func.now())
    added_by = Column(Integer, nullable=True)
    date_updated = Column(DateTime, nullable=True)
    updated_by = Column(Integer, nullable=True)
    status = Column(SmallInteger, nullable=False, default=1)

    news = relationship("News", back_populates="contents")

    __table_args__ = (
        Index("idx_news_content_news_lang", "news_id", "language_id"),
        Index("idx_news_content_slug", "slug_url", "language_id"),
    )
