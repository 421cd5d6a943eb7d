"""Legacy page table used to build the navigation menu."""

from sqlalchemy import Column, ForeignKey, Index, Integer, SmallInteger, String
from sqlalchemy.orm import relationship

from app.database import Base


class Page(Base):
    __tablename__ = "page"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parent_id = Column(Integer, nullable=True)  # NULL or 0 for top-level pages
    page_type_id = Column(Integer, nullable=False, default=1)
    sort_order = Column(Integer, nullable=False, default=0)
    is_public = Column(SmallInteger, nullable=False, default=1)
    show_in_menu = Column(SmallInteger, nullable=False, default=1)
    is_main_item = Column(SmallInteger, nullable=False, default=0)
    status = Column(SmallInteger, nullable=False, default=1)

    contents = relationship("PageContent", back_populates="page")


class PageContent(Base):
    __tablename__ = "page_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    page_id = Column(Integer, ForeignKey("page.id"), nullable=False)
    language_id = Column(SmallInteger, nullable=False)
    title = Column(String(255), nullable=False)
    url = Column(String(500), nullable=False, default="")
    status = Column(SmallInteger, nullable=False, default=1)

    page = relationship("Page", back_populates="contents")

    __table_args__ = (
        Index("idx_page_content_page_lang", "page_id", "language_id"),
    )
