"""Menu Service: builds the navigation tree from the legacy page table."""

import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.models.page import Page, PageContent
from app.utils.helpers import STATUS_DELETED, language_id_for

logger = logging.getLogger(__name__)


def _sort_key(item: dict):
    return (item["sortOrder"], item["id"])


def build_menu_tree(rows: List[dict]) -> List[dict]:
    """Turn flat menu rows into root items with nested ``children``.

    Each row carries ``id``, ``parentId``, ``isMainItem`` plus the display fields.
    Rows whose parent is not part of ``rows`` are dropped, and every node is emitted once.
    """
    nodes: Dict[int, dict] = {}
    for row in rows:
        nodes[row["id"]] = {
            "id": row["id"],
            "parentId": row["parentId"] or None,
            "title": row["title"],
            "url": row["url"],
            "pageTypeId": row["pageTypeId"],
            "sortOrder": row["sortOrder"],
            "children": [],
        }

    children_by_parent: Dict[int, List[dict]] = {}
    roots: List[dict] = []
    for row in rows:
        node = nodes[row["id"]]
        if row["isMainItem"] and not row["parentId"]:
            roots.append(node)
        elif row["parentId"] in nodes:
            children_by_parent.setdefault(row["parentId"], []).append(node)

    roots.sort(key=_sort_key)
    seen: set[int] = {root["id"] for root in roots}
    # iterative walk: page chains may run deeper than the recursion limit
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        kids = [
            kid for kid in sorted(children_by_parent.get(node["id"], []), key=_sort_key)
            if kid["id"] not in seen
        ]
        seen.update(kid["id"] for kid in kids)
        node["children"] = kids
        stack.extend(reversed(kids))
    return roots


def load_menu_rows(db: Session, lang: Optional[str]) -> List[dict]:
    language_id = language_id_for(lang)
    query = (
        db.query(Page, PageContent)
        .join(
            PageContent,
            (PageContent.page_id == Page.id)
            & (PageContent.language_id == language_id)
            & (PageContent.status != STATUS_DELETED),
        )
        .filter(
            Page.status != STATUS_DELETED,
            Page.is_public == 1,
            Page.show_in_menu == 1,
        )
        .order_by(Page.sort_order.asc(), Page.id.asc(), PageContent.id.asc())
    )
    rows: List[dict] = []
    seen_pages: set[int] = set()
    for page, content in query.all():
        if page.id in seen_pages:
            continue
        seen_pages.add(page.id)
        rows.append({
            "id": page.id,
            "parentId": page.parent_id or None,
            "isMainItem": bool(page.is_main_item),
            "title": content.title,
            "url": content.url or "",
            "pageTypeId": int(page.page_type_id or 0),
            "sortOrder": int(page.sort_order or 0),
        })
    return rows


def get_menu(db: Session, lang: Optional[str]) -> List[dict]:
    rows = load_menu_rows(db, lang)
    tree = build_menu_tree(rows)
    logger.info("[menu] built %s root items from %s pages (lang=%s)", len(tree), len(rows), lang)
    return tree
