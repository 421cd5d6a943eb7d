from app.models.page import Page, PageContent
from app.services.menu_service import build_menu_tree


def _row(id, parent=None, main=False, order=0, title=None):
    return {
        "id": id,
        "parentId": parent,
        "isMainItem": main,
        "title": title or f"Page {id}",
        "url": f"/p/{id}",
        "pageTypeId": 1,
        "sortOrder": order,
    }


def test_build_menu_tree_nests_and_sorts():
    rows = [
        _row(3, main=True, order=2),
        _row(1, main=True, order=1),
        _row(10, parent=1, order=2),
        _row(11, parent=1, order=1),
        _row(12, parent=11, order=1),
    ]
    tree = build_menu_tree(rows)
    assert [item["id"] for item in tree] == [1, 3]
    assert [child["id"] for child in tree[0]["children"]] == [11, 10]
    assert tree[0]["children"][0]["children"][0]["id"] == 12
    assert tree[1]["children"] == []


def test_build_menu_tree_ties_sort_by_id():
    tree = build_menu_tree([_row(5, main=True), _row(2, main=True), _row(4, main=True)])
    assert [item["id"] for item in tree] == [2, 4, 5]


def test_build_menu_tree_drops_orphans_and_non_main_roots():
    rows = [
        _row(1, main=True),
        _row(2, parent=99),
        _row(3, main=False),
        _row(4, parent=0, main=True),
    ]
    tree = build_menu_tree(rows)
    assert [item["id"] for item in tree] == [1, 4]
    assert tree[1]["parentId"] is None


def test_build_menu_tree_ignores_cycles():
    rows = [_row(1, main=True), _row(2, parent=3), _row(3, parent=2)]
    assert [item["id"] for item in build_menu_tree(rows)] == [1]
    assert build_menu_tree([]) == []


def test_build_menu_tree_handles_deep_chains():
    depth = 5000
    rows = [_row(1, main=True)] + [_row(i, parent=i - 1) for i in range(2, depth + 1)]
    node = build_menu_tree(rows)[0]
    levels = 1
    while node["children"]:
        node = node["children"][0]
        levels += 1
    assert levels == depth


def _page(db, titles, parent=None, main=0, order=0, public=1, in_menu=1, status=1):
    page = Page(parent_id=parent, is_main_item=main, sort_order=order,
                is_public=public, show_in_menu=in_menu, status=status, page_type_id=2)
    db.add(page)
    db.flush()
    for language_id, title in titles.items():
        db.add(PageContent(page_id=page.id, language_id=language_id, title=title, url=f"/{title.lower()}"))
    return page


def test_menu_endpoint(client, db):
    home = _page(db, {1: "Home", 2: "Accueil"}, main=1, order=1)
    program = _page(db, {1: "Program", 2: "Programme"}, main=1, order=2)
    _page(db, {1: "Tryouts", 2: "Essais"}, parent=program.id, order=1)
    _page(db, {2: "Seulement"}, parent=program.id, order=2)
    _page(db, {1: "Hidden", 2: "Cache"}, main=1, in_menu=0)
    _page(db, {1: "Private", 2: "Prive"}, main=1, public=0)
    _page(db, {1: "Gone", 2: "Parti"}, main=1, status=2)
    db.commit()

    resp = client.get("/api/menu", params={"lang": "en"})
    assert resp.status_code == 200
    menu = resp.json()["data"]
    assert [item["title"] for item in menu] == ["Home", "Program"]
    assert menu[0]["id"] == home.id
    assert menu[0]["parentId"] is None
    assert menu[0]["pageTypeId"] == 2
    assert menu[0]["sortOrder"] == 1
    assert [child["title"] for child in menu[1]["children"]] == ["Tryouts"]
    assert menu[1]["children"][0]["parentId"] == program.id

    fr = client.get("/api/menu", params={"lang": "fr"}).json()["data"]
    assert [child["title"] for child in fr[1]["children"]] == ["Essais", "Seulement"]


def test_menu_defaults_to_french(client, db):
    _page(db, {1: "Home", 2: "Accueil"}, main=1)
    db.commit()
    assert client.get("/api/menu").json()["data"][0]["title"] == "Accueil"
