import copy

from links_folder.migrate import KIND_CURRENT, KIND_EMPTY, KIND_LEGACY, migrate, parse_document
from links_folder.models import Folder, Link, Tree


LEGACY_DOC = {
    "folders": [
        {
            "id": "work",
            "name": "Work",
            "icon": "💼",
            "folders": [{"name": "Inner", "links": [{"url": "https://example.com"}]}],
            "links": [{"title": "Gmail", "url": "https://mail.google.com"}],
        },
        {"links": []},
    ]
}


def test_legacy_example_migrates():
    raw = {"folders": [{"id": "work", "name": "Work",
                        "links": [{"title": "Gmail", "url": "https://mail.google.com"}]}]}
    tree = migrate(raw)
    
    assert len(tree.items) == 1
    folder = tree.items[0]
    assert isinstance(folder, Folder)
    assert folder.id == "work"
    assert folder.title == "Work"
    assert len(folder.items) == 1
    link = folder.items[0]
    assert isinstance(link, Link)
    assert link.title == "Gmail"
    assert link.url == "https://mail.google.com"
    assert link.id


def test_legacy_subfolders_come_before_links():
    folder = migrate(LEGACY_DOC).items[0]
    assert [type(item) for item in folder.items] == [Folder, Link]
    inner = folder.items[0]
    assert inner.title == "Inner"
    assert inner.items[0].title == "https://example.com"


def test_legacy_folder_without_name_is_unnamed():
    tree = migrate(LEGACY_DOC)
    assert tree.items[1].title == "Unnamed Folder"
    assert tree.items[1].id


def test_current_schema_passes_through():
    raw = {"items": [
        {"id": "a", "type": "link", "title": "A", "url": "https://a.example"},
        {"id": "f", "type": "folder", "title": "F", "items": []},
    ]}
    parsed = parse_document(raw)
    assert parsed.kind == KIND_CURRENT
    assert parsed.tree == Tree(items=[
        Link(id="a", title="A", url="https://a.example"),
        Folder(id="f", title="F"),
    ])


def test_current_schema_fills_missing_ids_and_skips_bad_entries():
    raw = {"items": [
        {"type": "link", "url": "https://a.example"},
        {"type": "link", "title": "no url"},
        {"type": "bogus", "id": "x"},
        "not an object",
    ]}
    tree = migrate(raw)
    assert len(tree.items) == 1
    assert tree.items[0].id
    assert tree.items[0].title == "https://a.example"


def test_kinds():
    assert parse_document(LEGACY_DOC).kind == KIND_LEGACY
    assert parse_document({}).kind == KIND_EMPTY
    assert parse_document([1, 2]).kind == KIND_EMPTY
    assert parse_document(None).kind == KIND_EMPTY
    assert parse_document({"items": "nope"}).kind == KIND_EMPTY


def test_unrecognized_input_is_empty_tree():
    assert migrate({}) == Tree()
    assert migrate("garbage") == Tree()


def test_migrate_is_idempotent_on_its_output():
    tree = migrate(copy.deepcopy(LEGACY_DOC))
    assert migrate(tree) is tree
    assert migrate(tree.to_dict()) == tree


def test_migrate_does_not_mutate_input():
    raw = copy.deepcopy(LEGACY_DOC)
    migrate(raw)
    assert raw == LEGACY_DOC
