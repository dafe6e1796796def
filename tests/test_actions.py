import pytest

from links_folder import actions
from links_folder.exceptions import ActiveTabUnavailableError, InvalidInputError, UnsupportedPlatformError
from links_folder.models import Folder, Link, SavedApp
from links_folder.tree import find_folder, find_item


def test_add_link_to_top_level(storage):
    link = actions.add_link(None, "  https://example.com  ", icon=" ⭐ ", storage=storage)
    
    tree = storage.load()
    assert tree.items == [link]
    assert link.url == "https://example.com"
    assert link.title == "https://example.com"
    assert link.icon == "⭐"


def test_add_link_rejects_blank_url_before_io(storage):
    with pytest.raises(InvalidInputError):
        actions.add_link(None, "   ", storage=storage)
    assert not storage.support_path.exists()


def test_add_link_to_missing_folder_changes_nothing(storage, sample_tree):
    storage.save(sample_tree)
    assert actions.add_link("missing", "https://x", storage=storage) is None
    assert storage.load() == sample_tree


def test_add_folder_into_nested(storage, sample_tree):
    storage.save(sample_tree)
    folder = actions.add_folder("nested", "  ", storage=storage)
    
    assert folder.title == "Unnamed"
    nested = find_folder(storage.load(), "nested")
    assert [i.id for i in nested.items] == ["docs", folder.id]


def test_edit_link_keeps_id_and_position(storage, sample_tree):
    storage.save(sample_tree)
    app = SavedApp(name="Arc", path="/Applications/Arc.app")
    
    actions.edit_link("work", "gmail", "https://gmail.com", title="", app=app, storage=storage)
    
    work = find_folder(storage.load(), "work")
    edited = work.items[0]
    assert edited == Link(id="gmail", title="https://gmail.com", url="https://gmail.com", app=app)


def test_edit_folder_keeps_children(storage, sample_tree):
    storage.save(sample_tree)
    assert actions.edit_folder(None, "work", title="Job", icon="", storage=storage)
    
    work = find_item(storage.load(), "work")
    assert isinstance(work, Folder)
    assert work.title == "Job"
    assert work.icon is None
    assert [i.id for i in work.items] == ["gmail", "nested", "calendar"]


def test_delete_folder_removes_subtree(storage, sample_tree):
    storage.save(sample_tree)
    assert actions.delete_item(None, "work", storage=storage)
    tree = storage.load()
    assert [i.id for i in tree.items] == ["news"]
    assert find_item(tree, "docs") is None


def test_move_and_duplicate(storage, sample_tree):
    storage.save(sample_tree)
    actions.move_item("work", "calendar", -1, storage=storage)
    actions.duplicate_item("work", "gmail", storage=storage)
    
    titles = [i.title for i in find_folder(storage.load(), "work").items]
    assert titles == ["Gmail", "Gmail (Copy)", "Calendar", "Nested"]


def test_every_action_reloads_from_disk(storage):
    actions.add_link(None, "https://one", storage=storage)
    actions.add_link(None, "https://two", storage=storage)
    assert [i.url for i in storage.load().items] == ["https://one", "https://two"]


def test_add_from_active_tab(storage):
    link = actions.add_link_from_active_tab(
        None, reader=lambda: {"url": "https://tab", "title": "Tab"}, storage=storage,
    )
    assert link.title == "Tab"
    assert storage.load().items == [link]


def test_add_from_active_tab_without_browser(storage):
    with pytest.raises(ActiveTabUnavailableError):
        actions.add_link_from_active_tab(None, reader=lambda: None, storage=storage)


def test_add_from_active_tab_unsupported_platform(storage):
    def reader():
        raise UnsupportedPlatformError("nope")
    
    with pytest.raises(UnsupportedPlatformError):
        actions.add_link_from_active_tab(None, reader=reader, storage=storage)


def test_list_items(storage, sample_tree):
    storage.save(sample_tree)
    assert [i.id for i in actions.list_items(None, storage=storage)] == ["work", "news"]
    assert actions.list_items("missing", storage=storage) is None
