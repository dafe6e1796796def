from links_folder import main as cli


def parse(*argv):
    return cli.args_to_intent(cli.build_parser().parse_args(list(argv)))


def test_add_link_intent():
    assert parse("add-link", "https://x", "--folder", "f1", "--title", "X") == {
        "type": "add_link", "folder_id": "f1", "url": "https://x",
        "title": "X", "icon": "", "app": None,
    }


def test_edit_link_drops_unset_fields():
    assert parse("edit-link", "abc", "--title", "New") == {
        "type": "edit_link", "folder_id": None, "item_id": "abc", "title": "New",
    }


def test_move_direction():
    assert parse("move", "abc", "up")["delta"] == -1
    assert parse("move", "abc", "down")["delta"] == 1


def test_open_distinguishes_url_from_id():
    assert parse("open", "https://x")["url"] == "https://x"
    assert parse("open", "abc") == {"type": "open_link", "item_id": "abc"}


def test_open_accepts_urls_without_slashes():
    assert parse("open", "mailto:me@example.com")["url"] == "mailto:me@example.com"
    assert parse("open", "file:notes.txt")["url"] == "file:notes.txt"
    assert "url" not in parse("open", "lz3k9q1a-4f0x2b")


def test_main_runs_against_configured_storage(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(cli.config, "LINKS_PATH", str(tmp_path / "links.json"))
    monkeypatch.setattr(cli.config, "SUPPORT_DIR", str(tmp_path / "support"))
    monkeypatch.setattr(cli.config, "ASSETS_DIR", str(tmp_path / "assets"))
    
    assert cli.main(["add-link", "https://example.com", "--title", "Example"]) == 0
    assert cli.main(["list"]) == 0
    
    assert "Example" in capsys.readouterr().out
    assert (tmp_path / "links.json").exists()


def test_delete_cancelled_without_confirmation(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "n")
    assert cli.main(["delete", "abc"]) == 1
    assert "Cancelled" in capsys.readouterr().out
