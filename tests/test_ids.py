import re

from links_folder.ids import generate_id


def test_generate_id_format():
    assert re.fullmatch(r"[0-9a-z]+-[0-9a-z]{6}", generate_id())


def test_generate_id_is_unique():
    ids = {generate_id() for _ in range(1000)}
    assert len(ids) == 1000
