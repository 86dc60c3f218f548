"""Tests for item ids, upload names and the JSON file helpers."""

import json
import re

import pytest

from inventory_app.utils.ids import new_id, upload_name
from inventory_app.utils.io_utils import read_json, remove_file, write_json


def test_new_id_format_and_order():
    first = new_id("item")
    second = new_id("item")

    assert re.fullmatch(r"item_\d{13}-[0-9a-f]{16}", first)
    assert first[:18] <= second[:18]
    assert first != second


def test_upload_name_keeps_safe_extension():
    assert upload_name("../../Holiday Photo.PNG").endswith(".png")
    assert "/" not in upload_name("../../evil.jpg")
    assert "." not in upload_name(None)
    assert upload_name("a.png") != upload_name("a.png")


def test_read_json_missing_returns_default(tmp_path):
    assert read_json(str(tmp_path / "inventory.json"), default=[]) == []


def test_read_json_malformed_raises(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError):
        read_json(str(path))


def test_write_json_replaces_whole_file(tmp_path):
    path = str(tmp_path / "nested" / "inventory.json")
    write_json(path, [{"id": "a"}, {"id": "b"}])
    write_json(path, [{"id": "c"}])

    with open(path, encoding="utf-8") as f:
        raw = f.read()
    assert json.loads(raw) == [{"id": "c"}]
    assert raw.startswith("[\n  {")
    assert [p.name for p in (tmp_path / "nested").iterdir()] == ["inventory.json"]


def test_remove_file(tmp_path):
    photo = tmp_path / "p.png"
    photo.write_bytes(b"x")

    assert remove_file(str(photo)) is True
    assert remove_file(str(photo)) is False
