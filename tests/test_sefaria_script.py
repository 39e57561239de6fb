from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "sefaria_verse_values.py"


@pytest.fixture
def script(monkeypatch):
    spec = importlib.util.spec_from_file_location("sefaria_verse_values", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    requested: list[str] = []

    def fake_http_json(url, timeout=30):
        requested.append(url)
        return {"he": ["בְּרֵאשִׁ֖ית בָּרָ֣א", "<b>וְהָאָ֗רֶץ</b> {פ}"]}

    monkeypatch.setattr(module, "_http_json", fake_http_json)
    module.requested = requested
    return module


def test_verse_values(script):
    rows = script.verse_values("Genesis.1", ["standard", "ordinal"])
    assert script.requested[0].startswith("https://www.sefaria.org/api/texts/Genesis.1")
    assert rows[0] == {"ref": "Genesis 1:1", "words": 2, "standard": 1116, "ordinal": 76 + 23}
    assert rows[1]["ref"] == "Genesis 1:2"
    assert rows[1]["words"] == 1
    assert rows[1]["standard"] == 302


def test_flatten_nested_chapters(script):
    assert script._flatten_sefaria_he([["a", "b"], "c", None]) == ["a", "b", "c"]
    assert script._flatten_sefaria_he(None) == []


def test_main_prints_json_lines(script, capsys):
    assert script.main(["--ref", "Genesis.1.1", "--json", "--method", "standard"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert json.loads(lines[0]) == {"ref": "Genesis 1:1", "words": 2, "standard": 1116}


def test_main_rejects_unknown_method(script, capsys):
    assert script.main(["--ref", "Genesis.1", "--method", "bogus"]) == 2
    assert "Unknown method: bogus" in capsys.readouterr().out
