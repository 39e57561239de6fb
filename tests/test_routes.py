from __future__ import annotations


def test_index_and_health(client):
    index = client.get("/").get_json()
    assert "/verses/gematria" in index["endpoints"]

    health = client.get("/health")
    assert health.status_code == 200
    assert health.get_json()["ok"] is True


def test_gematria_default_values(client):
    resp = client.get("/gematria", query_string={"text": "בראשית"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["language"] == "hebrew"
    assert body["values"] == {"standard": 913, "ordinal": 76, "reduced": 13}


def test_gematria_single_method(client):
    resp = client.get("/gematria", query_string={"text": "IESUS", "method": "subjective"})
    assert resp.status_code == 200
    assert resp.get_json()["values"] == {"subjective": 473}


def test_gematria_explicit_language(client):
    resp = client.get("/gematria", query_string={"text": "λογος", "language": "greek"})
    assert resp.get_json()["values"]["standard"] == 373


def test_gematria_errors(client):
    assert client.get("/gematria", query_string={"text": "   "}).status_code == 400
    assert client.get("/gematria", query_string={"text": "שלום", "method": "bogus"}).status_code == 404
    assert client.get("/gematria", query_string={"text": "Ϛ"}).status_code == 422
    # Argument validation.
    assert client.get("/gematria", query_string={"text": "abc", "language": "latin"}).status_code == 422
    assert client.get("/gematria").status_code == 422


def test_gematria_systems(client):
    resp = client.get("/gematria/systems", query_string={"text": "αϠ"})
    assert resp.status_code == 200
    assert resp.get_json()["values"] == {"standard": 901, "ordinal": 1, "reduced": 1}

    hebrew = client.get("/gematria/systems", query_string={"text": "דוד"}).get_json()
    assert hebrew["values"]["mispar_perati"] == 68

    assert client.get("/gematria/systems", query_string={"text": ""}).status_code == 400


def test_methods(client):
    greek = client.get("/methods", query_string={"language": "greek"}).get_json()
    assert [m["identifier"] for m in greek] == ["isopsephy", "isopsephy_ordinal", "isopsephy_reduced"]
    assert greek[0]["alias"] == "standard"

    everything = client.get("/methods").get_json()
    assert len(everything) == 23


def test_temurah(client):
    resp = client.get("/temurah", query_string={"text": "בבל", "cipher": "atbash"})
    assert resp.status_code == 200
    assert resp.get_json() == {"text": "בבל", "cipher": "atbash", "result": "ששכ", "method": "standard", "value": 620}

    assert client.get("/temurah", query_string={"text": "בבל", "cipher": "caesar"}).status_code == 422


def test_verse_gematria(client, colophon_words):
    resp = client.post(
        "/verses/gematria",
        json={"words": colophon_words, "language": "Ancient Hebrew", "text": "בראשית ברא סוף"},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["language"] == "hebrew"
    assert body["word_count"] == 3
    assert body["included_words"] == 2
    assert body["values"]["standard"] == 913 + 203
    assert body["values_with_colophons"]["standard"] == 913 + 203 + 146


def test_verse_gematria_variant_and_methods(client, qere_ketiv_words):
    resp = client.post(
        "/verses/gematria",
        json={"words": qere_ketiv_words, "language": "hebrew", "variant": "ketiv", "methods": ["standard", "major"]},
    )
    body = resp.get_json()
    assert body["variant"] == "alternate"
    assert body["values"] == {"standard": 257 + 16, "major": 257 + 16}
    assert body["values_with_colophons"] is None


def test_verse_gematria_drops_scribal_annotations(client):
    words = [{"text": "ברא"}, {"text": "BHS.", "lemma": None, "morph": None}]
    body = client.post("/verses/gematria", json={"words": words}).get_json()
    assert body["word_count"] == 1
    assert body["values"]["standard"] == 203


def test_verse_gematria_errors(app, client, monkeypatch):
    words = [{"text": "ברא"}] * 3
    assert client.post("/verses/gematria", json={"words": words, "methods": ["bogus"]}).status_code == 404
    assert client.post("/verses/gematria", json={"words": words, "variant": "both"}).status_code == 422

    monkeypatch.setitem(app.config, "MAX_VERSE_WORDS", 2)
    assert client.post("/verses/gematria", json={"words": words}).status_code == 413


def test_verse_gematria_malformed_word(client):
    resp = client.post("/verses/gematria", json={"words": [{"text": "ברא", "variant": "both"}]})
    assert resp.status_code == 422


def test_verse_gematria_non_string_word_text(client):
    resp = client.post("/verses/gematria", json={"words": [{"text": 5, "lemma": None, "morph": None}]})
    assert resp.status_code == 422
