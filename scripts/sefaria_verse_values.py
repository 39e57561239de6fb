from __future__ import annotations

import argparse
import json
import logging
import re
import urllib.error
import urllib.parse
import urllib.request

from scriptures.errors import GematriaError
from scriptures.gematria.lazy import VerseGematria
from scriptures.gematria.registry import default_registry
from scriptures.ingest import verse_from_data
from scriptures.models import VerseAggregationOptions

SEFARIA_TEXTS_URL = "https://www.sefaria.org/api/texts/{ref}?lang=he&context=0"

HTML_TAG_RE = re.compile(r"<[^>]+>")
# Parasha markers such as {פ} and {ס}.
PARASHA_MARK_RE = re.compile(r"\{[^}]*\}")
REF_CHAPTER_RE = re.compile(r"^(?P<book>.+?)[ .](?P<chapter>\d+)(?:[.:](?P<verse>\d+))?$")


def _http_json(url: str, timeout: int = 30) -> dict:
    req = urllib.request.Request(url, headers={"Accept": "application/json"}, method="GET")
    with urllib.request.urlopen(req, timeout=timeout) as resp:
        raw = resp.read().decode("utf-8")
        return json.loads(raw) if raw else {}


def _flatten_sefaria_he(he_field) -> list[str]:
    """
    Sefaria returns `he` as a string (one verse) or nested lists (chapters/verses).
    Flatten to a list of verse strings.
    """
    if he_field is None:
        return []
    if isinstance(he_field, str):
        return [he_field]
    if isinstance(he_field, list):
        verses: list[str] = []
        for item in he_field:
            verses.extend(_flatten_sefaria_he(item))
        return verses
    return [str(he_field)]


def _clean_verse(raw: str) -> str:
    text = HTML_TAG_RE.sub(" ", raw)
    text = PARASHA_MARK_RE.sub(" ", text)
    # Maqaf joins words; count them separately.
    text = text.replace("\u05BE", " ")
    return re.sub(r"\s+", " ", text).strip()


def _parse_ref(ref: str) -> tuple[str, int, int]:
    match = REF_CHAPTER_RE.match(ref.strip())
    if not match:
        return ref, 0, 1
    return match.group("book"), int(match.group("chapter")), int(match.group("verse") or 1)


def verse_values(ref: str, methods: list[str], variant: str = "primary") -> list[dict]:
    """Per-verse totals for a Sefaria ref ('Genesis.1', 'Genesis.1.1')."""
    url = SEFARIA_TEXTS_URL.format(ref=urllib.parse.quote(ref))
    sefaria = _http_json(url)
    book, chapter, first = _parse_ref(ref)
    options = VerseAggregationOptions(variant=variant)
    registry = default_registry()

    rows: list[dict] = []
    for offset, raw in enumerate(_flatten_sefaria_he(sefaria.get("he"))):
        text = _clean_verse(raw)
        data = {"text": text, "words": [{"text": w} for w in text.split()]}
        verse = verse_from_data(data, book, chapter, first + offset, language="hebrew")
        values = VerseGematria(verse.words, verse.language, options, registry)
        rows.append({"ref": verse.reference, "words": len(verse.words), **values.as_dict(methods)})
    return rows


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print gematria values for each verse of a Sefaria ref.")
    parser.add_argument("--ref", required=True, help="Sefaria ref, e.g. 'Genesis.1' or 'Genesis.1.1'")
    parser.add_argument(
        "--method",
        action="append",
        dest="methods",
        help="Method identifier or alias; repeat for several (default: standard, ordinal, reduced)",
    )
    parser.add_argument("--variant", default="primary", choices=["primary", "alternate"])
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per line")
    args = parser.parse_args(argv)

    methods = args.methods or ["standard", "ordinal", "reduced"]
    for name in methods:
        if default_registry().resolve(name, "hebrew") is None:
            print(f"Unknown method: {name}")
            return 2

    try:
        rows = verse_values(args.ref, methods, args.variant)
    except urllib.error.HTTPError as e:
        body = e.read().decode("utf-8", errors="replace") if hasattr(e, "read") else ""
        print(f"ERROR {e.code} fetching '{args.ref}': {body}")
        return 1
    except (urllib.error.URLError, GematriaError) as e:
        print(f"ERROR fetching '{args.ref}': {e}")
        return 1

    if not rows:
        print(f"No Hebrew text found for Sefaria ref '{args.ref}'.")
        return 1

    for row in rows:
        if args.json:
            print(json.dumps(row, ensure_ascii=False))
        else:
            values = " ".join(f"{name}={row[name]}" for name in methods)
            print(f"{row['ref']}\twords={row['words']}\t{values}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(main())
