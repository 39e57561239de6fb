from __future__ import annotations

from flask import abort, current_app
from flask.views import MethodView
from flask_smorest import Blueprint
from marshmallow import ValidationError

from .errors import ArchaicLetterError, EmptyInputError, GematriaError, MethodNotFoundError
from .gematria import engine, temurah
from .gematria.language import HEBREW, normalize_language, resolve_language
from .gematria.lazy import VerseGematria, verse_gematria_with_colophons
from .gematria.registry import MethodRegistry
from .ingest import words_from_data
from .models import VerseAggregationOptions
from .schemas import (
    GematriaQueryArgsSchema,
    GematriaResponseSchema,
    MethodSchema,
    MethodsQueryArgsSchema,
    SystemsQueryArgsSchema,
    TemurahQueryArgsSchema,
    TemurahResponseSchema,
    VerseGematriaRequestSchema,
    VerseGematriaResponseSchema,
)

blp = Blueprint("gematria", __name__, url_prefix="/", description="Gematria endpoints")


def _registry() -> MethodRegistry:
    return current_app.extensions["gematria_registry"]


def _abort_for(error: GematriaError):
    if isinstance(error, EmptyInputError):
        abort(400, description=str(error))
    if isinstance(error, MethodNotFoundError):
        abort(404, description=str(error))
    if isinstance(error, ArchaicLetterError):
        abort(422, description=str(error))
    abort(400, description=str(error))


@blp.route("/gematria")
class Gematria(MethodView):
    @blp.arguments(GematriaQueryArgsSchema, location="query")
    @blp.response(200, GematriaResponseSchema)
    def get(self, args):
        """
        Standard, ordinal and reduced values, or a single value when `method` is given.
        """
        text = args["text"]
        language = resolve_language(text, args["language"])
        try:
            if args["method"]:
                values = {args["method"]: engine.compute_value(text, args["method"], language, _registry())}
            else:
                values = engine.compute(text, language, _registry()).as_dict()
        except GematriaError as e:
            _abort_for(e)

        return {"text": text, "language": language, "values": values}


@blp.route("/gematria/systems")
class GematriaSystems(MethodView):
    @blp.arguments(SystemsQueryArgsSchema, location="query")
    @blp.response(200, GematriaResponseSchema)
    def get(self, args):
        """
        Every native system for the text's language. Greek ordinal skips archaic letters here.
        """
        text = args["text"]
        if not text.strip():
            abort(400, description=str(EmptyInputError()))
        language = resolve_language(text, args["language"])
        return {"text": text, "language": language, "values": engine.compute_all(text, language)}


@blp.route("/methods")
class Methods(MethodView):
    @blp.arguments(MethodsQueryArgsSchema, location="query")
    @blp.response(200, MethodSchema(many=True))
    def get(self, args):
        return [
            {
                "identifier": m.identifier,
                "display_name": m.display_name,
                "language": m.language,
                "alias": m.alias,
                "description": m.description,
            }
            for m in _registry().list_methods(args["language"])
        ]


@blp.route("/temurah")
class Temurah(MethodView):
    @blp.arguments(TemurahQueryArgsSchema, location="query")
    @blp.response(200, TemurahResponseSchema)
    def get(self, args):
        text = args["text"]
        method = current_app.config["DEFAULT_METHOD"]
        result = temurah.apply(args["cipher"], text, args["preserve_final_forms"])
        try:
            value = engine.compute_value(result, method, HEBREW, _registry())
        except GematriaError as e:
            _abort_for(e)

        return {"text": text, "cipher": args["cipher"], "result": result, "method": method, "value": value}


@blp.route("/verses/gematria")
class VerseGematriaView(MethodView):
    """
    Aggregate values for a posted verse.

    Scribal annotations in `words` are dropped, colophon words are skipped
    unless `include_colophons`, and only the selected reading of a
    Qere/Ketiv pair counts. A word that cannot be valued adds 0.
    """

    @blp.arguments(VerseGematriaRequestSchema)
    @blp.response(200, VerseGematriaResponseSchema)
    def post(self, payload):
        limit = current_app.config["MAX_VERSE_WORDS"]
        if len(payload["words"]) > limit:
            abort(413, description=f"Verse has {len(payload['words'])} words; the limit is {limit}.")

        language = normalize_language(payload["language"])
        options = VerseAggregationOptions(
            variant=payload["variant"],
            include_colophons=payload["include_colophons"],
        )
        try:
            words = words_from_data(payload["words"], language)
        except ValidationError as e:
            abort(422, description=f"Invalid word data: {e.messages}")

        registry = _registry()

        unknown = [name for name in payload["methods"] if registry.resolve(name, language) is None]
        if unknown:
            abort(404, description=str(MethodNotFoundError(unknown[0], language)))

        aggregate = VerseGematria(words, language, options, registry)
        with_colophons = None
        if payload["text"]:
            with_colophons = verse_gematria_with_colophons(payload["text"], language, registry)

        return {
            "language": language,
            "variant": options.variant,
            "include_colophons": options.include_colophons,
            "word_count": len(words),
            "included_words": len(aggregate.included_words()),
            "values": aggregate.as_dict(payload["methods"]),
            "values_with_colophons": with_colophons.as_dict(payload["methods"]) if with_colophons is not None else None,
        }
