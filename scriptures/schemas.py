from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load, pre_load, validate

from .gematria.language import LANGUAGES
from .models import VARIANT_ALIASES, VARIANTS

_LANGUAGE_CHOICES = (*LANGUAGES, "auto")
_VARIANT_CHOICES = (*VARIANTS, *VARIANT_ALIASES)
_DEFAULT_METHODS = ("standard", "ordinal", "reduced")


class WordDataSchema(Schema):
    """One raw word entry as editions supply it."""

    class Meta:
        unknown = EXCLUDE

    position = fields.Integer(load_default=None, allow_none=True)
    text = fields.String(load_default="", allow_none=False)
    # A string, or a list of strings in some editions.
    lemma = fields.Raw(load_default=None, allow_none=True)
    morph = fields.String(load_default=None, allow_none=True)
    strongs = fields.Raw(load_default=None, allow_none=True)
    strong = fields.String(load_default=None, allow_none=True)
    variant = fields.String(load_default=None, allow_none=True, validate=validate.OneOf(_VARIANT_CHOICES))
    is_colophon = fields.Boolean(load_default=False, allow_none=True)
    metadata = fields.Dict(load_default=dict, allow_none=True)

    @pre_load
    def _camel_case_flags(self, data, **kwargs):
        data = dict(data)
        if "isColophon" in data and "is_colophon" not in data:
            data["is_colophon"] = data.pop("isColophon")
        # Null optional fields read as absent.
        if data.get("text") is None:
            data["text"] = ""
        if data.get("is_colophon") is None:
            data["is_colophon"] = False
        if data.get("metadata") is None:
            data["metadata"] = {}
        return data

    @post_load
    def _variant_alias(self, data, **kwargs):
        variant = data.get("variant")
        data["variant"] = VARIANT_ALIASES.get(variant, variant)
        return data


class GematriaQueryArgsSchema(Schema):
    text = fields.String(required=True, allow_none=False)
    language = fields.String(load_default="auto", validate=validate.OneOf(_LANGUAGE_CHOICES))
    method = fields.String(load_default=None, allow_none=True)


class GematriaResponseSchema(Schema):
    text = fields.String(required=True)
    language = fields.String(required=True)
    values = fields.Dict(keys=fields.String(), values=fields.Integer(), required=True)


class SystemsQueryArgsSchema(Schema):
    text = fields.String(required=True, allow_none=False)
    language = fields.String(load_default="auto", validate=validate.OneOf(_LANGUAGE_CHOICES))


class MethodsQueryArgsSchema(Schema):
    language = fields.String(load_default=None, allow_none=True, validate=validate.OneOf(_LANGUAGE_CHOICES))


class MethodSchema(Schema):
    identifier = fields.String(required=True)
    display_name = fields.String(required=True)
    language = fields.String(required=True)
    alias = fields.String(allow_none=True)
    description = fields.String(allow_none=True)


class TemurahQueryArgsSchema(Schema):
    text = fields.String(required=True, allow_none=False)
    cipher = fields.String(required=True, validate=validate.OneOf(("atbash", "albam")))
    preserve_final_forms = fields.Boolean(load_default=False)


class TemurahResponseSchema(Schema):
    text = fields.String(required=True)
    cipher = fields.String(required=True)
    result = fields.String(required=True)
    method = fields.String(required=True)
    value = fields.Integer(required=True)


class VerseGematriaRequestSchema(Schema):
    """
    A verse posted for aggregation.

    Example:
      {"language": "hebrew", "variant": "ketiv",
       "words": [{"text": "...", "variant": "qere"}, {"text": "...", "variant": "ketiv"}]}
    """

    words = fields.List(fields.Dict(), required=True)
    text = fields.String(load_default="")
    # Free-form edition language ("Ancient Hebrew") is accepted and normalized.
    language = fields.String(load_default="auto")
    variant = fields.String(load_default="primary", validate=validate.OneOf(_VARIANT_CHOICES))
    include_colophons = fields.Boolean(load_default=False)
    methods = fields.List(fields.String(), load_default=lambda: list(_DEFAULT_METHODS))


class VerseGematriaResponseSchema(Schema):
    language = fields.String(required=True)
    variant = fields.String(required=True)
    include_colophons = fields.Boolean(required=True)
    word_count = fields.Integer(required=True)
    included_words = fields.Integer(required=True)
    values = fields.Dict(keys=fields.String(), values=fields.Integer(), required=True)
    values_with_colophons = fields.Dict(keys=fields.String(), values=fields.Integer(), allow_none=True)
