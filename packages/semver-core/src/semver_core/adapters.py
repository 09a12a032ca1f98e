# SPDX-License-Identifier: MIT
"""Boundary adapters for storing and exchanging versions.

Encoding always produces the canonical string. Decoding always uses the
strict grammar: stored or exchanged values are expected to be canonical.
Use ``Version.original_text`` where the exact input must round-trip.
"""

from __future__ import annotations

import json
import re
from typing import Annotated, Any, Optional, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from .errors import MalformedVersionError, Reason, SemverError
from .grammar import SEMVER_PATTERN
from .semver import Version, parse_strict


def to_text(version: Version) -> str:
    """Encode a version as its canonical string."""
    return str(version)


def _decode(data: Union[str, bytes]) -> str:
    if not isinstance(data, bytes):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedVersionError(repr(data), Reason.INVALID_CHARACTER, f"Invalid UTF-8: {e}") from e


def from_text(text: Union[str, bytes]) -> Version:
    """Decode a canonical version string (strict grammar).

    Raises:
        MalformedVersionError: If ``text`` is not UTF-8 or not a strict version
    """
    return parse_strict(_decode(text))


def to_json(version: Version) -> str:
    """Encode a version as a JSON string literal, e.g. ``"1.2.3"``."""
    return json.dumps(to_text(version))


def from_json(data: Union[str, bytes]) -> Version:
    """Decode a JSON string literal holding a strict version.

    Raises:
        MalformedVersionError: If ``data`` is not UTF-8, not JSON, not a JSON
            string, or not a strict version
    """
    text = _decode(data)
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedVersionError(text, Reason.INVALID_CHARACTER, f"Invalid JSON: {e}") from e
    if not isinstance(value, str):
        raise MalformedVersionError(
            text, Reason.INVALID_CHARACTER, f"Expected a JSON string, got {type(value).__name__}"
        )
    return from_text(value)


# ECMA-262 has no (?P<name>...) groups
_JSON_SCHEMA_PATTERN = "^" + re.sub(r"\?P<\w+>", "", SEMVER_PATTERN.pattern) + "$"


def _validate(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, (str, bytes)):
        try:
            return from_text(value)
        except SemverError as e:
            raise ValueError(e.message) from e
    raise ValueError(f"Version must be a string, got {type(value).__name__}")


class _SemVerAnnotation:
    """Pydantic schema hooks for :data:`SemVer`."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                to_text, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": _JSON_SCHEMA_PATTERN}


# Pydantic field type: accepts a strict version string or a Version
SemVer = Annotated[Version, _SemVerAnnotation]


class VersionType(TypeDecorator):
    """SQLAlchemy column type storing versions as canonical strings.

    Example:
        >>> from sqlalchemy.orm import Mapped, mapped_column
        >>> # version: Mapped[Version] = mapped_column(VersionType(64))
    """

    impl = String
    cache_ok = True

    @property
    def python_type(self) -> type:
        return Version

    def process_bind_param(self, value: Optional[Union[Version, str]], dialect: Dialect) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            value = from_text(value)
        return to_text(value)

    def process_result_value(self, value: Optional[str], dialect: Dialect) -> Optional[Version]:
        if value is None:
            return None
        return from_text(value)
