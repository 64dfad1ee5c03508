# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Canonical JSON types and helpers used across cor_args.

This module defines the JSON value shapes, the key lookup shared by the
structured handlers, and the rendering of looked-up values to text. It has no
dependencies on logging or the handler layer to keep the dependency graph
acyclic.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Final, TypeAlias, cast

from pydantic import JsonValue

__all__ = [
    "MISSING",
    "JSONList",
    "JSONMapping",
    "JSONValue",
    "find_value",
    "normalize_enums_for_json",
    "render_value",
]

JSONValue: TypeAlias = JsonValue
JSONMapping = dict[str, JsonValue]
JSONList = list[JsonValue]


class _Missing:
    """Sentinel type for keys absent from a document."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def find_value(document: object, key: str, *, nested: bool = False) -> object:
    """Look up ``key`` in a parsed structured document.

    Only mappings can hold keys. With ``nested=False`` the key must be a
    top-level field of ``document``. With ``nested=True`` the search is
    depth-first: the current mapping's own fields are checked before any
    nested value, and arrays are searched item by item in order. The nested
    walk keeps its own stack, so document depth is not bounded by the
    interpreter's recursion limit, and a container reached twice is only
    searched once.

    Args:
        document: Parsed JSON/TOML payload or an in-memory mapping.
        key: Field name to look for.
        nested: Whether to descend into nested mappings and arrays.

    Returns:
        The stored value (which may be ``None`` for a JSON ``null``), or
        ``MISSING`` when the key is not present.
    """
    if not nested:
        if isinstance(document, Mapping) and key in document:
            return cast("Mapping[object, object]", document)[key]
        return MISSING
    pending: list[object] = [document]
    seen: set[int] = set()
    while pending:
        node = pending.pop()
        if isinstance(node, Mapping):
            mapping = cast("Mapping[object, object]", node)
            if key in mapping:
                return mapping[key]
            children: list[object] = list(mapping.values())
        elif isinstance(node, (list, tuple)):
            children = list(cast("list[object] | tuple[object, ...]", node))
        else:
            continue
        if id(node) in seen:
            continue
        seen.add(id(node))
        pending.extend(reversed(children))
    return MISSING


def render_value(value: object) -> str:
    """Render a looked-up value as text without otherwise transforming it.

    Strings are returned verbatim. Every other value is rendered as compact
    JSON (``123``, ``true``, ``null``, ``{"a":1}``); values with no JSON
    form, such as TOML dates, fall back to ``str()``.

    Args:
        value: Value stored under the requested key.

    Returns:
        The textual form of ``value``.
    """
    normalized = normalize_enums_for_json(value)
    if isinstance(normalized, str):
        return normalized
    return json.dumps(normalized, ensure_ascii=False, separators=(",", ":"))


def normalize_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their string payloads for JSON serialisation.

    Args:
        value: Arbitrary Python object hierarchy that may include `Enum`
            instances, mappings, or sequences.

    Returns:
        A JSON-compatible structure (built from `dict`/`list`/primitives)
        with all enum keys and values replaced by their `.value` payloads.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, Mapping):
            mapping_obj = cast("Mapping[object, object]", obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                if isinstance(key, Enum):
                    norm_key: str = str(key.value)
                elif isinstance(key, str):
                    norm_key = key
                else:
                    norm_key = str(key)
                result[norm_key] = _convert(raw_val)
            return cast("JSONValue", result)
        if isinstance(obj, (list, tuple)):
            seq_obj = cast("list[object] | tuple[object, ...]", obj)
            return cast("JSONValue", [_convert(item) for item in seq_obj])
        if isinstance(obj, (str, int, float, bool)) or obj is None:
            return cast("JSONValue", obj)
        return cast("JSONValue", str(obj))

    return _convert(value)
