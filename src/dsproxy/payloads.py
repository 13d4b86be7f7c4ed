"""Dataset payload decoding into guestinfo commands."""

from __future__ import annotations

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from dsproxy.errors import DecodeError
from dsproxy.keys import guestinfo_key

_DECODER = json.JSONDecoder()
_WHITESPACE_RE = re.compile(r"[ \t\n\r]*")


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    dataset: StrictStr = ""

    @field_validator("dataset", mode="before")
    @classmethod
    def _null_dataset(cls, value: Any) -> Any:
        return "" if value is None else value


class DatasetGetPayload(_Payload):
    """Body of a ``datasets-get-entry`` command."""

    keys: list[StrictStr] = Field(default_factory=list)

    @field_validator("keys", mode="before")
    @classmethod
    def _null_keys(cls, value: Any) -> Any:
        return [] if value is None else value


class DatasetEntry(BaseModel):
    """One entry of a ``datasets-set-entry`` command.

    ``value`` is the JSON source text of the entry's value, or ``None`` when
    the entry has no value at all.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    key: StrictStr
    value: StrictStr | None = None


class DatasetSetPayload(_Payload):
    """Body of a ``datasets-set-entry`` command."""

    entries: list[DatasetEntry] = Field(default_factory=list)

    @field_validator("entries", mode="before")
    @classmethod
    def _null_entries(cls, value: Any) -> Any:
        return [] if value is None else value


def decode_get(text: str) -> list[str]:
    """Translate a get payload into ``info-get`` commands, one per key, in order."""

    payload = _validate(DatasetGetPayload, _load(text))
    return [f"info-get {guestinfo_key(payload.dataset, key)}" for key in payload.keys]


def decode_set(text: str) -> list[str]:
    """Translate a set payload into ``info-set`` commands.

    Commands are collected by guestinfo key before flattening, so duplicate
    keys collapse to a single command carrying the last entry's value.
    """

    document = _load(text)
    _inline_raw_values(text, document)
    payload = _validate(DatasetSetPayload, document)

    commands: dict[str, str] = {}
    for entry in payload.entries:
        key = guestinfo_key(payload.dataset, entry.key)
        commands[key] = f"info-set {key} {entry.value or ''}"
    return list(commands.values())


def _load(text: str) -> Any:
    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"invalid dataset payload: {exc}") from exc
    # A bare null decodes to an empty payload.
    return {} if document is None else document


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


_T = TypeVar("_T", bound=_Payload)


def _validate(model: type[_T], document: Any) -> _T:
    try:
        return model.model_validate(document)
    except ValidationError as exc:
        raise DecodeError(f"invalid dataset payload: {exc}") from exc


def _inline_raw_values(text: str, document: Any) -> None:
    """Replace each entry's decoded value with its JSON source text.

    Runs on text that already parsed as JSON. Shapes that do not match a set
    payload are left alone for validation to reject.
    """

    if not isinstance(document, dict) or not isinstance(document.get("entries"), list):
        return
    span = _member_spans(text, 0).get("entries")
    if span is None:
        return
    item_spans = _item_spans(text, span[0])
    for entry, (start, _end) in zip(document["entries"], item_spans, strict=True):
        if not isinstance(entry, dict) or "value" not in entry:
            continue
        value_start, value_end = _member_spans(text, start)["value"]
        entry["value"] = text[value_start:value_end]


def _skip_whitespace(text: str, index: int) -> int:
    match = _WHITESPACE_RE.match(text, index)
    return match.end() if match else index


def _member_spans(text: str, index: int) -> dict[str, tuple[int, int]]:
    """Map each member name of the object at ``index`` to its value span."""

    spans: dict[str, tuple[int, int]] = {}
    index = _skip_whitespace(text, index)
    if text[index] != "{":
        return spans
    index = _skip_whitespace(text, index + 1)
    if text[index] == "}":
        return spans
    while True:
        name, index = _DECODER.raw_decode(text, index)
        index = _skip_whitespace(text, _skip_whitespace(text, index) + 1)
        _, end = _DECODER.raw_decode(text, index)
        # Later duplicates win, as with json.loads.
        spans[name] = (index, end)
        index = _skip_whitespace(text, end)
        if text[index] == "}":
            return spans
        index = _skip_whitespace(text, index + 1)


def _item_spans(text: str, index: int) -> list[tuple[int, int]]:
    """Return the span of every item of the array at ``index``."""

    spans: list[tuple[int, int]] = []
    index = _skip_whitespace(text, index)
    if text[index] != "[":
        return spans
    index = _skip_whitespace(text, index + 1)
    if text[index] == "]":
        return spans
    while True:
        _, end = _DECODER.raw_decode(text, index)
        spans.append((index, end))
        index = _skip_whitespace(text, end)
        if text[index] == "]":
            return spans
        index = _skip_whitespace(text, index + 1)
