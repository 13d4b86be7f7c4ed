"""Dataset command detection and argument rewriting."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from dsproxy.payloads import decode_get, decode_set

CMD_FLAG = "--cmd"
DATASET_COMMAND_RE = re.compile(r"^\s*(datasets-[gs]et-entry)\s+(.+)\s*\Z", re.ASCII)

_KINDS: dict[str, Literal["get", "set"]] = {
    "datasets-get-entry": "get",
    "datasets-set-entry": "set",
}


@dataclass(frozen=True)
class DatasetCommand:
    """Dataset command parsed from one ``--cmd`` value."""

    kind: Literal["get", "set"]
    payload: str

    def translate(self) -> list[str]:
        if self.kind == "get":
            return decode_get(self.payload)
        return decode_set(self.payload)


@dataclass(frozen=True)
class RewrittenArguments:
    """Arguments split between pass-through and generated guestinfo commands."""

    common_args: list[str] = field(default_factory=list)
    generated: list[str] = field(default_factory=list)


def parse_dataset_command(text: str) -> DatasetCommand | None:
    """Detect whether one ``--cmd`` value is a dataset command."""

    match = DATASET_COMMAND_RE.match(text)
    if match is None:
        return None
    return DatasetCommand(kind=_KINDS[match.group(1)], payload=match.group(2))


def rewrite(args: Sequence[str]) -> RewrittenArguments:
    """Replace the first ``--cmd datasets-*`` pair with guestinfo commands.

    Index 0 is the program name and always passes through. Raises
    ``DecodeError`` when the matched payload cannot be decoded.
    """

    common_args: list[str] = []
    generated: list[str] = []
    translated = False
    index = 0
    while index < len(args):
        if not translated and index > 0 and args[index] == CMD_FLAG and index < len(args) - 1:
            command = parse_dataset_command(args[index + 1])
            if command is not None:
                generated.extend(command.translate())
                translated = True
                index += 2
                continue
        common_args.append(args[index])
        index += 1
    return RewrittenArguments(common_args=common_args, generated=generated)
