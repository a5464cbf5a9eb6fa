"""Dataset-level diff.

A dataset document is a JSON object holding a fixed set of named top-level
sections. Both snapshots are parsed, each section pair is diffed with the
dataset policy, and the non-empty fragments are joined into one object keyed
by section name.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .core.buffer import ByteBuffer
from .core.errors import JsonDiffError, PropertyMissingError
from .core.json_diff import DiffPolicy, diff
from .core.parser import parse
from .core.render import escape_string
from .core.types import JsonObject, JsonValue

logger = logging.getLogger(__name__)

DATASET_PROPERTIES = ("taxons", "characters", "states", "books")


def _section(root: JsonValue, name: str, side: str) -> JsonValue:
    if not isinstance(root, JsonObject) or name not in root:
        raise PropertyMissingError(name, side)
    return root.get(name)


def diff_dataset(
    old_text: str,
    new_text: str,
    properties: Sequence[str] = DATASET_PROPERTIES,
) -> str:
    """
    Diff two dataset documents.

    Returns:
        The combined diff object, or an empty string (not "{}") when no
        section produced a fragment.

    Raises:
        ParseError: If either document fails to parse.
        PropertyMissingError: If either document lacks one of ``properties``.
    """
    old_root = parse(old_text)
    new_root = parse(new_text)
    policy = DiffPolicy.dataset()

    entries: List[str] = []
    for name in properties:
        old_section = _section(old_root, name, "old")
        new_section = _section(new_root, name, "new")
        fragment = diff(old_section, new_section, policy)
        if fragment is None:
            logger.debug("section %s: no difference", name)
            continue
        logger.debug("section %s: %d byte fragment", name, len(fragment))
        entries.append(f"{escape_string(name)}:{fragment}")

    if not entries:
        return ""
    return "{" + ",".join(entries) + "}"


def diff_dataset_into(
    old_text: str,
    new_text: str,
    buf: ByteBuffer,
    properties: Sequence[str] = DATASET_PROPERTIES,
) -> int:
    """
    Write the dataset diff into ``buf`` instead of returning it.

    Returns the number of bytes written, or a negative sentinel
    (``-1 - error code``) when the diff fails. Nothing is written on failure.
    """
    try:
        result = diff_dataset(old_text, new_text, properties)
    except JsonDiffError as exc:
        logger.debug("dataset diff failed: %s", exc)
        return exc.error_type.sentinel
    buf.push_str(result)
    return len(result.encode("utf-8"))
