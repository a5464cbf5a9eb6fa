"""Structural JSON diff for hazojsondiff.

Compares two value trees and renders a compact JSON fragment describing what
changed, or nothing at all when the trees are equivalent.

Fragment shapes:
- scalar change:  {"old":<old>,"new":<new>}
- array:          {"added":[...],"removed":[...],"modified":[...]}
- object:         {"added":{...},"removed":{...},"modified":{...}}

Ordering guarantees:
- object sections are emitted as added, removed, modified; keys within each
  section are sorted
- array positions are compared by index; a length difference yields a tail
  under added OR removed, never both
- the first occurrence of a duplicated object key is the one compared
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .buffer import ByteBuffer
from .render import escape_string, render
from .types import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)


@dataclass(frozen=True)
class DiffPolicy:
    """
    Output-shape configuration for a diff.

    Attributes:
        force_empty_array_sections: If True, equal arrays still produce
            {"added":[],"removed":[]} so callers can tell "compared, no
            change" apart from "not compared".
        flatten_object_modifications: If True, the top-level object's
            modified members are merged into the result instead of being
            nested under "modified".

    Flags apply to the top-level comparison only; nested values are always
    diffed with the default policy.
    """

    force_empty_array_sections: bool = False
    flatten_object_modifications: bool = False

    @classmethod
    def default(cls) -> "DiffPolicy":
        return cls()

    @classmethod
    def dataset(cls) -> "DiffPolicy":
        """Policy used for each section of a dataset diff."""
        return cls(force_empty_array_sections=True)

    @classmethod
    def flat(cls) -> "DiffPolicy":
        return cls(flatten_object_modifications=True)


_DEFAULT_POLICY = DiffPolicy()


def diff(
    old: JsonValue, new: JsonValue, policy: Optional[DiffPolicy] = None
) -> Optional[str]:
    """Return the diff fragment between two trees, or None if they are equal."""
    return _diff(old, new, policy or _DEFAULT_POLICY)


def diff_into(
    old: JsonValue,
    new: JsonValue,
    buf: ByteBuffer,
    policy: Optional[DiffPolicy] = None,
) -> bool:
    """Write the diff fragment into ``buf``. Returns False when nothing was written."""
    fragment = _diff(old, new, policy or _DEFAULT_POLICY)
    if fragment is None:
        return False
    buf.push_str(fragment)
    return True


def _diff(old: JsonValue, new: JsonValue, policy: DiffPolicy) -> Optional[str]:
    if isinstance(old, JsonNull) and isinstance(new, JsonNull):
        return None

    if type(old) is type(new):
        if isinstance(old, (JsonString, JsonNumber, JsonBoolean)):
            if old.value == new.value:
                return None
            return _change(render(old), render(new))
        if isinstance(old, JsonArray):
            return _diff_arrays(old, new, policy.force_empty_array_sections)
        if isinstance(old, JsonObject):
            return _diff_objects(old, new, policy.flatten_object_modifications)

    # Mismatched variants: compare rendered text.
    old_text, new_text = render(old), render(new)
    if old_text == new_text:
        return None
    return _change(old_text, new_text)


def _change(old_text: str, new_text: str) -> str:
    return f'{{"old":{old_text},"new":{new_text}}}'


def _diff_arrays(old: JsonArray, new: JsonArray, force_empty: bool) -> Optional[str]:
    modified: List[str] = []
    for a, b in zip(old.items, new.items):
        if isinstance(a, JsonObject) and isinstance(b, JsonObject):
            fragment = _diff_objects(a, b, flatten=True)
            if fragment is not None:
                modified.append(fragment)
        else:
            a_text, b_text = render(a), render(b)
            if a_text != b_text:
                modified.append(_change(a_text, b_text))

    if not modified and len(old) == len(new) and not force_empty:
        return None

    added = ",".join(render(v) for v in new.items[len(old):])
    removed = ",".join(render(v) for v in old.items[len(new):])
    sections = [f'"added":[{added}]', f'"removed":[{removed}]']
    if modified:
        sections.append(f'"modified":[{",".join(modified)}]')
    return "{" + ",".join(sections) + "}"


def _first_members(obj: JsonObject) -> Dict[str, JsonValue]:
    members: Dict[str, JsonValue] = {}
    for key, value in obj.members:
        members.setdefault(key, value)
    return members


def _diff_objects(old: JsonObject, new: JsonObject, flatten: bool) -> Optional[str]:
    old_members = _first_members(old)
    new_members = _first_members(new)

    added: List[str] = []
    removed: List[str] = []
    modified: List[str] = []
    for key in sorted(old_members.keys() | new_members.keys()):
        a = old_members.get(key)
        b = new_members.get(key)
        if b is None:
            removed.append(f"{escape_string(key)}:{render(a)}")
        elif a is None:
            added.append(f"{escape_string(key)}:{render(b)}")
        else:
            fragment = _diff(a, b, _DEFAULT_POLICY)
            if fragment is not None:
                modified.append(f"{escape_string(key)}:{fragment}")

    sections: List[str] = []
    if added:
        sections.append('"added":{' + ",".join(added) + "}")
    if removed:
        sections.append('"removed":{' + ",".join(removed) + "}")
    if modified:
        if flatten:
            sections.extend(modified)
        else:
            sections.append('"modified":{' + ",".join(modified) + "}")
    if not sections:
        return None
    return "{" + ",".join(sections) + "}"
