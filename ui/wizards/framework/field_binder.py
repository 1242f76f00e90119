# -*- coding: utf-8 -*-
"""
Field Binder - path-addressed updates of a wizard draft.

A draft is a tree of dicts and lists. Every function here returns a new
draft: only the containers on the path to the changed field are copied,
everything else is shared with the previous draft. Nothing is validated.

Paths are either dotted strings ("testator.name", "beneficiaries.0.share")
or sequences of keys and indexes (("beneficiaries", 0, "share")).
"""

from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple, Union

FieldPath = Union[str, Sequence[Union[str, int]]]
Draft = Dict[str, Any]

_MISSING = object()


def split_path(path: FieldPath) -> Tuple[Union[str, int], ...]:
    """Normalize a field path to a tuple of keys/indexes."""
    if isinstance(path, str):
        parts = []
        for part in path.split("."):
            if part.isdigit():
                parts.append(int(part))
            else:
                parts.append(part)
        keys = tuple(parts)
    else:
        keys = tuple(path)

    if not keys or any(k == "" for k in keys):
        raise ValueError(f"Invalid field path: {path!r}")
    return keys


def join_path(*parts: Union[FieldPath, int]) -> Tuple[Union[str, int], ...]:
    """
    Concatenate path fragments, e.g. join_path("trustees", 0, "name").

    Empty sequences contribute nothing, so a list of plain values can use
    ``()`` as the item-relative path.
    """
    keys: List[Union[str, int]] = []
    for part in parts:
        if isinstance(part, int):
            keys.append(part)
        elif not isinstance(part, str) and len(part) == 0:
            continue
        else:
            keys.extend(split_path(part))
    return tuple(keys)


def get_value(draft: Any, path: FieldPath, default: Any = None) -> Any:
    """Read the value at ``path``; ``default`` when any step is missing."""
    node = draft
    for key in split_path(path):
        try:
            node = node[key]
        except (KeyError, IndexError, TypeError):
            return default
    return node


def _child(node: Any, key: Union[str, int]) -> Any:
    if isinstance(node, list):
        if not isinstance(key, int):
            raise TypeError(f"List index must be an integer, got {key!r}")
        return node[key]
    if isinstance(node, Mapping):
        return node.get(key, _MISSING)
    raise TypeError(f"Cannot descend into {type(node).__name__} with key {key!r}")


def _assoc(node: Any, keys: Tuple[Union[str, int], ...], fn: Callable[[Any], Any]) -> Any:
    """Return a copy of ``node`` with ``fn`` applied at ``keys``."""
    key, rest = keys[0], keys[1:]
    current = _child(node, key)

    if rest:
        # Missing intermediate sections start out empty
        if current is _MISSING or current is None:
            current = {}
        new_value = _assoc(current, rest, fn)
    else:
        new_value = fn(None if current is _MISSING else current)

    if isinstance(node, list):
        copied = list(node)
    else:
        copied = dict(node)
    copied[key] = new_value
    return copied


def update_in(draft: Draft, path: FieldPath, fn: Callable[[Any], Any]) -> Draft:
    """Return a new draft with ``fn(old_value)`` stored at ``path``."""
    return _assoc(draft, split_path(path), fn)


def bind(draft: Draft, path: FieldPath, value: Any) -> Draft:
    """Return a new draft with the field at ``path`` replaced by ``value``."""
    return update_in(draft, path, lambda _old: value)


def _as_list(value: Any, path: FieldPath) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"Field {path!r} is not a list")
    return value


def insert_at(draft: Draft, path: FieldPath, index: int, value: Any) -> Draft:
    """
    Insert ``value`` into the list at ``path``.

    ``index`` may equal the list length (append); anything outside
    ``0..len`` raises IndexError. A missing list is treated as empty.
    """
    def _insert(old):
        items = list(_as_list(old, path))
        position = len(items) if index is None else index
        if position < 0 or position > len(items):
            raise IndexError(f"Insert index {index} out of range for {path!r}")
        items.insert(position, value)
        return items

    return update_in(draft, path, _insert)


def append_to(draft: Draft, path: FieldPath, value: Any) -> Draft:
    """Append ``value`` to the list at ``path``."""
    return insert_at(draft, path, None, value)


def remove_at(draft: Draft, path: FieldPath, index: int) -> Draft:
    """Remove the item at ``index`` from the list at ``path``."""
    def _remove(old):
        items = list(_as_list(old, path))
        if index < 0 or index >= len(items):
            raise IndexError(f"Remove index {index} out of range for {path!r}")
        del items[index]
        return items

    return update_in(draft, path, _remove)


def replace_at(draft: Draft, path: FieldPath, index: int, value: Any) -> Draft:
    """Replace the item at ``index`` of the list at ``path``."""
    def _replace(old):
        items = list(_as_list(old, path))
        if index < 0 or index >= len(items):
            raise IndexError(f"Replace index {index} out of range for {path!r}")
        items[index] = value
        return items

    return update_in(draft, path, _replace)


def toggle_in(draft: Draft, path: FieldPath, value: Any) -> Draft:
    """Add ``value`` to the list at ``path``, or remove it if present."""
    def _toggle(old):
        items = _as_list(old, path)
        if value in items:
            return [item for item in items if item != value]
        return list(items) + [value]

    return update_in(draft, path, _toggle)
