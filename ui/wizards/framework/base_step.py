# -*- coding: utf-8 -*-
"""
Step definitions for wizards.

A wizard is described by an ordered table of StepDefinition entries. Each
step renders a view fragment: a list of FieldSpec entries bound to the
current draft. The table is rebuilt whenever the draft changes, so every
fragment shows live values.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .field_binder import Draft, FieldPath, get_value, join_path, split_path

OnChange = Callable[[FieldPath, Any], None]


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @classmethod
    def ok(cls) -> "StepValidationResult":
        return cls(is_valid=True, errors=[], warnings=[])


class FieldKind:
    """Widget kinds a FieldSpec can ask for."""
    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    MULTI_SELECT = "multi_select"
    DATE = "date"
    NUMBER = "number"
    LIST = "list"
    HEADING = "heading"


@dataclass
class FieldSpec:
    """
    One bound input in a step's view fragment.

    ``options`` holds (value, label) pairs for select kinds. For LIST fields
    ``item_fields`` describes the inputs of each list item (paths relative
    to the item) and ``item_template`` is the value a new item starts from.
    """
    label: str
    path: Optional[Tuple] = None
    kind: str = FieldKind.TEXT
    value: Any = None
    options: Sequence[Tuple[Any, str]] = ()
    required: bool = False
    placeholder: str = ""
    help_text: str = ""
    item_fields: Sequence["FieldSpec"] = ()
    item_template: Any = None
    item_label: str = ""
    min_items: int = 0
    on_change: Optional[OnChange] = field(default=None, repr=False, compare=False)

    def set(self, value: Any):
        """Push a new value for this field into the draft."""
        if self.on_change is None or self.path is None:
            raise RuntimeError(f"Field {self.label!r} is not bound to a draft")
        self.on_change(self.path, value)

    def item_path(self, index: int, relative: FieldPath) -> Tuple:
        """Absolute path of a sub-field of list item ``index``."""
        return join_path(self.path, index, relative)


@dataclass(frozen=True)
class StepDefinition:
    """A wizard step: title, description and a render function."""
    title: str
    description: str
    render: Callable[[Draft, OnChange], List[FieldSpec]]

    def fields(self, draft: Draft, on_change: OnChange) -> List[FieldSpec]:
        """Render the step against a draft."""
        return self.render(draft, on_change)


def bound(draft: Draft, on_change: OnChange, path: FieldPath, label: str,
          kind: str = FieldKind.TEXT, **kwargs) -> FieldSpec:
    """Build a FieldSpec whose value is read from the draft at ``path``."""
    keys = split_path(path)
    default = [] if kind in (FieldKind.LIST, FieldKind.MULTI_SELECT) else None
    if kind == FieldKind.CHECKBOX:
        default = False
    return FieldSpec(
        label=label,
        path=keys,
        kind=kind,
        value=get_value(draft, keys, default),
        on_change=on_change,
        **kwargs
    )


def heading(text: str, help_text: str = "") -> FieldSpec:
    """An unbound section heading inside a fragment."""
    return FieldSpec(label=text, kind=FieldKind.HEADING, help_text=help_text)
