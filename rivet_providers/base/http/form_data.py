"""Form-encoded request bodies.

``FormData`` keeps fields as ordered ``(name, value)`` pairs so repeated
names survive encoding. ``to_dict`` flattens it into a plain mapping for
error reporting, the last value of a repeated name winning.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple, Union
from urllib.parse import urlencode

from ..constants import FORM_CONTENT_TYPE

FormFields = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class FormData:
    """Ordered collection of form fields."""

    content_type = FORM_CONTENT_TYPE

    def __init__(self, fields: FormFields | None = None) -> None:
        self._fields: List[Tuple[str, str]] = []
        if fields is None:
            return
        items = fields.items() if isinstance(fields, Mapping) else fields
        for name, value in items:
            self.append(name, value)

    def append(self, name: str, value: Any) -> None:
        self._fields.append((str(name), value if isinstance(value, str) else str(value)))

    def entries(self) -> Iterator[Tuple[str, str]]:
        return iter(self._fields)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._fields)

    def encode(self) -> str:
        return urlencode(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"FormData({self._fields!r})"


__all__ = ["FormData", "FormFields"]
