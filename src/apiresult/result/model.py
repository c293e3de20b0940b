# topmark:header:start
#
#   project      : APIResult
#   file         : model.py
#   file_relpath : src/apiresult/result/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result document model: the versioned root record and its item-list section.

Only two operations mutate a root through this module:

- [`new_root`][apiresult.result.model.new_root] creates it (id 0, no
  diagnostics, no data);
- [`ResultRoot.set_items`][apiresult.result.model.ResultRoot.set_items]
  replaces the data section.

`id`, `error`, `warning`, and `note` are assigned by the output builder, which
alone decides their precedence.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apiresult.constants import ID_SUCCESS
from apiresult.core.machine.schemas import ApiKey, DataKey

if TYPE_CHECKING:
    from apiresult.diagnostic.model import Message


@dataclass(slots=True)
class ItemList:
    """The `data` section: a page of opaque, already-serializable items.

    Attributes:
        kind: Kind of items (e.g. ``"env"``); omitted on the wire when empty.
        verbosity: Verbosity label the items were rendered with; omitted when empty.
        fields: Names of the fields present in each item; omitted when empty.
        total_items: Number of items available.
        start_index: 1-based index of the first item.
        current_item_count: Number of items in this page.
        items: The items themselves, never inspected.
    """

    kind: str
    verbosity: str
    fields: list[str]
    total_items: int
    start_index: int
    current_item_count: int
    items: list[object]

    @classmethod
    def from_items(
        cls,
        kind: str,
        verbosity: str,
        fields: Sequence[str],
        items: Sequence[object],
    ) -> ItemList:
        """Build a single page holding every item (start index 1)."""
        count: int = len(items)
        return cls(
            kind=kind,
            verbosity=verbosity,
            fields=list(fields),
            total_items=count,
            start_index=1,
            current_item_count=count,
            items=list(items),
        )

    def to_dict(self) -> dict[str, object]:
        """Return the wire representation of the data section."""
        out: dict[str, object] = {}
        if self.kind:
            out[DataKey.KIND] = self.kind
        if self.verbosity:
            out[DataKey.VERBOSITY] = self.verbosity
        if self.fields:
            out[DataKey.FIELDS] = list(self.fields)
        out[DataKey.TOTAL_ITEMS] = self.total_items
        out[DataKey.START_INDEX] = self.start_index
        out[DataKey.CURRENT_ITEM_COUNT] = self.current_item_count
        out[DataKey.ITEMS] = list(self.items)
        return out


@dataclass(slots=True)
class ResultRoot:
    """Top-level result record.

    Invariant (maintained by the output builder): `id` is -1 iff `error` is set.
    """

    api_version: str
    context: str = ""
    id: int = ID_SUCCESS
    note: Message | None = None
    warning: Message | None = None
    error: Message | None = None
    data: ItemList | None = field(default=None)

    def set_items(
        self,
        kind: str,
        verbosity: str,
        fields: Sequence[str],
        items: Sequence[object],
    ) -> ResultRoot:
        """Replace the data section with `items`.

        Args:
            kind: Kind of items (use ``""`` to omit).
            verbosity: Verbosity label (use ``""`` to omit).
            fields: Field names available in each item.
            items: The items, in output order.

        Returns:
            This root, for chaining.
        """
        self.data = ItemList.from_items(kind, verbosity, fields, items)
        return self

    def to_dict(self) -> dict[str, object]:
        """Return the wire representation of the root."""
        out: dict[str, object] = {ApiKey.API_VERSION: self.api_version}
        if self.context:
            out[ApiKey.CONTEXT] = self.context
        out[ApiKey.ID] = self.id
        if self.note is not None:
            out[ApiKey.NOTE] = self.note.to_dict()
        if self.warning is not None:
            out[ApiKey.WARNING] = self.warning.to_dict()
        if self.error is not None:
            out[ApiKey.ERROR] = self.error.to_dict()
        if self.data is not None:
            out[ApiKey.DATA] = self.data.to_dict()
        return out


def new_root(api_version: str, context: str = "") -> ResultRoot:
    """Create a result root with id 0 and no diagnostics or data."""
    return ResultRoot(api_version=api_version, context=context)
