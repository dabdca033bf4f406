"""Selection state over the records of an agent configuration.

This module provides the SelectionStore class, the only mutable state
of the core. Records and their selection are owned together so that
position-keyed selection can never drift from record order.
"""

from collections.abc import Iterable, Iterator

from agentkeys.models.record import Record


class SelectionStore:
    """Ordered records plus the set of positions that are active.

    Selected records are written as plain blocks, unselected ones as
    commented-out blocks. Records are immutable and never reordered;
    only the selection changes.

    Example:
        >>> store = SelectionStore([VaultRecord("Personal")], {0})
        >>> store.toggle(0)
        >>> store.is_selected(0)
        False
    """

    def __init__(self, records: Iterable[Record] = (), selected: Iterable[int] = ()) -> None:
        """Initialize SelectionStore.

        Args:
            records: Records in file order.
            selected: Positions of active records.

        Raises:
            IndexError: If a selected position does not refer to a record.
        """
        self._records: tuple[Record, ...] = tuple(records)
        self._selected: set[int] = set()
        for position in selected:
            self._check_position(position)
            self._selected.add(position)
        self._initial: frozenset[int] = frozenset(self._selected)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"SelectionStore(records={len(self._records)}, selected={sorted(self._selected)})"

    @property
    def records(self) -> tuple[Record, ...]:
        """Records in file order."""
        return self._records

    @property
    def selected(self) -> frozenset[int]:
        """Snapshot of the currently selected positions."""
        return frozenset(self._selected)

    @property
    def labels(self) -> list[str]:
        """Display labels for all records, in order."""
        return [record.label for record in self._records]

    @property
    def dirty(self) -> bool:
        """Whether the selection differs from the initial selection."""
        return self._selected != self._initial

    def count(self) -> int:
        """Return the number of records."""
        return len(self._records)

    def is_selected(self, position: int) -> bool:
        """Check whether the record at position is active."""
        return position in self._selected

    def toggle(self, position: int) -> None:
        """Flip the selection of the record at position.

        Raises:
            IndexError: If position is out of range. The selection is unchanged.
        """
        self._check_position(position)
        if position in self._selected:
            self._selected.discard(position)
        else:
            self._selected.add(position)

    def set_selected(self, position: int, active: bool) -> None:
        """Explicitly enable or disable the record at position.

        Raises:
            IndexError: If position is out of range.
        """
        self._check_position(position)
        if active:
            self._selected.add(position)
        else:
            self._selected.discard(position)

    def select_all(self) -> None:
        """Mark every record as active."""
        self._selected = set(range(len(self._records)))

    def select_none(self) -> None:
        """Mark every record as inactive."""
        self._selected.clear()

    def entries(self) -> Iterator[tuple[Record, bool]]:
        """Yield (record, selected) pairs in file order."""
        for position, record in enumerate(self._records):
            yield record, position in self._selected

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._records):
            msg = f"Position {position} out of range for {len(self._records)} record(s)"
            raise IndexError(msg)
