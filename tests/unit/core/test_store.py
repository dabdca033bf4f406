"""Unit tests for the selection store."""

import pytest
from agentkeys.core.store import SelectionStore
from agentkeys.models.record import ItemRecord, VaultRecord


@pytest.fixture
def store() -> SelectionStore:
    """Store with three records, the first one selected."""
    return SelectionStore(
        [
            VaultRecord(vault="Personal"),
            ItemRecord(item="GitHub", vault="Work"),
            VaultRecord(vault="Shared"),
        ],
        {0},
    )


class TestSelectionStoreInit:
    """Tests for SelectionStore construction."""

    def test_empty_store(self) -> None:
        """Default store has no records and no selection."""
        store = SelectionStore()
        assert store.count() == 0
        assert len(store) == 0
        assert store.selected == frozenset()

    def test_selected_out_of_range_raises(self) -> None:
        """Selection must refer to existing records."""
        with pytest.raises(IndexError):
            SelectionStore([VaultRecord(vault="Personal")], {1})

    def test_negative_selection_raises(self) -> None:
        """Negative positions are rejected."""
        with pytest.raises(IndexError):
            SelectionStore([VaultRecord(vault="Personal")], {-1})

    def test_records_keep_order(self, store: SelectionStore) -> None:
        """Records are kept in the order given."""
        assert store.labels == ["Vault Personal", "Item GitHub in Vault Work", "Vault Shared"]


class TestToggle:
    """Tests for toggle and explicit selection."""

    def test_toggle_selects(self, store: SelectionStore) -> None:
        """Toggling an unselected record selects it."""
        store.toggle(1)
        assert store.selected == {0, 1}

    def test_toggle_deselects(self, store: SelectionStore) -> None:
        """Toggling a selected record deselects it."""
        store.toggle(0)
        assert store.selected == frozenset()

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_toggle_twice_is_identity(self, store: SelectionStore, position: int) -> None:
        """Toggling the same position twice restores the selection."""
        before = store.selected
        store.toggle(position)
        store.toggle(position)
        assert store.selected == before

    def test_toggle_out_of_range_leaves_state(self, store: SelectionStore) -> None:
        """Out-of-range toggle raises and does not change the selection."""
        with pytest.raises(IndexError, match="out of range"):
            store.toggle(3)
        assert store.selected == {0}

    def test_toggle_on_empty_store_raises(self) -> None:
        """An empty store has no valid positions."""
        with pytest.raises(IndexError):
            SelectionStore().toggle(0)

    def test_set_selected(self, store: SelectionStore) -> None:
        """set_selected enables and disables explicitly."""
        store.set_selected(2, True)
        store.set_selected(0, False)
        assert store.selected == {2}

    def test_set_selected_is_idempotent(self, store: SelectionStore) -> None:
        """Enabling an enabled record keeps it enabled."""
        store.set_selected(0, True)
        assert store.is_selected(0)

    def test_select_all_and_none(self, store: SelectionStore) -> None:
        """select_all and select_none cover every position."""
        store.select_all()
        assert store.selected == {0, 1, 2}
        store.select_none()
        assert store.selected == frozenset()


class TestQueries:
    """Tests for read-only queries."""

    def test_is_selected(self, store: SelectionStore) -> None:
        """is_selected reflects membership."""
        assert store.is_selected(0)
        assert not store.is_selected(1)

    def test_entries(self, store: SelectionStore) -> None:
        """entries pairs each record with its state."""
        assert list(store.entries()) == [
            (VaultRecord(vault="Personal"), True),
            (ItemRecord(item="GitHub", vault="Work"), False),
            (VaultRecord(vault="Shared"), False),
        ]

    def test_selected_is_snapshot(self, store: SelectionStore) -> None:
        """The selected snapshot does not follow later changes."""
        snapshot = store.selected
        store.toggle(1)
        assert snapshot == {0}

    def test_dirty_tracks_changes(self, store: SelectionStore) -> None:
        """dirty is True only while the selection differs from the initial one."""
        assert not store.dirty
        store.toggle(2)
        assert store.dirty
        store.toggle(2)
        assert not store.dirty
