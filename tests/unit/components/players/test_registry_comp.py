"""Unit tests for groupgrid.components.players.registry_comp."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from groupgrid.components.players import PlayerRegistry, RegistryConfig
from groupgrid.helpers.dto.players_dto import Player
from groupgrid.helpers.exceptions import CapacityExceededError, DuplicatePlayerError, PlayerNotFoundError


class TestRegistryConfig:
    @pytest.mark.unit
    def test_default_capacity(self) -> None:
        assert RegistryConfig().capacity == 100

    @pytest.mark.unit
    @pytest.mark.parametrize("capacity", [0, -1])
    def test_non_positive_capacity_rejected(self, capacity: int) -> None:
        with pytest.raises(ValueError, match="capacity"):
            RegistryConfig(capacity=capacity)


class TestAllocateId:
    """Test PlayerRegistry.allocate_id()."""

    @pytest.mark.unit
    def test_ids_are_sequential_from_zero(self, registry: PlayerRegistry) -> None:
        assert [registry.allocate_id() for _ in range(5)] == [0, 1, 2, 3, 4]
        assert registry.issued() == 5

    @pytest.mark.unit
    def test_capacity_exceeded_after_capacity_ids(self, small_registry: PlayerRegistry) -> None:
        issued = [small_registry.allocate_id() for _ in range(3)]

        with pytest.raises(CapacityExceededError) as exc_info:
            small_registry.allocate_id()

        assert issued == [0, 1, 2]
        assert exc_info.value.capacity == 3
        assert "max players reached" in str(exc_info.value)

    @pytest.mark.unit
    def test_failed_allocation_does_not_advance_counter(self, small_registry: PlayerRegistry) -> None:
        for _ in range(3):
            small_registry.allocate_id()

        for _ in range(5):
            with pytest.raises(CapacityExceededError):
                small_registry.allocate_id()

        assert small_registry.issued() == 3

    @pytest.mark.unit
    def test_capacity_counts_issued_ids_not_stored_players(self, small_registry: PlayerRegistry) -> None:
        """Ids handed out but never added still count against capacity."""
        for _ in range(3):
            small_registry.allocate_id()

        assert small_registry.count() == 0
        with pytest.raises(CapacityExceededError):
            small_registry.allocate_id()

    @pytest.mark.unit
    def test_concurrent_allocation_yields_distinct_ids(self) -> None:
        registry = PlayerRegistry(RegistryConfig(capacity=100))

        def attempt(_: int) -> int | None:
            try:
                return registry.allocate_id()
            except CapacityExceededError:
                return None

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(attempt, range(250)))

        ids = [r for r in results if r is not None]
        assert len(ids) == 100
        assert sorted(ids) == list(range(100))
        assert results.count(None) == 150
        assert registry.issued() == 100


class TestAdd:
    """Test PlayerRegistry.add()."""

    @pytest.mark.unit
    def test_add_sets_group_to_own_id(self, registry: PlayerRegistry) -> None:
        player = Player(player_id=7, x=1.0, y=1.0, group_id=42)

        registry.add(player)

        assert player.group_id == 7
        assert registry.count() == 1

    @pytest.mark.unit
    def test_duplicate_id_rejected_without_side_effects(self, registry: PlayerRegistry) -> None:
        original = Player(player_id=0, x=1.0, y=1.0)
        registry.add(original)
        original.group_id = 5

        with pytest.raises(DuplicatePlayerError) as exc_info:
            registry.add(Player(player_id=0, x=9.0, y=9.0))

        assert exc_info.value.player_id == 0
        assert registry.count() == 1
        assert registry.get(0) is original
        assert original.group_id == 5

    @pytest.mark.unit
    def test_concurrent_add_same_id_only_one_succeeds(self, registry: PlayerRegistry) -> None:
        def attempt(i: int) -> bool:
            try:
                registry.add(Player(player_id=3, x=float(i % 10), y=0.0))
                return True
            except DuplicatePlayerError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(attempt, range(64)))

        assert outcomes.count(True) == 1
        assert registry.count() == 1


class TestGet:
    """Test PlayerRegistry.get()."""

    @pytest.mark.unit
    def test_get_returns_shared_instance(self, registry: PlayerRegistry) -> None:
        player = Player(player_id=0, x=2.0, y=3.0)
        registry.add(player)

        assert registry.get(0) is player

    @pytest.mark.unit
    def test_get_unknown_raises_not_found(self, registry: PlayerRegistry) -> None:
        with pytest.raises(PlayerNotFoundError) as exc_info:
            registry.get(99)

        assert exc_info.value.player_id == 99


class TestSnapshot:
    @pytest.mark.unit
    def test_snapshot_is_sorted_copy(self, registry: PlayerRegistry) -> None:
        for pid in (2, 0, 1):
            registry.add(Player(player_id=pid, x=float(pid), y=0.0))

        views = registry.snapshot()

        assert [v.player_id for v in views] == [0, 1, 2]
        registry.get(1).group_id = 0
        assert views[1].group_id == 1
