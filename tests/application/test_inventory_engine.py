"""Integration tests for the InventoryEngine CRUD, query and quantity operations."""

from collections import Counter
from decimal import Decimal

import pytest

from pms.application.inventory_engine import InventoryEngine
from pms.domain.exceptions import StoreError, ValidationError
from tests.fakes import FailingCatalogStore, FakeCatalogStore, make_item


def _setup(*items):
    store = FakeCatalogStore(list(items))
    return store, InventoryEngine(store)


class TestAddAndRead:

    def test_add_assigns_sequential_ids(self):
        _, engine = _setup()
        first = engine.add(make_item("Widget"))
        second = engine.add(make_item("Gadget"))
        assert (first.id, second.id) == (1, 2)

    def test_add_then_get_round_trip(self):
        _, engine = _setup()
        item = make_item("Widget", "Tools", "10.50", 5, description="Blue")
        stored = engine.add(item)

        fetched = engine.get_by_id(stored.id)
        assert fetched == item.copy(id=stored.id)

    def test_add_keeps_explicit_id(self):
        _, engine = _setup()
        stored = engine.add(make_item(item_id=42))
        assert stored.id == 42
        assert engine.get_by_id(42) is not None

    def test_add_validates_before_store_call(self):
        store, engine = _setup()
        with pytest.raises(ValidationError):
            engine.add(make_item(name=""))
        assert store.count == 0

    def test_add_propagates_store_error(self):
        engine = InventoryEngine(FailingCatalogStore(fail_on={"put"}))
        with pytest.raises(StoreError, match="put"):
            engine.add(make_item())

    def test_get_missing_returns_none(self):
        _, engine = _setup()
        assert engine.get_by_id(99) is None

    def test_get_all_is_idempotent(self):
        _, engine = _setup(make_item("A"), make_item("B"), make_item("C"))
        first = engine.get_all()
        second = engine.get_all()
        assert Counter(i.id for i in first) == Counter(i.id for i in second)
        assert first == second

    def test_mutating_a_returned_item_does_not_touch_the_store(self):
        _, engine = _setup(make_item(quantity=5))
        item = engine.get_by_id(1)
        item.stock_quantity = 500
        assert engine.get_by_id(1).stock_quantity == 5


class TestUpdateAndDelete:

    def test_update_replaces_all_fields(self):
        _, engine = _setup(make_item("Widget", "Tools", "10", 5))
        changed = make_item("Widget XL", "Hardware", "12.00", 7, item_id=1, description="Big")

        assert engine.update(changed) is True
        assert engine.get_by_id(1) == changed

    def test_update_missing_returns_false(self):
        _, engine = _setup()
        assert engine.update(make_item(item_id=99)) is False

    def test_update_store_failure_returns_false(self):
        engine = InventoryEngine(FailingCatalogStore([make_item()], fail_on={"update"}))
        assert engine.update(make_item(item_id=1, quantity=9)) is False

    def test_update_invalid_item_raises(self):
        _, engine = _setup(make_item())
        with pytest.raises(ValidationError):
            engine.update(make_item(item_id=1, price="-5"))

    def test_delete_existing(self):
        _, engine = _setup(make_item())
        assert engine.delete(1) is True
        assert engine.get_by_id(1) is None

    def test_delete_missing_returns_false(self):
        _, engine = _setup()
        assert engine.delete(1) is False

    def test_delete_store_failure_returns_false(self):
        engine = InventoryEngine(FailingCatalogStore([make_item()], fail_on={"delete"}))
        assert engine.delete(1) is False


class TestQueries:

    def _engine(self):
        _, engine = _setup(
            make_item("Laptop", "Electronics", "75000", 10, description="Gaming"),
            make_item("Mouse", "Peripherals", "2500", 50),
            make_item("Monitor", "ELECTRONICS", "35000", 10),
        )
        return engine

    def test_filter_by_category(self):
        assert [i.name for i in self._engine().filter_by_category("electronics")] == [
            "Laptop",
            "Monitor",
        ]

    def test_search(self):
        assert [i.name for i in self._engine().search("gam")] == ["Laptop"]

    def test_search_blank_returns_all(self):
        assert len(self._engine().search("")) == 3

    def test_group_by_category(self):
        groups = self._engine().group_by_category()
        assert {k: len(v) for k, v in groups.items()} == {"Electronics": 2, "Peripherals": 1}

    def test_total_inventory_value(self):
        assert self._engine().calculate_total_inventory_value() == Decimal("1225000")

    def test_total_inventory_value_empty_store(self):
        _, engine = _setup()
        assert engine.calculate_total_inventory_value() == Decimal("0")

    def test_total_matches_manual_sum(self):
        engine = self._engine()
        expected = sum(i.price * i.stock_quantity for i in engine.get_all())
        assert engine.calculate_total_inventory_value() == expected

    def test_find_by_name_and_category(self):
        found = self._engine().find_by_name_and_category("MOUSE", "peripherals")
        assert found is not None and found.id == 2

    def test_find_returns_lowest_id_duplicate(self):
        _, engine = _setup(make_item("Widget"), make_item("Widget"), make_item("Widget"))
        assert engine.find_by_name_and_category("widget", "tools").id == 1


class TestAddQuantity:

    def test_adds_to_stock(self):
        _, engine = _setup(make_item(quantity=5))
        assert engine.add_quantity(1, 3) is True
        assert engine.get_by_id(1).stock_quantity == 8

    def test_negative_delta_within_stock(self):
        _, engine = _setup(make_item(quantity=5))
        assert engine.add_quantity(1, -2) is True
        assert engine.get_by_id(1).stock_quantity == 3

    def test_result_below_zero_rejected(self):
        _, engine = _setup(make_item(quantity=5))
        with pytest.raises(ValidationError):
            engine.add_quantity(1, -6)
        assert engine.get_by_id(1).stock_quantity == 5

    def test_missing_item(self):
        _, engine = _setup()
        assert engine.add_quantity(1, 3) is False


class TestRemoveQuantity:

    @pytest.mark.parametrize("amount", [5, 6, 100])
    def test_removing_whole_stock_deletes_item(self, amount):
        _, engine = _setup(make_item(quantity=5))
        assert engine.remove_quantity(1, amount) is True
        assert engine.get_by_id(1) is None

    @pytest.mark.parametrize("amount", [0, 1, 4])
    def test_partial_removal_keeps_item(self, amount):
        _, engine = _setup(make_item(quantity=5))
        assert engine.remove_quantity(1, amount) is True
        assert engine.get_by_id(1).stock_quantity == 5 - amount

    def test_negative_amount_rejected_without_mutation(self):
        _, engine = _setup(make_item(quantity=5))
        with pytest.raises(ValidationError, match="cannot be negative"):
            engine.remove_quantity(1, -1)
        assert engine.get_by_id(1).stock_quantity == 5

    def test_missing_item(self):
        _, engine = _setup()
        assert engine.remove_quantity(1, 1) is False


class TestSeed:

    def test_seeds_empty_store(self):
        store, engine = _setup()
        added = engine.seed_if_empty([make_item("A", item_id=9), make_item("B")])
        assert added == 2
        assert [i.id for i in engine.get_all()] == [1, 2]
        assert store.count == 2

    def test_leaves_populated_store_alone(self):
        store, engine = _setup(make_item("Existing"))
        assert engine.seed_if_empty([make_item("A"), make_item("B")]) == 0
        assert store.count == 1
