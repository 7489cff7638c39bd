"""Unit tests for ProductStore.

Covers:
- Seed data and id counter.
- CRUD operations (list_all, get_by_id, save, delete).
- Validation order and boundaries.
- Atomic validate-then-mutate.
- Unknown-id updates.
"""

from __future__ import annotations

import pytest

from modules.products.exceptions import InvalidField, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import ProductStore

pytestmark = pytest.mark.unit


def _snapshot(store: ProductStore) -> list[tuple]:
    return [(p.id, p.name, p.price) for p in store.list_all()]


# ===========================================================================
# Instantiation
# ===========================================================================


class TestStoreInstantiation:
    def test_is_instance_of_interface(self, store):
        assert isinstance(store, IProductRepository)

    def test_seeds_three_products(self, store):
        assert _snapshot(store) == [
            (1, "Notebook", 3000.0),
            (2, "Mouse", 50.0),
            (3, "Teclado", 150.0),
        ]

    def test_next_id_after_seed_is_four(self, store):
        saved = store.save(Product("Monitor", 899.90))
        assert saved.id == 4

    def test_unseeded_store_starts_empty_at_one(self, empty_store):
        assert empty_store.list_all() == []
        assert empty_store.save(Product("Monitor", 899.90)).id == 1

    def test_custom_seed_rows(self):
        store = ProductStore(initial=[("Cabo", 9.9)])
        assert _snapshot(store) == [(1, "Cabo", 9.9)]

    def test_custom_seed_rows_advance_the_counter(self):
        store = ProductStore(initial=[("Cabo", 9.9), ("Fonte", 120.0)])
        assert store.save(Product("Monitor", 899.90)).id == 3

    def test_list_is_an_alias_of_list_all(self, store):
        assert store.list() == store.list_all()


# ===========================================================================
# list_all
# ===========================================================================


class TestListAll:
    def test_preserves_insertion_order(self, empty_store):
        for name in ("C", "A", "B"):
            empty_store.save(Product(name, 1.0))
        assert [p.name for p in empty_store.list_all()] == ["C", "A", "B"]

    def test_returns_defensive_copy(self, store):
        listed = store.list_all()
        listed.clear()
        listed.append(Product("Intruso", 1.0, id=99))
        assert store.count() == 3
        assert store.get_by_id(99) is None

    def test_returns_new_list_each_call(self, store):
        assert store.list_all() is not store.list_all()


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, store):
        product = store.get_by_id(2)
        assert product is not None
        assert product.name == "Mouse"

    @pytest.mark.parametrize("missing", [0, -1, 4, 99999])
    def test_returns_none_when_not_found(self, store, missing):
        assert store.get_by_id(missing) is None


# ===========================================================================
# save
# ===========================================================================


class TestSaveCreate:
    def test_assigns_id_and_appends(self, store):
        product = Product("Monitor", 899.90)
        saved = store.save(product)
        assert saved is product
        assert product.id == 4
        assert store.count() == 4
        assert store.list_all()[-1] is product

    def test_ids_strictly_increasing(self, empty_store):
        ids = [empty_store.save(Product(f"P{i}", 1.0 + i)).id for i in range(20)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 20

    def test_ids_not_reused_after_delete(self, store):
        assert store.delete(3) is True
        assert store.save(Product("Monitor", 899.90)).id == 4

    def test_saved_product_listed_exactly_once(self, store):
        saved = store.save(Product("Monitor", 899.90))
        matches = [p for p in store.list_all() if p.id == saved.id]
        assert len(matches) == 1


class TestSaveUpdate:
    def test_updates_in_place(self, store):
        original = store.get_by_id(1)
        store.save(Product("Notebook Atualizado", 3500.0, id=1))
        updated = store.get_by_id(1)
        assert updated is original
        assert updated.name == "Notebook Atualizado"
        assert updated.price == 3500.0
        assert store.count() == 3

    def test_update_keeps_position(self, store):
        store.save(Product("Mouse Sem Fio", 80.0, id=2))
        assert [p.id for p in store.list_all()] == [1, 2, 3]

    def test_repeated_update_is_idempotent(self, store):
        store.save(Product("Mouse Sem Fio", 80.0, id=2))
        first = _snapshot(store)
        store.save(Product("Mouse Sem Fio", 80.0, id=2))
        assert _snapshot(store) == first

    def test_unknown_id_raises_not_found(self, store):
        before = _snapshot(store)
        with pytest.raises(ProductNotFound):
            store.save(Product("Fantasma", 10.0, id=99999))
        assert _snapshot(store) == before


# ===========================================================================
# Validation
# ===========================================================================


class TestValidationRules:
    @pytest.mark.parametrize(
        "name, price, field, reason",
        [
            (None, 10.0, "name", "empty"),
            ("", 10.0, "name", "empty"),
            ("   ", 10.0, "name", "empty"),
            ("\t\n", 10.0, "name", "empty"),
            ("A" * 256, 10.0, "name", "too_long"),
            ("Produto", None, "price", "null"),
            ("Produto", float("nan"), "price", "not_finite"),
            ("Produto", float("inf"), "price", "not_finite"),
            ("Produto", float("-inf"), "price", "not_finite"),
            ("Produto", -50.0, "price", "negative"),
            ("Produto", -0.01, "price", "negative"),
            ("Produto", 0.0, "price", "zero"),
        ],
    )
    def test_rejected(self, store, name, price, field, reason):
        error = store.validate(Product(name, price))
        assert error is not None
        assert (error.field, error.reason) == (field, reason)

    def test_too_long_carries_limit(self, store):
        error = store.validate(Product("A" * 256, 10.0))
        assert error == InvalidField("name", "too_long", limit=255)

    @pytest.mark.parametrize(
        "name, price",
        [
            ("A" * 255, 10.0),
            ("P", 0.01),
            ("Produto 😀", 99.99),
            ("  Produto com espaços  ", 100.0),
            ("Produto", 999999.99),
        ],
    )
    def test_accepted(self, store, name, price):
        assert store.validate(Product(name, price)) is None

    def test_name_checked_before_price(self, store):
        error = store.validate(Product("", -5.0))
        assert error.field == "name"

    def test_validate_does_not_raise(self, store):
        assert isinstance(store.validate(Product()), InvalidField)


class TestSaveIsAtomic:
    @pytest.mark.parametrize(
        "product",
        [
            Product("", 100.0),
            Product("Produto", 0.0),
            Product("Produto", None),
            Product("A" * 256, 10.0),
            Product("", 100.0, id=1),
            Product("Notebook", -1.0, id=1),
        ],
    )
    def test_rejected_save_leaves_store_unchanged(self, store, product):
        before = _snapshot(store)
        with pytest.raises(InvalidField):
            store.save(product)
        assert _snapshot(store) == before

    def test_rejected_new_product_gets_no_id(self, store):
        product = Product("Produto", 0.0)
        with pytest.raises(InvalidField):
            store.save(product)
        assert product.id is None

    def test_rejected_save_does_not_consume_id(self, store):
        with pytest.raises(InvalidField):
            store.save(Product("", 10.0))
        assert store.save(Product("Monitor", 899.90)).id == 4


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_removes_existing_product(self, store):
        assert store.delete(2) is True
        assert store.get_by_id(2) is None
        assert [p.id for p in store.list_all()] == [1, 3]

    def test_returns_true_only_once(self, store):
        assert store.delete(2) is True
        after_first = _snapshot(store)
        assert store.delete(2) is False
        assert store.delete(2) is False
        assert _snapshot(store) == after_first

    @pytest.mark.parametrize("missing", [0, -1, 99999])
    def test_returns_false_for_nonexistent(self, store, missing):
        assert store.delete(missing) is False
        assert store.count() == 3
