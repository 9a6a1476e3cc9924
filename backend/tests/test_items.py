# test_items.py - Pruebas unitarias para el modelo Item

import pytest
from pydantic import ValidationError

from inventory.models.item import Item, ItemCreate


@pytest.fixture
def new_item_data():
    return {"name": "Adam", "price": 9.99, "quantity": 5.0}


def test_item_create_has_no_id(new_item_data):
    item = ItemCreate(**new_item_data)
    assert item.name == "Adam"
    assert item.price == 9.99
    assert item.quantity == 5.0
    assert "id" not in item.model_dump()


def test_item_accepts_negative_values():
    item = ItemCreate(name="Broken", price=-1.5, quantity=-3.0)
    assert item.price == -1.5
    assert item.quantity == -3.0


def test_quantity_stays_float():
    item = ItemCreate(name="John", price=7.49, quantity=10)
    assert isinstance(item.quantity, float)


def test_item_is_frozen(new_item_data):
    item = Item(id="1", **new_item_data)
    with pytest.raises(ValidationError):
        item.price = 1.0


def test_item_str_is_single_readable_line(new_item_data):
    item = Item(id="7", **new_item_data)
    text = str(item)
    assert text == "Item(id=7, name=Adam, price=9.99, quantity=5.0)"
    assert "\n" not in text
