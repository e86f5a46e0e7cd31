import pytest

from order_state import Order
from pizza import CalzoneBuilder, InvalidArgument, NyPizzaBuilder, Size, Topping


def test_empty_summary():
    assert Order().summary() == "(empty order)"


def test_summary_lists_items_and_notes():
    order = Order(notes="ring the bell")
    order.add_item(NyPizzaBuilder(Size.LARGE).add_topping(Topping.ONION).add_topping(Topping.HAM).build())
    order.add_item(CalzoneBuilder().sauce_inside().build())
    assert order.summary() == (
        "1. Large NY pizza | Toppings: ham, onion\n"
        "2. Calzone (sauce inside)\n"
        "Notes: ring the bell"
    )


def test_order_toppings_union():
    order = Order()
    order.add_item(NyPizzaBuilder(Size.SMALL).add_topping(Topping.HAM).build())
    order.add_item(CalzoneBuilder().add_topping(Topping.HAM).add_topping(Topping.PEPPER).build())
    assert order.toppings() == {Topping.HAM, Topping.PEPPER}


def test_rejects_unbuilt_items():
    order = Order()
    with pytest.raises(InvalidArgument):
        order.add_item(NyPizzaBuilder(Size.SMALL))
    assert order.items == []
