"""Unit tests for the order placement pipeline"""

import pytest
from unittest.mock import MagicMock
from bank_bistro.constants import DishCategory
from bank_bistro.restaurant import (
    Appetizer,
    Customer,
    DiscountPolicy,
    Entree,
    Menu,
    OperationLog,
    Order,
    build_place_order_pipeline,
    record_order,
    with_discount,
    with_logging
)
from bank_bistro.utils.errors import ConfigurationError


@pytest.fixture
def menu():
    menu = Menu(DishCategory.ENTREE)
    menu.add_dish(Entree(name="Grilled Salmon", price=24.99))
    menu.add_dish(Entree(name="Ribeye Steak", price=29.99))
    menu.add_dish(Appetizer(name="Bruschetta", price=8.99))
    return menu


@pytest.fixture
def customer():
    return Customer(name="John Doe", contact_info="john@example.com")


def make_order(customer, menu, *dishes, place_stage=None):
    order = Order(customer, place_stage=place_stage)
    for name in dishes:
        order.add_dish(name, [menu])
    return order


def test_operation_log_lines():
    log = OperationLog()
    line = log.record("place_order", "John Doe", 43.97)

    assert line.endswith("Operation: place_order | Customer: John Doe | Total: $43.97")
    assert line.startswith("[")
    assert log.lines == (line,)
    assert len(log) == 1

    log.clear()
    assert log.lines == ()


def test_logging_stage_writes_before_placing(menu, customer):
    log = OperationLog()
    inner = MagicMock()
    stage = with_logging(inner, log)

    order = make_order(customer, menu, "Grilled Salmon")
    stage(order, None)

    inner.assert_called_once_with(order, None)
    assert len(log) == 1
    assert "Customer: John Doe | Total: $24.99" in log.lines[0]


@pytest.mark.parametrize("total, loyal, expected", [
    (20.0, False, 0),
    (30.0, False, 0),
    (30.01, False, 5),
    (50.0, False, 5),
    (50.01, False, 10),
    (20.0, True, 5),
    (43.97, True, 10),
    (80.0, True, 15),
])
def test_discount_percent(total, loyal, expected):
    assert DiscountPolicy().percent_for(total, loyal) == expected


def test_discount_quote_leaves_total_alone(menu, customer):
    order = make_order(customer, menu, "Grilled Salmon", "Ribeye Steak")
    quote = DiscountPolicy().quote(order)

    assert quote.percent == 10
    assert quote.original_total == 54.98
    assert quote.discount_amount == 5.50
    assert quote.discounted_total == 49.48
    assert order.get_total() == 54.98


def test_discount_quote_for_loyal_customer(menu, customer):
    for _ in range(3):
        Order(customer).place_order()

    order = make_order(customer, menu, "Bruschetta")
    quote = DiscountPolicy().quote(order)

    assert quote.loyal
    assert quote.percent == 5


def test_discount_stage_hands_quote_to_sink(menu, customer):
    quotes = []
    stage = with_discount(record_order, DiscountPolicy(), quotes.append)
    order = make_order(customer, menu, "Grilled Salmon", "Bruschetta", place_stage=stage)

    order.place_order()

    assert len(quotes) == 1
    assert quotes[0].percent == 5
    assert customer.order_history == [order]
    assert order.get_total() == 33.98


def test_discount_policy_from_config():
    config = {
        'discounts': {
            'tiers': [{'min_total': 100, 'percent': 20}],
            'loyalty_bonus_percent': 2,
        },
        'loyalty': {'min_orders': 5},
    }
    policy = DiscountPolicy.from_config(config)

    assert policy.percent_for(150, False) == 20
    assert policy.percent_for(60, True) == 2
    assert policy.loyalty_min_orders == 5


def test_discount_policy_rejects_bad_tiers():
    with pytest.raises(ConfigurationError):
        DiscountPolicy(tiers=[{'percent': 10}])


def test_pipeline_without_stages_is_base_stage():
    assert build_place_order_pipeline() is record_order


def test_full_pipeline(menu, customer):
    log = OperationLog()
    quotes = []
    stage = build_place_order_pipeline(log, DiscountPolicy(), quotes.append)
    order = make_order(customer, menu, "Ribeye Steak", place_stage=stage)

    order.place_order()

    assert len(log) == 1
    assert len(quotes) == 1
    assert customer.order_history == [order]


def test_stages_chosen_per_order(menu, customer):
    log = OperationLog()
    logged = make_order(customer, menu, "Bruschetta", place_stage=build_place_order_pipeline(log))
    plain = make_order(customer, menu, "Bruschetta")

    plain.place_order()
    assert len(log) == 0

    logged.place_order()
    assert len(log) == 1
