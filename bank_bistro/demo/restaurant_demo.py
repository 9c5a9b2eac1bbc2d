"""Restaurant demo: menus, two orders, dynamic pricing"""

from typing import Any, Dict, Optional
from bank_bistro.restaurant import (
    Appetizer,
    Customer,
    Dessert,
    Entree,
    OperationLog,
    Restaurant
)
from bank_bistro.utils.config_loader import load_config
from bank_bistro.utils.logging import get_logger

logger = get_logger(__name__)


def build_demo_restaurant(config: Dict[str, Any], operation_log: Optional[OperationLog] = None) -> Restaurant:
    """Gourmet Palace with two dishes per category"""
    restaurant = Restaurant.from_config("Gourmet Palace", config, operation_log=operation_log)

    for dish in (
        Appetizer(name="Bruschetta", price=8.99),
        Appetizer(name="Spring Rolls", price=7.50),
        Entree(name="Grilled Salmon", price=24.99, prep_time=20),
        Entree(name="Ribeye Steak", price=29.99, prep_time=25),
        Dessert(name="Chocolate Cake", price=9.99),
        Dessert(name="Tiramisu", price=10.50),
    ):
        restaurant.add_dish_to_menu(dish)

    return restaurant


def run_restaurant_demo(
    config: Optional[Dict[str, Any]] = None,
    operation_log: Optional[OperationLog] = None
) -> Dict[str, Any]:
    """
    Place two orders and adjust prices

    Args:
        config: Loaded configuration, read from disk when omitted
        operation_log: Buffer receiving one line per placed order

    Returns:
        Menus, order summaries, discount quotes and adjusted prices
    """
    if config is None:
        config = load_config()
    if operation_log is None:
        operation_log = OperationLog()

    restaurant = build_demo_restaurant(config, operation_log)
    menus = restaurant.get_all_menus()

    john = Customer(name="John Doe", contact_info="john@example.com")
    jane = Customer(name="Jane Smith", contact_info="5551234567")

    first = restaurant.create_order(john)
    first.add_dish("Bruschetta", [restaurant.appetizer_menu])
    first.add_dish("Grilled Salmon", [restaurant.entree_menu])
    first.add_dish("Chocolate Cake", [restaurant.dessert_menu])
    placed = [restaurant.place_order(first)]

    second = restaurant.create_order(jane)
    second.add_dish("Spring Rolls", [restaurant.appetizer_menu], 2)
    second.add_dish("Ribeye Steak", [restaurant.entree_menu])
    second.add_dish("Tiramisu", [restaurant.dessert_menu], 2)
    placed.append(restaurant.place_order(second))

    salmon_before = restaurant.entree_menu.get_dish("Grilled Salmon").price
    salmon_after = restaurant.entree_menu.increase_price("Grilled Salmon", 15)
    tiramisu_after = restaurant.dessert_menu.decrease_price("Tiramisu", 10)
    logger.info(
        "Dynamic pricing applied",
        salmon_before=salmon_before,
        salmon_after=salmon_after,
        tiramisu_after=tiramisu_after
    )

    return {
        "restaurant": restaurant.name,
        "menus": menus,
        "orders": [summary.model_dump(mode="json") for summary in placed],
        "discount_quotes": [quote.model_dump(mode="json") for quote in restaurant.discount_quotes],
        "prices": {
            "Grilled Salmon": {"before": salmon_before, "after": salmon_after},
            "Tiramisu": {"after": tiramisu_after},
        },
        "operation_log": list(operation_log.lines),
    }
