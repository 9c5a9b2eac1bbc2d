"""Restaurant domain: menus, dishes, orders, discounts"""

from .dishes import Dish, Appetizer, Entree, Dessert, MenuDish, create_dish
from .menu import Menu
from .customer import Customer
from .order import Order
from .pipeline import (
    DiscountPolicy,
    OperationLog,
    build_place_order_pipeline,
    record_order,
    with_discount,
    with_logging
)
from .restaurant import Restaurant

__all__ = [
    "Dish",
    "Appetizer",
    "Entree",
    "Dessert",
    "MenuDish",
    "create_dish",
    "Menu",
    "Customer",
    "Order",
    "DiscountPolicy",
    "OperationLog",
    "build_place_order_pipeline",
    "record_order",
    "with_discount",
    "with_logging",
    "Restaurant"
]
