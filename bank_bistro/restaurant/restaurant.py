"""Restaurant: the three category menus, order creation and the order log"""

from typing import Any, Dict, List, Optional, Union
from bank_bistro.constants import DishCategory, DEFAULT_DEMAND_PRICING_PERCENT, PRICE_DECIMALS
from bank_bistro.models.summary import DiscountQuote, OrderSummary
from bank_bistro.utils.config_loader import get_pricing_config
from bank_bistro.utils.errors import ValidationError, InvalidOrderError
from bank_bistro.utils.logging import get_logger
from .customer import Customer
from .dishes import Dish
from .menu import Menu
from .order import Order
from .pipeline import DiscountPolicy, OperationLog, build_place_order_pipeline

logger = get_logger(__name__)


class Restaurant:
    """Restaurant with one menu per dish category"""

    def __init__(
        self,
        name: str,
        operation_log: Optional[OperationLog] = None,
        discount_policy: Optional[DiscountPolicy] = None,
        demand_pricing_percent: float = DEFAULT_DEMAND_PRICING_PERCENT,
        price_decimals: int = PRICE_DECIMALS
    ):
        self.name = name
        self.appetizer_menu = Menu(DishCategory.APPETIZER, demand_pricing_percent, price_decimals)
        self.entree_menu = Menu(DishCategory.ENTREE, demand_pricing_percent, price_decimals)
        self.dessert_menu = Menu(DishCategory.DESSERT, demand_pricing_percent, price_decimals)
        self.operation_log = operation_log
        self.discount_policy = discount_policy

        self._orders: List[Order] = []
        self._discount_quotes: List[DiscountQuote] = []
        self._place_stage = build_place_order_pipeline(
            operation_log=operation_log,
            discount_policy=discount_policy,
            discount_sink=self._discount_quotes.append
        )

    @classmethod
    def from_config(
        cls,
        name: str,
        config: Dict[str, Any],
        operation_log: Optional[OperationLog] = None
    ) -> "Restaurant":
        """Build a restaurant with pricing and discount rules from configuration"""
        pricing = get_pricing_config(config)
        return cls(
            name,
            operation_log=operation_log,
            discount_policy=DiscountPolicy.from_config(config),
            demand_pricing_percent=pricing.get('demand_pricing_percent', DEFAULT_DEMAND_PRICING_PERCENT),
            price_decimals=pricing.get('price_decimals', PRICE_DECIMALS)
        )

    @property
    def menus(self) -> List[Menu]:
        return [self.appetizer_menu, self.entree_menu, self.dessert_menu]

    @property
    def orders(self) -> List[Order]:
        return list(self._orders)

    @property
    def discount_quotes(self) -> List[DiscountQuote]:
        return list(self._discount_quotes)

    def menu_for(self, menu_type: Union[DishCategory, str]) -> Menu:
        """
        Menu of a category

        Raises:
            ValidationError: If menu_type is not a known category
        """
        try:
            category = DishCategory(menu_type)
        except ValueError:
            raise ValidationError(f"Unknown menu type: {menu_type}", field="menu_type")
        return {
            DishCategory.APPETIZER: self.appetizer_menu,
            DishCategory.ENTREE: self.entree_menu,
            DishCategory.DESSERT: self.dessert_menu,
        }[category]

    def add_dish_to_menu(self, dish: Dish, menu_type: Optional[Union[DishCategory, str]] = None) -> Menu:
        """
        Put a dish on a menu, by default the menu of its own category

        Returns:
            The menu that received the dish

        Raises:
            ValidationError: If menu_type is unknown
            InvalidOrderError: If dish is not a Dish
        """
        if not isinstance(dish, Dish):
            raise InvalidOrderError("Item must be a Dish instance", field="dish")
        menu = self.menu_for(menu_type if menu_type is not None else dish.category)
        menu.add_dish(dish)
        return menu

    def create_order(self, customer: Customer) -> Order:
        return Order(customer, place_stage=self._place_stage)

    def record_order(self, order: Order) -> None:
        if not isinstance(order, Order):
            raise InvalidOrderError("Must be a valid Order instance", field="order")
        self._orders.append(order)

    def place_order(self, order: Order) -> OrderSummary:
        """
        Place an order with this restaurant

        Returns:
            Summary of the placed order

        Raises:
            InvalidOrderError: If order is not an Order or was already placed
        """
        if not isinstance(order, Order):
            raise InvalidOrderError("Must be a valid Order instance", field="order")

        order.place_order(self)
        summary = order.view_summary()
        logger.info(
            f"Order placed for {summary.customer}",
            restaurant=self.name,
            items=", ".join(f"{item.name} x{item.quantity}" for item in summary.items),
            total=summary.total
        )
        return summary

    def get_all_menus(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "appetizers": self.appetizer_menu.view_menu(),
            "entrees": self.entree_menu.view_menu(),
            "desserts": self.dessert_menu.view_menu(),
        }

    def view_all_orders(self) -> List[OrderSummary]:
        return [order.view_summary() for order in self._orders]

    def get_orders_by_customer(self, customer_name: str) -> List[OrderSummary]:
        wanted = customer_name.lower()
        return [
            order.view_summary()
            for order in self._orders
            if order.customer.name.lower() == wanted
        ]
