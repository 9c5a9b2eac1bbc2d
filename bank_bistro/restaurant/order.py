"""Order assembly and totals"""

from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING
from bank_bistro.constants import PRICE_DECIMALS
from bank_bistro.models.summary import OrderLine, OrderSummary
from bank_bistro.utils.errors import InvalidOrderError, DishNotFoundError
from bank_bistro.utils.logging import get_logger
from .customer import Customer
from .dishes import Dish
from .menu import Menu

if TYPE_CHECKING:
    from .restaurant import Restaurant

logger = get_logger(__name__)

PlaceOrderStage = Callable[["Order", Optional["Restaurant"]], None]


class Order:
    """
    Customer order.

    Each dish appears once in the item list; adding it again accumulates
    its quantity. Placement runs the stage the order was created with.
    """

    def __init__(self, customer: Customer, place_stage: Optional[PlaceOrderStage] = None):
        if not isinstance(customer, Customer):
            raise InvalidOrderError("Order customer must be a Customer", field="customer")

        if place_stage is None:
            from .pipeline import record_order
            place_stage = record_order

        self.customer = customer
        self._place_stage = place_stage
        self._dishes: Dict[str, Dish] = {}
        self._quantities: Dict[str, int] = {}
        self._created_at = datetime.now()
        self._placed = False

    @property
    def is_placed(self) -> bool:
        return self._placed

    @property
    def dishes(self) -> List[Dish]:
        return list(self._dishes.values())

    @property
    def dish_count(self) -> int:
        return sum(self._quantities.values())

    def get_created_at(self) -> datetime:
        return self._created_at

    def quantity_of(self, dish_name: str) -> int:
        return self._quantities.get(dish_name.lower(), 0)

    def add_dish(self, dish_name: str, menus: Sequence[Menu], quantity: int = 1) -> Dish:
        """
        Add a dish found in the first menu that carries it

        Args:
            dish_name: Dish name, any case
            menus: Menus searched in order
            quantity: Positive number of servings

        Returns:
            The dish that was added

        Raises:
            InvalidOrderError: If quantity is not a positive integer
            DishNotFoundError: If no menu carries the dish
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidOrderError("Quantity must be a positive integer", field="quantity")

        dish = None
        for menu in menus:
            if menu.has_dish(dish_name):
                dish = menu.get_dish(dish_name)
                break

        if dish is None:
            raise DishNotFoundError(f'Dish "{dish_name}" not found in any menu', field="dish_name")

        key = dish_name.lower()
        if key in self._quantities:
            self._quantities[key] += quantity
        else:
            self._dishes[key] = dish
            self._quantities[key] = quantity

        logger.debug("Dish added to order", customer=self.customer.name, dish=dish.name, quantity=quantity)
        return dish

    def get_total(self) -> float:
        total = sum(dish.price * self._quantities[key] for key, dish in self._dishes.items())
        return round(total, PRICE_DECIMALS)

    def view_summary(self) -> OrderSummary:
        items = tuple(
            OrderLine(
                name=dish.name,
                price=dish.price,
                quantity=self._quantities[key],
                subtotal=dish.price * self._quantities[key]
            )
            for key, dish in self._dishes.items()
        )
        return OrderSummary(
            customer=self.customer.name,
            items=items,
            total=self.get_total(),
            created_at=self._created_at
        )

    def place_order(self, restaurant: Optional["Restaurant"] = None) -> None:
        """
        Submit the order once

        Args:
            restaurant: Restaurant whose order log also receives the order

        Raises:
            InvalidOrderError: If the order was already placed or restaurant
                is not a Restaurant
        """
        from .restaurant import Restaurant

        if restaurant is not None and not isinstance(restaurant, Restaurant):
            raise InvalidOrderError("Order can only be placed with a Restaurant", field="restaurant")
        if self._placed:
            raise InvalidOrderError("Order has already been placed", field="order")
        self._place_stage(self, restaurant)
        self._placed = True
