"""Menu registry: dishes keyed by lowercased name"""

from typing import Any, Dict, Iterable, List, Optional, Union
from bank_bistro.constants import DishCategory, DEFAULT_DEMAND_PRICING_PERCENT, PRICE_DECIMALS
from bank_bistro.utils.errors import (
    BankBistroError,
    ValidationError,
    InvalidOrderError,
    DishNotFoundError
)
from bank_bistro.utils.logging import get_logger
from bank_bistro.utils.metrics import dish_price_changes, demand_pricing_failures
from .dishes import Dish

logger = get_logger(__name__)


def _require_percent(percent: Any) -> float:
    if isinstance(percent, bool) or not isinstance(percent, (int, float)):
        raise ValidationError("Percent must be a number", field="percent")
    if percent < 0:
        raise ValidationError("Percent must not be negative", field="percent")
    return percent


class Menu:
    """One menu per dish category"""

    def __init__(
        self,
        menu_type: Union[DishCategory, str],
        demand_pricing_percent: float = DEFAULT_DEMAND_PRICING_PERCENT,
        price_decimals: int = PRICE_DECIMALS
    ):
        self.menu_type = DishCategory(menu_type)
        self.demand_pricing_percent = demand_pricing_percent
        self.price_decimals = price_decimals
        self._dishes: Dict[str, Dish] = {}

    @property
    def name(self) -> str:
        return f"{self.menu_type.value}s menu"

    def __len__(self) -> int:
        return len(self._dishes)

    def __contains__(self, dish_name: str) -> bool:
        return self.has_dish(dish_name)

    def add_dish(self, dish: Dish) -> None:
        """
        Register a dish under its lowercased name.
        An existing dish with the same key is replaced.

        Raises:
            InvalidOrderError: If dish is not a Dish
        """
        if not isinstance(dish, Dish):
            raise InvalidOrderError("Item must be a Dish instance", field="dish")

        if dish.key in self._dishes:
            logger.warning("Replacing existing dish", menu=self.name, dish=dish.name)
        self._dishes[dish.key] = dish

    def remove_dish(self, dish_name: str) -> Dish:
        key = self._key_of(dish_name)
        return self._dishes.pop(key)

    def get_dish(self, dish_name: str) -> Dish:
        return self._dishes[self._key_of(dish_name)]

    def has_dish(self, dish_name: str) -> bool:
        return isinstance(dish_name, str) and dish_name.lower() in self._dishes

    def view_menu(self) -> List[Dict[str, Any]]:
        return [dish.get_info() for dish in self._dishes.values()]

    def _key_of(self, dish_name: str) -> str:
        if not self.has_dish(dish_name):
            raise DishNotFoundError(f'Dish "{dish_name}" not found in {self.name}', field="dish_name")
        return dish_name.lower()

    def increase_price(self, dish_name: str, percent: float) -> float:
        """
        Raise a dish price by a percentage.
        No ceiling is enforced here, desserts included.

        Args:
            dish_name: Dish name, any case
            percent: Percentage to add, >= 0

        Returns:
            New price, rounded to the menu's price decimals

        Raises:
            DishNotFoundError: If the dish is not on this menu
            ValidationError: If percent is not a non-negative number
        """
        dish = self.get_dish(dish_name)
        percent = _require_percent(percent)

        new_price = round(dish.price * (1 + percent / 100), self.price_decimals)
        dish.set_price(new_price)
        dish_price_changes.labels(direction="increase").inc()

        logger.info("Price increased", dish=dish.name, percent=percent, price=new_price)
        return new_price

    def decrease_price(self, dish_name: str, percent: float) -> float:
        """
        Lower a dish price by a percentage

        Args:
            dish_name: Dish name, any case
            percent: Percentage to remove, >= 0

        Returns:
            New price, rounded to the menu's price decimals

        Raises:
            DishNotFoundError: If the dish is not on this menu
            ValidationError: If percent is invalid or the new price would be <= 0
        """
        dish = self.get_dish(dish_name)
        percent = _require_percent(percent)

        new_price = dish.price * (1 - percent / 100)
        if new_price <= 0:
            raise ValidationError("Price cannot be zero or negative", field="price")

        new_price = round(new_price, self.price_decimals)
        dish.set_price(new_price)
        dish_price_changes.labels(direction="decrease").inc()

        logger.info("Price decreased", dish=dish.name, percent=percent, price=new_price)
        return new_price

    def apply_demand_pricing(
        self,
        popular_dish_names: Iterable[str],
        percent_increase: Optional[float] = None
    ) -> List[str]:
        """
        Increase the price of every named dish.
        A dish that cannot be updated is logged and skipped.

        Args:
            popular_dish_names: Names of dishes in demand
            percent_increase: Percentage to add, defaults to the menu setting

        Returns:
            Names of the dishes whose price changed
        """
        if percent_increase is None:
            percent_increase = self.demand_pricing_percent

        updated = []
        for dish_name in popular_dish_names:
            try:
                self.increase_price(dish_name, percent_increase)
                updated.append(dish_name)
            except BankBistroError as e:
                demand_pricing_failures.inc()
                logger.warning(
                    f"Could not apply demand pricing to {dish_name}",
                    menu=self.name,
                    error=e.message,
                    kind=e.kind
                )
        return updated
