"""Dish entities"""

from abc import abstractmethod
from typing import Annotated, Any, Dict, Literal, Union
from pydantic import Field, field_validator
from bank_bistro.constants import DishCategory, DESSERT_PRICE_CEILING, DEFAULT_PREP_TIME_MINUTES
from bank_bistro.models.base import Entity
from bank_bistro.utils.errors import ValidationError


class Dish(Entity):
    """
    Base dish. Name and price are re-validated on every change.

    Only the category variants (Appetizer, Entree, Dessert) can be created.
    """

    name: str = Field(..., strict=True, description="Display name, case-insensitive key")
    price: float = Field(..., strict=True, description="Unit price")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Dish name must be a non-empty string")
        return value

    @field_validator("price")
    @classmethod
    def _check_price(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Price must be a positive number")
        return value

    @property
    def key(self) -> str:
        return self.name.lower()

    @abstractmethod
    def extra_info(self) -> Dict[str, Any]:
        """Category-specific fields for get_info"""

    def rename(self, name: str) -> None:
        self.name = name

    def set_price(self, price: float) -> None:
        self.price = price

    def get_info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "price": self.price,
            "category": DishCategory(self.category).value,
            **self.extra_info()
        }


class Appetizer(Dish):
    category: Literal[DishCategory.APPETIZER] = DishCategory.APPETIZER

    def extra_info(self) -> Dict[str, Any]:
        return {}


class Entree(Dish):
    category: Literal[DishCategory.ENTREE] = DishCategory.ENTREE
    prep_time: int = Field(DEFAULT_PREP_TIME_MINUTES, gt=0, strict=True, description="Preparation time in minutes")

    def extra_info(self) -> Dict[str, Any]:
        return {"prep_time": self.prep_time}


class Dessert(Dish):
    """Dessert; the price ceiling is checked when the dessert is created"""

    category: Literal[DishCategory.DESSERT] = DishCategory.DESSERT

    def __init__(self, **data: Any):
        super().__init__(**data)
        if self.price > DESSERT_PRICE_CEILING:
            raise ValidationError(
                f"price: Dessert price cannot exceed ${DESSERT_PRICE_CEILING:.2f}",
                field="price"
            )

    def extra_info(self) -> Dict[str, Any]:
        return {}


MenuDish = Annotated[Union[Appetizer, Entree, Dessert], Field(discriminator="category")]

DISH_TYPES = {
    DishCategory.APPETIZER: Appetizer,
    DishCategory.ENTREE: Entree,
    DishCategory.DESSERT: Dessert,
}


def create_dish(category: Union[DishCategory, str], **fields: Any) -> MenuDish:
    """
    Create a dish of the given category

    Args:
        category: "appetizer", "entree" or "dessert"
        **fields: Dish fields (name, price, and prep_time for entrees)

    Raises:
        ValidationError: If the category is unknown or a field is invalid
    """
    try:
        dish_category = DishCategory(category)
    except ValueError:
        raise ValidationError(f"Unknown dish category: {category}", field="category")
    return DISH_TYPES[dish_category](**fields)
