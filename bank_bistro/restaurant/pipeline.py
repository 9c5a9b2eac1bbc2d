"""Order placement pipeline: the base stage plus optional logging and discount stages"""

import functools
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple, TYPE_CHECKING
from bank_bistro.constants import (
    DEFAULT_DISCOUNT_TIERS,
    DEFAULT_LOYALTY_BONUS_PERCENT,
    DEFAULT_LOYALTY_MIN_ORDERS,
    PRICE_DECIMALS
)
from bank_bistro.models.summary import DiscountQuote
from bank_bistro.utils.config_loader import get_discount_config
from bank_bistro.utils.errors import ConfigurationError
from bank_bistro.utils.logging import get_logger
from bank_bistro.utils.metrics import orders_placed, order_value

if TYPE_CHECKING:
    from .order import Order, PlaceOrderStage
    from .restaurant import Restaurant

logger = get_logger(__name__)


def record_order(order: "Order", restaurant: Optional["Restaurant"] = None) -> None:
    """
    Base placement stage: customer history first, then the restaurant log

    Raises:
        InvalidOrderError: If order is not an Order
    """
    order.customer.place_order(order)
    if restaurant is not None:
        restaurant.record_order(order)

    total = order.get_total()
    orders_placed.inc()
    order_value.observe(total)
    logger.debug("Order recorded", customer=order.customer.name, total=total)


class OperationLog:
    """Append-only buffer of operation lines, owned by whoever creates it"""

    def __init__(self):
        self._lines: List[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def record(self, operation: str, customer: str, total: Any) -> str:
        line = f"[{datetime.now().isoformat()}] Operation: {operation} | Customer: {customer} | Total: ${total}"
        self._lines.append(line)
        logger.info(line)
        return line

    def clear(self) -> None:
        self._lines.clear()


def with_logging(stage: "PlaceOrderStage", operation_log: OperationLog, operation: str = "place_order") -> "PlaceOrderStage":
    """Wrap a stage so each call first writes a line to the operation log"""

    @functools.wraps(stage)
    def logged(order: "Order", restaurant: Optional["Restaurant"] = None) -> None:
        operation_log.record(operation, order.customer.name, order.get_total())
        return stage(order, restaurant)

    return logged


class DiscountPolicy:
    """
    Bulk and loyalty discount rules.

    The first tier whose threshold the total exceeds gives the base percent;
    loyal customers get the loyalty bonus on top.
    """

    def __init__(
        self,
        tiers: Optional[List[Dict[str, float]]] = None,
        loyalty_bonus_percent: float = DEFAULT_LOYALTY_BONUS_PERCENT,
        loyalty_min_orders: int = DEFAULT_LOYALTY_MIN_ORDERS
    ):
        if tiers is None:
            tiers = DEFAULT_DISCOUNT_TIERS
        try:
            self.tiers = sorted(
                ({'min_total': float(t['min_total']), 'percent': float(t['percent'])} for t in tiers),
                key=lambda t: t['min_total'],
                reverse=True
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid discount tiers: {e}")
        self.loyalty_bonus_percent = loyalty_bonus_percent
        self.loyalty_min_orders = loyalty_min_orders

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "DiscountPolicy":
        discount_config = get_discount_config(config)
        return cls(
            tiers=discount_config['tiers'] or None,
            loyalty_bonus_percent=discount_config['loyalty_bonus_percent'],
            loyalty_min_orders=discount_config['loyalty_min_orders'] or DEFAULT_LOYALTY_MIN_ORDERS
        )

    def percent_for(self, total: float, loyal: bool) -> float:
        percent = 0.0
        for tier in self.tiers:
            if total > tier['min_total']:
                percent = tier['percent']
                break
        if loyal:
            percent += self.loyalty_bonus_percent
        return percent

    def quote(self, order: "Order") -> DiscountQuote:
        """
        Compute the discount an order would get. The order is not changed.

        Args:
            order: Order about to be placed

        Returns:
            Frozen quote with percent, amount and discounted total
        """
        total = order.get_total()
        loyal = order.customer.is_loyal_customer(self.loyalty_min_orders)
        percent = self.percent_for(total, loyal)
        discount_amount = round(total * percent / 100, PRICE_DECIMALS)

        return DiscountQuote(
            customer=order.customer.name,
            percent=percent,
            loyal=loyal,
            original_total=total,
            discount_amount=discount_amount,
            discounted_total=round(total - discount_amount, PRICE_DECIMALS)
        )


def with_discount(
    stage: "PlaceOrderStage",
    policy: DiscountPolicy,
    sink: Optional[Callable[[DiscountQuote], None]] = None
) -> "PlaceOrderStage":
    """
    Wrap a stage so each call first quotes the order's discount.

    The quote is logged and handed to sink; the order total and the
    recorded order stay as they are.
    """

    @functools.wraps(stage)
    def discounted(order: "Order", restaurant: Optional["Restaurant"] = None) -> None:
        quote = policy.quote(order)
        if quote.percent > 0:
            logger.info(
                f"Loyalty/Bulk discount quoted: -${quote.discount_amount:.2f} ({quote.percent:g}%)",
                customer=quote.customer,
                loyal=quote.loyal
            )
        if sink is not None:
            sink(quote)
        return stage(order, restaurant)

    return discounted


def build_place_order_pipeline(
    operation_log: Optional[OperationLog] = None,
    discount_policy: Optional[DiscountPolicy] = None,
    discount_sink: Optional[Callable[[DiscountQuote], None]] = None
) -> "PlaceOrderStage":
    """
    Compose the placement stages chosen for a restaurant

    Args:
        operation_log: Adds the logging stage (outermost) when given
        discount_policy: Adds the discount stage when given
        discount_sink: Receives each discount quote

    Returns:
        Stage callable taking (order, restaurant)
    """
    stage = record_order
    if discount_policy is not None:
        stage = with_discount(stage, discount_policy, discount_sink)
    if operation_log is not None:
        stage = with_logging(stage, operation_log)
    return stage
