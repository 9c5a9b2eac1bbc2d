"""Prometheus metrics definitions"""

from prometheus_client import Counter, Histogram


# Banking metrics
transactions_recorded = Counter(
    'bank_transactions_recorded_total',
    'Transaction records appended to account histories',
    labelnames=['transaction_type']  # DEPOSIT, WITHDRAW, TRANSFER_OUT, TRANSFER_IN
)

transfers_rejected = Counter(
    'bank_transfers_rejected_total',
    'Transfers refused before any balance changed',
    labelnames=['reason']
)

# Restaurant metrics
orders_placed = Counter(
    'restaurant_orders_placed_total',
    'Orders recorded into a customer history'
)

order_value = Histogram(
    'restaurant_order_value_dollars',
    'Order total at placement time',
    buckets=[10, 25, 50, 100, 250]
)

dish_price_changes = Counter(
    'restaurant_dish_price_changes_total',
    'Menu price adjustments',
    labelnames=['direction']  # increase, decrease
)

demand_pricing_failures = Counter(
    'restaurant_demand_pricing_failures_total',
    'Dishes skipped during a demand pricing batch'
)
