#!/usr/bin/env python
"""
Demo runner script for bank-bistro

Runs the banking and restaurant demos and prints readable results.

Usage:
    python scripts/run_demo.py               # Run both demos
    python scripts/run_demo.py bank          # Banking demo only
    python scripts/run_demo.py restaurant    # Restaurant demo only
"""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("LOG_LEVEL", "WARNING")

from bank_bistro.main import main


def print_header(title: str):
    """Print formatted section header"""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def show_bank_results(results: dict):
    print_header(f"Banking demo ({results['customer']})")
    for account in results["accounts"]:
        print(f"  • {account['account_number']}: {account['balance']:.2f}")
    for account_number, history in results["histories"].items():
        print(f"\n  History of {account_number}:")
        for tx in history:
            print(f"    {tx['timestamp']}  {tx['transaction_type']:<12} {tx['amount']:>10.2f}"
                  f"  {tx['from_account'] or '-'} -> {tx['to_account'] or '-'}")


def show_restaurant_results(results: dict):
    print_header(f"Restaurant demo ({results['restaurant']})")

    for menu_name, dishes in results["menus"].items():
        print(f"\n  {menu_name.title()}:")
        for dish in dishes:
            print(f"    • {dish['name']:<16} ${dish['price']:.2f}")

    for summary in results["orders"]:
        items = ", ".join(f"{item['name']} x{item['quantity']}" for item in summary["items"])
        print(f"\n  Order for {summary['customer']}: {items}")
        print(f"    Total: ${summary['total']:.2f}")

    for quote in results["discount_quotes"]:
        if quote["percent"] > 0:
            print(f"\n  Discount preview for {quote['customer']}: "
                  f"-${quote['discount_amount']:.2f} ({quote['percent']:g}%)")

    print("\n  Dynamic pricing:")
    salmon = results["prices"]["Grilled Salmon"]
    print(f"    Grilled Salmon: ${salmon['before']:.2f} -> ${salmon['after']:.2f} (+15%)")
    print(f"    Tiramisu after 10% decrease: ${results['prices']['Tiramisu']['after']:.2f}")

    print("\n  Operation log:")
    for line in results["operation_log"]:
        print(f"    {line}")


if __name__ == "__main__":
    results = main(sys.argv[1:])
    if "bank" in results:
        show_bank_results(results["bank"])
    if "restaurant" in results:
        show_restaurant_results(results["restaurant"])
