"""Main entry point for bank-bistro demos"""

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv

# Load environment variables before LOG_LEVEL / BANK_BISTRO_CONFIG are read
env_path = Path.cwd() / '.env'
load_dotenv(dotenv_path=env_path)

from bank_bistro.demo import run_bank_demo, run_restaurant_demo
from bank_bistro.restaurant import OperationLog
from bank_bistro.utils.config_loader import load_config
from bank_bistro.utils.logging import get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the banking and restaurant demos")
    parser.add_argument(
        "domain",
        nargs="?",
        choices=["bank", "restaurant", "all"],
        default="all",
        help="Which demo to run (default: all)"
    )
    parser.add_argument("--config", help="Path to settings YAML (default: bundled settings)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """Main entry point"""
    args = parse_args(argv)
    results: Dict[str, Any] = {}

    try:
        if args.domain in ("bank", "all"):
            results["bank"] = run_bank_demo()
            for account in results["bank"]["accounts"]:
                logger.info("Account balance", **account)

        if args.domain in ("restaurant", "all"):
            config = load_config(args.config)
            operation_log = OperationLog()
            results["restaurant"] = run_restaurant_demo(config, operation_log)
            for summary in results["restaurant"]["orders"]:
                logger.info("Order total", customer=summary["customer"], total=summary["total"])
            logger.info("Operation log", lines=len(operation_log))

        return results

    except Exception as e:
        logger.error(f"Demo execution failed: {e}")
        raise


def cli() -> None:
    """Console script entry point"""
    main()


if __name__ == "__main__":
    main()
