#!/usr/bin/env python3
"""
Command-line interface for the pattern demos.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run demo scenarios
    price       Price an order from the fixtures
    test        Run the test suite

Examples:
    uv run python cli.py demo elevator
    uv run python cli.py demo all
    uv run python cli.py price ord-001 --visitor tax
"""

import argparse
import subprocess
import sys


def run_demo(scenario: str) -> None:
    """Run a demo scenario."""
    if scenario == "elevator":
        from elevator.demo import run_elevator_demo
        run_elevator_demo()
    elif scenario == "order":
        from order_pricing.demo import run_order_pricing_demo
        run_order_pricing_demo()
    elif scenario == "cart":
        from shopping_cart.demo import run_cart_demo
        run_cart_demo()
    elif scenario == "all":
        from elevator.demo import run_elevator_demo
        from order_pricing.demo import run_order_pricing_demo
        from shopping_cart.demo import run_cart_demo
        run_elevator_demo()
        run_order_pricing_demo()
        run_cart_demo()
    else:
        print(f"Unknown scenario: {scenario}")
        sys.exit(1)


def run_price(order_id: str, visitor_kind: str) -> None:
    """Run a single visitor over an order and print its total."""
    from order_pricing.visitors import create_visitor
    from shared.data_store import DataStore
    from shared.errors import UnknownVisitorError

    data_store = DataStore()
    order = data_store.get_order(order_id)
    if order is None:
        print(f"Unknown order: {order_id}")
        sys.exit(1)

    try:
        visitor = create_visitor(visitor_kind, data_store.get_pricing_rules())
    except UnknownVisitorError as e:
        print(str(e))
        sys.exit(1)

    order.accept(visitor)
    print(f"{visitor_kind} total for {order_id}: {visitor.total}")


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Design Pattern Demos CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo elevator
  %(prog)s demo order
  %(prog)s demo all
  %(prog)s price ord-002 --visitor delivery
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demo scenarios")
    demo_parser.add_argument(
        "scenario",
        choices=["elevator", "order", "cart", "all"],
        help="Which scenario to run",
    )

    # Price command
    price_parser = subparsers.add_parser("price", help="Price an order from the fixtures")
    price_parser.add_argument("order_id", help="Order ID, e.g. ord-001")
    price_parser.add_argument(
        "--visitor",
        default="tax",
        help="Visitor to run: tax, delivery, weight or trace",
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    args = parser.parse_args()

    if args.command == "demo":
        run_demo(args.scenario)
    elif args.command == "price":
        run_price(args.order_id, args.visitor)
    elif args.command == "test":
        run_tests(args.pytest_args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
