import argparse
import logging
import sys
from pathlib import Path

from ticketmarket.domain.pricing import max_resale_price, platform_fee
from ticketmarket.rules.loader import load_rules
from ticketmarket.rules.models import Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str) -> Rules:
    try:
        return load_rules(Path(path))
    except FileNotFoundError:
        logger.error(f"Rules file {path} not found.")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Rules file {path} is invalid: {e}")
        sys.exit(1)


def handle_check_rules(rules: Rules, args: argparse.Namespace) -> None:
    print(f"Rules OK: {args.rules} (version {rules.project.rules_version})")
    print(f"Max resale multiplier: {rules.pricing.max_resale_multiplier}")
    print(f"Platform fee: {rules.pricing.platform_fee_percentage}%")
    print(f"Default ticket class: {rules.tickets.default_class}")
    print(f"Audit enabled: {rules.audit.enabled}")


def handle_quote(rules: Rules, args: argparse.Namespace) -> None:
    if args.price < 0:
        logger.error("Price must not be negative.")
        sys.exit(1)

    cap = max_resale_price(args.price, rules.pricing.max_resale_multiplier)
    fee = platform_fee(cap, rules.pricing.platform_fee_percentage)
    print(f"Original price: {args.price}")
    print(f"Max resale price: {cap}")
    print(f"Platform fee at cap: {fee}")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Ticket Marketplace CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check-rules
    check_parser = subparsers.add_parser("check-rules", help="Validate the rules file")
    check_parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")

    # quote
    quote_parser = subparsers.add_parser("quote", help="Show the resale cap for a price")
    quote_parser.add_argument("--price", type=int, required=True, help="Original ticket price")
    quote_parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")

    args = parser.parse_args(argv)

    rules = get_rules(args.rules)

    if args.command == "check-rules":
        handle_check_rules(rules, args)
    elif args.command == "quote":
        handle_quote(rules, args)


if __name__ == "__main__":
    main()
