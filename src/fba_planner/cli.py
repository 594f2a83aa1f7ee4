"""Command-line interface for the profitability calculator."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from fba_planner.metrics.calculator import enrich_product, enrich_products
from fba_planner.metrics.defaults import INITIAL_PRODUCTS
from fba_planner.metrics.models import PortfolioKPIs, Product, ProductInput
from fba_planner.metrics.portfolio import aggregate_portfolio

logger = logging.getLogger(__name__)

EXIT_BAD_INPUT = 2

_inputs_adapter = TypeAdapter(list[ProductInput])


def create_example_product() -> ProductInput:
    """The first product of the initial catalog."""
    return INITIAL_PRODUCTS[0]


def print_product(product: Product) -> None:
    """Print one product's per-unit breakdown."""
    i, m = product.input, product.metrics

    print(f"Product: {i.sku} ({i.id})")
    print(f"{'=' * 50}")
    print(f"\nSourcing:")
    print(f"  Unit Price:      ₹{m.unit_price_inr:,.2f}  (${i.unit_price_usd:.2f} × {i.fx_rate:g})")
    print(f"  Landed COGS:     ₹{m.landed_cogs:,.2f}")
    print(f"  Selling Price:   ₹{i.selling_price_inr:,.2f}")
    print(f"  Gross Profit:    ₹{m.gross_profit:,.2f}  ({m.gross_profit_margin:.1f}%)")

    print(f"\nMarketplace:")
    print(f"  Referral Fee:    ₹{m.referral_fee:,.2f}")
    print(f"  Closing Fee:     ₹{m.fixed_closing_fee:,.2f}")
    print(f"  GST on Fees:     ₹{m.gst_on_mkt_fee:,.2f}")
    print(f"  Returns Cost:    ₹{m.returns_cost:,.2f}")
    print(f"  Total Fees:      ₹{m.total_mkt_fees_per_unit:,.2f}  ({m.total_mkt_fees_percent:.1f}%)")
    print(f"  GST on Sale:     ₹{m.gst_on_sale:,.2f}")

    print(f"\nOperations:")
    print(f"  Ads per Unit:    ₹{m.ads_cost_per_unit:,.2f}")
    print(f"  Overhead / Unit: ₹{m.overhead_per_unit:,.2f}")
    print(f"  Monthly Revenue: ₹{m.monthly_revenue:,.0f}")

    print(f"\n{'=' * 50}")
    print(f"Total Cost / Unit: ₹{m.total_cost_per_unit:,.2f}")
    print(f"Net Profit / Unit: ₹{m.real_net_profit:,.2f}  ({m.real_net_profit_margin:.1f}%)")
    print(f"Monthly Take-Home: ₹{m.total_monthly_take_home:,.0f}")
    print(f"ROI:               {m.roi:.1f}%")


def print_portfolio(kpis: PortfolioKPIs) -> None:
    """Print portfolio KPIs."""
    print(f"Portfolio ({kpis.product_count} products)")
    print(f"{'=' * 50}")
    print(f"\nInvestment Outlook:")
    print(f"  Total Investment: ₹{kpis.total_inventory_value:,.0f}")
    print(f"  Total Revenue:    ₹{kpis.total_inventory_revenue:,.0f}")
    print(f"  Gross Profit:     ₹{kpis.total_inventory_gross_profit:,.0f}  ({kpis.inventory_gross_profit_margin:.0f}%)")
    print(f"  Net Profit:       ₹{kpis.total_inventory_net_profit:,.0f}  ({kpis.inventory_net_profit_margin:.0f}%)")

    print(f"\nCapital Efficiency:")
    print(f"  Days of Inventory:   {kpis.days_of_inventory:.0f} days")
    print(f"  Contribution Margin: {kpis.contribution_margin_percent:.0f}%")
    if kpis.payback_applicable:
        print(f"  Investment Recovery: {kpis.months_to_payback:.1f} months")
    else:
        print("  Investment Recovery: N/A")


def calculate_command(args: argparse.Namespace) -> int:
    """Derive metrics for one product from JSON or use the example."""
    if args.json:
        try:
            product_input = ProductInput.model_validate_json(args.json)
        except ValidationError as e:
            print(f"Invalid product JSON:\n{e}", file=sys.stderr)
            return EXIT_BAD_INPUT
    else:
        product_input = create_example_product()
        print("Using example product (use --json to provide your own)\n")

    print_product(enrich_product(product_input))
    return 0


def portfolio_command(args: argparse.Namespace) -> int:
    """Derive metrics and KPIs for a catalog file or the initial catalog."""
    if args.file:
        path = Path(args.file)
        try:
            inputs = _inputs_adapter.validate_json(path.read_bytes())
        except OSError as e:
            print(f"Cannot read {path}: {e}", file=sys.stderr)
            return EXIT_BAD_INPUT
        except ValidationError as e:
            print(f"Invalid catalog JSON in {path}:\n{e}", file=sys.stderr)
            return EXIT_BAD_INPUT
        logger.info(f"Loaded {len(inputs)} products from {path}")
    else:
        inputs = list(INITIAL_PRODUCTS)
        print("Using initial catalog (use --file to provide your own)\n")

    products = enrich_products(inputs)

    print(f"{'SKU':20} {'Price':>10} {'COGS':>10} {'Net/Unit':>10} {'Margin':>8} {'Monthly':>12}")
    for p in products:
        m = p.metrics
        print(
            f"{p.input.sku[:20]:20} {p.input.selling_price_inr:>10,.0f} {m.landed_cogs:>10,.2f} "
            f"{m.real_net_profit:>10,.2f} {m.real_net_profit_margin:>7.1f}% {m.total_monthly_take_home:>12,.0f}"
        )
    print()
    print_portfolio(aggregate_portfolio(products))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="fba-planner",
        description="Marketplace product profitability planner",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Calculate command
    calculate_parser = subparsers.add_parser("calculate", help="Calculate metrics for a product")
    calculate_parser.add_argument(
        "--json",
        type=str,
        help="Product inputs as JSON string",
    )

    # Portfolio command
    portfolio_parser = subparsers.add_parser("portfolio", help="Calculate portfolio KPIs")
    portfolio_parser.add_argument(
        "--file",
        type=str,
        help="Path to a JSON list of product inputs",
    )

    # Example command
    example_parser = subparsers.add_parser(
        "example",
        help="Show example product JSON",
    )
    example_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print JSON",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if args.command == "calculate":
        return calculate_command(args)
    elif args.command == "portfolio":
        return portfolio_command(args)
    elif args.command == "example":
        data = create_example_product().model_dump()
        if args.pretty:
            print(json.dumps(data, indent=2))
        else:
            print(json.dumps(data))
    else:
        parser.print_help()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
