#!/usr/bin/env python3
"""
Points Conversion Engine - Main Demo

This script runs:
1. A multi-day conversion simulation with the chosen parameters
2. A summary of the run (totals and total return)
3. A one-off conversion quote against the same rate table
"""

import argparse

from points_engine.config import (
    build_conversion_service,
    build_rate_table,
    build_runner,
    get_settings
)
from points_engine.core.entities import Currency, Frequency, MarketRegime
from points_engine.core.logging import setup_logging
from points_engine.metrics import format_amount, format_percent, recent, summarize
from points_engine.simulation import SimulationParams


def run_simulation_demo(params: SimulationParams, rate_table, window: int):
    """Run a simulation to completion and print the latest rows."""
    print("=" * 72)
    print("POINTS CONVERSION SIMULATION")
    print("=" * 72)
    print()
    print("Simulation Parameters:")
    print(f"  - Target currency: {params.currency.value}")
    print(f"  - Points per conversion: {params.points_per_event:,.0f}")
    print(f"  - Frequency: {params.frequency.value}")
    print(f"  - Duration: {params.duration_days} days")
    print(f"  - Market: {params.regime.value}")
    print(f"  - Bonus enabled: {params.bonus_enabled}")
    print()

    runner = build_runner(rate_table=rate_table)
    runner.start(params)
    results = runner.run_to_completion()

    print(f"Day {runner.current_day} of {params.duration_days} ({runner.status.value})")
    print()
    print(f"{'Day':<6} {'Input':<14} {'Output':<16} {'Fees':<16} {'Bonus':<16} {'Net':<16}")
    print("-" * 72)

    entry = rate_table.lookup(params.currency)
    for r in recent(results, window):
        print(
            f"{r.day:<6} {format_amount(r.input_points, 'points'):<14} "
            f"{format_amount(r.gross, entry):<16} "
            f"-{format_amount(r.fee, entry):<15} "
            f"+{format_amount(r.bonus, entry):<15} "
            f"{format_amount(r.net, entry):<16}"
        )
    print()

    summary = summarize(results, entry)

    print("=" * 72)
    print("SUMMARY")
    print("=" * 72)
    print()
    print(f"Conversions: {summary.events}")
    print(f"Total points converted: {format_amount(summary.total_input, 'points')}")
    print(f"Total received: {format_amount(summary.total_output, entry)}")
    print(f"Total fees: {format_amount(summary.total_fees, entry)}")
    print(f"Total bonus: {format_amount(summary.total_bonus, entry)}")
    print(f"Total return: {format_percent(summary.total_return_percent)}")
    print()

    return summary


def run_quote_demo(points: float, currency: Currency, balance: float, rate_table):
    """Quote a one-off conversion."""
    print("=" * 72)
    print("ONE-OFF CONVERSION QUOTE")
    print("=" * 72)
    print()

    service = build_conversion_service(rate_table=rate_table)
    quote = service.quote(points, currency, balance)

    print(f"Converting {format_amount(points, 'points')} to {quote.entry.name or currency.value}")
    print(f"Available balance: {format_amount(balance, 'points')}")
    print(f"Validation: {quote.validation.message}")

    if quote.result:
        result = quote.result
        print(f"  Estimated value: {format_amount(result.gross, quote.entry)}")
        print(f"  Fees: -{format_amount(result.fee, quote.entry)}")
        print(f"  Bonus: +{format_amount(result.bonus, quote.entry)}")
        print(f"  You receive: {format_amount(result.net, quote.entry)}")
        print(f"  Processing time: {quote.entry.processing_time}")
    print()

    return quote


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Points conversion simulation demo")
    parser.add_argument("--currency", type=Currency, default=Currency.FIAT,
                        choices=list(Currency))
    parser.add_argument("--amount", type=float, default=1000.0,
                        help="Points per conversion event")
    parser.add_argument("--frequency", type=Frequency, default=Frequency.DAILY,
                        choices=list(Frequency))
    parser.add_argument("--days", type=int, default=30)
    parser.add_argument("--market", type=MarketRegime, default=MarketRegime.STABLE,
                        choices=list(MarketRegime))
    parser.add_argument("--no-bonus", action="store_true")
    parser.add_argument("--quote", type=float, default=6000.0,
                        help="Points for the one-off quote")
    parser.add_argument("--balance", type=float, default=10000.0,
                        help="Available balance for the one-off quote")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    print()
    print("+" + "=" * 70 + "+")
    print(f"|{settings.app_name.upper():^70}|")
    print("+" + "=" * 70 + "+")
    print()

    rate_table = build_rate_table(settings)

    params = SimulationParams(
        currency=args.currency,
        points_per_event=args.amount,
        frequency=args.frequency,
        duration_days=args.days,
        bonus_enabled=not args.no_bonus,
        regime=args.market
    )

    run_simulation_demo(params, rate_table, settings.simulator.recent_window)
    run_quote_demo(args.quote, args.currency, args.balance, rate_table)


if __name__ == "__main__":
    main()
