"""Summarize a backup file command."""

import json

import click
from pydantic import ValidationError

from truckflow.aggregators import (
    Period,
    RevenueAggregator,
    expenses_by_category,
    filter_by_period,
    filter_expenses,
)
from truckflow.calculators import calculate_metrics, format_currency, format_miles
from truckflow.cli.error_handlers import (
    ConfigurationError,
    DataValidationError,
    InputFileError,
    with_error_handling,
)
from truckflow.cli.utils.formatters import format_info, format_table
from truckflow.config.settings import get_config
from truckflow.converters import read_json
from truckflow.models import BackupDocument, PayProfile

PERIOD_CHOICES = ["all"] + [p.value for p in Period]


def _load_backup(path: str) -> BackupDocument:
    try:
        data = read_json(path)
    except FileNotFoundError as e:
        raise InputFileError(f"Backup file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DataValidationError(f"Backup file is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DataValidationError(
            "Backup file must be a JSON object",
            recovery_hint="Use a file produced by export or convert-loads",
        )
    try:
        return BackupDocument.model_validate(data)
    except ValidationError as e:
        raise DataValidationError(f"Backup file has an invalid layout: {e}") from e


def _pay_profile(document: BackupDocument) -> PayProfile:
    if document.settings:
        return PayProfile.with_defaults(document.settings)
    try:
        return get_config().default_pay_profile()
    except ValidationError as e:
        raise ConfigurationError(
            str(e), recovery_hint="Check EARNING_PROFILE and rate settings"
        ) from e


@click.command(name="summary")
@click.argument("backup_path", type=click.Path(dir_okay=False))
@click.option(
    "--period",
    type=click.Choice(PERIOD_CHOICES),
    default="all",
    help="Only include loads and expenses from this period (default: all)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def summary(backup_path: str, period: str, debug: bool):
    """Show earnings metrics and revenue breakdowns for a backup file.

    Earnings use the settings stored in the backup; when it has none, the
    pay profile from EARNING_PROFILE / RATE_PER_MILE / PERCENTAGE_RATE is used.

    Example:
        truckflow summary truckflow-import.json --period thisYear
    """
    with with_error_handling(debug):
        document = _load_backup(backup_path)
        profile = _pay_profile(document)

        loads = filter_by_period(document.loads, period)
        expenses = filter_expenses(document.expenses, period=period)

        metrics = calculate_metrics(loads, expenses, profile)
        aggregator = RevenueAggregator(profile)

        click.echo(format_info(f"Earning profile: {profile.earning_profile}"))
        click.echo(format_info(f"Period: {period}"))
        click.echo()

        rows = [
            ["Loads", str(metrics.total_trips)],
            ["Earnings", format_currency(metrics.total_earnings)],
            ["Expenses", format_currency(metrics.total_expenses)],
            ["Net revenue", format_currency(metrics.net_revenue)],
            ["Loaded miles", format_miles(metrics.total_miles)],
            ["Deadhead miles", format_miles(metrics.total_deadhead)],
            ["Avg per mile", format_currency(metrics.avg_per_mile)],
            ["Avg per load", format_currency(metrics.avg_per_trip)],
            ["Deadhead ratio", f"{metrics.deadhead_ratio:.1f}%"],
        ]
        click.echo(format_table(["Metric", "Value"], rows, align_right=[1]))

        brokers = aggregator.revenue_by_broker(loads)
        if brokers:
            click.echo()
            click.echo("Revenue by broker")
            click.echo(
                format_table(
                    ["Broker", "Revenue"],
                    [[b.key, format_currency(b.value)] for b in brokers],
                    align_right=[1],
                )
            )

        months = aggregator.revenue_by_month(loads)
        if months:
            click.echo()
            click.echo("Revenue by month")
            click.echo(
                format_table(
                    ["Month", "Revenue", "Cumulative"],
                    [
                        [m.key, format_currency(m.value), format_currency(c.value)]
                        for m, c in zip(months, aggregator.cumulative(months))
                    ],
                    align_right=[1, 2],
                )
            )

        categories = expenses_by_category(expenses)
        if categories:
            click.echo()
            click.echo("Expenses by category")
            click.echo(
                format_table(
                    ["Category", "Amount"],
                    [[name, format_currency(v)] for name, v in categories.items()],
                    align_right=[1],
                )
            )
