#!/usr/bin/env python

from dataclasses import replace

import click
from loguru import logger

from ..core.base import Currency, WalletCapabilities
from ..core.codec import decode, encode
from ..core.errors import MoneroRequestError
from ..core.logging import configure_logger
from ..core.settings import settings

DEFAULT_LABEL = "Unlabeled Monero Payment Request"


class NaturalOrderGroup(click.Group):
    """For listing commands in help in order of definition"""

    def list_commands(self, ctx):
        return self.commands.keys()


@click.group(cls=NaturalOrderGroup)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log codec steps to stderr.",
)
@click.version_option(settings.version, prog_name="monero-request")
def cli(debug: bool):
    if debug:
        settings.debug = True
    if settings.debug:
        configure_logger()


@cli.command("create", help="Create a Monero payment request.")
@click.option("--label", "custom_label", default=DEFAULT_LABEL, help="Custom label.")
@click.option("--wallet", "sellers_wallet", required=True, help="Seller's wallet.")
@click.option(
    "--currency",
    type=click.Choice([c.value for c in Currency]),
    default=Currency.XMR.value,
    help=f"Currency (default: {Currency.XMR.value}).",
)
@click.option("--amount", required=True, help="Amount, e.g. 25.99.")
@click.option("--payment-id", default="", help="Payment ID (default: random).")
@click.option("--start-date", default="", help="Start date (default: now).")
@click.option(
    "--days-per-billing-cycle",
    type=int,
    default=0,
    help="Days per billing cycle (default: 0).",
)
@click.option(
    "--number-of-payments",
    type=int,
    default=1,
    help="Number of payments (default: 1).",
)
@click.option(
    "--change-indicator-url",
    default="",
    help="URL the seller uses to announce changes.",
)
@click.option(
    "--allow-subaddress",
    is_flag=True,
    default=False,
    help="Accept a subaddress as the seller's wallet.",
)
def create(
    custom_label: str,
    sellers_wallet: str,
    currency: str,
    amount: str,
    payment_id: str,
    start_date: str,
    days_per_billing_cycle: int,
    number_of_payments: int,
    change_indicator_url: str,
    allow_subaddress: bool,
):
    capabilities = WalletCapabilities.from_settings()
    if allow_subaddress:
        capabilities = replace(capabilities, allow_subaddress=True)
    try:
        request = encode(
            custom_label,
            sellers_wallet,
            currency,
            amount,
            payment_id,
            start_date,
            days_per_billing_cycle,
            number_of_payments,
            change_indicator_url,
            capabilities=capabilities,
        )
    except MoneroRequestError as e:
        logger.debug(f"create failed: {e.detail}")
        raise click.ClickException(e.detail)
    click.echo(request)


@cli.command("read", help="Read a Monero payment request.")
@click.argument("request", type=str)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on numeric fields that are not integers.",
)
def read(request: str, strict: bool):
    try:
        fields = decode(request, strict=strict or None)
    except MoneroRequestError as e:
        logger.debug(f"read failed: {e.detail}")
        raise click.ClickException(e.detail)
    for key, value in fields.items():
        click.echo(f"{key}: {value}")
