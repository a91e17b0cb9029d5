"""Store commands for the STOREFRONT CLI.

Each command bootstraps the application from the environment, runs one
use-case, prints its result on stdout and reports failures on stderr with a
non-zero exit code.
"""

import asyncio
import json
from typing import NoReturn

import click

from storefront.bootstrap import AppContainer, bootstrap
from storefront.config import ConfigurationError
from storefront.domain.rules import fizz_buzz, maximum
from storefront.domain.value_objects import Order
from storefront.interfaces.errors import CollaboratorError

from .helpers import error, success, warn


def _fail(message: str) -> NoReturn:
    """Report `message` on stderr and exit with status 1."""
    error(message)
    click.get_current_context().exit(1)


def _load_app() -> AppContainer:
    """Bootstrap the application from the environment."""
    try:
        return bootstrap()
    except ConfigurationError as e:
        _fail(str(e))


@click.command(name="max")
@click.argument("a", type=float)
@click.argument("b", type=float)
def max_command(a: float, b: float) -> None:
    """Print the greater of A and B."""
    click.echo(f"{maximum(a, b):g}")


@click.command(name="fizzbuzz")
@click.argument("n", type=int)
def fizzbuzz_command(n: int) -> None:
    """Print the FizzBuzz word for N."""
    click.echo(fizz_buzz(n))


@click.command(name="price")
@click.argument("price", type=float)
@click.argument("currency")
def price_command(price: float, currency: str) -> None:
    """Convert PRICE into CURRENCY."""
    app = _load_app()
    try:
        converted = app.get_price_in_currency(price, currency)
    except CollaboratorError as e:
        _fail(str(e))
    click.echo(f"{converted:.2f} {currency.upper()}")


@click.command(name="shipping")
@click.argument("destination")
def shipping_command(destination: str) -> None:
    """Print the shipping quote for DESTINATION."""
    app = _load_app()
    click.echo(app.get_shipping_info(destination))


@click.command(name="order")
@click.argument("amount", type=float)
@click.argument("instrument")
def order_command(amount: float, instrument: str) -> None:
    """Charge AMOUNT to the payment INSTRUMENT and print the result as JSON."""
    app = _load_app()
    result = asyncio.run(app.submit_order(Order(total_amount=amount), instrument))
    click.echo(json.dumps(result.as_dict()))
    if not result.success:
        _fail("Payment was not accepted.")
    success("Order submitted.")


@click.command(name="signup")
@click.argument("email")
def signup_command(email: str) -> None:
    """Sign up EMAIL and send it a welcome message."""
    app = _load_app()
    if not asyncio.run(app.sign_up(email)):
        _fail(f"Invalid email address: {email}")
    success(f"Welcome email sent to {email}.")


@click.command(name="login")
@click.argument("email")
def login_command(email: str) -> None:
    """Email a one-time login code to EMAIL."""
    app = _load_app()
    asyncio.run(app.login(email))
    success(f"Login code sent to {email}.")


@click.command(name="home")
def home_command() -> None:
    """Render the home page."""
    app = _load_app()
    click.echo(asyncio.run(app.render_page()))


@click.command(name="status")
def status_command() -> None:
    """Print whether the store is online and today's discount."""
    app = _load_app()
    online = app.is_online()
    click.echo(f"online: {'yes' if online else 'no'}")
    click.echo(f"discount: {app.get_discount():.0%}")
    if not online:
        warn("The store is currently closed.")


COMMANDS = [
    max_command,
    fizzbuzz_command,
    price_command,
    shipping_command,
    order_command,
    signup_command,
    login_command,
    home_command,
    status_command,
]
