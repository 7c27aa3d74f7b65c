from typing import Optional

import click
from ape.cli import ape_cli_context

from ape_funcvariation.backends import MemoryBackend
from ape_funcvariation.basemodel import FuncVariationBase
from ape_funcvariation.config import FuncVariationConfig
from ape_funcvariation.harness import run_calls
from ape_funcvariation.types import Call


def _parse_calls(ctx, param, value):
    try:
        return [Call.parse(token) for token in value]
    except ValueError as err:
        raise click.BadParameter(str(err), ctx=ctx, param=param)


def _get_config(pay_minimum: Optional[int], pay_exact: Optional[int]) -> FuncVariationConfig:
    overrides = {"pay_minimum": pay_minimum, "pay_exact": pay_exact}
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if len(overrides) == 2:
        return FuncVariationConfig(**overrides)

    return FuncVariationBase().plugin_config.model_copy(update=overrides)


@click.group()
def cli():
    """FuncVariation counter commands"""


@cli.command(short_help="Run calls against the reference counter")
@ape_cli_context()
@click.argument("calls", nargs=-1, required=True, callback=_parse_calls)
@click.option("--pay-minimum", type=int, help="Minimum payment for 'paymeToIncrement'.")
@click.option("--pay-exact", type=int, help="Required payment for 'payExactToIncrement'.")
@click.option("--strict", is_flag=True, help="Stop at the first rejected call.")
def simulate(cli_ctx, calls, pay_minimum, pay_exact, strict):
    """
    Run CALLS in order against a fresh in-memory counter.

    Calls are written as 'inc', 'dec', 'incWith:N',
    'paymeToIncrement:N@WEI' or 'payExactToIncrement:N@WEI'.
    """

    backend = MemoryBackend(config=_get_config(pay_minimum, pay_exact))
    counter = backend.deploy()
    for call in calls:
        outcome = run_calls(backend, counter, [call])[0]
        click.echo(str(outcome))
        if outcome.succeeded:
            continue

        elif strict:
            cli_ctx.abort(f"'{call}' was rejected: {outcome.reason}")

        cli_ctx.logger.warning(f"'{call}' was rejected: {outcome.reason}")

    click.echo(f"Final value: {backend.read(counter)}")
