"""calcpipe CLI entry point."""

import json
import logging

import click

from calcpipe.config import CalcConfig
from calcpipe.converter import format_tokens
from calcpipe.errors import CalculationError
from calcpipe.pipeline import compile_expression, evaluate_expression, evaluate_many, format_result

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides CALCPIPE_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """calcpipe: arithmetic expression evaluator."""
    try:
        config = CalcConfig.from_env()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if log_level:
        config.log_level = log_level.upper()

    logging.basicConfig(level=config.level)
    ctx.obj = config


@cli.command("eval")
@click.argument("expression", required=False)
@click.pass_obj
def eval_command(config: CalcConfig, expression: str | None):
    """Evaluate EXPRESSION and print the result.

    Without an argument the configured default expression is used
    (CALCPIPE_EXPRESSION, or "3 + 5 * (2 - 8)").
    """
    if expression is None:
        expression = config.default_expression

    try:
        result = evaluate_expression(expression)
    except CalculationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Result: {format_result(result)}")


@cli.command()
@click.argument("expression")
def postfix(expression: str):
    """Print EXPRESSION in postfix (Reverse Polish) order."""
    try:
        tokens = compile_expression(expression)
    except CalculationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(format_tokens(tokens))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Emit one JSON object per line.")
def batch(source, as_json: bool):
    """Evaluate one expression per line of SOURCE (default: stdin).

    Blank lines are skipped. Failures are reported and evaluation continues;
    the exit status is 1 if any expression failed.
    """
    expressions = [line.strip() for line in source if line.strip()]
    outcomes = evaluate_many(expressions)

    for outcome in outcomes:
        if as_json:
            click.echo(json.dumps(outcome.to_dict(), allow_nan=False))
        else:
            click.echo(f"{outcome.expression} => {outcome.describe()}")

    if not all(outcome.ok for outcome in outcomes):
        raise SystemExit(1)
