import logging

import click

from numrange.config import RangeOptions, build_options, load_options
from numrange.exceptions import NumrangeError
from numrange.numeric import NumericRegistry
from numrange.parser import parse_options


def range_options(func):
    """Options shared by commands that parse an expression."""
    func = click.option("--verbose", is_flag=True, help="Log each expanded range")(func)
    func = click.option("--config", "-c", type=click.Path(exists=True),
                        help="YAML file with separators and kind")(func)
    func = click.option("--range-sep", "-r", default=None,
                        help="Separator between range start and end (default '-')")(func)
    func = click.option("--value-sep", "-s", default=None,
                        help="Separator between values (default ',')")(func)
    func = click.option("--type", "-t", "kind", default=None,
                        help="Numeric kind, see 'numrange kinds' (default int)")(func)
    return func


def _resolve_options(kind, value_sep, range_sep, config) -> RangeOptions:
    overrides = {
        "kind": kind,
        "value_separator": value_sep,
        "range_separator": range_sep,
    }
    if config:
        return load_options(config, overrides)
    return build_options({k: v for k, v in overrides.items() if v is not None})


def _setup_logging(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@click.group()
@click.version_option(package_name="numrange")
def cli():
    """numrange: expand range expressions like 1-3,5,-2--1 into values."""


@cli.command()
@click.argument("expr", nargs=-1, required=True)
@range_options
@click.option("--output-sep", "-o", default=",", help="Separator between printed values")
def expand(expr, kind, value_sep, range_sep, config, verbose, output_sep):
    """Print every value described by EXPR.

    Several EXPR arguments are joined with the value separator first.
    Put -- before an EXPR that starts with a minus sign.
    """
    _setup_logging(verbose)
    try:
        options = _resolve_options(kind, value_sep, range_sep, config)
        values = parse_options(options.value_separator.join(expr), options)
    except NumrangeError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(output_sep.join(str(v) for v in values))


@cli.command()
@click.argument("expr")
@range_options
def validate(expr, kind, value_sep, range_sep, config, verbose):
    """Check a range expression without printing its values."""
    _setup_logging(verbose)
    try:
        options = _resolve_options(kind, value_sep, range_sep, config)
        values = parse_options(expr, options)
    except NumrangeError as e:
        click.echo(f"Invalid: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(values)} values ({options.kind})")


@cli.command()
def kinds():
    """List the numeric kinds a range can be parsed as."""
    for name in NumericRegistry.list_kinds():
        kind = NumericRegistry.get(name)
        click.echo(f"  {name:6s} unit={kind.unit!r}")


if __name__ == "__main__":
    cli()
