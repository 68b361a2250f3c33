import sys

import click

from .core import functions
from .core.exceptions import InvalidArgument
from .core.pure import PureBasePath


@click.group()
def cli():
    """Lexical path manipulation, without touching the filesystem."""


@cli.command()
@click.argument("paths", nargs=-1, required=True)
def normpath(paths):
    """Print each PATH normalized."""
    for path in paths:
        click.echo(functions.normpath(path))


@cli.command()
@click.argument("paths", nargs=-1, required=True)
def abspath(paths):
    """Print each PATH made absolute against the working directory."""
    for path in paths:
        click.echo(functions.abspath(path))


@cli.command()
@click.argument("parts", nargs=-1, required=True)
def join(parts):
    """Join PARTS into one path, keeping separators already present."""
    click.echo(functions.join(parts))


@cli.command()
@click.argument("path")
def split(path):
    """Print the directory and name of PATH on separate lines."""
    for part in functions.split(path):
        click.echo(part)


@cli.command()
@click.argument("path")
def splitext(path):
    """Print the root and extension of PATH on separate lines."""
    for part in functions.splitext(path):
        click.echo(part)


@cli.command()
@click.argument("path")
def parts(path):
    """Print the normalized segments of PATH, one per line."""
    for part in PureBasePath(path).parts:
        click.echo(part)


@cli.command("relative-to")
@click.argument("path")
@click.argument("other")
def relative_to(path, other):
    """Print PATH relative to OTHER."""
    try:
        click.echo(PureBasePath(path).relative_to(other))
    except InvalidArgument as e:
        raise click.BadParameter(str(e), param_hint="OTHER") from e


def main(as_module=False):  # pragma: nocover
    prog_name = as_module and "python -m lexpath.cli" or sys.argv[0]
    cli.main(sys.argv[1:], prog_name=prog_name)


if __name__ == "__main__":
    main(as_module=True)
