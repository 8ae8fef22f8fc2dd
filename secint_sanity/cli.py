"""CLI interface for secint-sanity using Click."""

import json
import logging
import sys
from typing import Optional

import click

from . import __version__
from .enums import OperationKind
from .errors import OptionsLoadError
from .loader import load_file, load_string
from .validator import OptionsValidator


def _print_error(message: str, where: str = ""):
    """Print a validation error with color."""
    loc = f" in {where}" if where else ""
    click.secho(f"❌ {message}{loc}", fg="red")


def _print_success(message: str):
    click.secho(f"✅ {message}", fg="green")


def _validate_and_report(options, json_output: bool = False) -> int:
    """Validate options and print results. Returns exit code."""
    validator = OptionsValidator()
    is_valid, violations = validator.validate(options)
    kind = options.KIND.value

    if json_output:
        click.echo(json.dumps({
            "valid": is_valid,
            "kind": kind,
            "violations": [v.to_dict() for v in violations],
        }, indent=2))
        return 0 if is_valid else 1

    if is_valid:
        _print_success(f"Valid {kind} options")
        return 0

    click.secho(f"\nFound {len(violations)} error(s):\n", bold=True)
    for violation in violations:
        _print_error(f"{violation.message} [{violation.rule}]", violation.kind)
    return 1


def _report_load_error(message: str, json_output: bool) -> int:
    if json_output:
        click.echo(json.dumps({"valid": False, "error": message}, indent=2))
    else:
        _print_error(message)
    return 1


@click.command()
@click.argument("file", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--stdin", is_flag=True, help="Read JSON from stdin")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in OperationKind]),
    envvar="SECINT_SANITY_KIND",
    help="Command kind; overrides the document's 'kind' key",
)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__)
def main(file: Optional[str], stdin: bool, kind: Optional[str], json_output: bool, verbose: bool):
    """Validate security integration command options (CREATE/ALTER/DROP/DESCRIBE/SHOW).

    Every problem in the document is reported at once.

    Examples:

    \b
      secint-sanity alter_scim.json
      secint-sanity --kind drop drop.json
      echo '{"kind": "show"}' | secint-sanity --stdin
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not stdin and not file:
        click.echo(click.get_current_context().get_help())
        sys.exit(1)

    try:
        if stdin:
            options = load_string(click.get_binary_stream("stdin").read(), kind)
        else:
            options = load_file(file, kind)
    except OptionsLoadError as e:
        sys.exit(_report_load_error(str(e), json_output))
    except OSError as e:
        sys.exit(_report_load_error(f"Error reading file: {e}", json_output))

    sys.exit(_validate_and_report(options, json_output))


if __name__ == "__main__":
    main()
