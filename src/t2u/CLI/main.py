"""
Command Line Interface for T2U.
"""
import logging
import click
from ..ENGINE.template_engine import interpolate
from ..MANAGERS.variable_manager import VariableManager
from ..PARSERS.expression_parser import ExpressionParser
from ..PARSERS.variables_parser import VariablesParser
from ..UTILS.logging_helpers import setup_base_logger
from ..UTILS.string_interpolation import PositionalInterpolator

@click.group()
@click.option('--verbose', '-V', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """
    T2U - Template to URI.

    Expands RFC 6570 URI templates (up to Level 3) from the command line.
    """
    ctx.ensure_object(dict)
    if verbose:
        setup_base_logger(logging.DEBUG)

@cli.command()
@click.argument('template')
@click.option('--var', '-v', 'pairs', multiple=True, help='Variable as NAME=VALUE')
@click.option('--vars-file', '-f', 'files', multiple=True, help='YAML, JSON or .env variables file')
@click.option('--environ', is_flag=True, help='Use process environment variables as a base')
@click.pass_context
def expand(ctx, template, pairs, files, environ):
    """Expand a URI template."""
    try:
        explicit = VariablesParser().parse_pairs(pairs)
        variables = VariableManager().get_merged_variables(explicit, list(files), include_environ=environ)
    except (ValueError, OSError) as e:
        click.echo(f"Error: {e}")
        ctx.exit(1)
    click.echo(interpolate(template, variables))

@cli.command()
@click.argument('template')
def inspect(template):
    """List the expressions of a URI template"""
    expressions = ExpressionParser().parse_from_string(template)
    if not expressions:
        click.echo("No expressions found.")
        return

    click.echo(f"{'OPERATOR':10} {'VARIABLES':30}")
    click.echo("-" * 40)
    for expression in expressions:
        operator = expression.operator.value or '(simple)'
        click.echo(f"{operator:10} {','.join(expression.variables):30}")

@cli.command('format')
@click.argument('template')
@click.argument('args', nargs=-1)
def format_(template, args):
    """Substitute {0}-style placeholders"""
    click.echo(PositionalInterpolator.interpolate(template, args))

def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})

if __name__ == '__main__':
    main()
