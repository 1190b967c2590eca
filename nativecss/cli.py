"""nativecss command line: extract native styles from css files."""
from __future__ import annotations
import sys
from pathlib import Path

import click
from conterm.pretty import Markup

from nativecss import __version__
from nativecss.css.lexer import Lexer
from nativecss.css.parser import Root, parse_stylesheet
from nativecss.extract import extract
from nativecss.log import LOGGER, LogLevel, set_verbose
from nativecss.output import render_module

def _load_(paths: tuple[str, ...]) -> Root:
    """Parse every file and join their rules, in order, into one tree."""
    root = Root()
    for path in paths:
        tree = parse_stylesheet(Lexer.get_css(path))
        for error in tree.errors:
            LOGGER.log(f"{path}: {error}", level=LogLevel.Warn)
        root.children.extend(tree.children)
        root.errors.extend(tree.errors)
    return root

@click.command()
@click.version_option(version=__version__, prog_name="nativecss")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--important", default=None, help="Selector that scopes every rule, e.g. '#app'.")
@click.option("--important-flag", is_flag=True, help="Treat every rule as important.")
@click.option("-o", "--output", type=click.Path(dir_okay=False, writable=True), default=None, help="Write the module to this file instead of stdout.")
@click.option("--strict", is_flag=True, help="Exit with status 1 when any declaration or rule could not be used.")
@click.option("-v", "--verbose", is_flag=True, help="Log progress information.")
def cli(
    files: tuple[str, ...],
    important: str | None,
    important_flag: bool,
    output: str | None,
    strict: bool,
    verbose: bool,
):
    """Extract native styles from css FILES."""
    set_verbose(verbose)

    root = _load_(files)
    result = extract(
        root,
        important=important if important is not None else (True if important_flag else None),
        output=Path(output) if output is not None else None,
    )

    for error in result["errors"]:
        LOGGER.log(str(error), level=LogLevel.Warn)

    if output is None:
        click.echo(render_module(result["styles"], result["media"]))

    failures = len(result["errors"]) + len(root.errors)
    color = "green" if failures == 0 else "yellow"
    click.echo(
        Markup.parse(f"[{color}]{len(result['styles'])} styles, {len(result['media'])} media selectors, {failures} problems"),
        err=True,
    )

    if strict and failures > 0:
        sys.exit(1)
