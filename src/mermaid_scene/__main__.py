"""CLI entry point for mermaid-scene."""

import json
import logging
import sys

import click

from mermaid_scene.api import build_scene

_KIND_CHOICES = ["class", "er", "flowchart", "gantt", "mindmap", "pie", "sequence", "state", "timeline"]


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--kind", "-k", "kind", type=click.Choice(_KIND_CHOICES, case_sensitive=False), default=None,
              help="Force the diagram kind instead of detecting it from the header line")
@click.option("--fallback/--no-fallback", default=False, help="Emit a placeholder shape for empty diagrams")
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation (0 for compact output)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log parser and router decisions to stderr")
def main(input: str | None, kind: str | None, fallback: bool, indent: int, output: str | None, verbose: bool) -> None:
    """Mermaid-style diagram text to a JSON scene of shapes and connectors."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    scene = build_scene(text, kind, fallback_on_empty=fallback)
    rendered = json.dumps(scene.to_dict(), indent=indent or None) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
