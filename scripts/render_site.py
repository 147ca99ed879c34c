#!/usr/bin/env python3
"""
Portfolio Page Rendering CLI

Populates a personal-site page with a profile document.

Commands:
    render  - Load a profile and write the populated page
    inspect - Show which regions a page provides

Examples:\n

    render_site.py render data/profile.json site/index.html -o dist/index.html

    render_site.py render https://example.com/profile.json site/index.html -o dist/index.html

    render_site.py render data/profile.yaml site/index.html -o dist/index.html --no-wait

    render_site.py inspect site/index.html
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.loading import ProfileLoader, source_for
from folio.contexts.rendering import Surface, build_site_context, load_surface_layout, run_pipeline
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("FOLIO_LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render a profile document into a personal-site page",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


async def _render(context, profile: str, wait: bool):
    """Run the pipeline and return the result with the page as it stood at that point."""
    result = await run_pipeline(context, ProfileLoader(source_for(profile)))
    if wait:
        await context.scheduler.drain()
    # Pending sweeps may still fire while the loop shuts down
    return result, context.surface.serialize()


@app.command("render")
def render_command(
    profile: Annotated[
        str,
        typer.Argument(help="Profile document: file path or http(s) URL (.json, .yaml)"),
    ],
    page: Annotated[
        Path,
        typer.Argument(
            help="Page template with the named regions",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Where to write the populated page (defaults to overwriting PAGE)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    layout_path: Annotated[
        Optional[Path],
        typer.Option(
            "--layout",
            "-l",
            help="Surface layout YAML (defaults to FOLIO_SURFACE_LAYOUT_PATH)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    no_wait: Annotated[
        bool,
        typer.Option(
            "--no-wait",
            help="Write the page before bar sweeps fire (bars keep their initial width)",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo debug logging to the console"),
    ] = False,
):
    """
    Load a profile and populate the page.

    Exits with code 1 when the profile cannot be loaded; the page is still
    written, carrying the error banner.

    Examples:\n

        $ render_site.py render data/profile.json site/index.html -o dist/index.html
    """
    output = output or page

    log_dir = LOGS_PATH / f"render_{now()}"
    log_file = setup_rendering_logger(log_dir, page, profile, verbose=verbose)

    typer.secho(f"\nRendering: {page.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Profile: {profile}")
    typer.echo("")

    try:
        layout = load_surface_layout(layout_path)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    surface = Surface.from_file(page)
    context = build_site_context(surface, layout=layout)
    result, page_markup = asyncio.run(_render(context, profile, wait=not no_wait))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page_markup, encoding="utf-8")

    typer.echo("")
    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Rendered: {', '.join(result.rendered_sections) or '-'}")
        if result.skipped_sections:
            typer.echo(f"  Skipped: {', '.join(result.skipped_sections)}")
        if result.failed_sections:
            typer.secho(f"  Failed: {', '.join(result.failed_sections)}", fg=typer.colors.YELLOW)
    else:
        typer.secho("✗ Render failed: profile data unavailable", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.echo(f"  {error}")

    typer.echo(f"  Output: {output}")
    typer.echo(f"  Log: {log_file}")

    if not result.success:
        raise typer.Exit(code=1)


@app.command("inspect")
def inspect_command(
    page: Annotated[
        Path,
        typer.Argument(help="Page template to inspect", exists=True, dir_okay=False),
    ],
    layout_path: Annotated[
        Optional[Path],
        typer.Option("--layout", "-l", help="Surface layout YAML", exists=True, dir_okay=False),
    ] = None,
):
    """
    List the section regions a page provides.

    Examples:\n

        $ render_site.py inspect site/index.html
    """
    layout = load_surface_layout(layout_path)
    surface = Surface.from_file(page)

    for section, present in surface.region_presence(layout).items():
        region_id = layout.region_id(section)
        if present:
            typer.secho(f"  ✓ {section:<11} #{region_id}", fg=typer.colors.GREEN)
        else:
            typer.secho(f"  ✗ {section:<11} #{region_id} (missing)", fg=typer.colors.RED)


if __name__ == "__main__":
    app()
