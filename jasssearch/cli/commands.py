"""CLI commands for jasssearch.

Interactive search plus one-shot listing and detail rendering.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import typer
from rich.console import Console

from jasssearch.cli.config import DEFAULT_CONFIG, get_config, init_config
from jasssearch.cli.formatting import (
    build_detail_panel,
    format_entries_json,
    format_results_json,
    format_rows_table,
)
from jasssearch.cli.terminal import TerminalSurface
from jasssearch.loader import DocumentLoader, FetchFailure, LocalDocumentLoader
from jasssearch.models import ApiEntry
from jasssearch.parsers import JassParser
from jasssearch.query import FuzzyIndex, QueryError
from jasssearch.rendering import HTML_STYLE, DetailRenderer, render_html_document
from jasssearch.session import CancellationToken, DisplayRow, SearchLauncher, SearchSession

logger = logging.getLogger(__name__)

FILE_OPTION_HELP = "Read a local declaration file instead of fetching (repeatable)"


def build_loader(
    config: Dict[str, Any], files: Optional[List[Path]] = None
) -> Union[DocumentLoader, LocalDocumentLoader]:
    """Loader for local files when given, otherwise for the configured sources."""
    if files:
        return LocalDocumentLoader(files)
    return DocumentLoader(config["sources"], timeout=config["timeout"])


def load_entries(config: Dict[str, Any], files: Optional[List[Path]] = None) -> List[ApiEntry]:
    """Load and parse documentation outside of an interactive session.

    Raises:
        FetchFailure: If any source could not be retrieved
    """
    texts = asyncio.run(build_loader(config, files).load())
    return JassParser().parse_texts(texts)


def search(
    files: Optional[List[Path]] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """Interactively fuzzy-search the JASS API.

    Type to filter the list, ':N' to open row N, ':q' to quit.

    Example:
        $ jass-search search
        $ jass-search search --file common.j
    """
    try:
        config = get_config()
        surface = TerminalSurface()

        def new_session(token: CancellationToken) -> SearchSession:
            return SearchSession(
                surface,
                build_loader(config, files),
                display_limit=config["display_limit"],
                threshold=config["threshold"],
                min_match_length=config["min_match_length"],
                token=token,
            )

        launcher = SearchLauncher(new_session)
        try:
            session = asyncio.run(launcher.launch())
        except KeyboardInterrupt:
            if launcher.active is not None:
                launcher.active.dismiss()
            raise typer.Exit(130)

        surface.run(session)

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)


def list_functions(
    query: Optional[str] = typer.Argument(None, help="Fuzzy query (lists everything when omitted)"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum results to show"),
    output: str = typer.Option("table", "--output", "-o", help="Output format (table or json)"),
    files: Optional[List[Path]] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """List documented natives, optionally ranked against a query.

    Example:
        $ jass-search list-functions
        $ jass-search list-functions "create unit" --limit 5
        $ jass-search list-functions GetUnitX --output json
    """
    try:
        config = get_config()
        if limit is None:
            limit = config["display_limit"]
        entries = load_entries(config, files)

        if not entries:
            typer.echo("❌ No functions found")
            raise typer.Exit(0)

        index = FuzzyIndex(
            entries,
            threshold=config["threshold"],
            min_match_length=config["min_match_length"],
        )

        if query and query.strip():
            results = index.search(query, limit=limit)
            if not results:
                typer.echo("❌ No matching functions found")
                raise typer.Exit(0)
            if output == "json":
                typer.echo(format_results_json(results))
                return
            rows = [DisplayRow.from_entry(r.entry) for r in results]
        else:
            if output == "json":
                typer.echo(format_entries_json(entries[:limit]))
                return
            rows = [DisplayRow.from_entry(entry) for entry in entries[:limit]]

        typer.echo(f"✅ Showing {len(rows)} of {len(entries)} functions\n")
        typer.echo(format_rows_table(rows))

    except typer.Exit:
        raise
    except (FetchFailure, QueryError) as e:
        typer.echo(f"❌ {str(e)}", err=True)
        raise typer.Exit(1)
    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)


def detail(
    name: str = typer.Argument(..., help="Name of the native to show"),
    html: Optional[Path] = typer.Option(None, "--html", help="Write an HTML page instead of printing"),
    files: Optional[List[Path]] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """Show the full documentation of one native.

    Example:
        $ jass-search detail CreateUnit
        $ jass-search detail CreateUnit --html CreateUnit.html
    """
    try:
        config = get_config()
        entries = load_entries(config, files)

        entry = next((e for e in entries if e.name == name), None)
        if entry is None:
            typer.echo(f"❌ Function '{name}' not found")
            raise typer.Exit(2)

        if html is not None:
            payload = DetailRenderer(HTML_STYLE).render(entry)
            html.write_text(render_html_document(payload), encoding="utf-8")
            typer.echo(f"✅ Wrote {html}")
        else:
            Console().print(build_detail_panel(DetailRenderer().render(entry)))

    except typer.Exit:
        raise
    except FetchFailure as e:
        typer.echo(f"❌ {str(e)}", err=True)
        raise typer.Exit(1)
    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)


def config_show() -> None:
    """Show current configuration settings.

    Displays all active configuration settings from:
    - Environment variables
    - Configuration files
    - Default values

    Example:
        $ jass-search config-show
    """
    try:
        config = get_config()

        typer.echo("\n⚙️  Current Configuration")
        typer.echo(f"{'─' * 60}")

        for key, value in sorted(config.items()):
            if isinstance(value, list):
                typer.echo(f"{key:<20} :")
                for item in value:
                    typer.echo(f"{'':<20}   - {item}")
            else:
                typer.echo(f"{key:<20} : {value}")

        typer.echo(f"{'─' * 60}\n")

    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)


def config_init(
    config_path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Custom config file path"
    ),
) -> None:
    """Initialize a new configuration file.

    Creates a default configuration file in the specified location.
    If no path is provided, uses default location (~/.jasssearch/config.json).

    Example:
        $ jass-search config-init
        $ jass-search config-init --path ./jasssearch.yaml
    """
    try:
        if config_path:
            path = Path(config_path)
        else:
            path = Path.home() / ".jasssearch" / "config.json"

        if path.exists():
            if not typer.confirm(f"File {path} already exists. Overwrite?"):
                typer.echo("❌ Cancelled")
                raise typer.Exit(1)

        if init_config(path):
            typer.echo(f"✅ Configuration initialized at {path}")
            typer.echo("📝 Default settings:")
            for key, value in DEFAULT_CONFIG.items():
                typer.echo(f"   {key}: {value}")
        else:
            typer.echo("❌ Failed to initialize configuration")
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"❌ Error: {str(e)}", err=True)
        raise typer.Exit(1)
