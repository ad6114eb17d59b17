"""Typer CLI: launch the web page shell and inspect the label taxonomy."""

import os

import typer
from rich.console import Console
from rich.table import Table

from hashstack.core.config import DEFAULT_CONFIG_ENV_VAR, get_config
from hashstack.core.logging import setup_logging
from hashstack.pipeline.labeling import CATEGORY_TAXONOMY

app = typer.Typer(no_args_is_help=True)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", help="Port to listen on"),
    config: str | None = typer.Option(None, "--config", help="Path to a hashstack.yml settings file"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes (development)"),
) -> None:
    """Serve the web page shell."""
    import uvicorn

    if config is not None:
        try:
            get_config(config)
        except (FileNotFoundError, ValueError) as e:
            typer.secho(str(e), fg=typer.colors.RED)
            raise typer.Exit(1)
        # Reload workers are fresh processes; they find the file through the environment.
        os.environ[DEFAULT_CONFIG_ENV_VAR] = config
    setup_logging()
    uvicorn.run("hashstack.api.main:app", host=host, port=port, reload=reload, log_config=None)


@app.command("taxonomy")
def taxonomy() -> None:
    """List label categories in tie-break order (earlier wins on equal matches)."""
    table = Table(title=None)
    table.add_column("#", justify="right")
    table.add_column("Category")
    table.add_column("Keywords")
    for i, (name, keywords) in enumerate(CATEGORY_TAXONOMY, 1):
        table.add_row(str(i), name, ", ".join(keywords))
    console = Console()
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
