"""
Typer CLI for namedteardown.

Commands: config. Entrypoint: main() for console script namedteardown.cli:main.
"""
import json
import os
from pathlib import Path

import typer
from typer import Exit

from namedteardown.config import TeardownConfig, load_config
from namedteardown.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, ENV_ALWAYS_RUN_DIAGNOSTICS

EXIT_INTERNAL = 10

app = typer.Typer(help="namedteardown CLI: inspect the effective teardown configuration.")


@app.callback()
def _root() -> None:
    """Keep subcommand dispatch even with a single command."""


def _config_rows(config: TeardownConfig, root: Path) -> list[tuple[str, str]]:
    """Rows for the text output: setting name and its value/source."""
    env_raw = os.environ.get(ENV_ALWAYS_RUN_DIAGNOSTICS)
    return [
        ("always_run_diagnostics", str(config.always_run_diagnostics).lower()),
        (ENV_ALWAYS_RUN_DIAGNOSTICS, env_raw if env_raw is not None else "(unset)"),
        ("project_config", str(root / CONFIG_DIR_NAME / CONFIG_FILE_NAME)),
        ("user_config", str(Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME)),
    ]


@app.command("config")
def config_cmd(
    root: Path | None = typer.Option(None, "--root", "-r", path_type=Path, help="Project root (default: cwd)"),
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
) -> None:
    """Show whether diagnostic teardowns would always run, and where that comes from."""
    try:
        project_root = root if root is not None else Path.cwd()
        config = load_config(project_root=project_root)
        if json_out:
            out = {
                "always_run_diagnostics": config.always_run_diagnostics,
                "env_var": ENV_ALWAYS_RUN_DIAGNOSTICS,
                "env_value": os.environ.get(ENV_ALWAYS_RUN_DIAGNOSTICS),
            }
            print(json.dumps(out, ensure_ascii=False))
        else:
            rows = _config_rows(config, project_root)
            width = max(len(k) for k, _ in rows)
            for key, value in rows:
                print(f"{key.ljust(width)}\t{value}")
    except Exception as e:
        if not json_out:
            typer.echo(f"error: {e}", err=True)
        raise Exit(EXIT_INTERNAL)


def main() -> None:
    """CLI entrypoint (console script namedteardown.cli:main)."""
    app()


if __name__ == "__main__":
    main()
