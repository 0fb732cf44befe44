"""
PipelineX contracts - command line entry point.
"""

import json
import logging
import sys
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from contracts.src.config import get_settings
from contracts.src.models.build_log import BuildLogStep
from contracts.src.models.enums import Status
from contracts.src.services.authorization import filter_credentials, filter_trusted_images
from contracts.src.services.config_loader import BuilderConfigError, load_builder_config
from contracts.src.services.status import get_aggregated_status

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Resolve trusted images and credentials, aggregate build and release status.",
)

@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

def _load_config(config_path: Optional[str]):
    path = config_path or get_settings().builder_config_path
    try:
        return load_builder_config(path)
    except BuilderConfigError as e:
        logger.error(f"Failed to load builder config: {e}")
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

@app.command("trusted-images")
def trusted_images(
    images: List[str] = typer.Argument(..., help="Container images used by the pipeline."),
    pipeline: str = typer.Option(..., "--pipeline", "-p", help="Full pipeline path, source/owner/name."),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Builder config file."),
) -> None:
    """Print the trusted images a pipeline may use."""
    builder_config = _load_config(config)

    resolved = filter_trusted_images(builder_config.trusted_images, images, pipeline)

    typer.echo(json.dumps([ti.to_wire() for ti in resolved], indent=2))

@app.command()
def credentials(
    images: List[str] = typer.Argument(..., help="Container images used by the pipeline."),
    pipeline: str = typer.Option(..., "--pipeline", "-p", help="Full pipeline path, source/owner/name."),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Builder config file."),
) -> None:
    """Print name and type of the credentials injected into a pipeline's trusted images."""
    builder_config = _load_config(config)

    resolved_images = filter_trusted_images(builder_config.trusted_images, images, pipeline)
    resolved = filter_credentials(builder_config.credentials, resolved_images, pipeline)

    # never print credential properties, they hold the secrets
    typer.echo(json.dumps([{"name": c.name, "type": c.type} for c in resolved], indent=2))

@app.command()
def status(
    log_file: str = typer.Argument(..., help="Build or release log, YAML or JSON."),
) -> None:
    """Print the aggregated status of a build or release log."""
    try:
        with open(log_file, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        typer.echo(f"Cannot read log {log_file}: {e}", err=True)
        raise typer.Exit(code=2)

    raw_steps = data.get("steps") if isinstance(data, dict) else data
    if raw_steps is not None and not isinstance(raw_steps, list):
        typer.echo(f"Invalid log {log_file}: steps must be a list", err=True)
        raise typer.Exit(code=2)

    try:
        steps = [BuildLogStep.model_validate(s) for s in raw_steps or []]
    except ValidationError as e:
        typer.echo(f"Invalid log {log_file}: {e}", err=True)
        raise typer.Exit(code=2)

    aggregated = get_aggregated_status(steps)
    typer.echo(aggregated.value or "unknown")

    if aggregated != Status.SUCCEEDED:
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
