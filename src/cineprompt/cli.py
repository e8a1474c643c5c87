"""CinePrompt CLI - typer application entry point."""

from __future__ import annotations

import atexit
from pathlib import Path
from random import Random
from typing import TYPE_CHECKING, Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from cineprompt.config import GeneratorConfig, load_config, load_scene
from cineprompt.errors import CinePromptError
from cineprompt.models.scene import LockedSections
from cineprompt.observability import close_file_logging, configure_logging, get_logger
from cineprompt.prompt.compiler import compile_prompt
from cineprompt.prompt.strategies.registry import get_strategy, list_supported_models
from cineprompt.randomize import randomize_scene
from cineprompt.resolver import compute_conflicts, style_warnings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cineprompt.models.scene import SceneState

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="cineprompt",
    help="CinePrompt: compile cinematic scene descriptions into image-model prompts.",
    no_args_is_help=True,
)
console = Console()
log = get_logger(__name__)

# Global state set by callback, used by commands
_config: GeneratorConfig = GeneratorConfig()


@app.callback()
def main(
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity: -v for INFO, -vv for DEBUG.",
        ),
    ] = 0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Also write every log event to this JSONL file.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML file with generator defaults.",
            envvar="CINEPROMPT_CONFIG",
        ),
    ] = None,
) -> None:
    """CinePrompt: compile cinematic scene descriptions into image-model prompts."""
    global _config

    configure_logging(verbosity=verbose, log_file=log_file)
    if log_file is not None:
        atexit.register(close_file_logging)

    if config is None:
        _config = GeneratorConfig()
        return
    try:
        _config = load_config(config)
    except CinePromptError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None


def _load_scene_or_exit(scene_file: Path) -> SceneState:
    try:
        return load_scene(scene_file, _config)
    except CinePromptError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None


def _joined(values: Iterable[str]) -> str:
    return ", ".join(sorted(values)) or "[dim]-[/dim]"


@app.command()
def version() -> None:
    """Show version information."""
    from cineprompt import __version__

    console.print(f"CinePrompt v{__version__}")


@app.command()
def models() -> None:
    """List supported image-generation backends."""
    table = Table(title="Supported Models")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Style")
    table.add_column("Negative Prompt", justify="center")

    for model_id in list_supported_models():
        strategy = get_strategy(model_id)
        table.add_row(
            model_id,
            strategy.display_name,
            strategy.prompt_style.value,
            "[green]yes[/green]" if strategy.supports_negative_prompt else "[dim]no[/dim]",
        )
    console.print(table)


@app.command("compile")
def compile_command(
    scene_file: Annotated[
        Path,
        typer.Argument(help="YAML or JSON scene file."),
    ],
    model: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Target model id (overrides the scene)."),
    ] = None,
    enable_sliders: Annotated[
        bool,
        typer.Option("--enable-sliders", help="Emit creative slider tokens."),
    ] = False,
) -> None:
    """Compile a scene file into a prompt for its target model."""
    state = _load_scene_or_exit(scene_file)
    updates: dict[str, object] = {}
    if model is not None:
        updates["target_model"] = model
    if enable_sliders:
        updates["creative_controls_enabled"] = True
    if updates:
        state = state.model_copy(update=updates)

    try:
        prompt = compile_prompt(state)
    except (CinePromptError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    log.info("prompt_printed", model=state.target_model, scene=str(scene_file))
    # Plain print keeps rich markup out of bracketed prompts.
    console.print(prompt, markup=False, highlight=False, soft_wrap=True)


@app.command()
def conflicts(
    scene_file: Annotated[
        Path,
        typer.Argument(help="YAML or JSON scene file."),
    ],
) -> None:
    """Show what the scene's camera and director currently block."""
    state = _load_scene_or_exit(scene_file)
    result = compute_conflicts(state)

    camera = state.camera or "no camera"
    director = state.director or "no director"
    table = Table(title=f"Conflicts: {camera} / {director}")
    table.add_column("Constraint", style="cyan")
    table.add_column("Values")
    table.add_row("Blocked atmospheres", _joined(result.blocked_atmospheres))
    table.add_row("Blocked presets", _joined(result.blocked_presets))
    table.add_row("Blocked depth of field", _joined(result.blocked_dof))
    table.add_row("Blocked cameras", _joined(result.blocked_cameras))
    table.add_row(
        "Allowed aspect ratios",
        "any" if result.allowed_aspect_ratios is None else ", ".join(result.allowed_aspect_ratios),
    )
    if result.fixed_lens:
        table.add_row("Fixed lens", result.fixed_lens)
    if result.zoom_range:
        table.add_row("Zoom range", result.zoom_range.range)
    console.print(table)

    if result.warning_message:
        console.print(f"[yellow]Note:[/yellow] {result.warning_message}")
    for message in result.active_conflicts:
        console.print(f"[red]Conflict:[/red] {message}")
    for message in style_warnings(state):
        console.print(f"[yellow]Redundant:[/yellow] {message}")


@app.command()
def randomize(
    scene_file: Annotated[
        Path | None,
        typer.Argument(help="Scene to start from. Uses config defaults if omitted."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Seed for a reproducible scene."),
    ] = None,
    lock: Annotated[
        list[str] | None,
        typer.Option(
            "--lock",
            "-l",
            help="Section to keep as it is (repeatable), e.g. --lock camera.",
        ),
    ] = None,
    model: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Target model id (overrides the scene)."),
    ] = None,
) -> None:
    """Fill a scene with random, mutually compatible picks and compile it."""
    state = _config.new_scene() if scene_file is None else _load_scene_or_exit(scene_file)
    if model is not None:
        state = state.model_copy(update={"target_model": model})

    sections = lock or []
    unknown = [name for name in sections if name not in LockedSections.model_fields]
    if unknown:
        known = ", ".join(LockedSections.model_fields)
        console.print(f"[red]Error:[/red] Unknown section {unknown[0]!r}. Choose from: {known}")
        raise typer.Exit(1)

    state = randomize_scene(
        state,
        rng=Random(seed),
        locked_sections=LockedSections(**dict.fromkeys(sections, True)),
    )
    try:
        prompt = compile_prompt(state)
    except (CinePromptError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    log.info("scene_randomized", seed=seed, model=state.target_model)
    console.print(prompt, markup=False, highlight=False, soft_wrap=True)
