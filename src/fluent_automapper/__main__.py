"""Command line entry point for fluent-automapper.

The CLI maps JSON documents with mappings declared in Python:

1.  Loading settings (environment / `.env`) and configuring logging.
2.  Importing a configurator given as `package.module:attribute` and running it
    through `automapper.initialize`.
3.  Reading a JSON object or array from a file or stdin.
4.  Mapping it with the requested key pair and printing the result as JSON.

Example:
    python -m fluent_automapper map UserRow User \\
        --configurator myapp.mappings:configure --input users.json
"""
from __future__ import annotations

import dataclasses
import importlib
import json
import logging
import sys
from typing import Any, Callable, Optional

import typer
from pydantic import BaseModel

from .config import get_settings
from .engine import Configuration, automapper
from .errors import AutoMapperError
from .profile import key_name

app = typer.Typer(help="fluent-automapper CLI: map JSON documents with configured mappings")

logger = logging.getLogger(__name__)


def load_configurator(target: str) -> Callable[[Configuration], Any]:
    """Import `package.module:attribute` and return the configurator callable.

    Nested attributes are allowed (`module:Mappings.configure`).
    """
    module_name, sep, attribute_path = target.partition(":")
    if not sep or not module_name or not attribute_path:
        raise typer.BadParameter(
            f"expected 'package.module:attribute', got {target!r}", param_hint="--configurator"
        )
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(
            f"cannot import module {module_name!r}: {e}", param_hint="--configurator"
        ) from e
    for part in attribute_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise typer.BadParameter(
                f"{module_name!r} has no attribute {attribute_path!r}", param_hint="--configurator"
            ) from e
    if not callable(obj):
        raise typer.BadParameter(f"{target!r} is not callable", param_hint="--configurator")
    return obj


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _configure(configurator: Optional[str]) -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.AUTOMAPPER_LOG_LEVEL)
    target = configurator or settings.AUTOMAPPER_CONFIGURATOR
    if not target:
        raise typer.BadParameter(
            "no configurator given; pass --configurator or set AUTOMAPPER_CONFIGURATOR",
            param_hint="--configurator",
        )
    automapper.initialize(load_configurator(target))
    logger.info("Initialized mappings from %s (%d definitions)", target, len(automapper.registry))


@app.callback()
def main() -> None:  # pragma: no cover - simple callback
    """fluent-automapper CLI.

    Use a subcommand like 'map' to run a mapping.
    """
    pass


@app.command("map", help="Map a JSON object or array read from a file or stdin.")
def map_command(
    source_key: str = typer.Argument(..., help="Registered source key"),
    destination_key: str = typer.Argument(..., help="Registered destination key"),
    configurator: Optional[str] = typer.Option(
        None, help="Configurator 'package.module:attribute' (overrides AUTOMAPPER_CONFIGURATOR)"
    ),
    input_path: str = typer.Option(
        "-", "--input", help="Path to a JSON document, '-' for stdin"
    ),
    indent: Optional[int] = typer.Option(
        None, help="Override JSON output indentation (0 = compact)"
    ),
) -> None:
    _configure(configurator)
    try:
        if input_path == "-":
            document = json.load(sys.stdin)
        else:
            with open(input_path, "r", encoding="utf-8") as f:
                document = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Failed to read JSON input: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        result = automapper.map(source_key, destination_key, document)
    except AutoMapperError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    effective_indent = get_settings().AUTOMAPPER_JSON_INDENT if indent is None else indent
    typer.echo(
        json.dumps(
            result,
            default=_to_jsonable,
            ensure_ascii=False,
            indent=effective_indent or None,
        )
    )


@app.command("list-maps", help="List registered mapping key pairs and profiles.")
def list_maps(
    configurator: Optional[str] = typer.Option(
        None, help="Configurator 'package.module:attribute' (overrides AUTOMAPPER_CONFIGURATOR)"
    ),
) -> None:
    _configure(configurator)
    for definition in automapper.registry.definitions():
        line = f"{key_name(definition.source_key)} -> {key_name(definition.destination_key)}"
        if definition.profile is not None:
            line += f" [profile={definition.profile.profile_name}]"
        typer.echo(line)
    for profile in automapper.registry.profiles():
        typer.echo(f"profile {profile.profile_name}")


if __name__ == "__main__":  # pragma: no cover
    app()
