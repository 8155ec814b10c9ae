"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from skillfix import __version__
from skillfix.benchmark import OPERATIONS, FixtureBenchmark
from skillfix.core.config import get_app_config, init_app_config
from skillfix.core.logging import correlation_id
from skillfix.generator import InvalidArgumentError, generate
from skillfix.models import Bundle
from skillfix.profiles import PROFILES, UnknownProfileError, build_profile
from skillfix.writer import pack_fixture, write_fixture

# Initialize console for rich output
console = Console()

# Initialize the CLI app
app = typer.Typer(help="SKILLFIX - Skill fixture bundles")


def configure_app(debug: bool = False):
    """
    Configure the application with the specified settings.

    Args:
    ----
        debug: Whether to enable debug mode

    """
    config = init_app_config(debug=debug, app_version=__version__)
    config.configure_logging()
    return config


def version_callback(value: bool):
    """Print the version and exit."""
    if value:
        console.print(f"SKILLFIX version: {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode with verbose logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the application version and exit",
    ),
):
    """
    SKILLFIX - Generate and measure skill fixture bundles for performance tests.

    Use --debug to enable verbose logging.
    """
    try:
        configure_app(debug=debug)
    except (ValidationError, ValueError) as e:
        _fail(e)


def _resolve_bundle(profile: str | None, count: int | None, seed: int | None) -> Bundle:
    """Build a bundle from a profile, or a basic bundle of ``count`` records."""
    fixtures = get_app_config().fixtures
    if profile is not None:
        return build_profile(profile, seed=fixtures.seed if seed is None else seed)
    return generate(fixtures.default_count if count is None else count)


def _fail(error: Exception) -> None:
    console.print(f"Error: {error}", style="red", markup=False)
    raise typer.Exit(code=1)


@app.command("generate")
def generate_bundle(
    count: int | None = typer.Option(None, "--count", "-n", help="Number of basic records"),
    profile: str | None = typer.Option(None, "--profile", "-p", help="Fixture profile to build"),
    seed: int | None = typer.Option(None, help="Seed for detailed record attributes"),
    output_file: Path | None = typer.Option(None, "--output", "-o", help="Write the bundle JSON here"),
    as_json: bool = typer.Option(False, "--json", help="Print the bundle as JSON"),
):
    """
    Generate a fixture bundle.
    """
    try:
        bundle = _resolve_bundle(profile, count, seed)
    except (InvalidArgumentError, UnknownProfileError) as e:
        _fail(e)

    payload = bundle.to_json()

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        console.print(f"Bundle written to {output_file}", style="green")
    elif as_json:
        typer.echo(payload)
    else:
        table = Table(title="Fixture Bundle")
        table.add_column("Name")
        table.add_column("Version")
        table.add_column("Records", justify="right")
        table.add_column("JSON bytes", justify="right")
        table.add_row(
            bundle.name,
            bundle.version,
            str(len(bundle.data)),
            str(len(payload.encode("utf-8"))),
        )
        console.print(table)


@app.command("profiles")
def list_profiles():
    """
    List the registered fixture profiles.
    """
    table = Table(title="Fixture Profiles")
    table.add_column("Profile")
    table.add_column("Bundle")
    table.add_column("Records", justify="right")
    table.add_column("Kind")

    for key, fixture_profile in PROFILES.items():
        table.add_row(
            key,
            fixture_profile.bundle_name,
            str(fixture_profile.count),
            fixture_profile.kind.value,
        )

    console.print(table)


@app.command("write")
def write_bundle(
    directory: Path = typer.Argument(..., help="Directory to write the fixture into"),
    count: int | None = typer.Option(None, "--count", "-n", help="Number of basic records"),
    profile: str | None = typer.Option(None, "--profile", "-p", help="Fixture profile to build"),
    seed: int | None = typer.Option(None, help="Seed for detailed record attributes"),
):
    """
    Write a fixture directory and report its packed size.
    """
    try:
        bundle = _resolve_bundle(profile, count, seed)
    except (InvalidArgumentError, UnknownProfileError) as e:
        _fail(e)

    with correlation_id():
        write_fixture(bundle, directory)
        packed = pack_fixture(directory)

    console.print(f"Fixture {bundle.name} written to {directory}", style="green")
    console.print(
        f"Packed {packed.file_count} files: {packed.uncompressed_size} -> {packed.size} bytes "
        f"({packed.compression_ratio:.2f}% saved)",
    )


@app.command("measure")
def measure(
    profile: str | None = typer.Option(None, "--profile", "-p", help="Fixture profile to measure"),
    iterations: int = typer.Option(5, "--iterations", "-i", help="Repetitions per operation"),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        help="Keep fixture files and results.json here (default: SKILLFIX_OUTPUT_DIR)",
    ),
):
    """
    Benchmark generating, serializing, writing and packing a fixture profile.
    """
    fixtures = get_app_config().fixtures
    profile = profile or fixtures.default_profile

    try:
        benchmark = FixtureBenchmark(
            profile=profile,
            iterations=iterations,
            output_dir=str(output_dir) if output_dir else fixtures.output_dir,
        )
    except (InvalidArgumentError, UnknownProfileError) as e:
        _fail(e)

    with correlation_id():
        result = benchmark.run()

    table = Table(title=f"Benchmark: {benchmark.profile.bundle_name}")
    table.add_column("Operation")
    table.add_column("Mean ms", justify="right")
    table.add_column("p95 ms", justify="right")
    table.add_column("Max ms", justify="right")

    for operation in OPERATIONS:
        stats = result.get_stats(operation)
        table.add_row(
            operation,
            f"{stats['mean'] * 1000:.2f}",
            f"{stats['p95'] * 1000:.2f}",
            f"{stats['max'] * 1000:.2f}",
        )

    console.print(table)
    console.print(
        f"Packed size: {result.metadata['packed_bytes']} bytes "
        f"({result.metadata['compression_ratio']:.2f}% saved)",
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
