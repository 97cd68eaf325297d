import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from classdoc import __version__
from classdoc.classifier import STRICT
from classdoc.config import DocsConfig, load_docs_config
from classdoc.driver import generate_documentation
from classdoc.index import EntityIndex
from classdoc.links import LinkResolver
from classdoc.renderer import render_markdown
from classdoc.sinks import FilesystemSink
from classdoc.sources import candidate_identifiers
from classdoc.summarizer import EntitySummarizer

app = typer.Typer(
    help="classdoc - generate Markdown class documentation for a PHP project",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_config(
    project_root: Path,
    source: Optional[str],
    output: Optional[str],
    root_namespace: Optional[str],
    framework_version: Optional[str],
    strict: bool,
    lenient_docblocks: bool = False,
) -> DocsConfig:
    """Load the project's .classdoc file and apply command-line overrides."""
    config = load_docs_config(project_root)
    if source:
        config.source_dir = source
    if output:
        config.output_dir = output
    if root_namespace:
        config.root_namespace = root_namespace
    if framework_version:
        config.framework_version = framework_version
    if strict:
        config.classification = STRICT
    if lenient_docblocks:
        config.lenient_docblocks = True
    return config


def _build_index(project_root: Path, config: DocsConfig) -> EntityIndex:
    paths = [project_root / config.source_dir]
    paths.extend(config.inheritance_paths(project_root))
    return EntityIndex.from_paths(paths)


def _build_summarizer(project_root: Path, config: DocsConfig) -> EntitySummarizer:
    link_resolver = LinkResolver(
        root_namespace=config.root_namespace,
        external_base_url=config.external_base_url,
        framework_version=config.resolved_version(project_root),
    )
    return EntitySummarizer(link_resolver, config.classification, config.lenient_docblocks)


@app.command()
def generate(
    project_root: Path = typer.Argument(Path("."), help="Project root containing the source directory"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Source directory, relative to the project root"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output directory, relative to the project root"),
    root_namespace: Optional[str] = typer.Option(None, "--root-namespace", help="Namespace mapped onto the source directory"),
    framework_version: Optional[str] = typer.Option(None, "--framework-version", help="Framework version for external links"),
    strict: bool = typer.Option(False, "--strict", help="Keep every modifier in member labels"),
    lenient_docblocks: bool = typer.Option(False, "--lenient-docblocks", help="Accept @var tags without a variable name"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
):
    """Generate one Markdown page per class, interface and trait.

    Args:
        project_root: Project root directory
    """
    _configure_logging(verbose)

    config = _build_config(
        project_root, source, output, root_namespace, framework_version, strict, lenient_docblocks
    )
    source_dir = project_root / config.source_dir

    if not source_dir.is_dir():
        typer.echo(f"Error: Source directory not found: {source_dir}", err=True)
        raise typer.Exit(code=1)

    index = _build_index(project_root, config)
    summarizer = _build_summarizer(project_root, config)
    sink = FilesystemSink(project_root / config.output_dir)

    report = generate_documentation(
        candidate_identifiers(source_dir, config.root_namespace),
        index.resolve,
        sink,
        summarizer,
    )

    console.print(f"Generated {len(report.generated)} page(s), skipped {len(report.skipped)} file(s).")

    if not report.ok:
        for key, error in report.failed:
            typer.echo(f"Error: {key}: {error}", err=True)
        raise typer.Exit(code=1)

    console.print("[green]Class documentation has been generated![/green]")


@app.command()
def show(
    name: str = typer.Argument(..., help="Fully qualified name, e.g. App\\Models\\User"),
    project_root: Path = typer.Option(Path("."), "--root", "-r", help="Project root"),
    strict: bool = typer.Option(False, "--strict", help="Keep every modifier in member labels"),
):
    """Print the documentation page for a single entity.

    Args:
        name: Fully qualified entity name
    """
    config = _build_config(project_root, None, None, None, None, strict)
    index = _build_index(project_root, config)

    entity = index.get(name.lstrip("\\"))
    if entity is None:
        typer.echo(f"Error: Entity '{name}' not found", err=True)
        raise typer.Exit(code=1)

    summarizer = _build_summarizer(project_root, config)
    typer.echo(render_markdown(summarizer.summarize(entity)))


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"classdoc version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    )):
    pass
