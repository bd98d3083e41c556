"""Click CLI with index, stats, and serve subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from fsgraph import __version__
from fsgraph.analysis.stats import summarize
from fsgraph.errors import IndexerError
from fsgraph.exporter import load_graph
from fsgraph.models import IndexConfig
from fsgraph.pipeline import run_index


class _IndexerFailed(click.ClickException):
    def format_message(self) -> str:
        return f"Indexer failed: {self.message}"


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """fsgraph: Index FeatureScript module dependencies into a graph."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("root", type=click.Path(path_type=Path))
@click.option("-o", "--out", "output", type=click.Path(dir_okay=False, path_type=Path),
              default="public/graph.json", show_default=True, help="Output JSON file")
@click.option("--source-map", type=click.Path(path_type=Path), help="Onshape element map JSON")
@click.option("--document-id", help="Onshape document id for source links")
@click.option("--workspace-id", help="Onshape workspace id for source links")
@click.option("--progress/--no-progress", default=False, help="Show stage progress")
def index(
    root: Path,
    output: Path,
    source_map: Path | None,
    document_id: str | None,
    workspace_id: str | None,
    progress: bool,
):
    """Index every .fs file under ROOT and write the graph JSON."""
    config = IndexConfig(
        root=root,
        output=output.resolve(),
        source_map=source_map.resolve() if source_map else None,
        document_id=document_id,
        workspace_id=workspace_id,
    )

    def report(stage: str, current: int, total: int):
        if total > 0:
            click.echo(f"  {stage}: {current}/{total}", nl=(current == total))
        else:
            click.echo(f"  {stage}...")

    try:
        graph = run_index(config, progress=report if progress else None)
    except IndexerError as e:
        raise _IndexerFailed(str(e))

    click.echo(f"Indexed root: {graph.root}")
    click.echo(f"Nodes: {len(graph.nodes)}")
    click.echo(f"Edges: {len(graph.edges)}")
    if config.source_map:
        links = sum(1 for n in graph.nodes if n.source_url)
        click.echo(f"Source links: {links}")
        click.echo(f"Onshape map: {config.source_map}")
    click.echo(f"Wrote: {config.output}")


@cli.command()
@click.argument("graph_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--top", default=10, show_default=True, help="How many most-imported modules to list")
def stats(graph_file: Path, top: int):
    """Print a summary of an existing graph JSON."""
    try:
        summary = summarize(load_graph(graph_file), top=top)
    except IndexerError as e:
        raise _IndexerFailed(str(e))

    click.echo(f"Nodes: {summary.nodes} ({summary.virtual_nodes} unresolved)")
    click.echo(f"Edges: {summary.edges}")
    for kind, count in summary.edges_by_kind.items():
        click.echo(f"  {kind}: {count}")
    if summary.most_imported:
        click.echo("\nMost imported:")
        for node_id, count in summary.most_imported:
            click.echo(f"  {count:>5}  {click.style(node_id, fg='cyan')}")


@cli.command()
@click.argument("graph_file", type=click.Path(dir_okay=False, path_type=Path), required=False)
@click.option("--port", "-p", default=8430, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(graph_file: Path | None, port: int, host: str):
    """Serve a graph JSON to the visualization layer."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for serving. "
            "Install with: pip install 'fsgraph[web]'"
        )

    from fsgraph.web import create_app

    try:
        app = create_app(graph_file)
    except IndexerError as e:
        raise _IndexerFailed(str(e))

    click.echo(f"Serving fsgraph API at http://{host}:{port}/api/graph")
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
