"""
MatrixGraph CLI - Command-line interface for adjacency matrix analysis.

This module provides the command-line interface for MatrixGraph: format
conversion, structural analysis, shortest paths and spanning trees over an
adjacency matrix stored in any of the supported text formats.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__, configure_logging
from ..analysis import GraphReport
from ..core.config_spec import EngineConfig, load_config
from ..core.enums import PathStatus
from ..core.exceptions import MatrixGraphError
from ..core.graph import GraphModel, format_weight
from ..formats import FormatCodec, get_format, list_formats


def resolve_format(path: Path, explicit: Optional[str], config: EngineConfig) -> str:
    """Pick the format for a file: explicit choice, then extension, then default."""
    if explicit:
        return explicit
    return FormatCodec.format_for(path.name, config.default_format)


def load_model(path: Path, fmt: Optional[str], config: EngineConfig) -> GraphModel:
    """Read a file into a new GraphModel, exiting with status 1 on failure."""
    format_name = resolve_format(path, fmt, config)
    model = GraphModel(0, zero_as_no_edge=config.zero_as_no_edge)
    codec = FormatCodec(model)

    text = path.read_text(encoding='utf-8')
    if not codec.parse(format_name, text):
        click.echo(f"❌ Could not read {path} as {format_name}", err=True)
        sys.exit(1)
    return model


@click.group()
@click.version_option(version=__version__, prog_name='MatrixGraph')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, path_type=Path),
              help='YAML configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """MatrixGraph - Weighted graph analysis from an adjacency matrix.

    \b
    Common Commands:
      matrixgraph convert graph.json graph.dot      - Convert between formats
      matrixgraph analyze graph.csv                 - Structural properties
      matrixgraph floyd graph.json --start A --end C - All-pairs shortest paths
      matrixgraph dijkstra graph.json A C           - Single-source shortest path
      matrixgraph mst graph.json                    - Minimum spanning tree
      matrixgraph formats                           - List supported formats

    Use 'matrixgraph COMMAND --help' for more information on each command.
    """
    try:
        config = load_config(config_path) if config_path else EngineConfig()
    except MatrixGraphError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    configure_logging('debug' if verbose else config.log_level)
    ctx.obj = config


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('output_path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--from', 'source_format', type=click.Choice(list_formats()),
              help='Input format (default: inferred from extension)')
@click.option('--to', 'target_format', type=click.Choice(list_formats()),
              help='Output format (default: inferred from extension)')
@click.pass_obj
def convert(config: EngineConfig, input_path: Path, output_path: Path,
            source_format: Optional[str], target_format: Optional[str]):
    """Convert a graph file from one format to another.

    \b
    Examples:
      matrixgraph convert graph.json graph.graphml
      matrixgraph convert matrix.txt graph.gml --from LaTeX
    """
    model = load_model(input_path, source_format, config)
    target = resolve_format(output_path, target_format, config)

    try:
        output_path.write_text(FormatCodec(model).serialize(target), encoding='utf-8')
    except OSError as e:
        click.echo(f"❌ Could not write {output_path}: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Wrote {model.num_nodes} nodes to {output_path} ({target})")


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--from', 'source_format', type=click.Choice(list_formats()),
              help='Input format (default: inferred from extension)')
@click.option('--format', '-f', 'output_format',
              type=click.Choice(['table', 'json']),
              default='table',
              help='Output format for the results')
@click.pass_obj
def analyze(config: EngineConfig, input_path: Path, source_format: Optional[str], output_format: str):
    """Print the structural properties of a graph."""
    graph = load_model(input_path, source_format, config).snapshot()
    report = GraphReport(config)
    analysis = report.analysis(graph)

    if output_format == 'json':
        click.echo(json.dumps(analysis.to_dict(), indent=2))
    else:
        click.echo(report.analysis_table(analysis).to_string(index=False))


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--from', 'source_format', type=click.Choice(list_formats()),
              help='Input format (default: inferred from extension)')
@click.option('--start', help='Start label for a path query')
@click.option('--end', help='End label for a path query')
@click.option('--steps', is_flag=True, help='Print the matrix after every pivot')
@click.pass_obj
def floyd(config: EngineConfig, input_path: Path, source_format: Optional[str],
          start: Optional[str], end: Optional[str], steps: bool):
    """All-pairs shortest paths (Floyd-Warshall).

    \b
    Examples:
      matrixgraph floyd graph.json
      matrixgraph floyd graph.json --start A --end D --steps
    """
    graph = load_model(input_path, source_format, config).snapshot()
    result = GraphReport.floyd(graph)

    if steps:
        for step in result.steps:
            title = "Initial" if step.pivot < 0 else f"k = {result.labels[step.pivot]}"
            click.echo(title)
            click.echo(GraphReport.distance_table(step.matrix, result.labels).to_string())
            click.echo()

    click.echo("Distances:")
    click.echo(GraphReport.distance_table(result.dist, result.labels).to_string())
    click.echo(f"Diameter: {format_weight(result.diameter)}")
    if result.has_inf_pairs:
        click.echo("⚠️  Some pairs are unreachable")

    if start is None and end is None:
        return
    if start is None or end is None:
        click.echo("❌ --start and --end must be given together", err=True)
        sys.exit(1)

    try:
        query = result.query(start, end)
    except MatrixGraphError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    if query.status == PathStatus.OK:
        click.echo(f"Path {start} → {end}: {query.path_string} (cost {format_weight(query.cost)})")
    else:
        click.echo(f"Path {start} → {end}: unreachable")


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('start')
@click.argument('end')
@click.option('--from', 'source_format', type=click.Choice(list_formats()),
              help='Input format (default: inferred from extension)')
@click.pass_obj
def dijkstra(config: EngineConfig, input_path: Path, start: str, end: str,
             source_format: Optional[str]):
    """Single-source shortest path (Dijkstra) with its step table."""
    graph = load_model(input_path, source_format, config).snapshot()

    try:
        graph.index_of(start)
        graph.index_of(end)
    except MatrixGraphError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    result = GraphReport.dijkstra(graph, start, end)
    click.echo(GraphReport.dijkstra_table(result, graph.node_labels).to_string(index=False))

    if result.status == PathStatus.OK:
        click.echo(f"Cost: {format_weight(result.cost)}")
        click.echo(f"Path: {result.path_string}")
    else:
        click.echo(f"{end} is unreachable from {start}")


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--from', 'source_format', type=click.Choice(list_formats()),
              help='Input format (default: inferred from extension)')
@click.pass_obj
def mst(config: EngineConfig, input_path: Path, source_format: Optional[str]):
    """Minimum spanning tree (Kruskal) and whether it is unique."""
    graph = load_model(input_path, source_format, config).snapshot()
    result = GraphReport.mst(graph)

    click.echo(f"Cost: {format_weight(result.cost)}")
    click.echo(f"Edges: {result.edges or '-'}")
    click.echo(f"Uniqueness: {result.uniqueness.value}")


@cli.command('formats')
def formats_cmd():
    """List the supported text formats.

    \b
    Example:
      matrixgraph formats
    """
    names = list_formats()
    click.echo("📄 Supported Formats")
    click.echo("-" * 40)
    for name in names:
        fmt = get_format(name)
        click.echo(f"• {name:<8} {fmt.mime:<18} {fmt.accept}")
    click.echo(f"\nTotal: {len(names)} formats")


if __name__ == '__main__':
    cli()
