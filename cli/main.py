"""
NetMetrics CLI

Command-line interface for structural analysis of undirected edge lists.
Provides commands for a full metrics report, degree rankings, BFS distances
and clustering coefficients.

Commands:
    netm analyze [path]      Print the full structural report
    netm degrees [path]      Show degree statistics and top nodes
    netm bfs [path] -s S     Show BFS hop distances from a node
    netm clustering [path]   Show a node's or the average clustering

Usage:
    $ netm analyze data/facebook_combined.txt
    $ netm degrees --top 5 --histogram
    $ netm bfs --start 0 --limit 20
    $ NETMETRICS_DATASET=edges.txt netm clustering --node 107
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from netmetrics import __version__
from netmetrics.analysis import (
    DEFAULT_PREVIEW_SIZE,
    DEFAULT_START_NODE,
    analyze_graph,
    degree_histogram,
    label_key,
    top_degree_nodes,
)
from netmetrics.graph import build_graph_from_file
from netmetrics.models import DatasetLoadError, GraphReport, LoadResult

# Initialize Typer app and Rich console
app = typer.Typer(
    name="netm",
    help="NetMetrics: structural metrics for undirected edge lists",
    add_completion=False,
)
console = Console()


# Default paths
DEFAULT_DATASET_PATH = "data/facebook_combined.txt"
DATASET_ENVVAR = "NETMETRICS_DATASET"


def _dataset_argument() -> Path:
    return typer.Argument(
        Path(DEFAULT_DATASET_PATH),
        help="Path to a whitespace-separated edge list",
        envvar=DATASET_ENVVAR,
        dir_okay=False,
    )


def _load(path: Path, normalize: bool = False, drop_self_loops: bool = False) -> LoadResult:
    """Load the dataset behind a spinner, exiting with status 1 on failure."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Loading edge list...", total=None)

        try:
            result = build_graph_from_file(
                path,
                normalize=normalize,
                drop_self_loops=drop_self_loops,
            )
        except DatasetLoadError as e:
            console.print(f"[bold red]Error:[/bold red] {e}")
            raise typer.Exit(1)

        progress.update(task, description="Done!")

    return result


@app.command()
def analyze(
    path: Path = _dataset_argument(),
    start: str = typer.Option(
        DEFAULT_START_NODE,
        "--start",
        "-s",
        help="Start node for the BFS",
    ),
    node: Optional[str] = typer.Option(
        None,
        "--node",
        "-n",
        help="Node whose clustering coefficient is shown (default: start node)",
    ),
    preview: int = typer.Option(
        DEFAULT_PREVIEW_SIZE,
        "--preview",
        "-k",
        min=0,
        help="Number of degree and distance entries to show",
    ),
    normalize: bool = typer.Option(
        False,
        "--normalize",
        help="Collapse reversed duplicate edges before building",
    ),
    drop_self_loops: bool = typer.Option(
        False,
        "--drop-self-loops",
        help="Ignore edges from a node to itself",
    ),
) -> None:
    """
    Load an edge list and print the full structural report.

    This command:
    1. Loads and deduplicates the edge list
    2. Builds the undirected graph
    3. Computes degree, BFS and clustering metrics
    """
    console.print(f"\n[bold blue]📂 Dataset:[/bold blue] {path}\n")

    result = _load(path, normalize=normalize, drop_self_loops=drop_self_loops)
    report = analyze_graph(
        result.graph,
        start_node=start,
        sample_node=node,
        preview=preview,
    )

    _print_load_summary(result)
    _print_degree_section(report)
    _print_distance_section(report)
    _print_clustering_panel(report)


@app.command()
def degrees(
    path: Path = _dataset_argument(),
    top: int = typer.Option(
        10,
        "--top",
        "-t",
        min=0,
        help="Number of highest-degree nodes to list",
    ),
    histogram: bool = typer.Option(
        False,
        "--histogram",
        help="Also print the degree histogram",
    ),
) -> None:
    """
    Show degree statistics and the highest-degree nodes.
    """
    result = _load(path)
    graph = result.graph

    stats = graph.degree_statistics()
    console.print(
        f"\n[bold]Degree statistics[/bold] - Min: {stats.min_degree}, "
        f"Max: {stats.max_degree}, Average: {stats.average_degree:.2f}\n"
    )

    table = Table(title=f"Top {top} Nodes by Degree", box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Degree", justify="right")
    for label, degree in top_degree_nodes(graph, top):
        table.add_row(str(label), str(degree))
    console.print(table)

    if histogram:
        hist_table = Table(title="Degree Histogram", box=box.SIMPLE)
        hist_table.add_column("Degree", justify="right")
        hist_table.add_column("Nodes", justify="right")
        for degree, count in degree_histogram(graph).items():
            hist_table.add_row(str(degree), str(count))
        console.print(hist_table)


@app.command()
def bfs(
    path: Path = _dataset_argument(),
    start: str = typer.Option(
        DEFAULT_START_NODE,
        "--start",
        "-s",
        help="Start node for the BFS",
    ),
    limit: int = typer.Option(
        DEFAULT_PREVIEW_SIZE,
        "--limit",
        "-n",
        min=0,
        help="Number of distances to show (0 for all)",
    ),
) -> None:
    """
    Show breadth-first hop distances from a start node.
    """
    result = _load(path)
    graph = result.graph

    if start not in graph:
        console.print(f"[yellow]Node '{start}' is not in the graph.[/yellow]")
        raise typer.Exit(1)

    distances = sorted(graph.bfs(start).items(), key=lambda item: label_key(item[0]))
    shown = distances[:limit] if limit else distances

    console.print(f"\n[bold]Performing BFS starting from node {start}[/bold]")

    table = Table(box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Distance", justify="right")
    for label, distance in shown:
        table.add_row(str(label), str(distance))
    console.print(table)

    console.print(
        f"[dim]Reached {len(distances)} of {graph.node_count} nodes.[/dim]"
    )


@app.command()
def clustering(
    path: Path = _dataset_argument(),
    node: Optional[str] = typer.Option(
        None,
        "--node",
        "-n",
        help="Node to evaluate (default: graph-wide average)",
    ),
) -> None:
    """
    Show the clustering coefficient of one node, or the graph average.
    """
    result = _load(path)
    graph = result.graph

    if node is None:
        average = graph.average_clustering_coefficient()
        console.print(f"Average clustering coefficient for the graph: {average:.4f}")
        return

    if node not in graph:
        console.print(f"[yellow]Node '{node}' is not in the graph; coefficient is 0.0.[/yellow]")

    coefficient = graph.clustering_coefficient(node)
    console.print(f"Clustering coefficient for node {node}: {coefficient:.4f}")


# Helper functions for output formatting

def _print_load_summary(result: LoadResult) -> None:
    """Print a summary panel after loading."""
    graph = result.graph

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Raw edges", str(result.raw_edge_count))
    table.add_row("Unique edges", str(result.unique_edge_count))
    table.add_row("Nodes", str(graph.node_count))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row("Load time", f"{result.load_time_seconds:.2f}s")

    panel = Panel(table, title="[bold green]✓ Graph Constructed[/bold green]", border_style="green")
    console.print(panel)


def _print_degree_section(report: GraphReport) -> None:
    """Print degree statistics, extremes and the degree preview."""
    stats = report.degree_stats
    console.print(
        f"\n[bold]Degree statistics[/bold] - Min: {stats.min_degree}, "
        f"Max: {stats.max_degree}, Average: {stats.average_degree:.2f}"
    )

    if report.highest_degree is not None:
        label, degree = report.highest_degree
        console.print(f"   • Highest degree: [cyan]{label}[/cyan] ({degree})")
    if report.lowest_degree is not None:
        label, degree = report.lowest_degree
        console.print(f"   • Lowest degree:  [cyan]{label}[/cyan] ({degree})")

    if not report.degree_preview:
        return

    table = Table(title=f"Degrees of the first {len(report.degree_preview)} nodes", box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Degree", justify="right")
    for label, degree in report.degree_preview:
        table.add_row(str(label), str(degree))
    console.print(table)


def _print_distance_section(report: GraphReport) -> None:
    """Print the BFS preview and reachability."""
    console.print(f"\n[bold]BFS from node {report.start_node}[/bold]")

    if report.reached_count == 0:
        console.print(f"   [yellow]Node '{report.start_node}' is not in the graph.[/yellow]")
        return

    table = Table(box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Distance", justify="right")
    for label, distance in report.distance_preview:
        table.add_row(str(label), str(distance))
    console.print(table)

    console.print(
        f"   Reached {report.reached_count} of {report.node_count} nodes "
        f"({report.reached_percentage:.1f}%), eccentricity {report.eccentricity}"
    )


def _print_clustering_panel(report: GraphReport) -> None:
    """Print local and average clustering coefficients."""
    body = (
        f"Clustering coefficient for node {report.sample_node}: "
        f"[bold]{report.sample_clustering:.4f}[/bold]\n"
        f"Average clustering coefficient for the graph: "
        f"[bold]{report.average_clustering:.4f}[/bold]"
    )
    console.print(Panel(body, title="[bold]Clustering[/bold]", border_style="blue"))


# Version and logging options
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable debug logging",
    ),
) -> None:
    """
    NetMetrics: structural metrics for undirected edge lists.
    """
    if version:
        console.print(f"[bold]NetMetrics[/bold] version {__version__}")
        raise typer.Exit()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


if __name__ == "__main__":
    app()
