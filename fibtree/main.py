"""
fibtree Main module - command line interface
"""

import logging
from typing import Any, Optional

import typer

from fibtree.features import FeatureRegistry, Feature, OperationResult
from fibtree.logs import setup_logging
from fibtree.settings import DEFAULT_NUMBER
from fibtree.version import get_version

# Module-level logger
logger = logging.getLogger("fibtree.main")

# Create CLI app with Typer
app = typer.Typer(
    name="fibtree",
    help="fibtree - compute Fibonacci numbers over a parallel decomposition tree",
    add_completion=False,
)


# ----------------- Helper Functions -----------------


def _feature_or_exit(feature_name: str) -> Feature:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    if not result.success:
        logger.error("Operation failed: %s", result.error or "Unknown error")
        raise typer.Exit(code=1)
    return result.data


def handle_cli_feature(feature_name: str, **kwargs: Any) -> Any:
    """Run a registered feature and return its data, exiting on failure"""
    feature = _feature_or_exit(feature_name)
    try:
        result = feature.handler(**kwargs)
    except Exception:
        logger.exception("Unexpected error")
        raise typer.Exit(code=1)
    return _handle_cli_result(feature_name, result)


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the fibtree version"""
    setup_logging(False)
    data = handle_cli_feature("version")
    logger.info("fibtree version: %s", data.get("version", "unknown"))


@app.command()
def compute(
    number: int = typer.Argument(DEFAULT_NUMBER, help="fib(n) number to calculate"),
    cores: int = typer.Option(
        0, "--cores", help="Leaf budget for the decomposition tree (0: use the CPU count)"
    ),
    strategy: Optional[str] = typer.Option(
        None, help="Execution strategy: threads or dask (default: $FIBTREE_STRATEGY or threads)"
    ),
    sequential_threshold: Optional[int] = typer.Option(
        None,
        "--sequential-threshold",
        help="Evaluate subtrees with at most this many leaves without forking",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Do not print the computed number"),
    save_tree_as_json: Optional[str] = typer.Option(
        None, help="Save the decomposition tree as JSON"
    ),
    save_tree_as_dot: Optional[str] = typer.Option(
        None, help="Save the decomposition tree in .dot format"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Compute fib(NUMBER) in parallel"""
    setup_logging(debug, verbose)
    logger.debug("fibtree version: %s", get_version())
    if cores == 0:
        logger.info("No core count specified, using the configured default budget")

    data = handle_cli_feature(
        "compute",
        number=number,
        cores=cores,
        strategy=strategy,
        sequential_threshold=sequential_threshold,
        quiet=quiet,
        save_tree_as_json=save_tree_as_json,
        save_tree_as_dot=save_tree_as_dot,
    )

    if "value" in data:
        typer.echo(f"Fib({number}) => {data['value']}")
    typer.echo(f"Fib({number}) has {data['digits']} digits")
    typer.echo(f"Took {data['execution_time']} seconds")


@app.command()
def tree(
    number: int = typer.Argument(..., help="fib(n) number to decompose"),
    cores: int = typer.Option(
        0, "--cores", help="Leaf budget for the decomposition tree (0: use the CPU count)"
    ),
    save_tree_as_json: Optional[str] = typer.Option(
        None, help="Save the decomposition tree as JSON"
    ),
    save_tree_as_dot: Optional[str] = typer.Option(
        None, help="Save the decomposition tree in .dot format"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Show how fib(NUMBER) would be decomposed, without evaluating it"""
    setup_logging(debug)

    data = handle_cli_feature(
        "tree",
        number=number,
        cores=cores,
        save_tree_as_json=save_tree_as_json,
        save_tree_as_dot=save_tree_as_dot,
    )

    typer.echo(
        f"Fib({number}) with budget {data['budget']}: "
        f"tree_size={data['tree_size']} depth={data['tree_depth']}"
    )
    for leaf in data["leaves"]:
        typer.echo(f"  {leaf['path']:<30} fib({leaf['index']})")


if __name__ == "__main__":
    app()
