"""Main CLI entry point using Typer.

Each command runs exactly one reconcile pass and reports what the driver
should do next; polling is left to whoever invokes the CLI.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import structlog
import typer
from rich.console import Console

from hypershift_deployment_manager import __version__
from hypershift_deployment_manager.integrations.kubernetes.client import KubernetesClient
from hypershift_deployment_manager.integrations.kubernetes.config import KubernetesPluginConfig
from hypershift_deployment_manager.integrations.kubernetes.exceptions import (
    InvalidSpecError,
    KubernetesError,
)
from hypershift_deployment_manager.logging.config import (
    bind_reconcile_context,
    clear_reconcile_context,
    configure_logging,
)
from hypershift_deployment_manager.services.kubernetes.manifestwork_manager import (
    ManifestWorkReconciler,
    ReconcileResult,
)

app = typer.Typer(
    name="hdm",
    help="Reconcile HypershiftDeployments into ManifestWorks.",
    add_completion=False,
)

console = Console()
logger = structlog.get_logger()

T = TypeVar("T")

NamespaceOption = typer.Option(
    None,
    "--namespace",
    "-n",
    help="Namespace of the HypershiftDeployment (defaults to the configured namespace).",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"hdm version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON."),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML configuration file (default: ~/.config/hdm/config.yaml).",
    ),
) -> None:
    """Reconcile HypershiftDeployments into ManifestWorks."""
    configure_logging(verbose=verbose, debug=debug, json_output=json_logs)
    ctx.obj = {"config_path": config}


def get_client(config_path: Path | None = None) -> KubernetesClient:
    """Build a client from the configuration file and environment."""
    return KubernetesClient(KubernetesPluginConfig.load(config_path))


def _run_pass(
    client: KubernetesClient,
    name: str,
    namespace: str | None,
    action: Callable[[ManifestWorkReconciler, str, str | None], T],
) -> T:
    """Run one pass, retrying only connection-level failures."""
    reconciler = ManifestWorkReconciler(client)
    retrying = client.make_retry_decorator()
    bind_reconcile_context(namespace or client.default_namespace, name)
    try:
        result: T = retrying(action)(reconciler, name, namespace)
        return result
    finally:
        clear_reconcile_context()


def _config_path(ctx: typer.Context) -> Path | None:
    return (ctx.obj or {}).get("config_path")


def _report(result: ReconcileResult) -> None:
    if result.requeue_after is not None:
        console.print(
            f"[yellow]Cleanup in progress[/yellow], check again in {result.requeue_after:g}s"
        )
    else:
        console.print("[green]Done[/green]")


def _create(
    reconciler: ManifestWorkReconciler, name: str, namespace: str | None
) -> ReconcileResult:
    hyd = reconciler.get_hypershift_deployment(name, namespace)
    return reconciler.create_manifestwork(hyd)


def _delete(
    reconciler: ManifestWorkReconciler, name: str, namespace: str | None
) -> ReconcileResult:
    hyd = reconciler.get_hypershift_deployment(name, namespace)
    return reconciler.delete_manifestwork_wait_cleanup(hyd)


@app.command()
def reconcile(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="HypershiftDeployment name."),
    namespace: str | None = NamespaceOption,
) -> None:
    """Create the ManifestWork for a HypershiftDeployment, or sync its status."""
    try:
        with get_client(_config_path(ctx)) as client:
            result = _run_pass(client, name, namespace, _create)
    except InvalidSpecError as e:
        console.print(f"[red]Invalid spec:[/red] {e}")
        raise typer.Exit(2) from e
    except KubernetesError as e:
        logger.error("reconcile_failed", name=name, namespace=namespace, error=str(e))
        console.print(f"[red]Reconcile failed:[/red] {e}")
        raise typer.Exit(1) from e
    _report(result)


@app.command()
def delete(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="HypershiftDeployment name."),
    namespace: str | None = NamespaceOption,
) -> None:
    """Delete the ManifestWork of a HypershiftDeployment and report cleanup progress."""
    try:
        with get_client(_config_path(ctx)) as client:
            result = _run_pass(client, name, namespace, _delete)
    except InvalidSpecError as e:
        console.print(f"[red]Invalid spec:[/red] {e}")
        raise typer.Exit(2) from e
    except KubernetesError as e:
        logger.error("delete_failed", name=name, namespace=namespace, error=str(e))
        console.print(f"[red]Delete failed:[/red] {e}")
        raise typer.Exit(1) from e
    _report(result)


if __name__ == "__main__":
    app()
