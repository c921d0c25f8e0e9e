"""clusterctl - Cluster user management CLI.
클러스터 사용자 관리 CLI.

Usage:
    clusterctl user create --new-username <n> --new-password <pw>
    clusterctl user delete --delete-username <n>
    clusterctl config          # Show current configuration
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from clusterctl import __version__
from clusterctl.commands.user import new_user_app
from clusterctl.config import settings
from clusterctl.errors import ClusterctlError

app = typer.Typer(
    name="clusterctl",
    help="Cluster user management CLI / 클러스터 사용자 관리 CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True, soft_wrap=True)

# User sub-command
app.add_typer(new_user_app(), name="user", help="Manage users / 사용자 관리")


@app.callback(invoke_without_command=True)
def callback(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    """Cluster user management CLI.

    \b
    Quick Start:
        clusterctl user create --new-username alice --new-password secret
        clusterctl user delete --delete-username alice

    \b
    Admin API address:
        clusterctl user --api-url 10.0.0.5:9644 create ...
    """
    if version:
        console.print(f"clusterctl {__version__}")
        raise typer.Exit(0)


@app.command("config")
def config_command():
    """Show current configuration."""
    table = Table(title="Current Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="green")
    table.add_column("Value", style="white")

    configs = [
        ("Admin API URL", settings.admin_api_url),
        ("SASL Mechanism", settings.sasl_mechanism),
        ("Request Timeout", f"{settings.request_timeout}s"),
        ("TLS Cert", settings.tls_cert_file),
        ("TLS Key", settings.tls_key_file),
        ("TLS Truststore", settings.tls_truststore_file),
        ("Config File", settings.user_config_file),
    ]

    for name, value in configs:
        table.add_row(name, str(value) if value else "-")

    console.print(table)


def main() -> None:
    """Console script entry point.

    Command errors arrive here unchanged and are reported without usage output.
    """
    try:
        app()
    except ClusterctlError as e:
        err_console.print(f"[red]✗[/red] {escape(e.message)}")
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()
