"""User management commands for clusterctl.
사용자 관리 명령어.

Usage:
    clusterctl user create --new-username <n> --new-password <pw>
    clusterctl user delete --delete-username <n>
    clusterctl user --api-url <host:port> ...   # Override Admin API address
"""

from typing import Optional

import typer

from clusterctl.admin_client import AdminClient
from clusterctl.commands.user.create import new_create_user_command
from clusterctl.commands.user.delete import new_delete_user_command
from clusterctl.commands.user.factory import AdminAPIFactory, ClientBuilder, TLSResolver
from clusterctl.config import settings


def new_user_app(
    resolve_tls: Optional[TLSResolver] = None,
    build_client: ClientBuilder = AdminClient,
) -> typer.Typer:
    """Build the `user` command group.

    The Admin API client is only built when a subcommand runs.
    """
    app = typer.Typer(
        name="user",
        help="Manage users / 사용자 관리",
        no_args_is_help=True,
    )

    @app.callback()
    def user(
        ctx: typer.Context,
        api_url: str = typer.Option(
            settings.admin_api_url, "--api-url", help="The Admin API URL"
        ),
    ):
        """Manage users / 사용자 관리."""
        ctx.ensure_object(dict)["api_url"] = api_url

    admin_api = AdminAPIFactory(resolve_tls or settings.resolve_tls, build_client)

    app.command("create")(new_create_user_command(admin_api))
    app.command("delete")(new_delete_user_command(admin_api))
    return app


__all__ = ["new_user_app", "AdminAPIFactory"]
