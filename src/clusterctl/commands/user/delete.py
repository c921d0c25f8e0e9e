"""User delete command.
사용자 삭제 명령어.

Commands:
    clusterctl user delete --delete-username <n>
"""

from contextlib import closing

import typer
from rich.console import Console
from rich.markup import escape

from clusterctl.commands.user.factory import AdminAPIFactory
from clusterctl.utils import require_non_empty

console = Console(soft_wrap=True)

DELETE_USERNAME_FLAG = "--delete-username"


def new_delete_user_command(admin_api: AdminAPIFactory):
    """Build the `delete` command bound to `admin_api`."""

    def delete_user(
        ctx: typer.Context,
        username: str = typer.Option(
            ..., DELETE_USERNAME_FLAG, help="The user to be deleted", callback=require_non_empty
        ),
    ):
        """Delete users / 사용자 삭제."""
        with closing(admin_api.resolve(ctx.obj["api_url"])) as client:
            client.delete_user(username)

        console.print(f"[green]✓[/green] Deleted user '{escape(username)}'")

    return delete_user
