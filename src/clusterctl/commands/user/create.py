"""User create command.
사용자 생성 명령어.

Commands:
    clusterctl user create --new-username <n> --new-password <pw>
"""

from contextlib import closing

import typer
from rich.console import Console
from rich.markup import escape

from clusterctl.commands.user.factory import AdminAPIFactory
from clusterctl.utils import require_non_empty

console = Console(soft_wrap=True)

NEW_USER_FLAG = "--new-username"
NEW_PASSWORD_FLAG = "--new-password"


def new_create_user_command(admin_api: AdminAPIFactory):
    """Build the `create` command bound to `admin_api`."""

    def create_user(
        ctx: typer.Context,
        new_username: str = typer.Option(
            ..., NEW_USER_FLAG, help="The user to be created", callback=require_non_empty
        ),
        new_password: str = typer.Option(
            ..., NEW_PASSWORD_FLAG, help="The new user's password", callback=require_non_empty
        ),
    ):
        """Create users / 사용자 생성."""
        with closing(admin_api.resolve(ctx.obj["api_url"])) as client:
            client.create_user(new_username, new_password)

        console.print(f"[green]✓[/green] Created user '{escape(new_username)}'")

    return create_user
