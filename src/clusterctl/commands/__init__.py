"""clusterctl commands package.
clusterctl 명령어 패키지.

Structure:
    commands/
    ├── __init__.py          # This file
    └── user/                # User commands (clusterctl user ...)
        ├── __init__.py      # Group + --api-url
        ├── factory.py       # Deferred Admin API client construction
        ├── create.py        # user create
        └── delete.py        # user delete
"""

from clusterctl.commands.user import new_user_app

__all__ = ["new_user_app"]
