"""유틸리티 함수."""

from typing import Optional

import typer


def require_non_empty(value: Optional[str]) -> Optional[str]:
    """Reject empty option values / 빈 옵션 값 거부."""
    if value is not None and not value:
        raise typer.BadParameter("must not be empty")
    return value
