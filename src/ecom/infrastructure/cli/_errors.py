"""Translation of application failures into click errors."""

from __future__ import annotations

import click
from sqlalchemy.exc import SQLAlchemyError

from ecom.domain.exceptions import DomainException

CLI_ERRORS = (DomainException, SQLAlchemyError)


def to_click_exception(exc: Exception) -> click.ClickException:
    if isinstance(exc, SQLAlchemyError):
        # The driver's message, without the SQL statement
        return click.ClickException(f"Database error: {getattr(exc, 'orig', None) or exc}")
    return click.ClickException(str(exc))
