"""Timeout-bounded session access shared by the SQLAlchemy repositories.

Every statement and flush goes through ``_guard``: it runs under a
timeout, cancels the pending call when the timeout fires, and turns
timeouts and connection-level driver errors into StoreUnavailableError.
Integrity errors pass through untouched so that repositories can map
them to duplicate-key errors.
"""

import asyncio
import logging
from typing import Any, Awaitable, TypeVar

from sqlalchemy.engine import Result
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from hrm_identity.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_STORE_TIMEOUT_SECONDS = 5.0

T = TypeVar("T")


class SessionRepository:
    """Base for repositories that talk to the store through one AsyncSession."""

    def __init__(
        self,
        session: AsyncSession,
        timeout: float = DEFAULT_STORE_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session
        self._timeout = timeout

    async def _guard(self, operation: Awaitable[T], description: str) -> T:
        try:
            return await asyncio.wait_for(operation, timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error(
                "Store call timed out after %.1fs: %s",
                self._timeout,
                description,
            )
            msg = f"Store call timed out: {description}"
            raise StoreUnavailableError(msg) from e
        except (OperationalError, InterfaceError, OSError) as e:
            logger.error("Store call failed: %s (%s)", description, e)
            msg = f"Store call failed: {description}"
            raise StoreUnavailableError(msg) from e

    async def _execute(self, stmt: Any, description: str = "execute") -> Result[Any]:
        return await self._guard(self._session.execute(stmt), description)

    async def _flush(self, description: str = "flush") -> None:
        await self._guard(self._session.flush(), description)

    async def _delete_model(self, model: Any, description: str = "delete") -> None:
        await self._guard(self._session.delete(model), description)
        await self._flush(description)
