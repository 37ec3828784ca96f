"""
Shared, lazily initialized SheetsClient.

One initialization runs at a time; every caller that arrives while it is in
flight awaits the same task. A failed initialization is dropped so the next
call starts over.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from env_loader import get_google_credentials
from lib.errors import ConfigurationError, SheetsMcpError
from sheets_client import SheetsClient

logger = logging.getLogger("sheets_mcp.service")


class SheetsServiceProvider:
    """
    Owns the authenticated client handed to the tool handlers.

    Usage:
        provider = SheetsServiceProvider()
        sheets = await provider.get()
    """

    def __init__(
        self,
        credentials_loader: Callable[[], dict[str, Any]] = get_google_credentials,
        client_factory: Callable[[dict[str, Any]], Any] = SheetsClient,
    ) -> None:
        self._credentials_loader = credentials_loader
        self._client_factory = client_factory
        self._client: Any = None
        self._init_task: asyncio.Task | None = None

    async def get(self) -> Any:
        """
        Return the client, initializing it on first use.

        Raises:
            ConfigurationError: If credentials cannot be loaded or used
        """
        if self._client is not None:
            return self._client

        task = self._init_task
        if task is None:
            task = asyncio.ensure_future(self._initialize())
            task.add_done_callback(self._forget_failed_init)
            self._init_task = task

        # Shielded: a cancelled caller must not cancel the shared init
        return await asyncio.shield(task)

    def _forget_failed_init(self, task: asyncio.Task) -> None:
        """Drop a failed or cancelled init task so the next get() starts over."""
        if not task.cancelled() and task.exception() is None:
            return
        if self._init_task is task:
            self._init_task = None

    async def _initialize(self) -> Any:
        logger.info("Initializing Google Sheets service...")
        credentials = await asyncio.to_thread(self._credentials_loader)
        logger.info("Loaded service account credentials")
        try:
            client = await asyncio.to_thread(self._client_factory, credentials)
        except SheetsMcpError:
            raise
        except (ValueError, KeyError) as e:
            logger.error("Failed to configure Google authentication: %s", e)
            raise ConfigurationError(
                "Authentication configuration failed. "
                "Please check your service account credentials."
            ) from e
        self._client = client
        logger.info("Google Sheets service initialized successfully")
        return client
