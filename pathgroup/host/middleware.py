"""ASGI middleware that tags each request with its path template."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

from pathgroup.core.normalize.path_normalizer import PathNormalizer
from pathgroup.utils.config import PathGroupConfig

logger = logging.getLogger(__name__)

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]

STATE_KEY = "path_group"


class PathGroupMiddleware:
    """Compute the path template once per request and expose it downstream.

    The template replaces any inbound header of the configured name, so a
    client cannot spoof it, and is also stored in ``scope["state"]``.
    """

    def __init__(self, app: ASGIApp, config: PathGroupConfig | None = None) -> None:
        self.app = app
        self.config = config or PathGroupConfig()
        self.header_name = self.config.header_name.encode("latin-1")
        self.normalizer = PathNormalizer(mode=self.config.mode)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        path_group = self.normalizer.normalize(scope.get("path", ""))
        logger.debug("path group %s -> %s", scope.get("path"), path_group)

        headers = [
            (name, value)
            for name, value in scope.get("headers", [])
            if name.lower() != self.header_name
        ]
        headers.append((self.header_name, path_group.encode("utf-8")))

        scope = dict(scope)
        scope["headers"] = headers
        state = dict(scope.get("state") or {})
        state[STATE_KEY] = path_group
        scope["state"] = state

        await self.app(scope, receive, send)
