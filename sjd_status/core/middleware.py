from __future__ import annotations

import logging

from starlette.requests import ClientDisconnect
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class BodySizeLimitMiddleware:
    """Buffers POST/PUT/PATCH bodies and answers 413 once they pass ``max_bytes``."""

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    def _applies(self, scope: Scope) -> bool:
        return (
            scope.get("type") == "http"
            and self.max_bytes > 0
            and scope.get("method", "").upper() in _BODY_METHODS
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not self._applies(scope):
            await self.app(scope, receive, send)
            return

        try:
            body = await self._read_body(receive)
        except ClientDisconnect:
            logger.info("Client disconnected during request body path=%s", scope.get("path"))
            return

        if body is None:
            response = JSONResponse({"detail": "Request body too large"}, status_code=413)
            await response(scope, receive, send)
            return

        await self.app(scope, _replay(body, receive), send)

    async def _read_body(self, receive: Receive) -> bytes | None:
        # None means the limit was exceeded; the rest of the body is left unread.
        buffer = bytearray()
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                raise ClientDisconnect()
            buffer.extend(message.get("body", b""))
            if len(buffer) > self.max_bytes:
                return None
            more_body = message.get("more_body", False)
        return bytes(buffer)


def _replay(body: bytes, receive: Receive) -> Receive:
    sent = False

    async def replay_receive() -> Message:
        nonlocal sent
        if not sent:
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay_receive
