"""Blocking HTTP client built on urllib."""

from __future__ import annotations

import functools
import http.client
import json
import logging
import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable

from webhook_solver.config import API_CONNECT_TIMEOUT, API_READ_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass
class HttpResponse:
    ok: bool
    status_code: int | None
    body: bytes = b""
    error: str | None = None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


def remaining_timeout(
    timeout: float | None,
    expires_at: float | None,
    clock: Callable[[], float] = time.monotonic,
) -> float | None:
    """Socket timeout for the next blocking call, capped by the deadline."""
    if expires_at is None:
        return timeout
    left = expires_at - clock()
    if left <= 0:
        raise TimeoutError("request exceeded its overall deadline")
    return min(timeout, left) if timeout else left


class _ReadTimeoutMixin:
    """Switches the socket from the connect timeout to the read timeout once connected."""

    def __init__(self, *args: Any, read_timeout: float | None = None,
                 expires_at: float | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.read_timeout = read_timeout
        self.expires_at = expires_at

    def connect(self) -> None:
        super().connect()
        timeout = remaining_timeout(self.read_timeout, self.expires_at)
        if timeout is not None:
            self.sock.settimeout(timeout)


class _HTTPConnection(_ReadTimeoutMixin, http.client.HTTPConnection):
    pass


class _HTTPSConnection(_ReadTimeoutMixin, http.client.HTTPSConnection):
    pass


class _HTTPHandler(urllib.request.HTTPHandler):
    def __init__(self, **conn_kwargs: Any) -> None:
        super().__init__()
        self._conn_kwargs = conn_kwargs

    def http_open(self, req: urllib.request.Request) -> http.client.HTTPResponse:
        return self.do_open(functools.partial(_HTTPConnection, **self._conn_kwargs), req)


class _HTTPSHandler(urllib.request.HTTPSHandler):
    def __init__(self, **conn_kwargs: Any) -> None:
        super().__init__()
        self._conn_kwargs = conn_kwargs

    def https_open(self, req: urllib.request.Request) -> http.client.HTTPResponse:
        return self.do_open(
            functools.partial(_HTTPSConnection, **self._conn_kwargs), req, context=self._context
        )


def urlopen(
    req: urllib.request.Request,
    timeout: float | None,
    read_timeout: float | None = None,
    expires_at: float | None = None,
) -> http.client.HTTPResponse:
    """``urllib.request.urlopen`` with separate connect and read timeouts."""
    conn_kwargs = {"read_timeout": read_timeout, "expires_at": expires_at}
    opener = urllib.request.build_opener(_HTTPHandler(**conn_kwargs), _HTTPSHandler(**conn_kwargs))
    return opener.open(req, timeout=timeout)


def _set_socket_timeout(response: Any, timeout: float | None) -> None:
    sock = getattr(getattr(getattr(response, "fp", None), "raw", None), "_sock", None)
    if sock is not None:
        sock.settimeout(timeout)


class HttpClient:
    """Sends requests and reports every outcome as an ``HttpResponse``.

    HTTP error statuses and transport failures are returned, never raised;
    ``status_code`` is ``None`` when no response was received.
    """

    def __init__(
        self,
        opener: Callable[..., Any] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._opener = opener or urlopen
        self._clock = clock

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        timeout: float = API_READ_TIMEOUT,
        connect_timeout: float = API_CONNECT_TIMEOUT,
    ) -> HttpResponse:
        all_headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if headers:
            all_headers.update(headers)

        data = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        req = urllib.request.Request(url, data=data, headers=all_headers, method="POST")
        return self._send(req, timeout, connect_timeout)

    def get(
        self,
        url: str,
        timeout: float = API_READ_TIMEOUT,
        connect_timeout: float = API_CONNECT_TIMEOUT,
        deadline: float | None = None,
    ) -> HttpResponse:
        """GET ``url``; ``deadline`` bounds the whole exchange in seconds."""
        req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT}, method="GET")
        return self._send(req, timeout, connect_timeout, deadline)

    def _send(
        self,
        req: urllib.request.Request,
        timeout: float,
        connect_timeout: float,
        deadline: float | None = None,
    ) -> HttpResponse:
        expires_at = self._clock() + deadline if deadline else None
        logger.debug(f"{req.get_method()} {req.full_url}")

        try:
            with self._opener(
                req,
                timeout=remaining_timeout(connect_timeout, expires_at, self._clock),
                read_timeout=timeout,
                expires_at=expires_at,
            ) as response:
                status = response.status
                body = self._read_body(response, timeout, expires_at)
        except urllib.error.HTTPError as e:
            body = e.read() or b""
            return HttpResponse(ok=False, status_code=e.code, body=body)
        except (OSError, http.client.HTTPException) as e:
            reason = getattr(e, "reason", None) or e
            return HttpResponse(ok=False, status_code=None, error=str(reason))

        return HttpResponse(ok=200 <= status < 300, status_code=status, body=body)

    def _read_body(self, response: Any, timeout: float, expires_at: float | None) -> bytes:
        if expires_at is None:
            return response.read()

        # read1 returns as soon as any bytes arrive.
        read = getattr(response, "read1", None) or response.read
        chunks = []
        while True:
            _set_socket_timeout(response, remaining_timeout(timeout, expires_at, self._clock))
            chunk = read(CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
