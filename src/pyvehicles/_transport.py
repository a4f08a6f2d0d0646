"""JSON-over-HTTP transport for the pricing and maps services."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyvehicles._constants import USER_AGENT
from pyvehicles.exceptions import VehiclesTransportError

_logger = logging.getLogger(__name__)

_TRACE_LIMIT = 512


class Transport(Protocol):
    """Structural transport interface used by the remote lookups.

    Tests pass small fakes implementing ``get_json``; production code
    uses :class:`HttpTransport`.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, Any]) -> Any:
        ...


class HttpTransport:
    """GET requests against one service base URL, decoding JSON replies."""

    def __init__(
        self,
        base_url: str,
        http_session: aiohttp.ClientSession,
        *,
        timeout: float = 10.0,
        trace: bool = False,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._trace = trace

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_json(self, endpoint: str, params: Mapping[str, Any]) -> Any:
        """GET ``base_url + endpoint`` and return the decoded JSON body.

        Raises
        ------
        VehiclesTransportError
            Network failure, non-2xx status or a body that is not JSON.
            ``status_code`` is set whenever a response was received.
        """
        url = f"{self._base_url}{endpoint}"
        query = {key: str(value) for key, value in params.items()}
        headers = {"accept": "application/json", "user-agent": USER_AGENT}

        _logger.debug("GET %s params=%s", url, query)

        try:
            async with self._http.get(url, params=query, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise VehiclesTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except VehiclesTransportError:
            raise
        except aiohttp.ClientError as exc:
            raise VehiclesTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except TimeoutError as exc:
            raise VehiclesTransportError(
                f"Request to {endpoint} timed out after {self._timeout.total}s",
                endpoint=endpoint,
            ) from exc

        if self._trace:
            _logger.debug("Response from %s: %s", endpoint, text[:_TRACE_LIMIT])

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise VehiclesTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=resp.status,
                endpoint=endpoint,
            ) from exc
