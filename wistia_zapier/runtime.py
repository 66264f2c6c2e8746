"""Host-side runtime: bundles, the ``z`` object and the app tester.

Handlers receive ``(z, bundle)``. ``bundle`` carries the stored credentials,
the user's input and invocation flags; ``z`` carries the request helper and
a console logger. Nothing here is shared between invocations.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Iterable, Optional

import httpx
from loguru import logger

from .config import settings
from .http import Request, Response

if TYPE_CHECKING:
    from .app import App


BeforeRequest = Callable[[Request, "ZObject", "Bundle"], Request]
AfterResponse = Callable[[Response, "ZObject", "Bundle"], Response]
Perform = Callable[["ZObject", "Bundle"], Awaitable[Any]]


@dataclass
class BundleMeta:
    is_filling_dynamic_dropdown: bool = False


@dataclass
class Bundle:
    auth_data: Dict[str, Any] = field(default_factory=dict)
    input_data: Dict[str, Any] = field(default_factory=dict)
    meta: BundleMeta = field(default_factory=BundleMeta)


class ZObject:
    def __init__(
        self,
        client: httpx.AsyncClient,
        bundle: Bundle,
        befores: Iterable[BeforeRequest] = (),
        afters: Iterable[AfterResponse] = (),
        operation_key: str = "app",
    ) -> None:
        self._client = client
        self._bundle = bundle
        self._befores = list(befores)
        self._afters = list(afters)
        self.console = logger.bind(operation=operation_key)

    async def request(
        self,
        url: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json: Any = None,
    ) -> Response:
        request = Request(
            url=url,
            method=method,
            params=dict(params or {}),
            headers=dict(headers or {}),
            json=json,
        )
        for before in self._befores:
            request = before(request, self, self._bundle)

        logger.debug(
            "{} {} params={} headers={}",
            request.method.upper(),
            request.url,
            request.params,
            request.redacted_headers(),
        )
        raw = await self._client.send(request.to_httpx())
        response = Response(raw, request)
        logger.debug("{} {} -> {}", request.method.upper(), request.url, response.status)

        for after in self._afters:
            response = after(response, self, self._bundle)
        return response


class AppTester:
    """Runs a handler the way the host would, with a fresh ``z`` per call."""

    def __init__(
        self,
        app: "App",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self._app = app
        self._transport = transport
        self._timeout_s = settings.request_timeout_s if timeout_s is None else timeout_s

    async def __call__(
        self,
        perform: Perform,
        bundle: Optional[Bundle] = None,
        operation_key: Optional[str] = None,
    ) -> Any:
        bundle = bundle or Bundle()
        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout_s) as client:
            z = ZObject(
                client,
                bundle,
                befores=self._app.before_request,
                afters=self._app.after_response,
                operation_key=operation_key or getattr(perform, "__module__", "app"),
            )
            return await perform(z, bundle)


def create_app_tester(app: "App", **kwargs: Any) -> AppTester:
    return AppTester(app, **kwargs)
