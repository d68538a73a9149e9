"""JSON request facade over a shared aiohttp session."""

import asyncio
import logging
import aiohttp
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from yarl import URL
from ..request import RequestBuilder, RequestDescriptor, HTTPMethod, NetworkError, ERROR_DOMAIN

logger = logging.getLogger(__name__)

Completion = Callable[[Optional[Any], Optional[BaseException]], None]

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class HttpClient:
    """Sends GET/POST requests and hands the decoded JSON to a completion.

    The session is created when the client is constructed, so construct it
    from inside a coroutine (or pass a session in). Network completions run on
    ``callback_loop``, which defaults to the loop the client was built on.
    Build failures are reported straight away on the caller's thread.
    """

    ERROR_DOMAIN = ERROR_DOMAIN

    def __init__(self, session: Optional[aiohttp.ClientSession] = None,
                 headers: Optional[Dict[str, str]] = None,
                 timeout: Optional[float] = None,
                 builder: Optional[RequestBuilder] = None,
                 callback_loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = asyncio.get_running_loop()
        self.callback_loop = callback_loop or self.loop
        self.builder = builder or RequestBuilder()
        self._owns_session = session is None

        if session is None:
            kwargs = {"headers": headers or {}}
            if timeout is not None:
                kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)
            session = aiohttp.ClientSession(**kwargs)
        self.session = session
        self._tasks = set()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        """Wait for in-flight requests, then close the session if we created it."""
        # Let requests handed over from other threads register first
        await asyncio.sleep(0)
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        if self._owns_session and not self.session.closed:
            await self.session.close()

    def request(self, method: HTTPMethod, url_string: str,
                params: Optional[Mapping[str, str]] = None) -> Optional[RequestDescriptor]:
        return self.builder.build(method, url_string, params)

    def query_string(self, params: Optional[Mapping[str, str]]) -> Optional[str]:
        return self.builder.query_string(params)

    def request_json(self, method: HTTPMethod, url_string: str,
                     params: Optional[Mapping[str, str]], completion: Completion) -> None:
        """Send a request and call ``completion(result, error)`` exactly once.

        Returns immediately. Safe to call from the client's loop or from any
        other thread.
        """
        request = self.request(method, url_string, params)
        if request is None:
            logger.debug("Could not build %s request for %r", method, url_string)
            completion(None, NetworkError.build_failed())
            return

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is self.loop:
            self._spawn(request, completion)
        else:
            self.loop.call_soon_threadsafe(self._spawn, request, completion)

    async def fetch_json(self, method: HTTPMethod, url_string: str,
                         params: Optional[Mapping[str, str]] = None) -> Tuple[Optional[Any], Optional[BaseException]]:
        """Awaitable form of request_json, returning the (result, error) pair."""
        request = self.request(method, url_string, params)
        if request is None:
            return None, NetworkError.build_failed()
        return await self._perform(request)

    def _spawn(self, request: RequestDescriptor, completion: Completion):
        """Start a request on the client's loop and track it until it finishes."""
        task = self.loop.create_task(self._deliver(request, completion))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _deliver(self, request: RequestDescriptor, completion: Completion):
        try:
            result, error = await self._perform(request)
        except Exception as e:
            logger.exception("Unexpected failure requesting %s", request.url)
            result, error = None, e
        self.callback_loop.call_soon_threadsafe(completion, result, error)

    async def _perform(self, request: RequestDescriptor) -> Tuple[Optional[Any], Optional[BaseException]]:
        logger.debug("%s %s", request.method, request.url)
        try:
            # The query is already escaped; stop aiohttp from requoting it
            url = URL(request.url, encoded=True)
            async with self.session.request(request.method.value, url, data=request.body) as resp:
                logger.debug("%s %s -> %s", request.method, request.url, resp.status)
                try:
                    data = await resp.json(content_type=None)
                except ValueError as e:
                    logger.warning("Invalid JSON from %s: %s", request.url, e)
                    return None, NetworkError.deserialization_failed()
        except TRANSPORT_ERRORS as e:
            logger.warning("Request to %s failed: %r", request.url, e)
            return None, e

        if data is None:
            logger.warning("Empty JSON document from %s", request.url)
            return None, NetworkError.deserialization_failed()

        return data, None
