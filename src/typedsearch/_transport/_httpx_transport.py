import base64
import random
from datetime import datetime
from email.utils import parsedate_to_datetime
from logging import getLogger
from typing import Any, Optional

from httpx import (
    USE_CLIENT_DEFAULT,
    AsyncClient,
    Client,
    ConnectError,
    Headers,
    Response,
    TimeoutException,
)
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils import RequestSpec, get_httpx_client_kwargs, user_agent_value
from .._utils.constants import (
    HEADER_AUTHORIZATION,
    HEADER_RETRY_AFTER,
    HEADER_USER_AGENT,
)

DEFAULT_RETRY_AFTER = 1.0

_backoff = wait_exponential(multiplier=1, min=1, max=10)


def is_retryable_exception(exception: BaseException) -> bool:
    return isinstance(exception, (ConnectError, TimeoutException))


def is_retryable_status_code(response: Response) -> bool:
    return response.status_code == 429 or 500 <= response.status_code < 600


def parse_retry_after(headers: Headers) -> float:
    """Parse Retry-After header (RFC 6585/7231).

    Args:
        headers: HTTP response headers

    Returns:
        float: Seconds to wait before retry (minimum 0.0, default 1.0 if missing/invalid).
    """
    retry_after = headers.get(HEADER_RETRY_AFTER)
    if not retry_after:
        return DEFAULT_RETRY_AFTER

    try:
        return max(float(retry_after), 0.0)
    except ValueError:
        pass

    try:
        retry_date = parsedate_to_datetime(retry_after)
        delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
        return max(delta, 0.0)
    except (ValueError, TypeError):
        return DEFAULT_RETRY_AFTER


def wait_retry_after(retry_state: RetryCallState) -> float:
    """Honour Retry-After on 429 responses, back off exponentially otherwise."""
    outcome = retry_state.outcome
    if outcome is not None and not outcome.failed:
        response = outcome.result()
        if response.status_code == 429:
            retry_after = parse_retry_after(response.headers)
            return retry_after + random.uniform(0, 0.1 * retry_after)
    return _backoff(retry_state)


def _last_outcome(retry_state: RetryCallState) -> Any:
    # Hand back the final response (or raise the final error) once retries run out.
    return retry_state.outcome.result()  # type: ignore[union-attr]


class HttpxTransport:
    """Default transport performing requests with httpx.

    Responses are streamed: the caller owns the body and must close it.
    Timeouts, connection failures, 429 and 5xx responses are retried up to
    ``config.max_retries`` times.

    The async client is only created on first async use. Once it exists,
    release the transport with ``aclose()`` or ``async with``, which close
    both clients.
    """

    def __init__(self, config: Config) -> None:
        self._logger = getLogger("typedsearch")
        self._config = config

        self._client_kwargs = {
            **get_httpx_client_kwargs(config),
            "base_url": config.base_url,
            "headers": Headers(self.default_headers),
        }

        self._client = Client(**self._client_kwargs)
        self._client_async: Optional[AsyncClient] = None

    @property
    def async_client(self) -> AsyncClient:
        if self._client_async is None:
            self._client_async = AsyncClient(**self._client_kwargs)
        return self._client_async

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_USER_AGENT: user_agent_value(),
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        if self._config.api_key:
            return {HEADER_AUTHORIZATION: f"ApiKey {self._config.api_key}"}
        if self._config.username is not None:
            credentials = f"{self._config.username}:{self._config.password}"
            token = base64.b64encode(credentials.encode()).decode()
            return {HEADER_AUTHORIZATION: f"Basic {token}"}
        return {}

    def _retry_kwargs(self) -> dict[str, Any]:
        return {
            "retry": (
                retry_if_exception(is_retryable_exception)
                | retry_if_result(is_retryable_status_code)
            ),
            "wait": wait_retry_after,
            "stop": stop_after_attempt(self._config.max_retries + 1),
            "retry_error_callback": _last_outcome,
        }

    def _log_retry(self, retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        reason = (
            repr(outcome.exception())
            if outcome is not None and outcome.failed
            else f"status {outcome.result().status_code}"  # type: ignore[union-attr]
        )
        sleep = retry_state.next_action.sleep if retry_state.next_action else 0.0
        self._logger.warning(
            f"Retrying after {sleep:.2f}s ({reason}, "
            f"attempt {retry_state.attempt_number}/{self._config.max_retries})"
        )

    def _build_request(self, client: Client | AsyncClient, request: RequestSpec):
        return client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.content or None,
            timeout=(
                request.timeout if request.timeout is not None else USE_CLIENT_DEFAULT
            ),
        )

    def perform(self, request: RequestSpec) -> Response:
        def close_discarded(retry_state: RetryCallState) -> None:
            outcome = retry_state.outcome
            if outcome is not None and not outcome.failed:
                outcome.result().close()
            self._log_retry(retry_state)

        retrying = Retrying(before_sleep=close_discarded, **self._retry_kwargs())
        return retrying(self._send, request)

    async def perform_async(self, request: RequestSpec) -> Response:
        async def close_discarded(retry_state: RetryCallState) -> None:
            outcome = retry_state.outcome
            if outcome is not None and not outcome.failed:
                await outcome.result().aclose()
            self._log_retry(retry_state)

        retrying = AsyncRetrying(before_sleep=close_discarded, **self._retry_kwargs())
        return await retrying(self._send_async, request)

    def _send(self, request: RequestSpec) -> Response:
        self._logger.debug(f"Request: {request.method} {request.url}")
        response = self._client.send(
            self._build_request(self._client, request), stream=True
        )
        self._logger.debug(f"Response: {response.status_code} {request.endpoint}")
        return response

    async def _send_async(self, request: RequestSpec) -> Response:
        self._logger.debug(f"Request: {request.method} {request.url}")
        client = self.async_client
        response = await client.send(
            self._build_request(client, request), stream=True
        )
        self._logger.debug(f"Response: {response.status_code} {request.endpoint}")
        return response

    def close(self) -> None:
        self._client.close()
        if self._client_async is not None and not self._client_async.is_closed:
            self._logger.warning(
                "Async client left open by close(); use aclose() after async requests"
            )

    async def aclose(self) -> None:
        if self._client_async is not None:
            await self._client_async.aclose()
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
