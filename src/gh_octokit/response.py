"""Single-shot result delivery.

Every client call produces exactly one :data:`Response`: a :class:`Success`
carrying the decoded payload or a :class:`Failure` carrying whatever
exception the session or the decoder raised. :func:`deliver` hands it to
an optional completion callback and also makes it the result of the
returned task, which doubles as the cancellation handle for the in-flight
request.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from gh_octokit.http import GitHubHTTPError, GitHubResponse, RequestCancelled

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Decoded payload of a successful request."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Error raised while sending a request or decoding its payload."""

    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Response = Success[T] | Failure
Completion = Callable[[Response[T]], None]


class _Once(Generic[T]):
    """Invoke a completion callback at most once."""

    def __init__(self, completion: Completion[T] | None) -> None:
        self._completion = completion
        self.fired = False

    def __call__(self, result: Response[T]) -> None:
        if self.fired:
            return
        self.fired = True
        if self._completion is None:
            return
        try:
            self._completion(result)
        except Exception:
            # The result is already settled; a broken callback must not change it.
            logger.exception("Completion callback raised")


async def _run(
    request: Awaitable[GitHubResponse],
    decode: Callable[[Any], T],
    once: _Once[T],
) -> Response[T]:
    try:
        response = await request
    except asyncio.CancelledError:
        once(Failure(RequestCancelled("Request was cancelled")))
        raise
    except GitHubHTTPError as e:
        result: Response[T] = Failure(e)
    except Exception as e:
        # Injected sessions are not limited to GitHubHTTPError
        logger.warning("Request failed with %s: %s", type(e).__name__, e)
        result = Failure(e)
    else:
        try:
            result = Success(decode(response.data))
        except Exception as e:
            logger.exception("Decoding response from %s failed", response.url or "session")
            result = Failure(e)

    once(result)
    return result


def deliver(
    request: Awaitable[GitHubResponse],
    decode: Callable[[Any], T],
    completion: Completion[T] | None = None,
) -> "asyncio.Task[Response[T]]":
    """Schedule a request and deliver its decoded result exactly once.

    Must be called with an event loop running; raises RuntimeError
    otherwise.

    Args:
        request: Awaitable transport call, typically ``session.send(...)``.
        decode: Turns the response payload into the result value. An
            exception it raises is delivered as a Failure.
        completion: Called once with the Success or Failure. A request
            cancelled via the returned task is reported as
            ``Failure(RequestCancelled)``.

    Returns:
        Task resolving to the same Response the callback receives.
        Cancelling it cancels the transport call.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        if inspect.iscoroutine(request):
            request.close()
        raise

    once: _Once[T] = _Once(completion)
    task = loop.create_task(_run(request, decode, once))

    def _on_done(done: "asyncio.Task[Response[T]]") -> None:
        # A task cancelled before its first step never enters _run
        if done.cancelled() and not once.fired:
            if inspect.iscoroutine(request):
                request.close()
            once(Failure(RequestCancelled("Request was cancelled")))

    task.add_done_callback(_on_done)
    return task
