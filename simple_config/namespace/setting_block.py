"""
Setting Block

Deferred setting value whose body can short-circuit on the active environment.

Version: 1.0.0
"""

from __future__ import annotations

import inspect
import threading
import logging
from typing import Any, Callable, List, Optional

from ..enum import BlockState
from ..exceptions import BlockNotRunningError
from ..interfaces import IEnvironmentMatcher

logger = logging.getLogger(__name__)


class _EnvironmentMatched(BaseException):
    """Unwinds a block body once an environment() declaration matches."""

    def __init__(self, block: SettingBlock, value: Any):
        super().__init__()
        self.block = block
        self.value = value


def _accepts_block(body: Callable[..., Any]) -> bool:
    try:
        parameters = inspect.signature(body).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        for p in parameters
    )


def _candidates(names: Any) -> List[Any]:
    if isinstance(names, (list, tuple, set, frozenset)):
        return list(names)
    return [names]


class SettingBlock:
    """
    Lazily evaluated setting value.

    The body runs on every call(). It receives the block as its only argument
    (bodies taking no arguments are called without it) and may declare
    environment-specific values with environment(). The first matching
    declaration becomes the result and the rest of the body is skipped;
    otherwise the body's return value is the result.

    A block may be called from several threads at once. Whether environment()
    is allowed is tracked per thread; state is shared and informational only.

    Usage:
        def database_host(block):
            block.environment(["qa", "staging"], "db.internal")
            block.environment("production", body=lookup_primary_host)
            return "localhost"

        config = configure(lambda c: (
            c.use_environment("mode"),
            c.set("database_host", body=database_host),
        ))
    """

    def __init__(
        self,
        body: Callable[..., Any],
        environment: Optional[IEnvironmentMatcher] = None,
    ):
        if not callable(body):
            raise TypeError(f"Setting block body must be callable, got {body!r}")
        self._body = body
        self._environment = environment
        self._pass_block = _accepts_block(body)
        self._state = BlockState.IDLE
        self._local = threading.local()

    @property
    def environment_matcher(self) -> Optional[IEnvironmentMatcher]:
        return self._environment

    @property
    def state(self) -> BlockState:
        return self._state

    @property
    def _depth(self) -> int:
        # Per-thread count of call()s in progress on this block
        return getattr(self._local, "depth", 0)

    @_depth.setter
    def _depth(self, depth: int) -> None:
        self._local.depth = depth

    def call(self) -> Any:
        """Evaluate the body and return the resolved value."""
        self._depth += 1
        self._state = BlockState.RUNNING
        completed = False
        try:
            try:
                result = self._body(self) if self._pass_block else self._body()
            except _EnvironmentMatched as matched:
                if matched.block is not self:
                    raise
                result = matched.value
            completed = True
            return result
        finally:
            self._depth -= 1
            if not self._depth:
                self._state = BlockState.COMPLETED if completed else BlockState.IDLE

    __call__ = call

    def environment(
        self,
        names: Any,
        value: Any = None,
        body: Optional[Callable[[], Any]] = None,
    ) -> None:
        """
        Short-circuit the block when one of the names is the active environment.

        Args:
            names: One environment name or a list/tuple/set of names
            value: Result when matched and no body is given
            body: Zero-argument callable producing the result when matched

        Does nothing when the block has no environment matcher. Names are
        checked in order and the first match wins.
        """
        if not self._depth:
            raise BlockNotRunningError()
        if self._environment is None:
            return

        for candidate in _candidates(names):
            if self._environment.matches(candidate):
                logger.debug("Environment %r matched, short-circuiting setting block", candidate)
                raise _EnvironmentMatched(self, body() if body is not None else value)

    def __repr__(self) -> str:
        name = getattr(self._body, "__name__", type(self._body).__name__)
        return f"SettingBlock(body={name}, state={self._state.value})"
