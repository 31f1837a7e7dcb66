"""Concurrency and duplication guards for container mutations."""

from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import monotonic

from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MutationDecision:
    """Result of attempting to acquire a guarded mutation context."""

    should_apply: bool
    duplicate: bool = False


@dataclass
class _ContainerLockState:
    """Lock for one container plus the number of callers holding or waiting on it."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class ContainerMutationGuard:
    """
    Provide per-container locking and idempotency guarantees for mutations.

    The guard enforces three invariants:
        1. Mutations touching a given container execute serially.
        2. Locks for several containers are always taken in sorted id order,
           so two transfers between the same pair can never deadlock.
        3. Duplicate mutation tokens are suppressed in an idempotent fashion.

    Lock state for a container is dropped once nobody holds or waits on it.
    A token is only kept when the guarded mutation completes; if the body
    raises, the token is forgotten so the caller may retry.
    """

    def __init__(self, *, token_ttl_seconds: float = 300.0, max_tokens: int = 1024):
        self._token_ttl = token_ttl_seconds
        self._max_tokens = max_tokens
        self._global_lock = threading.Lock()
        self._states: dict[str, _ContainerLockState] = {}
        self._recent_tokens: OrderedDict[str, float] = OrderedDict()

    @contextmanager
    def acquire(self, container_ids: Iterable[object], token: str | None = None) -> Iterator[MutationDecision]:
        """
        Acquire a mutation context for the given containers and token.

        Args:
            container_ids: Identifiers of every container the mutation touches.
            token: Optional idempotency token unique to the attempted mutation.

        Yields:
            MutationDecision describing whether the caller should perform the mutation.
        """

        ordered_ids = sorted({str(container_id) for container_id in container_ids})
        states = self._checkout(ordered_ids)
        acquired: list[threading.Lock] = []
        try:
            for state in states:
                state.lock.acquire()
                acquired.append(state.lock)

            if token and self._register_token(token):
                logger.warning(
                    "Duplicate container mutation suppressed",
                    container_ids=ordered_ids,
                    mutation_token=token,
                    duplicate_token=True,
                )
                yield MutationDecision(should_apply=False, duplicate=True)
                return

            try:
                yield MutationDecision(should_apply=True)
            except BaseException:
                if token:
                    self._forget_token(token)
                raise
        finally:
            for lock in reversed(acquired):
                lock.release()
            self._release(ordered_ids)

    def tracked_containers(self) -> int:
        """Number of containers that currently have lock state."""
        with self._global_lock:
            return len(self._states)

    def _checkout(self, container_ids: list[str]) -> list[_ContainerLockState]:
        with self._global_lock:
            states = []
            for container_id in container_ids:
                state = self._states.setdefault(container_id, _ContainerLockState())
                state.users += 1
                states.append(state)
            return states

    def _release(self, container_ids: list[str]) -> None:
        with self._global_lock:
            for container_id in container_ids:
                state = self._states.get(container_id)
                if state is None:
                    continue
                state.users -= 1
                if state.users <= 0:
                    self._states.pop(container_id, None)

    def _register_token(self, token: str) -> bool:
        """Record a token; returns True when it was already seen."""
        with self._global_lock:
            now = monotonic()
            self._prune_tokens(now)
            if token in self._recent_tokens:
                return True
            self._recent_tokens[token] = now
            while len(self._recent_tokens) > self._max_tokens:
                self._recent_tokens.popitem(last=False)
            return False

    def _forget_token(self, token: str) -> None:
        with self._global_lock:
            self._recent_tokens.pop(token, None)

    def _prune_tokens(self, now: float) -> None:
        if self._token_ttl <= 0:
            return

        expiry = now - self._token_ttl
        tokens_to_delete = [token for token, timestamp in self._recent_tokens.items() if timestamp < expiry]
        for token in tokens_to_delete:
            self._recent_tokens.pop(token, None)


__all__ = ["ContainerMutationGuard", "MutationDecision"]
