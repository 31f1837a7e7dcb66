import threading

import pytest

from equipment.services.container_mutation_guard import ContainerMutationGuard


def test_first_token_applies_and_replay_is_duplicate():
    guard = ContainerMutationGuard()

    with guard.acquire(["inventory-1"], "token-equip") as decision:
        assert decision.should_apply
        assert decision.duplicate is False

    with guard.acquire(["inventory-1"], "token-equip") as decision:
        assert decision.should_apply is False
        assert decision.duplicate is True


def test_missing_token_always_applies():
    guard = ContainerMutationGuard()

    for _ in range(3):
        with guard.acquire(["inventory-1"], None) as decision:
            assert decision.should_apply


def test_expired_tokens_can_be_reused(monkeypatch):
    clock = iter([100.0, 500.0])
    monkeypatch.setattr(
        "equipment.services.container_mutation_guard.monotonic", lambda: next(clock)
    )
    guard = ContainerMutationGuard(token_ttl_seconds=60)

    with guard.acquire(["store-1"], "token") as decision:
        assert decision.should_apply

    with guard.acquire(["store-1"], "token") as decision:
        assert decision.should_apply


def test_token_cache_is_bounded():
    guard = ContainerMutationGuard(max_tokens=2)

    for token in ("a", "b", "c"):
        with guard.acquire(["inventory-1"], token):
            pass

    with guard.acquire(["inventory-1"], "a") as decision:
        assert decision.should_apply


def test_locks_are_released_after_exceptions():
    guard = ContainerMutationGuard()

    try:
        with guard.acquire(["inventory-1", "store-1"], None):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    with guard.acquire(["store-1", "inventory-1"], None) as decision:
        assert decision.should_apply


def test_opposite_ordering_does_not_deadlock():
    guard = ContainerMutationGuard()
    completed: list[str] = []

    def transfer(ids: list[str], name: str) -> None:
        for _ in range(200):
            with guard.acquire(ids, None):
                pass
        completed.append(name)

    threads = [
        threading.Thread(target=transfer, args=(["inventory-1", "store-1"], "forward")),
        threading.Thread(target=transfer, args=(["store-1", "inventory-1"], "backward")),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert sorted(completed) == ["backward", "forward"]


def test_lock_state_is_dropped_when_idle():
    guard = ContainerMutationGuard()

    with guard.acquire(["inventory-1", "store-1"], None):
        assert guard.tracked_containers() == 2

    assert guard.tracked_containers() == 0


def test_lock_state_is_dropped_after_contended_use():
    guard = ContainerMutationGuard()
    entered = threading.Event()
    release = threading.Event()

    def hold() -> None:
        with guard.acquire(["inventory-1"], None):
            entered.set()
            release.wait(timeout=5)

    holder = threading.Thread(target=hold)
    holder.start()
    entered.wait(timeout=5)

    waiter = threading.Thread(target=hold)
    waiter.start()
    release.set()
    holder.join(timeout=5)
    waiter.join(timeout=5)

    assert guard.tracked_containers() == 0


def test_token_is_forgotten_when_the_mutation_fails():
    guard = ContainerMutationGuard()

    with pytest.raises(RuntimeError):
        with guard.acquire(["inventory-1"], "token-retry"):
            raise RuntimeError("rejected")

    with guard.acquire(["inventory-1"], "token-retry") as decision:
        assert decision.should_apply

    with guard.acquire(["inventory-1"], "token-retry") as decision:
        assert decision.duplicate
