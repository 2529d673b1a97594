"""Collector contract and the concurrent fan-out over all collectors."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import anyio

from command_center.domain.entities import ActivityScope, RawActivity
from command_center.domain.exceptions import CollectorError


@runtime_checkable
class Collector(Protocol):
    """Source of raw activities for one domain (gatherings, resources...).

    Implementations scope results to ``scope.user_id``, treat ``scope.since``
    as a lower bound on relevance and raise instead of returning partial data.
    """

    source: str

    async def fetch(self, scope: ActivityScope) -> list[RawActivity]:
        ...


async def gather_raw_activities(
    collectors: Sequence[Collector],
    scope: ActivityScope,
    *,
    timeout: float | None = None,
) -> list[RawActivity]:
    """Run every collector concurrently and return their outputs in collector order.

    The first failure cancels the remaining collectors and is raised as a
    :class:`CollectorError`; no partial result is ever returned. Cancelling
    the caller cancels every in-flight collector as well.
    """

    results: list[list[RawActivity]] = [[] for _ in collectors]
    failures: list[CollectorError] = []

    async with anyio.create_task_group() as task_group:

        def fail(error: CollectorError) -> None:
            if not failures:
                failures.append(error)
            task_group.cancel_scope.cancel()

        async def run(index: int, collector: Collector) -> None:
            try:
                with anyio.fail_after(timeout):
                    batch = await collector.fetch(scope)
            except CollectorError as exc:
                fail(exc)
            except TimeoutError as exc:
                fail(_wrap_failure(collector, exc, f"timed out after {timeout:g} seconds"))
            except Exception as exc:
                fail(_wrap_failure(collector, exc, str(exc) or type(exc).__name__))
            else:
                results[index] = list(batch)

        for index, collector in enumerate(collectors):
            task_group.start_soon(run, index, collector)

    if failures:
        raise failures[0]
    return [activity for batch in results for activity in batch]


def _wrap_failure(collector: Collector, exc: BaseException, message: str) -> CollectorError:
    error = CollectorError(getattr(collector, "source", type(collector).__name__), message)
    error.__cause__ = exc
    return error


__all__ = ["Collector", "gather_raw_activities"]
