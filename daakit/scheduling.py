"""Job sequencing with deadlines: schedule the most profitable jobs first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Job:
    """A unit-time job that must finish by ``deadline`` (counted from 1)."""

    id: str
    deadline: int
    profit: int


@dataclass(frozen=True)
class JobSchedule:
    """Outcome of sequencing jobs.

    ``assignments`` lists every job in the order it was considered, with the
    0-based slot it was given, or None where no free slot was left.
    ``order`` holds the ids of the scheduled jobs in slot order.
    """

    assignments: tuple[tuple[Job, Optional[int]], ...]
    order: tuple[str, ...]

    @property
    def profit(self) -> int:
        """Total profit of the scheduled jobs."""
        return sum(job.profit for job, slot in self.assignments if slot is not None)


def sequence_jobs(jobs: Iterable[Job]) -> JobSchedule:
    """Place each job, highest profit first, in the latest free slot before its deadline.

    Jobs of equal profit are considered in order of their ids.
    """
    pending = list(jobs)
    last_slot = max((job.deadline - 1 for job in pending), default=0)
    last_slot = max(last_slot, 0)
    slots: list[Optional[str]] = [None] * (last_slot + 1)

    pending.sort(key=lambda job: (-job.profit, job.id))
    assignments: list[tuple[Job, Optional[int]]] = []
    for job in pending:
        chosen = next(
            (slot for slot in range(job.deadline - 1, -1, -1) if slots[slot] is None),
            None,
        )
        if chosen is not None:
            slots[chosen] = job.id
        assignments.append((job, chosen))

    order = tuple(job_id for job_id in slots if job_id is not None)
    return JobSchedule(tuple(assignments), order)