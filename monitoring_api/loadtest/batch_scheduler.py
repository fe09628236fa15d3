"""Splits a request count into batches."""
import math
from dataclasses import dataclass
from typing import List


@dataclass
class BatchPlan:
    """Batch layout for a run."""
    num_batches: int
    requests_per_batch: int
    batch_sizes: List[int]


class BatchScheduler:
    """Computes the batch layout of a run.

    ``requests_per_batch`` is re-derived from the batch count, so the
    remainder is spread over all batches: 12 requests at concurrency 5 run
    as three batches of 4, not 5 + 5 + 2.
    """

    @staticmethod
    def plan(total_requests: int, concurrency: int) -> BatchPlan:
        if concurrency <= 0:
            raise ValueError("concurrency must be positive")
        if total_requests <= 0:
            return BatchPlan(num_batches=0, requests_per_batch=0, batch_sizes=[])

        num_batches = math.ceil(total_requests / concurrency)
        requests_per_batch = math.ceil(total_requests / num_batches)

        batch_sizes = []
        for batch in range(num_batches):
            remaining = total_requests - batch * requests_per_batch
            batch_size = min(requests_per_batch, remaining)
            if batch_size <= 0:
                break
            batch_sizes.append(batch_size)

        return BatchPlan(num_batches=num_batches, requests_per_batch=requests_per_batch, batch_sizes=batch_sizes)
