"""Manages concurrent request execution."""
import concurrent.futures
from typing import List

import requests

from .request_executor import RequestExecutor
from .models import RequestOutcome


class ConcurrencyManager:
    """Runs one batch of requests in parallel and waits for all of them."""

    def __init__(self, request_executor: RequestExecutor):
        self.request_executor = request_executor

    @staticmethod
    def request_id(batch_index: int, batch_size: int, offset: int) -> int:
        return batch_index * batch_size + offset + 1

    def execute_batch(self, session: requests.Session, batch_index: int, batch_size: int) -> List[RequestOutcome]:
        """
        Issue ``batch_size`` requests concurrently.

        Returns only once every request has resolved. Outcomes are returned in
        dispatch order. An exception escaping the executor is re-raised here
        after the rest of the batch has finished.

        Args:
            session: Requests session.
            batch_index: Zero-based batch number.
            batch_size: Number of requests in this batch.

        Returns:
            List of RequestOutcome.
        """
        if batch_size <= 0:
            return []

        with concurrent.futures.ThreadPoolExecutor(max_workers=batch_size) as executor:
            futures = [
                executor.submit(self.request_executor.send_request, session, self.request_id(batch_index, batch_size, offset))
                for offset in range(batch_size)
            ]
            concurrent.futures.wait(futures)

        return [future.result() for future in futures]
