"""Debounced scan scheduling: only the latest request per document runs."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
import logging
import time

from leonbasic.session.session import LintSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanRequest:
    document_id: str
    text: str
    source_path: str | None
    due: float
    generation: int


class ScanScheduler:
    """Cooperative scheduler; the host calls `run_due` from its event loop."""

    def __init__(
        self,
        session: LintSession,
        *,
        delay: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        resolved_delay = session.options.debounce_seconds if delay is None else delay
        if resolved_delay < 0:
            raise ValueError("delay cannot be negative")
        self._session = session
        self._delay = resolved_delay
        self._clock = clock
        self._pending: dict[str, ScanRequest] = {}
        self._generation = 0

    @property
    def delay(self) -> float:
        return self._delay

    def request(self, document_id: str, text: str, *, source_path: str | None = None) -> ScanRequest:
        """Queue a scan, superseding any pending scan of the same document."""
        if self._session.closed:
            raise RuntimeError("Cannot schedule a scan on a closed LintSession")
        self._generation += 1
        superseded = self._pending.get(document_id)
        if superseded is not None:
            logger.debug("Discarding scan generation %d for %s", superseded.generation, document_id)
        scan_request = ScanRequest(
            document_id=document_id,
            text=text,
            source_path=source_path,
            due=self._clock() + self._delay,
            generation=self._generation,
        )
        self._pending[document_id] = scan_request
        return scan_request

    def cancel(self, document_id: str) -> bool:
        return self._pending.pop(document_id, None) is not None

    def pending(self) -> tuple[str, ...]:
        return tuple(request.document_id for request in self._ordered(self._pending.values()))

    def run_due(self) -> list[str]:
        """Run every pending scan whose debounce window has elapsed."""
        now = self._clock()
        due = [request for request in self._pending.values() if request.due <= now]
        return self._execute(due)

    def flush(self) -> list[str]:
        """Run every pending scan immediately."""
        return self._execute(list(self._pending.values()))

    def _execute(self, requests: list[ScanRequest]) -> list[str]:
        if self._session.closed:
            # A closed session cannot publish.
            if self._pending:
                logger.debug("Dropping %d scan(s) queued on a closed session", len(self._pending))
            self._pending.clear()
            return []
        executed: list[str] = []
        for scan_request in self._ordered(requests):
            current = self._pending.get(scan_request.document_id)
            if current is None or current.generation != scan_request.generation:
                continue
            del self._pending[scan_request.document_id]
            self._session.scan_document(
                scan_request.document_id,
                scan_request.text,
                source_path=scan_request.source_path,
            )
            executed.append(scan_request.document_id)
        if executed:
            logger.debug("Ran %d scheduled scan(s)", len(executed))
        return executed

    @staticmethod
    def _ordered(requests: Iterable[ScanRequest]) -> list[ScanRequest]:
        return sorted(requests, key=lambda request: (request.due, request.generation))
