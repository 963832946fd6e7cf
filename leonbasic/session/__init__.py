"""Session state and scan scheduling."""

from leonbasic.session.scheduler import ScanRequest, ScanScheduler
from leonbasic.session.session import DiagnosticCollection, LintSession

__all__ = [
    "DiagnosticCollection",
    "LintSession",
    "ScanRequest",
    "ScanScheduler",
]
