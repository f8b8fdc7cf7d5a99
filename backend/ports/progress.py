"""ProgressPort — abstract interface for reporting pipeline progress."""

from abc import ABC, abstractmethod
from typing import Optional


class ProgressPort(ABC):
    @abstractmethod
    def report(
        self,
        job_id: str,
        stage: str,
        detail: Optional[str] = None,
    ) -> None:
        """Report progress. stage: requesting, extracting, aggregating."""
