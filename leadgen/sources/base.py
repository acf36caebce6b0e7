from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from leadgen.models import Lead, SearchFilters


class Source(ABC):
    def __init__(self, name: str) -> None:
        self.name = name
        self.logger = logging.getLogger(f"leadgen.sources.{name}")

    @abstractmethod
    def fetch(self, filters: SearchFilters) -> list[Lead]:
        raise NotImplementedError

    def safe_fetch(self, filters: SearchFilters) -> list[Lead]:
        try:
            return self.fetch(filters)
        except (RuntimeError, ValueError, KeyError) as exc:
            self.logger.warning("source failed: %s", exc)
            return []
