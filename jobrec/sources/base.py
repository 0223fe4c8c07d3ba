from abc import ABC, abstractmethod

from jobrec.models import JobRecord, ScrapeOptions


class JobSource(ABC):
    @abstractmethod
    def search(self, options: ScrapeOptions) -> list[JobRecord]:
        pass
