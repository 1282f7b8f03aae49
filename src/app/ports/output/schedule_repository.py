from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import TransitSchedule


class IScheduleRepository(ABC):
    """Port for loading and storing transit schedules."""

    @abstractmethod
    def load_schedule(self) -> TransitSchedule:
        raise NotImplementedError

    @abstractmethod
    def save_schedule(self, schedule: TransitSchedule) -> None:
        raise NotImplementedError
