from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Network


class INetworkRepository(ABC):
    @abstractmethod
    def load_network(self) -> Network:
        raise NotImplementedError
