from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class CacheConnectionPort(ABC):
    @abstractmethod
    def get(self, key: str) -> bytes | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, payload: bytes, ttl_seconds: int | None = None) -> None:
        raise NotImplementedError


class CacheStorePort(ABC):
    @abstractmethod
    def connect(self) -> AbstractContextManager[CacheConnectionPort]:
        """
        Checks a connection out of the pool. It is returned when the context exits,
        whether or not the body raised.
        """
        raise NotImplementedError
