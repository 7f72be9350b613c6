from abc import ABC, abstractmethod
from typing import Optional

class BaseReader(ABC):
    def __init__(self, config: Optional[dict] = None):
        self.config = config or {}

    @property
    def encoding(self) -> str:
        return self.config.get("reading", {}).get("encoding", "utf-8")

    @abstractmethod
    def read(self, path: str) -> str:
        """
        Read the whole file at `path` as text.
        Raises FileReadError when the file cannot be read or decoded.
        """
        pass
