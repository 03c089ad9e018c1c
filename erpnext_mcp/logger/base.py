"""Abstract structured logger interface."""

from abc import ABC, abstractmethod
from typing import Any, Union


class Logger(ABC):
    """Structured logger: a message plus arbitrary keyword fields."""

    def set_level(self, level: Union[int, str]) -> None:
        """Change verbosity; implementations without levels may ignore this."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None: ...
