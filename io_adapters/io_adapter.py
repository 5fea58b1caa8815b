# io_adapters/io_adapter.py

from abc import ABC, abstractmethod

class IOAdapter(ABC):
    @abstractmethod
    def prompt(self, message: str) -> None:
        ...

    @abstractmethod
    def collect(self, prompt_text: str) -> str:
        ...

    @abstractmethod
    def confirm(self, message: str) -> None:
        ...
