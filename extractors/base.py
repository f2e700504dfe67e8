from abc import ABC, abstractmethod
from pydantic import BaseModel


class Extractor(ABC):
    """
    Abstract base for body extractors (forwarded headers, transaction fields).
    Implementations never raise on unmatched input; they return a model
    carrying unset or default fields instead.
    """

    @abstractmethod
    def extract(self, content: str) -> BaseModel:
        """
        Extract structured data from a decoded email body.
        """
        raise NotImplementedError
