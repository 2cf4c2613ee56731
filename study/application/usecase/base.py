"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application flow: validated request in, response model out."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
