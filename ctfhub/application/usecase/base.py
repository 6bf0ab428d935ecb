"""Base use case and wire models."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ApiModel(BaseModel):
    """Model serialized with the API's camelCase field names.

    Fields accept both their Python name and their wire alias on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
