"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Optional

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for use cases."""
    success: bool
    data: Optional[OutputDTO] = None
    message: str = ""

    @classmethod
    def ok(cls, data: OutputDTO, message: str = "") -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """
    Base use case class.

    Failures are raised as domain exceptions; a returned result is always
    a success.
    """

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
