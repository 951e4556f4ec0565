"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic
from dataclasses import dataclass, field
from datetime import datetime

from app.domain.models.actor import Actor
from app.domain.models.base import DomainException, ValidationError, BusinessRuleViolation


T = TypeVar('T')
R = TypeVar('R')

logger = logging.getLogger(__name__)


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    exception: Optional[Exception] = field(default=None, repr=False, compare=False)

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            result = cls.error_result(exc.message, exc.code)
        elif isinstance(exc, BusinessRuleViolation):
            result = cls.error_result(exc.message, "BUSINESS_RULE_VIOLATION")
        elif isinstance(exc, DomainException):
            result = cls.error_result(exc.message, exc.code)
        else:
            result = cls.error_result(str(exc), "UNKNOWN_ERROR")
        result.exception = exc
        return result

    @property
    def failed(self) -> bool:
        return not self.success


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Every use case runs on behalf of an explicit actor and returns exactly one
    result: the data, or a single error. It never raises.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T, actor: Actor) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        self.execution_start = datetime.utcnow()

        try:
            result = await self._execute_business_logic(request, actor)

            self.execution_end = datetime.utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            return UseCaseResult.success_result(
                result,
                metadata={
                    "execution_time_seconds": execution_time,
                    "executed_at": self.execution_end.isoformat()
                }
            )

        except Exception as exc:
            self.execution_end = datetime.utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            exc = self._normalize_exception(exc)
            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                "execution_time_seconds": execution_time,
                "failed_at": self.execution_end.isoformat(),
                "exception_type": type(exc).__name__
            }
            logger.info(
                "%s failed for user %s: %s",
                type(self).__name__, actor.id, error_result.error
            )

            return error_result

    def _normalize_exception(self, exc: Exception) -> Exception:
        """
        Map an exception to the one reported to the caller.
        Override in subclasses that wrap unexpected failures.
        """
        if not isinstance(exc, DomainException):
            logger.error("Unexpected error in %s", type(self).__name__, exc_info=exc)
        return exc

    @abstractmethod
    async def _execute_business_logic(self, request: T, actor: Actor) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    Subclasses implement the command itself; stages before the write must not
    have side effects so a failure leaves the store untouched.
    """

    async def _execute_business_logic(self, request: T, actor: Actor) -> R:
        return await self._execute_command_logic(request, actor)

    @abstractmethod
    async def _execute_command_logic(self, request: T, actor: Actor) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


class CreateUseCase(CommandUseCase[T, R]):
    """Base class for entity creation use cases."""
    pass


class DeleteUseCase(CommandUseCase[T, R]):
    """Base class for entity deletion use cases."""
    pass
