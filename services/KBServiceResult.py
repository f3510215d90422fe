# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: KBServiceResult.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """
    VALIDATION: missing/empty caller input (client-side problem).
    UPSTREAM:   embedding provider or document store failed (server-side problem).
    """

    VALIDATION = "validation"
    UPSTREAM = "upstream"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def validation_error(cls, message: str) -> "ServiceResult[T]":
        return cls(error_kind=ErrorKind.VALIDATION, error=message)

    @classmethod
    def upstream_error(cls, message: str) -> "ServiceResult[T]":
        return cls(error_kind=ErrorKind.UPSTREAM, error=message)
