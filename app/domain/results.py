# app/domain/results.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    entity: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class StorageError:
    """Lookup failed for a reason other than a missing document."""
    cause: BaseException


LookupResult = Union[Found[T], NotFound, StorageError]
