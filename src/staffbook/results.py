"""
Tagged results returned by resolvers that can fail in-band
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    message: str


@dataclass(frozen=True)
class Failure:
    message: str


Result = Union[Success[T], Failure]
