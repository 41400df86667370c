"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DogId wraps int — ids are assigned by the store, never by handlers
    - Dog is immutable once built; a changed dog is a new Dog value
    - DogOperation enumerates the five supported operations — no raw strings

Design Decisions:
    - NewType over dataclass wrapper for DogId: zero runtime cost, full type-checker support
    - str Enum for DogOperation: serializes into log records without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DogId = NewType("DogId", int)


# ─── Enums ───────────────────────────────────────────────────────

class DogOperation(str, Enum):
    """The five operations exposed over the Dog resource."""
    CREATE = "create"
    LIST = "list"
    GET = "get"
    UPDATE = "update"
    DELETE = "delete"


# ─── Entity ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Dog:
    """A single stored Dog record."""
    id: DogId
    name: str
    breed: str
    description: str
    age: int | float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "breed": self.breed,
            "description": self.description,
            "age": self.age,
        }


@dataclass(frozen=True)
class GatewayFailure:
    """A storage-layer failure returned (not raised) by the persistence gateway."""
    operation: DogOperation
    cause: str
