"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The repository owns storage and id assignment; callers never invent ids
    - Storage failures come back as GatewayFailure values, never as exceptions
    - update/delete on a missing id is a GatewayFailure (same as any other failure)
    - Ids arrive as parsed numbers; one that cannot address a row (1.5, inf) is a
      GatewayFailure, not a miss

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO, handlers await them
"""

from typing import Protocol

from dog_service.core.domain_types import Dog, DogId, GatewayFailure


class DogRepository(Protocol):
    """Contract for dog persistence — implemented by shell."""
    async def create(self, fields: dict) -> Dog | GatewayFailure: ...
    async def find_one(self, dog_id: DogId | float) -> Dog | None | GatewayFailure: ...
    async def find_many(self) -> list[Dog] | GatewayFailure: ...
    async def update(
        self, dog_id: DogId | float, fields: dict,
    ) -> Dog | GatewayFailure: ...
    async def delete(self, dog_id: DogId | float) -> None | GatewayFailure: ...
