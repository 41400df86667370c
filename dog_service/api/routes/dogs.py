"""Dog Routes — HTTP surface for the five Dog operations.

Invariants:
    - Routes contain no business logic: parse transport input, delegate to DogHandlers, render
    - Bodies are read raw so DogHandlers, not FastAPI, decide what is a 400
    - Empty body reads as {}; unparseable JSON reads as None (rejected by validation)
    - NaN and Infinity tokens are not JSON: such bodies read as None
    - 204 responses carry no body

Design Decisions:
    - DogHandlers built per request around the request's AsyncSession
      (no shared store handle)
    - Path ids typed as str: numeric parsing belongs to the validator
"""

import json

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from dog_service.core.map_errors import HandlerResponse
from dog_service.infrastructure.database import get_db
from dog_service.infrastructure.dog_repository import SqlDogRepository
from dog_service.services.dog_handlers import DogHandlers

router = APIRouter(prefix="/dogs", tags=["dogs"])


def get_dog_handlers(db: AsyncSession = Depends(get_db)) -> DogHandlers:
    return DogHandlers(SqlDogRepository(db))


async def read_json_body(request: Request) -> object:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return None


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def render(response: HandlerResponse) -> Response:
    if response.body is None:
        return Response(status_code=response.status_code)
    return JSONResponse(status_code=response.status_code, content=response.body)


@router.post("", status_code=201)
async def create_dog(
    request: Request, handlers: DogHandlers = Depends(get_dog_handlers),
):
    """Create a dog from a full payload."""
    return render(await handlers.create(await read_json_body(request)))


@router.get("")
async def list_dogs(handlers: DogHandlers = Depends(get_dog_handlers)):
    """List every stored dog."""
    return render(await handlers.list_all())


@router.get("/{dog_id}")
async def get_dog(dog_id: str, handlers: DogHandlers = Depends(get_dog_handlers)):
    """Get one dog; 204 when it does not exist."""
    return render(await handlers.get(dog_id))


@router.patch("/{dog_id}", status_code=201)
async def update_dog(
    dog_id: str,
    request: Request,
    handlers: DogHandlers = Depends(get_dog_handlers),
):
    """Apply a partial update."""
    return render(await handlers.update(dog_id, await read_json_body(request)))


@router.delete("/{dog_id}")
async def delete_dog(dog_id: str, handlers: DogHandlers = Depends(get_dog_handlers)):
    """Delete a dog and return it as it was; 204 when it does not exist."""
    return render(await handlers.delete(dog_id))
