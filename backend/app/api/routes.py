import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app import models
from app.analytics import average_stats, stat_distribution
from app.generation import GenerationController, GenerationError, get_generation
from app.schemas import (
    Character,
    CharacterCreate,
    CharacterUpdate,
    GenerationMessage,
    GenerationStatus,
    RosterSummary,
    StatValue,
)
from app.store import CharacterNotFoundError, RosterStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


def _serialize_character(model: models.Character) -> Character:
    return Character(id=model.id, name=model.name, stats=dict(model.stats))


def _require_fields(name: str | None, stats: dict | None) -> None:
    if not name or stats is None:
        logger.warning("Rejected character without name or stats")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")


def _not_found(exc: CharacterNotFoundError) -> HTTPException:
    logger.warning("Character not found: %s", exc.character_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Character not found")


@router.get("/characters", response_model=List[Character], tags=["characters"])
async def list_characters(store: RosterStore = Depends(get_store)) -> List[Character]:
    return [_serialize_character(c) for c in store.list()]


@router.post(
    "/characters",
    response_model=Character,
    status_code=status.HTTP_201_CREATED,
    tags=["characters"],
)
async def create_character(request: CharacterCreate, store: RosterStore = Depends(get_store)) -> Character:
    """Append a character; the id is assigned as the current max id + 1."""
    _require_fields(request.name, request.stats)
    created = store.insert(request.name, request.stats)
    logger.info("Character created: %s", created)
    return _serialize_character(created)


@router.put("/characters", response_model=Character, tags=["characters"])
async def update_character(request: CharacterUpdate, store: RosterStore = Depends(get_store)) -> Character:
    """Replace an existing character wholesale."""
    _require_fields(request.name, request.stats)
    try:
        updated = store.replace(models.Character(id=request.id, name=request.name, stats=dict(request.stats)))
    except CharacterNotFoundError as exc:
        raise _not_found(exc) from exc
    logger.info("Character updated: %s", updated)
    return _serialize_character(updated)


@router.delete("/characters", response_model=Character, tags=["characters"])
async def delete_character(
    id: int = Query(..., description="Id of the character to delete"),
    store: RosterStore = Depends(get_store),
) -> Character:
    try:
        deleted = store.remove(id)
    except CharacterNotFoundError as exc:
        raise _not_found(exc) from exc
    logger.info("Character deleted: %s", deleted)
    return _serialize_character(deleted)


@router.get("/characters/summary", response_model=RosterSummary, tags=["characters"])
async def roster_summary(store: RosterStore = Depends(get_store)) -> RosterSummary:
    """Average value per stat and character counts per 1000-point stat total."""
    characters = store.list()
    return RosterSummary(
        count=len(characters),
        average_stats=[StatValue(name=name, value=value) for name, value in average_stats(characters)],
        distribution=[StatValue(name=name, value=value) for name, value in stat_distribution(characters)],
    )


@router.post("/generate/start", response_model=GenerationMessage, tags=["generation"])
async def start_generation(generation: GenerationController = Depends(get_generation)) -> GenerationMessage:
    try:
        generation.start()
    except GenerationError as exc:
        logger.warning("Start rejected: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return GenerationMessage(message="Generation started")


@router.post("/generate/stop", response_model=GenerationMessage, tags=["generation"])
async def stop_generation(generation: GenerationController = Depends(get_generation)) -> GenerationMessage:
    try:
        await generation.stop()
    except GenerationError as exc:
        logger.warning("Stop rejected: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return GenerationMessage(message="Generation stopped")


@router.get("/generate/status", response_model=GenerationStatus, tags=["generation"])
async def generation_status(generation: GenerationController = Depends(get_generation)) -> GenerationStatus:
    return GenerationStatus(
        is_generating=generation.is_running,
        state=generation.state.value,
        interval_seconds=generation.interval,
    )
