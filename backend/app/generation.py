import asyncio
import contextlib
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional

from fastapi import Request

from app.core.config import Settings
from app.models import Character
from app.store import RosterStore
from character_generator import generate_character

logger = logging.getLogger(__name__)


class GenerationState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


class GenerationError(Exception):
    """Raised when the generator is asked to do something its state does not allow."""


class GenerationAlreadyRunningError(GenerationError):
    def __init__(self) -> None:
        super().__init__("Generation already in progress")


class GenerationNotRunningError(GenerationError):
    def __init__(self) -> None:
        super().__init__("No generation in progress")


@dataclass
class GenerationEvent:
    action: Literal["added", "removed"]
    character: Character


class GenerationController:
    """
    Periodically mutates the roster while running.

    The loop is an asyncio task on the serving event loop, so each tick runs
    between request handlers and never interleaves with them.
    """

    def __init__(
        self,
        store: RosterStore,
        *,
        interval: float = 2.0,
        remove_probability: float = 0.3,
        min_roster_size: int = 5,
        rng: Optional[random.Random] = None,
    ):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if min_roster_size < 0:
            raise ValueError(f"min_roster_size must be zero or greater, got {min_roster_size}")
        if not 0.0 <= remove_probability <= 1.0:
            raise ValueError(f"remove_probability must be between 0 and 1, got {remove_probability}")
        self.store = store
        self.interval = interval
        self.remove_probability = remove_probability
        self.min_roster_size = min_roster_size
        self.rng = rng or random.Random()
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def state(self) -> GenerationState:
        return GenerationState.RUNNING if self.is_running else GenerationState.IDLE

    def start(self) -> None:
        """Start the loop on the running event loop."""
        if self.is_running:
            raise GenerationAlreadyRunningError()
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Generation started (interval=%.2fs)", self.interval)

    async def stop(self) -> None:
        if not self.is_running:
            raise GenerationNotRunningError()
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Generation stopped after %d ticks", self.ticks)

    async def shutdown(self) -> None:
        """Stop the loop if it is running; safe to call when idle."""
        if self.is_running:
            await self.stop()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.tick()
            except Exception:
                logger.exception("Generation tick %d failed", self.ticks)

    def tick(self) -> GenerationEvent:
        """Perform exactly one add or remove."""
        self.ticks += 1
        should_remove = self.rng.random() < self.remove_probability and len(self.store) > self.min_roster_size

        if should_remove:
            victim = self.rng.choice(self.store.list())
            removed = self.store.remove(victim.id)
            logger.info("Character removed by generator: %s", removed)
            return GenerationEvent(action="removed", character=removed)

        generated = generate_character(self.store.next_id(), self.rng)
        created = self.store.insert(generated.name, generated.stats)
        logger.info("Character generated: %s", created)
        return GenerationEvent(action="added", character=created)


def init_generation(store: RosterStore, settings: Settings) -> GenerationController:
    """Create the generation controller; called during startup."""
    return GenerationController(
        store,
        interval=settings.generation_interval_seconds,
        remove_probability=settings.generation_remove_probability,
        min_roster_size=settings.generation_min_roster_size,
        rng=random.Random(settings.generator_seed),
    )


def get_generation(request: Request) -> GenerationController:
    """Return the application's generation controller for dependency injection."""
    return request.app.state.generation
