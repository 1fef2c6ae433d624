"""Application state for the generator page.

All mutable page state lives in one ``AppState`` owned by a ``Coordinator``.
Changes go through ``reduce`` so every generation cycle starts from a clean
slate and the busy flag gates resubmission.
"""
import time
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from edugen.schemas import ContentType, GenerateOptions, PerformanceMetrics
from edugen.services.generation_service import GenerationError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during content generation."


@dataclass(frozen=True)
class AppState:
    is_loading: bool = False
    error: Optional[str] = None
    content: Optional[str] = None
    content_type: ContentType = ContentType.STUDY_GUIDE
    metrics: Optional[PerformanceMetrics] = None

    @property
    def has_output(self) -> bool:
        return self.content is not None and self.metrics is not None and not self.is_loading


@dataclass(frozen=True)
class GenerationStarted:
    content_type: ContentType

@dataclass(frozen=True)
class GenerationSucceeded:
    content: str
    metrics: PerformanceMetrics

@dataclass(frozen=True)
class GenerationFailed:
    message: str
    metrics: PerformanceMetrics

Action = Union[GenerationStarted, GenerationSucceeded, GenerationFailed]


def reduce(state: AppState, action: Action) -> AppState:
    if isinstance(action, GenerationStarted):
        return AppState(is_loading=True, content_type=action.content_type)
    if isinstance(action, GenerationSucceeded):
        return replace(state, is_loading=False, content=action.content, metrics=action.metrics)
    if isinstance(action, GenerationFailed):
        return replace(state, is_loading=False, error=action.message, metrics=action.metrics)
    raise ValueError(f"Unknown action: {action!r}")


def can_submit(state: AppState, options: GenerateOptions) -> bool:
    return not state.is_loading and options.topic.strip() != ""


class Coordinator:
    def __init__(self, generate: Callable[[GenerateOptions], str], state: Optional[AppState] = None):
        self.generate = generate
        self.state = state or AppState()

    def dispatch(self, action: Action) -> AppState:
        self.state = reduce(self.state, action)
        return self.state

    def submit(self, options: GenerateOptions) -> bool:
        """Run one generation cycle. Returns False when the submission is ignored."""
        if not can_submit(self.state, options):
            return False

        self.dispatch(GenerationStarted(options.content_type))
        start = time.perf_counter()
        try:
            content = self.generate(options)
        except GenerationError as e:
            logger.error(f"Generation failed: {e.message}")
            message = f"Generation failed: {e.message}"
        except Exception:
            logger.error("Unexpected error during content generation", exc_info=True)
            message = UNKNOWN_ERROR_MESSAGE
        else:
            self.dispatch(GenerationSucceeded(
                content,
                PerformanceMetrics(generation_time=time.perf_counter() - start),
            ))
            return True

        # every outcome clears the busy flag
        self.dispatch(GenerationFailed(
            message,
            PerformanceMetrics(generation_time=time.perf_counter() - start),
        ))
        return True
