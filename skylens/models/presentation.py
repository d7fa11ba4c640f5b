"""Presenter state models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


@dataclass(frozen=True)
class LoadingState:
    pass


@dataclass(frozen=True)
class LoadedState:
    pass


@dataclass(frozen=True)
class ErrorState:
    message: str


ViewState: TypeAlias = LoadingState | LoadedState | ErrorState

LOADING = LoadingState()
LOADED = LoadedState()


class SubmissionStatus(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
