"""Use Cases des beats."""

from backoffice.application.use_cases.beats.create_beat import (
    CreateBeatRequest,
    CreateBeatUseCase,
)
from backoffice.application.use_cases.beats.delete_beat import DeleteBeatUseCase
from backoffice.application.use_cases.beats.get_beat import GetBeatUseCase
from backoffice.application.use_cases.beats.list_beats import (
    ListBeatsRequest,
    ListBeatsUseCase,
)
from backoffice.application.use_cases.beats.update_beat import (
    UpdateBeatRequest,
    UpdateBeatUseCase,
)

__all__ = [
    "CreateBeatUseCase",
    "CreateBeatRequest",
    "GetBeatUseCase",
    "ListBeatsUseCase",
    "ListBeatsRequest",
    "UpdateBeatUseCase",
    "UpdateBeatRequest",
    "DeleteBeatUseCase",
]
