from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..config import BLOCK_COUNT

# One slot per lesson block, None where nothing changes
ScheduleEntry = Annotated[
    list[str | None], Field(min_length=BLOCK_COUNT, max_length=BLOCK_COUNT)
]


def empty_entry() -> list[str | None]:
    return [None] * BLOCK_COUNT


class Schedule(BaseModel):
    """Substitutions of one PDF keyed by class name."""

    model_config = ConfigDict(frozen=True)

    issue_date_ms: int
    entries: dict[str, ScheduleEntry] = Field(default_factory=dict)
