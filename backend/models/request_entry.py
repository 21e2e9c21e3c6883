from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequestEntry(BaseModel):
    model_config = ConfigDict(strict=True)

    path: str
    count: int = Field(default=0, ge=0)


class RequestEntryCollection(BaseModel):
    """
    Ordered (path, count) pairs, at most one entry per path.

    The type/version fields tag the record when it is written to the session.
    """

    model_config = ConfigDict(strict=True)

    type: Literal["RequestEntryCollection"] = "RequestEntryCollection"
    version: Literal[1] = 1
    entries: list[RequestEntry] = Field(default_factory=list)

    @field_validator("entries")
    @classmethod
    def _unique_paths(cls, entries: list[RequestEntry]) -> list[RequestEntry]:
        seen: set[str] = set()
        for entry in entries:
            if entry.path in seen:
                raise ValueError(f"duplicate path {entry.path!r}")
            seen.add(entry.path)
        return entries

    def add(self, path: str) -> RequestEntry:
        for entry in self.entries:
            if entry.path == path:
                entry.count += 1
                return entry
        entry = RequestEntry(path=path, count=1)
        self.entries.append(entry)
        return entry

    def total_count(self) -> int:
        return sum(entry.count for entry in self.entries)
