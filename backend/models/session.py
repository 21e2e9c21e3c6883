from pydantic import BaseModel, Field


class Session(BaseModel):
    session_id: str
    last_accessed: float            # store clock reading, not wall time
    values: dict[str, bytes] = Field(default_factory=dict)
