from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ParticipantRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)


RosterPayload = TypeAdapter(List[ParticipantRecord])
