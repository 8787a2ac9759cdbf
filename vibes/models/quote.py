from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    author: str | None = None
