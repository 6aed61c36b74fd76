"""
lazyseq - Pydantic Models

Record returned by a raw pull function adapted through ``Iterable``.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class IteratorResult(BaseModel):
    """One pull from a producer: the value and whether the producer is done"""
    model_config = ConfigDict(frozen=True)

    value: Any = Field(
        None,
        description="Produced value; ignored once done is set"
    )
    done: bool = Field(
        False,
        description="True when the producer has no further values"
    )

    @classmethod
    def coerce(cls, raw: Any) -> "IteratorResult":
        """Accept a ready model or a ``{"value": ..., "done": ...}`` mapping"""
        if isinstance(raw, cls):
            return raw
        return cls.model_validate(raw)
