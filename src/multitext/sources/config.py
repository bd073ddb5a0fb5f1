# src/multitext/sources/config.py

import codecs

from pydantic import BaseModel, ConfigDict, field_validator


class SourceConfig(BaseModel):
    """How byte sources are decoded into lines.

    Immutable. Explicit. No magic defaults from environment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str = "utf-8"
    # drop lines that fail to decode instead of failing the whole source
    skip_undecodable_lines: bool = True

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}")
        return value
