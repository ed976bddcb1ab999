from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class TranslationData(BaseModel):
    """A single translatable entry.

    ``context`` doubles as the bucket an entry is stored under inside a
    :class:`~transkit.collection.TranslationCollection`.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    context: str
    reference: Optional[str] = None
    comment: Optional[str] = None

    def replace(self, **changes: Any) -> "TranslationData":
        """Return a copy with ``changes`` applied and re-validated."""
        return self.model_validate({**self.model_dump(), **changes})

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranslationData":
        return cls.model_validate(data)
