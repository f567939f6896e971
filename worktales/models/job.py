# worktales/models/job.py
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, Field


class JobUpdate(BaseModel):
    """The five fields a PUT overwrites. Anything else in the body is ignored."""

    title: Optional[Any] = None
    description: Optional[Any] = None
    deadline: Optional[Any] = None
    price_range: Optional[Any] = None
    # the web client sends the edited category as ``updatedCategory``
    category: Optional[Any] = Field(
        default=None, validation_alias=AliasChoices("category", "updatedCategory")
    )

    def to_set(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "deadline": self.deadline,
            "price_range": self.price_range,
            "description": self.description,
            "category": self.category,
        }
