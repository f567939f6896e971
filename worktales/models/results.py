# worktales/models/results.py
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

# Driver acknowledgements, rendered the way the MongoDB drivers print them as JSON.


def oid_str(oid) -> Optional[str]:
    if oid is None:
        return None
    return str(oid)


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    # keep Mongo's ``_id`` key, only make it JSON friendly
    if doc is None:
        return None
    out = dict(doc)
    for key, value in out.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
    return out


class _DriverResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True


class InsertResult(_DriverResult):
    inserted_id: str = Field(alias="insertedId")

    @classmethod
    def from_driver(cls, result) -> "InsertResult":
        return cls(acknowledged=result.acknowledged, inserted_id=oid_str(result.inserted_id))


class UpdateResult(_DriverResult):
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_count: int = Field(alias="upsertedCount")
    upserted_id: Optional[str] = Field(default=None, alias="upsertedId")

    @classmethod
    def from_driver(cls, result) -> "UpdateResult":
        upserted = oid_str(result.upserted_id)
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=1 if upserted is not None else 0,
            upserted_id=upserted,
        )


class DeleteResult(_DriverResult):
    deleted_count: int = Field(alias="deletedCount")

    @classmethod
    def from_driver(cls, result) -> "DeleteResult":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
