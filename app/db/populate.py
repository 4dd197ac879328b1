"""Reference resolution for documents read from MongoDB."""

from typing import Any, Dict, Iterable, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase


async def populate(
    db: AsyncIOMotorDatabase,
    docs: List[Dict[str, Any]],
    field: str,
    collection: str,
    fields: Iterable[str],
) -> List[Dict[str, Any]]:
    """
    Replace the ObjectId stored under ``field`` in each doc with the
    referenced document, restricted to ``fields`` plus ``_id``.

    References are fetched with a single ``$in`` query. A reference whose
    target no longer exists resolves to None. Docs are modified in place and
    returned for convenience.
    """
    ids = {doc.get(field) for doc in docs if isinstance(doc.get(field), ObjectId)}
    if not ids:
        return docs

    projection = {name: 1 for name in fields}
    cursor = db[collection].find({"_id": {"$in": list(ids)}}, projection)
    found = {ref["_id"]: ref for ref in await cursor.to_list(length=None)}

    for doc in docs:
        ref_id = doc.get(field)
        if isinstance(ref_id, ObjectId):
            doc[field] = found.get(ref_id)

    return docs


async def populate_one(
    db: AsyncIOMotorDatabase,
    doc: Dict[str, Any],
    field: str,
    collection: str,
    fields: Iterable[str],
) -> Dict[str, Any]:
    """Single-document form of :func:`populate`."""
    await populate(db, [doc], field, collection, fields)
    return doc
