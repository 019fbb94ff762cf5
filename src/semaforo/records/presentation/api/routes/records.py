"""
Shared CRUD routes for a record store, mounted once per record type.
"""
from typing import Any, Callable, Dict, Optional, Type

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ....domain import RecordStore

def envelope(message: str, data: Any = None, success: bool = True) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success, "message": message}
    if data is not None:
        if isinstance(data, list):
            data = [item.model_dump(mode="json", by_alias=True) for item in data]
        elif isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True)
        body["data"] = data
    return body

def not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=404, content=envelope(message, success=False))

def build_record_router(
    get_store: Callable[[], RecordStore],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    label: str,
    plural: Optional[str] = None,
) -> APIRouter:
    """
    Builds create / list / latest / get / update / delete routes.
    `label` names the record in response messages, e.g. "Traffic data".
    Must be included with a prefix.
    """
    plural = plural or label
    router = APIRouter()

    # Body models come from the annotations, so they are bound per router
    def create(payload: create_schema, store: RecordStore = Depends(get_store)):
        record = store.create(payload)
        return envelope(f"{label} created successfully", record)

    def update(record_id: str, payload: update_schema, store: RecordStore = Depends(get_store)):
        record = store.update(record_id, payload)
        if record is None:
            return not_found(f"{label} not found")
        return envelope(f"{label} updated successfully", record)

    router.add_api_route("", create, methods=["POST"], status_code=201)

    @router.get("")
    def get_all(store: RecordStore = Depends(get_store)):
        return envelope(f"{plural} retrieved successfully", store.get_all())

    @router.get("/latest")
    def get_latest(store: RecordStore = Depends(get_store)):
        record = store.get_latest()
        if record is None:
            return not_found(f"No {plural.lower()} found")
        return envelope(f"Latest {label.lower()} retrieved successfully", record)

    @router.get("/{record_id}")
    def get_by_id(record_id: str, store: RecordStore = Depends(get_store)):
        record = store.get_by_id(record_id)
        if record is None:
            return not_found(f"{label} not found")
        return envelope(f"{label} retrieved successfully", record)

    router.add_api_route("/{record_id}", update, methods=["PUT"])

    @router.delete("/{record_id}")
    def delete(record_id: str, store: RecordStore = Depends(get_store)):
        if not store.delete(record_id):
            return not_found(f"{label} not found")
        return envelope(f"{label} deleted successfully")

    return router
