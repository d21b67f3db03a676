"""Binder listing endpoint: GET /binders."""

from __future__ import annotations

from fastapi import APIRouter

from formshape.api.schemas import BinderInfo, BinderListResponse
from formshape.binder import BinderRegistry

router = APIRouter()


@router.get("", response_model=BinderListResponse)
async def list_binders() -> BinderListResponse:
    """List the registered form-library binders and the transform each uses."""
    binders = []
    for name in BinderRegistry.available():
        binder_class = BinderRegistry.binder_class(name)
        binders.append(BinderInfo(name=name, transform=str(binder_class.transform)))
    return BinderListResponse(binders=binders)
