"""Transform endpoints: POST /flatten, /flatten/messages, /mirror."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request

from formshape.api.schemas import (
    FlattenResponse,
    MessagesResponse,
    MirrorResponse,
    TreeRequest,
)
from formshape.parser.loader import TreeLoader, TreeLoadError, TreeSafetyError, decode_tree
from formshape.transform import flatten, flatten_messages, mirror

logger = logging.getLogger("formshape.api")

router = APIRouter()


def get_loader(request: Request) -> TreeLoader:
    """``Depends`` provider: a loader bound to the application settings."""
    return TreeLoader(request.app.state.settings)


def _decoded_tree(body: TreeRequest, loader: TreeLoader) -> Any:
    try:
        loader.check(body.errors)
        return decode_tree(body.errors)
    except (TreeSafetyError, TreeLoadError) as exc:
        logger.warning("Rejected error tree: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/flatten", response_model=FlattenResponse)
async def flatten_tree(
    body: TreeRequest, loader: Annotated[TreeLoader, Depends(get_loader)]
) -> FlattenResponse:
    """Flatten an error tree into ``{path: {kind, message}}``."""
    return FlattenResponse(errors=flatten(_decoded_tree(body, loader)))


@router.post("/flatten/messages", response_model=MessagesResponse)
async def flatten_tree_messages(
    body: TreeRequest, loader: Annotated[TreeLoader, Depends(get_loader)]
) -> MessagesResponse:
    """Flatten an error tree into ``{path: message}``."""
    return MessagesResponse(errors=flatten_messages(_decoded_tree(body, loader)))


@router.post("/mirror", response_model=MirrorResponse)
async def mirror_tree(
    body: TreeRequest, loader: Annotated[TreeLoader, Depends(get_loader)]
) -> MirrorResponse:
    """Mirror an error tree into the shape of the form values."""
    return MirrorResponse(errors=mirror(_decoded_tree(body, loader)))
