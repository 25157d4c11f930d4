"""Post API Routes - Route registration only."""

from fastapi import APIRouter

from mockapi.api.v1 import POSTS_PREFIX
from mockapi.api.v1.posts import api

router = APIRouter()
router.include_router(api.router, prefix=POSTS_PREFIX, tags=["Posts"])
