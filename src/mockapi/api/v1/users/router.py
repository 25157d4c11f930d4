"""User API Routes - Route registration only."""

from fastapi import APIRouter

from mockapi.api.v1 import USERS_PREFIX
from mockapi.api.v1.users import api

router = APIRouter()
router.include_router(api.router, prefix=USERS_PREFIX, tags=["Users"])
