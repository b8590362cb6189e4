"""API route registration."""

from fastapi import APIRouter

from worldbanc.api.routes import auth, browse

api_router = APIRouter()

# browse is a catch-all GET and must stay last
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(browse.router, tags=["browse"])
