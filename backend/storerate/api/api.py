from fastapi import APIRouter
from storerate.api.endpoints import auth, health, public, ratings, stats, stores, users

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(stores.router, prefix="/stores", tags=["stores"])
api_router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
api_router.include_router(public.router, tags=["public"])
