from fastapi import APIRouter
from app.api.http import auth_router, documents_router, highlights_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(documents_router)
api_router.include_router(highlights_router)
