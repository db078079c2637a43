from fastapi import APIRouter

from src.seo_center.api.v1 import projects, session, tasks

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(session.router)
api_router.include_router(projects.router)
api_router.include_router(tasks.router)
