from fastapi import APIRouter

from src.fundtrack.api.v1 import dashboard, investments, investors, projects, statuses

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
api_router.include_router(investors.router)
api_router.include_router(investments.router)
api_router.include_router(statuses.router)
api_router.include_router(dashboard.router)
