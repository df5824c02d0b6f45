from fastapi import APIRouter
from .farms import router as farms_router
from .ponds import router as ponds_router
from .cycles import router as cycles_router
from .harvest import router as harvest_router
from .finance import router as finance_router
from .reports import router as reports_router

api_router = APIRouter()
api_router.include_router(farms_router)
api_router.include_router(ponds_router)
api_router.include_router(cycles_router)
api_router.include_router(harvest_router)
api_router.include_router(finance_router)
api_router.include_router(reports_router)
