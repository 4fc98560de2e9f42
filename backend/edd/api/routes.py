from fastapi import APIRouter

from edd.api.edd import router as edd_router
from edd.api.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(edd_router)
