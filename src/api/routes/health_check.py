"""
Health Check API Routes

Reports process liveness and store connectivity. Always answers 200.
"""

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work
from src.domain.base import to_iso, utc_now

router = APIRouter()


async def _database_state(uow: UnitOfWork) -> str:
    return "connected" if await uow.ping() else "disconnected"


@router.get("/status", status_code=status.HTTP_200_OK)
async def get_status(uow: UnitOfWork = Depends(get_unit_of_work)):
    return {
        "status": "success",
        "data": {
            "database": await _database_state(uow),
            "timestamp": to_iso(utc_now()),
        },
    }


root_router = APIRouter()


@root_router.get("/", status_code=status.HTTP_200_OK)
async def get_root(uow: UnitOfWork = Depends(get_unit_of_work)):
    return {
        "status": "active",
        "version": ApplicationConfig.VERSION,
        "database": await _database_state(uow),
    }
