# app/api/v1/system.py

import logging
from fastapi import APIRouter, HTTPException
from sqlalchemy import text
from app.core.config import get_settings
from app.database import engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness probe"""
    return {"status": "healthy", "service": get_settings().app_name}


@router.get("/db-test")
def test_db():
    """Round-trip a trivial query"""
    try:
        with engine.connect() as connection:
            result = connection.execute(text("SELECT 1"))
            return {"status": "ok", "result": result.fetchone()[0]}
    except Exception:
        logger.exception("Database check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
