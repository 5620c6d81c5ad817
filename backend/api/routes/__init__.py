"""API Routes Package"""
from .build import router as build_router
from .health import router as health_router
from .websites import router as websites_router

__all__ = ["build_router", "health_router", "websites_router"]
