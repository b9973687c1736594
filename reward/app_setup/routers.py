"""
Registre central des routers.
- API: transaction (calcul), catalogue, promotions
- Health: health_router
"""
from fastapi import FastAPI
from reward.pricing import views as pricing_views
from reward.catalog import views as catalog_views
from reward.promotions import views as promotions_views
from reward.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # API
    app.include_router(pricing_views.router)
    app.include_router(catalog_views.router)
    app.include_router(promotions_views.router)
    # Health & monitoring
    app.include_router(health_router)
