# app/api/__init__.py
from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.routers import carts, favorites, health, orders, users


def create_app(lifespan=None) -> FastAPI:
    app = FastAPI(
        title="Food Order Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(favorites.router)

    return app
