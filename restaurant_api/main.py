"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (app).

Configure : logs, CORS, traçage des requêtes, gestion des erreurs, schéma OpenAPI personnalisé.

Inclut les routers (/api/v1/auth, /api/v1/users, /api/v1/restaurants).

Initialise la base (et l'admin initial éventuel) au démarrage.

Point unique d'exécution : uvicorn restaurant_api.main:app --reload.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from restaurant_api.core.config import settings
from restaurant_api.core.errors import register_exception_handlers
from restaurant_api.core.logging_config import RequestLoggingMiddleware, setup_logging
from restaurant_api.core.openapi import custom_openapi
from restaurant_api.db.seed import seed_admin
from restaurant_api.db.session import engine, init_db

from restaurant_api.api.v1.routers import authentication, users, restaurants

import uvicorn

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.0.1",
    openapi_tags=[
        {"name": "auth", "description": "Inscription, connexion et utilisateur courant"},
        {"name": "users", "description": "Gestion des utilisateurs (propriétaire ou admin)"},
        {"name": "restaurants", "description": "Gestion des restaurants (propriétaire ou admin)"},
    ],
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

# Routers
app.include_router(authentication.router, prefix=settings.API_PREFIX)
app.include_router(users.router, prefix=settings.API_PREFIX)
app.include_router(restaurants.router, prefix=settings.API_PREFIX)
app.include_router(restaurants.user_restaurants_router, prefix=settings.API_PREFIX)

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)


@app.get("/", include_in_schema=False)
def root():
    return {"message": f"{settings.APP_NAME} - Welcome to the API Server", "docs": "/docs"}


@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy"}


# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()
    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        with Session(engine) as session:
            seed_admin(
                session,
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
                name=settings.ADMIN_NAME,
            )
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)

if __name__ == "__main__":
    uvicorn.run("restaurant_api.main:app", host="0.0.0.0", port=8000, reload=(settings.ENV == "dev")) # http://localhost:8000
