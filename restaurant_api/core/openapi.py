"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI :

description détaillée (conventions d'erreurs, auth bearer),

schéma de sécurité BearerAuth (JWT).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion des utilisateurs et de leurs restaurants.\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Authentification : header `Authorization: Bearer <token>` (obtenu via `/auth/login`).\n"
            "- Un utilisateur n'agit que sur ses propres ressources, sauf rôle `admin`.\n"
            "- Erreurs : `{\"error\": <kind>, \"message\": ..., \"detail\": ...}`.\n"
            "- Pagination: query params `page` & `size`.\n"
        ),
        routes=app.routes,
    )
    components = openapi_schema.setdefault("components", {})
    components.setdefault("securitySchemes", {})["BearerAuth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
        "description": "Type \"Bearer\" followed by a space and JWT token.",
    }
    app.openapi_schema = openapi_schema
    return app.openapi_schema
