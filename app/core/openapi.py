"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée (conventions d'auth, format d'erreur),

centraliser la personnalisation du Swagger.

🔹 Avantages :

La doc est toujours complète et cohérente.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de tâches multi-utilisateurs (stockage en mémoire).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Auth : header `Authorization: Bearer <token>` obtenu via `/auth/login` ou `/auth/register`.\n"
            "- Erreurs : corps `{\"error\": \"<message>\"}`.\n"
            "- Un todo d'un autre utilisateur répond 404, comme un todo inexistant.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
