"""
Django Ninja API configuration.
"""

from django.http import HttpRequest
from ninja import NinjaAPI

from apps.sync.api import router as sync_router

api = NinjaAPI(
    title="Practice Sync API",
    version="1.0.0",
    description="Offline-first push reconciliation for veterinary practice records.",
    openapi_extra={
        "info": {
            "contact": {"name": "API Support"},
        },
        "tags": [
            {
                "name": "sync",
                "description": "Push batches of offline operations",
            },
            {
                "name": "health",
                "description": "Service health and readiness checks",
            },
        ],
        "components": {
            "securitySchemes": {
                "bearerAuth": {
                    "type": "http",
                    "scheme": "bearer",
                    "bearerFormat": "JWT",
                    "description": (
                        "Session token issued by the identity provider. "
                        "Include as: Authorization: Bearer <token>"
                    ),
                }
            }
        },
    },
)

# Register routers
api.add_router("/sync", sync_router)


@api.get("/health", tags=["health"], operation_id="healthCheck", summary="Health check")
def health_check(request: HttpRequest) -> dict:
    """Health check endpoint for load balancer."""
    return {"status": "ok"}
