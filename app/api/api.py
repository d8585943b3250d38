from fastapi import APIRouter

from app.api.endpoints import queries, schemas, sql, users

api_router = APIRouter()

# Routers carry their own prefixes
api_router.include_router(sql.router)
api_router.include_router(queries.router)
api_router.include_router(schemas.router)
api_router.include_router(users.router)
