# app/api/v1/router.py
from fastapi import APIRouter
from app.modules.accounts.router import router as accounts_router
from app.modules.transactions.router import router as transactions_router

# Crear router principal de la API v1
api_router = APIRouter()

api_router.include_router(
    accounts_router,
    prefix="/accounts",
    tags=["Accounts"]
)

api_router.include_router(
    transactions_router,
    prefix="/transactions",
    tags=["Transactions"]
)

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": "Pockets API v1",
        "status": "active",
        "docs": "/docs",
        "available_endpoints": {
            "accounts": "/api/v1/accounts",
            "transactions": "/api/v1/transactions"
        }
    }

@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "Pockets API",
        "modules": {
            "accounts": {
                "status": "active",
                "features": ["Consulta de cuentas", "Consulta de bolsillos"]
            },
            "transactions": {
                "status": "active",
                "features": ["Cuenta a bolsillo", "Cuenta a cuenta"]
            }
        }
    }
