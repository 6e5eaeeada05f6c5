# app/modules/accounts/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from .service import AccountsService
from .schemas import AccountResponse, PocketResponse

router = APIRouter()

@router.get("/health")
def accounts_health():
    """Health check del módulo de cuentas"""
    return {
        "service": "accounts",
        "status": "healthy",
        "version": "1.0.0"
    }

@router.get("/pockets/{pocket_id}", response_model=PocketResponse)
def get_pocket(pocket_id: int, db: Session = Depends(get_db)):
    """Consultar saldo de un bolsillo y la cuenta a la que pertenece"""
    service = AccountsService(db)
    return service.get_pocket(pocket_id)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: int, db: Session = Depends(get_db)):
    """
    Consultar una cuenta

    **Incluye:**
    - Estado (ACTIVE / BLOCKED)
    - Saldo disponible
    - Bolsillos con su saldo
    """
    service = AccountsService(db)
    return service.get_account(account_id)
