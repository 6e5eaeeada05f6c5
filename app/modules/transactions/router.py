# app/modules/transactions/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from .service import TransactionService
from .schemas import TransferAmountRequest, TransferResponse

router = APIRouter()

@router.post(
    "/accounts/{account_id}/pockets/{pocket_id}",
    response_model=TransferResponse
)
def transfer_to_pocket(
    account_id: int,
    pocket_id: int,
    transfer_data: TransferAmountRequest,
    db: Session = Depends(get_db)
):
    """
    Transferir fondos de una cuenta a uno de sus bolsillos

    **Validaciones (en orden):**
    - La cuenta existe y está activa
    - El bolsillo existe y pertenece a la cuenta
    - Monto mayor a cero
    - Saldo suficiente en la cuenta
    """
    service = TransactionService(db)
    return service.transfer_to_pocket(account_id, pocket_id, transfer_data.amount)

@router.post(
    "/accounts/{origin_id}/accounts/{destination_id}",
    response_model=TransferResponse
)
def transfer_to_account(
    origin_id: int,
    destination_id: int,
    transfer_data: TransferAmountRequest,
    db: Session = Depends(get_db)
):
    """
    Transferir fondos entre dos cuentas

    **Validaciones (en orden):**
    - Monto mayor a cero
    - Cuentas distintas
    - Ambas cuentas existen
    - Ambas cuentas están activas
    - Saldo suficiente en la cuenta de origen
    """
    service = TransactionService(db)
    return service.transfer_to_account(origin_id, destination_id, transfer_data.amount)

@router.get("/health")
def transactions_health():
    """Health check del módulo de transacciones"""
    return {
        "service": "transactions",
        "status": "healthy",
        "version": "1.0.0",
        "features": [
            "Transferencia de cuenta a bolsillo",
            "Transferencia entre cuentas",
            "Bloqueo de filas por transacción"
        ]
    }
