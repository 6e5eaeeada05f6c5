# app/modules/transactions/service.py
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from sqlalchemy.orm import Session
import logging

from app.config.database import transaction_scope
from app.core.exceptions import BusinessRuleViolation, DomainError, NotFound
from app.modules.accounts.repository import AccountRepository, PocketRepository
from .schemas import TransferResponse, TransferType

logger = logging.getLogger(__name__)

AMOUNT_SCALE = Decimal("0.01")

class TransactionService:
    """
    Transferencias de fondos entre cuentas y hacia bolsillos.

    Cada operación pública corre dentro de una sola transacción: primero se
    validan todas las reglas y sólo después se modifican y guardan los saldos.
    Cualquier error revierte la transacción completa.
    """

    def __init__(
        self,
        db: Session,
        account_repository: Optional[AccountRepository] = None,
        pocket_repository: Optional[PocketRepository] = None
    ):
        self.db = db
        self.accounts = account_repository or AccountRepository(db)
        self.pockets = pocket_repository or PocketRepository(db)

    def transfer_to_pocket(self, account_id: int, pocket_id: int, amount: Any) -> TransferResponse:
        """Mover fondos de una cuenta a uno de sus bolsillos"""

        logger.info(f"💸 Inicia transferencia de cuenta {account_id} a bolsillo {pocket_id}")

        try:
            with transaction_scope(self.db):
                account = self.accounts.find_by_id(account_id)
                if account is None:
                    raise NotFound(f"La cuenta {account_id} no existe", "account_not_found")

                if not account.is_active:
                    raise BusinessRuleViolation(
                        "No se pueden realizar transferencias porque la cuenta está bloqueada",
                        "account_blocked"
                    )

                pocket = self.pockets.find_by_id(pocket_id)
                if pocket is None:
                    raise NotFound(f"El bolsillo {pocket_id} no existe", "pocket_not_found")

                if pocket.account_id != account_id:
                    raise BusinessRuleViolation(
                        "El bolsillo no pertenece a la cuenta indicada",
                        "pocket_not_owned"
                    )

                amount = self._validate_amount(amount)

                if account.balance < amount:
                    raise BusinessRuleViolation(
                        "Saldo insuficiente para realizar la transferencia",
                        "insufficient_funds"
                    )

                account.balance -= amount
                pocket.balance += amount

                account = self.accounts.save(account)
                pocket = self.pockets.save(pocket)

        except DomainError as e:
            logger.warning(f"❌ Transferencia a bolsillo rechazada ({e.error_code}): {e.message}")
            raise

        logger.info(f"✅ Finaliza transferencia de cuenta {account_id} a bolsillo {pocket_id}")

        return TransferResponse(
            success=True,
            message="Transferencia a bolsillo realizada",
            transfer_type=TransferType.ACCOUNT_TO_POCKET,
            source_id=account_id,
            destination_id=pocket_id,
            amount=amount,
            source_balance=account.balance,
            destination_balance=pocket.balance
        )

    def transfer_to_account(self, origin_id: int, destination_id: int, amount: Any) -> TransferResponse:
        """Mover fondos entre dos cuentas distintas"""

        logger.info(f"💸 Inicia transferencia de cuenta {origin_id} a cuenta {destination_id}")

        try:
            with transaction_scope(self.db):
                # 1. Monto mayor a cero
                amount = self._validate_amount(amount)

                # 2. Cuentas distintas
                if origin_id == destination_id:
                    raise BusinessRuleViolation(
                        "La cuenta de origen no puede ser la misma que la cuenta destino",
                        "same_account"
                    )

                # Bloqueo en orden ascendente de id para evitar deadlocks
                # entre transferencias cruzadas A->B y B->A
                loaded = {}
                for locked_id in sorted((origin_id, destination_id)):
                    loaded[locked_id] = self.accounts.find_by_id(locked_id)

                origin = loaded[origin_id]
                destination = loaded[destination_id]

                # 3-4. Existencia
                if origin is None:
                    raise NotFound(
                        f"La cuenta de origen {origin_id} no existe",
                        "origin_account_not_found"
                    )

                if destination is None:
                    raise NotFound(
                        f"La cuenta destino {destination_id} no existe",
                        "destination_account_not_found"
                    )

                # 5-6. Ambas activas
                if not origin.is_active:
                    raise BusinessRuleViolation(
                        "La cuenta de origen está bloqueada",
                        "origin_blocked"
                    )

                if not destination.is_active:
                    raise BusinessRuleViolation(
                        "La cuenta destino está bloqueada",
                        "destination_blocked"
                    )

                # 7. Fondos suficientes
                if origin.balance < amount:
                    raise BusinessRuleViolation(
                        "La cuenta de origen no tiene fondos suficientes",
                        "insufficient_funds"
                    )

                origin.balance -= amount
                destination.balance += amount

                origin = self.accounts.save(origin)
                destination = self.accounts.save(destination)

        except DomainError as e:
            logger.warning(f"❌ Transferencia entre cuentas rechazada ({e.error_code}): {e.message}")
            raise

        logger.info(f"✅ Finaliza transferencia de cuenta {origin_id} a cuenta {destination_id}")

        return TransferResponse(
            success=True,
            message="Transferencia entre cuentas realizada",
            transfer_type=TransferType.ACCOUNT_TO_ACCOUNT,
            source_id=origin_id,
            destination_id=destination_id,
            amount=amount,
            source_balance=origin.balance,
            destination_balance=destination.balance
        )

    @staticmethod
    def _validate_amount(amount: Any) -> Decimal:
        """Normalizar el monto a Decimal y exigir que sea positivo"""
        if amount is None or isinstance(amount, bool):
            raise BusinessRuleViolation("El monto debe ser mayor a cero", "invalid_amount")

        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except (InvalidOperation, ValueError):
            raise BusinessRuleViolation("El monto no es un número válido", "invalid_amount")

        if not value.is_finite() or value <= 0:
            raise BusinessRuleViolation("El monto debe ser mayor a cero", "invalid_amount")

        # Los saldos se guardan con 2 decimales (Numeric(15, 2))
        try:
            quantized = value.quantize(AMOUNT_SCALE)
        except InvalidOperation:
            raise BusinessRuleViolation("El monto excede la precisión permitida", "invalid_amount")

        if value != quantized:
            raise BusinessRuleViolation(
                "El monto no puede tener más de dos decimales",
                "invalid_amount"
            )

        return value
