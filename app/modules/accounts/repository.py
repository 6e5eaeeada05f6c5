# app/modules/accounts/repository.py
from sqlalchemy.orm import Query, Session
from typing import List, Optional
import logging

from app.core.exceptions import NotFound
from app.shared.database.models import AccountEntity, PocketEntity
from .schemas import Account, AccountStatus, Pocket

logger = logging.getLogger(__name__)

class AccountRepository:
    """Acceso a cuentas: traduce entre AccountEntity y el registro Account"""

    def __init__(self, db: Session):
        self.db = db

    def locked_query(self, account_id: int) -> Query:
        """SELECT ... FOR UPDATE de la cuenta; el bloqueo dura hasta el commit"""
        return self.db.query(AccountEntity).filter(
            AccountEntity.id == account_id
        ).with_for_update().populate_existing()

    def find_by_id(self, account_id: int) -> Optional[Account]:
        """Obtener cuenta bloqueando la fila hasta el fin de la transacción"""
        entity = self.locked_query(account_id).first()

        if entity is None:
            return None
        return self._to_record(entity)

    def save(self, account: Account) -> Account:
        """Escribir saldo y estado de la cuenta (sin confirmar la transacción)"""
        entity = self.db.get(AccountEntity, account.id)
        if entity is None:
            raise NotFound(f"La cuenta {account.id} no existe", "account_not_found")

        entity.balance = account.balance
        entity.status = account.status.value
        self.db.flush()
        return self._to_record(entity)

    def get_entity(self, account_id: int) -> Optional[AccountEntity]:
        """Obtener la entidad completa para consultas de solo lectura"""
        return self.db.query(AccountEntity).filter(
            AccountEntity.id == account_id
        ).first()

    @staticmethod
    def _to_record(entity: AccountEntity) -> Account:
        return Account(
            id=entity.id,
            status=AccountStatus(entity.status),
            balance=entity.balance
        )


class PocketRepository:
    """Acceso a bolsillos: traduce entre PocketEntity y el registro Pocket"""

    def __init__(self, db: Session):
        self.db = db

    def locked_query(self, pocket_id: int) -> Query:
        return self.db.query(PocketEntity).filter(
            PocketEntity.id == pocket_id
        ).with_for_update().populate_existing()

    def find_by_id(self, pocket_id: int) -> Optional[Pocket]:
        """Obtener bolsillo bloqueando la fila hasta el fin de la transacción"""
        entity = self.locked_query(pocket_id).first()

        if entity is None:
            return None
        return self._to_record(entity)

    def save(self, pocket: Pocket) -> Pocket:
        """Escribir el saldo del bolsillo; la cuenta dueña nunca cambia"""
        entity = self.db.get(PocketEntity, pocket.id)
        if entity is None:
            raise NotFound(f"El bolsillo {pocket.id} no existe", "pocket_not_found")

        entity.balance = pocket.balance
        self.db.flush()
        return self._to_record(entity)

    def get_entity(self, pocket_id: int) -> Optional[PocketEntity]:
        return self.db.query(PocketEntity).filter(
            PocketEntity.id == pocket_id
        ).first()

    def find_by_account(self, account_id: int) -> List[PocketEntity]:
        """Bolsillos de una cuenta ordenados por id"""
        return self.db.query(PocketEntity).filter(
            PocketEntity.account_id == account_id
        ).order_by(PocketEntity.id).all()

    @staticmethod
    def _to_record(entity: PocketEntity) -> Pocket:
        return Pocket(
            id=entity.id,
            account_id=entity.account_id,
            balance=entity.balance
        )
