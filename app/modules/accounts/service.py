# app/modules/accounts/service.py
from sqlalchemy.orm import Session
import logging

from app.core.exceptions import NotFound
from .repository import AccountRepository, PocketRepository
from .schemas import AccountResponse, AccountStatus, PocketInfo, PocketResponse

logger = logging.getLogger(__name__)

class AccountsService:
    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountRepository(db)
        self.pockets = PocketRepository(db)

    def get_account(self, account_id: int) -> AccountResponse:
        """Consultar cuenta con sus bolsillos"""
        account = self.accounts.get_entity(account_id)
        if account is None:
            logger.warning(f"❌ Cuenta {account_id} no encontrada")
            raise NotFound(f"La cuenta {account_id} no existe", "account_not_found")

        pockets = self.pockets.find_by_account(account_id)

        return AccountResponse(
            success=True,
            message="Cuenta encontrada",
            account_id=account.id,
            account_number=account.account_number or "",
            owner_name=account.owner_name or "",
            status=AccountStatus(account.status),
            balance=account.balance,
            pockets=[
                PocketInfo(pocket_id=p.id, name=p.name or "", balance=p.balance)
                for p in pockets
            ]
        )

    def get_pocket(self, pocket_id: int) -> PocketResponse:
        """Consultar bolsillo"""
        pocket = self.pockets.get_entity(pocket_id)
        if pocket is None:
            logger.warning(f"❌ Bolsillo {pocket_id} no encontrado")
            raise NotFound(f"El bolsillo {pocket_id} no existe", "pocket_not_found")

        return PocketResponse(
            success=True,
            message="Bolsillo encontrado",
            pocket_id=pocket.id,
            account_id=pocket.account_id,
            name=pocket.name or "",
            balance=pocket.balance
        )
