# app/modules/accounts/schemas.py
from pydantic import BaseModel, Field
from typing import List
from decimal import Decimal
from enum import Enum
from app.shared.schemas.common import BaseResponse

class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"

class Account(BaseModel):
    """Registro plano de una cuenta, independiente del ORM"""
    id: int
    status: AccountStatus
    balance: Decimal = Field(..., ge=0)

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

class Pocket(BaseModel):
    """Registro plano de un bolsillo y la cuenta a la que pertenece"""
    id: int
    account_id: int
    balance: Decimal

class PocketInfo(BaseModel):
    pocket_id: int
    name: str = ""
    balance: Decimal

class AccountResponse(BaseResponse):
    account_id: int
    account_number: str = ""
    owner_name: str = ""
    status: AccountStatus
    balance: Decimal
    pockets: List[PocketInfo] = []

class PocketResponse(BaseResponse):
    pocket_id: int
    account_id: int
    name: str = ""
    balance: Decimal
