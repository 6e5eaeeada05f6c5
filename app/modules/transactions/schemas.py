# app/modules/transactions/schemas.py
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from enum import Enum
from app.shared.schemas.common import BaseResponse

class TransferType(str, Enum):
    ACCOUNT_TO_POCKET = "account_to_pocket"
    ACCOUNT_TO_ACCOUNT = "account_to_account"

class TransferAmountRequest(BaseModel):
    # Sin restricción gt=0: el servicio decide y responde con regla de negocio
    amount: Optional[Decimal] = Field(None, description="Monto a transferir")

class TransferResponse(BaseResponse):
    transfer_type: TransferType
    source_id: int
    destination_id: int
    amount: Decimal
    source_balance: Decimal
    destination_balance: Decimal
