# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Numeric, ForeignKey,
    CheckConstraint, func
)
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()

# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# CUENTAS Y BOLSILLOS
# =====================================================

class AccountEntity(Base, TimestampMixin):
    """Cuenta principal: titular de los fondos"""
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    account_number = Column(String(30), unique=True)
    owner_name = Column(String(255))
    status = Column(String(20), nullable=False, default='ACTIVE')
    balance = Column(Numeric(15, 2), nullable=False, default=0)

    # Relationships
    pockets = relationship("PocketEntity", back_populates="account")

    __table_args__ = (
        CheckConstraint("status IN ('ACTIVE', 'BLOCKED')", name='ck_accounts_status'),
        CheckConstraint("balance >= 0", name='ck_accounts_balance_non_negative'),
    )

    def __repr__(self):
        return f"<AccountEntity(id={self.id}, status='{self.status}', balance={self.balance})>"


class PocketEntity(Base, TimestampMixin):
    """Bolsillo: sub-saldo que pertenece a una única cuenta"""
    __tablename__ = "pockets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100))
    balance = Column(Numeric(15, 2), nullable=False, default=0)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)

    # Relationships
    account = relationship("AccountEntity", back_populates="pockets")

    def __repr__(self):
        return f"<PocketEntity(id={self.id}, account_id={self.account_id}, balance={self.balance})>"
