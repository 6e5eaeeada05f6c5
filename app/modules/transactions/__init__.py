# app/modules/transactions/__init__.py
"""
Módulo de Transacciones - Transferencias de Fondos

Este módulo maneja el movimiento de saldos:
- Transferencia de una cuenta a uno de sus bolsillos
- Transferencia entre cuentas activas
- Validación completa antes de modificar saldos
- Una transacción de base de datos por operación

Arquitectura:
- router.py: Endpoints de transferencias
- service.py: Orquestación y reglas de negocio
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import TransactionService

__all__ = [
    "router",
    "TransactionService"
]
