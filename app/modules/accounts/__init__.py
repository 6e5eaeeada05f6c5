# app/modules/accounts/__init__.py
"""
Módulo de Cuentas - Cuentas y Bolsillos

Este módulo expone el acceso a cuentas y bolsillos:
- Repositorios que traducen entidades SQLAlchemy a registros planos
- Consulta de cuenta con sus bolsillos
- Consulta de bolsillo

Arquitectura:
- router.py: Endpoints de consulta
- service.py: Lógica de consulta
- repository.py: Acceso a datos (AccountRepository, PocketRepository)
- schemas.py: Registros y modelos de response
"""

from .router import router
from .service import AccountsService
from .repository import AccountRepository, PocketRepository

__all__ = [
    "router",
    "AccountsService",
    "AccountRepository",
    "PocketRepository"
]
