# app/core/exceptions.py
"""
Errores de dominio de la aplicación.

Los servicios lanzan estas excepciones y la capa HTTP las traduce a
respuestas (ver ``app.core.middleware``). Ninguna de ellas se recupera
localmente: abortan la operación completa.
"""

from typing import Optional


class DomainError(Exception):
    """Error base del dominio con un código estable para los clientes"""

    error_code = "domain_error"

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code


class NotFound(DomainError):
    """El identificador no corresponde a ninguna cuenta o bolsillo"""

    error_code = "not_found"


class BusinessRuleViolation(DomainError):
    """Se incumple una regla de negocio (cuenta bloqueada, saldo, monto...)"""

    error_code = "business_rule_violation"
