# app/config/database.py
from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from .settings import settings

logger = logging.getLogger(__name__)

# Create engine
engine = create_engine(
    settings.database_url,
    **settings.database_engine_kwargs
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def transaction_scope(db: Session) -> Iterator[Session]:
    """
    Unidad de trabajo explícita sobre la sesión recibida.

    Todo lo leído y escrito dentro del bloque se confirma junto al salir
    sin errores; cualquier excepción (incluidas las de validación) revierte
    la transacción completa y se vuelve a lanzar al llamador.
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rollback de la transacción en curso")
        db.rollback()
        raise
