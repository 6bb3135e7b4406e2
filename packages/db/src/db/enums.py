# This project was developed with assistance from AI tools.
"""
Domain enums for the bid back-office.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (api package).
"""

import enum


class SubjectKind(str, enum.Enum):
    """Entity families that carry an expiration or deadline date."""

    DOCUMENTO = "documento"
    CERTIDAO = "certidao"
    CONTRATO = "contrato"
    LICITACAO = "licitacao"
    RECEBIMENTO = "recebimento"


class UrgencyState(str, enum.Enum):
    """Discrete urgency of a dated subject, declared most severe first."""

    EXPIRED = "expired"
    CRITICAL = "critical"
    VALID = "valid"
    INDETERMINATE = "indeterminate"

    @property
    def severity(self) -> int:
        """Numeric rank, 0 being the most severe."""
        return list(UrgencyState).index(self)


class UrgencyBand(str, enum.Enum):
    RED = "red"
    AMBER = "amber"
    NONE = "none"


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USUARIO = "usuario"


class AcknowledgeResult(str, enum.Enum):
    ACKNOWLEDGED = "acknowledged"
    ALREADY_ACKNOWLEDGED = "already_acknowledged"
    NOT_FOUND = "not_found"
    FAILED = "failed"

    @property
    def is_success(self) -> bool:
        return self in (AcknowledgeResult.ACKNOWLEDGED, AcknowledgeResult.ALREADY_ACKNOWLEDGED)
