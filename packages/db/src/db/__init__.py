# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db, get_db_service
from .enums import (
    AcknowledgeResult,
    SubjectKind,
    UrgencyBand,
    UrgencyState,
    UserRole,
)
from .models import (
    Certidao,
    Contrato,
    Documento,
    Licitacao,
    NotificacaoLida,
    Orgao,
    Recebimento,
    Unidade,
)

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Enums
    "AcknowledgeResult",
    "SubjectKind",
    "UrgencyBand",
    "UrgencyState",
    "UserRole",
    # Models
    "Certidao",
    "Contrato",
    "Documento",
    "Licitacao",
    "NotificacaoLida",
    "Orgao",
    "Recebimento",
    "Unidade",
]
