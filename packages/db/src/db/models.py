# This project was developed with assistance from AI tools.
"""
Licitações back-office -- domain models

Public-sector bids, the contracts they produce, compliance documents
(documentos, certidões), receivables and per-user notification
acknowledgments.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
    text,
)
from sqlalchemy.orm import relationship

from .database import Base

_UUID_DEFAULT = text("gen_random_uuid()")


class Orgao(Base):
    """Contracting public body."""

    __tablename__ = "orgaos"

    id = Column(Uuid(as_uuid=False), primary_key=True, server_default=_UUID_DEFAULT)
    razao_social = Column(String(255), nullable=False)
    cnpj = Column(String(18), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    licitacoes = relationship("Licitacao", back_populates="orgao")

    def __repr__(self):
        return f"<Orgao(id={self.id}, razao_social='{self.razao_social}')>"


class Unidade(Base):
    """Company branch that owns documents and certidões."""

    __tablename__ = "unidades"

    id = Column(Uuid(as_uuid=False), primary_key=True, server_default=_UUID_DEFAULT)
    codigo = Column(String(50), nullable=False)
    razao_social = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<Unidade(id={self.id}, codigo='{self.codigo}')>"


class Licitacao(Base):
    """A bid the company participates in (or evaluates)."""

    __tablename__ = "licitacoes"

    id = Column(Uuid(as_uuid=False), primary_key=True, server_default=_UUID_DEFAULT)
    identificacao = Column(String(255), nullable=False)
    objeto = Column(Text, nullable=True)
    status = Column(String(100), nullable=True, index=True)
    motivo_status = Column(Text, nullable=True)
    data_limite_participacao = Column(Date, nullable=True, index=True)
    data_resultado = Column(Date, nullable=True)
    valor_estimado = Column(Numeric(14, 2), nullable=True)
    valor_final = Column(Numeric(14, 2), nullable=True)
    orgao_id = Column(
        Uuid(as_uuid=False), ForeignKey("orgaos.id", ondelete="SET NULL"), nullable=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    orgao = relationship("Orgao", back_populates="licitacoes")
    contratos = relationship("Contrato", back_populates="licitacao")
    recebimentos = relationship("Recebimento", back_populates="licitacao")

    def __repr__(self):
        return f"<Licitacao(id={self.id}, status='{self.status}')>"


class Certidao(Base):
    """Tax/compliance certificate with a validity window."""

    __tablename__ = "certidoes"

    id = Column(Uuid(as_uuid=False), primary_key=True, server_default=_UUID_DEFAULT)
    nome_certidao = Column(String(255), nullable=False)
    responsavel_nome = Column(String(255), nullable=True)
    data_emissao = Column(Date, nullable=True)
    validade_dias = Column(Integer, nullable=True)
    vencimento = Column(Date, nullable=True, index=True)
    unidade_id = Column(
        Uuid(as_uuid=False), ForeignKey("unidades.id", ondelete="SET NULL"), nullable=True,
    )

    unidade = relationship("Unidade")

    def __repr__(self):
        return f"<Certidao(id={self.id}, vencimento={self.vencimento})>"


class Documento(Base):
    """Company document; may be flagged as never expiring."""

    __tablename__ = "documentos"

    id = Column(Uuid(as_uuid=False), primary_key=True, server_default=_UUID_DEFAULT)
    nome = Column(String(255), nullable=False)
    tipo = Column(String(100), nullable=True)
    data_emissao = Column(Date, nullable=True)
    vencimento = Column(Date, nullable=True, index=True)
    sem_validade = Column(Boolean, nullable=False, default=False, server_default="false")
    unidade_id = Column(
        Uuid(as_uuid=False), ForeignKey("unidades.id", ondelete="SET NULL"), nullable=True,
    )

    unidade = relationship("Unidade")

    def __repr__(self):
        return f"<Documento(id={self.id}, nome='{self.nome}')>"


class Contrato(Base):
    """Contract resulting from a won bid."""

    __tablename__ = "contratos"

    id = Column(Uuid(as_uuid=False), primary_key=True, server_default=_UUID_DEFAULT)
    numero_contrato = Column(String(100), nullable=False)
    objeto = Column(Text, nullable=True)
    valor = Column(Numeric(14, 2), nullable=True)
    status = Column(String(100), nullable=True)
    data_assinatura = Column(Date, nullable=True)
    vigencia_inicio = Column(Date, nullable=True)
    vigencia_fim = Column(Date, nullable=True, index=True)
    licitacao_id = Column(
        Uuid(as_uuid=False), ForeignKey("licitacoes.id", ondelete="SET NULL"), nullable=True,
    )

    licitacao = relationship("Licitacao", back_populates="contratos")

    def __repr__(self):
        return f"<Contrato(id={self.id}, numero='{self.numero_contrato}')>"


class Recebimento(Base):
    """Receivable linked to a bid."""

    __tablename__ = "recebimentos"

    id = Column(Uuid(as_uuid=False), primary_key=True, server_default=_UUID_DEFAULT)
    data_pagamento = Column(Date, nullable=True, index=True)
    valor_recebido = Column(Numeric(14, 2), nullable=False, default=0)
    nota_fiscal = Column(String(100), nullable=True)
    licitacao_id = Column(
        Uuid(as_uuid=False), ForeignKey("licitacoes.id", ondelete="CASCADE"), nullable=True,
    )

    licitacao = relationship("Licitacao", back_populates="recebimentos")

    def __repr__(self):
        return f"<Recebimento(id={self.id}, valor={self.valor_recebido})>"


class NotificacaoLida(Base):
    """Acknowledgment of a bid-deadline notification by one user.

    Insert-only: the unique constraint makes concurrent duplicate inserts
    collapse into a single row.
    """

    __tablename__ = "notificacoes_lidas"
    __table_args__ = (
        UniqueConstraint("usuario_id", "licitacao_id", name="uq_notificacao_usuario_licitacao"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    usuario_id = Column(String(255), nullable=False, index=True)
    licitacao_id = Column(
        Uuid(as_uuid=False), ForeignKey("licitacoes.id", ondelete="CASCADE"), nullable=False,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<NotificacaoLida(usuario={self.usuario_id}, licitacao={self.licitacao_id})>"
