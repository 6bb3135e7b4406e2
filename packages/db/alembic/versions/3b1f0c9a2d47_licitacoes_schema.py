# This project was developed with assistance from AI tools.
"""licitacoes back-office schema

Revision ID: 3b1f0c9a2d47
Revises:
Create Date: 2026-10-05 10:12:44.218301

"""

import sqlalchemy as sa
from alembic import op

revision = "3b1f0c9a2d47"
down_revision = None
branch_labels = None
depends_on = None

_UUID_DEFAULT = sa.text("gen_random_uuid()")


def _uuid_pk() -> sa.Column:
    return sa.Column("id", sa.Uuid(), server_default=_UUID_DEFAULT, nullable=False)


def upgrade() -> None:
    op.create_table(
        "orgaos",
        _uuid_pk(),
        sa.Column("razao_social", sa.String(255), nullable=False),
        sa.Column("cnpj", sa.String(18), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "unidades",
        _uuid_pk(),
        sa.Column("codigo", sa.String(50), nullable=False),
        sa.Column("razao_social", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "licitacoes",
        _uuid_pk(),
        sa.Column("identificacao", sa.String(255), nullable=False),
        sa.Column("objeto", sa.Text(), nullable=True),
        sa.Column("status", sa.String(100), nullable=True),
        sa.Column("motivo_status", sa.Text(), nullable=True),
        sa.Column("data_limite_participacao", sa.Date(), nullable=True),
        sa.Column("data_resultado", sa.Date(), nullable=True),
        sa.Column("valor_estimado", sa.Numeric(14, 2), nullable=True),
        sa.Column("valor_final", sa.Numeric(14, 2), nullable=True),
        sa.Column("orgao_id", sa.Uuid(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.ForeignKeyConstraint(["orgao_id"], ["orgaos.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_licitacoes_status", "licitacoes", ["status"])
    op.create_index(
        "ix_licitacoes_data_limite_participacao", "licitacoes", ["data_limite_participacao"]
    )

    op.create_table(
        "certidoes",
        _uuid_pk(),
        sa.Column("nome_certidao", sa.String(255), nullable=False),
        sa.Column("responsavel_nome", sa.String(255), nullable=True),
        sa.Column("data_emissao", sa.Date(), nullable=True),
        sa.Column("validade_dias", sa.Integer(), nullable=True),
        sa.Column("vencimento", sa.Date(), nullable=True),
        sa.Column("unidade_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["unidade_id"], ["unidades.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_certidoes_vencimento", "certidoes", ["vencimento"])

    op.create_table(
        "documentos",
        _uuid_pk(),
        sa.Column("nome", sa.String(255), nullable=False),
        sa.Column("tipo", sa.String(100), nullable=True),
        sa.Column("data_emissao", sa.Date(), nullable=True),
        sa.Column("vencimento", sa.Date(), nullable=True),
        sa.Column("sem_validade", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("unidade_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["unidade_id"], ["unidades.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_documentos_vencimento", "documentos", ["vencimento"])

    op.create_table(
        "contratos",
        _uuid_pk(),
        sa.Column("numero_contrato", sa.String(100), nullable=False),
        sa.Column("objeto", sa.Text(), nullable=True),
        sa.Column("valor", sa.Numeric(14, 2), nullable=True),
        sa.Column("status", sa.String(100), nullable=True),
        sa.Column("data_assinatura", sa.Date(), nullable=True),
        sa.Column("vigencia_inicio", sa.Date(), nullable=True),
        sa.Column("vigencia_fim", sa.Date(), nullable=True),
        sa.Column("licitacao_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["licitacao_id"], ["licitacoes.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contratos_vigencia_fim", "contratos", ["vigencia_fim"])

    op.create_table(
        "recebimentos",
        _uuid_pk(),
        sa.Column("data_pagamento", sa.Date(), nullable=True),
        sa.Column("valor_recebido", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("nota_fiscal", sa.String(100), nullable=True),
        sa.Column("licitacao_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["licitacao_id"], ["licitacoes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_recebimentos_data_pagamento", "recebimentos", ["data_pagamento"])

    op.create_table(
        "notificacoes_lidas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("usuario_id", sa.String(255), nullable=False),
        sa.Column("licitacao_id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.ForeignKeyConstraint(["licitacao_id"], ["licitacoes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "usuario_id", "licitacao_id", name="uq_notificacao_usuario_licitacao"
        ),
    )
    op.create_index("ix_notificacoes_lidas_usuario_id", "notificacoes_lidas", ["usuario_id"])


def downgrade() -> None:
    op.drop_index("ix_notificacoes_lidas_usuario_id", table_name="notificacoes_lidas")
    op.drop_table("notificacoes_lidas")
    op.drop_index("ix_recebimentos_data_pagamento", table_name="recebimentos")
    op.drop_table("recebimentos")
    op.drop_index("ix_contratos_vigencia_fim", table_name="contratos")
    op.drop_table("contratos")
    op.drop_index("ix_documentos_vencimento", table_name="documentos")
    op.drop_table("documentos")
    op.drop_index("ix_certidoes_vencimento", table_name="certidoes")
    op.drop_table("certidoes")
    op.drop_index("ix_licitacoes_data_limite_participacao", table_name="licitacoes")
    op.drop_index("ix_licitacoes_status", table_name="licitacoes")
    op.drop_table("licitacoes")
    op.drop_table("unidades")
    op.drop_table("orgaos")
