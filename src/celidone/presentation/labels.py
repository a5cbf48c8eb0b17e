"""Display labels for rental enumerations."""

from typing import Union

from celidone.domain.entities.documents import TipoPessoa
from celidone.domain.entities.rental import FormaPagamento, RentalStatus, TipoCobranca

STATUS_LABELS: dict[RentalStatus, str] = {
    RentalStatus.ATIVO: "Ativo",
    RentalStatus.DEVOLVIDO: "Devolvido",
    RentalStatus.ATRASADO: "Atrasado",
    RentalStatus.CANCELADO: "Cancelado",
}

TIPO_COBRANCA_LABELS: dict[TipoCobranca, str] = {
    TipoCobranca.DIARIA: "Diária",
    TipoCobranca.SEMANAL: "Semanal",
    TipoCobranca.MENSAL: "Mensal",
    TipoCobranca.EVENTO: "Evento",
}

FORMA_PAGAMENTO_LABELS: dict[FormaPagamento, str] = {
    FormaPagamento.DINHEIRO: "Dinheiro",
    FormaPagamento.CARTAO_CREDITO: "Cartão de Crédito",
    FormaPagamento.CARTAO_DEBITO: "Cartão de Débito",
    FormaPagamento.PIX: "PIX",
    FormaPagamento.TRANSFERENCIA: "Transferência",
    FormaPagamento.CHEQUE: "Cheque",
}

TIPO_PESSOA_LABELS: dict[TipoPessoa, str] = {
    TipoPessoa.PESSOA_FISICA: "Pessoa Física",
    TipoPessoa.PESSOA_JURIDICA: "Pessoa Jurídica",
}


def _label(labels: dict, value: Union[str, None]) -> str:
    if value is None:
        return ""
    for member, label in labels.items():
        if value == member or value == member.value:
            return label
    return str(value)


def status_label(status: Union[RentalStatus, str, None]) -> str:
    """Label for a rental status; unknown values are shown as-is."""
    return _label(STATUS_LABELS, status)


def tipo_cobranca_label(tipo: Union[TipoCobranca, str, None]) -> str:
    return _label(TIPO_COBRANCA_LABELS, tipo)


def forma_pagamento_label(forma: Union[FormaPagamento, str, None]) -> str:
    return _label(FORMA_PAGAMENTO_LABELS, forma)


def tipo_pessoa_label(tipo: Union[TipoPessoa, str, None]) -> str:
    return _label(TIPO_PESSOA_LABELS, tipo)
