"""User facing validation messages (pt-BR).

Field validators and the rental rule engine draw from the same table so a
UI can render any error list the same way.
"""

REQUIRED = "Este campo é obrigatório"
INVALID_EMAIL = "Email inválido"
INVALID_CPF = "CPF inválido"
INVALID_CNPJ = "CNPJ inválido"
INVALID_DOCUMENT = "CPF deve ter 11 dígitos ou CNPJ deve ter 14 dígitos"
INVALID_CEP = "CEP inválido"
INVALID_PHONE = "Telefone inválido"
INVALID_NAME = "Nome deve conter apenas letras"
MIN_LENGTH = "Deve ter pelo menos {min} caracteres"
MAX_LENGTH = "Deve ter no máximo {max} caracteres"

# Rental: required fields
RENTAL_REQUIRED = "Dados do aluguel são obrigatórios"
RENTAL_FIELD_REQUIRED = {
    "cliente_id": "Cliente é obrigatório",
    "produto_id": "Produto é obrigatório",
    "data_aluguel": "Data do aluguel é obrigatória",
    "data_dev_prevista": "Data prevista para devolução é obrigatória",
    "valor_aluguel": "Valor do aluguel é obrigatório",
    "valor_caucao": "Valor da caução é obrigatório",
    "tipo_cobranca": "Tipo de cobrança é obrigatório",
    "forma_pagamento": "Forma de pagamento é obrigatória",
    "periodo": "Período é obrigatório",
}

# Rental: format
RENTAL_FIELD_INVALID = {
    "cliente_id": "Cliente inválido",
    "produto_id": "Produto inválido",
    "data_aluguel": "Data do aluguel deve ser uma data válida",
    "data_dev_prevista": "Data prevista para devolução deve ser uma data válida",
    "data_dev_efetiva": "Data efetiva de devolução deve ser uma data válida",
    "valor_aluguel": "Valor do aluguel inválido",
    "valor_caucao": "Valor da caução inválido",
    "valor_desconto": "Valor do desconto inválido",
    "periodo": "Período inválido",
    "tipo_cobranca": "Tipo de cobrança inválido",
    "forma_pagamento": "Forma de pagamento inválida",
}

# Rental: business rules
VALOR_ALUGUEL_POSITIVE = "Valor do aluguel deve ser maior que zero"
VALOR_ALUGUEL_MAX = "Valor do aluguel deve ser no máximo {max}"
VALOR_CAUCAO_NON_NEGATIVE = "Valor da caução não pode ser negativo"
VALOR_CAUCAO_MAX = "Valor da caução deve ser no máximo {max}"
PERIODO_POSITIVE = "Período deve ser maior que zero"
DATA_DEV_PREVISTA_ORDER = "Data prevista para devolução deve ser posterior à data do aluguel"
DATA_DEV_EFETIVA_ORDER = "Data efetiva de devolução não pode ser anterior à data do aluguel"
PRODUTO_INDISPONIVEL = "Produto não está disponível para aluguel"

# Rental: transitions
TERMINAL_STATE = "Aluguel em estado terminal ({status}) não pode ser alterado"

# Customer / product records
CLIENTE_REQUIRED = "Dados do cliente são obrigatórios"
PRODUTO_REQUIRED = "Dados do produto são obrigatórios"
PRODUTO_CODIGO_REQUIRED = "Código do produto é obrigatório"
PRODUTO_CODIGO_INVALID = "Código deve seguir o padrão PRD-0000"
PRODUTO_FIELD_REQUIRED = {
    "tecido": "Tecido é obrigatório",
    "cor": "Cor é obrigatória",
    "estampa": "Estampa é obrigatória",
    "tipoTraje": "Tipo de traje é obrigatório",
    "textura": "Textura é obrigatória",
    "tamanho": "Tamanho é obrigatório",
    "status": "Status é obrigatório",
    "sexo": "Sexo é obrigatório",
}
PRODUTO_PRECO_POSITIVE = "Preço deve ser maior que zero"
PRODUTO_TAMANHO_INVALID = "Tamanho inválido"
PRODUTO_STATUS_INVALID = "Status inválido"
PRODUTO_SEXO_INVALID = "Sexo inválido"


def min_length(minimum: int) -> str:
    return MIN_LENGTH.format(min=minimum)


def max_length(maximum: int) -> str:
    return MAX_LENGTH.format(max=maximum)
