"""Tests for customer and product form validation."""

import pytest

from celidone.domain.validation.records import (
    ProdutoStatus,
    is_product_available,
    validate_cliente,
    validate_produto,
)
from celidone.domain.validation.results import ErrorCode


@pytest.fixture
def cliente() -> dict:
    return {
        "nome": "Maria Silva",
        "email": "maria@example.com",
        "natureza": "PESSOA_FISICA",
        "cpf": "111.444.777-35",
        "cep": "01310-100",
        "celular": "(11) 98765-4321",
    }


@pytest.fixture
def produto() -> dict:
    return {
        "codigo": "PRD-0001",
        "tecido": "Lã fria",
        "cor": "Preto",
        "estampa": "Lisa",
        "tipoTraje": "terno",
        "textura": "Lisa",
        "tamanho": "M",
        "status": "disponivel",
        "sexo": "masculino",
        "preco": "R$ 500,00",
    }


class TestValidateCliente:
    """Tests for validate_cliente."""

    def test_valid_pessoa_fisica(self, cliente):
        assert validate_cliente(cliente).is_valid is True

    def test_valid_pessoa_juridica(self, cliente):
        cliente.update(natureza="PESSOA_JURIDICA", cpf=None, cnpj="11.222.333/0001-81")

        assert validate_cliente(cliente).is_valid is True

    def test_invalid_cnpj(self, cliente):
        cliente.update(natureza="PESSOA_JURIDICA", cnpj="11.222.333/0001-80")

        result = validate_cliente(cliente)

        assert result.errors == ["CNPJ inválido"]
        assert result.issues[0].field == "cnpj"
        assert result.issues[0].code == ErrorCode.CHECKSUM

    def test_missing_cpf(self, cliente):
        del cliente["cpf"]

        result = validate_cliente(cliente)

        assert result.issues[0].field == "cpf"
        assert result.issues[0].code == ErrorCode.REQUIRED

    def test_missing_name_and_bad_email(self, cliente):
        cliente["nome"] = ""
        cliente["email"] = "maria"

        result = validate_cliente(cliente)

        assert result.errors == ["Este campo é obrigatório", "Email inválido"]
        assert [issue.field for issue in result.issues] == ["nome", "email"]

    def test_optional_fields_skipped_when_empty(self, cliente):
        cliente["cep"] = ""
        cliente["celular"] = None

        assert validate_cliente(cliente).is_valid is True

    def test_optional_fields_checked_when_present(self, cliente):
        cliente["cep"] = "0131"
        cliente["celular"] = "11987654321"

        result = validate_cliente(cliente)

        assert result.errors == ["CEP inválido", "Telefone inválido"]

    def test_none(self):
        assert validate_cliente(None).errors == ["Dados do cliente são obrigatórios"]


class TestValidateProduto:
    """Tests for validate_produto."""

    def test_valid(self, produto):
        assert validate_produto(produto).is_valid is True

    @pytest.mark.parametrize("codigo", ["PRD-1", "prd-0001", "PRD-00001", "ABC-0001"])
    def test_invalid_code(self, produto, codigo):
        produto["codigo"] = codigo

        result = validate_produto(produto)

        assert result.errors == ["Código deve seguir o padrão PRD-0000"]

    def test_missing_fields(self, produto):
        produto["codigo"] = ""
        produto["cor"] = "  "
        del produto["tipoTraje"]

        result = validate_produto(produto)

        assert result.errors == [
            "Código do produto é obrigatório",
            "Cor é obrigatória",
            "Tipo de traje é obrigatório",
        ]

    @pytest.mark.parametrize("preco", ["0", "R$ 0,00", None, "abc", [500], {"valor": 500}])
    def test_price_must_be_positive(self, produto, preco):
        produto["preco"] = preco

        assert validate_produto(produto).errors == ["Preço deve ser maior que zero"]

    @pytest.mark.parametrize("tamanho", ["g", "XXG", "42"])
    def test_valid_sizes(self, produto, tamanho):
        produto["tamanho"] = tamanho

        assert validate_produto(produto).is_valid is True

    def test_closed_sets(self, produto):
        produto["tamanho"] = "XL"
        produto["status"] = "vendido"
        produto["sexo"] = "infantil"

        result = validate_produto(produto)

        assert result.errors == ["Tamanho inválido", "Status inválido", "Sexo inválido"]
        assert result.has_code(ErrorCode.MALFORMED)

    def test_none(self):
        assert validate_produto(None).errors == ["Dados do produto são obrigatórios"]


def test_is_product_available():
    assert is_product_available("disponivel") is True
    assert is_product_available(ProdutoStatus.DISPONIVEL) is True
    assert is_product_available(ProdutoStatus.ALUGADO) is False
    assert is_product_available(None) is False
