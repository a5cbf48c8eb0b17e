"""Unit tests for domain entities."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from celidone.domain.entities import (
    DocumentKind,
    DocumentNumber,
    Rental,
    RentalRequest,
    RentalStatus,
    TipoPessoa,
)


class TestRentalRequest:
    """Tests for RentalRequest entity."""

    def test_create_from_form(self, rental_form):
        """Test creating a RentalRequest from camelCase form data."""
        request = RentalRequest.model_validate(rental_form)

        assert request.cliente_id == 1
        assert request.data_aluguel == date(2024, 1, 1)
        assert request.valor_aluguel == Decimal("100.00")
        assert request.valor_desconto == Decimal("10")
        assert request.tipo_cobranca == "diaria"

    def test_pt_br_dates(self):
        request = RentalRequest(dataAluguel="08/01/2024", dataDevPrevista="2024-01-15T10:00:00")

        assert request.data_aluguel == date(2024, 1, 8)
        assert request.data_dev_prevista == date(2024, 1, 15)

    def test_blank_fields_are_missing(self):
        """Test that blank form fields become None."""
        request = RentalRequest(clienteId="", valorAluguel=" ", observacoes="  ", periodo="")

        assert request.cliente_id is None
        assert request.valor_aluguel is None
        assert request.observacoes is None
        assert request.periodo is None

    def test_missing_discount_is_zero(self):
        assert RentalRequest().valor_desconto == Decimal("0")
        assert RentalRequest(valorDesconto=None).valor_desconto == Decimal("0")

    def test_integer_strings(self):
        request = RentalRequest(clienteId=" 12 ", periodo="3")

        assert request.cliente_id == 12
        assert request.periodo == 3

    def test_invalid_date(self):
        with pytest.raises(ValidationError):
            RentalRequest(dataAluguel="32/13/2024")

    def test_frozen(self, rental_form):
        request = RentalRequest.model_validate(rental_form)

        with pytest.raises(ValidationError):
            request.periodo = 2


class TestRental:
    """Tests for Rental entity."""

    def test_create_rental(self, rental):
        assert rental.status == RentalStatus.ATIVO
        assert rental.data_dev_efetiva is None
        assert rental.valor_total == Decimal("690.00")

    def test_status_normalized(self, rental):
        data = rental.model_dump()
        data["status"] = " devolvido "

        assert Rental.model_validate(data).status == RentalStatus.DEVOLVIDO

    def test_unknown_status_rejected(self, rental):
        data = rental.model_dump()
        data["status"] = "PERDIDO"

        with pytest.raises(ValidationError):
            Rental.model_validate(data)

    def test_terminal_statuses(self):
        assert RentalStatus.DEVOLVIDO.is_terminal is True
        assert RentalStatus.CANCELADO.is_terminal is True
        assert RentalStatus.ATIVO.is_terminal is False
        assert RentalStatus.ATRASADO.is_terminal is False


class TestDocumentNumber:
    """Tests for DocumentNumber entity."""

    def test_parse_cpf(self):
        doc = DocumentNumber.parse("111.444.777-35")

        assert doc.digits == "11144477735"
        assert doc.kind == DocumentKind.CPF
        assert doc.tipo_pessoa == TipoPessoa.PESSOA_FISICA
        assert str(doc) == "111.444.777-35"

    def test_parse_cnpj(self):
        doc = DocumentNumber.parse("11222333000181")

        assert doc.kind == DocumentKind.CNPJ
        assert doc.tipo_pessoa == TipoPessoa.PESSOA_JURIDICA
        assert doc.formatted == "11.222.333/0001-81"

    def test_parse_wrong_length(self):
        with pytest.raises(ValueError, match="11 dígitos"):
            DocumentNumber.parse("123")

    def test_parse_bad_checksum(self):
        with pytest.raises(ValueError, match="CPF inválido"):
            DocumentNumber.parse("111.444.777-34")
