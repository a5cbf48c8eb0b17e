"""Tests for CPF/CNPJ validators."""

import pytest

from celidone.domain.validation.documents import (
    cnpj_check_digits,
    cpf_check_digits,
    is_valid_cnpj,
    is_valid_cpf,
    only_digits,
    validate_cnpj,
    validate_cpf,
    validate_document,
)
from celidone.domain.validation.results import ErrorCode


class TestValidateCpf:
    """Tests for CPF validation."""

    @pytest.mark.parametrize(
        "cpf",
        ["11144477735", "111.444.777-35", "12345678909", "52998224725", "98765432100"],
    )
    def test_valid_cpf(self, cpf):
        """Test that valid CPFs pass with or without formatting."""
        check = validate_cpf(cpf)

        assert check.valid is True
        assert check.reason is None
        assert check.message is None

    def test_invalid_cpf_wrong_checksum(self):
        """Test that CPF with wrong check digits fails with CHECKSUM."""
        check = validate_cpf("12345678901")

        assert check.valid is False
        assert check.reason == "invalid"
        assert check.code == ErrorCode.CHECKSUM
        assert check.message == "CPF inválido"

    @pytest.mark.parametrize("cpf", ["00000000000", "11111111111", "99999999999"])
    def test_cpf_all_same_digits(self, cpf):
        """Test that CPF with all same digits is malformed."""
        check = validate_cpf(cpf)

        assert check.valid is False
        assert check.reason == "invalid"
        assert check.code == ErrorCode.MALFORMED

    @pytest.mark.parametrize("cpf", ["1234567890", "123456789012", "abc"])
    def test_cpf_wrong_length(self, cpf):
        """Test that CPF with wrong length is malformed."""
        check = validate_cpf(cpf)

        assert check.reason == "invalid"
        assert check.code == ErrorCode.MALFORMED

    @pytest.mark.parametrize("cpf", ["١١١٤٤٤٧٧٧٣٥", "１１１４４４７７７３５"])
    def test_non_ascii_digits_are_malformed(self, cpf):
        """Test that only ASCII digits count toward the length."""
        check = validate_cpf(cpf)

        assert check.valid is False
        assert check.code == ErrorCode.MALFORMED

    @pytest.mark.parametrize("cpf", ["", None])
    def test_cpf_required(self, cpf):
        """Test that an empty CPF is reported as required."""
        check = validate_cpf(cpf)

        assert check.valid is False
        assert check.reason == "required"
        assert check.code == ErrorCode.REQUIRED
        assert check.message == "Este campo é obrigatório"

    def test_cpf_check_digits_calculation(self):
        """Test CPF verification digit calculation."""
        # 1*10 + 2*9 + ... + 9*2 = 210; (210 * 10) % 11 = 10 -> 0
        assert cpf_check_digits("123456789") == "09"
        assert cpf_check_digits("111444777") == "35"

    @pytest.mark.parametrize("base", ["1234", "١١١٤٤٤٧٧٧"])
    def test_cpf_check_digits_rejects_bad_base(self, base):
        with pytest.raises(ValueError):
            cpf_check_digits(base)

    def test_is_valid_cpf(self):
        assert is_valid_cpf("111.444.777-35") is True
        assert is_valid_cpf("111.444.777-34") is False
        assert is_valid_cpf(None) is False


class TestValidateCnpj:
    """Tests for CNPJ validation."""

    @pytest.mark.parametrize(
        "cnpj",
        ["11222333000181", "11.222.333/0001-81", "11444777000161"],
    )
    def test_valid_cnpj(self, cnpj):
        """Test that valid CNPJs pass with or without formatting."""
        assert validate_cnpj(cnpj).valid is True

    @pytest.mark.parametrize("cnpj", ["11222333000180", "11222333000182"])
    def test_invalid_cnpj_wrong_checksum(self, cnpj):
        """Test that CNPJ with wrong check digits fails with CHECKSUM."""
        check = validate_cnpj(cnpj)

        assert check.valid is False
        assert check.code == ErrorCode.CHECKSUM
        assert check.message == "CNPJ inválido"

    def test_cnpj_all_same_digits(self):
        """Test that CNPJ with all same digits is malformed."""
        check = validate_cnpj("11111111111111")

        assert check.reason == "invalid"
        assert check.code == ErrorCode.MALFORMED

    def test_cnpj_wrong_length(self):
        """Test that CNPJ with wrong length is malformed."""
        assert validate_cnpj("1122233300018").code == ErrorCode.MALFORMED
        assert validate_cnpj("112223330001810").code == ErrorCode.MALFORMED

    def test_cnpj_required(self):
        check = validate_cnpj("")

        assert check.reason == "required"
        assert check.code == ErrorCode.REQUIRED

    def test_cnpj_check_digits_calculation(self):
        """Test CNPJ verification digits (weights 2..9 from the right)."""
        assert cnpj_check_digits("112223330001") == "81"
        assert cnpj_check_digits("114447770001") == "61"

    def test_is_valid_cnpj(self):
        assert is_valid_cnpj("11.222.333/0001-81") is True
        assert is_valid_cnpj("11.222.333/0001-80") is False


class TestValidateDocument:
    """Tests for CPF/CNPJ dispatch."""

    def test_dispatch_by_digit_count(self):
        assert validate_document("111.444.777-35").valid is True
        assert validate_document("11.222.333/0001-81").valid is True
        assert validate_document("12345678901").code == ErrorCode.CHECKSUM

    def test_dispatch_by_tipo_pessoa(self):
        """Test that the customer nature picks the validator."""
        assert validate_document("11144477735", "PESSOA_FISICA").valid is True

        check = validate_document("11144477735", "PESSOA_JURIDICA")
        assert check.valid is False
        assert check.message == "CNPJ inválido"

    def test_unknown_length(self):
        """Test that a number that is neither CPF nor CNPJ is malformed."""
        check = validate_document("123456")

        assert check.valid is False
        assert check.code == ErrorCode.MALFORMED
        assert check.message == "CPF deve ter 11 dígitos ou CNPJ deve ter 14 dígitos"

    def test_empty_document(self):
        assert validate_document(None).reason == "required"

    def test_invalid_tipo_pessoa(self):
        with pytest.raises(ValueError, match="Invalid tipo_pessoa"):
            validate_document("11144477735", "EMPRESA")

    def test_as_field_validation(self):
        """Test conversion to the field-level result shape."""
        field = validate_document("12345678901").as_field_validation()

        assert field.is_valid is False
        assert field.code == ErrorCode.CHECKSUM
        assert field.message == "CPF inválido"


def test_only_digits():
    assert only_digits("11.222.333/0001-81") == "11222333000181"
    assert only_digits(None) == ""
