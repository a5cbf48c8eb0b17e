"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from celidone.core.config import Settings
from celidone.domain.entities.rental import Rental
from celidone.domain.services.rental_charges import RentalChargeCalculator
from celidone.domain.services.rental_rules import RentalRuleEngine
from celidone.domain.services.rental_state import RentalStateMachine


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with the default rental limits and late fee rates."""
    return Settings(
        environment="development",
        log_level="WARNING",
        valor_aluguel_max=Decimal("9999.99"),
        valor_caucao_max=Decimal("99999.99"),
        multa_percentual_diario=Decimal("0.02"),
        multa_valor_maximo=Decimal("1000.00"),
        multa_dias_carencia=1,
    )


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def rule_engine(settings: Settings) -> RentalRuleEngine:
    return RentalRuleEngine(settings)


@pytest.fixture
def state_machine() -> RentalStateMachine:
    return RentalStateMachine()


@pytest.fixture
def charge_calculator(settings: Settings) -> RentalChargeCalculator:
    return RentalChargeCalculator(settings)


# =============================================================================
# Rental Fixtures
# =============================================================================


@pytest.fixture
def rental_form() -> dict:
    """A complete, valid rental form as sent by the desktop app."""
    return {
        "clienteId": 1,
        "produtoId": 2,
        "dataAluguel": "2024-01-01",
        "dataDevPrevista": "2024-01-08",
        "valorAluguel": "R$ 100,00",
        "valorCaucao": 200,
        "valorDesconto": 10,
        "tipoCobranca": "diaria",
        "formaPagamento": "pix",
        "periodo": 7,
        "observacoes": "Terno para casamento",
    }


@pytest.fixture
def rental() -> Rental:
    """An ATIVO rental expected back on 2024-01-08."""
    return Rental(
        id=10,
        clienteId=1,
        produtoId=2,
        dataAluguel="2024-01-01",
        dataDevPrevista="2024-01-08",
        valorAluguel=Decimal("100.00"),
        valorCaucao=Decimal("200.00"),
        valorDesconto=Decimal("10.00"),
        valorTotal=Decimal("690.00"),
        periodo=7,
        tipoCobranca="diaria",
        formaPagamento="pix",
    )
