"""Late fees and suggested amounts for rentals."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from celidone.core.config import Settings, get_settings
from celidone.core.date_helpers import days_between
from celidone.core.logging import get_logger
from celidone.domain.entities.rental import TipoCobranca
from celidone.domain.services.currency_formatter import to_cents

logger = get_logger(__name__)

Number = Union[Decimal, int, float]

# Suggested number of periods per billing type
PERIODOS_POR_TIPO: dict[TipoCobranca, list[int]] = {
    TipoCobranca.DIARIA: [1, 2, 3, 5, 7],
    TipoCobranca.SEMANAL: [1, 2, 3, 4],
    TipoCobranca.MENSAL: [1, 2, 3, 6],
    TipoCobranca.EVENTO: [1, 2, 3],
}


def suggested_periods(tipo_cobranca: Union[TipoCobranca, str]) -> list[int]:
    """Suggested period counts for a billing type (empty if unknown)."""
    try:
        tipo = TipoCobranca(getattr(tipo_cobranca, "value", tipo_cobranca))
    except ValueError:
        return []
    return list(PERIODOS_POR_TIPO[tipo])


class RentalChargeCalculator:
    """Late fee and suggestion rules for rentals.

    Rates come from settings:
    - Late fee: multa_percentual_diario of the rental fee per day after
      multa_dias_carencia grace days, capped at multa_valor_maximo
    - Suggested rental fee: aluguel_percentual_sugerido of the product price
    - Suggested deposit: caucao_percentual_sugerido of the product price
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def days_overdue(self, data_dev_prevista: date, today: date) -> int:
        """Days past the expected return date (0 if not overdue)."""
        return max(0, days_between(data_dev_prevista, today))

    def compute_late_fee(self, valor_aluguel: Number, dias_atraso: int) -> Decimal:
        """
        Calculate the late fee for a number of overdue days.

        Examples (2%/day, 1 grace day, max R$ 1.000,00):
            >>> calc.compute_late_fee(Decimal("100"), 1)
            Decimal('0.00')
            >>> calc.compute_late_fee(Decimal("100"), 6)
            Decimal('10.00')
        """
        billable_days = max(0, dias_atraso - self.settings.multa_dias_carencia)
        if billable_days == 0:
            return Decimal("0.00")

        fee = Decimal(str(valor_aluguel)) * self.settings.multa_percentual_diario * billable_days
        fee = min(fee, self.settings.multa_valor_maximo)
        fee = max(fee, Decimal("0"))

        logger.debug(
            "Late fee computed",
            valor_aluguel=float(valor_aluguel),
            dias_atraso=dias_atraso,
            fee=float(fee),
        )
        return to_cents(fee)

    def late_fee_for(self, valor_aluguel: Number, data_dev_prevista: date, today: date) -> Decimal:
        """Late fee for a rental expected back on data_dev_prevista."""
        return self.compute_late_fee(valor_aluguel, self.days_overdue(data_dev_prevista, today))

    def suggest_valor_aluguel(self, preco: Number) -> Decimal:
        """Suggested rental fee for a product price."""
        return to_cents(Decimal(str(preco)) * self.settings.aluguel_percentual_sugerido)

    def suggest_caucao(self, preco: Number) -> Decimal:
        """Suggested deposit for a product price."""
        return to_cents(Decimal(str(preco)) * self.settings.caucao_percentual_sugerido)
