"""CLI application entry point."""

import json
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from celidone import __version__
from celidone.core.date_helpers import format_display_date, today as local_today
from celidone.core.logging import configure_logging, get_logger
from celidone.domain.entities.rental import RentalAction, RentalRequest, RentalStatus
from celidone.domain.services.currency_formatter import format_currency, parse_currency
from celidone.domain.services.mask_service import (
    CELULAR_MASK,
    CEP_MASK,
    CNPJ_MASK,
    CPF_MASK,
    FIXO_MASK,
    apply_auto_mask,
    apply_mask,
    detect_mask_type,
    remove_mask,
)
from celidone.domain.services.rental_charges import RentalChargeCalculator
from celidone.domain.services.rental_rules import RentalRuleEngine
from celidone.domain.services.rental_state import RentalStateMachine
from celidone.domain.validation.documents import validate_document
from celidone.presentation.labels import status_label

# Load environment variables from .env file
dotenv_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path)

# Configure logging on module import
configure_logging()
logger = get_logger(__name__)


def _amount(value: str) -> Decimal:
    """Parse a shell argument: plain numbers use "." as the decimal point."""
    try:
        return Decimal(value)
    except InvalidOperation:
        return parse_currency(value)


MASKS = {
    "cpf": CPF_MASK,
    "cnpj": CNPJ_MASK,
    "cep": CEP_MASK,
    "celular": CELULAR_MASK,
    "fixo": FIXO_MASK,
}


@click.group()
@click.version_option(version=__version__)
def app() -> None:
    """Celidone - Regras de validação e aluguel de trajes."""
    pass


@app.command("validate-document")
@click.argument("value")
@click.option(
    "--tipo",
    type=click.Choice(["PESSOA_FISICA", "PESSOA_JURIDICA"]),
    help="Natureza do cliente. Se omitido, usa a quantidade de dígitos.",
)
def validate_document_cmd(value: str, tipo: Optional[str]) -> None:
    """Valida um CPF ou CNPJ."""
    check = validate_document(value, tipo)
    if check.valid:
        click.echo(f"✅ Documento válido: {apply_auto_mask(value)}")
        return

    click.echo(f"❌ {check.message}", err=True)
    raise click.Abort()


@app.command()
@click.argument("value")
@click.option(
    "--type",
    "mask_type",
    type=click.Choice(["auto", *MASKS]),
    default="auto",
    show_default=True,
    help="Máscara a aplicar",
)
def mask(value: str, mask_type: str) -> None:
    """Aplica uma máscara ao valor."""
    if mask_type == "auto":
        click.echo(apply_auto_mask(value) or "")
    else:
        click.echo(apply_mask(value, MASKS[mask_type]) or "")


@app.command()
@click.argument("value")
def unmask(value: str) -> None:
    """Remove a máscara, mantendo apenas dígitos."""
    click.echo(remove_mask(value) or "")


@app.command()
@click.argument("value")
def detect(value: str) -> None:
    """Detecta o tipo de máscara pelo número de dígitos."""
    click.echo(detect_mask_type(value).value)


@app.command("format-currency")
@click.argument("value")
def format_currency_cmd(value: str) -> None:
    """Formata um valor em reais (ex: 1234.5 -> R$ 1.234,50)."""
    click.echo(format_currency(_amount(value)))


@app.command("parse-currency")
@click.argument("text")
def parse_currency_cmd(text: str) -> None:
    """Converte um valor formatado (R$ 1.234,50) em número."""
    click.echo(str(parse_currency(text)))


@app.command("validate-rental")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--product-unavailable",
    is_flag=True,
    help="Considera o produto indisponível para aluguel",
)
def validate_rental(file: Path, product_unavailable: bool) -> None:
    """Valida um aluguel (JSON) e exibe o payload para a API."""
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        click.echo(f"❌ JSON inválido: {e}", err=True)
        raise click.Abort()

    if not isinstance(data, dict):
        click.echo("❌ O arquivo deve conter um objeto JSON", err=True)
        raise click.Abort()

    engine = RentalRuleEngine()
    result = engine.validate_form(data, product_available=not product_unavailable)
    logger.info("Rental file validated", file=str(file), errors=len(result.errors))

    if not result.is_valid:
        click.echo("❌ Aluguel inválido:", err=True)
        for error in result.errors:
            click.echo(f"   • {error}", err=True)
        raise click.Abort()

    payload = engine.build_payload(RentalRequest.model_validate(data))
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
@click.argument("status", type=click.Choice([s.value for s in RentalStatus], case_sensitive=False))
@click.argument("action", type=click.Choice([a.value for a in RentalAction], case_sensitive=False))
def transition(status: str, action: str) -> None:
    """Calcula o novo status de um aluguel após devolução ou cancelamento."""
    result = RentalStateMachine().transition(status, action)
    if result.ok:
        click.echo(f"✅ {status_label(status.upper())} → {status_label(result.status)}")
        return

    click.echo(f"❌ {result.error}", err=True)
    raise click.Abort()


@app.command("late-fee")
@click.argument("valor_aluguel")
@click.argument("data_dev_prevista", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option(
    "--today",
    "ref_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Data de referência (formato: YYYY-MM-DD). Padrão: hoje",
)
def late_fee(valor_aluguel: str, data_dev_prevista: datetime, ref_date: Optional[datetime]) -> None:
    """Calcula a multa por atraso de um aluguel."""
    calculator = RentalChargeCalculator()
    reference = ref_date.date() if ref_date else local_today()
    expected = data_dev_prevista.date()

    dias = calculator.days_overdue(expected, reference)
    fee = calculator.late_fee_for(_amount(valor_aluguel), expected, reference)

    click.echo(f"📅 Devolução prevista: {format_display_date(expected)}")
    click.echo(f"   • Dias de atraso: {dias}")
    click.echo(f"   • Multa: {format_currency(fee)}")


if __name__ == "__main__":
    app()
