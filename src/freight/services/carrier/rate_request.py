"""Correios CalcPrecoPrazo request payload."""

from __future__ import annotations

from dataclasses import dataclass

from ...models.domain import CarrierContract, ConsolidatedPackage, Warehouse
from ..geocoding import digits_only

BOX_FORMAT = "1"
NO = "N"


@dataclass(slots=True, frozen=True)
class RateRequest:
    company_code: str
    password: str
    service_codes: tuple[str, ...]
    origin_postal_code: str
    destination_postal_code: str
    weight: str
    declared_value: str
    length: float
    width: float
    height: float
    format_code: str = BOX_FORMAT
    diameter: float = 0
    own_hand: str = NO
    receipt_notice: str = NO

    def to_params(self) -> dict[str, str]:
        """Query string parameters expected by the rate service."""
        return {
            "nCdEmpresa": self.company_code,
            "sDsSenha": self.password,
            "nCdServico": ",".join(self.service_codes),
            "sCepOrigem": self.origin_postal_code,
            "sCepDestino": self.destination_postal_code,
            "nVlPeso": self.weight,
            "nCdFormato": self.format_code,
            "nVlComprimento": _format_measure(self.length),
            "nVlAltura": _format_measure(self.height),
            "nVlLargura": _format_measure(self.width),
            "nVlDiametro": _format_measure(self.diameter),
            "sCdMaoPropria": self.own_hand,
            "nVlValorDeclarado": self.declared_value,
            "sCdAvisoRecebimento": self.receipt_notice,
            "StrRetorno": "xml",
            "nIndicaCalculo": "3",
        }


def _format_measure(value: float) -> str:
    return f"{value:.2f}"


def build_rate_request(
    contract: CarrierContract,
    origin: Warehouse,
    destination_postal_code: str,
    package: ConsolidatedPackage,
) -> RateRequest:
    return RateRequest(
        company_code=contract.company_code,
        password=contract.password,
        service_codes=contract.service_codes,
        origin_postal_code=digits_only(origin.postal_code),
        destination_postal_code=digits_only(destination_postal_code),
        weight=f"{package.total_weight:.2f}",
        declared_value=f"{package.declared_value:.2f}",
        length=package.length,
        width=package.width,
        height=package.height,
    )
