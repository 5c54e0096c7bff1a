"""
BRN (Business Registration Number) — coordinador dels dos formats

Executa els parsers 2019 i clàssic sobre el mateix text normalitzat i
combina el resultat:

  BRN.parse("201901000005 (1312525-A)")
    → format2019: 201901000005   (vàlid)
    → classic:    1312525-A      (vàlid)
    → to_formal(): "201901000005 (1312525-A)"

Mode estricte: llança ParseError / InvalidFormatError en lloc de retornar
un BRN invàlid.
"""
import random
import logging
from enum import Enum
from typing import Optional, Union
from myssm.exceptions import (
    GenerateError,
    InvalidFormatError,
    ParseError,
    UnknownFormatError,
)
from myssm.models.base_response import ValidationItem, MetaInfo, has_critical
from myssm.models.brn_response import BRNDatos, BRNValidationResponse
from myssm.models.entity_code import EntityCode
from myssm.models.format_response import BRNFormat, Format2019, FormatClassic
from myssm.parsers.classic_parser import classic_parser
from myssm.parsers.format_2019_parser import format_2019_parser
from myssm.utils.redact import redact_parse_info

log = logging.getLogger("myssm.brn")


class FormatName(str, Enum):
    FORMAT_2019 = "format2019"
    CLASSIC = "classic"


class BRN:
    """Resultat combinat dels dos formats. Tots dos hi són sempre."""

    def __init__(self, text: str, strict: bool = False):
        self.text = text
        self.strict = strict
        self.format2019: Format2019 = Format2019()
        self.classic: FormatClassic = FormatClassic()
        self._parse()

    # -----------------------------------------------------------------------
    # Parseig
    # -----------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> "BRN":
        return cls(text, strict=strict)

    def _parse(self) -> None:
        brn = None
        try:
            brn = self.text.replace("-", "").upper()
        except Exception as e:
            self._fail(e)

        if brn is not None:
            # Cada format s'intenta per separat: un error no bloqueja l'altre
            try:
                self.format2019 = format_2019_parser.parse(format_2019_parser.extract(brn))
            except Exception as e:
                self._fail(e)
            try:
                self.classic = classic_parser.parse(classic_parser.extract(brn))
            except Exception as e:
                self._fail(e)

        text = self.text if isinstance(self.text, str) else None
        log.debug("brn_parsed", extra=redact_parse_info(text, self.to_formal(), self.is_valid()))

        if not self.is_valid() and self.strict:
            log.warning("brn_invalid_strict")
            raise InvalidFormatError("invalid business registration number")

    def _fail(self, error: Exception) -> None:
        if self.strict:
            raise ParseError(str(error)) from error
        log.warning("brn_parse_failed", extra={"error": type(error).__name__})

    # -----------------------------------------------------------------------
    # Consultes
    # -----------------------------------------------------------------------

    def is_valid(self) -> bool:
        return self.format2019.is_valid() or self.classic.is_valid()

    def formats(self) -> tuple[BRNFormat, ...]:
        """Els dos formats en ordre de construcció (2019, clàssic)."""
        return (self.format2019, self.classic)

    def get_format(self, name: Union[str, FormatName]) -> BRNFormat:
        """Format per nom ("format2019" | "classic")."""
        try:
            key = FormatName(name)
        except ValueError:
            raise UnknownFormatError(f"Unrecognized BRN format: '{name}'") from None
        return self.format2019 if key == FormatName.FORMAT_2019 else self.classic

    def to_formal(self) -> Optional[str]:
        """
        "201901000005 (1312525-A)": formats vàlids en ordre, tots excepte
        el primer entre parèntesis. None si cap és vàlid.
        """
        formal = [str(f) for f in self.formats() if f.is_valid()]
        if not formal:
            return None
        return " ".join(formal[:1] + [f"({f})" for f in formal[1:]])

    def __str__(self) -> str:
        return self.to_formal() or ""

    def __repr__(self) -> str:
        return f"BRN({self.to_formal()!r}, valid={self.is_valid()})"

    # -----------------------------------------------------------------------
    # Generació
    # -----------------------------------------------------------------------

    @classmethod
    def make(
        cls,
        year: Optional[int] = None,
        entity_code: Optional[EntityCode] = None,
        strict: bool = True,
        rng: Optional[random.Random] = None,
    ) -> Optional["BRN"]:
        """
        Genera un BRN aleatori (2019 + clàssic) i el torna a parsejar,
        cosa que verifica que el número generat és vàlid.
        """
        try:
            text = " ".join([
                format_2019_parser.generate(year, entity_code, rng=rng),
                classic_parser.generate(year, entity_code, rng=rng),
            ])
            return cls(text, strict=strict)
        except Exception as e:
            if strict:
                raise GenerateError(str(e)) from e
            log.warning("brn_generate_failed", extra={"error": type(e).__name__})
        return None

    # -----------------------------------------------------------------------
    # Contracte unificat
    # -----------------------------------------------------------------------

    def to_response(self) -> BRNValidationResponse:
        """Resum serialitzable del parseig (contracte unificat v1)."""
        f2019, classic = self.format2019, self.classic
        errors: list[ValidationItem] = []
        alerts: list[ValidationItem] = []

        for prefix, fmt in (("BRN2019", f2019), ("BRN_CLASSIC", classic)):
            if fmt.is_valid():
                continue
            if fmt.error_message:
                errors.append(ValidationItem(
                    code=fmt.error_code or f"{prefix}_INVALID",
                    severity="error",
                    field=prefix.lower(),
                    message=fmt.error_message,
                    evidence=fmt.raw_input,
                ))
            else:
                alerts.append(ValidationItem(
                    code=f"{prefix}_NOT_FOUND",
                    severity="warning",
                    field=prefix.lower(),
                    message="No s'ha trobat cap número amb aquest format.",
                ))

        if not self.is_valid():
            errors.append(ValidationItem(
                code="BRN_INVALID",
                severity="critical",
                message="Número de registre d'empresa invàlid.",
                suggested_fix="Format esperat: 201901000005 o 1312525-A",
            ))

        valido = not has_critical(errors)
        classic_type = classic.get_entity_type()

        return BRNValidationResponse(
            valido=valido,
            datos=BRNDatos(
                formal=self.to_formal(),
                numero_2019=f2019.to_formal(),
                any_registre=f2019.get_year(),
                codigo_entidad=f2019.get_entity_code() if f2019.is_valid() else None,
                tipo_entidad=f2019.get_entity_type() if f2019.is_valid() else None,
                secuencia_2019=f2019.get_sequence_number(),
                numero_clasico=classic.to_formal(),
                tipo_entidad_clasico=classic_type.name if classic_type else None,
                secuencia_clasica=classic.get_sequence_number(),
                digito_control=classic.get_check_digit() if classic.is_valid() else None,
            ),
            alertas=alerts,
            errores_detectados=errors,
            meta=MetaInfo(
                success=valido,
                message="Validació correcta" if valido else "Errors detectats",
            ),
        )
