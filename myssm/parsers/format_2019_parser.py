"""
Parser del BRN format 2019 — 12 dígits

  YYYY EE NNNNNN
  │    │  └── seqüència (6 dígits)
  │    └───── codi d'entitat (EntityCode, "01".."06")
  └────────── any de registre (no pot ser futur)

Ex: "201901000005" → any 2019, Local Companies, seqüència "000005"
"""
import re
import random
import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo
from myssm.config import settings
from myssm.exceptions import BRNFormatError, GenerateError
from myssm.models.entity_code import EntityCode
from myssm.models.format_response import Format2019
from myssm.utils.redact import safe_brn

log = logging.getLogger("myssm.parser.2019")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Exactament 12 dígits amb límit de paraula a tots dos costats (13+ no casa)
REGEX = re.compile(r"\b\d{12}\b", re.ASCII)

LENGTH = 12
SEQUENCE_NUM_LENGTH = 6


def current_year() -> int:
    """Any actual segons el calendari configurat (Asia/Kuala_Lumpur)."""
    return datetime.now(ZoneInfo(settings.timezone)).year


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class Format2019Parser:

    @staticmethod
    def extract(text: str) -> Optional[str]:
        """Primer número de 12 dígits del text, o None."""
        m = REGEX.search(text)
        return m.group(0) if m else None

    @staticmethod
    def _decompose(token: str) -> tuple[int, EntityCode, str]:
        if len(token) != LENGTH or not token.isascii() or not token.isdigit():
            raise BRNFormatError("invalid BRN 2019 format", "BRN2019_FORMAT_INVALID")

        year = int(token[0:4])
        if year > current_year():
            raise BRNFormatError("invalid registration year", "BRN2019_YEAR_INVALID")

        entity_type = EntityCode.from_code(token[4:6])
        if entity_type is None:
            raise BRNFormatError("invalid entity type", "BRN2019_ENTITY_CODE_INVALID")

        return year, entity_type, token[6:12]

    @staticmethod
    def parse(token: Optional[str]) -> Format2019:
        """
        Descompon un token de 12 dígits. Mai llança: els errors semàntics
        queden a error_message / error_code del resultat.
        """
        if not token:
            return Format2019(raw_input=token)

        try:
            year, entity_type, sequence = Format2019Parser._decompose(token)
        except BRNFormatError as e:
            log.debug("brn2019_invalid", extra={"brn": safe_brn(token), "code": e.code})
            return Format2019(raw_input=token, error_message=str(e), error_code=e.code)

        return Format2019(
            raw_input=token,
            valid=True,
            entity_type=entity_type,
            year=year,
            sequence_number=sequence,
        )

    @staticmethod
    def generate(
        year: Optional[int] = None,
        entity_code: Optional[EntityCode] = None,
        rng: Optional[random.Random] = None,
    ) -> str:
        """
        Genera un BRN 2019 aleatori.
        Llança GenerateError si l'any demanat és futur.
        """
        rng = rng or random
        this_year = current_year()

        if year is None:
            year = rng.randint(settings.min_registration_year, this_year)
        elif year > this_year:
            raise GenerateError("invalid registration year")

        if entity_code is None:
            entity_code = rng.choice(list(EntityCode))

        sequence = rng.randint(1, 10 ** SEQUENCE_NUM_LENGTH - 1)
        return f"{year}{entity_code.value}{sequence:0{SEQUENCE_NUM_LENGTH}d}"


# Singleton
format_2019_parser = Format2019Parser()
