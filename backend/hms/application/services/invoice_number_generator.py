"""Human-readable invoice number generation with a best-effort collision check."""

import logging
import random
import time
from collections.abc import Callable

from hms.application.interfaces import InvoiceRepository

logger = logging.getLogger(__name__)

INVOICE_PREFIX = "INV"

_CANDIDATE_DIGITS = 6
_CANDIDATE_RANDOM_RANGE = 1_000
_FALLBACK_DIGITS = 10
_FALLBACK_RANDOM_RANGE = 10_000


class InvoiceNumberGenerator:
    """Produces ``INV-<digits>`` identifiers from wall-clock time plus randomness.

    The first candidate keeps the last 6 digits of ``<epoch ms><0..999>`` and is
    checked against existing invoices. If it is taken, or the check itself
    fails, a wider candidate (last 10 digits of ``<epoch ms><0..9999>``) is
    returned without a second check.

    Nothing is reserved: two callers can still race between the check and the
    insert. The UNIQUE constraint on ``invoices.invoice_number`` catches that.

    Usage:
        generator = InvoiceNumberGenerator(invoice_repository)
        number = await generator.generate()   # "INV-482913"
    """

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        *,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
    ):
        self._repo = invoice_repository
        self._clock = clock
        self._rng = rng or random.Random()

    async def generate(self) -> str:
        """Return a fresh invoice number. Never raises."""
        candidate = self._build(self._rng.randrange(_CANDIDATE_RANDOM_RANGE), _CANDIDATE_DIGITS)

        try:
            taken = await self._repo.exists_by_number(candidate)
        except Exception as exc:
            logger.warning(
                "Invoice number check failed for %s, using fallback: %s", candidate, exc
            )
            return self._fallback()

        if not taken:
            return candidate

        logger.info("Invoice number %s already in use, using fallback", candidate)
        return self._fallback()

    def _fallback(self) -> str:
        return self._build(self._rng.randrange(_FALLBACK_RANDOM_RANGE), _FALLBACK_DIGITS)

    def _build(self, random_part: int, digits: int) -> str:
        now_ms = int(self._clock() * 1000)
        raw = f"{now_ms}{random_part}"
        return f"{INVOICE_PREFIX}-{raw[-digits:]}"
