"""Runtime configuration defaults for pricing and logging."""

from __future__ import annotations

from decimal import Decimal

TAX_RATE = Decimal("0.08")

# Used when the active locale has no currency symbol (e.g. the C locale).
CURRENCY_FALLBACK_SYMBOL = "$"

DEBUG_LOG_PATH = "/tmp/lunch-tray-debug.log"
