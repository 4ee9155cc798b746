"""Currency rounding — round an amount up to the currency's minimum unit.

The currency config is a JSON object mapping currency code to an exponent:
an exponent of 2 means amounts are charged in steps of 100, -2 in steps of 0.01.
"""

import json
import logging
import threading
from decimal import ROUND_CEILING, Decimal, InvalidOperation, localcontext
from pathlib import Path

from cachetools import TTLCache, cached
from pydantic import TypeAdapter, ValidationError

from site_config.config import settings
from site_config.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_exponents = TypeAdapter(dict[str, int])


@cached(cache=TTLCache(maxsize=16, ttl=settings.currency_cache_ttl), lock=threading.Lock())
def load_currency_config(path: str) -> dict[str, int]:
    """Load and validate a currency config file. Memoized per path."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        config = _exponents.validate_python(raw)
    except FileNotFoundError:
        raise InvalidArgumentError(f"Currency config not found: {path}")
    except (OSError, ValueError, ValidationError) as e:
        raise InvalidArgumentError(f"Currency config unreadable: {path} ({str(e)[:100]})")
    logger.info("Currency config loaded | path=%s | currencies=%d", path, len(config))
    return config


def _to_decimal(amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidArgumentError(f"Amount must be numeric, got {amount!r}")
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise InvalidArgumentError(f"Amount must be numeric, got {amount!r}")
    if not value.is_finite():
        raise InvalidArgumentError(f"Amount must be finite, got {amount!r}")
    return value


def round_up_amount(amount, currency: str, config_path: str) -> Decimal:
    """Round `amount` up to the nearest multiple of 10**exponent for `currency`.

    Already-aligned amounts are returned unchanged.
    """
    value = _to_decimal(amount)
    if not currency:
        raise InvalidArgumentError("Currency is required")
    if not config_path:
        raise InvalidArgumentError("Currency config path is required")

    config = load_currency_config(config_path)
    if currency not in config:
        raise InvalidArgumentError(f"Currency not configured: {currency}")

    exponent = config[currency]
    # Enough digits that scaling by the unit stays exact for any amount
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + abs(value.as_tuple().exponent) + abs(exponent) + 2
        unit = Decimal(10) ** exponent
        steps = (value / unit).to_integral_value(rounding=ROUND_CEILING)
        return steps * unit
