"""Display formatting helpers (pt-BR)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def format_brl(amount: Union[Decimal, int, float]) -> str:
    """
    Format an amount as Brazilian reais, e.g. `R$ 1.234,56`.

    Negative amounts render as `-R$ 10,00`.
    """

    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}"  # 1,234.56
    grouped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {grouped}"


def format_share(share: Decimal) -> str:
    """Render a 0..1 share as a whole percentage, e.g. `75%`."""

    percent = (Decimal(share) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent}%"
