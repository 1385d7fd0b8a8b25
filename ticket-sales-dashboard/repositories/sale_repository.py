"""
Sale repository (persistence).

This module provides *only* persistence operations for SaleRecord against
the Supabase `sales` table. It does not enforce business rules; the ledger
in `services.sales_ledger` owns the canonical collection.

Table columns: id, conta, setor, custo_setor, custo_plano, valor_venda,
lucro, nome_pix, status (ENVIADO|PENDENTE), contato, pagamento, data,
created_at.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Protocol

from domain.event_date import to_event_label, to_iso_date
from domain.sale import DeliveryStatus, SaleRecord
from repositories.client import get_supabase, sales_table_name


class PersistenceError(RuntimeError):
    """Raised when the remote data store rejects or fails a call."""


class SaleRepository(Protocol):
    """Persistence contract the sales ledger depends on."""

    @property
    def is_configured(self) -> bool: ...

    def list_sales(self) -> List[SaleRecord]: ...

    def insert_sale(self, sale: SaleRecord) -> None: ...

    def update_sale(self, sale: SaleRecord) -> None: ...

    def delete_sale(self, sale_id: str) -> None: ...


def _money(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


def row_to_sale(row: Mapping[str, Any]) -> SaleRecord:
    """
    Convert a Supabase row into a SaleRecord.

    The stored `lucro` column is ignored; profit is always recomputed. The
    ISO `data` column is normalized to the DD/MM/YY label.
    """

    return SaleRecord(
        sale_id=str(row["id"]),
        account=str(row.get("conta") or ""),
        sector=str(row.get("setor") or ""),
        sector_cost=_money(row.get("custo_setor")),
        plan_cost=_money(row.get("custo_plano")),
        sale_price=_money(row.get("valor_venda")),
        buyer_name=str(row.get("nome_pix") or ""),
        delivery_status=DeliveryStatus(str(row.get("status") or DeliveryStatus.PENDING.value)),
        contact=str(row.get("contato") or ""),
        payment_method=str(row.get("pagamento") or ""),
        event_date=to_event_label(row.get("data")),
    )


def sale_to_row(sale: SaleRecord) -> Dict[str, Any]:
    """Serialize a SaleRecord into the column payload used for insert/update."""

    try:
        data = to_iso_date(sale.event_date)
    except ValueError:
        # Free-text dates are stored verbatim.
        data = sale.event_date

    return {
        "id": sale.sale_id,
        "conta": sale.account,
        "setor": sale.sector,
        "custo_setor": float(sale.sector_cost),
        "custo_plano": float(sale.plan_cost),
        "valor_venda": float(sale.sale_price),
        "lucro": float(sale.profit),
        "nome_pix": sale.buyer_name,
        "status": sale.delivery_status.value,
        "contato": sale.contact,
        "pagamento": sale.payment_method,
        "data": data,
    }


def _raise_on_error(response: Any, action: str) -> None:
    error = getattr(response, "error", None)
    if error:
        raise PersistenceError(f"Failed to {action}: {error}")


class SupabaseSaleRepository:
    """
    SaleRepository backed by a Supabase table.

    When `client` is None the repository reports `is_configured == False`
    and every call raises PersistenceError; callers check first.
    """

    def __init__(self, client: Optional[Any] = None, table: Optional[str] = None) -> None:
        self._client = client
        self._table = table or sales_table_name()

    @classmethod
    def from_environment(cls) -> "SupabaseSaleRepository":
        return cls(client=get_supabase())

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def _query(self):
        if self._client is None:
            raise PersistenceError("Supabase is not configured")
        return self._client.table(self._table)

    def list_sales(self) -> List[SaleRecord]:
        """
        Fetch every sale, most recently created first.

        Returns:
            List[SaleRecord] (possibly empty)
        """

        try:
            response = self._query().select("*").order("created_at", desc=True).execute()
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Failed to list sales: {e}") from e
        _raise_on_error(response, "list sales")

        rows = getattr(response, "data", None) or []
        try:
            return [row_to_sale(row) for row in rows]
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            raise PersistenceError(f"Failed to list sales: malformed row: {e!r}") from e

    def insert_sale(self, sale: SaleRecord) -> None:
        try:
            response = self._query().insert(sale_to_row(sale)).execute()
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Failed to insert sale: {e}") from e
        _raise_on_error(response, "insert sale")

    def update_sale(self, sale: SaleRecord) -> None:
        payload = sale_to_row(sale)
        try:
            response = self._query().update(payload).eq("id", sale.sale_id).execute()
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Failed to update sale: {e}") from e
        _raise_on_error(response, "update sale")

    def delete_sale(self, sale_id: str) -> None:
        try:
            response = self._query().delete().eq("id", sale_id).execute()
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Failed to delete sale: {e}") from e
        _raise_on_error(response, "delete sale")


__all__ = [
    "PersistenceError",
    "SaleRepository",
    "SupabaseSaleRepository",
    "row_to_sale",
    "sale_to_row",
]
