"""Plain-dict views of ledger entities for front ends and exports."""

from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from ledger_core.models import Account, Client, ConsolidationReport


def to_dict(obj: Any) -> dict:
    """Convert a client, account or report to a JSON-ready dictionary."""
    if isinstance(obj, Client):
        return client_to_dict(obj)
    elif isinstance(obj, Account):
        return account_to_dict(obj)
    elif isinstance(obj, ConsolidationReport):
        return report_to_dict(obj)
    elif is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def client_to_dict(client: Client) -> dict:
    return {
        "name": client.name,
        "cpf": client.cpf,
        "formatted_cpf": client.formatted_cpf,
    }


def account_to_dict(account: Account) -> dict:
    return {
        "number": account.number,
        "kind": account.kind.value,
        "label": account.label,
        "owner_cpf": account.owner_cpf,
        "holder_name": account.holder_name,
        "balance": serialize_value(account.balance),
    }


def report_to_dict(report: ConsolidationReport) -> dict:
    return {
        "by_kind": {
            kind.value: {
                "count": totals.count,
                "total_balance": serialize_value(totals.total_balance),
            }
            for kind, totals in report.by_kind.items()
        },
        "total_count": report.total_count,
        "total_balance": serialize_value(report.total_balance),
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {serialize_value(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
