"""
Parse revenue CSV exports (spreadsheets kept before the tracker existed,
or dumps from a previous deployment).

Insurance header, e.g.:
Date,Client Name,Policy Type,Carrier,Policy Number,Monthly Premium,Commission,Status,Notes

Investment header, e.g.:
Date,Entry Type,Amount,Source Name,Account Type,Description,Status,Notes

Rows are returned as payload dicts; validation happens in
services/revenue_entries.py just like for the JSON API.
"""

import csv
import io
import re

# canonical field -> accepted header spellings (lower-cased)
INSURANCE_COLUMNS = {
    "date": ("date",),
    "client_name": ("client name", "client"),
    "policy_type": ("policy type", "type", "product"),
    "carrier": ("carrier",),
    "policy_number": ("policy number", "policy #", "policy no"),
    "premium": ("monthly premium", "premium"),
    "commission_rate": ("commission rate", "rate"),
    "commission_amount": ("commission amount", "commission"),
    "status": ("status",),
    "notes": ("notes",),
}

INVESTMENT_COLUMNS = {
    "date": ("date",),
    "entry_type": ("entry type", "type"),
    "amount": ("amount",),
    "source_name": ("source name", "source", "ticker", "client"),
    "account_type": ("account type", "account"),
    "description": ("description",),
    "status": ("status",),
    "notes": ("notes",),
}

_ENTRY_TYPE_ALIASES = {
    "dividend": "dividend",
    "dividends": "dividend",
    "new_aum": "new_aum",
    "new aum": "new_aum",
    "aum": "new_aum",
}


def parse_insurance_csv(file_content: str) -> list[dict]:
    """Parse an insurance revenue CSV into entry payloads."""
    rows = _read_rows(file_content, INSURANCE_COLUMNS, required=("date", "client_name"))
    for row in rows:
        for key in ("premium", "commission_amount", "commission_rate"):
            if key in row:
                row[key] = _clean_number(row[key])
    return rows


def parse_investment_csv(file_content: str) -> list[dict]:
    """Parse an investment revenue CSV into entry payloads."""
    rows = _read_rows(file_content, INVESTMENT_COLUMNS, required=("date", "amount"))
    for row in rows:
        if "amount" in row:
            row["amount"] = _clean_number(row["amount"])
        if "entry_type" in row:
            entry_type = row["entry_type"].strip().lower()
            row["entry_type"] = _ENTRY_TYPE_ALIASES.get(entry_type, entry_type)
    return rows


def _read_rows(file_content: str, columns: dict, required: tuple) -> list[dict]:
    # Exports sometimes carry a title line or two above the header
    lines = file_content.strip().splitlines()
    header_idx = None
    mapping = None
    for i, line in enumerate(lines):
        header = next(csv.reader([line]), [])
        candidate = _map_header(header, columns)
        if all(field in candidate.values() for field in required):
            header_idx = i
            mapping = candidate
            break

    if header_idx is None:
        labels = ", ".join(columns[field][0].title() for field in required)
        raise ValueError(f"Could not find header row in CSV. Expected columns: {labels}")

    reader = csv.DictReader(io.StringIO("\n".join(lines[header_idx:])))

    rows = []
    for raw in reader:
        row = {}
        for header, field in mapping.items():
            value = (raw.get(header) or "").strip()
            if value:
                row[field] = value

        # Skip blank and totals rows
        if not row or "date" not in row:
            continue
        if "total" in row["date"].lower():
            continue

        if "status" in row:
            row["status"] = row["status"].lower()
        rows.append(row)

    return rows


def _map_header(header: list[str], columns: dict) -> dict:
    """Map raw header cells to canonical field names (first match wins)."""
    mapping = {}
    for cell in header:
        name = cell.strip().lower()
        for field, aliases in columns.items():
            if name in aliases and field not in mapping.values():
                mapping[cell] = field
                break
    return mapping


def _clean_number(s: str) -> str:
    """Strip $, commas and % so the decimal text parses."""
    s = re.sub(r"[$,%]", "", s.strip())
    return s.replace("--", "0")
