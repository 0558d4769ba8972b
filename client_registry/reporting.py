"""
Tabular views of the store for the console shell.
"""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Dict, Iterable

import pandas as pd

from .schemas import Client
from .store import ClientStore

COLUMNS = [f.name for f in fields(Client)]

# display headers, in Client field order
HEADERS = {
    "client_id": "ID",
    "client_name": "Name",
    "client_age": "Age",
    "phone_number": "Phone",
    "address": "Address",
    "policy_type": "Policy",
    "car_value": "Car Value",
    "nb_accidents_due": "Accidents Due",
    "nb_accidents_not_due": "Accidents Not Due",
    "nb_suspensions": "Suspensions",
    "risk_score": "Risk",
    "trust_score": "Trust",
    "monthly_premium": "Monthly",
}


def clients_frame(clients: Iterable[Client]) -> pd.DataFrame:
    """One row per client, columns in field order (empty frame keeps the columns)."""
    return pd.DataFrame([asdict(c) for c in clients], columns=COLUMNS)


def render_clients(clients: Iterable[Client]) -> str:
    df = clients_frame(clients).rename(columns=HEADERS)
    return df.to_string(index=False, float_format=lambda x: f"{x:.2f}")


def portfolio_summary(store: ClientStore) -> Dict[str, object]:
    df = clients_frame(store)
    if df.empty:
        return {
            "n_clients": 0,
            "mean_risk": 0.0,
            "mean_trust": 0.0,
            "total_monthly_premium": 0.0,
            "clients_by_policy": {},
        }

    by_policy = df.groupby("policy_type").size()
    return {
        "n_clients": len(df),
        "mean_risk": float(df["risk_score"].mean()),
        "mean_trust": float(df["trust_score"].mean()),
        "total_monthly_premium": float(df["monthly_premium"].sum()),
        "clients_by_policy": {str(k): int(v) for k, v in by_policy.items()},
    }
