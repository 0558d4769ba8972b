"""
Hardcoded demo clients used to bootstrap an empty session.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from .schemas import Client
from .scoring import recompute_all
from .store import ClientStore


def sample_clients() -> List[Client]:
    """Fresh copies of the five demo clients, in insertion order."""
    return [
        Client(100, "Alice Johnson", 25, "0612345678", "123 Maple St", "Basic", 8000.0, 2, 1, 0),
        Client(150, "Bob Wilson", 40, "0755664433", "456 Oak Ave", "Premium", 15000.0, 1, 0, 1),
        Client(80, "Charlie Adams", 30, "0788991122", "789 Pine Rd", "Gold", 20000.0, 3, 2, 2),
        Client(200, "Diana Roberts", 55, "0755123456", "234 Elm St", "Basic", 5000.0, 0, 0, 0),
        Client(120, "Evan Harris", 29, "0687654321", "567 Birch Ln", "Gold", 12000.0, 1, 2, 0),
    ]


def load_sample_data(store: ClientStore, rng: Optional[np.random.Generator] = None) -> int:
    """Replace the store contents with the demo clients and score them.

    Returns:
        Number of clients in the store afterwards.
    """
    store.clear()
    for c in sample_clients():
        store.insert(c)
    recompute_all(store, rng)
    return len(store)
