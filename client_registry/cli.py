"""
Interactive console shell for the client registry.

Usage (from project root):

    python -m client_registry.cli [--samples] [--seed 42]

The shell:
1) Reads client data from the console and validates it
2) Inserts, finds, removes and lists clients in id order
3) Recomputes risk / trust / premium scores on demand
"""

from __future__ import annotations

import argparse
import logging
import math
from typing import Callable, List, Optional

import numpy as np

from . import config
from .reporting import portfolio_summary, render_clients
from .samples import load_sample_data
from .schemas import Client
from .scoring import make_rng, recompute_all, score_client
from .store import ClientStore
from .validation import validate

InputFn = Callable[[str], str]


# -------------------------------------------------------------------
# Input helpers
# -------------------------------------------------------------------

def read_int(prompt: str, input_fn: InputFn = input) -> int:
    while True:
        raw = input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            print("Invalid integer input. Please try again.")


def read_float(prompt: str, input_fn: InputFn = input) -> float:
    while True:
        raw = input_fn(prompt)
        try:
            value = float(raw.strip())
        except ValueError:
            value = math.nan
        if math.isfinite(value):
            return value
        print("Invalid numeric input. Please try again.")


def read_str(prompt: str, allow_empty: bool = False, input_fn: InputFn = input) -> str:
    while True:
        value = input_fn(prompt)
        if not allow_empty and not value:
            print("Input cannot be empty. Please try again.")
            continue
        return value


def read_unique_id(store: ClientStore, input_fn: InputFn = input) -> int:
    while True:
        client_id = read_int("Enter client ID (>= 0): ", input_fn)
        if client_id < 0:
            print("Error: ID cannot be negative.")
            continue
        if client_id in store:
            print("Error: client with this ID already exists. Please try a different ID.")
            continue
        return client_id


# -------------------------------------------------------------------
# Menu actions
# -------------------------------------------------------------------

def add_client(store: ClientStore, rng: np.random.Generator, input_fn: InputFn = input) -> Optional[Client]:
    client = Client(
        client_id=read_unique_id(store, input_fn),
        client_name=read_str("Enter client name: ", input_fn=input_fn),
        client_age=read_int("Enter client age: ", input_fn),
        phone_number=read_str("Enter phone number: ", input_fn=input_fn),
        address=read_str("Enter address: ", input_fn=input_fn),
        policy_type=read_str("Enter policy type (Basic/Premium/Gold): ", input_fn=input_fn),
        car_value=read_float("Enter car value: ", input_fn),
        nb_accidents_due=read_int("Enter number of at-fault accidents: ", input_fn),
        nb_accidents_not_due=read_int("Enter number of not-at-fault accidents: ", input_fn),
        nb_suspensions=read_int("Enter number of license suspensions: ", input_fn),
    )

    result = validate(client)
    if not result:
        print(f"Error: {result.reason}")
        print("Client data invalid. Cannot insert.")
        return None

    if not store.insert(client):
        print("Client could not be inserted.")
        return None

    score_client(client, rng)
    print(f"✔ Client {client.client_id} added.")
    return client


def find_client(store: ClientStore, input_fn: InputFn = input) -> Optional[Client]:
    client = store.lookup(read_int("Enter client ID to search: ", input_fn))
    if client is None:
        print("Client not found.")
    else:
        print(render_clients([client]))
    return client


def remove_client(store: ClientStore, input_fn: InputFn = input) -> bool:
    client_id = read_int("Enter client ID to remove: ", input_fn)
    removed = store.delete(client_id)
    if removed:
        print(f"✔ Client {client_id} removed.")
    else:
        print(f"Client {client_id} not found.")
    return removed


def show_all_clients(store: ClientStore) -> None:
    if not store:
        print("No clients found in the system.")
        return
    print("\n===== ALL CLIENTS (Sorted by ID) =====")
    print(render_clients(store.traverse_ordered()))


def show_summary(store: ClientStore) -> None:
    summary = portfolio_summary(store)
    print(f"ℹ Clients: {summary['n_clients']}")
    print(f"ℹ Mean risk: {summary['mean_risk']:.2f}")
    print(f"ℹ Mean trust: {summary['mean_trust']:.2f}")
    print(f"ℹ Total monthly premium: {summary['total_monthly_premium']:.2f}")
    for policy, n in summary["clients_by_policy"].items():
        print(f"ℹ   {policy}: {n}")


# -------------------------------------------------------------------
# Menu loop
# -------------------------------------------------------------------

MENU = """
===== CAR INSURANCE CLIENT REGISTRY =====
1. Add a client
2. Find a client by ID
3. Remove a client by ID
4. Show all clients
5. Recompute all scores
6. Load sample data
7. Portfolio summary
0. Exit"""


def run_menu(store: ClientStore, rng: np.random.Generator, input_fn: InputFn = input) -> None:
    while True:
        print(MENU)
        try:
            choice = read_int("Choose an option: ", input_fn)

            if choice == 0:
                break
            elif choice == 1:
                add_client(store, rng, input_fn)
            elif choice == 2:
                find_client(store, input_fn)
            elif choice == 3:
                remove_client(store, input_fn)
            elif choice == 4:
                show_all_clients(store)
            elif choice == 5:
                print("▶ Recomputing all client scores...")
                n = recompute_all(store, rng)
                print(f"✔ {n} client scores updated.")
            elif choice == 6:
                n = load_sample_data(store, rng)
                print(f"✔ Sample data loaded ({n} clients).")
            elif choice == 7:
                show_summary(store)
            else:
                print("Invalid option. Please try again.")
        except EOFError:
            print()
            break

    print("Goodbye.")


# -------------------------------------------------------------------
# Main entrypoint
# -------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-memory car-insurance client registry.")
    parser.add_argument("--samples", action="store_true", help="start with the five demo clients loaded")
    parser.add_argument("--seed", type=int, default=config.SEED_RISK_NOISE, help="seed for the risk noise term")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL,
        help="logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    rng = make_rng(args.seed)
    store = ClientStore()

    if args.samples:
        n = load_sample_data(store, rng)
        print(f"✔ Sample data loaded ({n} clients).")

    run_menu(store, rng, input_fn)


# -------------------------------------------------------------------
# CLI hook
# -------------------------------------------------------------------

if __name__ == "__main__":
    main()
