#!/usr/bin/env python
"""
Seed a running community API with sample developers and connections.

Usage:
    python -m devgraph.api.main &
    python scripts/seed_community.py [--base-url http://127.0.0.1:3000]
"""

import argparse
import os

import requests

USERS = [
    ("ferris", "The friendly crab", ["async", "embedded", "wasm"]),
    ("rustacean", "Writes CLIs for fun", ["async", "cli"]),
    ("crab", "Bare-metal enthusiast", ["embedded", "no_std"]),
    ("gopher", "Visiting from another ecosystem", ["networking", "cli"]),
    ("pythonista", "Data pipelines", ["data", "async"]),
]

CONNECTIONS = [
    ("ferris", "crab", "Mentor", ["embedded"], "2023-04-01"),
    ("rustacean", "ferris", "Follower", [], "2023-09-12"),
    ("gopher", "crab", "Collaborator", ["networking"], "2024-01-20"),
]


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://127.0.0.1:3000").rstrip("/")


def post(base_url: str, path: str, payload: dict) -> requests.Response:
    r = requests.post(f"{base_url}{path}", json=payload, timeout=10)
    if r.status_code == 409:
        print(f"  exists: {payload}")
    else:
        r.raise_for_status()
    return r


def main():
    parser = argparse.ArgumentParser(description="Seed the community API with sample data")
    parser.add_argument("--base-url", default=get_api_base_url())
    args = parser.parse_args()
    base_url = args.base_url.rstrip("/")

    print(f"Seeding {base_url}")
    for username, bio, interests in USERS:
        post(base_url, "/api/users", {"username": username, "bio": bio, "interests": interests})
    for from_user, to_user, kind, tags, since in CONNECTIONS:
        post(base_url, "/api/connections", {
            "from": from_user, "to": to_user, "kind": kind, "tags": tags, "since": since,
        })

    for username, _, _ in USERS:
        r = requests.get(f"{base_url}/api/users/{username}/recommendations", timeout=10)
        r.raise_for_status()
        recs = r.json()["recommendations"]
        summary = ", ".join(
            f"{rec['username']} ({rec['shared_interest_count']}/{rec['mutual_connection_count']})"
            for rec in recs
        )
        print(f"  {username}: {summary or '-'}")


if __name__ == "__main__":
    main()
