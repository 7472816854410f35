#!/usr/bin/env python3
"""Benchmark guarded reads: latency of GET /v1/resources/{id} through the access guard.

Usage:
    export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
    export KEYCLOAK_REALM=fileshare KEYCLOAK_CLIENT_ID=fileshare-api KEYCLOAK_CLIENT_SECRET=fileshare-api-secret
    export BENCH_OWNER=owner BENCH_OWNER_PASSWORD=ownerpass
    export BENCH_USER=testuser BENCH_PASSWORD=testpass
    uv run python scripts/bench_access.py [--num-requests 200]

The owner creates one resource and grants the bench user read; the bench user
then reads it repeatedly. Each request costs one owner lookup and one grant lookup.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> tuple[str, str]:
    """Return (access_token, subject) for a password-grant login."""
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    token = r.json()["access_token"]
    info = httpx.post(
        f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token/introspect",
        data={"token": token, "client_id": client_id, "client_secret": client_secret},
        timeout=30.0,
    )
    info.raise_for_status()
    return token, info.json()["sub"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark guarded resource reads")
    parser.add_argument("--num-requests", type=int, default=200, help="Number of reads")
    parser.add_argument("--output", type=str, default="/results/bench_access.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    keycloak_url = os.environ.get("KEYCLOAK_URL", "http://localhost:8080")
    realm = os.environ.get("KEYCLOAK_REALM", "fileshare")
    client_id = os.environ.get("KEYCLOAK_CLIENT_ID", "fileshare-api")
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET", "fileshare-api-secret")

    print("Getting tokens...")
    owner_token, _ = get_token(
        keycloak_url, realm, client_id, client_secret,
        os.environ.get("BENCH_OWNER", "owner"), os.environ.get("BENCH_OWNER_PASSWORD", "ownerpass"),
    )
    user_token, user_sub = get_token(
        keycloak_url, realm, client_id, client_secret,
        os.environ.get("BENCH_USER", "testuser"), os.environ.get("BENCH_PASSWORD", "testpass"),
    )
    owner_headers = {"Authorization": f"Bearer {owner_token}"}
    user_headers = {"Authorization": f"Bearer {user_token}"}

    with httpx.Client(timeout=60.0) as client:
        r = client.post(
            f"{api_url}/v1/resources",
            json={"name": "bench.txt", "mimetype": "text/plain", "size": 0},
            headers=owner_headers,
        )
        r.raise_for_status()
        resource_id = r.json()["id"]
        r = client.post(
            f"{api_url}/v1/resources/{resource_id}/permissions",
            json={"principal_id": user_sub, "level": "read"},
            headers=owner_headers,
        )
        r.raise_for_status()

        latencies: list[float] = []
        denied = 0
        print(f"Reading resource {resource_id} {args.num_requests} times...")
        start_total = time.perf_counter()
        for _ in range(args.num_requests):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/v1/resources/{resource_id}", headers=user_headers)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                denied += 1
        total_elapsed = time.perf_counter() - start_total

        client.delete(f"{api_url}/v1/resources/{resource_id}", headers=owner_headers)

    n = len(latencies)
    if n == 0:
        print("No successful reads.")
        return 1

    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Guarded read benchmark (n={n}, denied={denied})\n"
        f"  Throughput: {n / total_elapsed:.2f} req/s\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
