#!/usr/bin/env python3
"""Post-deploy smoke test for a running Palette API.

Checks every public route against its contract and exits non-zero on any
failure, so a delivery pipeline can gate promotion or trigger rollback.

Usage:
    python scripts/smoke_test.py --base-url http://localhost:8080
    python scripts/smoke_test.py --base-url http://canary.local --expect-version v2
"""

import argparse
import asyncio
import re
import sys
from typing import Optional

import httpx

HSL_PATTERN = re.compile(r"^hsl\(\d+, [\d.]+%, [\d.]+%\)$")


def print_header(title: str, char: str = "=") -> None:
    print("\n" + char * 60)
    print(f" {title}")
    print(char * 60)


def report(name: str, ok: bool, detail: str = "") -> bool:
    print(f"  [{'PASS' if ok else 'FAIL'}] {name}{f'  ({detail})' if detail else ''}")
    return ok


async def run_checks(base_url: str, expect_version: Optional[str]) -> bool:
    results = []

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        r = await client.get("/health")
        results.append(report("GET /health", r.status_code == 200 and r.json().get("status") == "healthy"))
        version = r.json().get("version") if r.status_code == 200 else None

        if expect_version:
            results.append(report("version label", version == expect_version, f"got {version}"))

        r = await client.get("/ready")
        results.append(report("GET /ready", r.status_code == 200 and r.json().get("status") == "ready"))

        r = await client.get("/api")
        palette = r.json().get("palette", []) if r.status_code == 200 else []
        results.append(report(
            "GET /api",
            len(palette) == 5 and all(HSL_PATTERN.match(c) for c in palette),
            f"{len(palette)} colors",
        ))

        r = await client.post("/palette", json={"seedColor": "#FF5733"})
        results.append(report("POST /palette", r.status_code == 200 and r.json().get("seedColor") == "#FF5733"))

        r = await client.post("/palette", json={"seedColor": "DROP TABLE users"})
        results.append(report("POST /palette rejects blocked seed", r.status_code == 400))

        r = await client.get("/metrics")
        results.append(report("GET /metrics", r.status_code == 200 and "color_palettes_generated_total" in r.text))

        r = await client.get("/version")
        results.append(report("GET /version", r.status_code == 200 and r.json().get("version") == version))

        r = await client.get("/smoke-test-missing")
        results.append(report("unknown route", r.status_code == 404))

    return all(results)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test a running Palette API")
    parser.add_argument("--base-url", default="http://localhost:8080", help="Service base URL")
    parser.add_argument("--expect-version", default=None, help="Fail unless this version label is served")
    args = parser.parse_args()

    print_header(f"Palette API Smoke Test: {args.base_url}")

    try:
        ok = await run_checks(args.base_url, args.expect_version)
    except httpx.HTTPError as e:
        print(f"\n  Connection failed: {e}")
        return 2

    print(f"\n  Overall: {'ALL PASS' if ok else 'SOME FAILURES'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
