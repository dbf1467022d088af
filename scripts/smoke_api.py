#!/usr/bin/env python3
"""Smoke test for a running server (uvicorn pricing_catalog.main:app --port 8001)."""

import sys

import httpx


BASE_URL = "http://127.0.0.1:8001"


def check_health() -> bool:
    print("=" * 60)
    print("Testing GET /health")
    print("=" * 60)
    try:
        response = httpx.get(f"{BASE_URL}/health", timeout=10.0)
        response.raise_for_status()
        print(f"✅ Success! {response.json()}")
        return True
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


def check_catalog() -> bool:
    print("\n" + "=" * 60)
    print("Testing POST /api/catalog")
    print("=" * 60)
    try:
        response = httpx.post(f"{BASE_URL}/api/catalog", timeout=30.0)
        data = response.json()
        if response.status_code >= 400:
            print(f"❌ HTTP Error: {response.status_code}")
            print(f"Response: {data.get('error')}")
            return False

        catalog = data.get("catalog", [])
        print(f"✅ Success! {len(catalog)} catalog item(s)\n")
        for item in catalog[:5]:
            print(f"  [{item.get('id')}] {item.get('service_name')} / {item.get('variant_name')}")
        return True
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


if __name__ == "__main__":
    ok = check_health()
    ok = check_catalog() and ok
    sys.exit(0 if ok else 1)
