#!/usr/bin/env python
"""
Quick smoke test for the pages and operational routes of a running server.

Usage:
  python scripts/check_pages.py
"""
import os
import sys
from typing import List, Optional, Tuple

import requests
from dotenv import load_dotenv

# Load environment variables (e.g., for PORT if customized)
load_dotenv()

BASE_URL = f"http://localhost:{os.getenv('PORT', '8000')}"

# Format: (path, expected_status, expected_location)
ENDPOINTS: List[Tuple[str, int, Optional[str]]] = [
    ("/", 307, "/one"),
    ("/one", 200, None),
    ("/two", 200, None),
    ("/three", 404, None),
    ("/v1/health", 200, None),
    ("/v1/version", 200, None),
    ("/v1/settings", 200, None),
]


def check_endpoint(endpoint: str, expected_status: int, location: Optional[str]) -> bool:
    """Hit a single GET endpoint without following redirects."""
    url = f"{BASE_URL}{endpoint}"
    print(f"--- Checking {endpoint} ---")

    try:
        response = requests.get(url, timeout=10, allow_redirects=False)
    except requests.exceptions.ConnectionError:
        print(f"❌ FAILED: Could not connect to {url}. Is the server running?")
        return False
    except requests.exceptions.Timeout:
        print(f"❌ FAILED: Request timed out for {url}.")
        return False

    print(f"Status Code: {response.status_code}")
    content_preview = response.text[:150].replace("\n", " ") + (
        "..." if len(response.text) > 150 else ""
    )
    print(f"Response Preview: {content_preview}")

    if response.status_code != expected_status:
        print(f"❌ FAILED: Expected status {expected_status}, got {response.status_code}")
        return False
    if location is not None and response.headers.get("location") != location:
        print(f"❌ FAILED: Expected redirect to {location}, got {response.headers.get('location')}")
        return False

    print(f"✅ PASSED: Expected status {expected_status}")
    return True


def main():
    """Checks every endpoint and exits non-zero on any failure."""
    print(f"🚀 Checking pages against {BASE_URL}...\n")

    results = [check_endpoint(ep, status, loc) for ep, status, loc in ENDPOINTS]
    failed = len(results) - sum(results)

    print("\n--- Summary ---")
    print(f"✅ Passed: {sum(results)}")
    print(f"❌ Failed: {failed}")

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
