"""Stockroom load testing: Locust entry point.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:4731

    # Single-product contention only:
    locust -f loadtests/locustfile.py ContendedSellUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py StockUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.stock import CONTENDED_PRODUCT, ContendedSellUser, StockUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the API error body so you see "Insufficient stock: requested 5,
    on hand 0" instead of just "400".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Report the contended product's final balance."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    if CONTENDED_PRODUCT.product_id is None or not environment.host:
        return

    resp = requests.get(f"{environment.host}/products", timeout=10)
    for product in resp.json().get("products", []):
        if product["id"] == CONTENDED_PRODUCT.product_id:
            print(f"[LOADTEST] Contended product balance: {product['quantity']}")
            print(f"[LOADTEST] Rejected sales (insufficient stock): {CONTENDED_PRODUCT.rejected_sales}")
            if product["quantity"] < 0:
                print("[LOADTEST] FAIL: stock went negative")
    print()
