"""
Demo client for a running CheckoutRail API.

Fills a cart for one session per payment method, pays, and prints the
result record the result page would show.
"""

import os
import uuid

import httpx

API_URL = os.environ.get("CHECKOUT_API_URL", "http://localhost:8030")

PRODUCTS = [
    {"id": 1, "name": "Wireless Headphones", "price": 89.99, "image": "headphones.jpg"},
    {"id": 2, "name": "Smart Watch", "price": 199.50, "image": "watch.jpg"},
    {"id": 3, "name": "USB-C Cable", "price": 12.00, "image": "cable.jpg"},
]


def checkout(client: httpx.Client, payment_method: str) -> dict:
    headers = {
        "X-Session-Id": f"demo-{uuid.uuid4().hex[:8]}",
        "X-Correlation-Id": f"chk_demo_{uuid.uuid4().hex[:8]}",
    }
    for product in PRODUCTS:
        client.post("/cart/items", json=product, headers=headers).raise_for_status()

    resp = client.post(
        "/checkout/pay",
        json={"payment_method": payment_method},
        headers=headers,
        timeout=10.0,
    )
    resp.raise_for_status()
    return client.get("/payment-result", headers=headers).json()


def main():
    with httpx.Client(base_url=API_URL) as client:
        methods = client.get("/checkout/payment-methods").json()["methods"]
        for method in methods:
            result = checkout(client, method)
            status = "OK  " if result["success"] else "FAIL"
            print(
                f"{status} {result['provider']:<12} {result['transactionId']:<32} "
                f"{result['amount']:.2f}€  {result['message']}"
            )


if __name__ == "__main__":
    main()
