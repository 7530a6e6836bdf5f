import json
from fastapi.testclient import TestClient
from currency_converter.main import create_app
from currency_converter.core.config import Settings

"""Smoke test for POST /conversions/sum.
Sums the same basket under the static source into each supported currency and
prints the totals.
"""

BASKET = [
    {"amount": 2, "currency": "USD"},
    {"amount": 1, "currency": "USD"},
    {"amount": 2, "currency": "GBP"},
    {"amount": 10, "currency": "EUR"},
]


def run():
    app = create_app(settings_override=Settings(rate_source="static"))
    client = TestClient(app)
    codes = client.get("/conversions/currencies").json()
    output = {}
    for code in codes:
        resp = client.post("/conversions/sum", json={"target": code, "amounts": BASKET})
        output[code] = resp.json()
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    run()
