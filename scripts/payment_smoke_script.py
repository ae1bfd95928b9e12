#!/usr/bin/env python3
import argparse
import dataclasses
import re
import sys
import time
from concurrent.futures import ThreadPoolExecutor

import httpx

HASH_PATTERN = re.compile(r"[0-9a-f]{128}")
TXN_PATTERN = re.compile(r"TXN_\d+_[0-9a-z]{9}")
SIGNED_FIELDS = ("key", "txnid", "amount", "productinfo", "firstname", "email", "hash")


@dataclasses.dataclass
class CheckResult:
    name: str
    passed: bool
    detail: str
    extra: str | None = None


def make_intent(amount: str = "499", email: str = "asha@example.com") -> dict:
    return {
        "amount": amount,
        "planName": "Basic",
        "planType": "startup",
        "customerName": "Asha Rao",
        "customerEmail": email,
        "customerMobile": "+919876543210",
    }


def initialize(client: httpx.Client, base_url: str, payload: dict) -> httpx.Response:
    return client.post(f"{base_url}/api/payment/initialize", json=payload)


def verification_body(payment_data: dict, status: str = "success") -> dict:
    body = {name: payment_data[name] for name in SIGNED_FIELDS}
    body["status"] = status
    return body


def run_health_check(client: httpx.Client, base_url: str) -> CheckResult:
    try:
        resp = client.get(f"{base_url}/api/health")
        if resp.status_code != 200:
            return CheckResult("Health Check", False, f"Expected 200, got {resp.status_code}")
        body = resp.json()
        if body.get("status") != "OK":
            return CheckResult("Health Check", False, f"Expected OK, got {body.get('status')!r}")
        return CheckResult("Health Check", True, "Health endpoint working", f"environment={body.get('environment')}")
    except Exception as exc:  # noqa: BLE001
        return CheckResult("Health Check", False, f"Exception: {exc}")


def run_initialize(client: httpx.Client, base_url: str) -> CheckResult:
    try:
        resp = initialize(client, base_url, make_intent())
        if resp.status_code != 200:
            return CheckResult("Initialize", False, f"Expected 200, got {resp.status_code}")
        data = resp.json()["paymentData"]
        if not TXN_PATTERN.fullmatch(data["txnid"]):
            return CheckResult("Initialize", False, f"Unexpected transaction id {data['txnid']!r}")
        if not HASH_PATTERN.fullmatch(data["hash"]):
            return CheckResult("Initialize", False, "Hash is not 128 lowercase hex characters")
        if data["productinfo"] != "Startup Plan - Basic":
            return CheckResult("Initialize", False, f"Unexpected productinfo {data['productinfo']!r}")
        return CheckResult("Initialize", True, f"Payment initialized as {data['txnid']}")
    except Exception as exc:  # noqa: BLE001
        return CheckResult("Initialize", False, f"Exception: {exc}")


def run_rejection(client: httpx.Client, base_url: str) -> CheckResult:
    try:
        resp = initialize(client, base_url, make_intent(email="not-an-email"))
        if resp.status_code != 400:
            return CheckResult("Validation Rejection", False, f"Expected 400, got {resp.status_code}")
        return CheckResult("Validation Rejection", True, f"Rejected with {resp.json().get('message')!r}")
    except Exception as exc:  # noqa: BLE001
        return CheckResult("Validation Rejection", False, f"Exception: {exc}")


def run_verify_round_trip(client: httpx.Client, base_url: str) -> CheckResult:
    try:
        data = initialize(client, base_url, make_intent()).json()["paymentData"]
        resp = client.post(f"{base_url}/api/payment/verify", json=verification_body(data))
        if resp.status_code != 200:
            return CheckResult("Verify Round Trip", False, f"Expected 200, got {resp.status_code}")
        if resp.json().get("isValid") is not True:
            return CheckResult("Verify Round Trip", False, "Hash of an untouched payload did not verify")
        return CheckResult("Verify Round Trip", True, "Untouched payload verified")
    except Exception as exc:  # noqa: BLE001
        return CheckResult("Verify Round Trip", False, f"Exception: {exc}")


def run_tampered_verify(client: httpx.Client, base_url: str) -> CheckResult:
    try:
        data = initialize(client, base_url, make_intent()).json()["paymentData"]
        body = verification_body(data)
        body["amount"] = f"{body['amount']}.00"
        resp = client.post(f"{base_url}/api/payment/verify", json=body)
        if resp.status_code != 200:
            return CheckResult("Tampered Verify", False, f"Expected 200, got {resp.status_code}")
        if resp.json().get("isValid") is not False:
            return CheckResult("Tampered Verify", False, "Reformatted amount still verified")
        return CheckResult("Tampered Verify", True, "Reformatted amount rejected")
    except Exception as exc:  # noqa: BLE001
        return CheckResult("Tampered Verify", False, f"Exception: {exc}")


def run_concurrent_initialize(client: httpx.Client, base_url: str, concurrent_count: int) -> CheckResult:
    payloads = [make_intent(amount=str(100 + i)) for i in range(concurrent_count)]

    def post_one(payload: dict) -> httpx.Response:
        return initialize(client, base_url, payload)

    try:
        with ThreadPoolExecutor(max_workers=concurrent_count) as ex:
            responses = list(ex.map(post_one, payloads))
        bad_codes = [resp.status_code for resp in responses if resp.status_code != 200]
        if bad_codes:
            return CheckResult("Concurrent Initialize", False, f"Concurrent initialize failures: {bad_codes}")
        txn_ids = {resp.json()["transactionId"] for resp in responses}
        if len(txn_ids) != concurrent_count:
            return CheckResult("Concurrent Initialize", False, "Duplicate transaction ids returned")
        return CheckResult("Concurrent Initialize", True, f"{concurrent_count} concurrent intents got distinct ids")
    except Exception as exc:  # noqa: BLE001
        return CheckResult("Concurrent Initialize", False, f"Exception: {exc}")


def print_report(results: list[CheckResult], total_seconds: float) -> int:
    passed = sum(1 for r in results if r.passed)
    total = len(results)
    verdict = "PASS" if passed == total else "FAIL"
    print(f"RESULT: {verdict} ({passed} / {total} checks passed)\n")
    print("Check results:")
    for res in results:
        state = "PASS" if res.passed else "FAIL"
        print(f"- {state} | {res.name}")
        print(f"  - {res.detail}")
        if res.extra:
            print(f"  - {res.extra}")
    print(f"\nTotal time: {total_seconds:.1f}s")
    return 0 if passed == total else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Payment bridge smoke checks")
    parser.add_argument("--base-url", default="http://localhost:3001", help="Base URL of API")
    parser.add_argument("--request-timeout-seconds", type=float, default=10.0, help="HTTP request timeout")
    parser.add_argument("--concurrent-count", type=int, default=5, help="Number of concurrent initialize calls")
    args = parser.parse_args()

    started = time.perf_counter()
    with httpx.Client(timeout=args.request_timeout_seconds) as client:
        results = [
            run_health_check(client, args.base_url),
            run_initialize(client, args.base_url),
            run_rejection(client, args.base_url),
            run_verify_round_trip(client, args.base_url),
            run_tampered_verify(client, args.base_url),
            run_concurrent_initialize(client, args.base_url, args.concurrent_count),
        ]
    total = time.perf_counter() - started
    return print_report(results, total)


if __name__ == "__main__":
    sys.exit(main())
