#!/usr/bin/env python3
"""
GBM Connect — Перевірка API

Запуск:
    1. Спочатку запусти сервер:
       python scripts/run_api.py

    2. В іншому терміналі:
       python scripts/check_matches_api.py
       python scripts/check_matches_api.py --user u-002

Або з curl:
    curl -H "X-User-Id: u-001" http://localhost:8000/api/community/matches
"""

import argparse
import requests

BASE_URL = "http://localhost:8000"


def print_header(title):
    print("\n" + "=" * 60)
    print(f"🧪 {title}")
    print("=" * 60)


def print_result(success, message):
    icon = "✅" if success else "❌"
    print(f"   {icon} {message}")


def check_health():
    """Перевірка 1: Health check"""
    print_header("CHECK 1: Health")

    try:
        r = requests.get(f"{BASE_URL}/api/health", timeout=5)
        data = r.json()

        print_result(r.status_code == 200, f"Status: {r.status_code}")
        print_result(data.get("status") == "ok", f"API Status: {data.get('status')}")
        print(f"   📊 Patients: {data.get('patients')}")

        return r.status_code == 200
    except requests.RequestException as e:
        print_result(False, f"Error: {e}")
        return False


def check_matches(user_id, limit):
    """Перевірка 2: Схожі пацієнти"""
    print_header(f"CHECK 2: Matches for {user_id}")

    try:
        r = requests.get(
            f"{BASE_URL}/api/community/matches",
            params={"limit": limit},
            headers={"X-User-Id": user_id},
            timeout=5,
        )
        print_result(r.status_code == 200, f"Status: {r.status_code}")
        if r.status_code != 200:
            print(f"   {r.json().get('detail')}")
            return False

        data = r.json()
        ids = [m["user_id"] for m in data["matches"]]
        print_result(user_id not in ids, "Requester excluded")

        scores = [m["similarity"] for m in data["matches"]]
        print_result(scores == sorted(scores, reverse=True), "Sorted by similarity")

        print(f"   📋 {data['count']} matches:")
        for m in data["matches"]:
            print(f"      - {m['name']}: {m['similarity']:.3f} ({m['phase'] or '—'}) {m['shared_attributes']}")

        return True
    except requests.RequestException as e:
        print_result(False, f"Error: {e}")
        return False


def check_missing_profile():
    """Перевірка 3: Користувач без профілю"""
    print_header("CHECK 3: Missing profile")

    try:
        r = requests.get(
            f"{BASE_URL}/api/community/matches",
            headers={"X-User-Id": "no-such-user"},
            timeout=5,
        )
        print_result(r.status_code == 404, f"Status: {r.status_code} ({r.json().get('detail')})")
        return r.status_code == 404
    except requests.RequestException as e:
        print_result(False, f"Error: {e}")
        return False


def main():
    global BASE_URL

    parser = argparse.ArgumentParser(description='GBM Connect API check')
    parser.add_argument('--url', default=BASE_URL)
    parser.add_argument('--user', default='u-001')
    parser.add_argument('--limit', type=int, default=10)
    args = parser.parse_args()
    BASE_URL = args.url.rstrip("/")

    results = [
        check_health(),
        check_matches(args.user, args.limit),
        check_missing_profile(),
    ]

    print("\n" + "=" * 60)
    print(f"📊 Passed: {sum(results)}/{len(results)}")
    print("=" * 60)


if __name__ == "__main__":
    main()
