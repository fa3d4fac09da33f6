"""Send In/Out log entries to a running backend."""

import argparse
import requests

BACKEND_URL = "http://localhost:8080/api/v1"


def simulate(zone, event_type, count, api_key=None):
    headers = {"X-API-Key": api_key} if api_key else {}
    resp = requests.post(f"{BACKEND_URL}/log-entries",
                         json={"zone_id": zone, "type": event_type, "car_count": count},
                         headers=headers, timeout=10)
    if resp.status_code != 200:
        print(f"❌ {event_type} ×{count} @ {zone} → HTTP {resp.status_code}: {resp.json()}")
        return
    body = resp.json()
    z, sync = body["zone"], body["sync"]
    print(f"✅ {event_type} ×{count} @ {zone} → in={z['cars_in']} out={z['cars_out']} "
          f"available={z['available_space']}/{z['capacity']} | sheet sync ok={sync['ok']}"
          + (f" ({sync['error']})" if sync["error"] else ""))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulate parking log entries")
    parser.add_argument("--zone", default="Red")
    parser.add_argument("--type", default="In", choices=["In", "Out"])
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument("--repeat", type=int, default=1)
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--api-key", default=None)
    args = parser.parse_args()

    BACKEND_URL = args.url
    for _ in range(args.repeat):
        simulate(args.zone, args.type, args.count, args.api_key)
