#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import Any

import httpx
from httpx import ConnectError


def build_draft(workspace: str, duration: str, whatsapp: str) -> dict[str, Any]:
    return {
        "workspace_type": workspace,
        "date": (date.today() + timedelta(days=1)).isoformat(),
        "time_slot": "10:00 AM",
        "duration": duration,
        "customer_name": "Demo Customer",
        "customer_email": "demo@example.com",
        "customer_phone": whatsapp,
        "customer_whatsapp": whatsapp,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk a booking through create -> code -> confirm")
    parser.add_argument("--url", default="http://127.0.0.1:8001/api/v1")
    parser.add_argument("--workspace", default="Hot Desk")
    parser.add_argument("--duration", default="1-hour")
    parser.add_argument("--whatsapp", default="+15551234567")
    parser.add_argument("--code", default="", help="Code received on WhatsApp (prompted if omitted)")
    args = parser.parse_args()

    client = httpx.Client(base_url=args.url, timeout=10.0)
    try:
        resp = client.post("/bookings", json=build_draft(args.workspace, args.duration, args.whatsapp))
    except ConnectError:
        print("Connection refused. Is the FastAPI server running?")
        print("Try: uvicorn deskbook.main:app --reload --port 8001")
        return

    print(resp.status_code, resp.text)
    if resp.status_code != 201:
        return
    created = resp.json()
    booking_id = created["booking"]["id"]
    session_id = created["session_id"]

    resp = client.post(f"/bookings/{booking_id}/code", json={"session_id": session_id})
    print(resp.status_code, resp.text)
    if resp.status_code != 200:
        return

    code = args.code or resp.json().get("demo_code") or input("Confirmation code: ").strip()
    resp = client.post(f"/bookings/{booking_id}/confirm", json={"session_id": session_id, "code": code})
    print(resp.status_code, resp.text)


if __name__ == "__main__":
    main()
