"""
Smoke test against a running server: status, one submission, listing.

Usage: python scripts/smoke_submit.py [base_url]
"""
import asyncio
import json
import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"

SAMPLE_FORM = {
    "fullName": "  Prueba Smoke  ",
    "phone": "6 1234 5678",
    "email": "smoke@correo.es",
    "city": "Madrid",
    "privacyAccepted": True,
}


async def main():
    try:
        async with httpx.AsyncClient(base_url=BASE_URL, timeout=10) as client:
            print("🩺 Checking status...")
            response = await client.get("/api/status")
            print(f"✅ Status Code: {response.status_code}")
            print(json.dumps(response.json(), indent=2, ensure_ascii=False))

            print("\n📨 Submitting sample form...")
            response = await client.post("/api/submit", json=SAMPLE_FORM)
            print(f"{'✅' if response.status_code == 200 else '❌'} Status Code: {response.status_code}")
            print(json.dumps(response.json(), indent=2, ensure_ascii=False))

            print("\n📋 Listing submissions...")
            response = await client.get("/api/submissions")
            if response.status_code == 200:
                submissions = response.json()
                print(f"✅ {len(submissions)} submission(s) stored")
                if submissions:
                    print(json.dumps(submissions[-1], indent=2, ensure_ascii=False))
            else:
                print(f"⚠️  Listing unavailable (Status {response.status_code})")
    except httpx.ConnectError:
        print("❌ Connection Error: Backend server is not running!")
        print("\n💡 Start the backend with: python run.py")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
