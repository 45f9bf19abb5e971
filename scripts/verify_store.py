import asyncio
import os
import sys

# Add project root to path so we can import src
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.config import settings
from src.core.errors import RecordNotFoundError, StoreError
from src.core.store import create_store
from src.services.records import new_record_id, utc_now_iso


async def main():
    print("--- Verifying Supabase store ---")
    print(f"Store: {settings.store_rest_url}")

    store = create_store(settings)
    try:
        print("\n--- 1. Read access ---")
        for table in ("contacts", "deals", "tasks", "activities"):
            rows = await store.select(table, limit=1)
            print(f"✅ {table}: readable ({len(rows)} row sampled)")

        print("\n--- 2. Write access ---")
        test_phone = os.getenv("TEST_PHONE", "+971500000000")
        now = utc_now_iso()
        record = {
            "id": new_record_id(),
            "name": "Verification Test Contact",
            "email": "",
            "phone": test_phone,
            "company": "",
            "position": "",
            "createdAt": now,
            "updatedAt": now,
        }
        created = await store.insert("contacts", [record])
        print(f"✅ Contact created with ID: {created[0]['id']}")

        fetched = await store.select_single("contacts", filters={"id": record["id"]})
        print(f"✅ Contact fetched back: {fetched['name']}")

        await store.delete("contacts", filters={"id": record["id"]})
        try:
            await store.select_single("contacts", filters={"id": record["id"]})
            print("❌ Contact still present after delete")
        except RecordNotFoundError:
            print("✅ Contact deleted")

    except StoreError as e:
        print(f"❌ Store check failed: {e.message} (code={e.code}, hint={e.hint})")

    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
