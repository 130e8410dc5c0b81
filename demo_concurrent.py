import asyncio
import os
from sdk.pycatalog import CatalogClient

async def create_one(client, n):
    r = await client.create_product_async(f"Gadget {n}", "demo item", 10 + n, "gadgets")
    if r.status_code == 201:
        product = r.json()
        print(f"✅ Gadget {n} created with id {product['id']}")
        return product["id"]
    print(f"❌ Gadget {n} failed with {r.status_code}: {r.text}")
    return None

async def main():
    c = CatalogClient(base_url="http://127.0.0.1:3000", api_key=os.environ.get("API_KEY"))

    print("\n⚡ Creating 20 products concurrently...")
    ids = await asyncio.gather(*(create_one(c, n) for n in range(20)))
    created = [i for i in ids if i]

    print(f"\n🆔 {len(created)} created, {len(set(created))} distinct ids")
    print("📊 Stats:", c.category_stats())

    # Clean up
    for pid in created:
        c.delete_product(pid)
    print("📊 Stats after cleanup:", c.category_stats())

if __name__ == "__main__":
    asyncio.run(main())
