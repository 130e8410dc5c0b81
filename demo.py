#!/usr/bin/env python
import os
from sdk.pycatalog import CatalogClient

def main():
    c = CatalogClient(base_url="http://127.0.0.1:3000", api_key=os.environ.get("API_KEY"))

    print(c.welcome())

    # -----------------------------
    # Seed data
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nElectronics only...")
    print(c.list_products(category="Electronics"))

    print("\nSearching for 'phone'...")
    print(c.list_products(search="phone"))

    print("\nFirst page, one per page...")
    print(c.list_products(page=1, limit=1))

    # -----------------------------
    # Create / update / delete
    # -----------------------------
    print("\nCreating a product...")
    kettle = c.create_product("Kettle", "1.7L stainless", 35, "kitchen", in_stock=True)
    print(kettle)

    print("\nMarking it out of stock...")
    print(c.update_product(kettle["id"], "Kettle", "1.7L stainless", 30, "kitchen", in_stock=False))

    print("\nCategory stats...")
    print(c.category_stats())

    print("\nDeleting it again...")
    print(c.delete_product(kettle["id"]))

    print("\nCategory stats after delete...")
    print(c.category_stats())

if __name__ == "__main__":
    main()
