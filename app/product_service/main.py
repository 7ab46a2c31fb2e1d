# app/product_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Food Catalog (dev mock)")


FOODS = {
    "0b6f3c1e-5a4d-4f7e-9c1a-2d3e4f5a6b70": {
        "id": "0b6f3c1e-5a4d-4f7e-9c1a-2d3e4f5a6b70",
        "name": "Margherita Pizza",
        "category": ["pizza", "veg"],
        "price": {"org": 12.5, "mrp": 14.0, "off": 10},
    },
    "1c7a4d2f-6b5e-4a8f-8d2b-3e4f5a6b7c81": {
        "id": "1c7a4d2f-6b5e-4a8f-8d2b-3e4f5a6b7c81",
        "name": "Chicken Biryani",
        "category": ["rice", "non-veg"],
        "price": {"org": 9.0, "mrp": 11.0, "off": 18},
    },
    "2d8b5e3a-7c6f-4b9a-9e3c-4f5a6b7c8d92": {
        "id": "2d8b5e3a-7c6f-4b9a-9e3c-4f5a6b7c8d92",
        "name": "Paneer Wrap",
        "category": ["wraps", "veg"],
        "price": {"org": 6.5, "mrp": 7.5, "off": 13},
    },
}


@app.get("/products/{product_id}")
def get_product(product_id: str):
    food = FOODS.get(product_id)
    if not food:
        raise HTTPException(status_code=404, detail="Product not found")
    return food
