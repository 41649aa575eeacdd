from __future__ import annotations

SEED_USERS: list[dict[str, object]] = [
    {
        "id": 1,
        "email": "admin@ecommerce.com",
        "password": "admin123",
        "name": "Sarah Johnson",
        "profilePic": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=150&h=150&fit=crop",
        "role": "Super Admin",
        "joinDate": "2023-01-15",
    },
    {
        "id": 2,
        "email": "manager@ecommerce.com",
        "password": "manager123",
        "name": "Michael Chen",
        "profilePic": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop",
        "role": "Manager",
        "joinDate": "2023-03-20",
    },
]


def make_product(
    product_id: int,
    name: str,
    category: str,
    price: float,
    stock: int,
    sales: int,
    *,
    rating: float = 4.5,
    reviews: int = 100,
    image: str = "",
) -> dict[str, object]:
    return {
        "id": product_id,
        "name": name,
        "category": category,
        "price": price,
        "stock": stock,
        "rating": rating,
        "reviews": reviews,
        "sales": sales,
        "image": image,
    }


_IMG = "https://images.unsplash.com/{}?w=400&h=400&fit=crop"

SEED_PRODUCTS: list[dict[str, object]] = [
    make_product(
        1, "Wireless Headphones", "Electronics", 199.99, 45, 234,
        rating=4.7, reviews=1250, image=_IMG.format("photo-1505740420928-5e560c06d30e"),
    ),
    make_product(
        2, "Smart Watch Pro", "Electronics", 349.99, 28, 189,
        rating=4.6, reviews=890, image=_IMG.format("photo-1523275335684-37898b6baf30"),
    ),
    make_product(
        3, "Running Shoes", "Sports", 129.99, 67, 456,
        rating=4.4, reviews=2100, image=_IMG.format("photo-1542291026-7eec264c27ff"),
    ),
    make_product(
        4, "Leather Backpack", "Fashion", 89.99, 23, 178,
        rating=4.5, reviews=640, image=_IMG.format("photo-1553062407-98eeb64c6a62"),
    ),
    make_product(
        5, "Coffee Maker Deluxe", "Home", 159.99, 34, 145,
        rating=4.3, reviews=520, image=_IMG.format("photo-1495474472287-4d71bcdd2085"),
    ),
    make_product(
        6, "Yoga Mat Premium", "Sports", 49.99, 120, 389,
        rating=4.8, reviews=1800, image=_IMG.format("photo-1601925260368-ae2f83cf8b7f"),
    ),
    make_product(
        7, "Bluetooth Speaker", "Electronics", 79.99, 15, 312,
        rating=4.2, reviews=970, image=_IMG.format("photo-1608043152269-423dbba4e7e1"),
    ),
    make_product(
        8, "Designer Sunglasses", "Fashion", 159.99, 42, 98,
        rating=4.1, reviews=310, image=_IMG.format("photo-1572635196237-14b3f281503f"),
    ),
    make_product(
        9, "Ceramic Plant Pot Set", "Home", 39.99, 88, 167,
        rating=4.6, reviews=430, image=_IMG.format("photo-1485955900006-10f4d324d411"),
    ),
    make_product(
        10, "Mechanical Keyboard", "Electronics", 149.99, 19, 276,
        rating=4.9, reviews=1430, image=_IMG.format("photo-1511467687858-23d96c32e4ae"),
    ),
    make_product(
        11, "Classic Novel Collection", "Books", 59.99, 54, 134,
        rating=4.7, reviews=260, image=_IMG.format("photo-1512820790803-83ca734da794"),
    ),
    make_product(
        12, "Stainless Water Bottle", "Sports", 24.99, 210, 521,
        rating=4.4, reviews=1120, image=_IMG.format("photo-1602143407151-7111542de6e8"),
    ),
]
