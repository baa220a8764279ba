# ============================================
# catalog/seed_data.py — Seed Product List (catalog-seed)
# ============================================

SEED_PRODUCTS = [
    {
        "name": "Wireless Noise-Cancelling Headphones",
        "price": 199.99,
        "description": "Over-ear headphones with active noise cancellation and 30-hour battery life.",
        "category": "Electronics",
        "stock": 25,
        "imageUrl": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e",
    },
    {
        "name": "Smart Fitness Watch",
        "price": 149.99,
        "description": "Tracks heart rate, sleep and workouts; water resistant to 50 m.",
        "category": "Fitness",
        "stock": 40,
        "imageUrl": "https://images.unsplash.com/photo-1523275335684-37898b6baf30",
    },
    {
        "name": "Classic Cotton T-Shirt",
        "price": 19.99,
        "description": "Soft crew-neck tee made from 100% organic cotton.",
        "category": "Clothing",
        "stock": 120,
        "imageUrl": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab",
    },
    {
        "name": "Stainless Steel Chef's Knife",
        "price": 49.99,
        "description": "Eight-inch forged blade with an ergonomic handle.",
        "category": "Home & Kitchen",
        "stock": 35,
        "imageUrl": "https://images.unsplash.com/photo-1593618998160-e34014e67546",
    },
    {
        "name": "The Pragmatic Programmer",
        "price": 39.99,
        "description": "Classic guide to software craftsmanship, 20th anniversary edition.",
        "category": "Books",
        "stock": 15,
        "imageUrl": "https://images.unsplash.com/photo-1544947950-fa07a98d237f",
    },
    {
        "name": "Building Blocks Starter Set",
        "price": 29.99,
        "description": "300-piece set of interlocking bricks for ages 4 and up.",
        "category": "Toys",
        "stock": 60,
        "imageUrl": "https://images.unsplash.com/photo-1587654780291-39c9404d746b",
    },
    {
        "name": "Yoga Mat",
        "price": 24.99,
        "description": "Non-slip 6 mm mat with carrying strap.",
        "category": "Sports",
        "stock": 0,
        "imageUrl": "https://images.unsplash.com/photo-1601925260368-ae2f83cf8b7f",
    },
    {
        "name": "Leather Wallet",
        "price": 34.99,
        "description": "Slim bifold wallet in full-grain leather.",
        "category": "Accessories",
        "stock": 45,
        "imageUrl": "https://images.unsplash.com/photo-1627123424574-724758594e93",
    },
]
