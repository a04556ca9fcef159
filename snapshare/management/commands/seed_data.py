DEMO_EMAIL = "demo@example.com"
DEMO_USERNAME = "demo_user"
DEMO_BIO = "Just another Instagram clone user!"

# (image_url, caption, age in hours)
demo_posts = [
    (
        "https://images.unsplash.com/photo-1469474968028-56623f02e42e",
        "Nature is amazing! 🌲",
        48,
    ),
    (
        "https://images.unsplash.com/photo-1506905925346-21bda4d32df4",
        "Beautiful mountain landscape 🏔️",
        24,
    ),
]

demo_comment = ("Wow, stunning view!", 12)

post_image_pool = [
    "https://images.unsplash.com/photo-1500530855697-b586d89ba3ee",
    "https://images.unsplash.com/photo-1441974231531-c6227db76b6e",
    "https://images.unsplash.com/photo-1470071459604-3b5ec3a7fe05",
    "https://images.unsplash.com/photo-1501785888041-af3ef285b470",
    "https://images.unsplash.com/photo-1482192596544-9eb780fc7f66",
    "https://images.unsplash.com/photo-1433086966358-54859d0ed716",
]
