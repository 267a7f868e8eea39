"""Static fixture data for the seeder."""

SEED_USERS = [
    {
        "email": "test1@google.com",
        "full_name": "Test One",
        "password": "Abc123",
        "roles": ["admin"],
    },
    {
        "email": "test2@google.com",
        "full_name": "Test Two",
        "password": "Abc123",
        "roles": ["user", "super-user"],
    },
]

SEED_PRODUCTS = [
    {
        "title": "Men’s Chill Crew Neck Sweatshirt",
        "description": "Introducing the Tesla Chill Collection. The Men’s Chill Crew Neck Sweatshirt has a premium, heavyweight exterior and soft fleece interior for comfort in any season.",
        "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
        "stock": 7,
        "price": 75,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "slug": "mens_chill_crew_neck_sweatshirt",
        "tags": ["sweatshirt"],
        "gender": "men",
    },
    {
        "title": "Men's Quilted Shirt Jacket",
        "description": "The Men's Quilted Shirt Jacket features a uniquely fit, quilted design for warmth and mobility in cold weather seasons.",
        "images": ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
        "stock": 5,
        "price": 200,
        "sizes": ["XS", "S", "M", "XL", "XXL"],
        "slug": "men_quilted_shirt_jacket",
        "tags": ["jacket"],
        "gender": "men",
    },
    {
        "title": "Men's Raven Lightweight Zip Up Bomber Jacket",
        "description": "Introducing the Tesla Raven Collection. The Men's Raven Lightweight Zip Up Bomber has a premium, modern silhouette made from a sustainable bamboo cotton blend for versatility in any season.",
        "images": ["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
        "stock": 10,
        "price": 130,
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "slug": "men_raven_lightweight_zip_up_bomber_jacket",
        "tags": ["shirt"],
        "gender": "men",
    },
    {
        "title": "Men's Turbine Long Sleeve Tee",
        "description": "Introducing the Tesla Turbine Collection. Designed for style, comfort and everyday lifestyle, the Men's Turbine Long Sleeve Tee features a subtle, water-based T logo on the left chest and our Tesla wordmark below the back collar.",
        "images": ["1740280-00-A_0_2000.jpg", "1740280-00-A_1.jpg"],
        "stock": 50,
        "price": 45,
        "sizes": ["XS", "S", "M", "L"],
        "slug": "men_turbine_long_sleeve_tee",
        "tags": ["shirt"],
        "gender": "men",
    },
    {
        "title": "Men's Turbine Short Sleeve Tee",
        "description": "Introducing the Tesla Turbine Collection. Designed for style, comfort and everyday lifestyle, the Men's Turbine Short Sleeve Tee features a subtle, water-based Tesla wordmark across the chest and our T logo below the back collar.",
        "images": ["1741416-00-A_0_2000.jpg", "1741416-00-A_1.jpg"],
        "stock": 50,
        "price": 40,
        "sizes": ["M", "L", "XL", "XXL"],
        "slug": "men_turbine_short_sleeve_tee",
        "tags": ["shirt"],
        "gender": "men",
    },
    {
        "title": "Women's Cybershot Hoodie",
        "description": "Inspired by our fully integrated home solar and storage system, the Tesla Cybershot Hoodie features a relaxed fit, kangaroo pocket and our Cybershot graphic.",
        "images": ["7654399-00-A_0_2000.jpg", "7654399-00-A_1.jpg"],
        "stock": 10,
        "price": 85,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "slug": "women_cybershot_hoodie",
        "tags": ["hoodie"],
        "gender": "women",
    },
    {
        "title": "Women's Strap Tee",
        "description": "Designed for style and comfort, the Women's Strap Tee features a fitted silhouette and the Tesla wordmark on the front.",
        "images": ["8765120-00-A_0_2000.jpg", "8765120-00-A_1.jpg"],
        "stock": 30,
        "price": 35,
        "sizes": ["XS", "S", "M", "L", "XL"],
        "tags": ["shirt"],
        "gender": "women",
    },
    {
        "title": "Women's Raven Slouchy Crew Sweatshirt",
        "description": "Introducing the Tesla Raven Collection. The Women's Raven Slouchy Crew Sweatshirt has a premium, relaxed silhouette made from a sustainable bamboo cotton blend.",
        "images": ["1740260-00-A_0_2000.jpg", "1740260-00-A_1.jpg"],
        "stock": 9,
        "price": 110,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "slug": "women_raven_slouchy_crew_sweatshirt",
        "tags": ["hoodie"],
        "gender": "women",
    },
    {
        "title": "Kids Cybertruck Long Sleeve Tee",
        "description": "Inspired by the Cybertruck, the Kids Cybertruck Long Sleeve Tee is made from 100% cotton and features the Cybertruck graffiti graphic on the front.",
        "images": ["1742702-00-A_0_2000.jpg", "1742702-00-A_1.jpg"],
        "stock": 10,
        "price": 30,
        "sizes": ["XS", "S", "M"],
        "slug": "kids_cybertruck_long_sleeve_tee",
        "tags": ["shirt"],
        "gender": "kid",
    },
    {
        "title": "Kids Scribble T Logo Tee",
        "description": "The Kids Scribble T Logo Tee is made from 100% Peruvian cotton and features a Tesla T sketched logo for every young artist to wear.",
        "images": ["8529312-00-A_0_2000.jpg", "8529312-00-A_1.jpg"],
        "stock": 0,
        "price": 25,
        "sizes": ["XS", "S", "M"],
        "slug": "kids_scribble_t_logo_tee",
        "tags": ["shirt"],
        "gender": "kid",
    },
    {
        "title": "Tesla Stripe Beanie",
        "description": "A classic rib knit beanie with a contrasting Tesla stripe, made from a soft acrylic blend.",
        "images": ["1740420-00-A_0_2000.jpg"],
        "stock": 15,
        "price": 30,
        "sizes": ["M"],
        "slug": "tesla_stripe_beanie",
        "tags": ["hats"],
        "gender": "unisex",
    },
    {
        "title": "Chill Pullover Hoodie",
        "description": "Introducing the Tesla Chill Collection. The Chill Pullover Hoodie has a premium, heavyweight exterior and soft fleece interior.",
        "images": ["1740051-00-A_0_2000.jpg", "1740051-00-A_1.jpg"],
        "stock": 10,
        "price": 130,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "slug": "chill_pullover_hoodie",
        "tags": ["hoodie"],
        "gender": "unisex",
    },
]
