"""
Fallback content shown when the backend is unavailable, so pages stay populated.
"""

SAMPLE_PROPERTIES = [
    {
        "id": "prop1",
        "title": "Modern Downtown Apartment",
        "description": "Beautiful apartment in the heart of downtown with amazing views.",
        "type": "Apartment",
        "location": "Downtown, New York",
        "price": 2500,
        "bedrooms": 2,
        "bathrooms": 2,
        "features": ["Parking", "Gym", "Pet Friendly"],
        "imageUrl": "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?auto=format&fit=crop&w=600&q=60",
        "compatibilityScore": 92
    },
    {
        "id": "prop2",
        "title": "Spacious Family House",
        "description": "Large house perfect for families with a beautiful garden.",
        "type": "House",
        "location": "Suburb, Chicago",
        "price": 3200,
        "bedrooms": 4,
        "bathrooms": 3,
        "features": ["Parking", "Garden", "Pet Friendly"],
        "imageUrl": "https://images.unsplash.com/photo-1568605114967-8130f3a36994?auto=format&fit=crop&w=600&q=60",
        "compatibilityScore": 85
    },
    {
        "id": "prop3",
        "title": "Cozy Studio Apartment",
        "description": "Perfect small studio for singles or couples in a quiet neighborhood.",
        "type": "Studio",
        "location": "Midtown, San Francisco",
        "price": 1800,
        "bedrooms": 1,
        "bathrooms": 1,
        "features": ["Furnished", "Pet Friendly"],
        "imageUrl": "https://images.unsplash.com/photo-1574362848149-11496d93a7c7?auto=format&fit=crop&w=600&q=60",
        "compatibilityScore": 78
    },
    {
        "id": "prop4",
        "title": "Luxury Waterfront Condo",
        "description": "High-end condo with stunning water views and premium amenities.",
        "type": "Condo",
        "location": "Waterfront, Miami",
        "price": 4800,
        "bedrooms": 3,
        "bathrooms": 2.5,
        "features": ["Parking", "Pool", "Gym", "Pet Friendly"],
        "imageUrl": "https://images.unsplash.com/photo-1512917774080-9991f1c4c750?auto=format&fit=crop&w=600&q=60",
        "compatibilityScore": 88
    }
]

# Listing page fallback: first three, without scores
SAMPLE_LISTINGS = [
    {key: value for key, value in prop.items() if key != "compatibilityScore"}
    for prop in SAMPLE_PROPERTIES[:3]
]

SAMPLE_PROPERTY_DETAIL = {
    "title": "Modern Downtown Apartment",
    "description": (
        "This beautiful apartment is located in the heart of downtown with stunning views of "
        "the city skyline. Features include hardwood floors, stainless steel appliances, and "
        "floor-to-ceiling windows. The building offers a fitness center, rooftop lounge, and "
        "24/7 concierge service."
    ),
    "type": "Apartment",
    "location": "Downtown, New York",
    "price": 2500,
    "bedrooms": 2,
    "bathrooms": 2,
    "features": [
        "Parking", "Gym", "Pet Friendly", "Central AC", "Dishwasher",
        "In-unit Laundry", "Hardwood Floors", "Balcony"
    ],
    "imageUrl": "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?auto=format&fit=crop&w=600&q=60",
    "squareFeet": 1200,
    "yearBuilt": 2018,
    "neighborhood": "Financial District",
    "agent": {
        "name": "Jane Smith",
        "phone": "(555) 123-4567",
        "email": "jane.smith@example.com"
    }
}

SAMPLE_COMPATIBILITY_SCORE = 85

SAMPLE_NEIGHBORHOOD_INSIGHTS = (
    "The neighborhood has seen a 5% increase in rental prices over the past year, slightly "
    "above the city average of 3%. Properties like this typically spend 20 days on the market "
    "before being rented. The area is becoming increasingly popular among young professionals "
    "due to its proximity to tech companies and public transportation options."
)

# (label, multiplier) for the fallback price outlook
PRICE_OUTLOOK = [
    ("Current", 1.0),
    ("+3 Months", 1.02),
    ("+6 Months", 1.03),
    ("+9 Months", 1.05),
    ("+12 Months", 1.07)
]

SAMPLE_MARKET_DATA = {
    "locationName": "New York, NY",
    "overview": (
        "The New York rental market continues to show strong demand with limited supply, "
        "pushing prices higher in most neighborhoods. Manhattan and Brooklyn remain the most "
        "expensive areas, while emerging areas in Queens and the Bronx are seeing faster price "
        "growth due to relative affordability and improved amenities."
    ),
    "priceChange": {"monthly": 1.2, "yearly": 5.8},
    "averageRent": {
        "overall": 3500,
        "studio": 2600,
        "oneBed": 3200,
        "twoBed": 4100,
        "threeBed": 5300,
        "fourBed": 7000
    },
    "demandIndex": 85,
    "supplyIndex": 35,
    "trendingNeighborhoods": [
        {"name": "Long Island City", "averageRent": 3700, "changeRate": 8.2},
        {"name": "Williamsburg", "averageRent": 3900, "changeRate": 6.7},
        {"name": "Bushwick", "averageRent": 3000, "changeRate": 9.3},
        {"name": "Astoria", "averageRent": 2800, "changeRate": 7.1},
        {"name": "Harlem", "averageRent": 2900, "changeRate": 6.8}
    ],
    "priceHistory": [
        {"month": month, "price": price}
        for month, price in zip(
            ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
            [3250, 3275, 3300, 3350, 3400, 3450, 3500, 3525, 3550, 3575, 3600, 3650]
        )
    ],
    "propertyTypeDistribution": [
        {"name": "Studio", "value": 25},
        {"name": "1 Bedroom", "value": 40},
        {"name": "2 Bedroom", "value": 20},
        {"name": "3+ Bedroom", "value": 15}
    ]
}

ADMIN_SAMPLE_PROPERTIES = [
    {"id": "prop1", "title": "Modern Downtown Apartment", "type": "Apartment",
     "location": "Downtown, New York", "price": 2500, "status": "Available"},
    {"id": "prop2", "title": "Spacious Family House", "type": "House",
     "location": "Suburb, Chicago", "price": 3200, "status": "Available"},
    {"id": "prop3", "title": "Cozy Studio Apartment", "type": "Studio",
     "location": "Midtown, San Francisco", "price": 1800, "status": "Available"},
    {"id": "prop4", "title": "Luxury Waterfront Condo", "type": "Condo",
     "location": "Waterfront, Miami", "price": 4800, "status": "Available"}
]

ADMIN_SAMPLE_USERS = [
    {"id": "user1", "email": "john.doe@example.com", "name": "John Doe",
     "registered": "2025-04-01", "matches": 15},
    {"id": "user2", "email": "jane.smith@example.com", "name": "Jane Smith",
     "registered": "2025-03-28", "matches": 8},
    {"id": "user3", "email": "michael.brown@example.com", "name": "Michael Brown",
     "registered": "2025-04-10", "matches": 12},
    {"id": "user4", "email": "sarah.jones@example.com", "name": "Sarah Jones",
     "registered": "2025-04-15", "matches": 5}
]
