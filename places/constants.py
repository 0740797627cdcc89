COFFEE_ROASTERS = [
    "Their Own Beans",
    "Dukes",
    "Seven Seeds",
    "ONA",
    "Coffee Supreme",
    "Axil",
    "Vacation",
    "Inglewood",
    "Veneziano",
    "Fieldwork",
    "Rumble",
    "Allpress",
    "Proud Mary",
    "Small Batch",
    "Klim Coffee",
    "Market Lane",
    "Toby's Estate",
    "Industry Beans",
    "St Ali",
    "Five Senses",
    "Maker",
    "Code Black",
    "Bench Coffee",
]

SUGGESTED_TAGS = [
    "Pastries",
    "Tarts",
    "Cakes",
    "Good Coffee",
    "Pour Over",
    "Good Brunch",
    "Group Seatings",
    "Open until Late",
    "Photo Worthy",
    "Sandwich/Burger",
    "Special Drinks",
    "Multiple Locations",
]

CITY_CENTERS = {
    "melbourne": {"lat": -37.8136, "lng": 144.9631},
    "sydney": {"lat": -33.8688, "lng": 151.2093},
    "brisbane": {"lat": -27.4698, "lng": 153.0251},
}

CITY_LABELS = {
    "melbourne": "Melbourne",
    "sydney": "Sydney",
    "brisbane": "Brisbane",
}

# 필터 "전체" 값
ALL = "all"

DEFAULT_ZOOM = 13
FOCUSED_ZOOM = 16
