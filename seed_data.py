"""Sample saree catalogue loaded into the catalog store at startup."""

_IMG_A = "https://images.unsplash.com/photo-1610030469983-98e550d6193c?w=800&h=1000&fit=crop"
_IMG_B = "https://images.unsplash.com/photo-1583391733956-3750e0ff4e8b?w=800&h=1000&fit=crop"
_IMG_C = "https://images.unsplash.com/photo-1594463750939-ebb28c3f7f75?w=800&h=1000&fit=crop"

SAMPLE_PRODUCTS = [
    {
        "id": "1",
        "name": "Royal Banarasi Silk Saree",
        "description": "Banarasi silk saree with intricate gold zari work, traditional motifs "
                       "and a rich pallu. Made for weddings and festive celebrations.",
        "price": 15999,
        "original_price": 19999,
        "images": [_IMG_A, _IMG_B],
        "category": "Silk",
        "fabric": "Pure Banarasi Silk",
        "occasion": "Wedding",
        "color": "Red",
        "in_stock": True,
        "is_new": False,
        "is_featured": True,
    },
    {
        "id": "2",
        "name": "Kanjeevaram Silk Saree",
        "description": "Handwoven Kanjeevaram silk with a temple border and contrast pallu.",
        "price": 24999,
        "original_price": 29999,
        "images": [_IMG_C],
        "category": "Silk",
        "fabric": "Kanjeevaram Silk",
        "occasion": "Wedding",
        "color": "Gold",
        "in_stock": True,
        "is_new": True,
        "is_featured": True,
    },
    {
        "id": "3",
        "name": "Chanderi Cotton Saree",
        "description": "Light Chanderi cotton with subtle zari detailing, for daily and office wear.",
        "price": 3999,
        "images": [_IMG_B],
        "category": "Cotton",
        "fabric": "Chanderi Cotton",
        "occasion": "Office",
        "color": "Blue",
        "in_stock": True,
        "is_new": True,
        "is_featured": False,
    },
    {
        "id": "4",
        "name": "Designer Georgette Saree",
        "description": "Georgette saree with contemporary prints and sequin work for evening events.",
        "price": 7999,
        "original_price": 9999,
        "images": [_IMG_A],
        "category": "Designer",
        "fabric": "Georgette",
        "occasion": "Party",
        "color": "Pink",
        "in_stock": True,
        "is_new": False,
        "is_featured": True,
    },
    {
        "id": "5",
        "name": "Tussar Silk Saree",
        "description": "Natural Tussar silk with hand-painted Madhubani art.",
        "price": 12999,
        "images": [_IMG_C],
        "category": "Silk",
        "fabric": "Tussar Silk",
        "occasion": "Festive",
        "color": "Green",
        "in_stock": True,
        "is_new": True,
        "is_featured": True,
    },
    {
        "id": "6",
        "name": "Linen Handloom Saree",
        "description": "Premium linen handloom saree for formal occasions and summer events.",
        "price": 5499,
        "images": [_IMG_B],
        "category": "Cotton",
        "fabric": "Linen",
        "occasion": "Casual",
        "color": "White",
        "in_stock": True,
        "is_new": False,
        "is_featured": False,
    },
    {
        "id": "7",
        "name": "Patola Silk Saree",
        "description": "Double ikat Patola silk from Gujarat with geometric tie-dye patterns.",
        "price": 45999,
        "original_price": 52999,
        "images": [_IMG_A],
        "category": "Silk",
        "fabric": "Patola Silk",
        "occasion": "Wedding",
        "color": "Red",
        "in_stock": True,
        "is_new": False,
        "is_featured": True,
    },
    {
        "id": "8",
        "name": "Cotton Jamdani Saree",
        "description": "Bengali Jamdani cotton with floating floral motifs, hand-woven.",
        "price": 8999,
        "images": [_IMG_C],
        "category": "Cotton",
        "fabric": "Cotton Jamdani",
        "occasion": "Festive",
        "color": "Black",
        "in_stock": True,
        "is_new": True,
        "is_featured": False,
    },
    {
        "id": "9",
        "name": "Chiffon Party Saree",
        "description": "Chiffon saree with crystal embellishments and a contemporary cut.",
        "price": 6499,
        "original_price": 7999,
        "images": [_IMG_B],
        "category": "Designer",
        "fabric": "Chiffon",
        "occasion": "Party",
        "color": "Blue",
        "in_stock": True,
        "is_new": False,
        "is_featured": False,
    },
    {
        "id": "10",
        "name": "Mysore Crepe Silk Saree",
        "description": "Mysore crepe silk with a natural sheen and a traditional gold border.",
        "price": 9999,
        "images": [_IMG_A],
        "category": "Silk",
        "fabric": "Mysore Silk",
        "occasion": "Festive",
        "color": "Green",
        "in_stock": True,
        "is_new": True,
        "is_featured": True,
    },
    {
        "id": "11",
        "name": "Sambalpuri Ikat Saree",
        "description": "Sambalpuri ikat from Odisha with traditional bandha patterns.",
        "price": 4999,
        "images": [_IMG_C],
        "category": "Cotton",
        "fabric": "Cotton Ikat",
        "occasion": "Casual",
        "color": "Red",
        "in_stock": True,
        "is_new": False,
        "is_featured": False,
    },
    {
        "id": "12",
        "name": "Designer Leheriya Saree",
        "description": "Rajasthani Leheriya saree with multi-coloured wave patterns.",
        "price": 3499,
        "images": [_IMG_B],
        "category": "Designer",
        "fabric": "Georgette",
        "occasion": "Festive",
        "color": "Pink",
        "in_stock": True,
        "is_new": True,
        "is_featured": False,
    },
]
