"""
Reference datasets for the irrigation planner: crops with FAO-56 style
growth-stage coefficients and soils with hydraulic characteristics.

Rows are raw dicts; crop_database.py and soil_database.py validate them at
load time.

Usage:
    from reference_data import CROP_ROWS, SOIL_ROWS
"""

# ---------------------------------------------------------------------------
# Crops
# ---------------------------------------------------------------------------

CROP_ROWS = [
    # Tree Nuts
    {
        "id": "almonds", "name": "Almonds", "scientific_name": "Prunus dulcis", "category": "Tree Nuts",
        "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 30, "description": "Bud break and early leaf development"},
            {"name": "Development", "kc": 0.85, "duration": 45, "description": "Rapid canopy growth and nut development"},
            {"name": "Mid-season", "kc": 1.10, "duration": 60, "description": "Full canopy and peak water demand"},
            {"name": "Late season", "kc": 0.75, "duration": 45, "description": "Nut maturation and harvest preparation"},
        ],
        "monthly_kc": [
            {"month": 1, "kc": 0.40}, {"month": 2, "kc": 0.41}, {"month": 3, "kc": 0.62},
            {"month": 4, "kc": 0.80}, {"month": 5, "kc": 0.94}, {"month": 6, "kc": 1.05},
            {"month": 7, "kc": 1.11}, {"month": 8, "kc": 1.11}, {"month": 9, "kc": 1.06},
            {"month": 10, "kc": 0.92}, {"month": 11, "kc": 0.69}, {"month": 12, "kc": 0.43},
        ],
    },
    {
        "id": "walnuts", "name": "Walnuts", "scientific_name": "Juglans regia", "category": "Tree Nuts",
        "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.50, "duration": 35, "description": "Bud break and catkin development"},
            {"name": "Development", "kc": 0.90, "duration": 50, "description": "Leaf expansion and nut development"},
            {"name": "Mid-season", "kc": 1.15, "duration": 65, "description": "Full canopy and hull filling"},
            {"name": "Late season", "kc": 0.80, "duration": 40, "description": "Hull split and harvest"},
        ],
        "monthly_kc": [
            {"month": 1, "kc": 0.00}, {"month": 2, "kc": 0.00}, {"month": 3, "kc": 0.12},
            {"month": 4, "kc": 0.53}, {"month": 5, "kc": 0.82}, {"month": 6, "kc": 1.04},
            {"month": 7, "kc": 1.14}, {"month": 8, "kc": 1.14}, {"month": 9, "kc": 1.08},
            {"month": 10, "kc": 0.86}, {"month": 11, "kc": 0.45}, {"month": 12, "kc": 0.00},
        ],
    },
    {
        "id": "pistachios", "name": "Pistachios", "scientific_name": "Pistacia vera", "category": "Tree Nuts",
        "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.35, "duration": 25, "description": "Bud break and early growth"},
            {"name": "Development", "kc": 0.75, "duration": 40, "description": "Shoot development and flowering"},
            {"name": "Mid-season", "kc": 1.05, "duration": 70, "description": "Nut development and filling"},
            {"name": "Late season", "kc": 0.70, "duration": 35, "description": "Nut maturation and harvest"},
        ],
    },

    # Tree Fruits
    {
        "id": "grapes", "name": "Grapes", "category": "Tree Fruits", "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.30, "duration": 20, "description": "Bud break and shoot emergence"},
            {"name": "Development", "kc": 0.70, "duration": 40, "description": "Rapid shoot and leaf growth"},
            {"name": "Mid-season", "kc": 1.15, "duration": 50, "description": "Flowering, fruit set, and veraison"},
            {"name": "Late season", "kc": 0.80, "duration": 30, "description": "Fruit ripening and harvest"},
        ],
        "monthly_kc": [
            {"month": 1, "kc": 0.00}, {"month": 2, "kc": 0.00}, {"month": 3, "kc": 0.15},
            {"month": 4, "kc": 0.30}, {"month": 5, "kc": 0.55}, {"month": 6, "kc": 0.75},
            {"month": 7, "kc": 0.85}, {"month": 8, "kc": 0.85}, {"month": 9, "kc": 0.75},
            {"month": 10, "kc": 0.55}, {"month": 11, "kc": 0.25}, {"month": 12, "kc": 0.00},
        ],
    },
    {
        "id": "oranges", "name": "Oranges", "category": "Tree Fruits", "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.55, "duration": 45, "description": "Spring flush and flowering"},
            {"name": "Development", "kc": 0.85, "duration": 60, "description": "Fruit set and early development"},
            {"name": "Mid-season", "kc": 1.00, "duration": 90, "description": "Fruit enlargement and maturation"},
            {"name": "Late season", "kc": 0.75, "duration": 60, "description": "Harvest and dormancy preparation"},
        ],
        "watering_cycles": [
            {"name": "Spring flush", "kc": 0.65, "start_month": 3, "end_month": 5},
            {"name": "Summer fruit sizing", "kc": 0.70, "start_month": 6, "end_month": 9},
            {"name": "Winter maintenance", "kc": 0.60, "start_month": 10, "end_month": 2},
        ],
    },
    {
        "id": "apples", "name": "Apples", "category": "Tree Fruits", "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.45, "duration": 30, "description": "Bud break and bloom"},
            {"name": "Development", "kc": 0.80, "duration": 50, "description": "Fruit set and early growth"},
            {"name": "Mid-season", "kc": 1.10, "duration": 70, "description": "Fruit development and sizing"},
            {"name": "Late season", "kc": 0.85, "duration": 45, "description": "Fruit maturation and harvest"},
        ],
    },
    {
        "id": "peaches", "name": "Peaches", "category": "Tree Fruits", "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 25, "description": "Bud break and flowering"},
            {"name": "Development", "kc": 0.75, "duration": 35, "description": "Leaf development and fruit set"},
            {"name": "Mid-season", "kc": 1.05, "duration": 50, "description": "Rapid fruit growth"},
            {"name": "Late season", "kc": 0.80, "duration": 30, "description": "Fruit ripening and harvest"},
        ],
    },
    {
        "id": "avocados", "name": "Avocados", "category": "Tree Fruits", "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.50, "duration": 60, "description": "New flush and flowering"},
            {"name": "Development", "kc": 0.75, "duration": 90, "description": "Fruit set and early development"},
            {"name": "Mid-season", "kc": 0.95, "duration": 120, "description": "Fruit growth and maturation"},
            {"name": "Late season", "kc": 0.70, "duration": 90, "description": "Harvest and winter dormancy"},
        ],
    },
    {
        "id": "cherries", "name": "Cherries", "scientific_name": "Prunus avium", "category": "Tree Fruits",
        "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.45, "duration": 30, "description": "Bud break to full bloom"},
            {"name": "Development", "kc": 0.80, "duration": 40, "description": "Fruit set and development"},
            {"name": "Mid-season", "kc": 1.05, "duration": 50, "description": "Fruit development to pit hardening"},
            {"name": "Late season", "kc": 0.75, "duration": 30, "description": "Fruit maturation to harvest"},
        ],
    },

    # Berries
    {
        "id": "strawberries", "name": "Strawberries", "category": "Berries",
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 25, "description": "Plant establishment and early growth"},
            {"name": "Development", "kc": 0.70, "duration": 35, "description": "Vegetative growth and flowering"},
            {"name": "Mid-season", "kc": 1.00, "duration": 40, "description": "Fruit development and harvest"},
            {"name": "Late season", "kc": 0.85, "duration": 20, "description": "Continued harvest and runner development"},
        ],
    },
    {
        "id": "blueberries", "name": "Blueberries", "category": "Berries", "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.35, "duration": 30, "description": "Bud break and leaf emergence"},
            {"name": "Development", "kc": 0.65, "duration": 40, "description": "Flowering and fruit set"},
            {"name": "Mid-season", "kc": 0.95, "duration": 45, "description": "Fruit development and ripening"},
            {"name": "Late season", "kc": 0.75, "duration": 35, "description": "Harvest and fall preparation"},
        ],
    },

    # Leafy Greens
    {
        "id": "lettuce", "name": "Lettuce", "category": "Leafy Greens",
        "stages": [
            {"name": "Initial", "kc": 0.45, "duration": 15, "description": "Seedling establishment"},
            {"name": "Development", "kc": 0.75, "duration": 25, "description": "Leaf development and head formation"},
            {"name": "Mid-season", "kc": 1.00, "duration": 30, "description": "Head filling and maturation"},
            {"name": "Late season", "kc": 0.70, "duration": 10, "description": "Harvest maturity"},
        ],
    },
    {
        "id": "spinach", "name": "Spinach", "category": "Leafy Greens",
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 12, "description": "Germination and cotyledon stage"},
            {"name": "Development", "kc": 0.70, "duration": 20, "description": "True leaf development"},
            {"name": "Mid-season", "kc": 1.00, "duration": 25, "description": "Rapid leaf growth"},
            {"name": "Late season", "kc": 0.75, "duration": 15, "description": "Harvest maturity"},
        ],
    },

    # Vegetables
    {
        "id": "tomatoes", "name": "Tomatoes", "category": "Vegetables",
        "stages": [
            {"name": "Initial", "kc": 0.45, "duration": 20, "description": "Transplanting and establishment"},
            {"name": "Development", "kc": 0.75, "duration": 30, "description": "Vegetative growth and flowering"},
            {"name": "Mid-season", "kc": 1.15, "duration": 40, "description": "Fruit set and development"},
            {"name": "Late season", "kc": 0.80, "duration": 30, "description": "Fruit ripening and harvest"},
        ],
    },
    {
        "id": "peppers", "name": "Peppers", "category": "Vegetables",
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 25, "description": "Transplanting and early growth"},
            {"name": "Development", "kc": 0.70, "duration": 35, "description": "Vegetative growth and flowering"},
            {"name": "Mid-season", "kc": 1.05, "duration": 45, "description": "Fruit development"},
            {"name": "Late season", "kc": 0.85, "duration": 25, "description": "Fruit maturation and harvest"},
        ],
    },
    {
        "id": "carrots", "name": "Carrots", "category": "Vegetables",
        "stages": [
            {"name": "Initial", "kc": 0.35, "duration": 20, "description": "Germination and early leaf growth"},
            {"name": "Development", "kc": 0.70, "duration": 30, "description": "Leaf development and root initiation"},
            {"name": "Mid-season", "kc": 1.05, "duration": 50, "description": "Root enlargement"},
            {"name": "Late season", "kc": 0.80, "duration": 30, "description": "Root maturation and harvest"},
        ],
    },
    {
        "id": "onions", "name": "Onions", "scientific_name": "Allium cepa", "category": "Vegetables",
        "stages": [
            {"name": "Initial", "kc": 0.70, "duration": 25, "description": "Establishment and early growth"},
            {"name": "Development", "kc": 1.05, "duration": 30, "description": "Rapid leaf growth"},
            {"name": "Mid-season", "kc": 1.20, "duration": 40, "description": "Bulb development"},
            {"name": "Late season", "kc": 0.80, "duration": 25, "description": "Bulb maturation"},
        ],
    },
    {
        "id": "potatoes", "name": "Potatoes", "scientific_name": "Solanum tuberosum", "category": "Vegetables",
        "stages": [
            {"name": "Initial", "kc": 0.50, "duration": 25, "description": "Emergence to canopy development"},
            {"name": "Development", "kc": 0.75, "duration": 35, "description": "Vegetative growth and tuber initiation"},
            {"name": "Mid-season", "kc": 1.15, "duration": 50, "description": "Tuber development and bulking"},
            {"name": "Late season", "kc": 0.75, "duration": 25, "description": "Tuber maturation"},
        ],
    },

    # Field Crops
    {
        "id": "corn", "name": "Corn", "category": "Field Crops",
        "stages": [
            {"name": "Initial", "kc": 0.30, "duration": 25, "description": "Emergence to V6 stage"},
            {"name": "Development", "kc": 0.70, "duration": 35, "description": "V6 to tasseling"},
            {"name": "Mid-season", "kc": 1.20, "duration": 40, "description": "Tasseling to blister stage"},
            {"name": "Late season", "kc": 0.60, "duration": 30, "description": "Dent stage to maturity"},
        ],
    },
    {
        "id": "soybeans", "name": "Soybeans", "category": "Field Crops",
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 15, "description": "Emergence to V1 stage"},
            {"name": "Development", "kc": 0.70, "duration": 35, "description": "V1 to R1 (flowering)"},
            {"name": "Mid-season", "kc": 1.15, "duration": 45, "description": "R1 to R6 (full seed)"},
            {"name": "Late season", "kc": 0.50, "duration": 25, "description": "R6 to maturity"},
        ],
    },
    {
        "id": "wheat", "name": "Wheat", "scientific_name": "Triticum aestivum", "category": "Field Crops",
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 40, "description": "Germination to tillering"},
            {"name": "Development", "kc": 0.70, "duration": 60, "description": "Tillering to stem elongation"},
            {"name": "Mid-season", "kc": 1.15, "duration": 40, "description": "Flowering to grain filling"},
            {"name": "Late season", "kc": 0.65, "duration": 30, "description": "Grain filling to maturity"},
        ],
    },
    {
        "id": "cotton", "name": "Cotton", "category": "Field Crops",
        "stages": [
            {"name": "Initial", "kc": 0.35, "duration": 30, "description": "Emergence to squaring"},
            {"name": "Development", "kc": 0.70, "duration": 50, "description": "Squaring to flowering"},
            {"name": "Mid-season", "kc": 1.15, "duration": 60, "description": "Flowering to boll opening"},
            {"name": "Late season", "kc": 0.50, "duration": 45, "description": "Boll opening to harvest"},
        ],
    },
    {
        "id": "alfalfa", "name": "Alfalfa", "category": "Field Crops", "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 10, "description": "Post-cutting regrowth"},
            {"name": "Development", "kc": 0.70, "duration": 20, "description": "Vegetative growth"},
            {"name": "Mid-season", "kc": 1.20, "duration": 25, "description": "Pre-bloom to 10% bloom"},
            {"name": "Late season", "kc": 1.10, "duration": 10, "description": "Harvest ready"},
        ],
        "monthly_kc": [
            {"month": 1, "kc": 0.60}, {"month": 2, "kc": 0.75}, {"month": 3, "kc": 0.90},
            {"month": 4, "kc": 0.95}, {"month": 5, "kc": 0.95}, {"month": 6, "kc": 0.95},
            {"month": 7, "kc": 0.95}, {"month": 8, "kc": 0.95}, {"month": 9, "kc": 0.95},
            {"month": 10, "kc": 0.90}, {"month": 11, "kc": 0.80}, {"month": 12, "kc": 0.60},
        ],
    },
    {
        "id": "rice", "name": "Rice", "scientific_name": "Oryza sativa", "category": "Field Crops",
        "stages": [
            {"name": "Initial", "kc": 1.05, "duration": 30, "description": "Transplanting to tillering"},
            {"name": "Development", "kc": 1.15, "duration": 35, "description": "Tillering to panicle initiation"},
            {"name": "Mid-season", "kc": 1.30, "duration": 50, "description": "Flowering to grain filling"},
            {"name": "Late season", "kc": 0.90, "duration": 30, "description": "Grain filling to maturity"},
        ],
    },

    # Herbs
    {
        "id": "basil", "name": "Basil", "category": "Herbs",
        "stages": [
            {"name": "Initial", "kc": 0.40, "duration": 15, "description": "Seedling establishment"},
            {"name": "Development", "kc": 0.70, "duration": 25, "description": "Vegetative growth"},
            {"name": "Mid-season", "kc": 1.05, "duration": 45, "description": "Full production"},
            {"name": "Late season", "kc": 0.80, "duration": 30, "description": "Continuous harvest"},
        ],
    },
    {
        "id": "oregano", "name": "Oregano", "scientific_name": "Origanum vulgare", "category": "Herbs",
        "is_perennial": True,
        "stages": [
            {"name": "Initial", "kc": 0.35, "duration": 20, "description": "Plant establishment"},
            {"name": "Development", "kc": 0.65, "duration": 30, "description": "Vegetative growth"},
            {"name": "Mid-season", "kc": 0.95, "duration": 60, "description": "Full production"},
            {"name": "Late season", "kc": 0.75, "duration": 40, "description": "Continuous harvest"},
        ],
    },
]


# ---------------------------------------------------------------------------
# Soils
# ---------------------------------------------------------------------------

SOIL_ROWS = [
    {
        "id": "clay_heavy", "name": "Heavy Clay", "category": "clay",
        "characteristics": {
            "water_holding_capacity": 200, "field_capacity": 45, "wilting_point": 25,
            "available_water_capacity": 200, "infiltration_rate": 2, "drainage_rate": "poor",
            "bulk_density": 1.3, "organic_matter": 3,
            "description": "Fine-textured soil with high water retention but slow drainage",
            "irrigation_factor": 0.85,
        },
        "color": "#8B4513", "texture": "Fine, sticky when wet, hard when dry",
        "common_crops": ["Rice", "Cotton", "Soybeans"],
    },
    {
        "id": "clay_medium", "name": "Clay Loam", "category": "clay",
        "characteristics": {
            "water_holding_capacity": 180, "field_capacity": 40, "wilting_point": 20,
            "available_water_capacity": 180, "infiltration_rate": 5, "drainage_rate": "moderate",
            "bulk_density": 1.35, "organic_matter": 4,
            "description": "Balanced soil with good water retention and moderate drainage",
            "irrigation_factor": 0.90,
        },
        "color": "#A0522D", "texture": "Smooth, moldable, moderate plasticity",
        "common_crops": ["Wheat", "Corn", "Alfalfa"],
    },
    {
        "id": "loam_silty", "name": "Silt Loam", "category": "silt",
        "characteristics": {
            "water_holding_capacity": 160, "field_capacity": 35, "wilting_point": 15,
            "available_water_capacity": 160, "infiltration_rate": 8, "drainage_rate": "good",
            "bulk_density": 1.40, "organic_matter": 3.5,
            "description": "Smooth-textured soil with excellent water and nutrient retention",
            "irrigation_factor": 0.95,
        },
        "color": "#CD853F", "texture": "Smooth, floury feel when dry, slippery when wet",
        "common_crops": ["Vegetables", "Small grains", "Perennial crops"],
    },
    {
        "id": "loam_standard", "name": "Loam", "category": "loam",
        "characteristics": {
            "water_holding_capacity": 140, "field_capacity": 30, "wilting_point": 12,
            "available_water_capacity": 140, "infiltration_rate": 12, "drainage_rate": "good",
            "bulk_density": 1.45, "organic_matter": 4,
            "description": "Ideal agricultural soil with balanced sand, silt, and clay",
            "irrigation_factor": 1.00,
        },
        "color": "#DEB887", "texture": "Balanced feel, neither sticky nor gritty",
        "common_crops": ["Most crops", "Fruits", "Vegetables", "Grains"],
    },
    {
        "id": "loam_sandy", "name": "Sandy Loam", "category": "sand",
        "characteristics": {
            "water_holding_capacity": 120, "field_capacity": 25, "wilting_point": 10,
            "available_water_capacity": 120, "infiltration_rate": 20, "drainage_rate": "good",
            "bulk_density": 1.50, "organic_matter": 2.5,
            "description": "Well-draining soil with moderate water retention",
            "irrigation_factor": 1.05,
        },
        "color": "#F4A460", "texture": "Gritty feel, crumbles easily",
        "common_crops": ["Potatoes", "Carrots", "Peanuts", "Berries"],
    },
    {
        "id": "sand_loamy", "name": "Loamy Sand", "category": "sand",
        "characteristics": {
            "water_holding_capacity": 80, "field_capacity": 18, "wilting_point": 6,
            "available_water_capacity": 80, "infiltration_rate": 30, "drainage_rate": "excessive",
            "bulk_density": 1.55, "organic_matter": 2,
            "description": "Fast-draining soil requiring frequent irrigation",
            "irrigation_factor": 1.15,
        },
        "color": "#F5DEB3", "texture": "Very gritty, loose structure",
        "common_crops": ["Root vegetables", "Melons", "Quick-growing crops"],
    },
    {
        "id": "sand_fine", "name": "Fine Sand", "category": "sand",
        "characteristics": {
            "water_holding_capacity": 60, "field_capacity": 15, "wilting_point": 4,
            "available_water_capacity": 60, "infiltration_rate": 40, "drainage_rate": "excessive",
            "bulk_density": 1.60, "organic_matter": 1.5,
            "description": "Very fast-draining, low water retention",
            "irrigation_factor": 1.25,
        },
        "color": "#FFEAA7", "texture": "Fine gritty feel, very loose",
        "common_crops": ["Asparagus", "Herbs", "Drought-tolerant crops"],
    },
    {
        "id": "organic_peat", "name": "Peat Soil", "category": "organic",
        "characteristics": {
            "water_holding_capacity": 300, "field_capacity": 60, "wilting_point": 30,
            "available_water_capacity": 300, "infiltration_rate": 15, "drainage_rate": "moderate",
            "bulk_density": 0.8, "organic_matter": 25,
            "description": "High organic matter soil with excellent water retention",
            "irrigation_factor": 0.80,
        },
        "color": "#2D3436", "texture": "Spongy, dark, high organic content",
        "common_crops": ["Celery", "Onions", "Specialty vegetables"],
    },
    {
        "id": "adobe_clay", "name": "Adobe Clay", "category": "clay",
        "characteristics": {
            "water_holding_capacity": 220, "field_capacity": 50, "wilting_point": 30,
            "available_water_capacity": 200, "infiltration_rate": 1, "drainage_rate": "poor",
            "bulk_density": 1.25, "organic_matter": 2,
            "description": "Very heavy clay with extreme water retention and poor drainage",
            "irrigation_factor": 0.75,
        },
        "color": "#6C5CE7", "texture": "Extremely fine, plastic when wet, very hard when dry",
        "common_crops": ["Rice", "Water-tolerant crops"],
    },
]
