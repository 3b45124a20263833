from enum import Enum

STATE_KEYS = [
    "username",
    "location",
    "uploaded_image",
    "subject",
    "difficulty",
    "draft",
    "published_id",
    "search_radius",
    "nearby_questions",
    "handled_map_click",
    "answers",
    "score",
]

RADIUS_OPTIONS_M = [1000, 5000, 25000, 50000]
USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 20
AVATAR_COLORS = [
    "#E8553A",
    "#2B7A5F",
    "#3A6BE8",
    "#9B5DE5",
    "#D4851F",
    "#E84393",
    "#00B894",
    "#6C5CE7",
]


class Label(Enum):
    USERNAME = "Username"
    FILE_UPLOAD = "Upload an image"
    SUBJECT = "Subject"
    DIFFICULTY = "Difficulty"
    RADIUS = "Search radius"
    GENERATE_BUTTON = "Generate Question"
    REGENERATE_BUTTON = "Regenerate"
    PUBLISH_BUTTON = "Pin to My Location"
    SIGN_IN_BUTTON = "Start Learning"
    SIGN_OUT_BUTTON = "Sign Out"
    SUBMIT_ANSWER_BUTTON = "Submit answer"


class Keys(Enum):
    USERNAME = "username_input"
    FILE_UPLOAD = "image_file"
    SUBJECT = "subject_select"
    DIFFICULTY = "difficulty_select"
    LATITUDE = "latitude_input"
    LONGITUDE = "longitude_input"


# id, label, icon, color, background, prompt strategy
SUBJECTS = [
    {
        "id": "math",
        "label": "Mathematics",
        "icon": "∑",
        "color": "#E8553A",
        "bg": "#FEF0ED",
        "strategy": "numerical problems, measurements, calculations, geometry, patterns, statistics, ratios",
    },
    {
        "id": "english",
        "label": "English",
        "icon": "Aa",
        "color": "#2B7A5F",
        "bg": "#EDF7F3",
        "strategy": "creative writing prompts, descriptive exercises, vocabulary, grammar in context, narrative techniques",
    },
    {
        "id": "science",
        "label": "Science",
        "icon": "⚛",
        "color": "#3A6BE8",
        "bg": "#EDF2FE",
        "strategy": "hypothesis formation, observation-based questions, scientific principles, cause and effect, classification",
    },
    {
        "id": "history",
        "label": "History",
        "icon": "⏳",
        "color": "#9B5DE5",
        "bg": "#F4EDFB",
        "strategy": "contextual analysis, timeline questions, cultural significance, historical parallels, primary source analysis",
    },
    {
        "id": "art",
        "label": "Art & Design",
        "icon": "◐",
        "color": "#D4851F",
        "bg": "#FDF4EA",
        "strategy": "composition analysis, color theory, artistic techniques, design principles, aesthetic interpretation",
    },
]

DIFFICULTY_LEVELS = [
    {"id": "elementary", "label": "Elementary", "ages": "Ages 6–10"},
    {"id": "middle", "label": "Middle School", "ages": "Ages 11–14"},
    {"id": "high", "label": "High School", "ages": "Ages 15–18"},
]

# Order matters: the last tier with positive weight absorbs rounding drift.
RARITY_TIERS = [
    {
        "id": "common",
        "label": "Common",
        "points": 10,
        "weight": 50,
        "color": "#667085",
        "icon": "●",
    },
    {
        "id": "uncommon",
        "label": "Uncommon",
        "points": 25,
        "weight": 28,
        "color": "#12B76A",
        "icon": "◆",
    },
    {
        "id": "rare",
        "label": "Rare",
        "points": 50,
        "weight": 15,
        "color": "#3A6BE8",
        "icon": "★",
    },
    {
        "id": "epic",
        "label": "Epic",
        "points": 100,
        "weight": 5,
        "color": "#9B5DE5",
        "icon": "✦",
    },
    {
        "id": "legendary",
        "label": "Legendary",
        "points": 250,
        "weight": 2,
        "color": "#D4851F",
        "icon": "♛",
    },
]


class Pages(Enum):
    CREATE = {
        "key": "create",
        "title": ":material/auto_awesome: Create",
    }
    EXPLORE = {
        "key": "explore",
        "title": ":material/explore: Explore Nearby",
    }
    MY_QUESTIONS = {
        "key": "my",
        "title": ":material/edit_note: My Questions",
    }


def find_subject(subject_id: str) -> dict | None:
    return next((s for s in SUBJECTS if s["id"] == subject_id), None)


def find_difficulty(difficulty_id: str) -> dict | None:
    return next((d for d in DIFFICULTY_LEVELS if d["id"] == difficulty_id), None)


def find_rarity(rarity_id: str) -> dict | None:
    return next((r for r in RARITY_TIERS if r["id"] == rarity_id), None)
