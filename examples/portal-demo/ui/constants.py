"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

SCREEN_W = 960
SCREEN_H = 600

# World units -> pixels for the universe view
WORLD_SCALE = 40.0
SPHERE_PIXELS = 30

BG_COLOR = (0, 0, 0)
TEXT_COLOR = (235, 235, 245)
TEXT_DIM = (150, 150, 165)
LABEL_OUTLINE = (0, 0, 0)

ARCHETYPE = {
    "emoji": "*",
    "title": "The Visionary",
    "gradient": ("#8b5cf6", "#ec4899"),
}

MANIFESTATION = "I wake up in my home by the ocean, doing work that lights me up every day"

DREAMS = [
    {"title": "Beach house", "color": "#38bdf8", "progress": 20, "position": (-6.0, 0.0, 0.0)},
    {"title": "Run a marathon", "color": "#34d399", "progress": 55, "position": (0.0, 1.5, 0.0)},
    {"title": "Start the studio", "color": "#f472b6", "progress": 90, "position": (6.0, -0.5, 0.0)},
]


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
