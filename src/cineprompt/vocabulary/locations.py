"""Location presets and the settings each location rules out.

A preset label typed as the scene location expands to the preset's
keywords when the prompt is assembled. The metadata tables are used by
:mod:`cineprompt.randomize` to keep random scenes physically plausible.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class LocationPreset:
    """A named place with the keywords it expands to."""

    label: str
    keywords: str
    category: str


@dataclass(frozen=True)
class LocationMeta:
    """Physical traits of a preset location.

    Attributes:
        space: "indoor", "outdoor" or "either".
        scale: "intimate", "medium" or "vast".
        era: "any", "historical", "modern" or "futuristic".
        blocked_atmospheres: Atmospheres that never fit the place.
    """

    space: str
    scale: str
    era: str
    blocked_atmospheres: frozenset[str] = frozenset()


LOCATION_PRESETS: tuple[LocationPreset, ...] = (
    # Urban
    LocationPreset(
        "City Street",
        "busy city street, urban environment, buildings, pedestrians",
        "urban",
    ),
    LocationPreset(
        "Neon-lit Alley",
        "neon-lit alleyway at night, urban glow, wet pavement, atmospheric",
        "urban",
    ),
    LocationPreset(
        "Rooftop",
        "city rooftop, skyline view, urban landscape, overlooking the city",
        "urban",
    ),
    LocationPreset(
        "Subway Station",
        "underground subway station, fluorescent lights, train platform, urban transit",
        "urban",
    ),
    LocationPreset(
        "Parking Lot",
        "parking lot, asphalt, parked cars, urban setting, outdoor parking",
        "urban",
    ),
    # Nature
    LocationPreset(
        "Forest",
        "dense forest, towering trees, dappled sunlight, natural woodland",
        "nature",
    ),
    LocationPreset(
        "Desert",
        "vast desert landscape, sand dunes, arid environment, endless horizon",
        "nature",
    ),
    LocationPreset("Beach", "sandy beach, ocean waves, coastal setting, shoreline", "nature"),
    LocationPreset(
        "Mountain Peak",
        "mountain summit, dramatic peaks, alpine landscape, breathtaking view",
        "nature",
    ),
    LocationPreset(
        "Cornfield",
        "golden cornfield, rural farmland, endless rows of corn, agricultural landscape",
        "nature",
    ),
    LocationPreset(
        "Waterfall",
        "majestic waterfall, cascading water, mist, lush surroundings",
        "nature",
    ),
    LocationPreset(
        "Snowy Tundra",
        "frozen tundra, snow-covered landscape, icy wilderness, arctic environment",
        "nature",
    ),
    # Interior
    LocationPreset(
        "Abandoned Warehouse",
        "abandoned warehouse interior, industrial decay, dusty, shafts of light",
        "interior",
    ),
    LocationPreset(
        "Luxury Penthouse",
        "luxurious penthouse interior, modern design, floor-to-ceiling windows, elegant",
        "interior",
    ),
    LocationPreset(
        "Old Library",
        "ancient library, towering bookshelves, dusty tomes, warm ambient light",
        "interior",
    ),
    LocationPreset(
        "Neon Bar",
        "neon-lit bar interior, moody atmosphere, colorful lights, nightlife",
        "interior",
    ),
    LocationPreset(
        "Cathedral",
        "grand cathedral interior, gothic architecture, stained glass windows, sacred space",
        "interior",
    ),
    LocationPreset(
        "Office",
        "modern office interior, corporate environment, desks, computers, "
        "professional workspace",
        "interior",
    ),
    # Fantasy
    LocationPreset(
        "Enchanted Forest",
        "magical enchanted forest, glowing flora, mystical atmosphere, fantasy woodland",
        "fantasy",
    ),
    LocationPreset(
        "Floating Islands",
        "floating islands in the sky, fantasy landscape, clouds, ethereal",
        "fantasy",
    ),
    LocationPreset(
        "Ancient Ruins",
        "ancient ruins, crumbling stone structures, overgrown with vines, mysterious past",
        "fantasy",
    ),
    LocationPreset(
        "Crystal Cave",
        "crystal cave interior, glowing gemstones, underground wonder, magical light",
        "fantasy",
    ),
    # Industrial / sci-fi
    LocationPreset(
        "Factory Floor",
        "industrial factory floor, machinery, metal structures, manufacturing",
        "industrial",
    ),
    LocationPreset(
        "Cyberpunk City",
        "cyberpunk megacity, towering skyscrapers, holographic ads, dystopian future",
        "industrial",
    ),
    LocationPreset(
        "Space Station",
        "space station interior, futuristic technology, zero gravity, orbital view",
        "industrial",
    ),
    LocationPreset(
        "Underground Bunker",
        "underground bunker, concrete walls, survival shelter, post-apocalyptic",
        "industrial",
    ),
)

LOCATIONS = MappingProxyType({preset.label: preset for preset in LOCATION_PRESETS})

LOCATION_META = MappingProxyType(
    {
        "City Street": LocationMeta("outdoor", "medium", "modern"),
        "Neon-lit Alley": LocationMeta("outdoor", "intimate", "modern"),
        "Rooftop": LocationMeta("outdoor", "vast", "modern"),
        "Subway Station": LocationMeta("indoor", "medium", "modern"),
        "Parking Lot": LocationMeta("outdoor", "medium", "modern"),
        "Forest": LocationMeta("outdoor", "vast", "any"),
        "Desert": LocationMeta("outdoor", "vast", "any"),
        "Beach": LocationMeta("outdoor", "vast", "any"),
        "Mountain Peak": LocationMeta("outdoor", "vast", "any"),
        "Cornfield": LocationMeta("outdoor", "vast", "any"),
        "Waterfall": LocationMeta("outdoor", "medium", "any"),
        "Snowy Tundra": LocationMeta("outdoor", "vast", "any"),
        "Abandoned Warehouse": LocationMeta("indoor", "vast", "modern"),
        "Luxury Penthouse": LocationMeta("indoor", "medium", "modern"),
        "Old Library": LocationMeta("indoor", "medium", "historical"),
        "Neon Bar": LocationMeta("indoor", "intimate", "modern"),
        "Cathedral": LocationMeta("indoor", "vast", "historical"),
        "Office": LocationMeta("indoor", "medium", "modern"),
        "Enchanted Forest": LocationMeta("outdoor", "vast", "any"),
        "Floating Islands": LocationMeta("outdoor", "vast", "any"),
        "Ancient Ruins": LocationMeta("either", "vast", "historical"),
        "Crystal Cave": LocationMeta("indoor", "medium", "any"),
        "Factory Floor": LocationMeta("indoor", "vast", "modern"),
        "Cyberpunk City": LocationMeta(
            "outdoor", "vast", "futuristic", blocked_atmospheres=frozenset({"vintage"})
        ),
        "Space Station": LocationMeta("indoor", "medium", "futuristic"),
        "Underground Bunker": LocationMeta("indoor", "intimate", "modern"),
    }
)

UNKNOWN_LOCATION = LocationMeta("either", "medium", "any")

# Atmospheres that break the period of a location's era.
ATMOSPHERE_ERA_CONFLICTS = MappingProxyType(
    {
        "vintage": frozenset({"futuristic"}),
        "cyberpunk": frozenset({"historical"}),
    }
)

# Lighting that cannot physically occur in indoor or outdoor spaces.
LIGHTING_SPACE_CONFLICTS = MappingProxyType(
    {
        "goldenhour": frozenset({"indoor"}),
        "bluehour": frozenset({"indoor"}),
        "moonlit": frozenset({"indoor"}),
        "softbox": frozenset({"outdoor"}),
    }
)

# Subject phrases and the location categories they cannot plausibly occupy.
SUBJECT_BLOCKED_LOCATION_CATEGORIES = MappingProxyType(
    {
        "formula 1": frozenset({"interior", "fantasy"}),
        "f1 car": frozenset({"interior", "fantasy"}),
        "racing speed": frozenset({"interior", "fantasy"}),
        "200mph": frozenset({"interior", "fantasy"}),
        "motorcycle racer": frozenset({"interior", "fantasy"}),
        "racing": frozenset({"interior"}),
        "underwater": frozenset({"urban", "industrial"}),
        "coral reef": frozenset({"urban", "industrial", "interior"}),
        "drone footage": frozenset({"interior"}),
        "aerial": frozenset({"interior"}),
        "flying": frozenset({"interior"}),
        "cliff diver": frozenset({"interior", "industrial", "fantasy"}),
        "cliff dive": frozenset({"interior", "industrial", "fantasy"}),
        "turquoise waters": frozenset({"interior", "industrial", "fantasy"}),
        "mountain climber": frozenset({"interior", "urban"}),
        "snowboarder": frozenset({"interior", "urban"}),
        "surfer": frozenset({"interior", "industrial", "fantasy"}),
        "ocean waves": frozenset({"interior", "industrial"}),
        "space station": frozenset({"nature", "urban"}),
        "spacecraft": frozenset({"nature", "urban"}),
    }
)

# High-speed subjects need room to move.
ENCLOSED_LOCATIONS = frozenset(
    {
        "Crystal Cave",
        "Old Library",
        "Cathedral",
        "Neon Bar",
        "Office",
        "Luxury Penthouse",
        "Abandoned Warehouse",
        "Underground Bunker",
        "Space Station",
    }
)

_HIGH_SPEED_MARKERS = ("speed", "racing", "mph", "exploding through")


def find_location_preset(location: str) -> LocationPreset | None:
    """Preset matching ``location`` by label or by a fragment of its keywords."""
    if not location:
        return None
    preset = LOCATIONS.get(location)
    if preset is not None:
        return preset
    return next((p for p in LOCATION_PRESETS if location in p.keywords), None)


def location_meta(label: str) -> LocationMeta:
    """Traits of a preset location. Unknown places are unrestricted."""
    return LOCATION_META.get(label, UNKNOWN_LOCATION)


def atmosphere_blocked_by_location(atmosphere: str, label: str) -> bool:
    meta = location_meta(label)
    if atmosphere in meta.blocked_atmospheres:
        return True
    return meta.era in ATMOSPHERE_ERA_CONFLICTS.get(atmosphere, frozenset())


def lighting_blocked_by_location(lighting: str, label: str) -> bool:
    meta = location_meta(label)
    if meta.space == "either":
        return False
    return meta.space in LIGHTING_SPACE_CONFLICTS.get(lighting, frozenset())


def compatible_locations(subject: str) -> tuple[LocationPreset, ...]:
    """Presets a subject can plausibly occupy.

    Keyword rules rule out whole location categories, and high-speed
    subjects are kept out of enclosed spaces.
    """
    lower = subject.lower()
    blocked: set[str] = set()
    for phrase, categories in SUBJECT_BLOCKED_LOCATION_CATEGORIES.items():
        if phrase in lower:
            blocked |= categories
    high_speed = any(marker in lower for marker in _HIGH_SPEED_MARKERS)
    return tuple(
        preset
        for preset in LOCATION_PRESETS
        if preset.category not in blocked
        and not (high_speed and preset.label in ENCLOSED_LOCATIONS)
    )
