"""Look vocabularies: atmospheres, visual presets, palettes and lighting."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class StyleOption:
    """A named look with the keywords it contributes to a prompt."""

    name: str
    keywords: str
    description: str = ""


@dataclass(frozen=True)
class ColorPalette:
    """A named palette of six hex colors."""

    name: str
    colors: tuple[str, ...]


@dataclass(frozen=True)
class LightingOption:
    """A lighting setup, grouped by ``category`` (classic, natural or stylized)."""

    name: str
    keywords: str
    category: str


ATMOSPHERES = MappingProxyType(
    {
        "cinematic": StyleOption(
            "Cinematic",
            "cinematic lighting, dramatic shadows, high contrast, film grain, "
            "anamorphic lens flare, movie scene",
            "Hollywood-style dramatic lighting",
        ),
        "cyberpunk": StyleOption(
            "Cyberpunk",
            "neon lights, cyberpunk aesthetic, rain-soaked streets, holographic displays, "
            "pink and blue neon, futuristic",
            "Neon-lit futuristic vibes",
        ),
        "studio": StyleOption(
            "Studio",
            "studio lighting, professional photography, softbox lighting, clean background, "
            "commercial quality",
            "Clean professional studio setup",
        ),
        "moody": StyleOption(
            "Moody",
            "moody atmosphere, low key lighting, deep shadows, mysterious, atmospheric fog, "
            "chiaroscuro",
            "Dark and atmospheric mood",
        ),
        "dreamy": StyleOption(
            "Dreamy",
            "dreamy atmosphere, soft focus, ethereal glow, pastel colors, bokeh, "
            "gaussian blur, fantasy",
            "Soft ethereal fantasy look",
        ),
        "natural": StyleOption(
            "Natural",
            "natural lighting, outdoor photography, ambient light, realistic, "
            "documentary style",
            "Authentic natural lighting",
        ),
        "vintage": StyleOption(
            "Vintage",
            "vintage film look, retro aesthetic, film grain, faded colors, 70s photography, "
            "analog feel",
            "Retro film aesthetic",
        ),
        "epic": StyleOption(
            "Epic",
            "epic scale, grand composition, dramatic sky, sweeping landscape, heroic, "
            "monumental, awe-inspiring",
            "Grand cinematic scale",
        ),
        "horror": StyleOption(
            "Horror",
            "horror atmosphere, dark shadows, unsettling, creepy lighting, ominous, dread, "
            "sinister mood",
            "Dark and unsettling",
        ),
        "romantic": StyleOption(
            "Romantic",
            "romantic atmosphere, soft warm light, intimate, gentle glow, love, tender mood, "
            "sunset warmth",
            "Warm intimate feeling",
        ),
        "noir": StyleOption(
            "Noir",
            "film noir atmosphere, hard shadows, venetian blind light, smoky interiors, "
            "black and white, 1940s crime drama",
            "Hard-boiled shadows and smoke",
        ),
    }
)

VISUAL_PRESETS = MappingProxyType(
    {
        "raw": StyleOption(
            "Raw", "natural photograph, unedited, authentic, true to life colors"
        ),
        "highcontrast": StyleOption(
            "High Contrast",
            "high contrast photography, deep blacks, bright highlights, punchy colors",
        ),
        "desaturated": StyleOption(
            "Desaturated", "desaturated colors, muted tones, subtle palette, understated"
        ),
        "vivid": StyleOption("Vivid", "vivid colors, saturated, vibrant, color-graded, punchy"),
        "filmlook": StyleOption(
            "Film Look",
            "film color grade, lifted blacks, crushed highlights, cinematic color",
        ),
        "bleachbypass": StyleOption(
            "Bleach Bypass",
            "bleach bypass look, desaturated, high contrast, silver retention, gritty",
        ),
    }
)

COLOR_PALETTES = MappingProxyType(
    {
        "teal-orange": ColorPalette(
            "Teal & Orange", ("#1A535C", "#4ECDC4", "#FF6B6B", "#FFE66D", "#2E4057", "#F4A261")
        ),
        "noir": ColorPalette(
            "Noir / B&W", ("#0D0D0D", "#2C2C2C", "#4A4A4A", "#FFFFFF", "#1A1A2E", "#B8B8B8")
        ),
        "neon-cyberpunk": ColorPalette(
            "Neon Cyberpunk",
            ("#FF006E", "#8338EC", "#3A86FF", "#FB5607", "#06D6A0", "#7B2CBF"),
        ),
        "warm-sunset": ColorPalette(
            "Warm Sunset", ("#F39C12", "#E74C3C", "#D35400", "#C0392B", "#F5B041", "#EB984E")
        ),
        "cool-ocean": ColorPalette(
            "Cool Ocean", ("#1ABC9C", "#3498DB", "#2980B9", "#16A085", "#5DADE2", "#48C9B0")
        ),
        "pastel-dream": ColorPalette(
            "Pastel Dream", ("#FFB5E8", "#B28DFF", "#AFF8DB", "#BFFCC6", "#FFC9DE", "#C4FAF8")
        ),
        "earthy-natural": ColorPalette(
            "Earthy Natural",
            ("#8B7355", "#556B2F", "#A0522D", "#6B8E23", "#DEB887", "#D2691E"),
        ),
        "vintage-sepia": ColorPalette(
            "Vintage Sepia", ("#D4A574", "#C9A86C", "#8B7355", "#704214", "#A67B5B", "#E3C4A8")
        ),
        "forest-moss": ColorPalette(
            "Forest Moss", ("#2D5A27", "#4A7C23", "#8FBC8F", "#556B2F", "#6B8E23", "#228B22")
        ),
    }
)

LIGHTING_OPTIONS = MappingProxyType(
    {
        "rembrandt": LightingOption(
            "Rembrandt",
            "Rembrandt lighting, dramatic portrait lighting, single light source, "
            "classic portrait",
            "classic",
        ),
        "chiaroscuro": LightingOption(
            "Chiaroscuro",
            "chiaroscuro lighting, extreme contrast, Caravaggio style, Renaissance painting "
            "light, bold light and shadow",
            "classic",
        ),
        "highkey": LightingOption(
            "High Key",
            "high key lighting, bright and soft, minimal shadows, even illumination, airy, "
            "optimistic mood",
            "classic",
        ),
        "lowkey": LightingOption(
            "Low Key",
            "low key lighting, mostly dark, selective highlights, single key light, "
            "underexposed fill, dark exposure",
            "classic",
        ),
        "goldenhour": LightingOption(
            "Golden Hour",
            "golden hour lighting, warm sunlight, soft orange glow, sunset light, magic hour, "
            "long shadows",
            "natural",
        ),
        "bluehour": LightingOption(
            "Blue Hour",
            "blue hour lighting, cool blue ambient light, twilight, melancholic mood, "
            "post-sunset, pre-dawn",
            "natural",
        ),
        "moonlit": LightingOption(
            "Moonlit Night",
            "moonlight, night exterior, deep blue light, high contrast shadows, lunar "
            "illumination, nocturnal",
            "natural",
        ),
        "practical": LightingOption(
            "Practical Light",
            "practical lighting, motivated light sources, in-scene light sources, diegetic "
            "lighting, realistic interior lighting",
            "natural",
        ),
        "neon": LightingOption(
            "Cyberpunk Neon",
            "neon lighting, glowing tubes, reflective surfaces, wet streets, electric color "
            "spill",
            "stylized",
        ),
        "godrays": LightingOption(
            "God Rays",
            "volumetric lighting, god rays, light beams through dust, atmospheric haze, epic "
            "light shafts, divine light",
            "stylized",
        ),
        "softbox": LightingOption(
            "Studio Softbox",
            "studio lighting, softbox diffused light, fashion photography lighting, clean "
            "and even, professional portrait",
            "stylized",
        ),
        "bioluminescent": LightingOption(
            "Bioluminescent",
            "bioluminescent glow, self-illuminating, fantasy lighting, glowing organisms, "
            "ethereal inner light",
            "stylized",
        ),
    }
)

# A held atmosphere or preset rules out every camera in these categories.
ATMOSPHERE_BLOCKS_CATEGORIES = MappingProxyType(
    {
        "studio": frozenset({"vintage-lofi", "antique", "aerial"}),
        "cyberpunk": frozenset({"antique"}),
        "noir": frozenset({"aerial"}),
    }
)

PRESET_BLOCKS_CATEGORIES = MappingProxyType(
    {
        "vivid": frozenset({"vintage-lofi", "antique"}),
        "highcontrast": frozenset({"vintage-lofi", "antique"}),
    }
)

# (atmosphere, lighting) pairs that say the same thing twice.
ATMOSPHERE_LIGHTING_REDUNDANCY = MappingProxyType(
    {
        ("cyberpunk", "neon"): "Cyberpunk atmosphere already includes neon aesthetic",
        ("moody", "lowkey"): "Moody atmosphere already implies dark, low-key lighting",
        ("moody", "chiaroscuro"): "Moody atmosphere already implies dramatic shadows",
        ("studio", "softbox"): "Studio atmosphere already includes softbox lighting",
        ("studio", "highkey"): "Studio atmosphere already implies bright, even lighting",
    }
)

# Atmospheres whose look already includes a depth-of-field effect.
ATMOSPHERE_BLOCKS_DOF = MappingProxyType({"dreamy": frozenset({"shallow"})})

# Atmospheres too large in scale for a shot's framing.
ATMOSPHERE_SHOT_CONFLICTS = MappingProxyType({"epic": frozenset({"Extreme Close-Up (ECU)"})})

# Style families each selection asserts. Too many assertions in one family
# read as stacked, conflicting instructions.
ATMOSPHERE_IMPLIED_STYLES = MappingProxyType(
    {
        "cinematic": ("film", "mood"),
        "cyberpunk": ("color", "contrast", "mood"),
        "studio": ("realism", "contrast"),
        "moody": ("mood", "contrast"),
        "dreamy": ("mood", "color"),
        "natural": ("realism",),
        "vintage": ("era", "film", "color"),
        "epic": ("film", "mood"),
        "horror": ("mood", "contrast"),
        "romantic": ("mood", "color"),
        "noir": ("mood", "contrast", "era"),
    }
)

PRESET_IMPLIED_STYLES = MappingProxyType(
    {
        "raw": ("realism",),
        "highcontrast": ("contrast",),
        "desaturated": ("color",),
        "vivid": ("color",),
        "filmlook": ("film", "era"),
        "bleachbypass": ("color", "contrast", "film"),
    }
)

LIGHTING_IMPLIED_STYLES = MappingProxyType(
    {
        "chiaroscuro": ("contrast", "mood"),
        "highkey": ("contrast",),
        "lowkey": ("contrast", "mood"),
        "neon": ("color", "mood"),
        "goldenhour": ("color",),
        "moonlit": ("mood", "color"),
    }
)

STYLE_CATEGORY_LIMITS = MappingProxyType(
    {
        "realism": 2,
        "film": 2,
        "color": 1,
        "contrast": 1,
        "era": 1,
        "medium": 1,
        "mood": 2,
    }
)

# Beyond this many style assertions a prompt overwhelms the model.
MAX_STYLE_ASSERTIONS = 7
