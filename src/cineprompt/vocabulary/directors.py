"""Director styles and the selections each one rules out."""

from __future__ import annotations

from types import MappingProxyType

from cineprompt.models.conflict import DirectorStyle

_CONSUMER_VIDEO = ("VHS Camcorder", "Hi8", "Handycam", "Betacam")
_SMARTPHONES = ("iPhone Pro", "GoPro", "DJI Drone")
_ANTIQUE_PHOTO = ("Daguerreotype", "Tintype", "Wet Plate", "Pinhole Camera")
_DISPOSABLE = ("Disposable Camera", "Polaroid SX-70")
_MODERN_DIGITAL = ("RED V-Raptor", "RED Komodo", "Sony A7S III", "Sony A1", "Canon R5", "Nikon Z9")


def _director(
    name: str,
    description: str,
    keywords: str,
    *,
    atmospheres: tuple[str, ...] = (),
    presets: tuple[str, ...] = (),
    cameras: tuple[str, ...] = (),
) -> DirectorStyle:
    return DirectorStyle(
        name=name,
        description=description,
        keywords=keywords,
        blocked_atmospheres=frozenset(atmospheres),
        blocked_presets=frozenset(presets),
        blocked_cameras=frozenset(cameras),
    )


DIRECTOR_STYLES: tuple[DirectorStyle, ...] = (
    _director(
        "Wes Anderson",
        "Symmetrical, pastel colors, whimsical vintage feel",
        "Wes Anderson style, symmetrical composition, pastel color palette, whimsical, "
        "centered framing, vintage aesthetic",
        atmospheres=("cyberpunk", "moody"),
        presets=("highcontrast", "bleachbypass"),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_ANTIQUE_PHOTO, "MiniDV"),
    ),
    _director(
        "Quentin Tarantino",
        "Bold colors, low angles, 70s grindhouse grit",
        "Quentin Tarantino style, realistic film still, photorealistic, live action movie, "
        "35mm film, bold colors, low angle shots, trunk shot, 70s grindhouse aesthetic, "
        "cinematic lighting, not illustration, not anime",
        atmospheres=("dreamy", "studio"),
        presets=("desaturated",),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_ANTIQUE_PHOTO, "MiniDV"),
    ),
    _director(
        "Stanley Kubrick",
        "One-point perspective, cold, unsettling symmetry",
        "Stanley Kubrick style, one-point perspective, symmetrical framing, cold colors, "
        "wide angle, unsettling atmosphere",
        atmospheres=("dreamy",),
        presets=("vivid",),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, "MiniDV"),
    ),
    _director(
        "David Lynch",
        "Surreal, dark, uncanny dreamlike atmosphere",
        "David Lynch style, surrealist, dreamlike, dark atmosphere, uncanny, mysterious "
        "lighting, noir",
        atmospheres=("natural", "studio"),
        presets=("vivid", "raw"),
        # MiniDV stays available: Inland Empire was shot on it.
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES),
    ),
    _director(
        "Christopher Nolan",
        "IMAX scale, dark and gritty, epic realism",
        "Christopher Nolan style, IMAX quality, dark and gritty, complex composition, "
        "realistic, grand scale",
        atmospheres=("dreamy", "vintage"),
        presets=("desaturated",),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_DISPOSABLE, "MiniDV", "Super 8", "8mm Film"),
    ),
    _director(
        "Denis Villeneuve",
        "Vast landscapes, muted colors, atmospheric minimal",
        "Denis Villeneuve style, atmospheric, vast landscapes, slow and deliberate, muted "
        "colors, epic scale, minimal",
        atmospheres=("cyberpunk", "vintage"),
        presets=("vivid",),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_DISPOSABLE, *_ANTIQUE_PHOTO, "MiniDV"),
    ),
    _director(
        "Ridley Scott",
        "Epic production, smoke and haze, textured atmosphere",
        "Ridley Scott style, detailed production design, atmospheric lighting, smoke and "
        "haze, epic, textured",
        atmospheres=("dreamy",),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_DISPOSABLE, "MiniDV"),
    ),
    _director(
        "Wong Kar-wai",
        "Neon lights, motion blur, romantic urban nights",
        "Wong Kar-wai style, neon lights, motion blur, saturated colors, romantic "
        "melancholy, urban night",
        atmospheres=("natural", "studio"),
        presets=("raw", "desaturated"),
        cameras=(*_CONSUMER_VIDEO, *_ANTIQUE_PHOTO, *_SMARTPHONES, "MiniDV"),
    ),
    _director(
        "Terrence Malick",
        "Golden hour, natural light, poetic nature imagery",
        "Terrence Malick style, golden hour, natural light, poetic, nature imagery, magic "
        "hour, ethereal",
        atmospheres=("cyberpunk", "studio", "moody"),
        presets=("highcontrast", "bleachbypass"),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_ANTIQUE_PHOTO, "MiniDV"),
    ),
    _director(
        "Akira Kurosawa",
        "Dynamic weather, dramatic composition, epic samurai",
        "Akira Kurosawa style, dynamic composition, weather elements, rain and wind, "
        "samurai epic, dramatic",
        atmospheres=("studio", "cyberpunk"),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_DISPOSABLE, "MiniDV", *_MODERN_DIGITAL),
    ),
    _director(
        "Tim Burton",
        "Gothic, dark whimsy, expressionist twisted aesthetic",
        "Tim Burton style, gothic, dark whimsy, German expressionist, twisted, striped "
        "patterns, pale characters",
        atmospheres=("natural", "studio"),
        presets=("vivid", "raw"),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, "MiniDV"),
    ),
    _director(
        "David Fincher",
        "Dark, meticulous, green-yellow tint, noir shadows",
        "David Fincher style, dark and moody, green-yellow tint, meticulous, shadows, "
        "desaturated, noir",
        atmospheres=("dreamy", "natural"),
        presets=("vivid", "raw"),
        cameras=(
            *_CONSUMER_VIDEO,
            *_SMARTPHONES,
            *_DISPOSABLE,
            *_ANTIQUE_PHOTO,
            "MiniDV",
            "Super 8",
            "8mm Film",
        ),
    ),
    _director(
        "Coen Brothers",
        "Quirky dark humor, midwest americana, offbeat",
        "Coen Brothers style, quirky characters, dark humor, midwest americana, offbeat, "
        "ironic",
        atmospheres=("dreamy", "cyberpunk"),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, "MiniDV"),
    ),
    _director(
        "Park Chan-wook",
        "Bold colors, stylized symmetry, revenge aesthetic",
        "Park Chan-wook style, revenge aesthetic, stylized violence, bold colors, symmetry, "
        "Korean cinema",
        atmospheres=("dreamy", "natural"),
        presets=("raw", "desaturated"),
        cameras=(*_CONSUMER_VIDEO, *_SMARTPHONES, *_ANTIQUE_PHOTO, "MiniDV"),
    ),
    _director(
        "Andrei Tarkovsky",
        "Contemplative, water imagery, spiritual slow cinema",
        "Andrei Tarkovsky style, long contemplative shots, water imagery, spiritual, "
        "dreamlike, slow cinema",
        atmospheres=("cyberpunk", "studio"),
        presets=("vivid", "highcontrast"),
        cameras=(
            *_CONSUMER_VIDEO,
            *_SMARTPHONES,
            *_DISPOSABLE,
            "MiniDV",
            *_MODERN_DIGITAL,
            "ARRI Alexa 65",
        ),
    ),
)

DIRECTORS = MappingProxyType({style.name: style for style in DIRECTOR_STYLES})

# Director signatures that already cover a lighting, preset or atmosphere choice.
DIRECTOR_LIGHTING_REDUNDANCY = MappingProxyType(
    {
        "Wong Kar-wai": frozenset({"neon", "goldenhour"}),
        "Terrence Malick": frozenset({"goldenhour"}),
    }
)
DIRECTOR_PRESET_REDUNDANCY = MappingProxyType({"David Fincher": frozenset({"desaturated"})})
DIRECTOR_ATMOSPHERE_REDUNDANCY = MappingProxyType({"David Lynch": frozenset({"moody"})})

# Lens families that contradict a director's signature framing.
DIRECTOR_BLOCKED_LENSES = MappingProxyType(
    {
        "Stanley Kubrick": frozenset({"telephoto", "super-telephoto"}),
        "Akira Kurosawa": frozenset({"ultra-wide", "special"}),
        "Denis Villeneuve": frozenset({"super-telephoto"}),
    }
)

DIRECTOR_IMPLIED_STYLES = MappingProxyType(
    {
        "Wes Anderson": ("color", "film"),
        "Christopher Nolan": ("realism", "film", "contrast"),
        "Denis Villeneuve": ("realism", "mood", "contrast"),
        "Ridley Scott": ("realism", "mood", "contrast"),
        "David Fincher": ("color", "mood", "contrast"),
        "Stanley Kubrick": ("film", "contrast"),
        "Wong Kar-wai": ("color", "mood", "film"),
        "Terrence Malick": ("realism", "mood"),
        "David Lynch": ("mood", "contrast"),
        "Quentin Tarantino": ("film", "color"),
    }
)


def director_style(name: str) -> DirectorStyle | None:
    """Look up a director by name. Unknown or empty names return None."""
    return DIRECTORS.get(name)
