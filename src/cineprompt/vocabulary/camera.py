"""Camera, lens, shot and framing vocabularies.

Cameras map to a category, and each category carries the conflict rules the
resolver enforces. Cameras missing from ``CAMERA_CATEGORIES`` fall into the
unrestricted "none" category.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from cineprompt.models.conflict import UNRESTRICTED, ConflictRules, ZoomRange

NO_CATEGORY = "none"

_RATIO_PATTERN = re.compile(r"\d+(?:\.\d+)?:\d+(?:\.\d+)?")


@dataclass(frozen=True)
class CameraOption:
    """A selectable camera body or film format."""

    label: str
    keywords: str
    group: str


@dataclass(frozen=True)
class ShotOption:
    """A shot type with prompt keywords."""

    label: str
    keywords: str


@dataclass(frozen=True)
class DepthOfFieldOption:
    """A depth-of-field setting. ``normal`` contributes no keywords."""

    value: str
    label: str
    keywords: str


@dataclass(frozen=True)
class AspectRatioOption:
    """A selectable aspect ratio. ``none`` means backend default."""

    value: str
    label: str
    ratio: str


CAMERA_OPTIONS: tuple[CameraOption, ...] = (
    # Consumer & everyday
    CameraOption(
        "iPhone Pro",
        "shot on iPhone, smartphone photography, computational photography",
        "consumer",
    ),
    CameraOption("GoPro", "GoPro footage, wide angle, action camera, immersive", "consumer"),
    CameraOption("DJI Drone", "drone footage, quadcopter camera, sweeping flyover", "consumer"),
    CameraOption(
        "Overhead Drone Shot",
        "overhead drone shot, top-down aerial view, high altitude perspective",
        "consumer",
    ),
    # DSLR & mirrorless
    CameraOption(
        "Sony A7S III",
        "shot on Sony A7S III, low light specialist, video hybrid",
        "mirrorless",
    ),
    CameraOption("Sony A1", "shot on Sony A1, 50 megapixel, flagship mirrorless", "mirrorless"),
    CameraOption(
        "Canon R5", "shot on Canon R5, mirrorless, high resolution, modern", "mirrorless"
    ),
    CameraOption(
        "Canon 5D Mark IV",
        "shot on Canon 5D, full frame DSLR, professional photography",
        "mirrorless",
    ),
    CameraOption(
        "Nikon Z9", "shot on Nikon Z9, flagship mirrorless, professional", "mirrorless"
    ),
    CameraOption(
        "Nikon D850", "shot on Nikon D850, high resolution DSLR, sharp detail", "mirrorless"
    ),
    # Modern cinema
    CameraOption(
        "ARRI Alexa", "shot on ARRI Alexa, digital cinema, rich colors, cinematic", "cinema"
    ),
    CameraOption(
        "ARRI Alexa Mini",
        "shot on ARRI Alexa Mini, modern cinema, pristine quality",
        "cinema",
    ),
    CameraOption(
        "ARRI Alexa 65",
        "shot on ARRI Alexa 65, large format digital, incredible detail",
        "cinema",
    ),
    CameraOption(
        "RED V-Raptor", "shot on RED V-Raptor, 8K cinema, ultra high resolution", "cinema"
    ),
    CameraOption(
        "RED Komodo", "shot on RED Komodo, 6K digital cinema, sharp, modern", "cinema"
    ),
    CameraOption(
        "Sony Venice",
        "shot on Sony Venice, full frame cinema, beautiful color science",
        "cinema",
    ),
    CameraOption(
        "Sony FX9", "shot on Sony FX9, documentary cinema, natural colors", "cinema"
    ),
    CameraOption(
        "Blackmagic URSA",
        "shot on Blackmagic URSA, digital film, rich dynamic range",
        "cinema",
    ),
    CameraOption("Canon C500", "shot on Canon C500, cinema EOS, clean digital", "cinema"),
    CameraOption(
        "Canon C70", "shot on Canon C70, compact cinema camera, versatile", "cinema"
    ),
    # Film formats
    CameraOption(
        "35mm Film",
        "shot on 35mm film, classic cinema look, rich colors, natural grain",
        "film",
    ),
    CameraOption(
        "70mm IMAX",
        "shot on 70mm IMAX, massive resolution, stunning clarity, epic cinematography, "
        "immersive theatrical",
        "film",
    ),
    CameraOption(
        "65mm Film",
        "shot on 65mm film, epic scale, incredible detail, large format cinematography",
        "film",
    ),
    # Premium photography
    CameraOption(
        "Hasselblad X2D", "shot on Hasselblad X2D, 100 megapixel, incredible detail", "premium"
    ),
    CameraOption(
        "Hasselblad 500C",
        "shot on Hasselblad 500C, medium format film, square format, classic",
        "premium",
    ),
    CameraOption(
        "Leica M11", "shot on Leica M11, full frame digital, Leica color science", "premium"
    ),
    CameraOption(
        "Leica M6",
        "shot on Leica M6, 35mm rangefinder, street photography aesthetic",
        "premium",
    ),
    CameraOption(
        "Phase One XF", "shot on Phase One, medium format digital, studio quality", "premium"
    ),
    # Classic cinema
    CameraOption(
        "Panavision Panaflex",
        "shot on Panavision, anamorphic, cinematic, blockbuster quality",
        "classic",
    ),
    CameraOption(
        "Panavision DXL2",
        "shot on Panavision DXL2, large format digital, Hollywood quality",
        "classic",
    ),
    CameraOption(
        "Arriflex 35", "shot on Arriflex 35mm, classic Hollywood cinematography", "classic"
    ),
    CameraOption(
        "Arriflex 16SR", "shot on Arriflex 16SR, documentary style, naturalistic", "classic"
    ),
    CameraOption(
        "Mitchell BNC", "shot on Mitchell BNC, golden age Hollywood, classic cinema", "classic"
    ),
    CameraOption(
        "Bolex H16",
        "shot on Bolex H16, 16mm film, experimental cinema, art film aesthetic",
        "classic",
    ),
    # Vintage film
    CameraOption(
        "16mm Film",
        "shot on 16mm film, organic film grain, indie cinema look, documentary filmmaking "
        "aesthetic, newsreel quality, visible grain structure, natural color rendition, "
        "art house cinema, reversal film texture, handheld camera feel",
        "vintage-film",
    ),
    CameraOption(
        "Super 16",
        "shot on Super 16mm, wider aspect ratio than standard 16mm, cinematic film grain, "
        "1990s-2000s indie film aesthetic, documentary style, organic texture, blown out "
        "to 35mm look, naturalistic lighting, Dogme 95 style",
        "vintage-film",
    ),
    CameraOption(
        "Super 8",
        "shot on Super 8, visible film grain, nostalgic 1970s aesthetic, Kodachrome or "
        "Ektachrome colors, mechanical shutter flicker, dust particles, light leaks, soft "
        "focus vignette, home movie warmth, film texture, slightly overexposed highlights",
        "vintage-film",
    ),
    CameraOption(
        "8mm Film",
        "shot on 8mm film, heavy film grain, vintage home movie, warm Kodachrome tones, "
        "light leaks, projector flicker, dust and scratches, narrow gauge film, 1950s-60s "
        "aesthetic, faded colors, sprocket artifacts, amateur film look",
        "vintage-film",
    ),
    # Vintage video
    CameraOption(
        "VHS Camcorder",
        "recorded on VHS camcorder, VHS aesthetic, analog video, scan lines, tracking "
        "artifacts, color bleeding, horizontal noise bars, oversaturated reds, interlaced "
        "480i, chromatic aberration, tape degradation, magnetic tape distortion, 1980s "
        "home video, CRT television look",
        "vintage-video",
    ),
    CameraOption(
        "MiniDV",
        "recorded on MiniDV camcorder, early digital video, 2000s indie film look, low "
        "resolution 480i, soft blurry image, standard definition video still, DV "
        "compression artifacts, interlaced video, tape dropout glitches, Y2K era "
        "aesthetic, muted washed out colors, color smearing on edges, blocky pixelated "
        "compression, crushed blacks, blown highlights, green color cast, low quality "
        "video capture, fuzzy details",
        "vintage-video",
    ),
    CameraOption(
        "Hi8",
        "recorded on Hi8 camcorder, consumer analog video, 1990s camcorder aesthetic, "
        "warmer colors than VHS, pastel color shift, soft highlights, family vacation "
        "footage, S-video quality, late analog era, RGB color fringing on edges, chroma "
        "bleed, soft blurry low resolution, interlaced video artifacts",
        "vintage-video",
    ),
    CameraOption(
        "Handycam",
        "recorded on Sony Handycam, consumer camcorder, home video aesthetic, low "
        "resolution video, soft blurry image, auto-exposure fluctuations, handheld camera "
        "shake, amateur video quality, auto white balance color shifts, washed out "
        "colors, video noise in shadows, interlaced artifacts, blown out highlights, "
        "consumer video look, 1990s home movie, fuzzy details, Video8 format",
        "vintage-video",
    ),
    CameraOption(
        "Betacam",
        "recorded on Betacam SP, broadcast video, standard definition 480i, soft blurry "
        "image, low resolution, blue cyan color cast tint, blown out highlights, hazy "
        "lifted blacks, flat low contrast image, faded washed out colors, RGB "
        "misregistration, chroma misalignment, old TV news broadcast footage, 1980s-90s "
        "video capture, analog tape generation loss, interlace scan lines",
        "vintage-video",
    ),
    # Vintage photography
    CameraOption(
        "Polaroid SX-70",
        "Polaroid instant photo, vintage instant film, soft dreamy colors, white border "
        "frame, Polaroid color shift, slightly washed out, creamy highlights, soft "
        "vignette, 1970s instant photography, square format, imperfect development, warm "
        "color cast",
        "vintage-photo",
    ),
    CameraOption(
        "Contax T2",
        "shot on Contax T2, 35mm compact, Zeiss lens, 1990s aesthetic",
        "vintage-photo",
    ),
    CameraOption(
        "Rolleiflex",
        "shot on Rolleiflex TLR, vintage medium format, classic portrait look",
        "vintage-photo",
    ),
    CameraOption(
        "Mamiya RZ67",
        "shot on Mamiya RZ67, medium format, portrait photography, creamy bokeh",
        "vintage-photo",
    ),
    CameraOption(
        "Disposable Camera",
        "shot on disposable camera, harsh direct flash, washed out colors, soft focus, "
        "light leaks, film grain, vignette, 90s snapshot, amateur photography, red-eye "
        "flash, low contrast, candid moment",
        "vintage-photo",
    ),
    # Antique & experimental
    CameraOption(
        "Pinhole Camera",
        "pinhole camera photograph, infinite depth of field, very soft ethereal image, "
        "heavy vignetting, long exposure motion blur, primitive photography aesthetic, "
        "light diffraction, dreamlike quality, experimental photography",
        "antique",
    ),
    CameraOption(
        "Daguerreotype",
        "daguerreotype photograph, 1840s-1850s photography, mirror-like silver plate "
        "surface, highly reflective, extreme detail in midtones, sepia and silver tones, "
        "formal posed portrait, long exposure stillness, antique brass frame, "
        "hand-tinted accents, reversed laterally, earliest photography aesthetic",
        "antique",
    ),
    CameraOption(
        "Tintype",
        "tintype photograph, Civil War era 1860s-1870s aesthetic, dark iron plate, direct "
        "positive image, slightly underexposed, matte surface texture, silver nitrate "
        "emulsion, hand-held carte de visite, scratched and aged patina, sepia brown "
        "tones, ferrotype look",
        "antique",
    ),
    CameraOption(
        "Wet Plate",
        "wet plate collodion photograph, Victorian era 1850s-1880s, hand-poured emulsion "
        "imperfections, milky whites, blue-sensitive only, swirly bokeh from period "
        "lenses, glass plate negative, chemical drip marks on edges, ultra-sharp central "
        "focus, creamy smooth tonal gradations, archival antique look",
        "antique",
    ),
)

CAMERAS = MappingProxyType({option.label: option for option in CAMERA_OPTIONS})


def _categorize(category: str, *cameras: str) -> dict[str, str]:
    return dict.fromkeys(cameras, category)


CAMERA_CATEGORIES = MappingProxyType(
    {
        **_categorize(
            "vintage-lofi",
            "VHS Camcorder",
            "Betacam",
            "Hi8",
            "MiniDV",
            "Handycam",
            "8mm Film",
            "Super 8",
            "Disposable Camera",
            "Pinhole Camera",
        ),
        **_categorize("antique", "Daguerreotype", "Wet Plate", "Tintype"),
        **_categorize(
            "classic-film",
            "16mm Film",
            "Super 16",
            "35mm Film",
            "Bolex H16",
            "Arriflex 16SR",
            "Arriflex 35",
            "Mitchell BNC",
        ),
        **_categorize("epic-film", "65mm Film", "70mm IMAX", "Panavision Panaflex"),
        **_categorize("medium-format-classic", "Hasselblad 500C", "Mamiya RZ67", "Rolleiflex"),
        **_categorize("35mm-classic", "Leica M6", "Contax T2", "Polaroid SX-70"),
        **_categorize(
            "modern-cinema",
            "ARRI Alexa",
            "ARRI Alexa Mini",
            "ARRI Alexa 65",
            "RED Komodo",
            "RED V-Raptor",
            "Sony Venice",
            "Sony FX9",
            "Blackmagic URSA",
            "Canon C500",
            "Canon C70",
            "Panavision DXL2",
        ),
        **_categorize(
            "modern-digital",
            "Hasselblad X2D",
            "Leica M11",
            "Phase One XF",
            "Canon 5D Mark IV",
            "Canon R5",
            "Nikon D850",
            "Nikon Z9",
            "Sony A7S III",
            "Sony A1",
        ),
        **_categorize("consumer-mobile", "GoPro", "DJI Drone", "iPhone Pro"),
        **_categorize("aerial", "Overhead Drone Shot"),
    }
)

_LOFI_PRESETS = frozenset({"vivid", "highcontrast"})
_NO_SHALLOW_FOCUS = frozenset({"shallow", "tilt-shift"})

CATEGORY_RULES = MappingProxyType(
    {
        "vintage-lofi": ConflictRules(
            blocked_atmospheres=frozenset({"studio", "cyberpunk"}),
            blocked_presets=_LOFI_PRESETS,
            blocked_dof=_NO_SHALLOW_FOCUS,
            fixed_lens="fixed zoom lens",
            warning_message="Lo-fi cameras have limited quality and fixed lenses",
        ),
        "antique": ConflictRules(
            blocked_atmospheres=frozenset({"studio", "cyberpunk", "dreamy"}),
            blocked_presets=_LOFI_PRESETS,
            blocked_dof=_NO_SHALLOW_FOCUS,
            fixed_lens="period-appropriate lens",
            warning_message="Antique cameras have fixed optics and monochrome output",
        ),
        "consumer-mobile": ConflictRules(
            blocked_dof=frozenset({"tilt-shift"}),
            fixed_lens="built-in wide lens",
            warning_message="Consumer cameras have fixed wide-angle lenses",
        ),
        "aerial": ConflictRules(
            blocked_atmospheres=frozenset({"noir", "studio"}),
            blocked_dof=_NO_SHALLOW_FOCUS,
            fixed_lens="wide-angle aerial lens",
            warning_message="Aerial shots are framed from altitude with a fixed wide lens",
        ),
    }
)

CAMERA_FIXED_LENS = MappingProxyType(
    {
        "GoPro": "ultra-wide 16mm equivalent",
        "iPhone Pro": "built-in multi-lens system",
        "DJI Drone": "wide-angle aerial lens",
        "Disposable Camera": "fixed 30mm plastic lens",
        "Pinhole Camera": "pinhole aperture (no lens)",
        "Polaroid SX-70": "fixed 116mm lens",
        "Contax T2": "Zeiss Sonnar 38mm f/2.8",
        "Daguerreotype": "Petzval-style brass lens",
        "Wet Plate": "large format brass lens",
        "Tintype": "period brass lens",
        "Rolleiflex": "Zeiss Planar 80mm f/2.8",
    }
)

CAMERA_ZOOM_RANGES = MappingProxyType(
    {
        "VHS Camcorder": ZoomRange(
            "8-80mm (48-480mm equiv)",
            ("8mm (Wide)", "24mm", "40mm", "60mm", "80mm (Tele)"),
        ),
        "Handycam": ZoomRange(
            "3.6-36mm (40-400mm equiv)",
            ("3.6mm (Wide)", "10mm", "20mm", "36mm (Tele)"),
        ),
        "Hi8": ZoomRange(
            "5.4-54mm (42-420mm equiv)",
            ("5.4mm (Wide)", "15mm", "30mm", "54mm (Tele)"),
        ),
        "Betacam": ZoomRange(
            "8.5-119mm broadcast zoom",
            ("8.5mm (Wide)", "25mm", "50mm", "85mm", "119mm (Tele)"),
        ),
        "MiniDV": ZoomRange(
            "5.9-59mm f/1.6 (41-410mm equiv)",
            ("5.9mm (Wide)", "15mm", "30mm", "45mm", "59mm (Tele)"),
        ),
    }
)

# Cameras missing here accept every aspect ratio.
CAMERA_ASPECT_RATIOS = MappingProxyType(
    {
        "VHS Camcorder": ("4:3",),
        "Betacam": ("4:3", "16:9"),
        "Hi8": ("4:3",),
        "MiniDV": ("4:3", "16:9"),
        "Handycam": ("4:3", "16:9"),
        "8mm Film": ("4:3", "1.33:1"),
        "Super 8": ("4:3",),
        "16mm Film": ("4:3", "1.66:1"),
        "Super 16": ("1.66:1", "1.85:1"),
        "35mm Film": ("4:3", "16:9", "21:9", "2.39:1"),
        "65mm Film": ("2.2:1", "2.76:1"),
        "70mm IMAX": ("1.43:1", "1.9:1"),
        "Polaroid SX-70": ("1:1",),
        "Hasselblad 500C": ("1:1",),
        "Rolleiflex": ("1:1",),
        "Mamiya RZ67": ("4:5", "1:1"),
        "Daguerreotype": ("4:5", "3:4", "1:1"),
        "Tintype": ("4:5", "3:4", "1:1"),
        "Wet Plate": ("4:5", "3:4", "1:1"),
    }
)

LENS_OPTIONS: tuple[str, ...] = (
    "Macro",
    "Fisheye",
    "14mm",
    "18mm",
    "24mm",
    "28mm",
    "35mm",
    "50mm",
    "85mm",
    "135mm",
    "200mm",
    "400mm",
    "600mm",
)

SHOT_OPTIONS: tuple[ShotOption, ...] = (
    ShotOption(
        "Extreme Wide Shot (XWS)",
        "extreme wide shot, establishing shot, vast landscape, tiny subject",
    ),
    ShotOption("Wide Shot (WS)", "wide shot, full environment visible, subject in context"),
    ShotOption("Full Shot", "full shot, entire body visible, head to toe framing"),
    ShotOption("Medium Wide Shot", "medium wide shot, cowboy shot, knees up framing"),
    ShotOption("Medium Shot (MS)", "medium shot, waist up framing, conversational distance"),
    ShotOption(
        "Medium Close-Up (MCU)", "medium close-up, chest up framing, emotional connection"
    ),
    ShotOption("Close-Up (CU)", "close-up shot, face filling frame, intimate portrait"),
    ShotOption(
        "Extreme Close-Up (ECU)", "extreme close-up, macro detail, eyes or single feature"
    ),
    ShotOption("Low Angle", "low angle shot, camera looking up, powerful perspective"),
    ShotOption("High Angle", "high angle shot, camera looking down, vulnerable perspective"),
    ShotOption("Dutch Angle", "dutch angle, tilted camera, canted frame, disorienting"),
    ShotOption(
        "Bird's Eye View",
        "bird's eye view, top-down shot, overhead perspective, aerial view",
    ),
    ShotOption("POV", "POV shot, point of view, first person perspective, subjective camera"),
    ShotOption(
        "Over the Shoulder (OTS)",
        "over the shoulder shot, OTS, back of head visible, looking at subject",
    ),
)

SHOTS = MappingProxyType({option.label: option for option in SHOT_OPTIONS})

DOF_OPTIONS: tuple[DepthOfFieldOption, ...] = (
    DepthOfFieldOption(
        "shallow",
        "Shallow (Bokeh)",
        "shallow depth of field, beautiful bokeh, blurred background, f/1.4",
    ),
    DepthOfFieldOption("normal", "Normal", ""),
    DepthOfFieldOption(
        "deep",
        "Deep (All in Focus)",
        "deep depth of field, everything in focus, f/11, sharp throughout",
    ),
    DepthOfFieldOption(
        "tilt-shift", "Tilt-Shift", "tilt-shift photography, miniature effect, selective focus"
    ),
)

DEPTHS_OF_FIELD = MappingProxyType({option.value: option for option in DOF_OPTIONS})

# Focal-length families used by shot and director lens rules.
LENS_CATEGORIES = MappingProxyType(
    {
        "Macro": "special",
        "Fisheye": "special",
        "14mm": "ultra-wide",
        "18mm": "ultra-wide",
        "24mm": "wide",
        "28mm": "wide",
        "35mm": "standard",
        "50mm": "standard",
        "85mm": "portrait",
        "135mm": "portrait",
        "200mm": "telephoto",
        "400mm": "super-telephoto",
        "600mm": "super-telephoto",
    }
)

# Lens families that break a shot's framing.
SHOT_LENS_CONFLICTS = MappingProxyType(
    {
        "Over the Shoulder (OTS)": frozenset({"ultra-wide", "super-telephoto", "special"}),
        "Extreme Wide Shot (XWS)": frozenset({"telephoto", "super-telephoto", "portrait"}),
        "Wide Shot (WS)": frozenset({"super-telephoto"}),
        "Close-Up (CU)": frozenset({"ultra-wide"}),
        "Extreme Close-Up (ECU)": frozenset({"ultra-wide", "super-telephoto"}),
    }
)

# Tilt-shift reads as miniature grammar, not narrative or portrait framing.
SHOT_DOF_CONFLICTS = MappingProxyType(
    {
        "Over the Shoulder (OTS)": frozenset({"tilt-shift"}),
        "Medium Close-Up (MCU)": frozenset({"tilt-shift"}),
        "Close-Up (CU)": frozenset({"tilt-shift"}),
        "Extreme Close-Up (ECU)": frozenset({"tilt-shift"}),
    }
)

ASPECT_RATIO_OPTIONS: tuple[AspectRatioOption, ...] = (
    AspectRatioOption("none", "Default", ""),
    AspectRatioOption("1:1", "1:1 Square", "1:1"),
    AspectRatioOption("4:3", "4:3 Standard", "4:3"),
    AspectRatioOption("3:2", "3:2 Classic", "3:2"),
    AspectRatioOption("16:9", "16:9 Widescreen", "16:9"),
    AspectRatioOption("21:9", "21:9 Cinematic", "21:9"),
    AspectRatioOption("9:16", "9:16 Vertical", "9:16"),
    AspectRatioOption("2:3", "2:3 Portrait", "2:3"),
    AspectRatioOption("4:5", "4:5 Instagram", "4:5"),
)

ASPECT_RATIOS = MappingProxyType({option.value: option for option in ASPECT_RATIO_OPTIONS})


def camera_category(camera: str) -> str:
    """Category key for ``camera``, or ``"none"`` when unknown or unset."""
    return CAMERA_CATEGORIES.get(camera, NO_CATEGORY)


def category_rules(category: str) -> ConflictRules:
    """Conflict rules for ``category``. Unknown categories block nothing."""
    return CATEGORY_RULES.get(category, UNRESTRICTED)


def fixed_lens_for(camera: str) -> str | None:
    """Fixed lens description, or None when the camera takes a lens choice.

    Cameras with a built-in zoom range offer focal lengths and so never
    report a fixed lens.
    """
    if not camera or camera in CAMERA_ZOOM_RANGES:
        return None
    return CAMERA_FIXED_LENS.get(camera) or category_rules(camera_category(camera)).fixed_lens


def aspect_ratio_display(value: str | None) -> str | None:
    """Ratio text for an aspect-ratio selection.

    Film-format ratios such as ``2.39:1`` are not menu options but may be
    held when a camera allows them; they display verbatim.

    Returns:
        The ratio string, or None for "none", unset and unrecognized values.
    """
    if not value:
        return None
    option = ASPECT_RATIOS.get(value)
    if option is not None:
        return option.ratio or None
    if _RATIO_PATTERN.fullmatch(value):
        return value
    return None
