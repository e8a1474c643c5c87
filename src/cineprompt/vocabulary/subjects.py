"""Ready-made subjects for random scenes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MagicSubject:
    """A subject line and the kind of scene it describes.

    Only "character" and "portrait" subjects are people.
    """

    text: str
    category: str

    @property
    def is_person(self) -> bool:
        return self.category in ("character", "portrait")


def _subjects(category: str, *texts: str) -> tuple[MagicSubject, ...]:
    return tuple(MagicSubject(text, category) for text in texts)


MAGIC_SUBJECTS: tuple[MagicSubject, ...] = (
    *_subjects(
        "character",
        "A futuristic soldier standing in a sandstorm on a desolate planet",
        "A high-fashion model wearing a dress made of liquid gold in a brutalist concrete hall",
        "A jazz musician playing the saxophone under a single streetlamp in 1950s New York",
        "A cybernetic monk meditating inside a high-tech forest",
        "A cyberpunk mercenary in a neon alley, rain dripping from their worn leather jacket",
        "An elderly fisherman at dawn, mending nets on a weathered wooden dock",
        "A Victorian-era detective examining evidence under gaslight in a foggy London street",
        "A samurai warrior standing alone in a field of tall grass, wind in their hair",
        "A street artist spray-painting a massive mural on a graffiti-covered wall at midnight",
        "A ballet dancer mid-leap in an abandoned theater, dust particles catching the spotlight",
        "A weary astronaut removing their helmet inside a cramped spacecraft",
        "A mysterious fortune teller in a dimly lit caravan surrounded by crystal balls "
        "and candles",
        "A punk rock guitarist smashing their instrument on stage, sparks flying everywhere",
        "A scientist in a hazmat suit examining a glowing specimen in a sterile laboratory",
        "A lone cowboy silhouetted against a burning sunset in the Arizona desert",
    ),
    *_subjects(
        "scene",
        "An abandoned amusement park at twilight, rusted ferris wheel against a purple sky",
        "A massive ancient library with towering bookshelves and floating lanterns",
        "A rain-soaked Tokyo street at 3am, vending machines glowing in the mist",
        "A frozen lake reflecting the northern lights in the Arctic wilderness",
        "An overgrown post-apocalyptic highway with nature reclaiming the concrete",
        "A cozy bookshop interior on a rainy afternoon, warm light through foggy windows",
        "A grand cathedral interior with dramatic light streaming through stained glass",
        "A bustling night market in Southeast Asia with hanging lanterns and steam rising "
        "from food stalls",
        "An underwater coral reef teeming with bioluminescent creatures",
        "A vintage 1960s diner at night, neon signs reflecting on wet pavement",
        "A misty bamboo forest at sunrise with a single stone path",
        "A massive steampunk clocktower interior with gears and brass mechanisms",
    ),
    *_subjects(
        "portrait",
        "A weathered ship captain with a salt-and-pepper beard and knowing eyes",
        "A young woman with flowers woven into her wild curly hair",
        "An ancient warrior king wearing a battle-scarred crown",
        "A child prodigy chess player with an intense, focused gaze",
        "A glamorous 1920s flapper with art deco jewelry and a cigarette holder",
        "A tattooed yakuza boss in traditional Japanese clothing",
        "A freckled redhead with striking green eyes in natural sunlight",
        "An elderly Native American chief with ceremonial face paint",
        "A futuristic android with human-like features and subtle mechanical details",
        "A tired nurse at the end of a long shift, compassion in their eyes",
    ),
    *_subjects(
        "action",
        "A motorcycle racer leaning into a sharp turn, sparks flying from the asphalt",
        "A cliff diver suspended in mid-air above turquoise waters",
        "A boxer throwing a knockout punch, sweat and determination frozen in time",
        "A parkour athlete leaping between rooftops against a city skyline",
        "A matador in the moment of truth, red cape flowing dramatically",
        "A snowboarder carving through fresh powder with mountain peaks behind",
        "A Formula 1 car exploding through a rain spray at 200mph",
        "A knight in full armor charging on horseback, lance lowered",
    ),
    *_subjects(
        "atmospheric",
        "A solitary lighthouse on a stormy cliff, waves crashing below",
        "A forgotten train station platform shrouded in morning fog",
        "A moonlit cemetery with ancient tombstones and a single mourner",
        "A volcanic landscape with rivers of lava and a dark ash-filled sky",
        "A serene Japanese garden in autumn, maple leaves floating on still water",
    ),
)
