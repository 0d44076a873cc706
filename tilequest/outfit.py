"""Player outfits: the clothing pieces, their colours and the layers they draw."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, TypeVar

from tilequest.rng import Rng

CHARACTER_TEXTURE_DIR = "assets/textures/character/"
OUTFIT_TEXTURE_SIZE = 1024  # size of the player tileset

C3_LUT_COLORS = 48
C4_LUT_COLORS = 58

SKIN_COLORS = 18
HAIR_COLORS = 58
SOCK_COLORS = C3_LUT_COLORS
SHOE_COLORS = C3_LUT_COLORS
LOWERWEAR_COLORS = C3_LUT_COLORS
SHIRT_COLORS = C3_LUT_COLORS
GLOVES_COLORS = C3_LUT_COLORS
OUTERWEAR_COLORS = C3_LUT_COLORS
NECKWEAR_COLORS_1 = C3_LUT_COLORS
NECKWEAR_COLORS_2 = C4_LUT_COLORS
GLASSES_COLORS = C3_LUT_COLORS
HAT_COLORS_1 = C3_LUT_COLORS
HAT_COLORS_2 = C4_LUT_COLORS


class Body(IntEnum):
    NONE = 0
    HUMAN = 1


class Socks(IntEnum):
    NONE = 0
    SOCKS_HIGH = 1
    SOCKS_LOW = 2
    STOCKINGS = 3


class Shoes(IntEnum):
    NONE = 0
    BOOTS = 1
    SANDALS = 2
    SHOES = 3
    CUFFED_BOOTS = 4
    CURLY_TOE_SHOES = 5


class Lowerwear(IntEnum):
    NONE = 0
    LONG_PANTS = 1
    ONEPIECE = 2
    ONEPIECE_BOOBS = 3
    SHORTS = 4
    UNDIES = 5
    OVERALLS = 6
    OVERALLS_BOOBS = 7
    SHORTALLS = 8
    SHORTALLS_BOOBS = 9
    FRILLY_DRESS = 10
    FRILLY_DRESS_BOOBS = 11
    FRILLY_SKIRT = 12
    LONG_DRESS = 13
    LONG_DRESS_BOOBS = 14
    LONG_SKIRT = 15


class Shirt(IntEnum):
    NONE = 0
    BRA = 1
    LONG_SHIRT = 2
    LONG_SHIRT_BOOBS = 3
    SHORT_SHIRT = 4
    SHORT_SHIRT_BOOBS = 5
    TANK_TOP = 6
    TANK_TOP_BOOBS = 7


class Gloves(IntEnum):
    NONE = 0
    GLOVES = 1


class Outerwear(IntEnum):
    NONE = 0
    SUSPENDERS = 1
    VEST = 2


class Neckwear(IntEnum):
    NONE = 0
    CLOAK_PLAIN = 1
    CLOAK_WITH_MANTLE_PLAIN = 2
    MANTLE_PLAIN = 3
    SCARF = 4


class Glasses(IntEnum):
    NONE = 0
    GLASSES = 1
    SHADES = 2


class Hair(IntEnum):
    NONE = 0
    AFRO = 1
    AFRO_PUFFS = 2
    BOB1 = 3
    BOB2 = 4
    DAPPER = 5
    FLATTOP = 6
    LONG_WAVY = 7
    PONYTAIL1 = 8
    SPIKY1 = 9
    SPIKY2 = 10
    TWINTAIL = 11
    TWISTS = 12


class Hat(IntEnum):
    NONE = 0
    BANDANA = 1  # replaces hair
    BOATER_HAT = 2
    COWBOY_HAT = 3
    FLOPPY_HAT = 4
    HEADSCARF = 5  # replaces hair
    STRAW_HAT = 6


class LutType(IntEnum):
    """Colour lookup palettes used to recolour a layer."""

    SKIN = 0
    HAIR = 1
    C3 = 2  # 3-colour ramps
    C4 = 3  # 4-colour ramps


_LUT_PATHS = {
    LutType.SKIN: "palettes/mana seed skin ramps.png",
    LutType.HAIR: "palettes/mana seed hair ramps.png",
    LutType.C3: "palettes/mana seed 3-color ramps.png",
    LutType.C4: "palettes/mana seed 4-color ramps.png",
}


def lut_texture_path(lut_type: LutType) -> str:
    """Full path of the palette texture for a lookup type."""
    return CHARACTER_TEXTURE_DIR + _LUT_PATHS[LutType(lut_type)]


@dataclass
class Outfit:
    body: Body = Body.HUMAN
    skin_color: int = 0
    socks: Socks = Socks.NONE
    socks_color: int = 0
    shoes: Shoes = Shoes.NONE
    shoes_color: int = 0
    lowerwear: Lowerwear = Lowerwear.NONE
    lowerwear_color: int = 0
    shirt: Shirt = Shirt.NONE
    shirt_color: int = 0
    gloves: Gloves = Gloves.NONE
    gloves_color: int = 0
    outerwear: Outerwear = Outerwear.NONE
    outerwear_color: int = 0
    neckwear: Neckwear = Neckwear.NONE
    neckwear_color_1: int = 0
    neckwear_color_2: int = 0
    glasses: Glasses = Glasses.NONE
    glasses_color: int = 0
    hair: Hair = Hair.NONE
    hair_color: int = 0
    hat: Hat = Hat.NONE
    hat_color_1: int = 0
    hat_color_2: int = 0


@dataclass(frozen=True)
class OutfitLayer:
    """One texture drawn onto the outfit sheet, with up to two palette lookups."""

    texture_path: str  # relative to CHARACTER_TEXTURE_DIR
    lut1_type: Optional[LutType] = None
    lut1_y: int = -1
    lut2_type: Optional[LutType] = None
    lut2_y: int = -1

    @property
    def path(self) -> str:
        return CHARACTER_TEXTURE_DIR + self.texture_path

    def lut_paths(self) -> tuple[Optional[str], Optional[str]]:
        """Palette textures bound to slots 1 and 2, None where unused."""
        return tuple(
            None if lut is None else lut_texture_path(lut)
            for lut in (self.lut1_type, self.lut2_type)
        )

    def uniform_block(self) -> dict[str, int]:
        """Shader uniform values; unused lookups are -1."""
        return {
            "lut1_type": -1 if self.lut1_type is None else int(self.lut1_type),
            "lut1_y": self.lut1_y,
            "lut2_type": -1 if self.lut2_type is None else int(self.lut2_type),
            "lut2_y": self.lut2_y,
        }


_E = TypeVar("_E", bound=IntEnum)


def _pick(rng: Rng, enum_type: type[_E], first: int = 0) -> _E:
    return enum_type(rng.range_i(first, len(enum_type) - 1))


def _color(rng: Rng, count: int) -> int:
    return rng.range_i(0, count - 1)


def randomize_outfit(rng: Optional[Rng] = None) -> Outfit:
    """Return an outfit with every piece and colour chosen at random."""
    rng = rng if rng is not None else Rng()
    return Outfit(
        body=_pick(rng, Body, first=1),
        skin_color=_color(rng, SKIN_COLORS),
        socks=_pick(rng, Socks),
        socks_color=_color(rng, SOCK_COLORS),
        shoes=_pick(rng, Shoes),
        shoes_color=_color(rng, SHOE_COLORS),
        lowerwear=_pick(rng, Lowerwear),
        lowerwear_color=_color(rng, LOWERWEAR_COLORS),
        shirt=_pick(rng, Shirt),
        shirt_color=_color(rng, SHIRT_COLORS),
        gloves=_pick(rng, Gloves),
        gloves_color=_color(rng, GLOVES_COLORS),
        outerwear=_pick(rng, Outerwear),
        outerwear_color=_color(rng, OUTERWEAR_COLORS),
        neckwear=_pick(rng, Neckwear),
        neckwear_color_1=_color(rng, NECKWEAR_COLORS_1),
        neckwear_color_2=_color(rng, NECKWEAR_COLORS_2),
        glasses=_pick(rng, Glasses),
        glasses_color=_color(rng, GLASSES_COLORS),
        hair=_pick(rng, Hair),
        hair_color=_color(rng, HAIR_COLORS),
        hat=_pick(rng, Hat),
        hat_color_1=_color(rng, HAT_COLORS_1),
        hat_color_2=_color(rng, HAT_COLORS_2),
    )


_UNDER_NECKWEAR = {
    Neckwear.CLOAK_PLAIN: ("00undr/fbas_00undr_cloakplain_00d.png", True),
    Neckwear.CLOAK_WITH_MANTLE_PLAIN: ("00undr/fbas_00undr_cloakwithmantleplain_00b.png", False),
}

_BODY = {Body.HUMAN: "01body/fbas_01body_human_00.png"}

_SOCKS = {
    Socks.SOCKS_HIGH: "02sock/fbas_02sock_sockshigh_00a.png",
    Socks.SOCKS_LOW: "02sock/fbas_02sock_sockslow_00a.png",
    Socks.STOCKINGS: "02sock/fbas_02sock_sockslow_00a.png",
}

_SHOES_LOW = {
    Shoes.BOOTS: "03fot1/fbas_03fot1_boots_00a.png",
    Shoes.SANDALS: "03fot1/fbas_03fot1_sandals_00a.png",
    Shoes.SHOES: "03fot1/fbas_03fot1_shoes_00a.png",
}

_LOWERWEAR_1 = {
    Lowerwear.LONG_PANTS: "04lwr1/fbas_04lwr1_longpants_00a.png",
    Lowerwear.ONEPIECE: "04lwr1/fbas_04lwr1_onepiece_00a.png",
    Lowerwear.ONEPIECE_BOOBS: "04lwr1/fbas_04lwr1_onepieceboobs_00a.png",
    Lowerwear.SHORTS: "04lwr1/fbas_04lwr1_shorts_00a.png",
    Lowerwear.UNDIES: "04lwr1/fbas_04lwr1_undies_00a.png",
}

_SHIRTS = {
    Shirt.BRA: "05shrt/fbas_05shrt_bra_00a.png",
    Shirt.LONG_SHIRT: "05shrt/fbas_05shrt_longshirt_00a.png",
    Shirt.LONG_SHIRT_BOOBS: "05shrt/fbas_05shrt_longshirtboobs_00a.png",
    Shirt.SHORT_SHIRT: "05shrt/fbas_05shrt_shortshirt_00a.png",
    Shirt.SHORT_SHIRT_BOOBS: "05shrt/fbas_05shrt_shortshirtboobs_00a.png",
    Shirt.TANK_TOP: "05shrt/fbas_05shrt_tanktop_00a.png",
    Shirt.TANK_TOP_BOOBS: "05shrt/fbas_05shrt_tanktopboobs_00a.png",
}

_LOWERWEAR_2 = {
    Lowerwear.OVERALLS: "06lwr2/fbas_06lwr2_overalls_00a.png",
    Lowerwear.OVERALLS_BOOBS: "06lwr2/fbas_06lwr2_overallsboobs_00a.png",
    Lowerwear.SHORTALLS: "06lwr2/fbas_06lwr2_shortalls_00a.png",
    Lowerwear.SHORTALLS_BOOBS: "06lwr2/fbas_06lwr2_shortallsboobs_00a.png",
}

_SHOES_HIGH = {
    Shoes.CUFFED_BOOTS: "07fot2/fbas_07fot2_cuffedboots_00a.png",
    Shoes.CURLY_TOE_SHOES: "07fot2/fbas_07fot2_curlytoeshoes_00a.png",
}

_LOWERWEAR_3 = {
    Lowerwear.FRILLY_DRESS: "08lwr3/fbas_08lwr3_frillydress_00a.png",
    Lowerwear.FRILLY_DRESS_BOOBS: "08lwr3/fbas_08lwr3_frillydressboobs_00a.png",
    Lowerwear.FRILLY_SKIRT: "08lwr3/fbas_08lwr3_frillyskirt_00a.png",
    Lowerwear.LONG_DRESS: "08lwr3/fbas_08lwr3_longdress_00a.png",
    Lowerwear.LONG_DRESS_BOOBS: "08lwr3/fbas_08lwr3_longdressboobs_00a.png",
    Lowerwear.LONG_SKIRT: "08lwr3/fbas_08lwr3_longskirt_00a.png",
}

_GLOVES = {Gloves.GLOVES: "09hand/fbas_09hand_gloves_00a.png"}

_OUTERWEAR = {
    Outerwear.SUSPENDERS: "10outr/fbas_10outr_suspenders_00a.png",
    Outerwear.VEST: "10outr/fbas_10outr_vest_00a.png",
}

_NECKWEAR = {
    Neckwear.CLOAK_PLAIN: ("11neck/fbas_11neck_cloakplain_00d.png", True),
    Neckwear.CLOAK_WITH_MANTLE_PLAIN: ("11neck/fbas_11neck_cloakwithmantleplain_00b.png", False),
    Neckwear.MANTLE_PLAIN: ("11neck/fbas_11neck_mantleplain_00b.png", False),
    Neckwear.SCARF: ("11neck/fbas_11neck_scarf_00b.png", False),
}

_GLASSES = {
    Glasses.GLASSES: "12face/fbas_12face_glasses_00a.png",
    Glasses.SHADES: "12face/fbas_12face_shades_00a.png",
}

_HAIR = {
    Hair.AFRO: "13hair/fbas_13hair_afro_00.png",
    Hair.AFRO_PUFFS: "13hair/fbas_13hair_afropuffs_00.png",
    Hair.BOB1: "13hair/fbas_13hair_bob1_00.png",
    Hair.BOB2: "13hair/fbas_13hair_bob2_00.png",
    Hair.DAPPER: "13hair/fbas_13hair_dapper_00.png",
    Hair.FLATTOP: "13hair/fbas_13hair_flattop_00.png",
    Hair.LONG_WAVY: "13hair/fbas_13hair_longwavy_00.png",
    Hair.PONYTAIL1: "13hair/fbas_13hair_ponytail1_00.png",
    Hair.SPIKY1: "13hair/fbas_13hair_spiky1_00.png",
    Hair.SPIKY2: "13hair/fbas_13hair_spiky2_00.png",
    Hair.TWINTAIL: "13hair/fbas_13hair_twintail_00.png",
    Hair.TWISTS: "13hair/fbas_13hair_twists_00.png",
}

# Hat texture and whether it carries a second (4-colour) palette.
_HATS = {
    Hat.BANDANA: ("14head/fbas_14head_bandana_00b_e.png", False),
    Hat.BOATER_HAT: ("14head/fbas_14head_boaterhat_00d.png", True),
    Hat.COWBOY_HAT: ("14head/fbas_14head_cowboyhat_00d.png", True),
    Hat.FLOPPY_HAT: ("14head/fbas_14head_floppyhat_00d.png", True),
    Hat.HEADSCARF: ("14head/fbas_14head_headscarf_00b_e.png", False),
    Hat.STRAW_HAT: ("14head/fbas_14head_strawhat_00d.png", True),
}

_HAIR_REPLACING_HATS = frozenset({Hat.BANDANA, Hat.HEADSCARF})


def _two_tone(path: str, two_palettes: bool, color_1: int, color_2: int) -> OutfitLayer:
    if two_palettes:
        return OutfitLayer(path, LutType.C3, color_1, LutType.C4, color_2)
    return OutfitLayer(path, LutType.C4, color_1)


def outfit_layers(outfit: Outfit) -> list[OutfitLayer]:
    """The layers to draw for an outfit, bottom to top."""
    layers: list[OutfitLayer] = []

    def single(table: dict, piece: IntEnum, lut: LutType, color: int) -> None:
        path = table.get(piece)
        if path is not None:
            layers.append(OutfitLayer(path, lut, color))

    if outfit.neckwear in _UNDER_NECKWEAR:
        path, two = _UNDER_NECKWEAR[outfit.neckwear]
        layers.append(_two_tone(path, two, outfit.neckwear_color_1, outfit.neckwear_color_2))
    single(_BODY, outfit.body, LutType.SKIN, outfit.skin_color)
    single(_SOCKS, outfit.socks, LutType.C3, outfit.socks_color)
    single(_SHOES_LOW, outfit.shoes, LutType.C3, outfit.shoes_color)
    single(_LOWERWEAR_1, outfit.lowerwear, LutType.C3, outfit.lowerwear_color)
    single(_SHIRTS, outfit.shirt, LutType.C3, outfit.shirt_color)
    single(_LOWERWEAR_2, outfit.lowerwear, LutType.C3, outfit.lowerwear_color)
    single(_SHOES_HIGH, outfit.shoes, LutType.C3, outfit.shoes_color)
    single(_LOWERWEAR_3, outfit.lowerwear, LutType.C3, outfit.lowerwear_color)
    single(_GLOVES, outfit.gloves, LutType.C3, outfit.gloves_color)
    single(_OUTERWEAR, outfit.outerwear, LutType.C3, outfit.outerwear_color)
    if outfit.neckwear in _NECKWEAR:
        path, two = _NECKWEAR[outfit.neckwear]
        layers.append(_two_tone(path, two, outfit.neckwear_color_1, outfit.neckwear_color_2))
    single(_GLASSES, outfit.glasses, LutType.C3, outfit.glasses_color)
    if outfit.hat not in _HAIR_REPLACING_HATS:
        single(_HAIR, outfit.hair, LutType.HAIR, outfit.hair_color)
    if outfit.hat in _HATS:
        path, two = _HATS[outfit.hat]
        layers.append(_two_tone(path, two, outfit.hat_color_1, outfit.hat_color_2))
    return layers