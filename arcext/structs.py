"""Combat event and agent records with the enumerations that describe them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Iff(IntEnum):
    """Whether an agent is friend or foe."""

    FRIEND = 0
    FOE = 1
    UNKNOWN = 2


class CbtResult(IntEnum):
    """Result of a physical strike."""

    NORMAL = 0
    CRIT = 1
    GLANCE = 2
    BLOCK = 3
    EVADE = 4
    INTERRUPT = 5
    ABSORB = 6
    BLIND = 7
    KILLING_BLOW = 8
    DOWNED = 9
    BREAKBAR = 10
    ACTIVATION = 11
    UNKNOWN = 12


class CbtActivation(IntEnum):
    """Kind of skill activation."""

    NONE = 0
    START = 1
    QUICKNESS_UNUSED = 2
    CANCEL_FIRE = 3
    CANCEL_CANCEL = 4
    RESET = 5
    UNKNOWN = 6


class CbtStateChange(IntEnum):
    """State change carried by a combat event."""

    NONE = 0
    ENTER_COMBAT = 1
    EXIT_COMBAT = 2
    CHANGE_UP = 3
    CHANGE_DEAD = 4
    CHANGE_DOWN = 5
    SPAWN = 6
    DESPAWN = 7
    HEALTH_UPDATE = 8
    LOG_START = 9
    LOG_END = 10
    WEAPON_SWAP = 11
    MAX_HEALTH_UPDATE = 12
    POINT_OF_VIEW = 13
    LANGUAGE = 14
    GW_BUILD = 15
    SHARD_ID = 16
    REWARD = 17
    BUFF_INITIAL = 18
    POSITION = 19
    VELOCITY = 20
    FACING = 21
    TEAM_CHANGE = 22
    ATTACK_TARGET = 23
    TARGETABLE = 24
    MAP_ID = 25
    REPL_INFO = 26
    STACK_ACTIVE = 27
    STACK_RESET = 28
    GUILD = 29
    BUFF_INFO = 30
    BUFF_FORMULA = 31
    SKILL_INFO = 32
    SKILL_TIMING = 33
    BREAKBAR_STATE = 34
    BREAKBAR_PERCENT = 35
    ERROR = 36
    TAG = 37
    BARRIER_UPDATE = 38
    STAT_RESET = 39
    EXTENSION = 40
    API_DELAYED = 41
    INSTANCE_START = 42
    TICKRATE = 43
    LAST90_BEFORE_DOWN = 44
    EFFECT = 45
    ID_TO_GUID = 46
    LOG_NPC_UPDATE = 47
    UNKNOWN = 48


class CbtBuffRemove(IntEnum):
    """How a buff was removed."""

    NONE = 0
    ALL = 1
    SINGLE = 2
    MANUAL = 3
    UNKNOWN = 4


class CbtBuffCycle(IntEnum):
    """When buff damage happened relative to the tick timer."""

    CYCLE = 0
    NOT_CYCLE = 1
    NOT_CYCLE_NO_RESIST = 2
    NOT_CYCLE_DMG_TO_TARGET_ON_HIT = 3
    NOT_CYCLE_DMG_TO_SOURCE_ON_HIT = 4
    NOT_CYCLE_DMG_TO_TARGET_ON_STACK_REMOVE = 5
    UNKNOWN = 6


class Attribute(IntEnum):
    """Attributes used by buff formulas."""

    NONE = 0
    POWER = 1
    PRECISION = 2
    TOUGHNESS = 3
    VITALITY = 4
    FEROCITY = 5
    HEALING = 6
    CONDITION = 7
    CONCENTRATION = 8
    EXPERTISE = 9
    CUST_ARMOR = 10
    CUST_AGONY = 11
    CUST_STATINC = 12
    CUST_PHYSINC = 13
    CUST_CONDINC = 14
    CUST_PHYSREC = 15
    CUST_CONDREC = 16
    CUST_ATTACKSPEED = 17
    CUST_SIPHONINC = 18
    CUST_SIPHONREC = 19
    UNKNOWN = 65535


class BuffCategory(IntEnum):
    """Category of a buff."""

    BOON = 0
    ANY = 1
    CONDITION = 2
    FOOD = 4
    UPGRADE = 6
    BOOST = 8
    TRAIT = 11
    ENHANCEMENT = 13
    STANCE = 16


class CustomSkill(IntEnum):
    """Skill ids with special meaning."""

    RESURRECT = 1066
    BANDAGE = 1175
    DODGE = 65001


class GwLanguage(IntEnum):
    """Game client language."""

    ENG = 0
    FRE = 2
    GEM = 3
    SPA = 4
    CN = 5


class ContentLocal(IntEnum):
    """Kind of local content id."""

    EFFECT = 0
    MARKER = 1


class Prof(IntEnum):
    """Profession of an agent."""

    UNKNOWN = 0
    GUARD = 1
    WARRIOR = 2
    ENGINEER = 3
    RANGER = 4
    THIEF = 5
    ELE = 6
    MESMER = 7
    NECRO = 8
    RENEGADE = 9


class WeaponSet(IntEnum):
    """Weapon set an agent swapped to."""

    WATER_FIRST = 0
    WATER_SECOND = 1
    BUNDLES = 2
    TRANSFORM = 3
    LAND_FIRST = 4
    LAND_SECOND = 5


class ColorsCore(IntEnum):
    """Core colour slots."""

    TRANSPARENT = 0
    WHITE = 1
    LWHITE = 2
    LGREY = 3
    LYELLOW = 4
    LGREEN = 5
    LRED = 6
    LTEAL = 7
    MGREY = 8
    DGREY = 9
    NUM = 10


@dataclass
class CombatEvent:
    """A single combat event."""

    time: int = 0
    src_agent: int = 0
    dst_agent: int = 0
    value: int = 0
    buff_dmg: int = 0
    overstack_value: int = 0
    skillid: int = 0
    src_instid: int = 0
    dst_instid: int = 0
    src_master_instid: int = 0
    dst_master_instid: int = 0
    iff: int = Iff.FRIEND
    buff: int = 0
    result: int = CbtResult.NORMAL
    is_activation: int = CbtActivation.NONE
    is_buffremove: int = CbtBuffRemove.NONE
    is_ninety: int = 0
    is_fifty: int = 0
    is_moving: int = 0
    is_statechange: int = CbtStateChange.NONE
    is_flanking: int = 0
    is_shields: int = 0
    is_offcycle: int = 0
    pad61: int = 0
    pad62: int = 0
    pad63: int = 0
    pad64: int = 0

    def pad_value(self) -> int:
        """The four pad bytes read as one little-endian unsigned 32-bit value."""
        raw = bytes((self.pad61, self.pad62, self.pad63, self.pad64))
        return int.from_bytes(raw, "little")


@dataclass
class Agent:
    """Short description of an agent at the time of an event."""

    name: str | None = None
    id: int = 0
    prof: int = Prof.UNKNOWN
    elite: int = 0
    is_self: int = 0
    team: int = 0