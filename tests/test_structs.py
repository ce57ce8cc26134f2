import dataclasses

import pytest

from arcext.structs import (
    Agent,
    Attribute,
    CbtActivation,
    CbtBuffRemove,
    CbtResult,
    CbtStateChange,
    ColorsCore,
    CombatEvent,
    CustomSkill,
    GwLanguage,
    Prof,
    WeaponSet,
)


def test_buff_initial_statechange_is_18():
    assert CbtStateChange.BUFF_INITIAL == 18
    assert CbtStateChange(18) is CbtStateChange.BUFF_INITIAL


def test_statechange_unknown_is_last():
    assert CbtStateChange(48) is CbtStateChange.UNKNOWN
    assert CbtStateChange(47) is CbtStateChange.LOG_NPC_UPDATE
    assert CbtStateChange(max(CbtStateChange)) is CbtStateChange.UNKNOWN


def test_attribute_unknown_value():
    assert Attribute(65535) is Attribute.UNKNOWN


def test_custom_skills():
    assert CustomSkill(1066) is CustomSkill.RESURRECT
    assert CustomSkill(1175) is CustomSkill.BANDAGE
    assert CustomSkill(65001) is CustomSkill.DODGE


def test_languages():
    assert GwLanguage.ENG == 0
    assert GwLanguage.FRE == 2
    assert GwLanguage.GEM == 3
    assert GwLanguage.SPA == 4
    assert GwLanguage.CN == 5
    with pytest.raises(ValueError):
        GwLanguage(1)


def test_weapon_set_and_prof_lookup():
    assert WeaponSet(4) is WeaponSet.LAND_FIRST
    assert WeaponSet(5) is WeaponSet.LAND_SECOND
    assert Prof(9) is Prof.RENEGADE


def test_colors_num_counts_the_others():
    assert ColorsCore(10) is ColorsCore.NUM
    assert ColorsCore(len(ColorsCore) - 1) is ColorsCore.NUM


def test_result_and_buffremove_unknown_are_last():
    assert CbtResult(12) is CbtResult.UNKNOWN
    assert CbtBuffRemove(4) is CbtBuffRemove.UNKNOWN
    assert CbtActivation(6) is CbtActivation.UNKNOWN


def test_combat_event_defaults():
    ev = CombatEvent()
    assert ev.time == 0
    assert ev.is_statechange is CbtStateChange.NONE
    assert ev.is_activation is CbtActivation.NONE
    assert ev.pad_value() == 0


def test_pad_value_low_byte():
    assert CombatEvent(pad61=1).pad_value() == 1


def test_pad_value_all_set():
    ev = CombatEvent(pad61=0xFF, pad62=0xFF, pad63=0xFF, pad64=0xFF)
    assert ev.pad_value() == 0xFFFFFFFF


def test_pad_value_little_endian():
    ev = CombatEvent(pad61=0x12, pad62=0x34, pad63=0x56, pad64=0x78)
    assert ev.pad_value() == 0x78563412


@pytest.mark.parametrize("pads", [(1, 2, 3, 4), (200, 0, 17, 99), (0, 0, 0, 255)])
def test_pad_value_byte_positions(pads):
    ev = CombatEvent(pad61=pads[0], pad62=pads[1], pad63=pads[2], pad64=pads[3])
    value = ev.pad_value()
    assert value & 0xFF == pads[0]
    assert (value >> 8) & 0xFF == pads[1]
    assert (value >> 16) & 0xFF == pads[2]
    assert value >> 24 == pads[3]


def test_pad_value_rejects_out_of_range_byte():
    with pytest.raises(ValueError):
        CombatEvent(pad61=256).pad_value()


def test_agent_defaults_and_copy():
    agent = Agent(name="Char", id=7, prof=Prof.MESMER, team=3)
    copy = dataclasses.replace(agent)
    assert copy == agent
    assert copy is not agent
    assert Agent().name is None
    assert Agent().prof is Prof.UNKNOWN