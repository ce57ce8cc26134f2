import pytest

from arcext.mob_ids import TargetID, TrashID


def test_target_values_from_source():
    assert TargetID(15884) is TargetID.Mordremoth
    assert TargetID(15438) is TargetID.ValeGuardian
    assert TargetID(19450) is TargetID.Dhuum
    assert TargetID(35552) is TargetID.SooWonOW


def test_target_lookup_by_value():
    assert TargetID(15438) is TargetID.ValeGuardian
    assert TargetID(43974) is TargetID.ConjuredAmalgamate
    assert TargetID(44885) is TargetID.ConjuredAmalgamate_CHINA


def test_lookup_by_name():
    assert TargetID(17632) is TargetID["Skorvald"]
    assert TrashID(23701) is TrashID["VoidWorm"]


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        TargetID(0)
    with pytest.raises(KeyError):
        TrashID["NoSuchCreature"]


def test_same_name_differs_between_enums():
    assert TargetID(23957) is TargetID.Ankka
    assert TrashID(24634) is TrashID.Ankka
    assert TargetID.Ankka != TrashID.Ankka


def test_void_amalgamate_shares_value():
    assert TrashID(24375) is TrashID.VoidAmalgamate
    assert TargetID(24375) is TargetID.VoidAmalgamate1


@pytest.mark.parametrize("enum_cls", [TargetID, TrashID])
def test_every_member_round_trips(enum_cls):
    for name, member in enum_cls.__members__.items():
        assert enum_cls(member.value).value == member.value
        assert enum_cls[name] is member


def test_trash_values_from_source():
    assert TrashID(7481) is TrashID.Warg
    assert TrashID(51756) is TrashID.SooWonTail
    assert TrashID(16437) is TrashID.BLIGHT