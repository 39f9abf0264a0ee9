from glitchbomb.orb import Orb


def test_orb_has_three_kinds():
    assert [Orb(orb.value).name for orb in Orb] == ["HEALTH", "POINT", "BOMB"]


def test_orb_lookup_by_value_round_trips():
    for orb in Orb:
        assert Orb(orb.value) is orb


def test_orbs_compare_by_identity():
    assert Orb(Orb.HEALTH.value) == Orb.HEALTH
    assert Orb(Orb.HEALTH.value) != Orb.BOMB