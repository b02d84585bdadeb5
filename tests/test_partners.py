import pytest

from services import partners
from services.errors import ValidationError


def _make(titles, partner_type):
    return {t: partners.create_partner(t, partner_type).id for t in titles}


def test_partners_ordered_per_tier(data_dir):
    _make(["S1", "S2"], "silver")
    _make(["M1"], "main")
    gold = _make(["G1", "G2"], "gold")
    assert [p.order_index for p in partners.list_partners_by_type("gold")] == [0, 1]
    assert [p.title for p in partners.list_partners()] == ["M1", "G1", "G2", "S1", "S2"]
    assert partners.get_partner(gold["G2"]).order_index == 1


def test_invalid_type_rejected(data_dir):
    with pytest.raises(ValidationError):
        partners.create_partner("X", "bronze")
    with pytest.raises(ValidationError):
        partners.list_partners_by_type("bronze")


def test_group_by_type_skips_empty_tiers(data_dir):
    _make(["G1"], "gold")
    _make(["M1"], "main")
    grouped = partners.group_by_type(partners.list_partners())
    assert list(grouped) == ["main", "gold"]


def test_move_within_tier(data_dir):
    gold = _make(["G1", "G2", "G3"], "gold")
    silver = _make(["S1", "S2"], "silver")
    partners.move_partner(gold["G3"], 0)
    assert [p.title for p in partners.list_partners_by_type("gold")] == ["G3", "G1", "G2"]
    assert [p.title for p in partners.list_partners_by_type("silver")] == ["S1", "S2"]
    with pytest.raises(ValidationError):
        partners.move_partner(silver["S1"], 2)


def test_type_change_moves_to_end_of_new_tier(data_dir):
    gold = _make(["G1", "G2", "G3"], "gold")
    _make(["D1"], "diamond")
    moved = partners.update_partner(gold["G1"], title="G1 Yeni", partner_type="diamond")
    assert moved.type == "diamond"
    assert moved.order_index == 1
    assert [(p.title, p.order_index) for p in partners.list_partners_by_type("gold")] == [("G2", 0), ("G3", 1)]


def test_partial_update_keeps_other_fields(data_dir):
    p = partners.create_partner("P", "silver", logo="https://x/logo.png", link="https://p.example")
    updated = partners.update_partner(p.id, link="")
    assert updated.link is None
    assert updated.logo == "https://x/logo.png"
    assert updated.title == "P"


def test_delete_compacts_tier(data_dir):
    gold = _make(["G1", "G2", "G3"], "gold")
    partners.delete_partner(gold["G1"])
    assert [(p.title, p.order_index) for p in partners.list_partners_by_type("gold")] == [("G2", 0), ("G3", 1)]
