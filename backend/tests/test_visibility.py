import pytest

from conftest import make_member
from family_layout.visibility import resolve_visibility, resolve_visible_members, select_working_set
from shared.graph import compute_descendants


def _ids(members):
    return [m.id for m in members]


def test_no_focus_no_collapse_keeps_everything(collapse_family):
    assert _ids(resolve_visible_members(collapse_family)) == ["root", "child1", "grandchild1", "child2"]


def test_collapse_hides_descendants_not_member(collapse_family):
    visible = _ids(resolve_visible_members(collapse_family, collapsed_states={"child1": True}))
    assert visible == ["root", "child1", "child2"]


def test_false_flags_are_ignored(collapse_family):
    visible = resolve_visible_members(collapse_family, collapsed_states={"root": False, "child1": False})
    assert len(visible) == 4


def test_focus_restricts_to_subtree_and_renumbers(focus_family):
    visible = resolve_visible_members(focus_family, "parent1")
    assert [(m.id, m.generation) for m in visible] == [("parent1", 1), ("child1", 2)]


def test_unknown_focus_falls_back_to_all(focus_family):
    working, focus_id = select_working_set(focus_family, "nobody")
    assert focus_id is None
    assert _ids(working) == _ids(focus_family)


def test_collapsed_focus_root_stays_visible(sample_members):
    visible = resolve_visible_members(sample_members, "george-hale", {"george-hale": True})
    assert _ids(visible) == ["george-hale"]


def test_focus_root_kept_when_inside_collapsed_cycle():
    members = [make_member("a", parents=["b"]), make_member("b", parents=["a"])]
    vis = resolve_visibility(members, "a", {"b": True})
    assert _ids(vis.visible) == ["a", "b"]
    assert vis.focus_id == "a"


def test_collapse_inside_focus(sample_members):
    visible = _ids(resolve_visible_members(sample_members, "george-hale", {"paul-hale": True}))
    assert visible == ["george-hale", "paul-hale", "simon-hale", "finn-hale"]


def test_nested_collapse_flags(sample_members):
    collapsed = {"george-hale": True, "paul-hale": True}
    visible = set(_ids(resolve_visible_members(sample_members, collapsed_states=collapsed)))
    hidden = {"paul-hale", "simon-hale", "maya-hale", "ben-hale", "finn-hale"}
    assert visible == {m.id for m in sample_members} - hidden


def test_collapse_applies_even_when_child_listed_before_parent():
    members = [
        make_member("kid", generation=2, parents=["mom"]),
        make_member("mom", generation=1),
    ]
    assert _ids(resolve_visible_members(members, collapsed_states={"mom": True})) == ["mom"]


@pytest.mark.parametrize("focus", [None, "walter-hale", "george-hale", "ida-marsh"])
def test_collapsing_member_hides_exactly_its_strict_descendants(sample_members, focus):
    working, _ = select_working_set(sample_members, focus)
    for target in working:
        below = {m.id for m in compute_descendants(target.id, working, 1)} - {target.id}
        visible = {m.id for m in resolve_visible_members(sample_members, focus, {target.id: True})}
        assert visible == {m.id for m in working} - below, target.id


def test_focus_equals_descendant_set_before_collapse(sample_members):
    for member in sample_members:
        expected = [(m.id, m.generation) for m in compute_descendants(member.id, sample_members, 1)]
        got = [(m.id, m.generation) for m in resolve_visible_members(sample_members, member.id)]
        assert got == expected
