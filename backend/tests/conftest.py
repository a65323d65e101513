import pytest

from family_layout import LayoutConfig
from sample import load_sample_members
from shared.models import Member

VIEWPORT = 1200


def make_member(mid, name=None, generation=1, parents=None, spouse=None, **extra):
    return Member(
        id=mid,
        name=name or mid.title(),
        generation=generation,
        parents=parents or [],
        spouse=spouse,
        gender="unknown",
        **extra,
    )


@pytest.fixture
def config():
    return LayoutConfig(generation_spacing=120, member_spacing=180, node_width=150, sibling_spacing=50)


@pytest.fixture
def sample_members():
    return load_sample_members()


@pytest.fixture
def collapse_family():
    return [
        make_member("root", "Root", 1),
        make_member("child1", "Child 1", 2, ["root"]),
        make_member("grandchild1", "Grandchild 1", 3, ["child1"]),
        make_member("child2", "Child 2", 2, ["root"]),
    ]


@pytest.fixture
def focus_family():
    return [
        make_member("grandparent", "Grandparent", 1),
        make_member("parent1", "Parent 1", 2, ["grandparent"]),
        make_member("child1", "Child 1", 3, ["parent1"]),
        make_member("parent2", "Parent 2", 2, ["grandparent"]),
        make_member("uncle", "Uncle", 1),
    ]
