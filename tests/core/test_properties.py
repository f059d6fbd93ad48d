"""Tests for property enumeration.

Critical Invariants:
- Own exclusive names are tagged before ancestor names (first match = most specific)
- properties_of partitioned by definer equals own_properties_of at each level
- A name no type in the chain declares fails loudly
"""

from dataclasses import asdict, dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typelineage import (
    DefinerLookupError,
    Property,
    PropertyDefinition,
    PropertyShape,
    all_property_names_of,
    definer_of,
    exclusive_property_names_of,
    get_properties,
    hierarchy_type,
    own_properties_of,
    project_onto,
    properties_of,
    tagged_property_names_of,
)


def test_all_property_names(animal_cls, dog_cls, puppy_cls):
    assert all_property_names_of(animal_cls) == ("name",)
    assert all_property_names_of(dog_cls) == ("name", "breed")
    assert all_property_names_of(puppy_cls) == ("name", "breed", "age_weeks")


def test_none_is_empty_base_case():
    assert all_property_names_of(None) == ()
    assert exclusive_property_names_of(None) == ()
    assert tagged_property_names_of(None) == []


def test_exclusive_property_names(animal_cls, dog_cls, puppy_cls):
    assert exclusive_property_names_of(animal_cls) == ("name",)
    assert exclusive_property_names_of(dog_cls) == ("breed",)
    assert exclusive_property_names_of(puppy_cls) == ("age_weeks",)


def test_tagged_names_list_own_before_ancestors(puppy_cls):
    """CRITICAL: most specific type first, so first-match lookup prefers it."""
    assert tagged_property_names_of(puppy_cls) == [
        ("age_weeks", "Puppy"),
        ("breed", "Dog"),
        ("name", "Animal"),
    ]


def test_properties_of_reference_example(rex):
    """Dog{name, breed}: name defined on Animal, breed on Dog."""
    props = properties_of(rex)

    assert props == [
        Property(PropertyDefinition("name", "Animal", "str"), "Rex"),
        Property(PropertyDefinition("breed", "Dog", "str"), "Lab"),
    ]


def test_own_properties_of_reference_example(rex):
    own = own_properties_of(rex)

    assert [p.name for p in own] == ["breed"]
    assert own[0].value == "Lab"


def test_own_properties_excludes_overridden_inherited_values(puppy_cls):
    pup = puppy_cls(name="Bit", breed="Pug", age_weeks=9)

    assert [p.name for p in own_properties_of(pup)] == ["age_weeks"]


def test_value_type_names_include_unknown():
    @hierarchy_type
    @dataclass
    class Profile:
        nickname: str | None = None
        tags: list[str] = field(default_factory=list)

    props = properties_of(Profile())

    assert [p.definition.value_type_name for p in props] == ["Unknown", "list"]


def test_redeclared_name_attributed_to_nearest_declaring_ancestor():
    """A subtype redeclaring an inherited name does not become its definer.

    Why: definers are structural; the name already exists one level up.
    """

    @hierarchy_type
    @dataclass
    class Document:
        title: str = ""

    @hierarchy_type
    @dataclass
    class Memo(Document):
        title: str = "memo"
        recipient: str = ""

    memo = Memo(title="Q3", recipient="ops")

    assert tagged_property_names_of(Memo) == [("recipient", "Memo"), ("title", "Document")]
    assert definer_of(Memo, "title") == "Document"
    assert [p.name for p in own_properties_of(memo)] == ["recipient"]


def test_first_match_wins_on_ambiguous_tag_list(monkeypatch):
    """If two levels ever both tagged a name, the most specific tag wins."""

    @hierarchy_type
    @dataclass
    class Base:
        shared: int = 0

    @hierarchy_type
    @dataclass
    class Derived(Base):
        own: int = 0

    monkeypatch.setattr(
        "typelineage.core.properties.operations.tagged_property_names_of",
        lambda _: [("shared", "Derived"), ("own", "Derived"), ("shared", "Base")],
    )

    assert definer_of(Derived, "shared") == "Derived"


def test_definer_lookup_failure(dog_cls):
    with pytest.raises(DefinerLookupError, match="'collar'") as exc_info:
        definer_of(dog_cls, "collar")

    assert exc_info.value.type_name == "Dog"
    assert exc_info.value.property_name == "collar"


def test_properties_of_fails_on_undeclared_schema_name(monkeypatch, rex):
    """CRITICAL: a present name with no definer is a contract breach, not a default."""
    monkeypatch.setattr(
        "typelineage.core.properties.operations.tagged_property_names_of",
        lambda _: [("name", "Animal")],
    )

    with pytest.raises(DefinerLookupError, match="'breed'"):
        properties_of(rex)


def test_unset_attribute_is_not_present():
    @hierarchy_type(fields=("host", "port"))
    class Endpoint:
        def __init__(self) -> None:
            self.host = "localhost"

    props = properties_of(Endpoint())

    assert [p.name for p in props] == ["host"]


def test_attributes_outside_schema_are_ignored(rex):
    rex.__dict__["nickname"] = "Rexy"

    assert [p.name for p in properties_of(rex)] == ["name", "breed"]


def test_get_properties_omits_definer(rex):
    shapes = get_properties(rex)

    assert shapes == [
        Property(PropertyShape("name", "str"), "Rex"),
        Property(PropertyShape("breed", "str"), "Lab"),
    ]


def test_get_properties_on_plain_mapping():
    shapes = get_properties({"a": 1, "b": None})

    assert [(p.name, p.definition.value_type_name) for p in shapes] == [
        ("a", "int"),
        ("b", "Unknown"),
    ]


def test_descriptors_are_plain_data(rex):
    assert asdict(properties_of(rex)[0]) == {
        "definition": {"name": "name", "defined_on": "Animal", "value_type_name": "str"},
        "value": "Rex",
    }


@hierarchy_type
@dataclass
class Vehicle:
    wheels: int = 4


@hierarchy_type
@dataclass
class Car(Vehicle):
    doors: int = 4
    color: str = ""


@hierarchy_type
@dataclass
class SportsCar(Car):
    top_speed: float = 0.0


@given(
    wheels=st.integers(min_value=0, max_value=8),
    doors=st.integers(min_value=0, max_value=5),
    color=st.text(max_size=10),
    top_speed=st.floats(allow_nan=False),
)
def test_partition_law(wheels, doors, color, top_speed):
    """Grouping properties_of by definer reproduces own_properties_of at every level."""
    car = SportsCar(wheels=wheels, doors=doors, color=color, top_speed=top_speed)

    by_definer: dict[str, list[str]] = {}
    for prop in properties_of(car):
        by_definer.setdefault(prop.definition.defined_on, []).append(prop.name)

    per_level: dict[str, list[str]] = {}
    for ancestor in (SportsCar, Car, Vehicle):
        level = project_onto(car, ancestor)
        per_level[ancestor.__name__] = [p.name for p in own_properties_of(level)]

    assert by_definer == per_level
    names = [n for group in per_level.values() for n in group]
    assert sorted(names) == sorted(all_property_names_of(SportsCar))
