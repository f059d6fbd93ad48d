from dataclasses import asdict, dataclass, field

from typelineage import (
    configure_logging,
    hierarchy_type,
    own_properties_of,
    properties_of,
    trim_to_super_type,
)


@hierarchy_type
@dataclass
class Animal:
    name: str = ""


@hierarchy_type
@dataclass
class Dog(Animal):
    breed: str = ""
    tricks: list[str] = field(default_factory=list)


def main() -> None:
    configure_logging(verbose=True)

    rex = Dog(name="Rex", breed="Lab", tricks=["sit"])

    for prop in properties_of(rex):
        print(f"{prop.name}: defined on {prop.definition.defined_on}, value {prop.value!r}")

    print("Own:", [p.name for p in own_properties_of(rex)])

    animal = trim_to_super_type(rex)
    print("Trimmed:", type(animal).__name__, asdict(animal))
    print("Trimmed again:", trim_to_super_type(animal))


if __name__ == "__main__":
    main()
