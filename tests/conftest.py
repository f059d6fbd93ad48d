"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from typelineage import hierarchy_type


@hierarchy_type
@dataclass
class Animal:
    name: str = ""


@hierarchy_type
@dataclass
class Dog(Animal):
    breed: str = ""


@hierarchy_type
@dataclass
class Puppy(Dog):
    age_weeks: int = 0


@pytest.fixture
def animal_cls():
    return Animal


@pytest.fixture
def dog_cls():
    return Dog


@pytest.fixture
def puppy_cls():
    return Puppy


@pytest.fixture
def rex():
    """Dog instance from the reference example."""
    return Dog(name="Rex", breed="Lab")
