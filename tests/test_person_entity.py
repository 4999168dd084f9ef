"""
Unit tests for PersonEntity and the PersonRegistry population counter.
"""

import copy

import pytest

from workforce.business_logic.entities import EmployeeEntity, PersonEntity
from workforce.business_logic.person_registry import PersonRegistry
from workforce.constants import ConstructionPath, DEFAULT_PERSON_NAME, PersonKind


class TestPersonConstruction:
    """Tests for the four construction paths."""

    def test_default(self, registry, narrator):
        """Test default construction uses placeholder name and age zero."""
        person = PersonEntity(registry=registry)
        assert person.name == DEFAULT_PERSON_NAME
        assert person.age == 0
        assert person.kind is PersonKind.PERSON
        assert registry.population == 1
        assert registry.constructed_by_path(ConstructionPath.DEFAULT) == 1
        assert narrator.lines == ["[Person] default init for Unknown"]

    def test_parameterized(self, registry, narrator):
        """Test name and age are stored."""
        person = PersonEntity("Alice", 30, registry=registry)
        assert person.get_name() == "Alice"
        assert person.get_age() == 30
        assert registry.population == 1
        assert narrator.lines == ["[Person] parameterized init for Alice"]

    def test_copy(self, registry, narrator):
        """Test copy keeps state and counts as a new person."""
        original = PersonEntity("Alice", 30, registry=registry)
        clone = PersonEntity.copy_of(original)
        assert clone is not original
        assert (clone.name, clone.age) == ("Alice", 30)
        assert registry.population == 2
        assert registry.constructed_by_path(ConstructionPath.COPY) == 1
        assert narrator.lines[-1] == "[Person] copy init for Alice"

    def test_copy_module_uses_copy_path(self, registry):
        """Test copy.copy goes through the registry too."""
        original = PersonEntity("Alice", 30, registry=registry)
        clone = copy.copy(original)
        assert clone.name == "Alice"
        assert registry.population == 2

    def test_deepcopy_shares_registry_and_counts(self, registry, narrator):
        """Test copy.deepcopy goes through the copy path on the same registry."""
        original = PersonEntity("Alice", 30, registry=registry)
        clone = copy.deepcopy(original)
        assert clone.registry is registry
        assert (clone.name, clone.age) == ("Alice", 30)
        assert registry.population == 2
        assert registry.constructed_by_path(ConstructionPath.COPY) == 1
        assert narrator.lines[-1] == "[Person] copy init for Alice"

    def test_deepcopy_of_employee_keeps_fields(self, employee, registry):
        """Test deep-copying a subclass keeps its own fields and counts once."""
        clone = copy.deepcopy(employee)
        assert isinstance(clone, EmployeeEntity)
        assert clone.employee_id == 1001
        assert clone.get_pay() == 7000.0
        assert registry.population == 2

    def test_move_resets_source(self, registry, narrator):
        """Test move takes state and leaves the source with age zero."""
        source = PersonEntity("Alice", 30, registry=registry)
        moved = PersonEntity.moved_from(source)
        assert (moved.name, moved.age) == ("Alice", 30)
        assert source.age == 0
        assert source.name == ""
        assert registry.population == 2
        assert registry.constructed_by_path(ConstructionPath.MOVE) == 1
        assert narrator.lines[-1] == "[Person] move init"

    def test_copy_of_wrong_type_raises(self, registry):
        """Test a base person cannot be copied into an employee."""
        person = PersonEntity("Alice", 30, registry=registry)
        with pytest.raises(TypeError):
            EmployeeEntity.copy_of(person)

    def test_registry_required(self):
        """Test construction without a registry is rejected."""
        with pytest.raises(ValueError, match="registry cannot be None"):
            PersonEntity("Alice", 30, registry=None)


class TestPersonBehaviour:
    """Tests for accessors, chaining and text output."""

    def test_set_age_chains(self, registry):
        """Test two chained reassignments end at the last value."""
        person = PersonEntity("Alice", 30, registry=registry)
        result = person.set_age(31).set_age(32)
        assert result is person
        assert person.age == 32

    def test_negative_age_accepted(self, registry):
        """Test ages are not validated."""
        person = PersonEntity("Alice", 30, registry=registry)
        person.set_age(-1)
        assert person.age == -1

    def test_introduce(self, registry):
        """Test both introduction forms."""
        person = PersonEntity("Alice", 30, registry=registry)
        assert person.introduce() == "Hi, I'm Alice."
        assert person.introduce("happy") == "Hi, I'm Alice. I'm feeling happy."

    def test_show(self, registry):
        """Test base summary."""
        person = PersonEntity("Alice", 32, registry=registry)
        assert person.show() == "[Person.show] Name: Alice, Age: 32"


class TestPersonRelease:
    """Tests for release and the live-instance counter."""

    def test_release_decrements_once(self, registry, narrator):
        """Test release lowers the population exactly once."""
        person = PersonEntity("Alice", 30, registry=registry)
        assert person.release() is True
        assert registry.population == 0
        assert person.released
        assert narrator.lines[-1] == "[Person] released Alice"

    def test_double_release_is_reported(self, registry):
        """Test a second release does not touch the counter."""
        person = PersonEntity("Alice", 30, registry=registry)
        person.release()
        assert person.release() is False
        assert registry.population == 0

    def test_context_manager_releases(self, registry):
        """Test leaving a with block releases the person."""
        with PersonEntity("Alice", 30, registry=registry) as person:
            assert registry.population == 1
        assert person.released
        assert registry.population == 0

    def test_every_path_counts(self, registry):
        """Test population across default, parameterized, copy and move."""
        a = PersonEntity(registry=registry)
        b = PersonEntity("Bob", 20, registry=registry)
        c = PersonEntity.copy_of(b)
        d = PersonEntity.moved_from(c)
        assert registry.population == 4
        for person in (a, b, c, d):
            person.release()
        assert registry.population == 0

    def test_registries_are_independent(self, narrator):
        """Test each registry owns its own counter."""
        first, second = PersonRegistry(narrator), PersonRegistry(narrator)
        PersonEntity("Alice", 30, registry=first)
        assert first.population == 1
        assert second.population == 0


class TestPersonRegistry:
    """Tests for PersonRegistry guards."""

    def test_unregister_below_zero_raises(self, registry):
        """Test the counter cannot go negative."""
        person = PersonEntity("Alice", 30, registry=registry)
        registry.unregister(person)
        with pytest.raises(ValueError, match="below zero"):
            registry.unregister(person)

    def test_register_rejects_unknown_path(self, registry):
        """Test register validates the construction path."""
        person = PersonEntity("Alice", 30, registry=registry)
        with pytest.raises(ValueError):
            registry.register(person, "copy")
