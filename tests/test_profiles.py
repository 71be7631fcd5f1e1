"""Tests for profiles: initialize(), naming conventions and merge semantics."""
from __future__ import annotations

from dataclasses import dataclass

from fluent_automapper import (
    CamelCaseNamingConvention,
    PascalCaseNamingConvention,
    Profile,
    SnakeCaseNamingConvention,
    automapper,
)

MERGE_SOURCE_KEY = "{808D9D7F-AA89-4D07-917E-A528F078E642}"
MERGE_DESTINATION_KEY = "{808D9D6F-BA89-4D17-915E-A528E178EE64}"


class Person:
    fullName: str
    age: int


class BeerBuyingYoungster(Person):
    pass


class PascalCaseToCamelCaseMappingProfile(Profile):
    profile_name = "PascalCaseToCamelCase"

    def configure(self):
        self.source_member_naming_convention = PascalCaseNamingConvention()
        self.destination_member_naming_convention = CamelCaseNamingConvention()
        self.create_map("a", "b")


class CamelCaseToPascalCaseMappingProfile(Profile):
    profile_name = "CamelCaseToPascalCase"

    def configure(self):
        self.source_member_naming_convention = CamelCaseNamingConvention()
        self.destination_member_naming_convention = PascalCaseNamingConvention()


class ValidatedAgeMappingProfile(Profile):
    profile_name = "ValidatedAgeMappingProfile"

    def configure(self):
        (
            self.create_map(MERGE_SOURCE_KEY, MERGE_DESTINATION_KEY)
            .for_member("proclaimedAge", lambda opts: opts.ignore())
            .for_member("age", lambda opts: opts.map_from("ageOnId"))
            .convert_to_type(Person)
        )


class CountingProfile(Profile):
    profile_name = "Counting"

    def __init__(self):
        self.configure_calls = 0

    def configure(self):
        self.configure_calls += 1


class MemberProfile(Profile):
    profile_name = "Member"

    def configure(self):
        self.create_map("src", "dst").for_member("x", "from-profile")


class HandlerProfile(Profile):
    profile_name = "Handlers"

    def configure(self):
        self.create_map("src", "dst").for_member("x", "from-profile").for_all_members(
            lambda d, n, v: d.setdefault("profile_log", []).append(n)
        )


@dataclass
class UserRow:
    user_id: int
    display_name: str


class SnakeToCamelProfile(Profile):
    profile_name = "SnakeToCamel"

    def configure(self):
        self.source_member_naming_convention = SnakeCaseNamingConvention()
        self.destination_member_naming_convention = CamelCaseNamingConvention()
        self.create_map(UserRow, "UserJson").for_member(
            "display_name", lambda opts: opts.destination_property_value.upper()
        )


def test_initialize_creates_maps():
    automapper.initialize(lambda config: config.create_map("from", "to"))
    assert automapper.map("from", "to", {}) == {}


def test_pascal_case_to_camel_case():
    automapper.initialize(lambda config: config.add_profile(PascalCaseToCamelCaseMappingProfile()))
    automapper.create_map("PascalCase", "CamelCase").with_profile("PascalCaseToCamelCase")

    result = automapper.map("PascalCase", "CamelCase", {"FullName": "John Doe"})

    assert result == {"fullName": "John Doe"}


def test_camel_case_to_pascal_case():
    automapper.initialize(lambda config: config.add_profile(CamelCaseToPascalCaseMappingProfile()))
    automapper.create_map("CamelCase2", "PascalCase2").with_profile("CamelCaseToPascalCase")

    result = automapper.map("CamelCase2", "PascalCase2", {"fullName": "John Doe"})

    assert result == {"FullName": "John Doe"}


def test_for_member_besides_profile_naming():
    automapper.initialize(lambda config: config.add_profile(CamelCaseToPascalCaseMappingProfile()))
    (
        automapper.create_map("CamelCase", "PascalCase")
        .for_member("theAge", lambda opts: opts.map_from("age"))
        .with_profile("CamelCaseToPascalCase")
    )

    result = automapper.map("CamelCase", "PascalCase", {"fullName": "John Doe", "age": 20})

    assert result == {"FullName": "John Doe", "theAge": 20}


def test_profile_member_mappings_replace_direct_ones():
    automapper.initialize(lambda config: config.add_profile(ValidatedAgeMappingProfile()))
    (
        automapper.create_map(MERGE_SOURCE_KEY, MERGE_DESTINATION_KEY)
        .for_member("ageOnId", lambda opts: opts.ignore())
        .for_member("age", lambda opts: opts.map_from("proclaimedAge"))
        .convert_to_type(BeerBuyingYoungster)
        .with_profile("ValidatedAgeMappingProfile")
    )

    source = {"fullName": "John Doe", "proclaimedAge": 21, "ageOnId": 15}
    result = automapper.map(MERGE_SOURCE_KEY, MERGE_DESTINATION_KEY, source)

    assert vars(result) == {"fullName": "John Doe", "age": 15}
    assert isinstance(result, Person)
    assert not isinstance(result, BeerBuyingYoungster)


def test_unmatched_profile_members_are_added():
    automapper.add_profile(MemberProfile())
    expression = automapper.create_map("src", "dst").with_profile("Member")

    assert expression.definition.find_member("x").values == ["from-profile"]
    assert automapper.map("src", "dst", {"x": 1, "y": 2}) == {"x": "from-profile", "y": 2}


def test_later_call_wins_between_for_member_and_with_profile():
    automapper.add_profile(MemberProfile())

    automapper.create_map("src", "dst").for_member("x", "direct").with_profile("Member")
    assert automapper.map("src", "dst", {"x": 0})["x"] == "from-profile"

    automapper.create_map("src", "dst").with_profile("Member").for_member("x", "direct")
    assert automapper.map("src", "dst", {"x": 0})["x"] == "direct"


def test_handlers_merge_additively():
    automapper.add_profile(HandlerProfile())
    (
        automapper.create_map("src", "dst")
        .for_all_members(lambda d, n, v: d.__setitem__(n, v))
        .with_profile("Handlers")
    )

    result = automapper.map("src", "dst", {"x": 0, "y": 1})

    assert result["x"] == "from-profile"
    assert result["y"] == 1
    assert result["profile_log"] == ["x", "y"]


def test_merge_does_not_leak_into_staged_profile_definition():
    automapper.add_profile(MemberProfile())
    automapper.create_map("src", "dst").with_profile("Member").for_member("x", "direct")

    staged = automapper.registry.find("Member=>src", "Member=>dst")
    assert staged.member_mappings["x"].values == ["from-profile"]


def test_configure_runs_once_at_registration():
    profile = CountingProfile()
    automapper.add_profile(profile)
    automapper.create_map("a", "b").with_profile("Counting")
    automapper.create_map("a", "c").with_profile("Counting")
    assert profile.configure_calls == 1


def test_profile_maps_are_staged_under_qualified_keys():
    automapper.add_profile(PascalCaseToCamelCaseMappingProfile())
    assert automapper.registry.find("PascalCaseToCamelCase=>a", "PascalCaseToCamelCase=>b") is not None
    assert automapper.registry.find("a", "b") is None


def test_profile_create_map_supports_currying():
    class CurryingProfile(Profile):
        profile_name = "Curry"

        def configure(self):
            partial = self.create_map("one")
            partial("two")
            partial("three")

    automapper.add_profile(CurryingProfile())
    assert automapper.registry.find("Curry=>one", "Curry=>two") is not None
    assert automapper.registry.find("Curry=>one", "Curry=>three") is not None


def test_class_keys_with_snake_case_profile():
    automapper.add_profile(SnakeToCamelProfile())
    automapper.create_map(UserRow, "UserJson").with_profile("SnakeToCamel")

    result = automapper.map(UserRow, "UserJson", UserRow(user_id=7, display_name="jane"))

    # Explicit member mappings keep their destination name; others are renamed.
    assert result == {"userId": 7, "display_name": "JANE"}


def test_duplicate_profile_names_overwrite():
    first, second = CountingProfile(), CountingProfile()
    automapper.add_profile(first)
    automapper.add_profile(second)
    assert list(automapper.registry.profiles()) == [second]
