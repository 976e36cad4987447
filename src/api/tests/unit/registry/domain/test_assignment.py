"""Unit tests for workspace assignment planning."""

from registry.domain.aggregates import Resource
from registry.domain.assignment import (
    DEFAULT_SPEC_CATEGORY,
    NewResourceSpec,
    plan_assignment,
)
from registry.domain.value_objects import DEFAULT_COLOR, OwnerId, ResourceId

OWNER = OwnerId(value="user-alice")


def _resource(name: str) -> Resource:
    return Resource.create(owner_id=OWNER, name=name, category="General")


class TestNewResourceSpec:
    """Tests for NewResourceSpec.from_raw."""

    def test_fills_defaults(self):
        spec = NewResourceSpec.from_raw({"name": " Notion "})

        assert spec == NewResourceSpec(
            name="Notion", category=DEFAULT_SPEC_CATEGORY, color=DEFAULT_COLOR, url=None
        )

    def test_caps_field_lengths(self):
        spec = NewResourceSpec.from_raw(
            {
                "name": "n" * 300,
                "category": "c" * 80,
                "color": "#123456789ABC",
                "url": "https://" + "u" * 600,
            }
        )

        assert len(spec.name) == 255
        assert len(spec.category) == 50
        assert len(spec.color) == 10
        assert len(spec.url) == 500

    def test_rejects_entries_without_string_name(self):
        assert NewResourceSpec.from_raw({"name": 42}) is None
        assert NewResourceSpec.from_raw({"name": "   "}) is None
        assert NewResourceSpec.from_raw({"category": "Other"}) is None
        assert NewResourceSpec.from_raw("Notion") is None


class TestPlanAssignment:
    """Tests for plan_assignment."""

    def test_keeps_only_owned_ids_in_request_order(self):
        stripe, gmail = _resource("Stripe"), _resource("Gmail")
        foreign = ResourceId.generate().value

        plan = plan_assignment(
            owned=[stripe, gmail],
            resource_ids=[gmail.id.value, foreign, stripe.id.value, gmail.id.value],
            raw_specs=[],
            batch_limit=20,
        )

        assert list(plan.entries) == [gmail.id, stripe.id]

    def test_spec_matching_existing_name_reuses_resource(self):
        notion = _resource("Notion")

        plan = plan_assignment(
            owned=[notion],
            resource_ids=[],
            raw_specs=[{"name": "  NOTION "}],
            batch_limit=20,
        )

        assert plan.reused_ids == [notion.id]
        assert plan.new_specs == []

    def test_duplicate_spec_names_create_once(self):
        plan = plan_assignment(
            owned=[],
            resource_ids=[],
            raw_specs=[{"name": "Slack"}, {"name": "slack"}, {"name": "Zoom"}],
            batch_limit=20,
        )

        assert [s.name for s in plan.new_specs] == ["Slack", "Zoom"]

    def test_spec_reusing_explicit_id_is_not_duplicated(self):
        notion = _resource("Notion")

        plan = plan_assignment(
            owned=[notion],
            resource_ids=[notion.id.value],
            raw_specs=[{"name": "notion"}],
            batch_limit=20,
        )

        assert list(plan.entries) == [notion.id]

    def test_specs_beyond_batch_limit_are_ignored(self):
        specs = [{"name": f"App {i}"} for i in range(25)]

        plan = plan_assignment(owned=[], resource_ids=[], raw_specs=specs, batch_limit=20)

        assert len(plan.new_specs) == 20
        assert plan.new_specs[-1].name == "App 19"

    def test_invalid_specs_are_skipped(self):
        plan = plan_assignment(
            owned=[],
            resource_ids=[],
            raw_specs=[None, {"name": 5}, {"name": "Figma"}],
            batch_limit=20,
        )

        assert [s.name for s in plan.new_specs] == ["Figma"]

    def test_empty_request_gives_empty_plan(self):
        plan = plan_assignment(
            owned=[_resource("Stripe")], resource_ids=[], raw_specs=[], batch_limit=20
        )

        assert plan.entries == ()
