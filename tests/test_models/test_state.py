"""
Tests for the declarative component model.
"""

import pytest
from pydantic import ValidationError

from instatus_provider.models.state import ComponentResourceModel

STATE_KEYS = {
    "id",
    "page_id",
    "name",
    "description",
    "show_uptime",
    "grouped",
    "group_name",
    "group_id",
}


class TestComponentResourceModel:
    """Test plan/state model behavior."""

    def test_defaults(self):
        """Everything is null except grouped, which defaults to false."""
        model = ComponentResourceModel()

        assert model.id is None
        assert model.name is None
        assert model.grouped is False

    def test_null_grouped_resolves_to_default(self):
        """A null grouped from the host becomes false."""
        model = ComponentResourceModel.from_state({"name": "API", "grouped": None})

        assert model.grouped is False

    def test_from_state_round_trip(self, state):
        """to_state renders every attribute and from_state reads it back."""
        data = state.to_state()

        assert set(data) == STATE_KEYS
        assert ComponentResourceModel.from_state(data) == state

    def test_to_state_includes_nulls(self):
        """Unset attributes are rendered as None."""
        data = ComponentResourceModel(name="API", page_id="pg_1").to_state()

        assert data["description"] is None
        assert data["group_id"] is None
        assert data["grouped"] is False

    def test_assignment_is_validated(self):
        """Assigning a wrong type is rejected."""
        model = ComponentResourceModel()

        with pytest.raises(ValidationError):
            model.show_uptime = "not-a-bool"

    def test_descriptions(self):
        """Attributes carry operator-facing descriptions."""
        fields = ComponentResourceModel.model_fields

        assert set(fields) == STATE_KEYS
        assert fields["page_id"].description == (
            "String Identifier of the page of the component."
        )
        assert fields["group_id"].description == (
            "Name of the group for the component (Require grouped set to true)."
        )
        assert all(field.description for field in fields.values())
