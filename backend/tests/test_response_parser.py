"""
Tests for response_parser.py - JSON extraction from Claude replies and schema validation.
"""
import json
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from errors import MalformedJSONError, NoJSONFoundError, ResponseParseError, ResponseSchemaError
from response_parser import parse_ai_response

VALID_RESPONSE = {
    "category": "Work",
    "priority": "High",
    "reasoning": "Test",
    "due_date": None,
}


def reply(**overrides) -> str:
    return json.dumps({**VALID_RESPONSE, **overrides})


class TestExtraction:
    """The JSON object is found even when Claude adds noise around it."""

    def test_bare_object(self):
        result = parse_ai_response('{"category":"Work","priority":"High","reasoning":"Test","due_date":null}')
        assert result.model_dump(mode="json") == VALID_RESPONSE

    def test_markdown_code_block(self):
        bare = parse_ai_response(reply())
        fenced = parse_ai_response("```json\n" + reply() + "\n```")
        assert fenced == bare

    def test_surrounding_commentary(self):
        text = "Here is the analysis:\n" + reply(due_date="2026-05-22") + "\nLet me know if you need more."
        result = parse_ai_response(text)
        assert result.due_date == "2026-05-22"

    def test_braces_in_reasoning(self):
        result = parse_ai_response(reply(reasoning="Mentions {braces} inside"))
        assert result.reasoning == "Mentions {braces} inside"

    def test_no_braces(self):
        with pytest.raises(NoJSONFoundError, match="No JSON found"):
            parse_ai_response("I could not categorize this task.")

    def test_empty_reply(self):
        with pytest.raises(NoJSONFoundError, match="No JSON found"):
            parse_ai_response("")

    def test_broken_json(self):
        with pytest.raises(MalformedJSONError):
            parse_ai_response('{"category": "Work", "priority": }')

    def test_two_objects_are_not_one(self):
        """Greedy extraction spans both objects, which is not valid JSON."""
        with pytest.raises(MalformedJSONError):
            parse_ai_response(reply() + "\n" + reply())


class TestRoundTrip:
    """Every valid response survives serialization and parsing unchanged."""

    @pytest.mark.parametrize("category", ["Work", "Personal", "Health", "Finance", "Other"])
    def test_categories(self, category):
        response = {**VALID_RESPONSE, "category": category}
        assert parse_ai_response(json.dumps(response)).model_dump(mode="json") == response

    @pytest.mark.parametrize("priority", ["High", "Medium", "Low"])
    def test_priorities(self, priority):
        response = {**VALID_RESPONSE, "priority": priority, "due_date": "2026-09-22"}
        assert parse_ai_response(json.dumps(response)).model_dump(mode="json") == response

    def test_reasoning_not_trimmed(self):
        result = parse_ai_response(reply(reasoning="  padded  "))
        assert result.reasoning == "  padded  "

    def test_extra_keys_dropped(self):
        result = parse_ai_response(reply(confidence=0.9))
        assert result.model_dump(mode="json") == VALID_RESPONSE


class TestSchemaValidation:
    """Invalid field values fail with the offending field identified."""

    @pytest.mark.parametrize("overrides,field", [
        ({"category": "Shopping"}, "category"),
        ({"category": "work"}, "category"),
        ({"priority": "Urgent"}, "priority"),
        ({"reasoning": ""}, "reasoning"),
        ({"reasoning": 42}, "reasoning"),
        ({"due_date": "March 15"}, "due_date"),
        ({"due_date": "2026/03/15"}, "due_date"),
        ({"due_date": "2026-03-15T10:00"}, "due_date"),
        ({"due_date": "٢٠٢٦-٠٥-١٥"}, "due_date"),
        ({"due_date": "２０２６-０５-１５"}, "due_date"),
    ])
    def test_invalid_field(self, overrides, field):
        with pytest.raises(ResponseSchemaError) as exc_info:
            parse_ai_response(reply(**overrides))
        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    def test_missing_due_date(self):
        text = json.dumps({"category": "Work", "priority": "High", "reasoning": "Test"})
        with pytest.raises(ResponseSchemaError) as exc_info:
            parse_ai_response(text)
        assert exc_info.value.field == "due_date"

    def test_failure_kinds_are_distinguishable(self):
        """All parse failures share a base class but have distinct types."""
        kinds = set()
        for text in ("no json here", "{not json}", reply(category="Shopping")):
            with pytest.raises(ResponseParseError) as exc_info:
                parse_ai_response(text)
            kinds.add(type(exc_info.value))
        assert kinds == {NoJSONFoundError, MalformedJSONError, ResponseSchemaError}
