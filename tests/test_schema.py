"""The backend schema must describe exactly the fields the contracts parse."""

import pytest

from contracts import (
    ALTERNATIVES_SCHEMA,
    TEMPLATE_SCHEMA,
    Estimates,
    HardwareSpecs,
    Phase,
    ProjectTemplate,
    Risk,
    SoftwareSpecs,
    Task,
    TemplateInfo,
    UsageGuide,
)


def _aliases(model, exclude=()):
    return {f.alias for name, f in model.model_fields.items() if name not in exclude}


def _props(schema):
    return set(schema["properties"])


class TestTemplateSchema:

    def test_top_level(self):
        assert _props(TEMPLATE_SCHEMA) == _aliases(ProjectTemplate)
        assert set(TEMPLATE_SCHEMA["required"]) == {"basicInfo", "phases", "estimates", "risks", "usage"}

    @pytest.mark.parametrize("path, model", [
        (("basicInfo",), TemplateInfo),
        (("estimates",), Estimates),
        (("usage",), UsageGuide),
    ])
    def test_objects_mirror_models(self, path, model):
        schema = TEMPLATE_SCHEMA["properties"][path[0]]
        assert _props(schema) == _aliases(model)

    def test_phase_and_task(self):
        phase = TEMPLATE_SCHEMA["properties"]["phases"]["items"]
        assert _props(phase) == _aliases(Phase)
        assert _props(phase["properties"]["tasks"]["items"]) == _aliases(Task)

    def test_risk_level_enum(self):
        risk = TEMPLATE_SCHEMA["properties"]["risks"]["items"]
        assert _props(risk) == _aliases(Risk)
        assert risk["properties"]["level"]["enum"] == ["High", "Medium", "Low"]

    def test_detailed_plan_is_not_requested(self):
        solution = TEMPLATE_SCHEMA["properties"]["technicalSolution"]
        assert "required" not in solution
        hardware = solution["properties"]["hardware"]
        software = solution["properties"]["software"]
        assert _props(hardware) == _aliases(HardwareSpecs, exclude=("detailed_plan",))
        assert _props(software) == _aliases(SoftwareSpecs, exclude=("detailed_plan",))

    def test_icon_suggestion_required(self):
        assert "iconSuggestion" in TEMPLATE_SCHEMA["properties"]["basicInfo"]["required"]


def test_alternatives_schema_is_string_array():
    assert ALTERNATIVES_SCHEMA == {"type": "array", "items": {"type": "string"}}
