"""
Functional tests driven by the JSON cases in test_data/functional.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_fsharp import GeneratorConfig, TypeGenerator


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file, encoding="utf-8") as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(schema, config_dict, class_name="TestClass"):
    """Helper to generate code with given schema and config."""
    config = GeneratorConfig.from_dict(config_dict or {})
    generator = TypeGenerator(class_name, schema, config)
    return generator.generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    name = test_case["name"]
    description = test_case["description"]
    source_file = test_case.get("_source_file", "unknown")

    print(f"\nTesting: {name} (from {source_file})")
    print(f"Description: {description}")

    generated_code = _generate_code(test_case["schema"], test_case.get("config"))
    print(f"Generated code:\n{generated_code}")

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"Expected pattern '{pattern}' not found in output"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"Unexpected pattern '{pattern}' found in output"


if __name__ == "__main__":
    pytest.main([__file__])
