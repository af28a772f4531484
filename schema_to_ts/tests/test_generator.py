import json
from pathlib import Path

import pytest

from schema_to_ts import __version__
from schema_to_ts.pipeline import DocumentGenerator, GeneratorConfig, PrettierFormatter

PETSTORE = Path(__file__).parent / "test_data" / "documents" / "petstore.json"


@pytest.fixture
def petstore():
    with open(PETSTORE) as f:
        return json.load(f)


def test_generate_all_schemas(petstore):
    code = DocumentGenerator(petstore).generate()

    assert code.startswith(f"// Generated by schema_to_ts {__version__}\n// Do not edit by hand.\n\n")
    assert code.count("export interface Category {") == 1
    assert code.count("export interface Tag {") == 1
    assert 'export type Status = "available" | "pending" | "sold"' in code
    assert "category?: Category;" in code
    assert "tags?: Tag[];" in code
    assert "photoUrls?: string[];" in code
    assert code.endswith("}\n") or code.endswith('"sold"\n')


def test_pet_declaration_documentation(petstore):
    declarations = DocumentGenerator(petstore).generate_declarations()
    pet = declarations["Pet"]
    assert "  /**\n   * Name\n   * ---\n   * Name of the pet\n   * [required]\n   */\n  name: string;" in pet
    assert "  /**\n   * Pet status in the store\n   */\n  status?: Status;" in pet
    assert "  /**\n   * @deprecated\n   */\n  legacyCode?: string;" in pet


def test_referenced_declarations_come_first(petstore):
    config = GeneratorConfig(schemas=["Pet"])
    declarations = DocumentGenerator(petstore, config).generate_declarations()
    assert list(declarations) == ["Category", "Tag", "Status", "Pet"]


def test_without_referenced_declarations(petstore):
    config = GeneratorConfig(schemas=["Pet"], include_referenced=False)
    declarations = DocumentGenerator(petstore, config).generate_declarations()
    assert list(declarations) == ["Pet"]


def test_deep_inlines_references(petstore):
    config = GeneratorConfig(schemas=["Pet"], deep=True, include_referenced=False, export=False)
    pet = DocumentGenerator(petstore, config).generate_declarations()["Pet"]
    assert pet.startswith("interface Pet {")
    assert "category?: {\n    id?: number;\n    name?: string;\n  };" in pet
    assert 'status?: "available" | "pending" | "sold";' in pet


def test_missing_schema_name(petstore):
    config = GeneratorConfig(schemas=["Nope"])
    with pytest.raises(KeyError):
        DocumentGenerator(petstore, config).generate()


def test_no_generation_comment(petstore):
    config = GeneratorConfig(schemas=["Tag"], add_generation_comment=False)
    code = DocumentGenerator(petstore, config).generate()
    assert code == "export interface Tag {\n  id?: number;\n  name?: string;\n}\n"


def test_command_line_in_header(petstore):
    config = GeneratorConfig(schemas=["Tag"])
    code = DocumentGenerator(petstore, config, command_line="schema_to_ts petstore.json out.ts").generate()
    assert code.splitlines()[0] == f"// Generated by schema_to_ts {__version__} using: schema_to_ts petstore.json out.ts"


def test_json_schema_definitions():
    document = {
        "$defs": {"Point": {"type": "object", "properties": {"x": {"type": "number"}}}},
        "definitions": {"Size": {"type": "integer"}},
    }
    config = GeneratorConfig(add_generation_comment=False)
    declarations = DocumentGenerator(document, config).generate_declarations()
    assert declarations == {
        "Size": "export type Size = number",
        "Point": "export interface Point {\n  x?: number;\n}",
    }


def test_config_round_trip():
    config = GeneratorConfig.from_dict({"deep": True, "schemas": ["A"], "formatter": {"enabled": True, "print_width": 80}})
    assert config.deep is True
    assert config.formatter.print_width == 80
    assert GeneratorConfig.from_dict(config.to_dict()) == config


def test_formatter_selected_by_name(petstore):
    assert DocumentGenerator(petstore).formatter is None
    config = GeneratorConfig.from_dict({"formatter": {"enabled": True, "name": "prettier"}})
    assert isinstance(DocumentGenerator(petstore, config).formatter, PrettierFormatter)


def test_unknown_formatter_name(petstore):
    config = GeneratorConfig.from_dict({"formatter": {"enabled": True, "name": "clang-format"}})
    with pytest.raises(ValueError):
        DocumentGenerator(petstore, config)
