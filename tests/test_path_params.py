from auto_swagger.generator.path_params import extract_template_names, resolve_path_parameters
from auto_swagger.parser.base import PathParameterSpec


class TestExtractTemplateNames:
    def test_names_in_order(self):
        assert extract_template_names("/a/{x}/b/{y}") == ["x", "y"]

    def test_duplicates_collapse(self):
        assert extract_template_names("/{x}/{y}/{x}") == ["x", "y"]

    def test_no_placeholders(self):
        assert extract_template_names("/users") == []
        assert extract_template_names("") == []

    def test_greedy_proxy_name(self):
        assert extract_template_names("/files/{proxy+}") == ["proxy+"]


class TestResolvePathParameters:
    def test_explicit_entry_takes_precedence(self):
        entries = resolve_path_parameters(
            "/a/{x}/{y}", {"x": PathParameterSpec(required=False, description="d")}
        )
        assert [(e.name, e.required, e.description) for e in entries] == [
            ("x", False, "d"),
            ("y", True, None),
        ]
        assert all(e.location == "path" for e in entries)

    def test_inferred_entries_are_required_strings(self):
        entries = resolve_path_parameters("/users/{id}")
        assert len(entries) == 1
        assert entries[0].required is True
        assert entries[0].param_type == "string"
        assert entries[0].description is None

    def test_explicit_required_defaults_to_true(self):
        entries = resolve_path_parameters("/users/{id}", {"id": PathParameterSpec(description="User id")})
        assert entries[0].required is True
        assert entries[0].description == "User id"

    def test_explicit_entries_first_then_template_order(self):
        entries = resolve_path_parameters(
            "/{a}/{b}/{c}", {"c": PathParameterSpec(), "a": PathParameterSpec()}
        )
        assert [e.name for e in entries] == ["c", "a", "b"]

    def test_explicit_name_missing_from_template_is_kept(self):
        entries = resolve_path_parameters("/users", {"tenant": PathParameterSpec(description="doc only")})
        assert [e.name for e in entries] == ["tenant"]

    def test_no_duplicates(self):
        entries = resolve_path_parameters("/{x}/{x}", {"x": PathParameterSpec()})
        assert [e.name for e in entries] == ["x"]
