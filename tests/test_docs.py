import json

from tasklane.docs import swagger_spec


def _refs(node):
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref":
                yield value
            else:
                yield from _refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _refs(item)


def test_default_header_values():
    spec = swagger_spec()
    assert spec["swagger"] == "2.0"
    assert spec["info"]["title"] == "My App API"
    assert spec["info"]["version"] == "1.0"
    assert spec["host"] == "localhost:8080"
    assert spec["basePath"] == "/"
    assert spec["schemes"] == []


def test_host_and_base_path_are_passed_through():
    spec = swagger_spec("api.example.com:9000", "/root")
    assert spec["host"] == "api.example.com:9000"
    assert spec["basePath"] == "/root"


def test_create_user_operation():
    post = swagger_spec()["paths"]["/users"]["post"]
    assert post["summary"] == "Create a user"
    assert post["description"] == "Create a new user"
    assert post["tags"] == ["users"]
    assert post["parameters"][0]["schema"] == {"$ref": "#/definitions/model.User"}
    assert set(post["responses"]) == {"200", "400"}


def test_every_reference_resolves():
    spec = swagger_spec()
    refs = list(_refs(spec))
    assert refs
    prefix = "#/definitions/"
    for ref in refs:
        assert ref.startswith(prefix)
        assert ref[len(prefix):] in spec["definitions"]


def test_json_round_trip():
    spec = swagger_spec()
    assert json.loads(json.dumps(spec)) == spec


def test_each_call_returns_independent_document():
    first = swagger_spec()
    first["definitions"]["model.User"]["properties"].clear()
    first["paths"]["/users"]["post"]["tags"].append("changed")
    second = swagger_spec()
    assert "email" in second["definitions"]["model.User"]["properties"]
    assert second["paths"]["/users"]["post"]["tags"] == ["users"]