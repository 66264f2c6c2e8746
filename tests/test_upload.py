import json

import httpx
import pytest

from wistia_zapier.app import app
from wistia_zapier.creates.upload import build_request_body, create_project, map_project
from wistia_zapier.errors import AppError, AuthenticationError
from wistia_zapier.models import Project

from tests.helpers import json_response, make_bundle, run, text_response


def _body(request: httpx.Request) -> dict:
    return json.loads(request.content)


def test_upload_create_descriptor() -> None:
    create = app.creates["upload"]
    assert create.key == "upload"
    assert create.noun == "Project"
    assert create.display.label == "Create New Project"
    assert [field.key for field in create.operation.input_fields] == ["name", "adminEmail", "public"]
    assert create.operation.input_field("name").required is True
    assert create.operation.input_field("public").type == "boolean"


def test_upload_sample_matches_output_shape() -> None:
    sample = app.creates["upload"].operation.sample
    assert map_project(sample) == sample


@pytest.mark.parametrize("input_data", [{}, {"name": ""}, {"name": "   "}, {"name": None}])
def test_blank_name_fails_before_any_request(make_tester, input_data) -> None:
    tester, recorder = make_tester(json_response(201, {"id": 1}))
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle(input_data)))
    assert str(excinfo.value) == "Project name is required and cannot be empty"
    assert recorder.requests == []


@pytest.mark.parametrize(
    "input_data,expected",
    [
        ({"name": "  Demo  "}, {"name": "Demo"}),
        ({"name": "Demo", "adminEmail": "   "}, {"name": "Demo"}),
        ({"name": "Demo", "adminEmail": " owner@example.com "}, {"name": "Demo", "adminEmail": "owner@example.com"}),
        ({"name": "Demo", "public": "true"}, {"name": "Demo"}),
        ({"name": "Demo", "public": False}, {"name": "Demo", "public": False}),
        ({"name": "Demo", "public": True}, {"name": "Demo", "public": True}),
    ],
)
def test_build_request_body(input_data, expected) -> None:
    assert build_request_body(input_data) == expected


def test_create_project_success(make_tester) -> None:
    tester, recorder = make_tester(json_response(201, {"id": 5, "hashedId": "abc", "name": "Demo"}))
    result = run(tester(create_project, make_bundle({"name": "Demo"})))

    assert result == {
        "id": 5,
        "hashedId": "abc",
        "name": "Demo",
        "description": None,
        "mediaCount": 0,
        "created": None,
        "updated": None,
        "public": False,
        "anonymousCanUpload": False,
        "anonymousCanDownload": False,
    }
    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1/projects"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Authorization"] == "Bearer secret-key"
    assert _body(request) == {"name": "Demo"}


def test_mapping_defaults_and_idempotence() -> None:
    raw = {
        "id": 9,
        "hashedId": "zzz",
        "name": "Launch",
        "mediaCount": None,
        "public": None,
        "adminEmail": "boss@example.com",
    }
    mapped = map_project(raw)
    assert mapped["mediaCount"] == 0
    assert mapped["public"] is False
    assert mapped["anonymousCanUpload"] is False
    assert mapped["anonymousCanDownload"] is False
    assert mapped["adminEmail"] == "boss@example.com"
    assert map_project(mapped) == mapped
    assert Project.model_validate(mapped).media_count == 0


def test_error_with_single_field(make_tester) -> None:
    tester, _ = make_tester(json_response(422, {"error": "name_taken"}))
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle({"name": "Demo"})))
    assert str(excinfo.value) == "Project creation failed: Project creation failed with status 422: name_taken"


def test_error_concatenates_every_field(make_tester) -> None:
    payload = {"code": "invalid", "detail": "bad input", "error": "name_taken", "message": "try again"}
    tester, _ = make_tester(json_response(400, payload))
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle({"name": "Demo"})))
    assert str(excinfo.value) == (
        "Project creation failed: Project creation failed with status 400 (invalid): bad input: name_taken: try again"
    )


def test_error_with_unparseable_body(make_tester) -> None:
    tester, _ = make_tester(text_response(502, "<html>Bad Gateway</html>"))
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle({"name": "Demo"})))
    assert str(excinfo.value) == (
        "Project creation failed: Project creation failed with status 502. Raw response: <html>Bad Gateway</html>"
    )


def test_transport_error_is_wrapped_once(make_tester) -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    tester, _ = make_tester(_fail)
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle({"name": "Demo"})))
    assert str(excinfo.value) == "Project creation failed: connection refused"
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_malformed_success_body_is_wrapped_once(make_tester) -> None:
    tester, _ = make_tester(text_response(201, "{not json"))
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle({"name": "Demo"})))
    assert str(excinfo.value).count("Project creation failed:") == 1


def test_bad_credentials_keep_their_category(make_tester) -> None:
    tester, _ = make_tester(json_response(401, {"error": "unauthorized"}))
    with pytest.raises(AuthenticationError, match="The API Key you supplied is incorrect"):
        run(tester(create_project, make_bundle({"name": "Demo"})))


def test_error_with_empty_body(make_tester) -> None:
    tester, _ = make_tester(lambda request: httpx.Response(500))
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle({"name": "Demo"})))
    assert str(excinfo.value) == "Project creation failed: Project creation failed with status 500"


def test_error_with_non_object_json(make_tester) -> None:
    tester, _ = make_tester(json_response(400, ["name_taken"]))
    with pytest.raises(AppError) as excinfo:
        run(tester(create_project, make_bundle({"name": "Demo"})))
    assert str(excinfo.value) == "Project creation failed: Project creation failed with status 400"
