"""Creates a new Wistia project."""
from __future__ import annotations

from typing import Any, Dict

from ..config import settings
from ..errors import AppError, AuthenticationError
from ..http import Response, truncate
from ..models import Project
from ..runtime import Bundle, ZObject
from ..schema import Create, Display, InputField, Operation, OutputField


ERROR_PREFIX = "Project creation failed:"


def build_request_body(input_data: Dict[str, Any]) -> Dict[str, Any]:
    name = input_data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise AppError("Project name is required and cannot be empty")

    body: Dict[str, Any] = {"name": name.strip()}

    admin_email = input_data.get("adminEmail")
    if isinstance(admin_email, str) and admin_email.strip():
        body["adminEmail"] = admin_email.strip()

    is_public = input_data.get("public")
    if isinstance(is_public, bool):
        body["public"] = is_public

    return body


def describe_failure(response: Response) -> str:
    """Builds the error text for a non-2xx create response.

    Every one of ``code``, ``detail``, ``error`` and ``message`` found in a
    JSON body is appended, in that order.
    """
    message = f"Project creation failed with status {response.status}"
    try:
        error_data = response.data or {}
    except ValueError:
        return f"{message}. Raw response: {response.content}"

    if not isinstance(error_data, dict):
        return message
    if error_data.get("code"):
        message += f" ({error_data['code']})"
    if error_data.get("detail"):
        message += f": {error_data['detail']}"
    if error_data.get("error"):
        message += f": {error_data['error']}"
    if error_data.get("message"):
        message += f": {error_data['message']}"
    return message


def map_project(data: Dict[str, Any]) -> Dict[str, Any]:
    return Project.model_validate(data).to_output()


async def create_project(z: ZObject, bundle: Bundle) -> Dict[str, Any]:
    body = build_request_body(bundle.input_data)

    z.console.info(
        "Project creation request: name={} adminEmail={} public={}",
        body["name"],
        body.get("adminEmail", "default (account owner)"),
        body.get("public", False),
    )

    try:
        z.console.info("Sending project creation request to Wistia...")
        response = await z.request(
            url=f"{settings.api_base_url}/projects",
            method="POST",
            json=body,
            headers={"Content-Type": "application/json"},
        )
        z.console.info(
            "Wistia project creation response: status={} contentType={} content={}",
            response.status,
            response.headers.get("content-type"),
            truncate(response.content),
        )

        if not response.ok:
            raise AppError(f"{ERROR_PREFIX} {describe_failure(response)}", status=response.status)

        project = map_project(response.data)
        z.console.info(
            "Project created successfully: id={} name={} hashedId={}",
            project["id"],
            project["name"],
            project["hashedId"],
        )
        return project
    except AuthenticationError:
        raise
    except Exception as exc:  # noqa: BLE001
        if ERROR_PREFIX in str(exc):
            raise
        raise AppError(f"{ERROR_PREFIX} {str(exc) or 'Unknown error occurred'}") from exc


input_fields = (
    InputField(
        key="name",
        label="Project Name",
        type="string",
        required=True,
        help_text="The name of the project you want to create.",
    ),
    InputField(
        key="adminEmail",
        label="Admin Email",
        type="string",
        required=False,
        help_text=(
            "The email address of the person you want to set as the owner of this project. "
            "Defaults to the Wistia Account Owner."
        ),
    ),
    InputField(
        key="public",
        label="Public Project",
        type="boolean",
        required=False,
        help_text="Set to true to make this project public, false to keep it private. Defaults to false.",
    ),
)


upload_create = Create(
    key="upload",
    noun="Project",
    display=Display(
        label="Create New Project",
        description="Create a new project in Wistia for organizing your videos.",
    ),
    operation=Operation(
        perform=create_project,
        input_fields=input_fields,
        sample={
            "id": 123456,
            "hashedId": "abc123xyz789",
            "name": "My New Project",
            "description": "",
            "mediaCount": 0,
            "created": "2024-01-15T14:20:00Z",
            "updated": "2024-01-15T14:20:00Z",
            "public": False,
            "anonymousCanUpload": False,
            "anonymousCanDownload": False,
            "adminEmail": "admin@example.com",
        },
        output_fields=(
            OutputField(key="id", label="Project ID", type="integer"),
            OutputField(key="hashedId", label="Hashed ID", type="string"),
            OutputField(key="name", label="Project Name", type="string"),
            OutputField(key="description", label="Description", type="string"),
            OutputField(key="mediaCount", label="Media Count", type="integer"),
            OutputField(key="created", label="Created Date", type="datetime"),
            OutputField(key="updated", label="Updated Date", type="datetime"),
            OutputField(key="public", label="Public Project", type="boolean"),
            OutputField(key="anonymousCanUpload", label="Anonymous Can Upload", type="boolean"),
            OutputField(key="anonymousCanDownload", label="Anonymous Can Download", type="boolean"),
            OutputField(key="adminEmail", label="Admin Email", type="string"),
        ),
    ),
)
