"""Lists Wistia projects, for polling and for the project dropdown."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..config import settings
from ..errors import AppError
from ..models import DropdownOption
from ..runtime import Bundle, ZObject
from ..schema import Display, Operation, OutputField, Trigger


PAGE_SIZE = 100


def to_dropdown_options(projects: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [DropdownOption.from_project(project).model_dump() for project in projects]


async def list_projects(z: ZObject, bundle: Bundle) -> List[Dict[str, Any]]:
    response = await z.request(
        url=f"{settings.api_base_url}/projects",
        params={"per_page": PAGE_SIZE},
    )
    if response.status != 200:
        raise AppError("Failed to fetch projects from Wistia", status=response.status)

    projects = response.data
    if not isinstance(projects, list):
        return []
    if bundle.meta.is_filling_dynamic_dropdown:
        return to_dropdown_options(projects)
    return projects


projects_trigger = Trigger(
    key="projects",
    noun="Projects",
    display=Display(
        label="List Projects",
        description="Triggers when we need a list of Wistia projects (used internally for dropdowns).",
    ),
    operation=Operation(
        type="polling",
        perform=list_projects,
        input_fields=(),
        sample={
            "id": 10092556,
            "public": True,
            "description": "Get started by adding a video to your folder - you can always delete it later!",
            "name": "Malforime's first folder",
            "mediaCount": 2,
            "created": "2025-09-05T11:13:03+00:00",
            "updated": "2025-09-05T13:22:15+00:00",
            "hashedId": "so2dkxq9i6",
            "anonymousCanUpload": False,
            "anonymousCanDownload": False,
            "publicId": "so2dkxq9i6",
        },
        output_fields=(
            OutputField(key="id", label="Project ID", type="number"),
            OutputField(key="name", label="Project Name", type="string"),
        ),
    ),
)
