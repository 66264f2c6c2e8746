"""Polls a Wistia project for newly published videos."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from ..config import settings
from ..errors import AppError
from ..runtime import Bundle, ZObject
from ..schema import Display, InputField, Operation, OutputField, Trigger


MAX_VIDEOS = 10

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _created_at(video: Dict[str, Any]) -> datetime:
    value = video.get("created")
    if not isinstance(value, str):
        return _OLDEST
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return _OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def newest_first(videos: List[Dict[str, Any]], limit: int = MAX_VIDEOS) -> List[Dict[str, Any]]:
    """Order records by ``created`` descending and keep at most ``limit``.

    Records are returned untouched; the sort is stable, so records the API
    already ordered keep their relative order.
    """
    return sorted(videos, key=_created_at, reverse=True)[:limit]


async def list_recent_videos(z: ZObject, bundle: Bundle) -> List[Dict[str, Any]]:
    project_id = bundle.input_data.get("project_id")
    if project_id is None or not str(project_id).strip():
        raise AppError("Project ID is required to watch for new videos")

    response = await z.request(
        url=f"{settings.api_base_url}/medias",
        params={
            "tag": str(project_id).strip(),
            "per_page": MAX_VIDEOS,
            "sort_by": "created",
            "sort_direction": "desc",
        },
    )
    response.throw_for_status()

    videos = response.data
    if not isinstance(videos, list):
        return []
    return newest_first(videos)


publish_trigger = Trigger(
    key="publish",
    noun="Publish",
    display=Display(
        label="New Video in Project",
        description="Triggers when a new video publish is added to a Wistia project.",
    ),
    operation=Operation(
        type="polling",
        perform=list_recent_videos,
        input_fields=(
            InputField(
                key="project_id",
                label="Project ID",
                type="string",
                required=True,
                help_text="Select the Wistia project to monitor for new videos.",
                dynamic="projects.id",
            ),
        ),
        sample={
            "id": 138085539,
            "hashed_id": "lj5p4p3yzw",
            "progress": 1,
            "type": "Video",
            "archived": False,
            "name": "Clip 1 (Camera)",
            "duration": 2.73333,
            "created": "2025-09-05T13:11:20+00:00",
            "updated": "2025-09-05T13:11:44+00:00",
            "description": "",
            "status": "ready",
            "thumbnail": {
                "url": "https://embed-ssl.wistia.com/deliveries/14fe023bbafa428d4de73481c37e34fa05aeeb79.jpg?image_crop_resized=200x120",
                "width": 200,
                "height": 120,
            },
            "assets": [
                {
                    "width": 1280,
                    "height": 720,
                    "type": "OriginalFile",
                    "fileSize": 1250834,
                    "contentType": "video/webm",
                    "url": "http://embed.wistia.com/deliveries/395ec90f8a7f9ecfb855b2985d603254.bin",
                },
                {
                    "width": 1280,
                    "height": 720,
                    "type": "HdMp4VideoFile",
                    "fileSize": 1438112,
                    "contentType": "video/mp4",
                    "url": "http://embed.wistia.com/deliveries/8dbad18401f6be8b6bf24c4f201920d823c54435.bin",
                },
                {
                    "width": 960,
                    "height": 540,
                    "type": "MdMp4VideoFile",
                    "fileSize": 674410,
                    "contentType": "video/mp4",
                    "url": "http://embed.wistia.com/deliveries/20e99dcf192cd92ae64ff587facdaf3e06811965.bin",
                },
                {
                    "width": 1280,
                    "height": 720,
                    "type": "StillImageFile",
                    "fileSize": 1291238,
                    "contentType": "image/jpg",
                    "url": "http://embed.wistia.com/deliveries/14fe023bbafa428d4de73481c37e34fa05aeeb79.bin",
                },
                {
                    "width": 2000,
                    "height": 112,
                    "type": "StoryboardFile",
                    "fileSize": 27774,
                    "contentType": "image/jpg",
                    "url": "http://embed.wistia.com/deliveries/c1a8c30c0ea5f61f425ff54b8d9b0400c413d01c.bin",
                },
            ],
        },
        output_fields=(
            OutputField(key="id", label="Video ID", type="number"),
            OutputField(key="name", label="Video Name", type="string"),
            OutputField(key="duration", label="Duration (seconds)", type="number"),
            OutputField(key="description", label="Description", type="string"),
        ),
    ),
)
