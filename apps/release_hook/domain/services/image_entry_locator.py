"""Image Entry Locator.

kustomization 문서에서 태그를 바꿀 images 항목을 찾는 도메인 서비스입니다.
"""

from __future__ import annotations

from typing import Any

from apps.release_hook.domain.exceptions.manifest import MalformedDocumentError

IMAGES_KEY = "images"
NEW_TAG_KEY = "newTag"


def locate_image_entry(
    document: Any,
    path: str,
    image_name: str | None = None,
) -> dict[str, Any]:
    """태그를 갱신할 images 항목을 반환합니다.

    Args:
        document: 파싱된 YAML 문서
        path: 에러 메시지용 매니페스트 경로
        image_name: 지정 시 name이 일치하는 항목, 없으면 images[0]

    Returns:
        images 항목 (원본 문서를 가리키는 dict)

    Raises:
        MalformedDocumentError: 문서 구조가 기대와 다름
    """
    if not isinstance(document, dict):
        raise MalformedDocumentError(path, "top-level document is not a mapping")

    images = document.get(IMAGES_KEY)
    if images is None:
        raise MalformedDocumentError(path, f"missing '{IMAGES_KEY}' list")
    if not isinstance(images, list):
        raise MalformedDocumentError(path, f"'{IMAGES_KEY}' is not a list")
    if not images:
        raise MalformedDocumentError(path, f"'{IMAGES_KEY}' list is empty")

    if image_name is None:
        entry = images[0]
        label = f"{IMAGES_KEY}[0]"
    else:
        entry = next(
            (item for item in images if isinstance(item, dict) and item.get("name") == image_name),
            None,
        )
        if entry is None:
            raise MalformedDocumentError(path, f"no image named '{image_name}'")
        label = f"{IMAGES_KEY}[name={image_name}]"

    if not isinstance(entry, dict):
        raise MalformedDocumentError(path, f"{label} is not a mapping")
    return entry
