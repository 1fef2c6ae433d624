import json
import time
from dataclasses import dataclass
from typing import Callable, Optional

from edugen.schemas import ContentType

COPY_LABEL = "Copy to Clipboard"
COPIED_LABEL = "Copied!"
COPY_RESET_SECONDS = 2.0

DOWNLOAD_BASENAME = "ai-generated-content"


@dataclass(frozen=True)
class DownloadFile:
    file_name: str
    mime_type: str
    data: bytes


def download_file(content: str, content_type: ContentType) -> DownloadFile:
    """Package the raw generated text for download, exactly as received"""
    if content_type == ContentType.QUIZ:
        extension, mime_type = "json", "application/json"
    else:
        extension, mime_type = "md", "text/markdown"
    return DownloadFile(
        file_name=f"{DOWNLOAD_BASENAME}.{extension}",
        mime_type=mime_type,
        data=content.encode("utf-8"),
    )


def clipboard_script(content: str) -> str:
    # json.dumps produces a valid JS string literal; "</" is split so the
    # payload cannot close the script tag early
    literal = json.dumps(content).replace("</", "<\\/")
    return f"<script>navigator.clipboard.writeText({literal});</script>"


class CopyButtonState:
    """Label of the copy button, showing a confirmation for a short while"""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.copied_at: Optional[float] = None

    def mark_copied(self):
        self.copied_at = self.clock()

    @property
    def label(self) -> str:
        if self.copied_at is not None and self.clock() - self.copied_at < COPY_RESET_SECONDS:
            return COPIED_LABEL
        self.copied_at = None
        return COPY_LABEL
