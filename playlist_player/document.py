"""Playlist document model, YAML load/dump and schema validation (no UI)."""

from typing import Any, Literal, Optional, TypedDict

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class DocumentError(Exception):
    """Authored text could not be parsed as YAML."""


class ValidationIssue(TypedDict):
    path: str
    message: str


class MediaItem(BaseModel):
    """One playable or displayable unit of the playlist."""

    model_config = ConfigDict(extra='ignore')

    type: Literal['video', 'audio', 'image'] = 'video'
    url: str
    title: str
    poster: Optional[str] = None
    banner: Optional[str] = None
    # Seconds. For images this is the only thing that advances the playlist.
    duration: Optional[float] = None
    start: str = '0:00'
    end: Optional[str] = None
    speed: Optional[float] = None
    controls: Optional[bool] = None
    # -1 infinite, 0/None no repeat, n > 0 repeat n times.
    loop: Optional[int] = None

    @field_validator('start', 'end', mode='before')
    @classmethod
    def _sexagesimal_as_text(cls, v):
        # YAML 1.1 reads unquoted 1:30 as 90; keep it as seconds text.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def is_image(self) -> bool:
        return self.type == 'image'


class OnStop(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    go_back: Optional[bool] = Field(None, alias='goBack')


class PlaylistDocument(BaseModel):
    """Validated playlist: options plus ordered media list."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    title: str = 'Playlist'
    autoplay: bool = True
    # -1 infinite restart, 0/1 play once, n > 1 restart n-1 more times.
    loop: int = -1
    speed: Optional[float] = None
    controls: Optional[bool] = None
    playing: Optional[int] = None
    on_stop: OnStop = Field(default_factory=OnStop, alias='onStop')
    media: list[MediaItem]


DEFAULT_DOCUMENT: dict[str, Any] = {
    'title': 'My Playlist',
    'autoplay': False,
    'loop': 0,
    'speed': 1,
    'playing': 0,
    'media': [
        {
            'type': 'video',
            'url': 'https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4',
            'title': 'Sample Video',
            'duration': 10,
            'start': '0:05',
            'end': '0:15',
            'speed': 1.5,
            'loop': 1,
        }
    ],
}


def _issue_path(loc: tuple) -> str:
    return '/' + '/'.join(str(part) for part in loc)


def validate_document(data: Any) -> tuple[PlaylistDocument | None, list[ValidationIssue]]:
    """Validate authored data. Returns (document, []) or (None, issues)."""
    if not isinstance(data, dict):
        return None, [{'path': '/', 'message': 'must be object'}]
    try:
        return PlaylistDocument.model_validate(data), []
    except ValidationError as e:
        issues: list[ValidationIssue] = [
            {'path': _issue_path(err['loc']), 'message': err['msg']}
            for err in e.errors()
        ]
        return None, issues


def format_issues(issues: list[ValidationIssue]) -> str:
    """One line, the way the editor status shows validation errors."""
    return ', '.join(f"{i['path']} {i['message']}" for i in issues)


def load_yaml(text: str) -> Any:
    """Parse authored YAML. Raises DocumentError on syntax errors."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(str(e)) from e


def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def schema_hint() -> str:
    """YAML rendering of the document JSON Schema (editor help text)."""
    schema = PlaylistDocument.model_json_schema(by_alias=True)
    return dump_yaml(schema)
