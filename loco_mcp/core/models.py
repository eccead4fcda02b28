"""Shapes of the Loco resources passed through by the adapter, and the
parameter types shared by the tool modules."""
from typing import Annotated, Dict, List, Literal, TypedDict

from pydantic import Field
from typing_extensions import NotRequired

AssetType = Literal["text", "html", "xml"]


class Progress(TypedDict):
    translated: int
    untranslated: int
    flagged: int


class LocaleProgress(Progress):
    words: NotRequired[int]


class PluralRules(TypedDict):
    length: int
    equation: str
    forms: List[str]


class Locale(TypedDict):
    code: str
    name: str
    source: NotRequired[bool]
    plurals: PluralRules
    progress: LocaleProgress


class Asset(TypedDict):
    id: str
    type: str
    context: NotRequired[str]
    notes: NotRequired[str]
    printf: NotRequired[str]
    created: str
    modified: str
    plurals: int
    tags: List[str]
    aliases: Dict[str, str]
    progress: Progress


class Author(TypedDict):
    id: int
    name: str
    email: str


class LocaleRef(TypedDict):
    code: str
    name: str


class Translation(TypedDict):
    id: str
    translation: str
    translated: bool
    status: str
    revision: int
    flagged: bool
    modified: str
    author: NotRequired[Author]
    locale: LocaleRef
    plurals: NotRequired[List[str]]


class SuccessResponse(TypedDict):
    status: int
    message: str


# Tool parameters
ApiKey = Annotated[str, Field(description="Loco API key for the project")]
AssetId = Annotated[str, Field(description="The unique asset identifier")]
LocaleCode = Annotated[str, Field(description="Locale code (e.g., en, fr, de, en_US)")]
TagName = Annotated[str, Field(description="The tag name")]
