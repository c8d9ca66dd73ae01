from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_FILENAME = "saved-image"
SAVED_MESSAGE = "Image saved successfully to disk!"


class RemoteSource(BaseModel):
    kind: Literal["remote"] = "remote"
    url: str = Field(min_length=1)


class LocalSource(BaseModel):
    kind: Literal["local"] = "local"
    path: str = Field(min_length=1)


ImageSource = Annotated[
    Union[RemoteSource, LocalSource],
    Field(discriminator="kind"),
]


def source_from(value: str, local: bool) -> RemoteSource | LocalSource:
    if local:
        return LocalSource(path=value)
    return RemoteSource(url=value)


class EncodeOptions(BaseModel):
    """Options for ``encode``.

    ``as_string`` is also accepted as ``string`` or ``asString``. ``wrap`` is
    accepted for compatibility and does not change the output.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    as_string: bool = Field(default=False, validation_alias=AliasChoices("string", "as_string", "asString"))
    local: bool = False
    wrap: bool | int = False

    @field_validator("wrap")
    @classmethod
    def validate_wrap(cls, value: bool | int) -> bool | int:
        if not isinstance(value, bool) and value < 0:
            raise ValueError("wrap must be a boolean or a non-negative line length")
        return value


class DecodeOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    filename: str = Field(default=DEFAULT_FILENAME, min_length=1)

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("filename must not contain NUL bytes")
        return value


class EncodeRequest(BaseModel):
    source: str = Field(min_length=1, max_length=8192)
    local: bool = False


class EncodeResponse(BaseModel):
    base64: str
    data_url: str | None = None
    trace_id: str


class DecodeRequest(BaseModel):
    payload: str = Field(min_length=1)
    filename: str = Field(default=DEFAULT_FILENAME, min_length=1, max_length=255)


class DecodeResponse(BaseModel):
    message: str
    path: str
    trace_id: str
