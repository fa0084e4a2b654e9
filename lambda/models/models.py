from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from typing import Annotated, Literal, Optional, Union

_url_adapter = TypeAdapter(AnyUrl)


class Example(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    translation: Optional[str] = None


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str = Field(min_length=1)
    phonetic: Optional[str] = None
    partOfSpeech: Optional[list[str]] = None
    meanings: list[str] = Field(min_length=1)
    etymology: Optional[str] = None
    collocations: Optional[list[str]] = None
    examples: Optional[list[Example]] = Field(default=None, min_length=1, max_length=3)
    cefrLevel: Optional[str] = None
    synonyms: Optional[list[str]] = None
    sourceUrl: Optional[str] = Field(default=None, json_schema_extra={"format": "uri"})

    @field_validator("word")
    @classmethod
    def strip_word(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("word must not be blank")
        return value

    @field_validator("sourceUrl")
    @classmethod
    def check_url(cls, value: Optional[str]) -> Optional[str]:
        # stored as written, AnyUrl would append a trailing slash
        if value is not None:
            try:
                _url_adapter.validate_python(value)
            except ValueError as e:
                raise ValueError(f"sourceUrl is not a valid URL: {value}") from e
        return value


def parse_entry(candidate: dict) -> Entry:
    # raises pydantic.ValidationError on any mismatch
    return Entry.model_validate(candidate)


def entry_json_schema() -> dict:
    return Entry.model_json_schema()


# LINE webhook payloads. Only text messages are acted on, everything else
# is kept loosely typed so unknown event kinds still parse.

class TextMessageContent(BaseModel):
    type: Literal["text"]
    id: Optional[str] = None
    text: str


class OtherMessageContent(BaseModel):
    type: str
    id: Optional[str] = None


class MessageEvent(BaseModel):
    type: Literal["message"]
    replyToken: Optional[str] = None
    message: Annotated[Union[TextMessageContent, OtherMessageContent], Field(union_mode="left_to_right")]


class OtherEvent(BaseModel):
    type: str
    replyToken: Optional[str] = None


InboundEvent = Annotated[Union[MessageEvent, OtherEvent], Field(union_mode="left_to_right")]


class WebhookRequest(BaseModel):
    destination: Optional[str] = None
    events: list[InboundEvent]
