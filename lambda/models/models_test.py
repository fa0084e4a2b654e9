import pytest
from pydantic import ValidationError

from models import Entry, MessageEvent, OtherEvent, OtherMessageContent, TextMessageContent, WebhookRequest, entry_json_schema, parse_entry


def test_parse_minimal_entry_leaves_optional_fields_absent():
    entry = parse_entry({"word": "ubiquitous", "meanings": ["at or in all places"]})
    assert entry.word == "ubiquitous"
    assert entry.meanings == ["at or in all places"]
    for field in ("phonetic", "partOfSpeech", "etymology", "collocations", "examples", "cefrLevel", "synonyms", "sourceUrl"):
        assert getattr(entry, field) is None


def test_parse_full_entry():
    entry = parse_entry({
        "word": "ubiquitous",
        "phonetic": "/juːˈbɪkwɪtəs/",
        "partOfSpeech": ["形容詞"],
        "meanings": ["至る所にある", "遍在する"],
        "etymology": "ラテン語 ubique (どこにでも)",
        "collocations": ["ubiquitous computing"],
        "examples": [{"source": "It is ubiquitous.", "translation": "それは普遍的だ。"}, {"source": "Phones are ubiquitous."}],
        "cefrLevel": "C1",
        "synonyms": ["omnipresent", "pervasive"],
        "sourceUrl": "https://dictionary.cambridge.org/dictionary/english/ubiquitous",
    })
    assert entry.examples[0].translation == "それは普遍的だ。"
    assert entry.examples[1].translation is None
    assert entry.sourceUrl == "https://dictionary.cambridge.org/dictionary/english/ubiquitous"


@pytest.mark.parametrize("candidate", [
    {"word": "ubiquitous"},
    {"word": "ubiquitous", "meanings": []},
    {"word": "", "meanings": ["x"]},
    {"word": "   ", "meanings": ["x"]},
    {"meanings": ["x"]},
    {"word": "ubiquitous", "meanings": "not a list"},
    {"word": "ubiquitous", "meanings": ["x"], "sourceUrl": "not a url"},
    {"word": "ubiquitous", "meanings": ["x"], "examples": []},
])
def test_parse_rejects_invalid_candidates(candidate):
    with pytest.raises(ValidationError):
        parse_entry(candidate)


def test_parse_rejects_more_than_three_examples():
    examples = [{"source": f"Example {i}."} for i in range(4)]
    with pytest.raises(ValidationError):
        parse_entry({"word": "ubiquitous", "meanings": ["x"], "examples": examples})


def test_parse_strips_word():
    assert parse_entry({"word": "  ubiquitous ", "meanings": ["x"]}).word == "ubiquitous"


def test_entry_is_immutable():
    entry = parse_entry({"word": "ubiquitous", "meanings": ["x"]})
    with pytest.raises(ValidationError):
        entry.word = "other"


def test_entry_json_schema_lists_fields_and_requirements():
    schema = entry_json_schema()
    assert set(schema["required"]) == {"word", "meanings"}
    assert set(schema["properties"]) == set(Entry.model_fields)
    assert schema["properties"]["meanings"]["minItems"] == 1


def test_webhook_request_parses_mixed_events():
    payload = WebhookRequest.model_validate({
        "destination": "U123",
        "events": [
            {"type": "message", "replyToken": "r1", "message": {"type": "text", "id": "1", "text": "ubiquitous"}},
            {"type": "message", "replyToken": "r2", "message": {"type": "sticker", "id": "2", "packageId": "1"}},
            {"type": "follow", "replyToken": "r3", "source": {"type": "user", "userId": "U1"}},
            {"type": "unfollow"},
        ],
    })
    text_event, sticker_event, follow_event, unfollow_event = payload.events
    assert isinstance(text_event, MessageEvent)
    assert isinstance(text_event.message, TextMessageContent)
    assert isinstance(sticker_event.message, OtherMessageContent)
    assert isinstance(follow_event, OtherEvent)
    assert follow_event.replyToken == "r3"
    assert unfollow_event.replyToken is None


@pytest.mark.parametrize("url", ["https://example.com", "http://example.com/a?b=1", "ftp://files.example.com/words.txt"])
def test_source_url_is_kept_verbatim(url):
    assert parse_entry({"word": "ubiquitous", "meanings": ["x"], "sourceUrl": url}).sourceUrl == url


def test_webhook_request_requires_events():
    with pytest.raises(ValidationError):
        WebhookRequest.model_validate({"destination": "U0"})
