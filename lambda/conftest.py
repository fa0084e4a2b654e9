import json
import re
from types import SimpleNamespace

import pytest

from config import AppContext, Settings


def entry_json(word: str, **fields) -> str:
    data = {"word": word, "meanings": [f"meaning of {word}"]}
    data.update(fields)
    return json.dumps(data, ensure_ascii=False)


def word_from_messages(messages: list) -> str:
    return re.search(r'"([^"]+)"', messages[-1]["content"]).group(1)


class FakeCompletions:
    """Answers with queued replies (str, None for empty, or an exception to raise) or a callable."""

    def __init__(self, replies):
        self.replies = replies if callable(replies) else list(replies)
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies(kwargs) if callable(self.replies) else self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=reply))])


class FakeOpenAI:
    def __init__(self, replies):
        self.completions = FakeCompletions(replies)
        self.chat = SimpleNamespace(completions=self.completions)


class FakePages:
    def __init__(self, notion):
        self.notion = notion

    async def create(self, **kwargs):
        self.notion.page_calls.append(kwargs)
        title = kwargs["properties"]["Vocabulary"]["title"][0]["text"]["content"]
        if title in self.notion.failing_words:
            raise RuntimeError(f"Notion rejected {title}")
        if self.notion.page_failures > 0:
            self.notion.page_failures -= 1
            raise RuntimeError("Notion unavailable")
        page_id = f"page-{len(self.notion.page_calls)}"
        return {"object": "page", "id": page_id}


class FakeChildren:
    def __init__(self, notion):
        self.notion = notion

    async def append(self, **kwargs):
        self.notion.append_calls.append(kwargs)
        if self.notion.append_failures > 0:
            self.notion.append_failures -= 1
            raise RuntimeError("block append failed")
        return {"object": "list", "results": kwargs["children"]}


class FakeDatabases:
    def __init__(self, notion):
        self.notion = notion

    async def retrieve(self, database_id):
        self.notion.retrieved.append(database_id)
        return self.notion.database


class FakeNotion:
    def __init__(self, failing_words=(), page_failures=0, append_failures=0, database=None):
        self.failing_words = set(failing_words)
        self.page_failures = page_failures
        self.append_failures = append_failures
        self.database = database or {}
        self.page_calls = []
        self.append_calls = []
        self.retrieved = []
        self.pages = FakePages(self)
        self.blocks = SimpleNamespace(children=FakeChildren(self))
        self.databases = FakeDatabases(self)


class FakeLine:
    def __init__(self, fail=False):
        self.fail = fail
        self.replies = []

    async def reply_text(self, reply_token: str, text: str):
        self.replies.append((reply_token, text))
        if self.fail:
            raise RuntimeError("LINE reply failed")


@pytest.fixture
def make_context():
    def _make(openai=None, notion=None, line=None, **settings):
        values = {"notion_database_id": "db-1", "retry_initial_delay": 0}
        values.update(settings)
        return AppContext(settings=Settings(**values), openai=openai, notion=notion, line=line)

    return _make
