from models import Entry
from utils import logging
from utils.errors import ConfigurationError
from utils.retry import retry

# Property names and types of the vocabulary database
TITLE = "Vocabulary"
PHONETIC = "発音記号"
PART_OF_SPEECH = "品詞"
MEANINGS = "意味"
ETYMOLOGY = "語源"
COLLOCATIONS = "コロケーション"
CEFR = "CEFR"
SYNONYMS = "類義語"
SOURCE_URL = "出典URL"

PROPERTY_TYPES = {
    TITLE: "title",
    PHONETIC: "rich_text",
    PART_OF_SPEECH: "multi_select",
    MEANINGS: "rich_text",
    ETYMOLOGY: "rich_text",
    COLLOCATIONS: "rich_text",
    CEFR: "select",
    SYNONYMS: "rich_text",
    SOURCE_URL: "url",
}


def _text(content: str) -> dict:
    return {"type": "text", "text": {"content": content}}


def build_page_properties(entry: Entry) -> dict:
    properties = {
        TITLE: {"title": [_text(entry.word)]},
        PHONETIC: {"rich_text": [_text(entry.phonetic)]} if entry.phonetic else None,
        PART_OF_SPEECH: {"multi_select": [{"name": p} for p in entry.partOfSpeech]} if entry.partOfSpeech else None,
        MEANINGS: {"rich_text": [_text(f"• {m}") for m in entry.meanings]},
        ETYMOLOGY: {"rich_text": [_text(entry.etymology)]} if entry.etymology else None,
        COLLOCATIONS: {"rich_text": [_text(", ".join(entry.collocations))]} if entry.collocations else None,
        CEFR: {"select": {"name": entry.cefrLevel}} if entry.cefrLevel else None,
        SYNONYMS: {"rich_text": [_text(", ".join(entry.synonyms))]} if entry.synonyms else None,
        SOURCE_URL: {"url": entry.sourceUrl} if entry.sourceUrl else None,
    }
    # Notion rejects null property values, absent fields are left out entirely
    return {name: value for name, value in properties.items() if value is not None}


def build_example_blocks(entry: Entry) -> list[dict]:
    blocks = []
    for example in entry.examples or []:
        rich_text = [_text(example.source)]
        if example.translation:
            rich_text.append(_text(f"  — {example.translation}"))
        blocks.append({
            "object": "block",
            "type": "bulleted_list_item",
            "bulleted_list_item": {"rich_text": rich_text},
        })
    return blocks


async def save_to_notion(entry: Entry, context) -> str:
    """
    Create a page for ``entry`` in the vocabulary database and append its examples.

    Page creation and the example append are retried separately, so a failing
    append never creates a second page. If the append gives up, the page stays
    without examples and the error is raised.
    """
    if context.notion is None or not context.settings.notion_database_id:
        raise ConfigurationError("Notion client not initialized")

    settings = context.settings
    logging.info(f"Saving entry {entry.word} to Notion database {settings.notion_database_id}")

    properties = build_page_properties(entry)

    async def create_page():
        return await context.notion.pages.create(
            parent={"database_id": settings.notion_database_id},
            properties=properties,
        )

    page = await retry(create_page, max_retries=settings.retry_max_attempts, delay=settings.retry_initial_delay)
    page_id = page["id"]
    logging.info(f"Created page {page_id} for {entry.word}")

    blocks = build_example_blocks(entry)
    if blocks:
        async def append_examples():
            return await context.notion.blocks.children.append(block_id=page_id, children=blocks)

        try:
            await retry(append_examples, max_retries=settings.retry_max_attempts, delay=settings.retry_initial_delay)
        except Exception as e:
            logging.error(f"Page {page_id} for {entry.word} was created but its examples could not be added: {str(e)}")
            raise

    return page_id


async def check_database(context) -> list[str]:
    """Return the problems found in the vocabulary database's property schema, if any."""
    if context.notion is None or not context.settings.notion_database_id:
        raise ConfigurationError("Notion client not initialized")

    database = await context.notion.databases.retrieve(database_id=context.settings.notion_database_id)
    title = "".join(t.get("plain_text", "") for t in database.get("title", []))
    logging.info(f"Database title: {title}")

    actual = database.get("properties", {})
    for name, prop in actual.items():
        logging.info(f"  {name}: {prop.get('type')}")

    problems = []
    for name, expected_type in PROPERTY_TYPES.items():
        if name not in actual:
            problems.append(f"missing property '{name}' ({expected_type})")
        elif actual[name].get("type") != expected_type:
            problems.append(f"property '{name}' is {actual[name].get('type')}, expected {expected_type}")

    for problem in problems:
        logging.warning(problem)

    return problems
