import json
from pathlib import Path

from models import Entry, parse_entry, entry_json_schema
from utils import logging
from utils.errors import ConfigurationError, EmptyResponseError
from utils.retry import retry

PROMPT_DIR = Path(__file__).parent / "prompts"
SCHEMA_NAME = "DictionaryEntry"


def load_prompt_template(name: str) -> str:
    template_path = PROMPT_DIR / f"{name}.txt"
    try:
        return template_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        logging.error(f"Error loading prompt template from {template_path}: {str(e)}")
        raise


async def build_entry(word: str, context) -> Entry:
    if context.openai is None:
        raise ConfigurationError("OpenAI client not initialized")

    logging.info(f"Building entry for word {word}")
    system = load_prompt_template("system_entry")
    prompt = load_prompt_template("build_entry").format(word=word)

    async def attempt() -> Entry:
        parsed = await call_openai_json(context, system, prompt)
        return parse_entry(parsed)

    settings = context.settings
    entry = await retry(attempt, max_retries=settings.retry_max_attempts, delay=settings.retry_initial_delay)

    if entry.word.lower() != word.lower():
        logging.warning(f"Model returned entry for '{entry.word}' when asked for '{word}'")

    return entry


async def call_openai_json(context, system: str, prompt: str) -> dict:
    try:
        logging.debug(f"Calling OpenAI model {context.settings.openai_model} with prompt: {prompt}")

        completion = await context.openai.chat.completions.create(
            model=context.settings.openai_model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": SCHEMA_NAME,
                    "schema": entry_json_schema(),
                },
            },
        )
    except Exception as e:
        logging.exception(f"Error calling OpenAI model: {str(e)}")
        raise

    text = completion.choices[0].message.content if completion.choices else None
    if not text:
        raise EmptyResponseError("No response from OpenAI")

    logging.debug(f"Received response from OpenAI: {text}")
    return json.loads(text)
