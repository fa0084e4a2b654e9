import asyncio

import notion_service
import openai_service
from line_service import SUCCESS_MESSAGE, FAILURE_MESSAGE
from models import *
from utils import logging


def extract_word(event) -> str | None:
    if not isinstance(event, MessageEvent) or not isinstance(event.message, TextMessageContent):
        return None
    word = event.message.text.strip()
    return word or None


async def handle_events(events: list, context):
    logging.info(f"Dispatching {len(events)} events")
    # handle_event_safely never raises, so one bad event cannot cancel the others
    await asyncio.gather(*(handle_event_safely(event, context) for event in events))


async def handle_event_safely(event, context):
    try:
        word = extract_word(event)
        if word is None:
            logging.debug(f"Ignoring {event.type} event")
            return

        logging.info(f"Processing word: {word}")
        entry = await openai_service.build_entry(word, context)
        logging.info(f"Built entry for: {entry.word}")
        await notion_service.save_to_notion(entry, context)
        logging.info(f"Saved to Notion: {entry.word}")

        if context.line is not None and event.replyToken:
            await context.line.reply_text(event.replyToken, SUCCESS_MESSAGE.format(word=entry.word))
    except Exception as e:
        logging.exception(f"Error processing event: {str(e)}")
        if event.replyToken and context.line is not None:
            try:
                await context.line.reply_text(event.replyToken, FAILURE_MESSAGE)
            except Exception as reply_error:
                logging.error(f"Failed to send error reply: {str(reply_error)}")
