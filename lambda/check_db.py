import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from config import Settings, create_context
import notion_service
from utils import logging


async def run() -> int:
    context = create_context(Settings.from_env())
    logging.info(f"Checking Notion database {context.settings.notion_database_id}")

    problems = await notion_service.check_database(context)
    if problems:
        logging.error(f"Database does not match the expected schema ({len(problems)} problems)")
        return 1

    logging.info("Database schema OK")
    return 0


def main():
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
