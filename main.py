import argparse
import asyncio
import logging
from typing import Optional, List

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from connectors import CONNECTORS
from services.display import ConsolePresenter
from services.task import EarthquakeTask
from shared import config as settings

logging.getLogger('urllib3').setLevel(logging.WARNING)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show how strongly people felt an earthquake")
    parser.add_argument("--url", default=None, help="USGS query URL (default: configured USGS_REQUEST_URL)")
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None, presenter: Optional[ConsolePresenter] = None):
    args = parse_args(argv)
    logger = logging.getLogger(__name__)

    connector = CONNECTORS['usgs']({'request_url': args.url} if args.url else {})
    presenter = presenter or ConsolePresenter()

    # Perform the HTTP request on a background thread; update the UI when
    # the result is back on the loop thread
    task = EarthquakeTask(connector, on_result=presenter.update_ui)
    task.execute(connector.request_url)

    event = await task.wait()
    if event is None:
        logger.info("No earthquake found")
    return event


def run():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    asyncio.run(main())


if __name__ == "__main__":
    run()
