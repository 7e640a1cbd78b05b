"""Send a test event to the live capture endpoint."""

import asyncio
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eventcapture import ApiOptions, Client, Event, EventCaptureError, configure_logging, get_settings

logger = logging.getLogger("eventcapture.scripts.send_test_event")


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        options = await ApiOptions.auto(settings=settings)
    except EventCaptureError as e:
        logger.error(f"❌ Could not resolve API key: {e}")
        sys.exit(1)

    event = Event("user_logged_in", "distinct_id_user")
    event.insert_prop("key", "value")
    event.insert_prop_many([("key1", "value1"), ("key2", "value2")])
    event.set_timestamp(datetime.now(timezone.utc))

    logger.info(f"Sending {event.name} to {options.host}")
    async with Client(options, settings=settings) as client:
        try:
            await client.capture(event)
        except EventCaptureError as e:
            logger.error(f"❌ Failed to capture event: {e}")
            sys.exit(1)
    logger.info("✅ Event captured")


if __name__ == "__main__":
    asyncio.run(main())
