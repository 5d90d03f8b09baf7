"""
WebSwitch Client - Console Entry Point
Reads the configured temperature sensors once and prints the results
"""

import asyncio
import sys
import logging
import os
from functools import partial

from .config_loader import DEFAULT_CONFIG_PATH, load_config, setup_logging
from .device import WebSwitchClient
from .http_helper import create_webswitch_session

logger = logging.getLogger(__name__)

def build_client(config: dict) -> WebSwitchClient:
    """Create a client from the webswitch config section"""
    device = config['webswitch']
    return WebSwitchClient(
        device['base_url'],
        username=device.get('username'),
        password=device.get('password'),
        session_factory=partial(
            create_webswitch_session,
            device.get('timeout_seconds', 5),
            device.get('verify_ssl', True),
        ),
    )

async def main() -> int:
    """Main entry point"""
    try:
        config_path = os.environ.get('WEBSWITCH_CONFIG', DEFAULT_CONFIG_PATH)
        config = load_config(config_path)
        setup_logging(config)
        
        client = build_client(config)
        indices = config['sensors']['indices']
        logger.info(f"Reading sensors {indices} from {client.base_url}")
        
        sensors = await client.get_temperatures(indices)
        
        for sensor in sensors:
            print(sensor)
        
        if sensors.has_failures:
            print(f"Unable to read the sensors with the following requested indexes: {sensors.failed_indices_csv()}")
        
    except Exception as e:
        logger.debug("Temperature read failed", exc_info=True)
        print(f"Failed to retrieve temperature. Internal error: {e}")
        return 1
    
    return 0

def run() -> None:
    try:
        exit_code = asyncio.run(main())
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("\nStopped by user")
        sys.exit(0)

if __name__ == "__main__":
    run()
