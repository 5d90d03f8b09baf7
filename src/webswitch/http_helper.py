# HTTP Helper for WebSwitch Connections
# Session configuration for short-lived connections to local WebSwitch controllers

import aiohttp
import logging

logger = logging.getLogger(__name__)

def create_webswitch_session(timeout_seconds: float = 5, verify_ssl: bool = True) -> aiohttp.ClientSession:
    """
    Create properly configured aiohttp session for a WebSwitch controller
    One session per request; connections are closed with the session
    """
    if not verify_ssl:
        logger.warning("SSL verification disabled for WebSwitch session")

    connector = aiohttp.TCPConnector(
        limit_per_host=2,           # The controller serves few parallel clients
        ssl=verify_ssl,               # False skips certificate checks for https
        force_close=True,           # Force connection cleanup
        enable_cleanup_closed=True  # Additional cleanup
    )
    
    return aiohttp.ClientSession(
        connector=connector,
        timeout=aiohttp.ClientTimeout(total=timeout_seconds)
    )
