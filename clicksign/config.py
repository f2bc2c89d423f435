import os
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

DEFAULT_HOST = "https://app.clicksign.com/"
SANDBOX_HOST = "https://sandbox.clicksign.com/"


def get_clicksign_config() -> Dict[str, Any]:
    """Get Clicksign configuration from environment variables."""
    sandbox = os.getenv("CLICKSIGN_SANDBOX", "false").lower() == "true"
    timeout = os.getenv("CLICKSIGN_TIMEOUT")

    return {
        "access_token": os.getenv("CLICKSIGN_ACCESS_TOKEN"),
        "host": os.getenv("CLICKSIGN_HOST") or (SANDBOX_HOST if sandbox else None),
        "timeout": float(timeout) if timeout else None,
    }
