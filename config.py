"""
Configuration management for the Resto Assistant.

Loads environment variables from .env file and provides typed access to configuration.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for the Resto Assistant."""

    # HTTP listener
    PORT = int(os.getenv("PORT", "3000"))

    # Menu API (fixed host, not configurable)
    MENU_API_BASE_URL = "https://hydra.ugent.be/api/2.0/resto/menu"

    @classmethod
    def validate(cls) -> bool:
        """Validate that the listener port is usable."""
        if not 0 < cls.PORT < 65536:
            print(f"⚠️  Invalid PORT: {cls.PORT}")
            print(f"   Please set a port between 1 and 65535")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Port: {Config.PORT}")
    print(f"  Menu API: {Config.MENU_API_BASE_URL}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
