'''
Runtime configuration for the Ticketing System.

Values are read from the environment, optionally seeded from a .env file.
'''
import os

from dotenv import load_dotenv
from fastapi import status
from pydantic import BaseModel

TRUTHY = {"1", "true", "yes", "on"}


class StatusPolicy(BaseModel):
    """Status codes for the user endpoints whose historical codes are questionable."""

    user_list: int
    user_update: int
    user_delete: int
    user_invalid_body: int
    user_invalid_id: int

    @classmethod
    def legacy(cls) -> "StatusPolicy":
        """Codes the service has always answered with."""
        return cls(
            user_list=status.HTTP_201_CREATED,
            user_update=status.HTTP_201_CREATED,
            user_delete=status.HTTP_201_CREATED,
            user_invalid_body=status.HTTP_201_CREATED,
            user_invalid_id=status.HTTP_502_BAD_GATEWAY,
        )

    @classmethod
    def corrected(cls) -> "StatusPolicy":
        return cls(
            user_list=status.HTTP_200_OK,
            user_update=status.HTTP_200_OK,
            user_delete=status.HTTP_200_OK,
            user_invalid_body=status.HTTP_400_BAD_REQUEST,
            user_invalid_id=status.HTTP_400_BAD_REQUEST,
        )


class Settings(BaseModel):

    title: str = "Ticketing System API"
    version: str = "1.0.0"
    host: str = "localhost"
    port: int = 8000
    log_level: str = "INFO"
    legacy_status_codes: bool = True

    @property
    def status_policy(self) -> StatusPolicy:
        if self.legacy_status_codes:
            return StatusPolicy.legacy()
        return StatusPolicy.corrected()

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from TICKETING_* environment variables.

        Returns:
            Settings with defaults for every variable that is not set.

        Raises:
            ValueError: if TICKETING_PORT is not an integer.
        """
        load_dotenv()
        defaults = cls()
        return cls(
            title=os.environ.get("TICKETING_TITLE", defaults.title),
            host=os.environ.get("TICKETING_HOST", defaults.host),
            port=int(os.environ.get("TICKETING_PORT", defaults.port)),
            log_level=os.environ.get("TICKETING_LOG_LEVEL", defaults.log_level),
            legacy_status_codes=os.environ.get(
                "TICKETING_LEGACY_STATUS_CODES", str(defaults.legacy_status_codes)
            ).strip().lower() in TRUTHY,
        )
