import os
from typing import Dict, Optional
from dotenv import load_dotenv
import pytz

from ..utils.exceptions import ConfigError

# Load environment variables
load_dotenv()

class Config:
    """Configuration class for the converter"""

    # Reference timezone for aware datetimes (the day in force there is converted)
    REFERENCE_TIMEZONE = os.getenv('JALALI_REFERENCE_TZ', 'Asia/Tehran')

    # Leap rule: '33' (33-year arithmetic cycle) or '2820' (Birashk)
    LEAP_RULE = os.getenv('JALALI_LEAP_RULE', '33').strip()

    # Logging
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'
    LOG_LEVEL = os.getenv('PERSIAN_CHRONO_LOG_LEVEL', 'WARNING')
    LOG_FILE = os.getenv('PERSIAN_CHRONO_LOG_FILE') or None
    LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
    LOG_BACKUP_COUNT = 3

    @classmethod
    def get_reference_timezone(cls, name: Optional[str] = None):
        """Resolve the reference timezone through pytz"""
        zone = name or cls.REFERENCE_TIMEZONE
        try:
            return pytz.timezone(zone)
        except pytz.UnknownTimeZoneError:
            raise ConfigError(f"Unknown reference timezone: {zone!r}")

    @classmethod
    def get_leap_rule(cls, name: Optional[str] = None):
        """Build the configured leap rule"""
        from ..core.leap import get_rule
        return get_rule(name or cls.LEAP_RULE)

    @classmethod
    def get_logging_config(cls) -> Dict:
        """Get logging configuration"""
        return {
            'level': cls.LOG_LEVEL,
            'format': cls.LOG_FORMAT,
            'datefmt': cls.LOG_DATEFMT,
            'file': cls.LOG_FILE,
            'max_bytes': cls.LOG_MAX_BYTES,
            'backup_count': cls.LOG_BACKUP_COUNT
        }
