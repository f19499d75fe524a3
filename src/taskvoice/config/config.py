"""
Taskvoice Configuration

Centralized configuration for the parsing and scheduling core.
All settings can be overridden via environment variables.
"""
import os
from typing import Optional

from taskvoice.errors import ConfigurationError


class TaskVoiceConfig:
    """
    Central configuration for taskvoice.

    All settings have sensible defaults and can be overridden via environment variables.

    Example:
        >>> from taskvoice.config import config
        >>> print(config.WORK_START_HOUR)
        9

        # Override via environment:
        >>> os.environ["WORK_START_HOUR"] = "8"
        >>> config = TaskVoiceConfig.from_env()  # Reload
        >>> print(config.WORK_START_HOUR)
        8
    """

    def __init__(self):
        # ====================================================================
        # Debug Settings
        # ====================================================================

        self.DEBUG_NLP: bool = os.getenv("DEBUG_NLP", "0") == "1"
        """Enable debug logging for each parsing stage"""

        # ====================================================================
        # Logging Settings
        # ====================================================================

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""

        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")
        """Log format: 'json' (structured) or 'pretty' (readable)"""

        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
        """Optional: Write logs to file (e.g., '/var/log/taskvoice/core.log')"""

        self.LOG_PERFORMANCE_METRICS: bool = os.getenv(
            "LOG_PERFORMANCE_METRICS", "true").lower() == "true"
        """Record per-stage timings in the pipeline trace"""

        # ====================================================================
        # Temporal Settings
        # ====================================================================

        self.DEFAULT_TIMEZONE: Optional[str] = os.getenv("DEFAULT_TIMEZONE")
        """IANA timezone used by the REPL when none is given (e.g. 'America/New_York')"""

        # ====================================================================
        # Scheduling Settings
        # ====================================================================

        self.WORK_START_HOUR: int = int(os.getenv("WORK_START_HOUR", "9"))
        """First hour of the daily working window"""

        self.WORK_END_HOUR: int = int(os.getenv("WORK_END_HOUR", "17"))
        """Hour at which the daily working window closes"""

        self.SLOT_GRANULARITY_MINUTES: int = int(
            os.getenv("SLOT_GRANULARITY_MINUTES", "30"))
        """Step between candidate slot start times"""

        self.SCHEDULING_HORIZON_DAYS: int = int(
            os.getenv("SCHEDULING_HORIZON_DAYS", "14"))
        """Number of days (today included) searched for a free slot"""

        # ====================================================================
        # Fuzzy Matching Settings
        # ====================================================================

        self.FUZZY_THRESHOLD: int = int(os.getenv("FUZZY_THRESHOLD", "80"))
        """Minimum similarity score (0-100) for similar-task suggestions"""

    # ========================================================================
    # Helper Methods
    # ========================================================================

    @classmethod
    def from_env(cls):
        """
        Create config from environment variables.

        Returns:
            New TaskVoiceConfig instance with current environment values
        """
        return cls()

    def validate(self) -> None:
        """
        Check cross-field constraints.

        Raises:
            ConfigurationError: If any value is out of range
        """
        if not 0 <= self.WORK_START_HOUR <= 23:
            raise ConfigurationError(
                f"WORK_START_HOUR must be 0-23, got {self.WORK_START_HOUR}")
        if not 1 <= self.WORK_END_HOUR <= 24:
            raise ConfigurationError(
                f"WORK_END_HOUR must be 1-24, got {self.WORK_END_HOUR}")
        if self.WORK_START_HOUR >= self.WORK_END_HOUR:
            raise ConfigurationError(
                f"WORK_START_HOUR ({self.WORK_START_HOUR}) must be before "
                f"WORK_END_HOUR ({self.WORK_END_HOUR})")
        if self.SLOT_GRANULARITY_MINUTES <= 0:
            raise ConfigurationError(
                f"SLOT_GRANULARITY_MINUTES must be positive, got {self.SLOT_GRANULARITY_MINUTES}")
        if self.SCHEDULING_HORIZON_DAYS <= 0:
            raise ConfigurationError(
                f"SCHEDULING_HORIZON_DAYS must be positive, got {self.SCHEDULING_HORIZON_DAYS}")
        if not 0 <= self.FUZZY_THRESHOLD <= 100:
            raise ConfigurationError(
                f"FUZZY_THRESHOLD must be 0-100, got {self.FUZZY_THRESHOLD}")
        if self.LOG_FORMAT not in ("json", "pretty"):
            raise ConfigurationError(
                f"LOG_FORMAT must be 'json' or 'pretty', got {self.LOG_FORMAT!r}")

    def work_window(self):
        """Build the default WorkWindow from the scheduling settings."""
        from taskvoice.data_types import WorkWindow
        return WorkWindow(
            start_hour=self.WORK_START_HOUR,
            end_hour=self.WORK_END_HOUR,
            granularity_minutes=self.SLOT_GRANULARITY_MINUTES,
        )

    def summary(self) -> str:
        """
        Get configuration summary as formatted string.

        Returns:
            Multi-line string with all config values
        """
        from taskvoice.config.vocabulary import get_vocabulary_path
        lines = [
            "=" * 60,
            "Taskvoice Configuration",
            "=" * 60,
            "",
            "Debug:",
            f"  Debug Logging:      {'✅ Enabled' if self.DEBUG_NLP else '❌ Disabled'}",
            "",
            "Logging:",
            f"  Level:              {self.LOG_LEVEL}",
            f"  Format:             {self.LOG_FORMAT}",
            f"  File:               {self.LOG_FILE or 'None'}",
            f"  Performance Logs:   {'✅ Enabled' if self.LOG_PERFORMANCE_METRICS else '❌ Disabled'}",
            "",
            "Scheduling:",
            f"  Work Window:        {self.WORK_START_HOUR:02d}:00-{self.WORK_END_HOUR:02d}:00",
            f"  Granularity:        {self.SLOT_GRANULARITY_MINUTES} min",
            f"  Horizon:            {self.SCHEDULING_HORIZON_DAYS} days",
            "",
            "Matching:",
            f"  Fuzzy Threshold:    {self.FUZZY_THRESHOLD}",
            f"  Vocabulary:         {get_vocabulary_path()}",
            f"  Default Timezone:   {self.DEFAULT_TIMEZONE or 'None'}",
            "",
            "=" * 60,
        ]
        return "\n".join(lines)

    def __repr__(self):
        """String representation."""
        return (
            f"<TaskVoiceConfig window={self.WORK_START_HOUR}-{self.WORK_END_HOUR} "
            f"horizon={self.SCHEDULING_HORIZON_DAYS}>"
        )


# Global config instance
config = TaskVoiceConfig()
