"""
Taskvoice Error Classes

Parsing never raises on malformed utterances; these are raised only when the
package itself is misconfigured.
"""


class TaskVoiceError(Exception):
    """Base class for taskvoice errors."""
    pass


class VocabularyError(TaskVoiceError):
    """Raised when the vocabulary YAML is missing or malformed."""
    pass


class ConfigurationError(TaskVoiceError):
    """Raised when environment configuration is invalid."""
    pass
