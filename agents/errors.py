"""
Error taxonomy for test-case generation, the library and export.

Every generation failure is one of the GenerationError subclasses below, so
callers can tell operator problems (configuration) from transient ones
(transport) and from bad model output (empty / schema violation).
"""


class GenerationError(Exception):
    """Base class for failed generation attempts. No partial results."""


class InvalidRequirementError(GenerationError, ValueError):
    """Requirement text or standards rejected before any request is made."""


class ConfigurationError(GenerationError):
    """The Gemini API key (or another required setting) is missing."""


class TransportError(GenerationError):
    """The Gemini call failed at the network or service level."""


class EmptyResponseError(GenerationError):
    """The call completed but returned no text payload."""


class SchemaViolationError(GenerationError):
    """The payload is not JSON or does not match the test-case schema."""


class GenerationInProgressError(GenerationError):
    """Another generation request is still in flight."""


class DuplicateTestCaseError(ValueError):
    """A test case id is already present in the library."""


class UnknownBatchError(KeyError):
    """No pending batch with the given id (accepted, discarded or expired)."""


class ExportError(Exception):
    """Pushing test cases to Jira failed. `created` holds keys of issues Jira did create."""

    def __init__(self, message, created=()):
        super().__init__(message)
        self.created = list(created)
