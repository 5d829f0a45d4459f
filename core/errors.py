# =============================================================================
# core/errors.py  —  Failure Types
# =============================================================================
#
# Everything that can go wrong between "the agent asked for a tool" and
# "Retool answered" is one of these.  Core code raises them; the dispatch
# adapter (core/dispatch.py) is the ONLY place that turns them into an
# error envelope.
#
#   RetoolError
#     ├── RetoolAPIError         → Retool answered with a non-2xx status
#     ├── RetoolConnectionError  → we never got an answer (DNS, timeout...)
#     ├── UnknownToolError       → no tool registered under that name
#     ├── ToolArgumentError      → arguments don't match the input schema
#     └── ConfigurationError     → bad environment settings
# =============================================================================


class RetoolError(Exception):
    """Base class for every failure reported back to the protocol host."""


class RetoolAPIError(RetoolError):
    """Retool returned a non-2xx response."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Retool API error ({status_code}): {body}")


class RetoolConnectionError(RetoolError):
    """The request never produced an HTTP response."""


class UnknownToolError(RetoolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolArgumentError(RetoolError):
    """Tool arguments failed validation against the tool's input schema."""


class ConfigurationError(RetoolError):
    """An environment setting (e.g. RETOOL_TIMEOUT_SECONDS) has an invalid value."""
