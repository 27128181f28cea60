"""Fatal error types for a report run."""


class ReportError(Exception):
    """Base class for failures that abort a report run."""


class ConfigurationIncomplete(ReportError):
    """One or more required settings are absent."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            f"Configuration incomplete! Missing {len(self.missing)} required variables: "
            + ", ".join(self.missing)
        )


class FetchFailure(ReportError):
    """The records-store query failed (network, auth, or query error)."""


class DispatchFailure(ReportError):
    """The email transport failed or reported an error."""
