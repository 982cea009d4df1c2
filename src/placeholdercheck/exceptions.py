"""Fatal errors that abort a placeholder check run."""


class PlaceholderCheckError(Exception):
    """Base class for every error that stops a run."""


class LocaleDirectoryError(PlaceholderCheckError):
    """Raised when the locale directory cannot be listed."""


class SourceResolutionError(PlaceholderCheckError):
    """Raised when no usable source locale file exists in the directory."""

    def __init__(self, directory: str, candidates: list[str]) -> None:
        self.directory = directory
        self.candidates = list(candidates)
        if len(self.candidates) == 1:
            message = f'Source locale file "{self.candidates[0]}" not found in {directory}'
        else:
            probed = ", ".join(f'"{name}"' for name in self.candidates)
            message = f"No source locale file found in {directory} (tried {probed})"
        super().__init__(message)


class LocaleParseError(PlaceholderCheckError):
    """Raised when a locale file cannot be read or decoded as a JSON object."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to parse JSON for {filename}: {reason}")


class ConfigError(PlaceholderCheckError):
    """Raised when the YAML configuration file is malformed."""
