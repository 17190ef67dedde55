class CodeViewerError(Exception):
    """Base exception for code viewer errors."""


class UnknownPresetError(CodeViewerError):
    """Raised when a preset theme name is not recognised."""


class CodeViewerSettingsError(CodeViewerError):
    """Raised when a code viewer settings file cannot be loaded or saved."""
