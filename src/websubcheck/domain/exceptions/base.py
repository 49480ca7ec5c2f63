"""Base exceptions for websubcheck domain."""


class WebSubCheckError(Exception):
    """Root exception for all websubcheck errors.

    All domain exceptions inherit from this.
    Allows catching all websubcheck-specific errors.

    Contract violations found in a declaration are diagnostics, never
    exceptions; exceptions signal malformed input or misuse.
    """
