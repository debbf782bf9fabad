"""
Printing-specific exceptions

Every failure of the template/PDF pipeline derives from PrintingError so
callers can catch the whole family with one except clause, while still being
able to tell the failure kinds apart.
"""


class PrintingError(Exception):
    """Base exception for all printing-related errors"""
    pass


class TemplateNotFoundError(PrintingError):
    """
    Raised when a logical template name cannot be resolved.

    Names that try to escape the template root are reported the same way.
    """
    pass


class ContextBindingError(PrintingError):
    """
    Raised when a template references a variable the context does not provide.

    Only raised when the resolver runs in strict mode.
    """
    pass


class RenderError(PrintingError):
    """
    Raised when HTML cannot be turned into a PDF.

    Wraps template compile failures, layout/serialization failures and
    referenced assets (images, stylesheets) that could not be fetched.
    """
    pass


class ReflectionAccessError(PrintingError):
    """
    Raised when a member of an object cannot be read while flattening it.

    The flattener recovers from it by omitting the member.
    """
    pass
