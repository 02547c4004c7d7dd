"""
Core Exceptions

Custom exceptions for the Volta designer engine.

Stale or unknown ids are not errors here: the mutation engine and session
treat them as no-ops. These exceptions cover caller programming errors only.
"""


class VoltaError(Exception):
    """Base class for designer engine errors."""

    def __init__(self, message: str = "Designer error"):
        self.message = message
        super().__init__(self.message)


class ComponentRegistrationError(VoltaError):
    """
    Raised when a component type is registered twice.

    Pass replace=True to ComponentRegistry.register() to overwrite on purpose.
    """


class LayoutTemplateNotFoundError(VoltaError):
    """Raised when a layout template id is not in the catalog."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Layout template '{template_id}' not found")


class SessionClosedError(VoltaError):
    """Raised when a closed DesignerSession is used."""

    def __init__(self, message: str = "Designer session is closed"):
        super().__init__(message)
