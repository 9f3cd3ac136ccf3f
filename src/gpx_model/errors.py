class MissingPointError(ValueError):
    """Raised when geometry is requested from a waypoint that has no position.

    This signals a bug in the calling code: waypoints must be filtered or
    validated before their geometry is derived.
    """

    def __init__(self, name: str | None = None):
        self.name = name
        if name:
            message = f"Waypoint {name!r} has no position"
        else:
            message = "Waypoint has no position"
        super().__init__(message)
