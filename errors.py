class MazeError(Exception):
    """Base exception for the maze solver."""
    pass


class InvalidMazeError(MazeError, ValueError):
    """Raised when a maze layout or maze file is malformed."""
    pass


class NoStartFound(MazeError, LookupError):
    """Raised when a solve is requested on a maze without a START room."""
    pass


class NoExitFound(MazeError, LookupError):
    """Raised when a solve is requested on a maze without an EXIT room."""
    pass


class RelaxationLimitExceeded(MazeError, RuntimeError):
    """Raised when the relaxation flood fill exceeds its step cap."""
    def __init__(self, message, steps=None):
        super().__init__(message)
        self.steps = steps
