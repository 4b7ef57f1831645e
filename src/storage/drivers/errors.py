class PathTraversalError(ValueError):
    """Raised when a resolved path would land outside the driver's base path."""

    def __init__(self, base_path: str, path: str):
        self.base_path = base_path
        self.path = path
        super().__init__(f"Path traversal attempt detected: {path} is not under {base_path}")
