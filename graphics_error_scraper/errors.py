# errors.py
from .constants import EXIT_FAILURE, EXIT_OUTPUT_EXISTS, EXIT_NAVIGATION

class ScraperError(Exception):
    exit_code = EXIT_FAILURE

class OutputExistsError(ScraperError):
    exit_code = EXIT_OUTPUT_EXISTS

    def __init__(self, path: str):
        super().__init__(f"Output file '{path}' already exists. Use --force or -f to overwrite.")
        self.path = path

class NavigationFrameNotFound(ScraperError):
    exit_code = EXIT_NAVIGATION

    def __init__(self):
        super().__init__("Navigation frame not found. Possibly invalid credentials.")

class ScrapeTimeout(ScraperError):
    exit_code = EXIT_FAILURE

    def __init__(self, step: str, timeout_ms: float):
        super().__init__(f"Timed out after {timeout_ms:g} ms during {step}")
        self.step = step
        self.timeout_ms = timeout_ms
