from pathlib import Path
from typing import override


class SourceNotFoundError(FileNotFoundError):
    """
    Raised when a configured source image is absent at every candidate path.

    This is the only recoverable failure: the generator logs it and moves on
    to the next spec. Anything else aborts the run.
    """

    def __init__(self, label: str, candidates: list[Path], download_hint: str):
        self.label: str = label
        self.candidates: list[Path] = candidates
        self.download_hint: str = download_hint
        super().__init__(f"{label} not found at {' or '.join(str(c) for c in candidates)}")

    @override
    def __str__(self):
        return f"SourceNotFound: {self.args[0]}"
