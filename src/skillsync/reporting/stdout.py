"""Human-readable stdout reporter for sync results."""

from __future__ import annotations

from skillsync.constants.reporting import ANSI_DIM, ANSI_RESET, OUTCOME_COLORS, OUTCOME_MESSAGES
from skillsync.model import SyncResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a sync result for the terminal."""

    def __init__(self, result: SyncResult, *, color: bool = True, verbose: bool = False) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        result = self._result
        message = OUTCOME_MESSAGES[result.status]
        if self._color:
            message = _colorize(message, OUTCOME_COLORS[result.status])
        lines = [message]

        if self._verbose:
            lines.append(self._dim(f"base ref: {result.base_ref}"))
            for changed in result.changed_paths:
                lines.append(self._dim(f"  {changed.status}\t{changed.path}"))
            if result.reference_files:
                lines.append(self._dim(f"reference files: {len(result.reference_files)}"))

        if result.status == "drift" and result.rendered_block is not None:
            lines.append("")
            lines.append("Expected skill structure:")
            lines.append(result.rendered_block)

        return "\n".join(lines)

    def _dim(self, text: str) -> str:
        return _colorize(text, ANSI_DIM) if self._color else text
