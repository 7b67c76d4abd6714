"""
Session history for a color mixer session.

Records every mutation and copy a ColorState goes through:
- Channel changes (slider input)
- Preset applications
- Copies, successful and failed
- Resets

and renders the same kind of plain-text report a test run leaves behind.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class EventKind(Enum):
    CHANNEL = "channel"
    PRESET = "preset"
    COPY = "copy"
    COPY_FAILED = "copy_failed"
    RESET = "reset"


@dataclass
class ColorEvent:
    """A single recorded state change or copy."""
    kind: EventKind
    description: str
    hex_value: str
    detail: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "description": self.description,
            "hex": self.hex_value,
            "detail": self.detail,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class SessionLog:
    """
    Captures everything a ColorState does during a session.

    Usage:
        log = SessionLog()
        state = ColorState(log=log)

        # ... drive the state ...

        log.save_report("mixer_report.txt")
    """
    events: List[ColorEvent] = field(default_factory=list)

    def record(
        self,
        kind: EventKind,
        description: str,
        hex_value: str,
        detail: Optional[str] = None,
    ) -> ColorEvent:
        event = ColorEvent(kind=kind, description=description, hex_value=hex_value, detail=detail)
        self.events.append(event)
        return event

    def of_kind(self, kind: EventKind) -> List[ColorEvent]:
        return [e for e in self.events if e.kind == kind]

    @property
    def copies(self) -> List[ColorEvent]:
        return self.of_kind(EventKind.COPY)

    @property
    def copy_failures(self) -> List[ColorEvent]:
        return self.of_kind(EventKind.COPY_FAILED)

    @property
    def last_hex(self) -> Optional[str]:
        return self.events[-1].hex_value if self.events else None

    def summary(self) -> Dict[str, Any]:
        """Generate summary statistics."""
        return {
            "events": len(self.events),
            "channel_changes": len(self.of_kind(EventKind.CHANNEL)),
            "presets_applied": len(self.of_kind(EventKind.PRESET)),
            "copies": len(self.copies),
            "copy_failures": len(self.copy_failures),
            "resets": len(self.of_kind(EventKind.RESET)),
            "final_hex": self.last_hex,
        }

    def generate_report(self) -> str:
        """Generate a detailed text report."""
        lines = [
            "=" * 60,
            "COLOR MIXER SESSION REPORT",
            "=" * 60,
            "",
            f"Generated: {datetime.now().isoformat()}",
            "",
        ]

        s = self.summary()
        lines.extend([
            f"Events: {s['events']}",
            f"Channel Changes: {s['channel_changes']}",
            f"Presets Applied: {s['presets_applied']}",
            f"Copies: {s['copies']} ({s['copy_failures']} failed)",
            f"Final Color: {s['final_hex'] or 'n/a'}",
            "",
        ])

        if self.copy_failures:
            lines.extend([
                "--- CLIPBOARD FAILURES ---",
                *[f"  - {e.description}: {e.detail or 'unknown'}" for e in self.copy_failures],
                "",
            ])

        if self.events:
            lines.append("--- TIMELINE ---")
            for e in self.events[-100:]:
                lines.append(
                    f"  {e.timestamp.strftime('%H:%M:%S.%f')[:-3]} "
                    f"[{e.kind.value.upper()}] {e.description} -> {e.hex_value}"
                )
            lines.append("")

        return "\n".join(lines)

    def save_report(self, filepath: str):
        """Save report to file."""
        report = self.generate_report()
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w") as f:
            f.write(report)

    def reset(self):
        """Clear all captured events."""
        self.events.clear()
