"""Plain-data view of a dashboard session, for any renderer to consume."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from healthsync.core.simulations import BreathingState, HeartbeatReading


@dataclass
class DashboardView:
    insights: List[str]
    insight_time: str
    sleep_hours: float
    water_glasses: int
    water_goal: int
    steps_today: int
    hydration_progress: int
    checklist: Dict[str, bool]
    moods: List[str]
    recent_logs: List[str]
    steps_week: List[int] = field(default_factory=list)
    heartbeat: Optional[HeartbeatReading] = None
    breathing: Optional[BreathingState] = None
    water_reminders_on: bool = False

    @property
    def sleep_label(self) -> str:
        return f"{self.sleep_hours:g} hr"

    @property
    def water_label(self) -> str:
        return f"{self.water_glasses} / {self.water_goal}"

    def render_text(self) -> str:
        """A terminal rendering of the dashboard."""
        lines = [
            f"Sleep: {self.sleep_label}   Water: {self.water_label}   Steps: {self.steps_today}",
            f"Hydration challenge: {self.hydration_progress}%",
        ]
        if self.heartbeat:
            lines.append(f"Heart rate: {self.heartbeat.bpm} bpm")
        if self.breathing:
            lines.append(f"{self.breathing.phase} ({self.breathing.progress_text})")
        lines.append("")
        lines.append(f"Insights ({self.insight_time}):")
        lines.extend(f"  • {s}" for s in self.insights)
        lines.append("")
        lines.append("Checklist:")
        lines.extend(f"  [{'x' if done else ' '}] {item}" for item, done in self.checklist.items())
        lines.append("")
        lines.append("Mood log:")
        lines.extend(f"  {m}" for m in self.moods)
        lines.append("")
        lines.append("Recent activity:")
        lines.extend(f"  {r}" for r in self.recent_logs)
        return "\n".join(lines)
