#!/usr/bin/env python3
"""WorkSleep TUI — daily work/sleep score tracker powered by Textual."""

from __future__ import annotations

import argparse
import sys
from datetime import date, timedelta

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Checkbox,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Static,
)

from worksleep import (
    AddNewTask,
    BedtimeNextDayChanged,
    BedtimeTextChanged,
    DeleteTask,
    FinishedTopTask,
    MoveTaskToTop,
    MoveTaskUp,
    NewTaskNameChanged,
    NewTaskQuantityChanged,
    Session,
    SetBedtimeHalflife,
    SetCurrentDate,
    SetTargetBedtime,
    SetTargetWorkCount,
    SetWorkSleepBalance,
    SubmitBedtime,
    ViewNextWeek,
    ViewPreviousWeek,
    load_profile,
    setup_logging,
    today,
    workspace_root,
)


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#main-layout {
    height: 1fr;
}

#left-pane {
    width: 3fr;
    min-width: 40;
    border-right: tall $primary-background-darken-2;
    padding: 0 1;
}

#right-pane {
    width: 2fr;
    min-width: 30;
    padding: 0 1;
}

.section-title {
    text-style: bold;
    color: $text;
    margin: 1 0 0 0;
    padding: 0 1;
}

#week-table {
    height: auto;
    max-height: 12;
}

#task-table {
    height: auto;
    max-height: 14;
}

#breakdown {
    height: auto;
    padding: 0 1;
    color: $text-muted;
}

.form-row {
    height: auto;
}

.form-row Input {
    width: 1fr;
}

.form-row Checkbox {
    width: auto;
}

#status-bar {
    dock: bottom;
    height: 1;
    background: $primary-background;
    color: $text-muted;
    padding: 0 2;
}
"""


# ── App ────────────────────────────────────────────────────────


class WorkSleepApp(App):
    """Week of scores on the left, task queue and inputs on the right."""

    CSS = CSS
    TITLE = "WorkSleep"

    BINDINGS = [
        Binding("d", "finish_task", "Done!"),
        Binding("x", "delete_task", "Delete"),
        Binding("u", "move_task_up", "Move up"),
        Binding("g", "move_task_to_top", "To top"),
        Binding("left_square_bracket", "previous_week", "Prev week"),
        Binding("right_square_bracket", "next_week", "Next week"),
        Binding("comma", "previous_day", "Prev day"),
        Binding("full_stop", "next_day", "Next day"),
        Binding("t", "go_today", "Today"),
        Binding("escape", "blur_focus", "Back"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, session: Session, today_date: date | None = None) -> None:
        super().__init__()
        self.session = session
        self._home_date = today_date or session.current_date
        self._task_ids: list[str] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(
            VerticalScroll(
                Label("Week", classes="section-title"),
                DataTable(id="week-table", cursor_type="row", zebra_stripes=True),
                Label("Score", classes="section-title"),
                Static(id="breakdown"),
                Label("Bedtime", classes="section-title"),
                Horizontal(
                    Input(placeholder="HH:MM", id="bedtime"),
                    Checkbox("Next day", id="bedtime-next-day"),
                    classes="form-row",
                ),
                Label("Goals (enter to apply)", classes="section-title"),
                Horizontal(
                    Input(placeholder="work points 0-100", id="goal-balance"),
                    Input(placeholder="target work count", id="goal-count"),
                    classes="form-row",
                ),
                Horizontal(
                    Input(placeholder="target bedtime HH:MM", id="goal-bedtime"),
                    Checkbox("Next day", id="goal-bedtime-next-day"),
                    Input(placeholder="half-life (min)", id="goal-halflife"),
                    classes="form-row",
                ),
                id="left-pane",
            ),
            Vertical(
                Label("Tasks", classes="section-title"),
                DataTable(id="task-table", cursor_type="row"),
                Horizontal(
                    Input(placeholder="Name of task", id="task-name"),
                    Input(value="1", placeholder="Quantity", id="task-qty"),
                    classes="form-row",
                ),
                id="right-pane",
            ),
            id="main-layout",
        )
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#week-table", DataTable).add_columns("Date", "Work", "Bedtime", "Score")
        self.query_one("#task-table", DataTable).add_columns("", "Task")
        self.refresh_view()
        self.query_one("#week-table", DataTable).focus()

    # ── Rendering ──────────────────────────────────────────────

    def refresh_view(self) -> None:
        """Re-query the session and redraw every panel."""
        session = self.session

        week_table = self.query_one("#week-table", DataTable)
        week_table.clear()
        cursor_row = 0
        for i, (day, record) in enumerate(session.week()):
            label = day.isoformat()
            if day == session.current_date:
                label = f"▶ {label}"
                cursor_row = i
            if record is None:
                week_table.add_row(label, "", "No data", "", key=day.isoformat())
                continue
            bedtime = record.actual_bedtime.to_str() if record.actual_bedtime else "No bedtime data"
            week_table.add_row(
                label, str(record.actual_work_count), bedtime, str(record.calc_score()),
                key=day.isoformat(),
            )
        week_table.move_cursor(row=cursor_row)

        task_table = self.query_one("#task-table", DataTable)
        task_table.clear()
        self._task_ids = []
        for i, period in enumerate(session.tasks()):
            task_table.add_row("▶" if i == 0 else "", period.name, key=period.id)
            self._task_ids.append(period.id)

        self._fill_goal_inputs()
        self.query_one("#breakdown", Static).update(session.score_breakdown())
        self.query_one("#status-bar", Static).update(
            f"Open day: {session.current_date.isoformat()} | "
            f"Week from {session.data.week_start.isoformat()} | "
            f"{len(self._task_ids)} task(s) queued"
        )

    def _fill_goal_inputs(self) -> None:
        # Rejected goal text is replaced by the value actually in force.
        goals = self.session.goals
        self.query_one("#goal-balance", Input).value = str(goals.work_sleep_balance)
        self.query_one("#goal-count", Input).value = str(goals.target_work_count)
        self.query_one("#goal-bedtime", Input).value = goals.target_bedtime.time.strftime("%H:%M")
        self.query_one("#goal-bedtime-next-day", Checkbox).value = goals.target_bedtime.next_day
        self.query_one("#goal-halflife", Input).value = str(goals.bedtime_pts_halflife)

    def apply_command(self, command: object) -> None:
        self.session.handle(command)
        self.refresh_view()

    def _selected_task_id(self) -> str | None:
        table = self.query_one("#task-table", DataTable)
        if not self._task_ids:
            return None
        row = table.cursor_row
        if row < 0 or row >= len(self._task_ids):
            return None
        return self._task_ids[row]

    # ── Events ─────────────────────────────────────────────────

    @on(DataTable.RowSelected, "#week-table")
    def _on_day_selected(self, event: DataTable.RowSelected) -> None:
        self.apply_command(SetCurrentDate(date.fromisoformat(str(event.row_key.value))))

    @on(Input.Changed, "#task-name")
    def _on_task_name(self, event: Input.Changed) -> None:
        self.session.handle(NewTaskNameChanged(event.value))

    @on(Input.Changed, "#task-qty")
    def _on_task_qty(self, event: Input.Changed) -> None:
        self.session.handle(NewTaskQuantityChanged(event.value))

    @on(Input.Submitted, "#task-name")
    @on(Input.Submitted, "#task-qty")
    def _on_task_submit(self, event: Input.Submitted) -> None:
        self.apply_command(AddNewTask())
        self.query_one("#task-name", Input).value = ""

    @on(Input.Changed, "#bedtime")
    def _on_bedtime_text(self, event: Input.Changed) -> None:
        self.session.handle(BedtimeTextChanged(event.value))

    @on(Checkbox.Changed, "#bedtime-next-day")
    def _on_bedtime_next_day(self, event: Checkbox.Changed) -> None:
        self.session.handle(BedtimeNextDayChanged(event.value))

    @on(Input.Submitted, "#bedtime")
    def _on_bedtime_submit(self, event: Input.Submitted) -> None:
        self.apply_command(SubmitBedtime())

    @on(Input.Submitted, "#goal-balance")
    def _on_goal_balance(self, event: Input.Submitted) -> None:
        self.apply_command(SetWorkSleepBalance(event.value))

    @on(Input.Submitted, "#goal-count")
    def _on_goal_count(self, event: Input.Submitted) -> None:
        self.apply_command(SetTargetWorkCount(event.value))

    @on(Input.Submitted, "#goal-bedtime")
    def _on_goal_bedtime(self, event: Input.Submitted) -> None:
        next_day = self.query_one("#goal-bedtime-next-day", Checkbox).value
        self.apply_command(SetTargetBedtime(event.value, next_day))

    @on(Input.Submitted, "#goal-halflife")
    def _on_goal_halflife(self, event: Input.Submitted) -> None:
        self.apply_command(SetBedtimeHalflife(event.value))

    # ── Actions ────────────────────────────────────────────────

    def action_finish_task(self) -> None:
        self.apply_command(FinishedTopTask())

    def action_delete_task(self) -> None:
        task_id = self._selected_task_id()
        if task_id:
            self.apply_command(DeleteTask(task_id))

    def action_move_task_up(self) -> None:
        task_id = self._selected_task_id()
        if task_id:
            self.apply_command(MoveTaskUp(task_id))

    def action_move_task_to_top(self) -> None:
        task_id = self._selected_task_id()
        if task_id:
            self.apply_command(MoveTaskToTop(task_id))

    def action_previous_week(self) -> None:
        self.apply_command(ViewPreviousWeek())

    def action_next_week(self) -> None:
        self.apply_command(ViewNextWeek())

    def action_previous_day(self) -> None:
        self.apply_command(SetCurrentDate(self.session.current_date - timedelta(days=1)))

    def action_next_day(self) -> None:
        self.apply_command(SetCurrentDate(self.session.current_date + timedelta(days=1)))

    def action_go_today(self) -> None:
        self.apply_command(SetCurrentDate(self._home_date))

    def action_blur_focus(self) -> None:
        self.query_one("#week-table", DataTable).focus()


# ── Entry point ────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="WorkSleep daily score tracker")
    ap.add_argument("--date", type=date.fromisoformat, help="Open this day instead of today (YYYY-MM-DD)")
    ap.add_argument("--log-level", help="File log level (DEBUG, INFO, WARNING, ERROR); overrides config.yaml")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    root = workspace_root()
    try:
        profile = load_profile(root)
    except ValueError as e:
        print(f"Invalid config: {e}")
        print(f"Fix {root / 'config.yaml'} or unset WORKSLEEP_ROOT.")
        sys.exit(1)

    setup_logging(args.log_level or profile.log_level, root)
    current = today(profile)
    session = Session.from_profile(profile, current)
    if args.date:
        session.handle(SetCurrentDate(args.date))

    app = WorkSleepApp(session, today_date=current)
    app.run()


if __name__ == "__main__":
    main()
