"""WorkSleep core library: day scoring, week windows, task queue and session.

Public API re-exports for convenient imports:
    from worksleep import Session, SetCurrentDate, FinishedTopTask, ...
"""

# Workspace & configuration
from worksleep.workspace import (
    workspace_root,
    config_path,
    log_path,
    load_profile,
    get_user_timezone,
    today,
)

# File I/O
from worksleep.fileio import read_text, read_yaml

# Logging
from worksleep.logsetup import setup_logging

# Parsing
from worksleep.parsing import (
    parse_int,
    parse_quantity,
    parse_time_of_day,
    parse_bounded_int,
)

# Scoring
from worksleep.scoring import (
    work_points,
    sleep_points,
    round_score,
    calc_score,
    score_breakdown,
)

# Models
from worksleep.models import (
    Bedtime,
    WorkSleepGoals,
    WorkSleep,
    Period,
    NewTask,
    BedtimeInput,
    Profile,
    validate_goals,
)

# Store & queue
from worksleep.store import WorkSleepData
from worksleep.tasks import TaskQueue

# Session
from worksleep.session import (
    Session,
    SetCurrentDate,
    AddTask,
    NewTaskNameChanged,
    NewTaskQuantityChanged,
    AddNewTask,
    DeleteTask,
    MoveTaskToTop,
    MoveTaskUp,
    FinishedTopTask,
    SetBedtime,
    BedtimeTextChanged,
    BedtimeNextDayChanged,
    SubmitBedtime,
    ViewNextWeek,
    ViewPreviousWeek,
    SetWorkSleepBalance,
    SetTargetWorkCount,
    SetTargetBedtime,
    SetBedtimeHalflife,
)
