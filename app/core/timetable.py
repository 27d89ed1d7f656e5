"""Fixed calendar of the school week.

Days are numbered 1 (Monday) to 5 (Friday). Time slots are clock intervals
given as ``"HH:MM - HH:MM"`` strings; their position in ``TIME_SLOTS`` is the
order in which they appear in a day. Two of them are breaks: they can be
assigned, but the schedule grid does not offer them as lesson slots.
"""

DAYS = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
}

FIRST_DAY = min(DAYS)
LAST_DAY = max(DAYS)

TIME_SLOTS = (
    "07:30 - 08:20",
    "08:20 - 09:10",
    "09:10 - 09:30",
    "09:30 - 10:20",
    "10:20 - 11:10",
    "11:10 - 12:00",
    "13:30 - 14:20",
    "14:20 - 15:10",
    "15:10 - 15:30",
    "15:30 - 16:20",
    "16:20 - 17:10",
)

BREAK_SLOTS = frozenset({"09:10 - 09:30", "15:10 - 15:30"})

LESSON_SLOTS = tuple(slot for slot in TIME_SLOTS if slot not in BREAK_SLOTS)

DEFAULT_TIME_SLOT = TIME_SLOTS[0]

SUBJECT_ICONS = (
    "book-open",
    "calculator",
    "flask",
    "globe",
    "microscope",
    "palette",
    "music",
    "activity",
    "brain",
    "languages",
)

DEFAULT_SUBJECT_ICON = "book-open"

SUBJECT_COLORS = (
    "#3B82F6", "#EF4444", "#10B981", "#F59E0B",
    "#8B5CF6", "#F97316", "#06B6D4", "#EC4899",
    "#84CC16", "#6366F1", "#14B8A6", "#F43F5E",
)

DEFAULT_SUBJECT_COLOR = SUBJECT_COLORS[0]


def is_weekday(day: int) -> bool:
    return FIRST_DAY <= day <= LAST_DAY


def slot_position(time_slot: str) -> int:
    return TIME_SLOTS.index(time_slot)
