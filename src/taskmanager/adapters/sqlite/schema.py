"""SQLite schema definitions for the tasks store."""

CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL CHECK (length(title) BETWEEN 1 AND 200),
    description TEXT CHECK (description IS NULL OR length(description) <= 2000),
    status TEXT NOT NULL CHECK (status IN ('TODO', 'IN_PROGRESS', 'DONE')),
    due_date TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

CREATE_INDEX_TASKS_STATUS = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status)"
)
CREATE_INDEX_TASKS_DUE_DATE = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_due_date ON tasks(due_date)"
)
# Filter by status, then order by due date
CREATE_INDEX_TASKS_STATUS_DUE_DATE = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_status_due_date ON tasks(status, due_date)"
)

ALL_INDEXES = [
    CREATE_INDEX_TASKS_STATUS,
    CREATE_INDEX_TASKS_DUE_DATE,
    CREATE_INDEX_TASKS_STATUS_DUE_DATE,
]
