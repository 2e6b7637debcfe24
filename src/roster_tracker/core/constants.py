"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ROLL_NO_MAX_LENGTH = 10
AT_RISK_THRESHOLD = 75

STUDENTS_KEY = "students"
ATTENDANCE_KEY = "attendanceLogs"
PERFORMANCE_KEY = "performanceLogs"
