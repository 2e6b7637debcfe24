"""Roster Tracker package.

Attendance and performance tracking for a single class roster, organized by
feature modules (students, attendance, performance, ...) around one
``RosterStore`` that owns all state, with a thin Flask controller layer on top.
"""
