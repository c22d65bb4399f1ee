"""MoodLens services.

- mood_service: deterministic journal mood classification, crisis
  detection and trend analysis. Pure core, no storage or network access;
  callers persist results and deliver safety alerts.
"""
