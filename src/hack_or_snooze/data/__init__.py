"""Data models for Hack or Snooze."""

from hack_or_snooze.data.models import NewStory, Story

__all__ = [
    "NewStory",
    "Story",
]
