"""LeaveDesk - leave, permission and shift-swap request backend."""

__version__ = "1.0.0"
