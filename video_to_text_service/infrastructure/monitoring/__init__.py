from .json_monitor_adapter import JsonErrorMonitorAdapter

__all__ = ["JsonErrorMonitorAdapter"]
