import time


def get_current_timestamp() -> int:
    """Get current time as millisecond timestamp"""
    return int(time.time() * 1000)

def format_uptime(milliseconds: int) -> str:
    """Format a millisecond duration as HH:MM:SS"""
    seconds = max(milliseconds, 0) // 1000
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
