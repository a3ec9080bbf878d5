"""Human-readable formatting shared by the log, summary and console output."""


def format_duration(duration_ms: int) -> str:
    """Format a duration as '850ms', '12.3s' or '4m 5s'."""
    if duration_ms < 1000:
        return f"{duration_ms}ms"
    seconds = duration_ms / 1000
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, remainder = divmod(round(seconds), 60)
    return f"{minutes}m {remainder}s"
