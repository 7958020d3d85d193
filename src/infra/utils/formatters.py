def format_bytes(bytes_size: int | float) -> str:
    if bytes_size < 0:
        raise ValueError("Bytes size must be non-negative")

    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if bytes_size < 1024.0:
            return f"{bytes_size:.2f} {unit}"

        bytes_size /= 1024.0

    return f"{bytes_size:.2f} PB"


def format_time(elapsed_seconds: float) -> str:
    days, remainder = divmod(elapsed_seconds, 86_400)
    hours, remainder = divmod(remainder, 3_600)
    minutes, seconds = divmod(remainder, 60)

    return f"{int(days):02d}d {int(hours):02d}h {int(minutes):02d}m {seconds:05.2f}s"


def format_milliseconds(milliseconds: int) -> str:
    if milliseconds < 0:
        raise ValueError("Milliseconds must be non-negative")

    if milliseconds < 1_000:
        return f"{milliseconds}ms"

    return f"{milliseconds / 1_000:.2f}s"
