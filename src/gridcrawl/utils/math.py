def clamp(value: float, min_value: float, max_value: float) -> float:
    """Clamp a value between min_value and max_value inclusive."""
    return max(min_value, min(value, max_value))
