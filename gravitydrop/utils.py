"""Utility helpers for unit conversions."""


def altitude_to_display(meters) -> str:
    if meters is None:
        return "N/A"
    return f"{meters * 100:.1f} cm"


def distance_to_display(dist_meters: float) -> str:
    if dist_meters == 0:
        return "0 m"
    if abs(dist_meters) >= 1e6:
        return f"{dist_meters/1e6:.2f} Mm"
    if abs(dist_meters) >= 1e3:
        return f"{dist_meters/1e3:.2f} km"
    if abs(dist_meters) >= 1:
        return f"{dist_meters:.1f} m"
    return f"{dist_meters * 100:.1f} cm"


def speed_to_display(speed) -> str:
    if speed is None:
        return "N/A"
    return f"{speed:.1f} m/s"


def force_to_display(newtons) -> str:
    if newtons is None:
        return "N/A"
    return f"{newtons:.2e} N"


def zoom_to_display(zoom: float) -> str:
    return f"{zoom:.2e}"
