from typing import Any, Optional, Tuple


def clicked_year(event: Any) -> Optional[int]:
    """Year of the point clicked on the releases chart, if any."""
    try:
        points = event["selection"]["points"]
    except (KeyError, TypeError):
        return None
    if not points:
        return None
    x = points[0].get("x")
    return int(x) if x is not None else None


def resolve_click(event: Any, last_clicked: Optional[int]) -> Tuple[Optional[int], Optional[int]]:
    """
    Returns (year to select, click to remember). A chart keeps reporting
    its last selection on every rerun, so a year is only selected when the
    click differs from the one already handled. An empty selection forgets
    the handled click so the same point can be picked again.
    """
    year = clicked_year(event)
    if year is None:
        return None, None
    if year == last_clicked:
        return None, last_clicked
    return year, year
