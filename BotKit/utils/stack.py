"""
Call stack inspection.
"""

import inspect
from typing import List


def get_stack(context: int = 1) -> List[inspect.FrameInfo]:
    """
    Capture the current call stack.

    The frame of ``get_stack`` itself is left out, so the first entry
    describes the function that called it and the last entry the outermost
    frame.

    Args:
        context: Number of source lines to include around each frame's current line

    Returns:
        List[inspect.FrameInfo]: Frame descriptors, innermost first

    Example:
        >>> def where_am_i():
        ...     return get_stack()[0].function
        >>> where_am_i()
        'where_am_i'
    """
    frame = inspect.currentframe()
    try:
        return inspect.getouterframes(frame.f_back, context) if frame is not None else []
    finally:
        # Break the frame reference cycle
        del frame
