"""
Generic object utilities: deep merge and deep clone.
"""

from BotKit.objects.clone import deep_clone
from BotKit.objects.merge import deep_merge

__all__ = ["deep_clone", "deep_merge"]
